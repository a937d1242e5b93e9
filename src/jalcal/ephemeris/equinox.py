#ephemeris/equinox.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from . import require_ephemeris

# Iran Standard Time; its meridian (52.5 E) is the reference for Nowruz
IRST = timezone(timedelta(hours=3, minutes=30))
NOON = time(12, 0)


def nowruz_for_equinox(equinox_utc: datetime) -> date:
    """
    Civil date of Nowruz for a March equinox instant.

    Nowruz is the day of the equinox when it falls before noon on the
    52.5 E meridian, otherwise the following day.
    """
    if equinox_utc.tzinfo is None:
        raise ValueError("equinox_utc must be timezone-aware")
    local = equinox_utc.astimezone(IRST)
    d = local.date()
    if local.time() >= NOON:
        d += timedelta(days=1)
    return d


@dataclass
class SkyfieldEquinoxes:
    """
    March equinox instants from a JPL ephemeris via skyfield.

    Requires optional deps:
      pip install "jalcal[ephemeris]"
    The ephemeris file (de421.bsp by default) is downloaded on first use.
    """
    ts: object
    eph: object

    @classmethod
    def load(cls, ephemeris: str = "de421.bsp") -> "SkyfieldEquinoxes":
        require_ephemeris()
        from skyfield.api import load  # type: ignore

        return cls(ts=load.timescale(), eph=load(ephemeris))

    def march_equinox(self, gy: int) -> datetime:
        from skyfield import almanac  # type: ignore

        t0 = self.ts.utc(gy, 3, 1)
        t1 = self.ts.utc(gy, 4, 1)
        times, events = almanac.find_discrete(t0, t1, almanac.seasons(self.eph))
        for t, ev in zip(times, events):
            if int(ev) == 0:
                return t.utc_datetime()
        raise RuntimeError(f"No March equinox found in {gy}")
