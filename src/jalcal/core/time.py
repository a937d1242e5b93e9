from __future__ import annotations
from datetime import date, datetime


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)

def weekday_sun0(d: date) -> int:
    """Weekday with 0=Sunday .. 6=Saturday (JDN 0 was a Monday)."""
    return (to_jdn(d) + 1) % 7

def local_today(now: datetime | None = None) -> date:
    """
    Today's civil date in the local time zone.

    An aware `now` is first shifted to local time, so a UTC timestamp taken
    just before midnight still lands on the local calendar day.
    """
    if now is None:
        now = datetime.now()
    elif now.tzinfo is not None:
        now = now.astimezone()
    return now.date()

def parse_iso(s: str) -> date:
    """Strict YYYY-MM-DD parser (zero padded)."""
    y, m, d = s.split("-")
    if len(y) != 4 or len(m) != 2 or len(d) != 2:
        raise ValueError(f"Not a zero-padded YYYY-MM-DD date: {s!r}")
    return date(int(y), int(m), int(d))
