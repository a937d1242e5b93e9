#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

import jalcal
from jalcal.ephemeris.equinox import SkyfieldEquinoxes, nowruz_for_equinox

# Jalali year Y begins in March of Gregorian year Y + 621
GREGORIAN_OFFSET = 621


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Compare arithmetic Nowruz dates with the astronomical (equinox before noon) rule."
    )
    p.add_argument("--start-year", type=int, default=1280, help="First Jalali year (de421 covers 1900-2050 CE)")
    p.add_argument("--end-year", type=int, default=1429)
    p.add_argument("--ephemeris", default="de421.bsp")
    p.add_argument("--all", action="store_true", help="Print every year, not only mismatches.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    print(f"Loading {args.ephemeris} ...")
    eq = SkyfieldEquinoxes.load(args.ephemeris)

    mismatches = 0
    for jy in range(args.start_year, args.end_year + 1):
        gy = jy + GREGORIAN_OFFSET
        equinox = eq.march_equinox(gy)
        astro = nowruz_for_equinox(equinox)
        arith = jalcal.new_year_day(jy)
        ok = astro == arith
        if not ok:
            mismatches += 1
        if args.all or not ok:
            tag = "ok " if ok else "DIFF"
            print(f"[{tag}] {jy}: arithmetic={arith}  astronomical={astro}  equinox={equinox:%Y-%m-%d %H:%M} UTC")

    n = args.end_year - args.start_year + 1
    print(f"\n{n - mismatches}/{n} years agree.")
    return 0 if mismatches == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
