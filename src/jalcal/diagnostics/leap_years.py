#!/usr/bin/env python3
"""
Cross-check the two ways of deciding whether Esfand has 30 days.

  span     : 1 Farvardin Y -> 1 Farvardin Y+1 is 366 days
  overflow : 30 Esfand Y round-trips to something other than 1 Farvardin Y+1

Any disagreement means the epoch anchors of the converters are off by a day.
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from jalcal.engines.month_length import esfand_overflows, is_leap


def compare(start_year: int, end_year: int) -> Tuple[List[int], List[int]]:
    """Return (leap years, years where the two checks disagree)."""
    leaps: List[int] = []
    bad: List[int] = []
    for Y in range(start_year, end_year + 1):
        span_leap = is_leap(Y)
        overflow_leap = not esfand_overflows(Y)
        if span_leap != overflow_leap:
            bad.append(Y)
        if span_leap:
            leaps.append(Y)
    return leaps, bad


def gaps(leaps: List[int]) -> List[int]:
    return [b - a for a, b in zip(leaps, leaps[1:])]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-year consistency check for the Jalali converters.")
    p.add_argument("--start-year", type=int, default=1300)
    p.add_argument("--end-year", type=int, default=1500)
    p.add_argument("--show", action="store_true", help="List every leap year and the gaps between them.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    leaps, bad = compare(args.start_year, args.end_year)
    n = args.end_year - args.start_year + 1
    print(f"Years checked: {n}   leap: {len(leaps)}   disagreements: {len(bad)}")

    if args.show:
        print("Leap years:", ", ".join(str(y) for y in leaps))
        print("Gaps:      ", " ".join(str(g) for g in gaps(leaps)))

    if bad:
        print("Span and overflow checks disagree for:", ", ".join(str(y) for y in bad))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
