from __future__ import annotations

from datetime import date
import argparse

import jalcal
from jalcal.locale import weekday_names
from jalcal.core.time import weekday_sun0


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Nowruz (1 Farvardin) Gregorian dates, weekdays and Esfand lengths."
    )
    p.add_argument("--from-year", type=int, default=1390)
    p.add_argument("--to-year", type=int, default=1420)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Nowruz column (default: iso).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    # Sunday-first so the native weekday indexes it directly
    names = weekday_names("en", 0)

    headers = ["Year", "Nowruz", "Weekday", "Esfand", "Days"]
    colw = [5, 10, 7, 6, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    leaps: list[int] = []
    for Y in range(Y0, Y1 + 1):
        d = jalcal.new_year_day(Y)
        esfand = jalcal.month_length(Y, 12)
        n = jalcal.days_in_year(Y)
        if n == 366:
            leaps.append(Y)
        row = [str(Y), fmt(d), names[weekday_sun0(d)], str(esfand), str(n)]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    print(f"\nLeap years in {Y0}..{Y1}:")
    print(", ".join(str(y) for y in leaps) if leaps else "(none)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
