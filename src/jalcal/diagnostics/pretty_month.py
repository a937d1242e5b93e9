from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import jalcal
from jalcal.locale import SATURDAY, month_name, weekday_names


def dow_header(lang: str = "en") -> str:
    return " ".join(w[:6].ljust(6) for w in weekday_names(lang, SATURDAY))


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]], lang: str = "en") -> None:
    print(title)
    print(dow_header(lang))
    print("-" * len(dow_header(lang)))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def _rows(pad: int, cells: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(pad)]
    for c in cells:
        wk.append(c)
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def jalali_month_calendar(jy: int, jm: int, lang: str = "en") -> None:
    grid = jalcal.month_grid(jy, jm)
    pad = sum(1 for c in grid if c.is_blank)
    cells = [cell(f"{c.day_number:2d}", c.iso_date[5:]) for c in grid if not c.is_blank]

    d0 = jalcal.first_day_of_month(jy, jm)
    d1 = jalcal.last_day_of_month(jy, jm)
    title = f"Jalali month  {month_name(jm, lang)} {jy}   ({d0} .. {d1})"
    print_grid(title, _rows(pad, cells), lang)


def gregorian_month_calendar(gy: int, gm: int, lang: str = "en") -> None:
    first = date(gy, gm, 1)
    last_day = pycal.monthrange(gy, gm)[1]

    cells = []
    d = first
    while d.month == gm:
        j = jalcal.jalali_from_date(d)
        cells.append(cell(f"{d.day:2d}", f"{j.month:02d}-{j.day:02d}"))
        d += timedelta(days=1)
    assert len(cells) == last_day

    # Python weekday(): Monday=0; shift to Saturday-first columns
    pad = (first.weekday() + 2) % 7
    title = f"Gregorian month  {gy}-{gm:02d}"
    print_grid(title, _rows(pad, cells), lang)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Jalali-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--jalali", nargs=2, type=int, metavar=("JY", "JM"),
                   help="Jalali month to print: JY JM (e.g. 1403 1)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2024 3)")
    p.add_argument("--lang", default="en", choices=["en", "fa"])
    args = p.parse_args(argv)

    if not args.jalali and not args.greg:
        # sensible default demo
        jalali_month_calendar(1403, 1, args.lang)
        gregorian_month_calendar(2024, 3, args.lang)
        return 0

    if args.jalali:
        jy, jm = args.jalali
        jalali_month_calendar(jy, jm, args.lang)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy, gm, args.lang)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
