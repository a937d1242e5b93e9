from __future__ import annotations
from datetime import date, timedelta

from jalcal.engines.arithmetic import LATE_ANCHOR, j2g
from jalcal.engines.month_length import month_length

from .errors import CalendarRangeError

# The converters are exact inverses only on the late anchor (Jalali 980 on).
# The early anchor does not line up with the Gregorian 400/100/4-year cycles.
MIN_JALALI_YEAR = LATE_ANCHOR[1] + 1
# 1 Farvardin 980
MIN_GREGORIAN = date(1601, 3, 21)
# Last Jalali year whose Esfand still ends inside datetime.date's range
MAX_JALALI_YEAR = 9377
# 29 or 30 Esfand 9377
MAX_GREGORIAN = j2g(MAX_JALALI_YEAR + 1, 1, 1).to_date() - timedelta(days=1)


def check_month(month: int) -> None:
    if not isinstance(month, int) or not 1 <= month <= 12:
        raise CalendarRangeError(f"month must be an integer in 1..12, got {month!r}")


def check_gregorian(year: int, month: int, day: int) -> date:
    check_month(month)
    try:
        d = date(year, month, day)
    except (TypeError, ValueError) as e:
        raise CalendarRangeError(f"Invalid Gregorian date {year}-{month}-{day}: {e}") from e
    if not MIN_GREGORIAN <= d <= MAX_GREGORIAN:
        raise CalendarRangeError(
            f"Gregorian date {d} is outside {MIN_GREGORIAN}..{MAX_GREGORIAN} "
            f"(Jalali {MIN_JALALI_YEAR}..{MAX_JALALI_YEAR})"
        )
    return d


def check_jalali_year(year: int) -> None:
    if not isinstance(year, int) or not MIN_JALALI_YEAR <= year <= MAX_JALALI_YEAR:
        raise CalendarRangeError(
            f"Jalali year must be an integer in {MIN_JALALI_YEAR}..{MAX_JALALI_YEAR}, got {year!r}"
        )


def check_jalali(year: int, month: int, day: int) -> None:
    check_jalali_year(year)
    check_month(month)
    n = month_length(year, month)
    if not isinstance(day, int) or not 1 <= day <= n:
        raise CalendarRangeError(f"day must be in 1..{n} for Jalali {year}/{month}, got {day!r}")
