from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from .core.ranges import check_gregorian, check_jalali, check_jalali_year, check_month
from .core.time import from_jdn, local_today
from .core.types import CalendarDay, GregorianDate, HabitLog, JalaliDate
from .engines import arithmetic, month_length as _ml
from .grid import build_month_grid
from .locale import SATURDAY

# ============================================================
# Conversions
# ============================================================

def to_jalali(year: int, month: int, day: int) -> JalaliDate:
    """Gregorian (year, month, day) -> JalaliDate."""
    check_gregorian(year, month, day)
    return arithmetic.g2j(year, month, day)

def to_gregorian(year: int, month: int, day: int) -> GregorianDate:
    """Jalali (year, month, day) -> GregorianDate."""
    check_jalali(year, month, day)
    return arithmetic.j2g(year, month, day)

def jalali_from_date(d: date) -> JalaliDate:
    return to_jalali(d.year, d.month, d.day)

def jalali_to_iso(year: int, month: int, day: int) -> str:
    """Gregorian ISO string (YYYY-MM-DD) of a Jalali date; the key used by habit logs."""
    return to_gregorian(year, month, day).isoformat()

def today_jalali(today: Optional[date] = None) -> JalaliDate:
    return jalali_from_date(today if today is not None else local_today())

# ============================================================
# Month / year lengths
# ============================================================

def month_length(year: int, month: int) -> int:
    check_jalali_year(year)
    check_month(month)
    return _ml.month_length(year, month)

def is_leap_year(year: int) -> bool:
    check_jalali_year(year)
    return _ml.is_leap(year)

def days_in_year(year: int) -> int:
    check_jalali_year(year)
    return _ml.year_length(year)

def new_year_day(year: int) -> date:
    """Gregorian date of Nowruz (1 Farvardin) of Jalali year."""
    check_jalali_year(year)
    return from_jdn(_ml.nowruz_jdn(year))

def first_day_of_month(year: int, month: int) -> date:
    return to_gregorian(year, month, 1).to_date()

def last_day_of_month(year: int, month: int) -> date:
    return to_gregorian(year, month, month_length(year, month)).to_date()

# ============================================================
# Grid
# ============================================================

def month_grid(
    year: int,
    month: int,
    logs: Iterable[HabitLog] = (),
    *,
    today: Optional[date] = None,
    first_weekday: int = SATURDAY,
) -> List[CalendarDay]:
    return build_month_grid(year, month, logs, today=today, first_weekday=first_weekday)
