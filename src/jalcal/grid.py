"""
Month grid layout for a Jalali month.

Cells are laid out row-major in a 7-column grid. The week starts on
Saturday by default, as Iranian calendars do; blank cells pad the first row
up to the weekday of day 1.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from jalcal.core.ranges import check_jalali_year, check_month
from jalcal.core.time import local_today, weekday_sun0
from jalcal.core.types import CalendarDay, HabitLog
from jalcal.engines.arithmetic import g2j, j2g
from jalcal.engines.month_length import month_length
from jalcal.habits import completed_dates
from jalcal.locale import SATURDAY

log = logging.getLogger(__name__)

BLANK = CalendarDay(day_number=None, iso_date=None)


def start_weekday(year: int, month: int, *, first_weekday: int = SATURDAY) -> int:
    """
    Column of day 1 of Jalali (year, month).

    With the default Saturday-first week this is (native + 1) % 7, giving
    0=Saturday .. 6=Friday.
    """
    check_jalali_year(year)
    check_month(month)
    if not 0 <= first_weekday <= 6:
        raise ValueError(f"first_weekday must be in 0..6, got {first_weekday}")
    first = j2g(year, month, 1).to_date()
    return (weekday_sun0(first) - first_weekday) % 7


def build_month_grid(
    year: int,
    month: int,
    logs: Iterable[HabitLog] = (),
    *,
    today: Optional[date] = None,
    first_weekday: int = SATURDAY,
) -> List[CalendarDay]:
    """
    Leading blanks followed by one cell per day of Jalali (year, month).

    Each day cell carries its Gregorian ISO date so it can be matched
    against habit logs. `today` defaults to the local civil date.
    """
    pad = start_weekday(year, month, first_weekday=first_weekday)
    n_days = month_length(year, month)

    if today is None:
        today = local_today()
    t = g2j(today.year, today.month, today.day)
    done = completed_dates(logs)

    cells: List[CalendarDay] = [BLANK] * pad
    for d in range(1, n_days + 1):
        iso = j2g(year, month, d).isoformat()
        cells.append(CalendarDay(
            day_number=d,
            iso_date=iso,
            is_completed=iso in done,
            is_today=(t.year, t.month, t.day) == (year, month, d),
        ))

    log.debug("grid %d/%02d: %d blanks, %d days", year, month, pad, n_days)
    return cells


def weeks(cells: Sequence[CalendarDay]) -> List[List[CalendarDay]]:
    """Split cells into rows of 7, padding the last row with blanks."""
    rows: List[List[CalendarDay]] = []
    wk: List[CalendarDay] = []
    for c in cells:
        wk.append(c)
        if len(wk) == 7:
            rows.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(BLANK)
        rows.append(wk)
    return rows


def prev_month(year: int, month: int) -> Tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> Tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1
