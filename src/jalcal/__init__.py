"""jalcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    to_jalali,
    to_gregorian,
    jalali_from_date,
    jalali_to_iso,
    today_jalali,
    month_length,
    is_leap_year,
    days_in_year,
    new_year_day,
    first_day_of_month,
    last_day_of_month,
    month_grid,
)
from .grid import prev_month, next_month, start_weekday, weeks
from .habits import completion_rate, current_streak, parse_logs, toggle, total_completed
from .core.errors import CalendarRangeError, HabitLogError, JalcalError
from .core.types import CalendarDay, GregorianDate, HabitLog, JalaliDate

__all__ = [
    "to_jalali",
    "to_gregorian",
    "jalali_from_date",
    "jalali_to_iso",
    "today_jalali",
    "month_length",
    "is_leap_year",
    "days_in_year",
    "new_year_day",
    "first_day_of_month",
    "last_day_of_month",
    "month_grid",
    "prev_month",
    "next_month",
    "start_weekday",
    "weeks",
    "completion_rate",
    "current_streak",
    "parse_logs",
    "toggle",
    "total_completed",
    "CalendarRangeError",
    "HabitLogError",
    "JalcalError",
    "CalendarDay",
    "GregorianDate",
    "HabitLog",
    "JalaliDate",
]
