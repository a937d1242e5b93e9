class JalcalError(Exception):
    """Base error."""

class CalendarRangeError(JalcalError, ValueError):
    """Raised when a year, month or day lies outside its calendar's valid range."""

class HabitLogError(JalcalError, ValueError):
    """Raised when a habit log entry cannot be parsed."""
