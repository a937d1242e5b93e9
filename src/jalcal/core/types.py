from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional

@dataclass(frozen=True)
class GregorianDate:
    year: int
    month: int
    day: int

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class JalaliDate:
    year: int
    month: int
    day: int

    def isoformat(self) -> str:
        # Display only; habit logs are keyed by the Gregorian ISO string.
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class CalendarDay:
    """One cell of a month grid. Padding cells carry no day."""
    day_number: Optional[int]
    iso_date: Optional[str]
    is_completed: bool = False
    is_today: bool = False

    @property
    def is_blank(self) -> bool:
        return self.day_number is None

@dataclass(frozen=True)
class HabitLog:
    date: str  # Gregorian YYYY-MM-DD
    completed: bool
    notes: Optional[str] = None
