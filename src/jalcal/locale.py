from __future__ import annotations

from typing import Dict, List, Tuple

# Weekday constants use the native 0=Sunday .. 6=Saturday index.
SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)

MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    "en": (
        "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
        "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
    ),
    "fa": (
        "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
        "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
    ),
}

# Indexed by the native weekday (Sunday first)
WEEKDAY_ABBR: Dict[str, Tuple[str, ...]] = {
    "en": ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    "fa": ("ی", "د", "س", "چ", "پ", "ج", "ش"),
}


def _table(tables: Dict[str, Tuple[str, ...]], lang: str) -> Tuple[str, ...]:
    if lang not in tables:
        raise KeyError(f"Unknown language '{lang}'. Available: {sorted(tables)}")
    return tables[lang]


def month_name(month: int, lang: str = "en") -> str:
    names = _table(MONTH_NAMES, lang)
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return names[month - 1]


def weekday_names(lang: str = "en", first_weekday: int = SATURDAY) -> List[str]:
    """Weekday abbreviations in display order, starting at first_weekday."""
    names = _table(WEEKDAY_ABBR, lang)
    return [names[(first_weekday + i) % 7] for i in range(7)]
