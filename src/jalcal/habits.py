"""
Habit log helpers.

Logs are the plain list the storage layer persists, one entry per Gregorian
day:  [{"date": "2024-03-20", "completed": true, "notes": "..."}, ...]
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, FrozenSet, Iterable, Sequence, Tuple

from jalcal.core.errors import HabitLogError
from jalcal.core.time import parse_iso
from jalcal.core.types import HabitLog

log = logging.getLogger(__name__)


def parse_log(raw: Any) -> HabitLog:
    if not isinstance(raw, dict):
        raise HabitLogError(f"Log entry must be an object, got {type(raw).__name__}")
    if "date" not in raw:
        raise HabitLogError(f"Log entry has no 'date': {raw!r}")
    iso = raw["date"]
    try:
        parse_iso(iso)
    except (AttributeError, ValueError) as e:
        raise HabitLogError(f"Bad log date {iso!r}") from e

    completed = raw.get("completed", False)
    if not isinstance(completed, bool):
        raise HabitLogError(f"'completed' must be a boolean for {iso}, got {completed!r}")
    notes = raw.get("notes")
    if notes is not None and not isinstance(notes, str):
        raise HabitLogError(f"'notes' must be a string for {iso}")
    return HabitLog(date=iso, completed=completed, notes=notes)


def parse_logs(raw: Iterable[Any]) -> Tuple[HabitLog, ...]:
    out = tuple(parse_log(x) for x in raw)
    log.debug("parsed %d habit log entries", len(out))
    return out


def dump_logs(logs: Iterable[HabitLog]) -> list:
    out = []
    for h in logs:
        rec = {"date": h.date, "completed": h.completed}
        if h.notes is not None:
            rec["notes"] = h.notes
        out.append(rec)
    return out


def completed_dates(logs: Iterable[HabitLog]) -> FrozenSet[str]:
    return frozenset(h.date for h in logs if h.completed)


def is_completed(logs: Iterable[HabitLog], iso_date: str) -> bool:
    return any(h.date == iso_date and h.completed for h in logs)


def total_completed(logs: Iterable[HabitLog]) -> int:
    """Number of completed entries. Duplicate dates are each counted."""
    return sum(1 for h in logs if h.completed)


def completion_rate(logs: Sequence[HabitLog]) -> int:
    """
    Completed entries as a whole percentage of all entries, rounded half up.

    An empty log gives 0.
    """
    total = max(len(logs), 1)
    return (200 * total_completed(logs) + total) // (2 * total)


def toggle(logs: Sequence[HabitLog], iso_date: str) -> Tuple[HabitLog, ...]:
    """
    Flip completion for iso_date.

    An existing entry keeps its notes and has `completed` inverted; a day with
    no entry gets a new completed one appended. The input is not modified.
    """
    parse_iso(iso_date)
    out = list(logs)
    for i, h in enumerate(out):
        if h.date == iso_date:
            out[i] = HabitLog(date=h.date, completed=not h.completed, notes=h.notes)
            return tuple(out)
    out.append(HabitLog(date=iso_date, completed=True))
    return tuple(out)


def current_streak(logs: Iterable[HabitLog], today: date) -> int:
    """
    Run of consecutive completed days ending at the latest completion.

    The run only counts while it is alive: the latest completion must lie
    within one day of `today`, else 0.
    """
    days = sorted({parse_iso(iso) for iso in completed_dates(logs)}, reverse=True)
    if not days:
        return 0
    if abs((today - days[0]).days) > 1:
        return 0

    streak = 1
    for prev, cur in zip(days, days[1:]):
        if prev - cur != timedelta(days=1):
            break
        streak += 1
    return streak
