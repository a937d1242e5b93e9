from __future__ import annotations

from datetime import date
from unittest.mock import patch

import pytest

import jalcal
from jalcal.core.errors import CalendarRangeError
from jalcal.core.types import HabitLog
from jalcal.grid import build_month_grid, next_month, prev_month, start_weekday, weeks
from jalcal.locale import MONDAY


def test_farvardin_1403_starts_on_wednesday():
    # 2024-03-20 is a Wednesday: column 4 of a Saturday-first week
    assert start_weekday(1403, 1) == 4
    assert start_weekday(1403, 1, first_weekday=MONDAY) == 2


def test_grid_layout_farvardin_1403():
    cells = build_month_grid(1403, 1, today=date(2000, 1, 1))
    assert len(cells) == 4 + 31
    assert all(c.is_blank for c in cells[:4])
    assert [c.day_number for c in cells[4:]] == list(range(1, 32))
    assert cells[4].iso_date == "2024-03-20"
    assert cells[-1].iso_date == "2024-04-19"


def test_grid_completeness():
    today = date(2000, 1, 1)
    for year in range(1400, 1406):
        for month in range(1, 13):
            cells = build_month_grid(year, month, today=today)
            pad = start_weekday(year, month)
            n = jalcal.month_length(year, month)
            assert 0 <= pad <= 6
            assert len(cells) == pad + n
            assert all(c.is_blank for c in cells[:pad])
            assert [c.day_number for c in cells[pad:]] == list(range(1, n + 1))

            rows = weeks(cells)
            assert all(len(r) == 7 for r in rows)
            assert len(rows) == -(-len(cells) // 7)


def test_completion_and_today_flags():
    logs = [
        HabitLog("2024-03-20", True),
        HabitLog("2024-03-21", False),
        HabitLog("2024-03-25", True, notes="gym"),
        HabitLog("2023-03-21", True),  # different month
    ]
    cells = build_month_grid(1403, 1, logs, today=date(2024, 3, 21))
    days = {c.day_number: c for c in cells if not c.is_blank}

    assert days[1].is_completed
    assert not days[2].is_completed
    assert days[6].is_completed
    assert sum(c.is_completed for c in days.values()) == 2

    assert days[2].is_today
    assert sum(c.is_today for c in cells) == 1
    assert not any(c.is_today or c.is_completed for c in cells if c.is_blank)


def test_today_defaults_to_local_date():
    with patch("jalcal.grid.local_today", return_value=date(2024, 3, 20)):
        cells = build_month_grid(1403, 1)
    today = [c for c in cells if c.is_today]
    assert len(today) == 1 and today[0].day_number == 1


def test_today_outside_month_marks_nothing():
    cells = build_month_grid(1403, 2, today=date(2024, 3, 20))
    assert not any(c.is_today for c in cells)


def test_leap_esfand_grid():
    cells = build_month_grid(1403, 12, today=date(2000, 1, 1))
    days = [c for c in cells if not c.is_blank]
    assert len(days) == 30
    assert days[-1].iso_date == "2025-03-20"

    cells = build_month_grid(1404, 12, today=date(2000, 1, 1))
    assert len([c for c in cells if not c.is_blank]) == 29


def test_month_grid_api_matches_builder():
    today = date(2024, 3, 20)
    assert jalcal.month_grid(1403, 1, today=today) == build_month_grid(1403, 1, today=today)


@pytest.mark.parametrize("args", [(1403, 0), (1403, 13), (0, 5)])
def test_grid_rejects_bad_month(args):
    with pytest.raises(CalendarRangeError):
        build_month_grid(*args, today=date(2024, 3, 20))


@pytest.mark.parametrize("args", [(1403, 13), (1403, 0), (979, 1), (9378, 1)])
def test_start_weekday_rejects_bad_input(args):
    with pytest.raises(CalendarRangeError):
        jalcal.start_weekday(*args)


def test_grid_rejects_bad_first_weekday():
    with pytest.raises(ValueError):
        build_month_grid(1403, 1, today=date(2024, 3, 20), first_weekday=7)


def test_month_navigation_rolls_over():
    assert prev_month(1403, 1) == (1402, 12)
    assert prev_month(1403, 5) == (1403, 4)
    assert next_month(1403, 12) == (1404, 1)
    assert next_month(1403, 5) == (1403, 6)


def test_weeks_pads_last_row():
    cells = build_month_grid(1403, 12, today=date(2000, 1, 1))
    rows = weeks(cells)
    assert len(rows) == 5
    assert rows[-1][-1].is_blank
