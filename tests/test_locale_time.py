import random
from datetime import date, datetime, timedelta, timezone

import pytest

from jalcal.core import time as jt
from jalcal.locale import MONDAY, SUNDAY, month_name, weekday_names


def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to avoid datetime out of range
    for _ in range(10000):
        jdn_in = random.randint(1721426, 5373484)
        assert jt.to_jdn(jt.from_jdn(jdn_in)) == jdn_in


def test_weekday_sun0_matches_datetime():
    d = date(2024, 1, 1)
    for i in range(14):
        x = d + timedelta(days=i)
        assert jt.weekday_sun0(x) == (x.weekday() + 1) % 7
    assert jt.weekday_sun0(date(2024, 3, 20)) == 3  # Wednesday


def test_local_today_naive_and_aware():
    assert jt.local_today(datetime(2024, 3, 20, 23, 59)) == date(2024, 3, 20)

    aware = datetime(2024, 3, 20, 22, 0, tzinfo=timezone.utc)
    assert jt.local_today(aware) == aware.astimezone().date()


def test_parse_iso_strict():
    assert jt.parse_iso("2024-03-20") == date(2024, 3, 20)
    for bad in ("2024-3-20", "24-03-20", "2024/03/20", "2024-02-30"):
        with pytest.raises(ValueError):
            jt.parse_iso(bad)


def test_month_names():
    assert month_name(1) == "Farvardin"
    assert month_name(12) == "Esfand"
    assert month_name(1, "fa") == "فروردین"
    with pytest.raises(ValueError):
        month_name(13)


def test_weekday_names_order():
    assert weekday_names() == ["Sat", "Sun", "Mon", "Tue", "Wed", "Thu", "Fri"]
    assert weekday_names("en", SUNDAY)[0] == "Sun"
    assert weekday_names("en", MONDAY)[-1] == "Sun"
    assert weekday_names("fa")[0] == "ش"


def test_unknown_language():
    with pytest.raises(KeyError):
        weekday_names("de")
