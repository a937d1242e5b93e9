# tests/test_conversions.py

import random
from datetime import date, timedelta

import pytest

import jalcal
from jalcal.core.errors import CalendarRangeError
from jalcal.core.ranges import MAX_GREGORIAN, MAX_JALALI_YEAR, MIN_GREGORIAN, MIN_JALALI_YEAR
from jalcal.core.time import to_jdn
from jalcal.engines.arithmetic import g2j, j2g
from jalcal.engines.month_length import month_length


@pytest.mark.parametrize(
    "g, j",
    [
        ((2024, 3, 20), (1403, 1, 1)),   # Nowruz 1403
        ((2021, 3, 21), (1400, 1, 1)),
        ((2025, 3, 20), (1403, 12, 30)),  # last day of a leap Esfand
        ((2025, 3, 21), (1404, 1, 1)),
        ((2000, 1, 1), (1378, 10, 11)),
        ((1979, 2, 11), (1357, 11, 22)),
    ],
)
def test_known_dates(g, j):
    jd = jalcal.to_jalali(*g)
    assert (jd.year, jd.month, jd.day) == j

    gd = jalcal.to_gregorian(*j)
    assert (gd.year, gd.month, gd.day) == g


def test_persian_new_year_fixed_points():
    assert jalcal.to_jalali(2024, 3, 20) == jalcal.JalaliDate(1403, 1, 1)
    assert jalcal.to_gregorian(1403, 1, 1) == jalcal.GregorianDate(2024, 3, 20)


def test_gregorian_roundtrip_random():
    random.seed(42)
    start = date(1900, 1, 1)
    span = (date(2100, 12, 31) - start).days
    for _ in range(5000):
        d = start + timedelta(days=random.randint(0, span))
        j = g2j(d.year, d.month, d.day)
        assert j2g(j.year, j.month, j.day).to_date() == d


def test_jalali_days_are_consecutive():
    """Walking every Jalali day of 1300..1500 advances the JDN by exactly one."""
    prev = to_jdn(j2g(1300, 1, 1).to_date()) - 1
    for jy in range(1300, 1501):
        for jm in range(1, 13):
            for jd in range(1, month_length(jy, jm) + 1):
                g = j2g(jy, jm, jd)
                jdn = to_jdn(g.to_date())
                assert jdn == prev + 1
                back = g2j(g.year, g.month, g.day)
                assert (back.year, back.month, back.day) == (jy, jm, jd)
                prev = jdn


def test_jalali_to_iso_is_zero_padded():
    assert jalcal.jalali_to_iso(1403, 1, 1) == "2024-03-20"
    assert jalcal.jalali_to_iso(1378, 10, 11) == "2000-01-01"


def test_jalali_from_date_and_today():
    assert jalcal.jalali_from_date(date(2024, 3, 20)) == jalcal.JalaliDate(1403, 1, 1)
    assert jalcal.today_jalali(date(2025, 3, 21)) == jalcal.JalaliDate(1404, 1, 1)


def test_first_and_last_day_of_month():
    assert jalcal.first_day_of_month(1403, 1) == date(2024, 3, 20)
    assert jalcal.last_day_of_month(1403, 1) == date(2024, 4, 19)
    assert jalcal.last_day_of_month(1403, 12) == date(2025, 3, 20)


@pytest.mark.parametrize(
    "args",
    [
        (2024, 13, 1),
        (2024, 0, 1),
        (2023, 2, 29),
        (2024, 4, 31),
        (600, 1, 1),
    ],
)
def test_to_jalali_rejects_bad_input(args):
    with pytest.raises(CalendarRangeError):
        jalcal.to_jalali(*args)


@pytest.mark.parametrize(
    "args",
    [
        (1404, 12, 30),  # 1404 is a common year
        (1403, 7, 31),
        (1403, 13, 1),
        (1403, 1, 0),
        (0, 1, 1),
    ],
)
def test_to_gregorian_rejects_bad_input(args):
    with pytest.raises(CalendarRangeError):
        jalcal.to_gregorian(*args)


def test_range_error_is_value_error():
    with pytest.raises(ValueError):
        jalcal.to_gregorian(1403, 12, 31)


def test_supported_range_boundaries():
    assert jalcal.to_gregorian(MIN_JALALI_YEAR, 1, 1).to_date() == MIN_GREGORIAN
    assert jalcal.to_jalali(1601, 3, 21) == jalcal.JalaliDate(980, 1, 1)

    last = jalcal.to_jalali(MAX_GREGORIAN.year, MAX_GREGORIAN.month, MAX_GREGORIAN.day)
    assert (last.year, last.month) == (MAX_JALALI_YEAR, 12)
    assert last.day == jalcal.month_length(MAX_JALALI_YEAR, 12)
    assert jalcal.to_gregorian(last.year, last.month, last.day).to_date() == MAX_GREGORIAN


@pytest.mark.parametrize(
    "g",
    [(1601, 3, 20), (1600, 12, 31), (624, 3, 20), (9999, 12, 31)],
)
def test_to_jalali_rejects_dates_outside_supported_range(g):
    with pytest.raises(CalendarRangeError):
        jalcal.to_jalali(*g)


@pytest.mark.parametrize("jy", [MIN_JALALI_YEAR - 1, 2, MAX_JALALI_YEAR + 1])
def test_to_gregorian_rejects_years_outside_supported_range(jy):
    with pytest.raises(CalendarRangeError):
        jalcal.to_gregorian(jy, 1, 1)


def test_roundtrip_across_whole_supported_range():
    random.seed(7)
    span = (MAX_GREGORIAN - MIN_GREGORIAN).days
    days = [MIN_GREGORIAN, MAX_GREGORIAN]
    days += [MIN_GREGORIAN + timedelta(days=random.randint(0, span)) for _ in range(20000)]
    for d in days:
        j = jalcal.to_jalali(d.year, d.month, d.day)
        assert jalcal.to_gregorian(j.year, j.month, j.day).to_date() == d


def test_jalali_days_are_consecutive_from_lower_boundary():
    prev = to_jdn(MIN_GREGORIAN) - 1
    for jy in range(MIN_JALALI_YEAR, MIN_JALALI_YEAR + 40):
        for jm in range(1, 13):
            for jd in range(1, jalcal.month_length(jy, jm) + 1):
                g = jalcal.to_gregorian(jy, jm, jd)
                jdn = to_jdn(g.to_date())
                assert jdn == prev + 1
                assert jalcal.to_jalali(g.year, g.month, g.day) == jalcal.JalaliDate(jy, jm, jd)
                prev = jdn
