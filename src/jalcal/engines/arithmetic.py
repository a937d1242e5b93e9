"""
jalcal.engines.arithmetic
-------------------------
Day-counting conversion between the proleptic Gregorian calendar and the
Jalali (Persian solar hijri) calendar.

Both directions count elapsed days from one of two epoch anchors and then
peel off whole cycles:

  Gregorian -> Jalali : 33-year (12053 d), 4-year (1461 d), 365-day years
  Jalali -> Gregorian : 400-year (146097 d), 100-year (36524 d),
                        4-year (1461 d), 365-day years

The kernels here do no range checking. Callers outside this package should
go through `jalcal.api`, which validates first.
"""

from __future__ import annotations

from typing import Tuple

from jalcal.core.types import GregorianDate, JalaliDate

# ---------------------------------------------------------
# Epoch anchors
# ---------------------------------------------------------
# (Gregorian base year, Jalali base year)
EARLY_ANCHOR = (621, 0)
LATE_ANCHOR = (1600, 979)

# Years up to and including these use EARLY_ANCHOR
GREGORIAN_EPOCH_SPLIT = 1600
JALALI_EPOCH_SPLIT = 979

# Cumulative days before each Gregorian month in a common year
G_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

# Day offset aligning 1 January with 1 Farvardin
NEW_YEAR_OFFSET = -80

JALALI_33Y_DAYS = 12053
JULIAN_4Y_DAYS = 1461
GREGORIAN_400Y_DAYS = 146097
GREGORIAN_100Y_DAYS = 36524

# Days before Mehr (month 7): six 31-day months
FIRST_HALF_DAYS = 186


def is_gregorian_leap(gy: int) -> bool:
    return (gy % 4 == 0 and gy % 100 != 0) or (gy % 400 == 0)


def gregorian_month_lengths(gy: int) -> Tuple[int, ...]:
    feb = 29 if is_gregorian_leap(gy) else 28
    return (31, feb, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _anchor_for_gregorian(gy: int) -> Tuple[int, int]:
    return EARLY_ANCHOR if gy <= GREGORIAN_EPOCH_SPLIT else LATE_ANCHOR


def _anchor_for_jalali(jy: int) -> Tuple[int, int]:
    return EARLY_ANCHOR if jy <= JALALI_EPOCH_SPLIT else LATE_ANCHOR


def g2j(gy: int, gm: int, gd: int) -> JalaliDate:
    """Gregorian (gy, gm, gd) -> JalaliDate. Unchecked."""
    g_base, jy = _anchor_for_gregorian(gy)
    gy -= g_base

    # Leap days are counted up to the current year once February is over.
    gy2 = gy + 1 if gm > 2 else gy
    days = (
        365 * gy
        + (gy2 + 3) // 4
        - (gy2 + 99) // 100
        + (gy2 + 399) // 400
        + NEW_YEAR_OFFSET
        + gd
        + G_DAYS_BEFORE_MONTH[gm - 1]
    )

    jy += 33 * (days // JALALI_33Y_DAYS)
    days %= JALALI_33Y_DAYS

    jy += 4 * (days // JULIAN_4Y_DAYS)
    days %= JULIAN_4Y_DAYS

    # The first year of each 4-year block is the long one (366 days).
    if days > 365:
        jy += (days - 1) // 365
        days = (days - 1) % 365

    if days < FIRST_HALF_DAYS:
        jm = 1 + days // 31
        jd = 1 + days % 31
    else:
        jm = 7 + (days - FIRST_HALF_DAYS) // 30
        jd = 1 + (days - FIRST_HALF_DAYS) % 30
    return JalaliDate(jy, jm, jd)


def _jalali_day_count(jy: int, jm: int, jd: int) -> int:
    """Days since the anchor epoch; jy is already anchor-relative."""
    if jm < 7:
        month_days = (jm - 1) * 31
    else:
        month_days = (jm - 7) * 30 + FIRST_HALF_DAYS
    # 8 leap years in every 33-year cycle
    return 365 * jy + (jy // 33) * 8 + ((jy % 33) + 3) // 4 + 78 + jd + month_days


def j2g(jy: int, jm: int, jd: int) -> GregorianDate:
    """Jalali (jy, jm, jd) -> GregorianDate. Unchecked."""
    gy, j_base = _anchor_for_jalali(jy)
    days = _jalali_day_count(jy - j_base, jm, jd)

    gy += 400 * (days // GREGORIAN_400Y_DAYS)
    days %= GREGORIAN_400Y_DAYS

    if days > GREGORIAN_100Y_DAYS:
        days -= 1
        gy += 100 * (days // GREGORIAN_100Y_DAYS)
        days %= GREGORIAN_100Y_DAYS
        # Century years are common; shift back onto the 4-year grid.
        if days >= 365:
            days += 1

    gy += 4 * (days // JULIAN_4Y_DAYS)
    days %= JULIAN_4Y_DAYS

    if days > 365:
        gy += (days - 1) // 365
        days = (days - 1) % 365

    gd = days + 1
    gm = 1
    for length in gregorian_month_lengths(gy):
        if gd <= length:
            break
        gd -= length
        gm += 1
    return GregorianDate(gy, gm, gd)
