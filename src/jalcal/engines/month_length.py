"""
jalcal.engines.month_length
---------------------------
Jalali month lengths. Farvardin..Shahrivar have 31 days, Mehr..Bahman 30,
and Esfand 29 or 30 depending on whether the year is long.

The leap status of a year is read off the converters themselves (how many
days separate two consecutive Nowruz dates) rather than from a closed-form
cycle table, so it always agrees with `g2j`/`j2g`.
"""

from __future__ import annotations

import logging

from jalcal.core.time import to_jdn
from jalcal.engines.arithmetic import g2j, j2g

log = logging.getLogger(__name__)


def nowruz_jdn(jy: int) -> int:
    """JDN of 1 Farvardin of Jalali year jy."""
    return to_jdn(j2g(jy, 1, 1).to_date())


def year_length(jy: int) -> int:
    """Days in Jalali year jy (365 or 366), from the span between two Nowruz dates."""
    return nowruz_jdn(jy + 1) - nowruz_jdn(jy)


def is_leap(jy: int) -> bool:
    return year_length(jy) == 366


def esfand_overflows(jy: int) -> bool:
    """
    Round-trip check: does 30 Esfand jy come back as 1 Farvardin jy+1?

    True means Esfand has only 29 days. Used to cross-check `is_leap`.
    """
    g = j2g(jy, 12, 30)
    back = g2j(g.year, g.month, g.day)
    return (back.year, back.month, back.day) == (jy + 1, 1, 1)


def month_length(jy: int, jm: int) -> int:
    """Days in Jalali month jm of year jy. Unchecked month range."""
    if jm <= 6:
        return 31
    if jm <= 11:
        return 30
    n = year_length(jy)
    log.debug("Jalali year %d has %d days", jy, n)
    return 30 if n == 366 else 29
