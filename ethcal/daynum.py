"""
Day numbers (fixed dates)
=========================

All date arithmetic in ethcal goes through *fixed day numbers*: a plain
integer count of days on the proleptic Gregorian calendar, where day 1 is
0001-01-01 (a Monday).

Why integers?
- Differences between two dates are a subtraction.
- Adding N days is an addition followed by one conversion back.
- Weekdays are `fixed % 7`.
No platform time structures are involved, so any integer year works
(including years before 1970 or after 2038).

The Ethiopian calendar gets the same treatment: its epoch (1 Meskerem 1)
is fixed day 2796, and every year is 12 * 30 days + Pagume.
"""

from __future__ import annotations
from typing import Tuple
from .leap import is_gregorian_leap

ETHIOPIAN_EPOCH = 2796


def gregorian_to_fixed(year: int, month: int, day: int) -> int:
    """Fixed day number of a Gregorian date."""
    y = year - 1
    fixed = 365 * y + y // 4 - y // 100 + y // 400
    # days before the month, as if February had 30 days...
    fixed += (367 * month - 362) // 12
    # ...then corrected for the real length of February
    if month > 2:
        fixed -= 1 if is_gregorian_leap(year) else 2
    return fixed + day


def gregorian_year_from_fixed(fixed: int) -> int:
    d0 = fixed - 1
    n400, d1 = divmod(d0, 146097)
    n100, d2 = divmod(d1, 36524)
    n4, d3 = divmod(d2, 1461)
    n1 = d3 // 365
    year = 400 * n400 + 100 * n100 + 4 * n4 + n1
    # the last day of a 4- or 400-year cycle belongs to the year just counted
    if n100 == 4 or n1 == 4:
        return year
    return year + 1


def fixed_to_gregorian(fixed: int) -> Tuple[int, int, int]:
    """Inverse of `gregorian_to_fixed`: returns (year, month, day)."""
    year = gregorian_year_from_fixed(fixed)
    prior_days = fixed - gregorian_to_fixed(year, 1, 1)
    if fixed < gregorian_to_fixed(year, 3, 1):
        correction = 0
    else:
        correction = 1 if is_gregorian_leap(year) else 2
    month = (12 * (prior_days + correction) + 373) // 367
    day = fixed - gregorian_to_fixed(year, month, 1) + 1
    return year, month, day


def add_days(year: int, month: int, day: int, n: int) -> Tuple[int, int, int]:
    """Gregorian date `n` days after (or before, if negative) the given one."""
    return fixed_to_gregorian(gregorian_to_fixed(year, month, day) + n)


def days_between(a: Tuple[int, int, int], b: Tuple[int, int, int]) -> int:
    """Whole days from Gregorian date `b` to `a` (negative if a is earlier)."""
    return gregorian_to_fixed(*a) - gregorian_to_fixed(*b)


def gregorian_weekday(year: int, month: int, day: int) -> int:
    """Weekday of a Gregorian date, 0 = Sunday ... 6 = Saturday."""
    return gregorian_to_fixed(year, month, day) % 7


def monday_weekday(fixed: int) -> int:
    """Weekday of a fixed day, 0 = Monday ... 6 = Sunday."""
    return (fixed - 1) % 7


def ethiopian_to_fixed(year: int, month: int, day: int) -> int:
    """Fixed day number of an Ethiopian date."""
    return (ETHIOPIAN_EPOCH - 1 + 365 * (year - 1) + year // 4
            + 30 * (month - 1) + day)


def fixed_to_ethiopian(fixed: int) -> Tuple[int, int, int]:
    """Inverse of `ethiopian_to_fixed`: returns (year, month, day)."""
    year = (4 * (fixed - ETHIOPIAN_EPOCH) + 1463) // 1461
    month = (fixed - ethiopian_to_fixed(year, 1, 1)) // 30 + 1
    day = fixed + 1 - ethiopian_to_fixed(year, month, 1)
    return year, month, day
