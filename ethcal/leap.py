"""
Leap-year rules
===============

The two calendars decide leap years independently:
- Ethiopian: every 4th year, the one that leaves remainder 3 (Pagume has 6 days).
- Gregorian: divisible by 4, except centuries not divisible by 400.
"""

from __future__ import annotations

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_ethiopian_leap(year: int) -> bool:
    return year % 4 == 3


def is_gregorian_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_gregorian_month(year: int, month: int) -> int:
    """Length of a Gregorian month (February adjusted for leap years)."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1..12, got {month}")
    if month == 2 and is_gregorian_leap(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


def days_in_ethiopian_month(year: int, month: int) -> int:
    """Twelve months of 30 days, then Pagume with 5 or 6."""
    if not 1 <= month <= 13:
        raise ValueError(f"month must be 1..13, got {month}")
    if month == 13:
        return 6 if is_ethiopian_leap(year) else 5
    return 30
