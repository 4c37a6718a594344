"""
Date conversion (Ethiopian <-> Gregorian)
=========================================

Two conversion paths are available:

1) Legacy arithmetic (default, `exact=False`)
   Anchors every Ethiopian year on Gregorian September 11 (12 when the
   Gregorian year is a leap year) and counts 30-day months from there.
   This reproduces the behaviour existing callers rely on, including two
   known quirks:
   - Ethiopian -> Gregorian uses `(day - 2)` as the offset from the anchor,
     so 1 Meskerem lands one day before the anchor.
   - Gregorian -> Ethiopian, for dates before the anchor, adds one extra day
     when `(eYear + 7) % 4 == 3` (not the Ethiopian leap test itself).
   No clamp is applied, so the result may read e.g. Pagume 6 in a common year.

2) Exact arithmetic (`exact=True`)
   Converts through fixed day numbers (see `daynum.py`). Agrees with the
   almanac: 1 Meskerem 2016 = 2023-09-12.

Both paths validate their input first and raise `InvalidDate`.
"""

from __future__ import annotations
import logging
from typing import Union
from .daynum import (
    add_days, days_between, ethiopian_to_fixed, fixed_to_ethiopian,
    fixed_to_gregorian, gregorian_to_fixed,
)
from .leap import days_in_gregorian_month, is_ethiopian_leap, is_gregorian_leap
from .models import (
    AnyDate, ConvertedDate, Direction, EthiopianDate, GregorianDate, InvalidDate,
)

log = logging.getLogger(__name__)


# ---------------- Validation ----------------
def validate_ethiopian(date: EthiopianDate) -> EthiopianDate:
    """Return the date unchanged, or raise InvalidDate."""
    y, m, d = date.year, date.month, date.day
    if m < 1 or m > 13 or d < 1 or d > 30:
        raise InvalidDate("Ethiopian", y, m, d)
    if m == 13 and d > (6 if is_ethiopian_leap(y) else 5):
        raise InvalidDate("Ethiopian", y, m, d)
    return date


def validate_gregorian(date: GregorianDate) -> GregorianDate:
    """Return the date unchanged, or raise InvalidDate."""
    y, m, d = date.year, date.month, date.day
    if m < 1 or m > 12 or d < 1 or d > days_in_gregorian_month(y, m):
        raise InvalidDate("Gregorian", y, m, d)
    return date


# ---------------- Conversions ----------------
def _new_year_anchor_day(gregorian_year: int) -> int:
    """September day used as the Ethiopian New Year anchor (legacy rule)."""
    return 12 if is_gregorian_leap(gregorian_year) else 11


def gregorian_to_ethiopian(gdate: GregorianDate, exact: bool = False) -> EthiopianDate:
    validate_gregorian(gdate)
    g_year, g_month, g_day = gdate.year, gdate.month, gdate.day

    if exact:
        y, m, d = fixed_to_ethiopian(gregorian_to_fixed(g_year, g_month, g_day))
        return EthiopianDate(y, m, d)

    anchor = _new_year_anchor_day(g_year)

    # Estimate the Ethiopian year from the position relative to the anchor
    e_year = g_year - 8
    if g_month > 9 or (g_month == 9 and g_day >= anchor):
        e_year += 1

    new_year = (e_year + 8, 9, anchor)
    day_diff = days_between((g_year, g_month, g_day), new_year)

    # Before that New Year: count from the previous one instead
    if day_diff < 0:
        day_diff += 365
        if (e_year + 7) % 4 == 3:
            day_diff += 1

    e_month = day_diff // 30 + 1
    e_day = day_diff % 30 + 1
    log.debug("g2e %s -> anchor=%s diff=%s -> %s-%s-%s",
              gdate, new_year, day_diff, e_year, e_month, e_day)
    return EthiopianDate(e_year, e_month, e_day)


def ethiopian_to_gregorian(edate: EthiopianDate, exact: bool = False) -> GregorianDate:
    validate_ethiopian(edate)
    e_year, e_month, e_day = edate.year, edate.month, edate.day

    if exact:
        y, m, d = fixed_to_gregorian(ethiopian_to_fixed(e_year, e_month, e_day))
        return GregorianDate(y, m, d)

    g_year = e_year + 7
    anchor = _new_year_anchor_day(g_year)
    days_from_new_year = (e_month - 1) * 30 + (e_day - 2)

    y, m, d = add_days(g_year, 9, anchor, days_from_new_year)
    log.debug("e2g %s -> %s-09-%s + %s days -> %s-%s-%s",
              edate, g_year, anchor, days_from_new_year, y, m, d)
    return GregorianDate(y, m, d)


def convert(direction: Union[Direction, str], date: AnyDate, *, exact: bool = False) -> ConvertedDate:
    """Convert `date` in the given direction.

    `direction` may be a Direction or its short value ("e2g" / "g2e").
    Raises InvalidDate for dates that do not exist in the source calendar.
    """
    direction = Direction(direction)
    if direction is Direction.ETHIOPIAN_TO_GREGORIAN:
        if not isinstance(date, EthiopianDate):
            raise TypeError(f"expected EthiopianDate, got {type(date).__name__}")
        target: AnyDate = ethiopian_to_gregorian(date, exact=exact)
    else:
        if not isinstance(date, GregorianDate):
            raise TypeError(f"expected GregorianDate, got {type(date).__name__}")
        target = gregorian_to_ethiopian(date, exact=exact)
    return ConvertedDate(direction=direction, source=date, target=target, exact=exact)
