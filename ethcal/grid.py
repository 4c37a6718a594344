"""
Calendar grids
==============

Builds month-by-month day layouts for a whole year, in either calendar.

Ethiopian year:
- 13 months: 12 of 30 days and Pagume with 5 (6 in a leap year).
- Columns start on Monday. Meskerem starts on the New Year weekday and each
  following month starts where the previous one ended (running weekday).
- Each day is annotated with its fixed holiday, if any.

Gregorian year:
- 12 months with the usual lengths (February leap-adjusted).
- Columns start on Sunday. Every month's start weekday is computed directly
  from its first day, not carried over.
"""

from __future__ import annotations
import logging
from typing import List, Union
from .daynum import gregorian_weekday
from .holidays import holiday_for
from .leap import days_in_ethiopian_month, days_in_gregorian_month
from .models import (
    CalendarGrid, CalendarSystem, DayCell, ETHIOPIAN_MONTHS, GREGORIAN_MONTHS, MonthGrid,
)
from .year_meta import year_meta

log = logging.getLogger(__name__)


def build_ethiopian_month_grid(month_name: str, start_weekday: int, num_days: int,
                               year: int, month_index: int) -> MonthGrid:
    """Place day 1 at column `start_weekday` (0..6) and annotate holidays."""
    if not 0 <= start_weekday <= 6:
        raise ValueError(f"start_weekday must be 0..6, got {start_weekday}")
    cells: List[DayCell] = []
    weekday = start_weekday
    for day in range(1, num_days + 1):
        cells.append(DayCell(day=day, weekday=weekday,
                             holiday=holiday_for(year, month_index, day)))
        # wrap to the next row after Sunday
        weekday = (weekday + 1) % 7
    return MonthGrid(index=month_index, name=month_name, year=year,
                     start_weekday=start_weekday, cells=tuple(cells))


def build_ethiopian_year_grid(year: int) -> CalendarGrid:
    meta = year_meta(year)
    start = meta.new_year_weekday
    months: List[MonthGrid] = []
    for i, name in enumerate(ETHIOPIAN_MONTHS, start=1):
        num_days = days_in_ethiopian_month(year, i)
        months.append(build_ethiopian_month_grid(name, start, num_days, year, i))
        start = (start + num_days % 7) % 7
    log.debug("built Ethiopian grid for %s (starts weekday %s)", year, meta.new_year_weekday)
    return CalendarGrid(system=CalendarSystem.ETHIOPIAN, year=year,
                        months=tuple(months), meta=meta)


def build_gregorian_month_grid(year: int, month: int) -> MonthGrid:
    start = gregorian_weekday(year, month, 1)
    cells = tuple(
        DayCell(day=d, weekday=(start + d - 1) % 7)
        for d in range(1, days_in_gregorian_month(year, month) + 1)
    )
    return MonthGrid(index=month, name=GREGORIAN_MONTHS[month - 1], year=year,
                     start_weekday=start, cells=cells)


def build_gregorian_year_grid(year: int) -> CalendarGrid:
    months = tuple(build_gregorian_month_grid(year, m) for m in range(1, 13))
    log.debug("built Gregorian grid for %s", year)
    return CalendarGrid(system=CalendarSystem.GREGORIAN, year=year, months=months)


def render_calendar(system: Union[CalendarSystem, str], year: int) -> CalendarGrid:
    """Build the year grid for `system` ("ethiopian" / "gregorian" or enum)."""
    system = CalendarSystem(system)
    if system is CalendarSystem.ETHIOPIAN:
        return build_ethiopian_year_grid(year)
    return build_gregorian_year_grid(year)
