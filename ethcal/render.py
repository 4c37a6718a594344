"""
Text rendering
==============

Turns a CalendarGrid into the console layout:

    Meskerem 2016
    Mon Tue Wed Thu Fri Sat Sun
         1*   2   3   4   5   6
    ...
    Holidays this month:
    1 - New Year (Enkutatash)

Every column is 4 characters wide. A holiday cell is suffixed with the
marker (default "*") and the month's holidays are listed under the grid.
"""

from __future__ import annotations
from typing import List
from .models import (
    CalendarGrid, CalendarSystem, ConvertedDate, Direction, EthiopianDate, MonthGrid, WEEKDAYS_MON_FIRST,
)

HOLIDAY_MARKER = "*"


def _cell_text(day: int, holiday: bool, marker: str) -> str:
    if holiday:
        return f"{day:2d}{marker} "
    return f"{day:3d} "


def render_month(month: MonthGrid, weekday_names=WEEKDAYS_MON_FIRST,
                 marker: str = HOLIDAY_MARKER, list_holidays: bool = True) -> List[str]:
    lines = [f"{month.name} {month.year}", " ".join(weekday_names)]
    for week in month.weeks():
        row = "".join(
            "    " if c is None else _cell_text(c.day, bool(c.holiday), marker)
            for c in week
        )
        lines.append(row.rstrip())

    holidays = month.holidays
    if list_holidays and holidays:
        lines.append("Holidays this month:")
        for day, name in holidays:
            lines.append(f"{day} - {name}")
    return lines


def year_banner(grid: CalendarGrid) -> List[str]:
    if grid.system is CalendarSystem.GREGORIAN or grid.meta is None:
        return [f"Gregorian Calendar for {grid.year}"]
    meta = grid.meta
    return [
        f"Year: {grid.year}",
        f"Amete Alem: {meta.amete_alem}",
        f"Evangelist: {meta.evangelist.value} ({meta.evangelist.traditional_name})",
        f"First day of Meskerem: {WEEKDAYS_MON_FIRST[meta.new_year_weekday]}",
    ]


def render_calendar_text(grid: CalendarGrid, marker: str = HOLIDAY_MARKER) -> str:
    """The whole year as one printable string."""
    lines = year_banner(grid)
    for month in grid.months:
        lines.append("")
        lines.extend(render_month(month, grid.weekday_names, marker=marker))
    return "\n".join(lines) + "\n"


def format_conversion(converted: ConvertedDate) -> str:
    if converted.direction is Direction.GREGORIAN_TO_ETHIOPIAN:
        pairs = (("Gregorian", converted.source), ("Ethiopian", converted.target))
    else:
        pairs = (("Ethiopian", converted.source), ("Gregorian", converted.target))
    lines = []
    for label, d in pairs:
        if isinstance(d, EthiopianDate):
            lines.append(f"{label} Date: {d} ({d.month_name} {d.day})")
        else:
            lines.append(f"{label} Date: {d}")
    return "\n".join(lines)
