"""
Fixed-date Ethiopian holidays
=============================

A static table of seven holidays. Christmas (Gena) is the only entry that
moves: Tahisas 29 in a common year, Tahisas 28 in a leap year.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple
from .leap import days_in_ethiopian_month, is_ethiopian_leap
from .models import HolidayRecord

HOLIDAYS: Tuple[HolidayRecord, ...] = (
    HolidayRecord(1, 1, "New Year (Enkutatash)"),
    HolidayRecord(1, 17, "Meskel"),
    HolidayRecord(4, 29, "Christmas (Gena)", leap=False),
    HolidayRecord(4, 28, "Christmas (Gena)", leap=True),
    HolidayRecord(5, 11, "Epiphany (Timket)"),
    HolidayRecord(6, 23, "Adwa Victory Day"),
    HolidayRecord(8, 23, "Labour Day"),
    HolidayRecord(8, 27, "Patriots' Victory Day"),
)


def _table_for(leap: bool) -> Dict[Tuple[int, int], str]:
    return {
        (h.month, h.day): h.name
        for h in HOLIDAYS
        if h.leap is None or h.leap == leap
    }


# one lookup table per kind of year
_BY_LEAP = {False: _table_for(False), True: _table_for(True)}


def holiday_for(year: int, month: int, day: int) -> Optional[str]:
    """Name of the holiday on an Ethiopian date, or None."""
    return _BY_LEAP[is_ethiopian_leap(year)].get((month, day))


def holidays_in_month(year: int, month: int) -> List[Tuple[int, str]]:
    out: List[Tuple[int, str]] = []
    for d in range(1, days_in_ethiopian_month(year, month) + 1):
        name = holiday_for(year, month, d)
        if name:
            out.append((d, name))
    return out


def holidays_in_year(year: int) -> List[Tuple[int, int, str]]:
    """(month, day, name) for every holiday of the year, in calendar order."""
    return [
        (m, d, name)
        for m in range(1, 14)
        for d, name in holidays_in_month(year, m)
    ]
