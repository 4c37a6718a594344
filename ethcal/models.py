"""
Data model
==========

Every value the engine produces is an immutable dataclass (`frozen=True`):
- dates in both calendars,
- the derived facts of an Ethiopian year (Amete Alem, Evangelist, ...),
- the cells and month grids of a rendered calendar.

Dates are NOT validated on construction. Validation is an explicit step in
`ethcal.converter`, because the converter may legitimately return a date that
sits outside the nominal range (e.g. Pagume 6 in a common year).
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

# Static name tables
ETHIOPIAN_MONTHS: Tuple[str, ...] = (
    "Meskerem", "Tikimt", "Hidar", "Tahisas", "Tir", "Yekatit",
    "Megabit", "Miyazia", "Ginbot", "Sene", "Hamle", "Nehase", "Pagume",
)

GREGORIAN_MONTHS: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Ethiopian grids start on Monday, Gregorian grids on Sunday
WEEKDAYS_MON_FIRST: Tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
WEEKDAYS_SUN_FIRST: Tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


class InvalidDate(ValueError):
    """Raised when a (year, month, day) does not exist in its calendar."""

    def __init__(self, calendar: str, year: int, month: int, day: int):
        self.calendar = calendar
        self.year = year
        self.month = month
        self.day = day
        super().__init__(f"Invalid {calendar} date: {year}-{month}-{day}")


class CalendarSystem(Enum):
    ETHIOPIAN = "ethiopian"
    GREGORIAN = "gregorian"


class Direction(Enum):
    ETHIOPIAN_TO_GREGORIAN = "e2g"
    GREGORIAN_TO_ETHIOPIAN = "g2e"


class Evangelist(Enum):
    """The four evangelists that name the Ethiopian years in turn."""
    MATTHEW = "Matthew"
    MARK = "Mark"
    LUKE = "Luke"
    JOHN = "John"

    @property
    def traditional_name(self) -> str:
        return _TRADITIONAL_NAMES[self]


_TRADITIONAL_NAMES = {
    Evangelist.MATTHEW: "Mathewos",
    Evangelist.MARK: "Markos",
    Evangelist.LUKE: "Lukas",
    Evangelist.JOHN: "Yohannes",
}


@dataclass(frozen=True)
class EthiopianDate:
    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year}-{self.month}-{self.day}"

    @property
    def month_name(self) -> str:
        """Name of the month, or '?' when the month is out of range."""
        if 1 <= self.month <= len(ETHIOPIAN_MONTHS):
            return ETHIOPIAN_MONTHS[self.month - 1]
        return "?"


@dataclass(frozen=True)
class GregorianDate:
    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year}-{self.month}-{self.day}"


@dataclass(frozen=True)
class YearMeta:
    """Derived facts of one Ethiopian year. Recomputed on demand, never stored."""
    year: int
    amete_alem: int
    metene_rabiet: int
    evangelist: Evangelist
    # 0 = Monday ... 6 = Sunday
    new_year_weekday: int


@dataclass(frozen=True)
class HolidayRecord:
    """One row of the fixed holiday table.

    `leap` is None for holidays that do not depend on the year; for the two
    Christmas rows it says in which kind of year the row applies.
    """
    month: int
    day: int
    name: str
    leap: Optional[bool] = None


@dataclass(frozen=True)
class DayCell:
    day: int
    # column in the printed grid (0 = first column of the header)
    weekday: int
    holiday: Optional[str] = None


@dataclass(frozen=True)
class MonthGrid:
    index: int
    name: str
    year: int
    start_weekday: int
    cells: Tuple[DayCell, ...]

    @property
    def num_days(self) -> int:
        return len(self.cells)

    @property
    def holidays(self) -> List[Tuple[int, str]]:
        """(day, holiday name) pairs in day order."""
        return [(c.day, c.holiday) for c in self.cells if c.holiday]

    def weeks(self) -> List[List[Optional[DayCell]]]:
        """Lay the cells out as rows of 7, padding with None."""
        rows: List[List[Optional[DayCell]]] = []
        row: List[Optional[DayCell]] = [None] * self.start_weekday
        for c in self.cells:
            row.append(c)
            if len(row) == 7:
                rows.append(row)
                row = []
        if row:
            row.extend([None] * (7 - len(row)))
            rows.append(row)
        return rows


@dataclass(frozen=True)
class CalendarGrid:
    system: CalendarSystem
    year: int
    months: Tuple[MonthGrid, ...]
    # only set for Ethiopian grids
    meta: Optional[YearMeta] = None

    @property
    def weekday_names(self) -> Tuple[str, ...]:
        if self.system is CalendarSystem.ETHIOPIAN:
            return WEEKDAYS_MON_FIRST
        return WEEKDAYS_SUN_FIRST


AnyDate = Union[EthiopianDate, GregorianDate]


@dataclass(frozen=True)
class ConvertedDate:
    direction: Direction
    source: AnyDate
    target: AnyDate
    exact: bool = False
