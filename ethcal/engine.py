"""
Calendar engine (session façade)
================================

The CLI talks to one `CalendarEngine`. It wraps the pure functions of
`converter` and `grid` and remembers what the user did in this session:

1) conversions performed (for `history` and exports)
2) the last calendar grid rendered (for exports and DOCX reports)
3) a command log (printed in reports for reproducibility)

Nothing here is persisted; exports only happen when asked for.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
import logging
from .converter import convert
from .grid import render_calendar
from .holidays import holidays_in_year
from .models import (
    AnyDate, CalendarGrid, CalendarSystem, ConvertedDate, Direction,
    EthiopianDate, GregorianDate, InvalidDate,
)

log = logging.getLogger(__name__)

CALENDAR_COLUMNS = ["system", "year", "month_index", "month_name", "day",
                    "weekday", "weekday_name", "holiday"]
CONVERSION_COLUMNS = ["direction", "source_calendar", "source", "target_calendar",
                      "target", "exact"]


@dataclass
class CalendarEngine:
    """Session state for the calendar CLI."""
    exact: bool = False
    # Stores CLI commands (for reproducibility in reports)
    command_log: List[str] = field(default_factory=list)
    conversions: List[ConvertedDate] = field(default_factory=list)
    last_grid: Optional[CalendarGrid] = None

    # ---------------- Conversions ----------------
    def convert_gregorian(self, year: int, month: int, day: int) -> ConvertedDate:
        """Gregorian -> Ethiopian. Raises InvalidDate."""
        out = convert(Direction.GREGORIAN_TO_ETHIOPIAN, GregorianDate(year, month, day), exact=self.exact)
        self.conversions.append(out)
        return out

    def convert_ethiopian(self, year: int, month: int, day: int) -> ConvertedDate:
        """Ethiopian -> Gregorian. Raises InvalidDate."""
        out = convert(Direction.ETHIOPIAN_TO_GREGORIAN, EthiopianDate(year, month, day), exact=self.exact)
        self.conversions.append(out)
        return out

    def convert_batch(self, dates: Iterable[AnyDate], direction: Union[Direction, str]
                      ) -> Tuple[List[ConvertedDate], List[Tuple[AnyDate, str]]]:
        """Convert many dates; invalid ones are returned, not raised."""
        converted: List[ConvertedDate] = []
        rejected: List[Tuple[AnyDate, str]] = []
        for d in dates:
            try:
                converted.append(convert(direction, d, exact=self.exact))
            except InvalidDate as e:
                log.warning("Skipping %s", e)
                rejected.append((d, str(e)))
        self.conversions.extend(converted)
        log.info("Batch converted %d dates (%d rejected)", len(converted), len(rejected))
        return converted, rejected

    # ---------------- Calendars ----------------
    def calendar(self, system: Union[CalendarSystem, str], year: int) -> CalendarGrid:
        self.last_grid = render_calendar(system, year)
        return self.last_grid

    def holidays(self, year: int) -> List[Tuple[int, int, str]]:
        return holidays_in_year(year)

    # ---------------- Export ----------------
    def rows(self, what: str = "calendar") -> List[Dict[str, Any]]:
        """Flat records for export: calendar cells or conversion history."""
        if what == "calendar":
            if self.last_grid is None:
                raise ValueError("Nothing to export: render a calendar first.")
            return _calendar_rows(self.last_grid)
        if what == "conversions":
            if not self.conversions:
                raise ValueError("Nothing to export: no conversions yet.")
            return [_conversion_row(c) for c in self.conversions]
        raise ValueError("export scope must be: calendar | conversions")

    def export_csv(self, path: str, what: str = "calendar") -> None:
        import csv
        rows = self.rows(what)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=_columns(what))
            w.writeheader()
            w.writerows(rows)
        log.info("Exported %d %s rows to %s", len(rows), what, path)

    def export_json(self, path: str, what: str = "calendar") -> None:
        """Export to a JSON list of objects (keeps field names, good for programs)."""
        import json
        rows = self.rows(what)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(rows, f, ensure_ascii=False, indent=2)
        log.info("Exported %d %s rows to %s", len(rows), what, path)

    def export_xlsx(self, path: str, what: str = "calendar") -> None:
        """Export to an Excel sheet through a pandas DataFrame."""
        import pandas as pd
        df = pd.DataFrame(self.rows(what), columns=_columns(what))
        df.to_excel(path, index=False, sheet_name=what, engine="openpyxl")
        log.info("Exported %d %s rows to %s", len(df), what, path)


# ---------------- Helpers ----------------
def _columns(what: str) -> List[str]:
    return CALENDAR_COLUMNS if what == "calendar" else CONVERSION_COLUMNS


def _calendar_rows(grid: CalendarGrid) -> List[Dict[str, Any]]:
    names = grid.weekday_names
    return [
        {
            "system": grid.system.value,
            "year": grid.year,
            "month_index": m.index,
            "month_name": m.name,
            "day": c.day,
            "weekday": c.weekday,
            "weekday_name": names[c.weekday],
            "holiday": c.holiday or "",
        }
        for m in grid.months
        for c in m.cells
    ]


def _conversion_row(c: ConvertedDate) -> Dict[str, Any]:
    if c.direction is Direction.GREGORIAN_TO_ETHIOPIAN:
        src_cal, tgt_cal = "gregorian", "ethiopian"
    else:
        src_cal, tgt_cal = "ethiopian", "gregorian"
    return {
        "direction": c.direction.value,
        "source_calendar": src_cal,
        "source": str(c.source),
        "target_calendar": tgt_cal,
        "target": str(c.target),
        "exact": c.exact,
    }
