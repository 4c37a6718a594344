"""
Calendar report generator
-------------------------
This module writes a printable DOCX calendar from a CalendarGrid.

Design goals:
- Keep ethcal usable even if report dependencies are missing (lazy import).
- One table per month, laid out exactly like the console grid
  (same weekday columns, same holiday marker).
- List the holidays of each month under its table.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import logging
import os

from .models import CalendarGrid, CalendarSystem
from .render import HOLIDAY_MARKER, year_banner

log = logging.getLogger(__name__)


# -----------------------------
# Configuration
# -----------------------------

@dataclass
class ReportConfig:
    """High-level knobs to control how the report is written."""
    title: str = "Calendar"
    subtitle: str = "Ethiopian / Gregorian calendar (ethcal)"
    marker: str = HOLIDAY_MARKER
    include_holiday_list: bool = True

    # Optional: list of CLI commands used in the session
    command_log: Optional[List[str]] = None


# -----------------------------
# Main entry point used by CLI
# -----------------------------

def generate_docx_calendar(
    grid: CalendarGrid,
    out_path: str,
    *,
    config: Optional[ReportConfig] = None,
) -> str:
    """Write the year grid to `out_path` as a DOCX document and return the path."""
    config = config or ReportConfig()

    # Lazy import: only required when "report" is used.
    try:
        from docx import Document
        from docx.shared import Pt
        from docx.enum.text import WD_ALIGN_PARAGRAPH
        from docx.oxml.ns import qn
    except ImportError as e:
        raise ImportError(
            "Missing dependency: python-docx.\n"
            "Install it with: python -m pip install python-docx"
        ) from e

    doc = Document()

    # Set a simple readable default style
    style = doc.styles["Normal"]
    style.font.name = "Calibri"
    style._element.rPr.rFonts.set(qn("w:eastAsia"), "Calibri")
    style.font.size = Pt(11)

    def _center_title(text: str, size: int, bold: bool = False, italic: bool = False) -> None:
        p = doc.add_paragraph()
        r = p.add_run(text)
        r.bold = bold
        r.italic = italic
        r.font.size = Pt(size)
        p.alignment = WD_ALIGN_PARAGRAPH.CENTER

    def _kv(key: str, value: str) -> None:
        p = doc.add_paragraph()
        r = p.add_run(f"{key}: ")
        r.bold = True
        p.add_run(value)

    system_label = "Ethiopian" if grid.system is CalendarSystem.ETHIOPIAN else "Gregorian"
    _center_title(f"{system_label} {config.title} {grid.year}", 22, bold=True)
    _center_title(config.subtitle, 12, italic=True)

    doc.add_paragraph("")
    for line in year_banner(grid):
        key, _, value = line.partition(": ")
        if value:
            _kv(key, value)
        else:
            doc.add_paragraph(line)

    # -----------------------------
    # One table per month
    # -----------------------------
    names = grid.weekday_names
    for month in grid.months:
        doc.add_heading(f"{month.name} {month.year}", level=1)
        weeks = month.weeks()
        t = doc.add_table(rows=1, cols=7)
        for i, n in enumerate(names):
            t.rows[0].cells[i].text = n
        for week in weeks:
            row = t.add_row().cells
            for i, c in enumerate(week):
                if c is None:
                    continue
                row[i].text = f"{c.day}{config.marker}" if c.holiday else str(c.day)

        if config.include_holiday_list and month.holidays:
            doc.add_paragraph("Holidays this month:")
            for day, name in month.holidays:
                doc.add_paragraph(f"{day} - {name}", style="List Bullet")

    # -----------------------------
    # Reproducibility footer
    # -----------------------------
    doc.add_paragraph("")
    doc.add_heading("Reproducibility footer", level=1)

    from . import __version__ as ethcal_version
    from datetime import datetime as _dt
    generated_at = _dt.now().isoformat(timespec="seconds")

    doc.add_paragraph(f"ethcal version: {ethcal_version}")
    doc.add_paragraph(f"Report generated at: {generated_at}")

    if config.command_log:
        doc.add_paragraph("Commands used (log):")
        for line in config.command_log:
            doc.add_paragraph(line, style="List Bullet")

    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    doc.save(out_path)
    log.info("Wrote DOCX calendar for %s %s to %s", system_label, grid.year, out_path)
    return out_path
