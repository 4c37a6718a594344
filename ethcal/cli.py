"""
ethcal Command Line Interface (CLI)
===================================

Interactive terminal program:

    python -m ethcal.cli [--exact] [--log-level DEBUG] [--log-file ethcal.log]

It accepts either the numbered menu (1-5, prompting for each value) or
one-line commands (see HELP_TEXT). Mapping of commands to engine methods
lives in `handle`.

The CLI never writes files unless an export/report command asks for it.
"""

from __future__ import annotations
import argparse, logging, shlex
from typing import Callable, List, Optional
from .engine import CalendarEngine
from .logging_setup import setup_logging
from .models import CalendarSystem, Direction
from .render import format_conversion, render_calendar_text

log = logging.getLogger(__name__)

MENU = """
Select an option:
1. Display Ethiopian Calendar
2. Convert Gregorian to Ethiopian Date
3. Convert Ethiopian to Gregorian Date
4. Display Gregorian Calendar
5. Exit
"""

HELP_TEXT = """
ethcal commands
---------------

1) Calendars
   calendar eth <year>              (example: calendar eth 2016)
   calendar greg <year>             (example: calendar greg 2024)
   holidays <year>                  (Ethiopian year, example: holidays 2016)

2) Conversion
   convert g2e <y> <m> <d>          (example: convert g2e 2023 9 12)
   convert e2g <y> <m> <d>          (example: convert e2g 2016 1 1)
   batch g2e|e2g "<file>"           (CSV/XLSX with year, month, day columns)
   history

3) Export (last calendar, or the conversion history)
   export csv|json|xlsx "<path>" [calendar|conversions]
   report "<out.docx>"              (DOCX of the last calendar)

4) Menu / exit
   menu        (shows the numbered menu; 1-5 work at any time)
   quit
"""

_SYSTEMS = {
    "eth": CalendarSystem.ETHIOPIAN, "ethiopian": CalendarSystem.ETHIOPIAN, "e": CalendarSystem.ETHIOPIAN,
    "greg": CalendarSystem.GREGORIAN, "gregorian": CalendarSystem.GREGORIAN, "g": CalendarSystem.GREGORIAN,
}
_DIRECTIONS = {"g2e": Direction.GREGORIAN_TO_ETHIOPIAN, "e2g": Direction.ETHIOPIAN_TO_GREGORIAN}


def main(argv: Optional[List[str]] = None):
    """Entry point for the ethcal CLI.

    1) Parse options and set up logging
    2) Create the session engine
    3) Start an interactive REPL
    """
    ap = argparse.ArgumentParser(prog="ethcal", description="Ethiopian / Gregorian calendar tool")
    ap.add_argument("--exact", action="store_true",
                    help="use exact day-number conversion instead of the legacy arithmetic")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--log-file", default=None, help="also write logs to this file")
    args = ap.parse_args(argv)

    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)
    engine = CalendarEngine(exact=args.exact)
    log.info("Session started (exact=%s)", args.exact)

    print("===== Calendar System =====")
    print(MENU)
    while True:
        try:
            line = input("ethcal> ")
            # Keep a lightweight log of commands for the report (reproducibility).
            stripped = line.strip()
            if stripped:
                cmd0 = stripped.split()[0].lower()
                if cmd0 not in ("help", "menu", "history", "quit", "exit", "1", "2", "3", "4", "5"):
                    engine.command_log.append(stripped)
        except EOFError:
            break
        if not stripped:
            continue
        if stripped.lower() in ("quit", "exit", "5"):
            break
        try:
            handle(engine, stripped)
        except Exception as e:
            print(f"Error: {e}")


def _ask_ints(ask: Callable[[str], str], prompt: str, n: int) -> List[int]:
    parts = ask(prompt).split()
    if len(parts) != n:
        raise ValueError(f"expected {n} number(s), got {len(parts)}")
    return [int(p) for p in parts]


def handle(engine: CalendarEngine, line: str, ask: Optional[Callable[[str], str]] = None) -> None:
    """Handle one CLI command line.

    `ask` supplies answers to the numbered-menu prompts (input() by default).
    """
    ask = ask or input
    parts = shlex.split(line)
    cmd = parts[0].lower()

    if cmd == "help":
        print(HELP_TEXT)
        return

    if cmd == "menu":
        print(MENU)
        return

    # ---------------- Numbered menu ----------------
    if cmd in ("1", "4"):
        label = "Ethiopian" if cmd == "1" else "Gregorian"
        (year,) = _ask_ints(ask, f"Enter {label} year: ", 1)
        system = CalendarSystem.ETHIOPIAN if cmd == "1" else CalendarSystem.GREGORIAN
        # menu choices are logged as the equivalent word command
        engine.command_log.append(f"calendar {'eth' if cmd == '1' else 'greg'} {year}")
        print(render_calendar_text(engine.calendar(system, year)))
        return

    if cmd == "2":
        y, m, d = _ask_ints(ask, "Enter Gregorian date (YYYY MM DD): ", 3)
        engine.command_log.append(f"convert g2e {y} {m} {d}")
        print(format_conversion(engine.convert_gregorian(y, m, d)))
        return

    if cmd == "3":
        y, m, d = _ask_ints(ask, "Enter Ethiopian date (YYYY MM DD): ", 3)
        engine.command_log.append(f"convert e2g {y} {m} {d}")
        print(format_conversion(engine.convert_ethiopian(y, m, d)))
        return

    # ---------------- Word commands ----------------
    if cmd == "calendar":
        if len(parts) != 3 or parts[1].lower() not in _SYSTEMS:
            raise ValueError("usage: calendar eth|greg <year>")
        grid = engine.calendar(_SYSTEMS[parts[1].lower()], int(parts[2]))
        print(render_calendar_text(grid))
        return

    if cmd == "holidays":
        if len(parts) != 2:
            raise ValueError("usage: holidays <ethiopian year>")
        for m, d, name in engine.holidays(int(parts[1])):
            print(f"{parts[1]}-{m}-{d}  {name}")
        return

    if cmd == "convert":
        if len(parts) != 5 or parts[1].lower() not in _DIRECTIONS:
            raise ValueError("usage: convert g2e|e2g <y> <m> <d>")
        y, m, d = int(parts[2]), int(parts[3]), int(parts[4])
        if _DIRECTIONS[parts[1].lower()] is Direction.GREGORIAN_TO_ETHIOPIAN:
            out = engine.convert_gregorian(y, m, d)
        else:
            out = engine.convert_ethiopian(y, m, d)
        print(format_conversion(out))
        return

    if cmd == "batch":
        from .loader import load_dates
        if len(parts) != 3 or parts[1].lower() not in _DIRECTIONS:
            raise ValueError('usage: batch g2e|e2g "<file>"')
        direction = _DIRECTIONS[parts[1].lower()]
        system = "gregorian" if direction is Direction.GREGORIAN_TO_ETHIOPIAN else "ethiopian"
        converted, rejected = engine.convert_batch(load_dates(parts[2], system), direction)
        for c in converted:
            print(f"{c.source} -> {c.target}")
        for d, reason in rejected:
            print(f"{d} -> rejected ({reason})")
        print(f"Converted {len(converted)} dates, rejected {len(rejected)}.")
        return

    if cmd == "history":
        if not engine.conversions:
            print("No conversions yet.")
        for c in engine.conversions:
            print(f"[{c.direction.value}] {c.source} -> {c.target}")
        return

    if cmd == "export":
        # export <csv|json|xlsx> "<path>" [calendar|conversions]
        if len(parts) < 3:
            print('Usage: export csv "out.csv" [calendar|conversions]')
            return
        fmt, out_path = parts[1].lower(), parts[2]
        what = parts[3].lower() if len(parts) >= 4 else "calendar"
        exporters = {"csv": engine.export_csv, "json": engine.export_json, "xlsx": engine.export_xlsx}
        if fmt not in exporters:
            print("Unknown export format. Use: csv, json or xlsx")
            return
        exporters[fmt](out_path, what)
        print(f"Exported {fmt.upper()} to {out_path}")
        return

    if cmd == "report":
        from .report import ReportConfig, generate_docx_calendar
        if len(parts) != 2:
            raise ValueError('usage: report "<out.docx>"')
        if engine.last_grid is None:
            print("Nothing to report: render a calendar first.")
            return
        generate_docx_calendar(engine.last_grid, parts[1],
                               config=ReportConfig(command_log=engine.command_log))
        print(f"Report written to {parts[1]}")
        return

    print("Unknown command. Type 'help'.")


if __name__ == "__main__":
    main()
