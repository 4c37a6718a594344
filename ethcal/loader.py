"""
Date loader (CSV / Excel -> date list)
======================================

Reads a sheet of dates for batch conversion. Each row needs a year, a month
and a day column; header names are matched loosely ("Year", "year ",
"YYYY", "Month No" ...).

Key ideas:
- Conversion helpers (_to_int) turn blank or junk cells into None.
- Rows with a missing part are skipped and logged, not fatal.
- Range checking is left to the converter (it raises InvalidDate).
"""

from __future__ import annotations
from typing import List, Optional, Union
import logging
import re
import pandas as pd
from .models import AnyDate, CalendarSystem, EthiopianDate, GregorianDate

log = logging.getLogger(__name__)

YEAR_COLUMNS = ("Year", "YYYY", "Yr")
MONTH_COLUMNS = ("Month", "MM", "Month No", "Mon")
DAY_COLUMNS = ("Day", "DD", "Day Of Month")


def _to_int(x) -> Optional[int]:
    """Convert a cell to int, returning None if missing/invalid."""
    if pd.isna(x): return None
    try: return int(float(x))
    except (TypeError, ValueError): return None

def _norm(s: str) -> str:
    return re.sub(r"[^a-z0-9]+", "", str(s).lower())

def _col(df: pd.DataFrame, *names: str) -> str:
    cols = list(df.columns)
    for n in names:
        if n in cols:
            return n
    norm_map = {_norm(c): c for c in cols}
    for n in names:
        nn = _norm(n)
        if nn in norm_map:
            return norm_map[nn]
    raise KeyError(f"Missing required column. Tried={names}. Available={cols}")

def read_table(path: str) -> pd.DataFrame:
    """CSV for .csv/.txt files, Excel (openpyxl) for anything else."""
    if path.lower().endswith((".csv", ".txt")):
        df = pd.read_csv(path)
    else:
        df = pd.read_excel(path, engine="openpyxl")
    df.rename(columns={c: str(c).strip() for c in df.columns}, inplace=True)
    return df

def load_dates(path: str, system: Union[CalendarSystem, str]) -> List[AnyDate]:
    """Load (year, month, day) rows as dates of the given calendar."""
    system = CalendarSystem(system)
    make = EthiopianDate if system is CalendarSystem.ETHIOPIAN else GregorianDate

    df = read_table(path)
    y_col = _col(df, *YEAR_COLUMNS)
    m_col = _col(df, *MONTH_COLUMNS)
    d_col = _col(df, *DAY_COLUMNS)

    dates: List[AnyDate] = []
    for i, row in df.iterrows():
        y, m, d = _to_int(row[y_col]), _to_int(row[m_col]), _to_int(row[d_col])
        if y is None or m is None or d is None:
            log.warning("Row %s skipped: incomplete date (%r, %r, %r)",
                        i, row[y_col], row[m_col], row[d_col])
            continue
        dates.append(make(y, m, d))
    log.info("Loaded %d %s dates from %s", len(dates), system.value, path)
    return dates
