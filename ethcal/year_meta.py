"""
Ethiopian year facts
====================

Each Ethiopian year carries a few traditional numbers:

- Amete Alem ("year of the world") = year + 5500
- Metene Rabiet = Amete Alem // 4
- Evangelist: the year is named after Matthew, Mark, Luke or John in turn,
  chosen by Amete Alem mod 4.
- The weekday of New Year's Day (1 Meskerem) = (Amete Alem + Metene Rabiet) mod 7,
  counted with 0 = Monday.

The weekday formula is what aligns every Ethiopian month grid, so it is kept
exactly as the traditional computation has it.
"""

from __future__ import annotations
from .models import Evangelist, YearMeta

AMETE_ALEM_OFFSET = 5500

_EVANGELIST_BY_REMAINDER = {
    1: Evangelist.MATTHEW,
    2: Evangelist.MARK,
    3: Evangelist.LUKE,
    0: Evangelist.JOHN,
}


def amete_alem(year: int) -> int:
    return year + AMETE_ALEM_OFFSET


def metene_rabiet(amete_alem_value: int) -> int:
    return amete_alem_value // 4


def evangelist(amete_alem_value: int) -> Evangelist:
    return _EVANGELIST_BY_REMAINDER[amete_alem_value % 4]


def new_year_weekday(year: int) -> int:
    """Weekday of 1 Meskerem: 0 = Monday ... 6 = Sunday."""
    aa = amete_alem(year)
    return (aa + metene_rabiet(aa)) % 7


def year_meta(year: int) -> YearMeta:
    aa = amete_alem(year)
    return YearMeta(
        year=year,
        amete_alem=aa,
        metene_rabiet=metene_rabiet(aa),
        evangelist=evangelist(aa),
        new_year_weekday=new_year_weekday(year),
    )
