import pytest

from ethcal.daynum import gregorian_weekday
from ethcal.grid import build_ethiopian_month_grid, build_gregorian_year_grid, render_calendar
from ethcal.models import CalendarSystem, ETHIOPIAN_MONTHS


def test_ethiopian_year_has_13_months(eth_2016, eth_2015):
    assert len(eth_2016.months) == 13
    assert [m.name for m in eth_2016.months] == list(ETHIOPIAN_MONTHS)
    assert [m.num_days for m in eth_2016.months[:12]] == [30] * 12
    assert eth_2016.months[12].num_days == 5
    assert eth_2015.months[12].num_days == 6


def test_ethiopian_running_weekday(eth_2016):
    months = eth_2016.months
    assert months[0].start_weekday == eth_2016.meta.new_year_weekday == 1
    assert months[1].start_weekday == 3
    # Pagume 1, 2016 fell on a Friday (column 4, Monday first)
    assert months[12].start_weekday == 4
    for prev, nxt in zip(months, months[1:]):
        assert nxt.start_weekday == (prev.start_weekday + prev.num_days) % 7


def test_ethiopian_cells_wrap_weekdays(eth_2016):
    m = eth_2016.months[0]
    for i, c in enumerate(m.cells):
        assert c.day == i + 1
        assert c.weekday == (m.start_weekday + i) % 7


def test_ethiopian_holiday_annotations(eth_2016, eth_2015):
    assert eth_2016.months[0].holidays == [(1, "New Year (Enkutatash)"), (17, "Meskel")]
    assert eth_2016.months[3].holidays == [(29, "Christmas (Gena)")]
    assert eth_2015.months[3].holidays == [(28, "Christmas (Gena)")]
    assert eth_2016.months[1].holidays == []
    assert eth_2016.months[0].cells[16].holiday == "Meskel"


def test_month_grid_weeks(eth_2016):
    weeks = eth_2016.months[0].weeks()
    assert len(weeks) == 5
    assert all(len(w) == 7 for w in weeks)
    assert weeks[0][0] is None
    assert weeks[0][1].day == 1
    assert weeks[-1][3] is None


def test_build_single_month_grid():
    m = build_ethiopian_month_grid("Pagume", 6, 6, 2015, 13)
    assert m.name == "Pagume"
    assert [c.weekday for c in m.cells] == [6, 0, 1, 2, 3, 4]
    assert m.holidays == []


def test_gregorian_year(greg_2024):
    assert greg_2024.system is CalendarSystem.GREGORIAN
    assert greg_2024.meta is None
    assert len(greg_2024.months) == 12
    assert greg_2024.months[1].num_days == 29
    assert greg_2024.months[0].start_weekday == 1
    assert all(c.holiday is None for m in greg_2024.months for c in m.cells)


def test_gregorian_february_length():
    for y in (1900, 2000, 2023, 2024, 2100):
        feb = build_gregorian_year_grid(y).months[1]
        leap = (y % 4 == 0 and y % 100 != 0) or y % 400 == 0
        assert feb.num_days == (29 if leap else 28)


def test_gregorian_months_start_independently():
    grid = build_gregorian_year_grid(2023)
    for m in grid.months:
        assert m.start_weekday == gregorian_weekday(2023, m.index, 1)
    assert grid.months[8].start_weekday == 5


def test_render_calendar_dispatch():
    assert render_calendar("ethiopian", 2016).system is CalendarSystem.ETHIOPIAN
    assert render_calendar(CalendarSystem.GREGORIAN, 2016).system is CalendarSystem.GREGORIAN


@pytest.mark.parametrize("start", [-1, 7, 9])
def test_month_grid_rejects_out_of_range_start_weekday(start):
    with pytest.raises(ValueError):
        build_ethiopian_month_grid("Tikimt", start, 30, 2016, 2)


def test_month_grid_weekdays_stay_in_columns(eth_2016):
    for m in eth_2016.months:
        assert all(0 <= c.weekday <= 6 for c in m.cells)
        assert all(len(w) == 7 for w in m.weeks())
