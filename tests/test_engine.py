import csv
import json

import pytest

from ethcal.models import CalendarSystem, EthiopianDate, GregorianDate


def test_conversions_are_recorded(engine):
    engine.convert_gregorian(2023, 9, 12)
    engine.convert_ethiopian(2016, 1, 1)
    assert [str(c.target) for c in engine.conversions] == ["2016-1-2", "2023-9-10"]


def test_exact_engine(exact_engine):
    assert exact_engine.convert_ethiopian(2016, 1, 1).target == GregorianDate(2023, 9, 12)


def test_batch_keeps_going_on_invalid_dates(engine):
    dates = [GregorianDate(2023, 9, 12), GregorianDate(2023, 2, 30), GregorianDate(2024, 1, 1)]
    converted, rejected = engine.convert_batch(dates, "g2e")
    assert [c.target for c in converted] == [EthiopianDate(2016, 1, 2), EthiopianDate(2016, 4, 22)]
    assert rejected == [(GregorianDate(2023, 2, 30), "Invalid Gregorian date: 2023-2-30")]
    assert len(engine.conversions) == 2


def test_calendar_sets_last_grid(engine):
    grid = engine.calendar(CalendarSystem.ETHIOPIAN, 2016)
    assert engine.last_grid is grid


def test_nothing_to_export(engine):
    with pytest.raises(ValueError):
        engine.rows("calendar")
    with pytest.raises(ValueError):
        engine.rows("conversions")
    engine.calendar("gregorian", 2024)
    with pytest.raises(ValueError):
        engine.rows("bogus")


def test_export_calendar_csv(engine, tmp_path):
    engine.calendar("ethiopian", 2016)
    out = tmp_path / "cal.csv"
    engine.export_csv(str(out))
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 365
    assert rows[0]["month_name"] == "Meskerem"
    assert rows[0]["weekday_name"] == "Tue"
    assert rows[0]["holiday"] == "New Year (Enkutatash)"


def test_export_conversions_json(engine, tmp_path):
    engine.convert_gregorian(2023, 9, 12)
    out = tmp_path / "conv.json"
    engine.export_json(str(out), "conversions")
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload == [{
        "direction": "g2e",
        "source_calendar": "gregorian",
        "source": "2023-9-12",
        "target_calendar": "ethiopian",
        "target": "2016-1-2",
        "exact": False,
    }]


def test_export_calendar_xlsx(engine, tmp_path):
    pd = pytest.importorskip("pandas")
    pytest.importorskip("openpyxl")
    engine.calendar("gregorian", 2024)
    out = tmp_path / "cal.xlsx"
    engine.export_xlsx(str(out))
    df = pd.read_excel(out, engine="openpyxl")
    assert len(df) == 366
    assert list(df.columns)[:4] == ["system", "year", "month_index", "month_name"]


def test_holidays(engine):
    assert len(engine.holidays(2015)) == 7
    assert (4, 28, "Christmas (Gena)") in engine.holidays(2015)
