import json

import pytest

from ethcal import cli
from ethcal.engine import CalendarEngine
from ethcal.models import InvalidDate


def test_convert_command(engine, capsys):
    cli.handle(engine, "convert g2e 2023 9 12")
    out = capsys.readouterr().out
    assert "Gregorian Date: 2023-9-12" in out
    assert "Ethiopian Date: 2016-1-2" in out


def test_menu_prompts_for_values(engine, capsys):
    cli.handle(engine, "3", ask=lambda prompt: "2016 1 1")
    assert "Gregorian Date: 2023-9-10" in capsys.readouterr().out


def test_menu_invalid_date(engine):
    with pytest.raises(InvalidDate):
        cli.handle(engine, "3", ask=lambda prompt: "2016 13 7")


def test_menu_wrong_number_of_values(engine):
    with pytest.raises(ValueError):
        cli.handle(engine, "2", ask=lambda prompt: "2023 9")


def test_calendar_commands(engine, capsys):
    cli.handle(engine, "1", ask=lambda prompt: "2016")
    assert "Meskerem 2016" in capsys.readouterr().out
    cli.handle(engine, "calendar greg 2024")
    out = capsys.readouterr().out
    assert "Gregorian Calendar for 2024" in out
    assert engine.last_grid.year == 2024


def test_bad_usage(engine):
    with pytest.raises(ValueError):
        cli.handle(engine, "calendar mars 2016")
    with pytest.raises(ValueError):
        cli.handle(engine, "convert x2y 1 2 3")


def test_unknown_command(engine, capsys):
    cli.handle(engine, "frobnicate")
    assert "Unknown command" in capsys.readouterr().out


def test_export_and_history(engine, tmp_path, capsys):
    cli.handle(engine, "calendar greg 2024")
    out = tmp_path / "cal.json"
    cli.handle(engine, f'export json "{out}"')
    assert len(json.loads(out.read_text(encoding="utf-8"))) == 366

    cli.handle(engine, "history")
    assert "No conversions yet." in capsys.readouterr().out
    cli.handle(engine, "convert e2g 2016 1 1")
    cli.handle(engine, "history")
    assert "[e2g] 2016-1-1 -> 2023-9-10" in capsys.readouterr().out


def test_batch_command(engine, tmp_path, capsys):
    p = tmp_path / "dates.csv"
    p.write_text("year,month,day\n2016,1,1\n2016,13,7\n", encoding="utf-8")
    cli.handle(engine, f'batch e2g "{p}"')
    out = capsys.readouterr().out
    assert "2016-1-1 -> 2023-9-10" in out
    assert "rejected" in out
    assert "Converted 1 dates, rejected 1." in out


def test_holidays_command(engine, capsys):
    cli.handle(engine, "holidays 2016")
    assert "2016-1-17  Meskel" in capsys.readouterr().out


def test_report_without_calendar(engine, capsys, tmp_path):
    cli.handle(engine, f'report "{tmp_path / "x.docx"}"')
    assert "Nothing to report" in capsys.readouterr().out


def test_main_loop(monkeypatch, capsys):
    lines = iter(["convert e2g 2016 1 1", "convert e2g 2016 13 7", "", "quit", "never read"])
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    cli.main(["--log-level", "ERROR"])
    out = capsys.readouterr().out
    assert "===== Calendar System =====" in out
    assert "Gregorian Date: 2023-9-10" in out
    assert "Error: Invalid Ethiopian date: 2016-13-7" in out


def test_main_exact_flag_and_eof(monkeypatch, capsys):
    lines = iter(["convert e2g 2016 1 1"])

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr("builtins.input", fake_input)
    cli.main(["--exact"])
    assert "Gregorian Date: 2023-9-12" in capsys.readouterr().out


def test_menu_choices_logged_as_commands(engine):
    cli.handle(engine, "1", ask=lambda prompt: "2016")
    cli.handle(engine, "2", ask=lambda prompt: "2023 9 12")
    cli.handle(engine, "3", ask=lambda prompt: "2016 1 1")
    cli.handle(engine, "4", ask=lambda prompt: "2024")
    assert engine.command_log == [
        "calendar eth 2016", "convert g2e 2023 9 12", "convert e2g 2016 1 1", "calendar greg 2024",
    ]


def test_main_logs_menu_values_not_choice(monkeypatch):
    answers = iter(["2", "2023 9 12", "calendar eth 2016", "quit"])
    created = []

    def make_engine(**kwargs):
        created.append(CalendarEngine(**kwargs))
        return created[-1]

    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli, "CalendarEngine", make_engine)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    cli.main([])
    assert created[0].command_log == ["convert g2e 2023 9 12", "calendar eth 2016"]
