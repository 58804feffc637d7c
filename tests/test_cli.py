"""Tests for the command line entry point."""
from __future__ import annotations

import argparse

import pytest

import humanizenumber.config as cfg
from humanizenumber.cli import main, parse_number, parse_override


@pytest.fixture(autouse=True)
def no_user_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(cfg, "SETTINGS_PATH", tmp_path / "missing.json")


def run_cli(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out.strip()


class TestParsing:
    def test_int(self):
        assert parse_number("42") == 42
        assert isinstance(parse_number("42"), int)

    def test_float(self):
        assert parse_number("4.5") == 4.5
        assert parse_number("1e6") == 1e6

    def test_not_a_number(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_number("lots")

    def test_override(self):
        assert parse_override("5=five") == (5, "five")

    def test_override_without_equals(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_override("five")


class TestCommands:
    def test_intcomma(self, capsys):
        assert run_cli(capsys, "intcomma", "1234567") == "1,234,567"

    def test_formatnumber(self, capsys):
        assert run_cli(capsys, "formatnumber", "1234.5") == "1,234.50"

    def test_intword(self, capsys):
        assert run_cli(capsys, "intword", "1500000", "--decimals", "1") == "1.5 million"
        assert run_cli(capsys, "intword", "1500000", "--compact") == "2M"

    def test_intwordover(self, capsys):
        assert run_cli(capsys, "intwordover", "1234") == "1,234"
        assert run_cli(capsys, "intwordover", "123456", "--compact") == "123K"

    def test_compactinteger_threshold(self, capsys):
        assert run_cli(capsys, "compactinteger", "123456", "--shorten-when-longer", "7") == "123,456"

    def test_apnumber_and_ordinal(self, capsys):
        assert run_cli(capsys, "apnumber", "7") == "seven"
        assert run_cli(capsys, "ordinal", "112") == "112th"

    def test_boundednumber(self, capsys):
        assert run_cli(capsys, "boundednumber", "150", "100") == "100+"

    def test_times_overrides(self, capsys):
        assert run_cli(capsys, "times", "5", "--override", "5=five") == "five times"
        assert run_cli(capsys, "times", "1", "--override", "1=single") == "once"

    def test_filesize(self, capsys):
        assert run_cli(capsys, "filesize", "1536", "--decimals", "1") == "1.5 KB"
        assert run_cli(capsys, "filesize", "1500", "--bytes-in-kb", "1000") == "2 KB"

    def test_settings_file_used(self, capsys, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        path.write_text('{"thousands_sep": " "}', encoding="utf-8")
        monkeypatch.setattr(cfg, "SETTINGS_PATH", path)
        monkeypatch.setattr(cfg, "THOUSANDS_SEP", cfg.THOUSANDS_SEP)
        assert run_cli(capsys, "intcomma", "1234567") == "1 234 567"


class TestErrors:
    def test_validation_error_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["ordinal", "1.5"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("ERROR:")

    def test_bad_unit_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["filesize", "2048", "--bytes-in-kb", "1"])
        assert exc_info.value.code == 1

    def test_usage_error_exits_2(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["intword", "lots"])
        assert exc_info.value.code == 2
