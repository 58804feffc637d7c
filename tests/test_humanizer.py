"""Tests for the Humanizer facade and the package-level API."""
from __future__ import annotations

import dataclasses

import pytest

import humanizenumber
import humanizenumber.config as cfg
from humanizenumber import Humanizer


@pytest.fixture
def european():
    return Humanizer(decimal_point=",", thousands_sep=".", bytes_in_kb=1000, shorten_when_longer=7)


class TestDefaults:
    def test_matches_plain_functions(self):
        h = Humanizer()
        assert h.intcomma(1234567) == humanizenumber.intcomma(1234567)
        assert h.formatnumber(1234.5) == "1,234.50"
        assert h.intword(1500000, 1) == "1.5 million"
        assert h.intwordover(123456) == "123 thousand"
        assert h.compactinteger(123456) == "123K"
        assert h.apnumber(3) == "three"
        assert h.ordinal(21) == "21st"
        assert h.boundednumber(150, 100) == "100+"
        assert h.times(5, {5: "five"}) == "five times"
        assert h.filesize(1536, 1) == "1.5 KB"
        assert h.number_format(1234.5678, 2) == "1,234.57"

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Humanizer().bytes_in_kb = 1000


class TestCustomDefaults:
    def test_separators(self, european):
        assert european.intcomma(1234567) == "1.234.567"
        assert european.formatnumber(1234.5) == "1.234,50"

    def test_shorten_threshold(self, european):
        assert european.intwordover(123456) == "123.456"
        assert european.compactinteger(1234567) == "1M"

    def test_explicit_threshold_wins(self, european):
        assert european.intwordover(123456, shorten_when_longer=5) == "123 thousand"

    def test_filesize_unit(self, european):
        assert european.filesize(1500, 1) == "1,5 KB"
        assert european.filesize(1536, 1, bytes_in_kb=1024) == "1,5 KB"

    def test_magnitude_words_use_decimal_point(self):
        h = Humanizer(decimal_point=",")
        assert h.intword(1_230_000, 2) == "1,23 million"
        assert h.intwordover(1_234_567, 2) == "1,23 million"
        assert h.compactinteger(1_500_000, 1) == "1,5M"


class TestFromConfig:
    def test_reads_config(self, monkeypatch):
        monkeypatch.setattr(cfg, "THOUSANDS_SEP", " ")
        monkeypatch.setattr(cfg, "BYTES_IN_KB", 1000)
        h = Humanizer.from_config()
        assert h.thousands_sep == " "
        assert h.intcomma(1234567) == "1 234 567"
        assert h.filesize(2000) == "2 KB"


class TestPackageApi:
    def test_exports(self):
        for name in humanizenumber.__all__:
            assert hasattr(humanizenumber, name)

    def test_version(self):
        assert humanizenumber.__version__ == cfg.APP_VERSION
