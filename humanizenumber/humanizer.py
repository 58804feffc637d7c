"""Humanizer — the formatting functions bound to a fixed set of defaults."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import humanizenumber.config as cfg
from humanizenumber import number
from humanizenumber.utils.grouping import number_format
from humanizenumber.utils.numeric import Number
from humanizenumber.utils.size_fmt import filesize


@dataclass(frozen=True)
class Humanizer:
    decimal_point: str = "."
    thousands_sep: str = ","
    bytes_in_kb: int = 1024
    shorten_when_longer: int = 5

    @classmethod
    def from_config(cls) -> "Humanizer":
        return cls(
            decimal_point=cfg.DECIMAL_POINT,
            thousands_sep=cfg.THOUSANDS_SEP,
            bytes_in_kb=cfg.BYTES_IN_KB,
            shorten_when_longer=cfg.SHORTEN_WHEN_LONGER,
        )

    def number_format(self, value: Number, decimals: int = 0) -> str:
        return number_format(value, decimals, self.decimal_point, self.thousands_sep)

    def intcomma(self, value: Number) -> str:
        return number.intcomma(value, self.thousands_sep)

    def formatnumber(self, value: Number, decimal_places: int = 2) -> str:
        return number.formatnumber(value, decimal_places, self.decimal_point, self.thousands_sep)

    def intword(self, value: Number, decimal_places: int = 0, compact: bool = False) -> str:
        return number.intword(value, decimal_places, compact, self.decimal_point)

    def intwordover(
        self,
        value: Number,
        decimal_places: int = 0,
        shorten_when_longer: int | None = None,
        compact: bool = False,
    ) -> str:
        if shorten_when_longer is None:
            shorten_when_longer = self.shorten_when_longer
        return number.intwordover(
            value, decimal_places, shorten_when_longer, compact, self.thousands_sep, self.decimal_point
        )

    def compactinteger(
        self,
        value: Number,
        decimal_places: int = 0,
        shorten_when_longer: int | None = None,
    ) -> str:
        return self.intwordover(value, decimal_places, shorten_when_longer, compact=True)

    def apnumber(self, value: Number) -> str:
        return number.apnumber(value)

    def ordinal(self, value: Number) -> str:
        return number.ordinal(value)

    def boundednumber(self, value: Number, max_value: Number) -> str:
        return number.boundednumber(value, max_value)

    def times(self, count: Number, overrides: Mapping[Number, object] | None = None) -> str:
        return number.times(count, overrides)

    def filesize(
        self,
        num_bytes: Number,
        decimal_places: int = 0,
        bytes_in_kb: int | None = None,
    ) -> str:
        if bytes_in_kb is None:
            bytes_in_kb = self.bytes_in_kb
        return filesize(
            num_bytes,
            decimal_places,
            bytes_in_kb,
            self.decimal_point,
            self.thousands_sep,
        )
