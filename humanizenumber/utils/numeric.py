"""Input validation and plain rendering shared by all formatters."""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Union

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal]


class HumanizeError(Exception):
    pass


class NotANumberError(HumanizeError, TypeError):
    pass


class InvalidOptionError(HumanizeError, ValueError):
    pass


def check_number(value: object, name: str = "number") -> Number:
    """
    Return value unchanged if it is an int, float or Decimal.
    Raises NotANumberError for anything else (bool included) and
    InvalidOptionError for NaN or infinity.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        logger.debug("Rejected %s=%r (%s)", name, value, type(value).__name__)
        raise NotANumberError(f"{name} must be a number, got {type(value).__name__}: {value!r}")
    if isinstance(value, (float, Decimal)) and not _is_finite(value):
        raise InvalidOptionError(f"{name} must be finite, got {value!r}")
    return value


def check_places(value: object, name: str = "decimal_places") -> int:
    """Decimal-place counts are non-negative ints."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidOptionError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def to_decimal(value: Number) -> Decimal:
    """Convert to Decimal; floats go through str() so 0.1 stays 0.1."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def is_integral(value: Number) -> bool:
    if isinstance(value, int):
        return True
    return to_decimal(value) == to_decimal(value).to_integral_value()


def trim_decimal(value: Decimal) -> str:
    """Fixed-point string of value without trailing fractional zeros."""
    text = f"{value:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def render(value: Number) -> str:
    """
    Plain string form of a number: ints as-is, integral floats and
    Decimals without the fraction (3.0 -> '3'), other floats via str().
    """
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    return trim_decimal(value)


def _is_finite(value: float | Decimal) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    return value not in (float("inf"), float("-inf")) and value == value
