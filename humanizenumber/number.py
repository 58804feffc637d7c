"""Number humanization — magnitude words, AP numbers, ordinals, occurrence counts."""
from __future__ import annotations

import logging
from collections.abc import Mapping

from humanizenumber.utils.grouping import divide_exact, number_format, round_half_up
from humanizenumber.utils.numeric import (
    InvalidOptionError,
    Number,
    check_number,
    check_places,
    is_integral,
    render,
    to_decimal,
    trim_decimal,
)

logger = logging.getLogger(__name__)

# ── Tables ────────────────────────────────────────────────────────────────────

MAGNITUDES: tuple[tuple[int, str], ...] = (
    (12, "trillion"),
    (9, "billion"),
    (6, "million"),
    (3, "thousand"),
    (0, ""),
)

ABBREVIATIONS: tuple[tuple[int, str], ...] = (
    (12, "T"),
    (9, "B"),
    (6, "M"),
    (3, "K"),
    (0, ""),
)

AP_WORDS: tuple[str, ...] = (
    "zero", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)

ORDINAL_SUFFIXES: tuple[str, ...] = ("th", "st", "nd", "rd", "th", "th", "th", "th", "th", "th")


# ── Grouped digits ────────────────────────────────────────────────────────────

def intcomma(number: Number, thousands_sep: str = ",") -> str:
    """Converts an integer to a string containing commas every three digits."""
    return number_format(number, 0, ".", thousands_sep)


def formatnumber(
    number: Number,
    decimal_places: int = 2,
    decimal_point: str = ".",
    thousands_sep: str = ",",
) -> str:
    """Formats a number with grouped digits and two decimals: 1234.5 -> '1,234.50'."""
    return number_format(number, decimal_places, decimal_point, thousands_sep)


# ── Magnitude words ───────────────────────────────────────────────────────────

def intword(
    number: Number,
    decimal_places: int = 0,
    compact: bool = False,
    decimal_point: str = ".",
) -> str:
    """
    Converts a large number to a friendly text representation:
    1500000 -> '2 million', or with compact=True '2M'.

    The first table entry whose power of ten the magnitude reaches wins.
    Magnitudes below 1 match nothing and come back in plain form.
    """
    check_number(number)
    check_places(decimal_places)

    table, spacer = (ABBREVIATIONS, "") if compact else (MAGNITUDES, " ")
    value = to_decimal(number)
    magnitude = value.copy_abs()
    sign = "-" if value < 0 else ""

    for exponent, suffix in table:
        if magnitude >= 10 ** exponent:
            scaled = round_half_up(divide_exact(magnitude, 10 ** exponent), decimal_places)
            text = trim_decimal(scaled).replace(".", decimal_point)
            if not suffix:
                return f"{sign}{text}"
            return f"{sign}{text}{spacer}{suffix}"
    return render(number).replace(".", decimal_point)


def intwordover(
    number: Number,
    decimal_places: int = 0,
    shorten_when_longer: int = 5,
    compact: bool = False,
    thousands_sep: str = ",",
    decimal_point: str = ".",
) -> str:
    """
    Like intword, but only when the comma-grouped form is longer than
    shorten_when_longer characters; shorter numbers keep full precision.
    decimal_places applies to the shortened form only.
    """
    check_places(shorten_when_longer, "shorten_when_longer")
    grouped = number_format(number, 0, decimal_point, thousands_sep)
    if len(grouped) <= shorten_when_longer:
        return grouped
    logger.debug("Shortening %s (%d chars > %d)", grouped, len(grouped), shorten_when_longer)
    return intword(number, decimal_places, compact, decimal_point)


def compactinteger(
    number: Number,
    decimal_places: int = 0,
    shorten_when_longer: int = 5,
    thousands_sep: str = ",",
    decimal_point: str = ".",
) -> str:
    """Converts an integer into a compact representation: 123456 -> '123K'."""
    return intwordover(number, decimal_places, shorten_when_longer, True, thousands_sep, decimal_point)


# ── Words and suffixes ────────────────────────────────────────────────────────

def apnumber(number: Number) -> str:
    """Return AP formatted numbers, use words for numbers less than 10."""
    check_number(number)
    if 0 <= number <= 9 and is_integral(number):
        return AP_WORDS[int(number)]
    return render(number)


def ordinal(number: Number) -> str:
    """Converts an integer to its ordinal as a string: 1 -> '1st', 112 -> '112th'."""
    check_number(number)
    if not is_integral(number):
        raise InvalidOptionError(f"ordinal needs a whole number, got {number!r}")

    value = int(number)
    last_two = abs(value) % 100
    suffix = "th" if 11 <= last_two <= 13 else ORDINAL_SUFFIXES[abs(value) % 10]
    return f"{value}{suffix}"


def boundednumber(value: Number, max_value: Number) -> str:
    """Bounds a value from above: (150, 100) -> '100+'."""
    check_number(value, "value")
    check_number(max_value, "max_value")
    if value > max_value:
        return f"{render(max_value)}+"
    return render(value)


def times(count: Number, overrides: Mapping[Number, object] | None = None) -> str:
    """
    Interprets numbers as occurrences: never, once, twice, '5 times'.

    overrides maps counts to replacement text for the '<n> times' form.
    Counts 0, 1 and 2 always use their words, even when overridden.
    """
    check_number(count, "count")
    overrides = overrides or {}
    fallback = str(overrides[count]) if count in overrides else render(count)

    if count == 0:
        return "never"
    if count == 1:
        return "once"
    if count == 2:
        return "twice"
    return f"{fallback} times"
