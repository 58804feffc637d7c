"""Grouped-digit formatting: 1234567.891 -> '1,234,567.89'."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from humanizenumber.utils.numeric import Number, check_number, check_places, to_decimal


def round_half_up(value: Decimal, places: int) -> Decimal:
    """Round value to places decimals, halves away from zero."""
    with localcontext() as ctx:
        # quantize fails if the result needs more digits than the context allows
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def divide_exact(value: Decimal, divisor: int) -> Decimal:
    """value / divisor without rounding to the default 28 digits."""
    with localcontext() as ctx:
        # dividing by 2**a * 5**b needs at most max(a, b) extra digits
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + 4 * len(str(divisor)) + 2)
        return value / divisor


def number_format(
    number: Number,
    decimals: int = 0,
    decimal_point: str = ".",
    thousands_sep: str = ",",
) -> str:
    """
    Round number to decimals places and separate the integer digits into
    groups of three.  The minus sign stays in front of the first group and
    is dropped when the rounded value is zero.
    """
    check_number(number)
    check_places(decimals, "decimals")

    rounded = round_half_up(to_decimal(number), decimals)
    sign = "-" if rounded < 0 else ""
    whole, _, frac = f"{rounded.copy_abs():f}".partition(".")

    grouped = f"{int(whole):,}".replace(",", thousands_sep)
    if decimals:
        return f"{sign}{grouped}{decimal_point}{frac}"
    return f"{sign}{grouped}"
