"""Human-readable file size formatting."""
from __future__ import annotations

from humanizenumber.utils.grouping import divide_exact, number_format
from humanizenumber.utils.numeric import (
    InvalidOptionError,
    Number,
    check_number,
    check_places,
    render,
    to_decimal,
)

SIZE_UNITS: tuple[tuple[int, str], ...] = ((4, "TB"), (3, "GB"), (2, "MB"), (1, "KB"))


def filesize(
    num_bytes: Number,
    decimal_places: int = 0,
    bytes_in_kb: int = 1024,
    decimal_point: str = ".",
    thousands_sep: str = ",",
) -> str:
    """Convert a byte count to a string like '13 KB', '4.1 MB' or '102 bytes'.

    bytes_in_kb selects binary (1024) or decimal (1000) units.  Negative
    counts are formatted by magnitude with the sign put back in front.
    """
    check_number(num_bytes, "num_bytes")
    check_places(decimal_places)
    if isinstance(bytes_in_kb, bool) or not isinstance(bytes_in_kb, int) or bytes_in_kb < 2:
        raise InvalidOptionError(f"bytes_in_kb must be an integer greater than 1, got {bytes_in_kb!r}")

    size = to_decimal(num_bytes).copy_abs()
    sign = "-" if num_bytes < 0 else ""

    for power, label in SIZE_UNITS:
        threshold = bytes_in_kb ** power
        if size >= threshold:
            formatted = number_format(divide_exact(size, threshold), decimal_places, decimal_point, thousands_sep)
            return f"{sign}{formatted} {label}"
    if size > 1:
        return f"{sign}{render(size)} bytes"
    if size == 1:
        return f"{sign}1 byte"
    return "0 bytes"
