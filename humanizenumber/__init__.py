"""humanizenumber — turn numbers into human-friendly strings."""
from __future__ import annotations

from humanizenumber.config import APP_VERSION as __version__
from humanizenumber.humanizer import Humanizer
from humanizenumber.number import (
    apnumber,
    boundednumber,
    compactinteger,
    formatnumber,
    intcomma,
    intword,
    intwordover,
    ordinal,
    times,
)
from humanizenumber.utils.grouping import number_format
from humanizenumber.utils.numeric import HumanizeError, InvalidOptionError, NotANumberError
from humanizenumber.utils.size_fmt import filesize

__all__ = [
    "Humanizer",
    "HumanizeError",
    "InvalidOptionError",
    "NotANumberError",
    "apnumber",
    "boundednumber",
    "compactinteger",
    "filesize",
    "formatnumber",
    "intcomma",
    "intword",
    "intwordover",
    "number_format",
    "ordinal",
    "times",
]
