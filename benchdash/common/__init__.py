"""Common units, errors and helpers shared across benchdash."""

from .enums import ChartKind, ImageFormat, MemoryUnit, TimeUnit, convert
from .errors import InvalidUnitError, MalformedRangeError
from .ranges import ErrorRange, format_magnitude

__all__ = [
    "ChartKind",
    "ErrorRange",
    "ImageFormat",
    "InvalidUnitError",
    "MalformedRangeError",
    "MemoryUnit",
    "TimeUnit",
    "convert",
    "format_magnitude",
]
