"""Parsing and re-encoding of measurement error ranges.

A range is written as a two character glyph prefix (usually ``"± "``)
followed by a magnitude in the measurement's current time unit, e.g.
``"± 12.5"``.
"""

from dataclasses import dataclass

from .enums import TimeUnit, convert
from .errors import MalformedRangeError

PREFIX_LENGTH = 2


def format_magnitude(value: float) -> str:
    """Return the shortest text that round-trips ``value``, without a trailing ``.0``."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


@dataclass(frozen=True)
class ErrorRange:
    """An error margin split into its display prefix and numeric magnitude."""

    prefix: str
    magnitude: float

    @classmethod
    def parse(cls, text: str | None) -> "ErrorRange | None":
        """
        Parse a range string.

        Args:
            text: Raw range string, or None

        Returns:
            ErrorRange, or None when no range is present

        Raises:
            MalformedRangeError: If the text has no parseable magnitude
        """
        if not text:
            return None
        if len(text) <= PREFIX_LENGTH:
            raise MalformedRangeError(text)

        try:
            magnitude = float(text[PREFIX_LENGTH:])
        except ValueError:
            raise MalformedRangeError(text) from None

        return cls(prefix=text[:PREFIX_LENGTH], magnitude=magnitude)

    def rescaled(self, source: TimeUnit, target: TimeUnit) -> "ErrorRange":
        return ErrorRange(self.prefix, convert(self.magnitude, source, target))

    def encode(self) -> str:
        return f"{self.prefix}{format_magnitude(self.magnitude)}"

    def __str__(self) -> str:
        return self.encode()
