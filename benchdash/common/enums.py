"""Common enums used across benchdash."""

from enum import Enum

from .errors import InvalidUnitError

# Each unit ladder steps by powers of this factor
UNIT_STEP = 1000


class TimeUnit(str, Enum):
    """Units a measurement's time value can be expressed in.

    Members are declared smallest first; ``exponent`` is the power of
    ``UNIT_STEP`` relative to nanoseconds.
    """

    NANOSECONDS = "ns"
    MICROSECONDS = "µs"
    MILLISECONDS = "ms"
    SECONDS = "s"

    @classmethod
    def parse(cls, value: str | None) -> "TimeUnit":
        """Return the unit for a wire token, where ``None`` means nanoseconds."""
        if value is None:
            return cls.NANOSECONDS
        try:
            return cls(value)
        except ValueError:
            raise InvalidUnitError("time", value) from None

    @classmethod
    def base(cls) -> "TimeUnit":
        return cls.NANOSECONDS

    @classmethod
    def ladder(cls) -> list["TimeUnit"]:
        """Return the units above the base unit, smallest first."""
        return [unit for unit in cls if unit.exponent > 0]

    @property
    def exponent(self) -> int:
        return TIME_EXPONENTS[self]

    def __str__(self) -> str:
        return self.value


class MemoryUnit(str, Enum):
    """Units a measurement's allocated bytes can be expressed in."""

    BYTES = "B"
    KILOBYTES = "KB"
    MEGABYTES = "MB"
    GIGABYTES = "GB"
    TERABYTES = "TB"

    @classmethod
    def parse(cls, value: str | None) -> "MemoryUnit":
        """Return the unit for a wire token, where ``None`` means bytes."""
        if value is None:
            return cls.BYTES
        try:
            return cls(value)
        except ValueError:
            raise InvalidUnitError("memory", value) from None

    @classmethod
    def base(cls) -> "MemoryUnit":
        return cls.BYTES

    @classmethod
    def ladder(cls) -> list["MemoryUnit"]:
        """Return the units above the base unit, smallest first."""
        return [unit for unit in cls if unit.exponent > 0]

    @property
    def exponent(self) -> int:
        return MEMORY_EXPONENTS[self]

    def __str__(self) -> str:
        return self.value


TIME_EXPONENTS: dict[TimeUnit, int] = {
    TimeUnit.NANOSECONDS: 0,
    TimeUnit.MICROSECONDS: 1,
    TimeUnit.MILLISECONDS: 2,
    TimeUnit.SECONDS: 3,
}

MEMORY_EXPONENTS: dict[MemoryUnit, int] = {
    MemoryUnit.BYTES: 0,
    MemoryUnit.KILOBYTES: 1,
    MemoryUnit.MEGABYTES: 2,
    MemoryUnit.GIGABYTES: 3,
    MemoryUnit.TERABYTES: 4,
}


def convert(
    value: float, source: TimeUnit | MemoryUnit, target: TimeUnit | MemoryUnit
) -> float:
    """Convert a magnitude between two units of the same ladder.

    The exponent difference is applied as a single exact power of
    ``UNIT_STEP``, so converting to the unit a value is already in
    returns it unchanged.
    """
    if type(source) is not type(target):
        raise ValueError(f"Cannot convert between {source!r} and {target!r}")

    shift = source.exponent - target.exponent
    if shift > 0:
        return value * UNIT_STEP**shift
    if shift < 0:
        return value / UNIT_STEP**-shift
    return value


class ChartKind(str, Enum):
    """Axis a multi-series chart plots."""

    TIME = "time"
    MEMORY = "memory"

    def __str__(self) -> str:
        return self.value


class ImageFormat(str, Enum):
    """Static image formats charts can be exported to."""

    PNG = "png"
    JPEG = "jpeg"
    SVG = "svg"
    WEBP = "webp"

    @classmethod
    def valid_values(cls) -> set[str]:
        """Return all valid format values as strings."""
        return {f.value for f in cls}

    def __str__(self) -> str:
        return self.value
