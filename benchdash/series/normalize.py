"""Rescale the points of one chart to a single shared time and memory unit."""

import logging
import math
from collections.abc import Sequence

from ..common.enums import UNIT_STEP, MemoryUnit, TimeUnit, convert
from ..common.ranges import ErrorRange
from ..models import SeriesPoint

logger = logging.getLogger(__name__)

# Scale up to the next unit while the smallest value is at least this large
SCALE_LIMIT = 700.0


def _minimum(values: list[float]) -> float | None:
    finite = [v for v in values if not math.isnan(v)]
    return min(finite) if finite else None


def _scale_steps(minimum: float | None, max_steps: int) -> int:
    """Return how many times to step up the unit ladder for a canonical minimum."""
    steps = 0
    if minimum is None:
        return steps

    while steps < max_steps and minimum >= SCALE_LIMIT:
        minimum /= UNIT_STEP
        steps += 1

    return steps


def _normalize_time(
    points: Sequence[SeriesPoint],
    sources: list[TimeUnit],
    ranges: list[ErrorRange | None],
) -> TimeUnit:
    base = TimeUnit.base()
    canonical = [
        convert(p.result.value, source, base) for p, source in zip(points, sources)
    ]
    ladder = TimeUnit.ladder()
    steps = _scale_steps(_minimum(canonical), len(ladder))
    target = ladder[steps - 1] if steps else base

    for point, source, error_range in zip(points, sources, ranges):
        result = point.result
        result.value = convert(result.value, source, target)
        if error_range is not None:
            result.range = error_range.rescaled(source, target).encode()
        result.unit = target.value

    return target


def _normalize_memory(
    points: Sequence[SeriesPoint], sources: list[MemoryUnit | None]
) -> MemoryUnit:
    base = MemoryUnit.base()
    canonical = [
        convert(p.result.bytes_allocated, source, base)
        for p, source in zip(points, sources)
        if p.result.bytes_allocated is not None and source is not None
    ]
    ladder = MemoryUnit.ladder()
    steps = _scale_steps(_minimum(canonical), len(ladder))
    target = ladder[steps - 1] if steps else base

    for point, source in zip(points, sources):
        result = point.result
        if result.bytes_allocated is not None and source is not None:
            result.bytes_allocated = convert(result.bytes_allocated, source, target)
        # Points without allocations still share the axis unit
        result.memory_unit = target.value

    return target


def normalize_units(points: Sequence[SeriesPoint]) -> Sequence[SeriesPoint]:
    """
    Rewrite the points of one chart so they share a time unit and a memory unit.

    Every value is read in its own unit, then the whole set is moved up
    the unit ladder one step at a time while its smallest value is at
    least ``SCALE_LIMIT``. The memory axis is only touched when at least
    one point carries allocated bytes; then every point, including those
    without allocations, gets the final memory unit rather than only the
    points that carry bytes. All units and ranges are validated before any
    point is modified.

    Args:
        points: Points destined for one chart, updated in place

    Returns:
        The same points

    Raises:
        InvalidUnitError: If a time or memory unit is not recognized
        MalformedRangeError: If a range has no parseable magnitude
    """
    if not points:
        return points

    time_sources = [TimeUnit.parse(p.result.unit) for p in points]
    ranges = [ErrorRange.parse(p.result.range) for p in points]

    has_memory = any(p.result.bytes_allocated is not None for p in points)
    memory_sources: list[MemoryUnit | None] = [
        MemoryUnit.parse(p.result.memory_unit)
        if p.result.bytes_allocated is not None
        else None
        for p in points
    ]

    time_unit = _normalize_time(points, time_sources, ranges)
    if has_memory:
        memory_unit = _normalize_memory(points, memory_sources)
        logger.debug(
            f"Normalized {len(points)} points to {time_unit} and {memory_unit}"
        )
    else:
        logger.debug(f"Normalized {len(points)} points to {time_unit}")

    return points
