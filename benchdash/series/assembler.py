"""Group benchmark points into one series per (possibly renamed) benchmark name."""

import logging
import re
from collections.abc import Iterable
from datetime import datetime

from ..models import Run, SeriesPoint
from .dedup import dedupe_runs
from .normalize import normalize_units

logger = logging.getLogger(__name__)

SeriesMap = dict[str, list[SeriesPoint]]

_SUFFIX_PATTERN = re.compile(r"(.*?)\[(\d+)\]", re.DOTALL)


def next_series_key(key: str) -> str:
    """
    Return the key to try after ``key`` collided.

    ``Name`` becomes ``Name[1]`` and ``Name[n]`` becomes ``Name[n+1]``.
    Bracketed suffixes that are not integers are kept, so ``Name[Job]``
    becomes ``Name[Job][1]``.
    """
    match = _SUFFIX_PATTERN.fullmatch(key)
    if match is None:
        return f"{key}[1]"

    base, number = match.groups()
    return f"{base}[{int(number) + 1}]"


class SeriesKeyAllocator:
    """Assigns each point a series key that is free at the point's timestamp.

    The first point for a name and timestamp keeps the bare name; later
    ones walk the ``next_series_key`` chain to the first free key. The
    last key handed out for each (name, timestamp) is remembered so that
    repeated collisions resume the walk rather than restarting it, since
    keys passed over stay occupied for the rest of the pass.
    """

    def __init__(self) -> None:
        self.groups: dict[str, dict[datetime, SeriesPoint]] = {}
        self._resume: dict[tuple[str, datetime], str] = {}

    def _is_occupied(self, key: str, timestamp: datetime) -> bool:
        group = self.groups.get(key)
        return group is not None and timestamp in group

    def insert(self, name: str, timestamp: datetime, point: SeriesPoint) -> str:
        """Store a point and return the key it was stored under."""
        key = self._resume.get((name, timestamp), name)

        while self._is_occupied(key, timestamp):
            key = next_series_key(key)

        if key != name:
            logger.debug(f"Renamed '{name}' to '{key}' at {timestamp.isoformat()}")

        self.groups.setdefault(key, {})[timestamp] = point
        self._resume[(name, timestamp)] = key
        return key

    def series(self) -> SeriesMap:
        """Return each key's points ordered by timestamp."""
        return {
            key: [group[timestamp] for timestamp in sorted(group)]
            for key, group in self.groups.items()
        }


def assemble_series(runs: Iterable[Run]) -> SeriesMap:
    """
    Build one timestamp-ordered series per benchmark name.

    Runs should already be deduplicated. Measurements sharing a name and a
    timestamp are renamed ``Name[1]``, ``Name[2]``, ... in the order they
    appear, which assumes runs list same-named measurements in a stable
    order. Points hold copies of the measurements, so the runs are left
    untouched.

    Args:
        runs: Benchmark runs

    Returns:
        Mapping of series key to points, keys in first-seen order
    """
    allocator = SeriesKeyAllocator()

    for run in runs:
        for measurement in run.measurements:
            point = SeriesPoint(commit=run.commit, result=measurement.model_copy())
            allocator.insert(measurement.name, run.timestamp, point)

    return allocator.series()


def group_benchmarks(runs: Iterable[Run]) -> SeriesMap:
    """
    Group benchmark runs into their benchmark series with normalized units.

    Args:
        runs: Benchmark runs, possibly with repeated commits

    Returns:
        Mapping of series key to points sharing one time and memory unit

    Raises:
        InvalidUnitError: If a measurement uses an unknown unit
        MalformedRangeError: If a measurement range cannot be parsed
    """
    grouped = assemble_series(dedupe_runs(runs))

    for points in grouped.values():
        normalize_units(points)

    return grouped
