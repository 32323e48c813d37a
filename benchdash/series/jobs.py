"""Group benchmark points by logical benchmark and by job."""

import logging
import re
from collections.abc import Iterable
from datetime import datetime

from ..models import Run, SeriesPoint
from .dedup import dedupe_runs
from .normalize import normalize_units

logger = logging.getLogger(__name__)

DEFAULT_JOB = "default"

JobSeriesMap = dict[str, dict[str, list[SeriesPoint]]]

_JOB_PATTERN = re.compile(r"(?P<base>.*?)(?:\[(?P<job>.*?)\])?", re.DOTALL)


def parse_job_name(name: str) -> tuple[str, str]:
    """
    Split a benchmark name into its base name and job.

    Examples:
        >>> parse_job_name("Sort")
        ('Sort', 'default')
        >>> parse_job_name("Sort[ShortRun]")
        ('Sort', 'ShortRun')
    """
    match = _JOB_PATTERN.fullmatch(name)
    if match is None:
        return name, DEFAULT_JOB

    job = match.group("job")
    return match.group("base"), DEFAULT_JOB if job is None else job


def group_by_job(runs: Iterable[Run]) -> JobSeriesMap:
    """
    Build one timestamp-ordered series per base name and job.

    A later point for the same base name, job and timestamp replaces the
    earlier one.

    Args:
        runs: Benchmark runs, already deduplicated

    Returns:
        Mapping of base name to job name to points, in first-seen order
    """
    grouped: dict[str, dict[str, dict[datetime, SeriesPoint]]] = {}

    for run in runs:
        for measurement in run.measurements:
            base_name, job = parse_job_name(measurement.name)
            results = grouped.setdefault(base_name, {}).setdefault(job, {})

            if run.timestamp in results:
                logger.debug(
                    f"Replacing '{measurement.name}' at {run.timestamp.isoformat()}"
                )

            results[run.timestamp] = SeriesPoint(
                commit=run.commit, result=measurement.model_copy()
            )

    return {
        base_name: {
            job: [results[timestamp] for timestamp in sorted(results)]
            for job, results in jobs.items()
        }
        for base_name, jobs in grouped.items()
    }


def group_benchmarks_by_job(runs: Iterable[Run]) -> JobSeriesMap:
    """
    Group benchmark runs by base benchmark name and then by job.

    All jobs of one base name are normalized together so that they can
    share a chart axis.

    Args:
        runs: Benchmark runs, possibly with repeated commits

    Returns:
        Mapping of base name to job name to points

    Raises:
        InvalidUnitError: If a measurement uses an unknown unit
        MalformedRangeError: If a measurement range cannot be parsed
    """
    grouped = group_by_job(dedupe_runs(runs))

    for jobs in grouped.values():
        all_points = [point for points in jobs.values() for point in points]
        normalize_units(all_points)

    return grouped
