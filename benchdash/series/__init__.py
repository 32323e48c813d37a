"""Turn benchmark runs into chart-ready series."""

from .assembler import (
    SeriesMap,
    assemble_series,
    group_benchmarks,
    next_series_key,
)
from .dedup import dedupe_runs
from .jobs import (
    DEFAULT_JOB,
    JobSeriesMap,
    group_benchmarks_by_job,
    group_by_job,
    parse_job_name,
)
from .normalize import SCALE_LIMIT, normalize_units

__all__ = [
    "DEFAULT_JOB",
    "JobSeriesMap",
    "SCALE_LIMIT",
    "SeriesMap",
    "assemble_series",
    "dedupe_runs",
    "group_benchmarks",
    "group_benchmarks_by_job",
    "group_by_job",
    "next_series_key",
    "normalize_units",
    "parse_job_name",
]
