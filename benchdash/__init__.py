"""Chart-ready time series from historical benchmark results."""

from .common.errors import InvalidUnitError, MalformedRangeError
from .models import (
    BenchmarkDocument,
    Commit,
    CommitAuthor,
    Measurement,
    Run,
    SeriesPoint,
    load_document,
    parse_document,
)
from .series import (
    dedupe_runs,
    group_benchmarks,
    group_benchmarks_by_job,
    normalize_units,
    parse_job_name,
)

__version__ = "0.1.0"

__all__ = [
    "BenchmarkDocument",
    "Commit",
    "CommitAuthor",
    "InvalidUnitError",
    "MalformedRangeError",
    "Measurement",
    "Run",
    "SeriesPoint",
    "dedupe_runs",
    "group_benchmarks",
    "group_benchmarks_by_job",
    "load_document",
    "normalize_units",
    "parse_document",
    "parse_job_name",
]
