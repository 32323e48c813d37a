"""Benchmark data model: runs, measurements and the points series are built from."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class _WireModel(BaseModel):
    """Base for models read from and written to camelCase JSON documents."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _as_instant(value: datetime | None) -> datetime | None:
    """Read timestamps without an offset as UTC so that all of them compare."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class CommitAuthor(_WireModel):
    username: str


class Commit(_WireModel):
    """The source-code commit a run was measured against."""

    sha: str = Field(validation_alias=AliasChoices("sha", "id"))
    message: str = ""
    timestamp: datetime
    author: CommitAuthor
    url: str = ""

    timestamp_is_instant = field_validator("timestamp")(_as_instant)


class Measurement(_WireModel):
    """A single named benchmark result within a run.

    Units are kept as raw tokens so that unrecognized units are reported
    when the measurement is normalized rather than when it is loaded.
    """

    name: str
    value: float
    unit: str | None = None
    range: str | None = None
    bytes_allocated: float | None = None
    memory_unit: str | None = None

    @field_validator("range")
    @classmethod
    def empty_range_is_absent(cls, v: str | None) -> str | None:
        """Treat an empty range string as no range."""
        return v or None


class Run(_WireModel):
    """One submission of benchmark measurements for a commit."""

    commit: Commit
    timestamp: datetime
    measurements: list[Measurement] = Field(
        default_factory=list,
        validation_alias=AliasChoices("benchmarks", "measurements"),
    )

    timestamp_is_instant = field_validator("timestamp")(_as_instant)


class SeriesPoint(_WireModel):
    """One measurement paired with the commit it belongs to."""

    commit: Commit
    result: Measurement


class BenchmarkDocument(_WireModel):
    """All benchmark runs recorded for one repository branch, grouped by suite."""

    last_updated: datetime | None = None
    repo_url: str | None = None
    suites: dict[str, list[Run]] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("entries", "suites"),
    )

    last_updated_is_instant = field_validator("last_updated")(_as_instant)


def parse_document(data: Any, default_suite: str = "default") -> BenchmarkDocument:
    """
    Build a benchmark document from already-deserialized JSON.

    Args:
        data: Either a document mapping or a bare list of runs
        default_suite: Suite name used when ``data`` is a bare list

    Returns:
        Validated BenchmarkDocument
    """
    if isinstance(data, list):
        return BenchmarkDocument(suites={default_suite: data})
    return BenchmarkDocument.model_validate(data)


def load_document(path: str | Path) -> BenchmarkDocument:
    """Load a benchmark document from a JSON file."""
    document_path = Path(path)

    if not document_path.exists():
        raise FileNotFoundError(f"Benchmark document not found: {document_path}")

    with open(document_path, encoding="utf-8") as f:
        data = json.load(f)

    document = parse_document(data, default_suite=document_path.stem)
    logger.info(
        f"Loaded {sum(len(runs) for runs in document.suites.values())} runs "
        f"in {len(document.suites)} suites from {document_path}"
    )
    return document
