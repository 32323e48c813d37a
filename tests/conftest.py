"""Shared builders for benchmark runs used across the test suite."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from benchdash.models import Commit, CommitAuthor, Measurement, Run, SeriesPoint

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_commit(sha: str, minutes: int = 0, message: str = "Commit") -> Commit:
    return Commit(
        sha=sha,
        message=message,
        timestamp=BASE_TIME + timedelta(minutes=minutes),
        author=CommitAuthor(username="alice"),
        url=f"https://github.com/acme/widgets/commit/{sha}",
    )


def make_measurement(name: str, value: float, **kwargs: Any) -> Measurement:
    return Measurement(name=name, value=value, **kwargs)


def make_run(
    sha: str, minutes: int, measurements: list[Measurement], run_minutes: int | None = None
) -> Run:
    """Build a run whose timestamp defaults to the commit timestamp."""
    commit = make_commit(sha, minutes)
    offset = minutes if run_minutes is None else run_minutes
    return Run(
        commit=commit,
        timestamp=BASE_TIME + timedelta(minutes=offset),
        measurements=measurements,
    )


def make_point(value: float, sha: str = "abc1234", **kwargs: Any) -> SeriesPoint:
    return SeriesPoint(
        commit=make_commit(sha), result=make_measurement("bench", value, **kwargs)
    )


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """A benchmark document in wire form with two suites."""
    return {
        "lastUpdated": "2024-01-02T10:00:00Z",
        "repoUrl": "https://github.com/acme/widgets",
        "entries": {
            "Core": [
                {
                    "commit": {
                        "id": "aaaa111",
                        "message": "First",
                        "timestamp": "2024-01-01T10:00:00Z",
                        "author": {"username": "alice"},
                        "url": "https://github.com/acme/widgets/commit/aaaa111",
                    },
                    "timestamp": "2024-01-01T10:05:00Z",
                    "benchmarks": [
                        {"name": "Sort", "value": 800, "unit": "ns", "range": "± 40"},
                        {
                            "name": "Parse[Short]",
                            "value": 1.5,
                            "unit": "ms",
                            "bytesAllocated": 2048,
                            "memoryUnit": "B",
                        },
                        {"name": "Parse[Long]", "value": 3.0, "unit": "ms"},
                    ],
                },
                {
                    "commit": {
                        "id": "bbbb222",
                        "message": "Second",
                        "timestamp": "2024-01-02T10:00:00Z",
                        "author": {"username": "bob"},
                        "url": "https://github.com/acme/widgets/commit/bbbb222",
                    },
                    "timestamp": "2024-01-02T10:05:00Z",
                    "benchmarks": [
                        {"name": "Sort", "value": 900, "unit": "ns", "range": "± 45"},
                        {
                            "name": "Parse[Short]",
                            "value": 1.4,
                            "unit": "ms",
                            "bytesAllocated": 1024,
                            "memoryUnit": "B",
                        },
                        {"name": "Parse[Long]", "value": 2.9, "unit": "ms"},
                    ],
                },
            ],
            "Extra": [
                {
                    "commit": {
                        "id": "cccc333",
                        "timestamp": "2024-01-01T10:00:00Z",
                        "author": {"username": "carol"},
                    },
                    "timestamp": "2024-01-01T10:05:00Z",
                    "benchmarks": [{"name": "Hash", "value": 12.0}],
                }
            ],
        },
    }
