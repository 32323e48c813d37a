"""Collapse repeated submissions for the same commit."""

from collections.abc import Iterable

from ..models import Run


def dedupe_runs(runs: Iterable[Run]) -> list[Run]:
    """
    Drop runs whose commit has already been seen.

    Args:
        runs: Runs in submission order

    Returns:
        Runs with unique commit SHAs, first occurrence kept, order preserved
    """
    seen: set[str] = set()
    unique: list[Run] = []

    for run in runs:
        if run.commit.sha in seen:
            continue
        seen.add(run.commit.sha)
        unique.append(run)

    return unique
