"""Utility functions for benchdash."""

import json
import logging
import time
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class Timer:
    """Measure how long a block takes and log it at DEBUG."""

    def __init__(self, description: str = "Operation"):
        self.description = description
        self.elapsed = 0.0
        self._started = 0.0

    def __enter__(self) -> "Timer":
        self._started = time.perf_counter()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.elapsed = time.perf_counter() - self._started
        logger.debug(f"{self.description} took {self.elapsed:.2f}s")


def ensure_directory(path: str | Path) -> Path:
    """Ensure a directory exists, creating it if necessary."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def save_json(data: Any, path: str | Path, indent: int = 2) -> None:
    """Save data as JSON file."""
    filepath = Path(path)
    ensure_directory(filepath.parent)

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, default=str, ensure_ascii=False)


def safe_filename(name: str) -> str:
    """Replace characters that are awkward in file names with underscores."""
    for character in (" ", "#", ":", ";", "/", "\\"):
        name = name.replace(character, "_")
    return name
