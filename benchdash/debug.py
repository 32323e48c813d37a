"""Debug and logging utilities for benchdash."""

import logging
import os

# Global debug state
_debug_enabled = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure logging for command line use."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    logging.getLogger("benchdash").setLevel(level)


def set_debug(enabled: bool) -> None:
    """Set global debug state and the matching log level."""
    global _debug_enabled
    _debug_enabled = enabled

    # Also set environment variable so nested invocations pick it up
    if enabled:
        os.environ["BENCHDASH_DEBUG"] = "1"
    else:
        os.environ.pop("BENCHDASH_DEBUG", None)

    setup_logging(logging.DEBUG if is_debug_enabled() else logging.WARNING)


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    global _debug_enabled

    # Check environment variable if not set via set_debug()
    if not _debug_enabled and os.getenv("BENCHDASH_DEBUG", "").lower() in (
        "1",
        "true",
        "yes",
    ):
        _debug_enabled = True

    return _debug_enabled
