"""Configuration management for the benchmark dashboard."""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator

from .common.enums import ImageFormat

# Fallback color palette for multiple job series
DEFAULT_PALETTE = [
    "#1f77b4",  # blue
    "#ff7f0e",  # orange
    "#2ca02c",  # green
    "#d62728",  # red
    "#9467bd",  # purple
    "#8c564b",  # brown
    "#e377c2",  # pink
    "#7f7f7f",  # gray
    "#bcbd22",  # olive
    "#17becf",  # cyan
]

_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")


def _validate_color(v: str) -> str:
    if not _COLOR_PATTERN.match(v):
        raise ValueError(f"Color '{v}' must be a hex color such as '#1f77b4'")
    return v


class ChartColors(BaseModel):
    """Colors of the time and memory traces on single-series charts."""

    time: str = "#0d6efd"
    memory: str = "#e83e8c"

    @field_validator("time", "memory")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Ensure colors are hex colors."""
        return _validate_color(v)


class DashboardConfig(BaseModel):
    """Main dashboard configuration."""

    title: str = "Benchmarks"
    repository: str | None = None
    branch: str | None = None
    image_format: str = ImageFormat.PNG.value
    error_bars: bool = False
    group_jobs: bool = False  # Plot jobs of one benchmark on a shared chart
    colors: ChartColors = ChartColors()
    palette: list[str] = DEFAULT_PALETTE
    suites: list[str] | None = None  # Optional allow-list of suites to chart
    output_path: str = "results/dashboard"
    benchmark_file_name: str = "data.json"

    @field_validator("image_format")
    @classmethod
    def validate_image_format(cls, v: str) -> str:
        """Ensure image format is supported."""
        v = v.lower()
        if v not in ImageFormat.valid_values():
            raise ValueError(
                f"Unknown image_format '{v}'. Supported: {', '.join(sorted(ImageFormat.valid_values()))}"
            )
        return v

    @field_validator("palette")
    @classmethod
    def validate_palette(cls, v: list[str]) -> list[str]:
        """Ensure the palette has at least one valid color."""
        if len(v) < 1:
            raise ValueError("palette must contain at least one color")
        return [_validate_color(color) for color in v]

    @field_validator("repository")
    @classmethod
    def validate_repository(cls, v: str | None) -> str | None:
        """Ensure repository is given as owner/name."""
        if v is None:
            return v
        if not re.match(r"^[\w.-]+/[\w.-]+$", v):
            raise ValueError(f"repository '{v}' must be in the form 'owner/name'")
        return v


def default_config() -> dict[str, Any]:
    """Return the configuration used when no file is given."""
    return DashboardConfig().model_dump()


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and validate dashboard configuration from YAML file."""
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        raw_config = yaml.safe_load(f) or {}

    if not isinstance(raw_config, dict):
        raise ValueError(
            f"Invalid configuration: expected a mapping, got {type(raw_config).__name__}"
        )

    # Expand environment variables in config
    raw_config = _expand_env_vars(raw_config)

    # Validate using Pydantic model
    try:
        validated_config = DashboardConfig(**raw_config)
        result: dict[str, Any] = validated_config.model_dump()
        return result
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration."""
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj
