"""Table generation and formatting for grouped benchmark series."""

from typing import Any

import pandas as pd
from tabulate import tabulate

from ..models import SeriesPoint
from ..series import JobSeriesMap, SeriesMap

SERIES_FRAME_COLUMNS = [
    "sha",
    "timestamp",
    "author",
    "value",
    "unit",
    "range",
    "bytes_allocated",
    "memory_unit",
]


def series_frame(points: list[SeriesPoint]) -> pd.DataFrame:
    """
    Flatten the points of one series into a DataFrame, one row per commit.

    Args:
        points: Points of a series

    Returns:
        DataFrame with SERIES_FRAME_COLUMNS
    """
    rows = [
        {
            "sha": p.commit.sha,
            "timestamp": p.commit.timestamp,
            "author": p.commit.author.username,
            "value": p.result.value,
            "unit": p.result.unit,
            "range": p.result.range,
            "bytes_allocated": p.result.bytes_allocated,
            "memory_unit": p.result.memory_unit,
        }
        for p in points
    ]
    return pd.DataFrame(rows, columns=SERIES_FRAME_COLUMNS)


def _summary_row(points: list[SeriesPoint]) -> dict[str, Any]:
    df = series_frame(points)
    memory = df["bytes_allocated"].dropna()

    return {
        "points": len(df),
        "unit": df["unit"].iloc[0] if not df.empty else None,
        "latest": round(df["value"].iloc[-1], 2) if not df.empty else None,
        "min": round(df["value"].min(), 2) if not df.empty else None,
        "max": round(df["value"].max(), 2) if not df.empty else None,
        "memory_unit": df["memory_unit"].iloc[0] if not memory.empty else None,
        "latest_memory": round(memory.iloc[-1], 2) if not memory.empty else None,
    }


def series_summary_table(grouped: SeriesMap) -> pd.DataFrame:
    """
    Create a summary table with one row per series.

    Args:
        grouped: Series keyed by (possibly renamed) benchmark name

    Returns:
        DataFrame with point counts, units and value ranges
    """
    if not grouped:
        return pd.DataFrame()

    return pd.DataFrame(
        [{"series": name, **_summary_row(points)} for name, points in grouped.items()]
    )


def job_summary_table(grouped: JobSeriesMap) -> pd.DataFrame:
    """
    Create a summary table with one row per benchmark and job.

    Args:
        grouped: Series keyed by base benchmark name and job

    Returns:
        DataFrame with point counts, units and value ranges
    """
    if not grouped:
        return pd.DataFrame()

    return pd.DataFrame(
        [
            {"benchmark": base_name, "job": job, **_summary_row(points)}
            for base_name, jobs in grouped.items()
            for job, points in jobs.items()
        ]
    )


def format_table_markdown(df: pd.DataFrame, table_format: str = "github") -> str:
    """
    Format a DataFrame as a markdown table.

    Args:
        df: DataFrame to format
        table_format: Table format for tabulate (github, pipe, etc.)

    Returns:
        Markdown table string
    """
    if df.empty:
        return "*No data available*"

    return tabulate(df.values, headers=df.columns.tolist(), tablefmt=table_format)
