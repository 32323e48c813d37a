"""Figure generation for benchmark charts using Plotly."""

import math
from pathlib import Path
from typing import Any

import plotly.graph_objects as go  # type: ignore[import-untyped]

from ..common.enums import ChartKind, MemoryUnit
from ..common.ranges import ErrorRange
from ..models import SeriesPoint
from ..util import safe_filename
from .charts import JobChart, SeriesChart

# Plotly layout template for consistent styling
PLOTLY_TEMPLATE = {
    "font": {
        "family": "Inter, -apple-system, BlinkMacSystemFont, sans-serif",
        "size": 10,
    },
    "legend": {"orientation": "h", "y": -0.15},
    "xaxis": {"fixedrange": True, "tickangle": -30, "title": {"text": "Commit"}},
    "plot_bgcolor": "rgba(0,0,0,0)",
    "paper_bgcolor": "rgba(0,0,0,0)",
    "hovermode": "closest",
}

DEFAULT_MEMORY_UNIT = "bytes"
ROUNDING = 2
MESSAGE_MAX_LINES = 20
MESSAGE_MAX_WIDTH = 70
SHA_LENGTH = 7

_LINE_SHAPE = "spline"
_MODE = "lines+markers"
_NEWLINE = "<br>"
_HOVER_TEMPLATE = (
    "<b>%{text}</b>" + _NEWLINE * 2 + "%{x}" + _NEWLINE * 2 + "%{customdata}"
    "<extra></extra>"
)


def _apply_template(fig: go.Figure, **custom_layout: Any) -> None:
    """Apply the Plotly template with custom layout options."""
    # Merge template with custom layout (custom layout takes precedence)
    layout = {**PLOTLY_TEMPLATE, **custom_layout}
    fig.update_layout(**layout)


def _value_axis(title: str, **extra: Any) -> dict[str, Any]:
    return {
        "fixedrange": True,
        "hoverformat": ".2f",
        "rangemode": "tozero",
        "separatethousands": True,
        "title": {"text": title},
        **extra,
    }


def _commit_label(point: SeriesPoint) -> str:
    return point.commit.sha[:SHA_LENGTH]


def _hover_details(point: SeriesPoint) -> str:
    """Return the commit message and metadata shown when hovering a point."""
    lines = point.commit.message.split("\n")[:MESSAGE_MAX_LINES]
    message = _NEWLINE.join(
        line[:MESSAGE_MAX_WIDTH] + "..." if len(line) > MESSAGE_MAX_WIDTH else line
        for line in lines
    )
    return (
        message
        + _NEWLINE * 2
        + f"{point.commit.timestamp.isoformat()} authored by @{point.commit.author.username}"
        + _NEWLINE
    )


def _time_text(point: SeriesPoint) -> str:
    result = point.result
    if math.isnan(result.value):
        return "NaN"

    label = f"{result.value:.{ROUNDING}f}{result.unit}"
    error_range = ErrorRange.parse(result.range)
    if error_range is not None:
        label += f" ({error_range.prefix}{error_range.magnitude:.{ROUNDING + 1}g})"
    return label


def _memory_unit(points: list[SeriesPoint]) -> str:
    for point in points:
        if point.result.bytes_allocated is not None:
            return point.result.memory_unit or DEFAULT_MEMORY_UNIT
    return DEFAULT_MEMORY_UNIT


def _is_bytes(unit: str) -> bool:
    return unit in (DEFAULT_MEMORY_UNIT, MemoryUnit.BYTES.value)


def _memory_text(point: SeriesPoint, unit: str) -> str | None:
    if point.result.bytes_allocated is None:
        return None
    if _is_bytes(unit):
        return f"{point.result.bytes_allocated:.0f} {unit}"
    return f"{point.result.bytes_allocated:.{ROUNDING}f}{unit}"


def _error_bars(points: list[SeriesPoint]) -> dict[str, Any]:
    magnitudes = []
    for point in points:
        error_range = ErrorRange.parse(point.result.range)
        magnitudes.append(error_range.magnitude if error_range else math.nan)
    return {"array": magnitudes, "type": "data"}


def _time_trace(
    points: list[SeriesPoint], name: str, color: str | None, error_bars: bool
) -> go.Scatter:
    trace = go.Scatter(
        x=[_commit_label(p) for p in points],
        y=[p.result.value for p in points],
        text=[_time_text(p) for p in points],
        customdata=[_hover_details(p) for p in points],
        hovertemplate=_HOVER_TEMPLATE,
        hoverlabel={"align": "left", "bordercolor": "black"},
        connectgaps=True,
        mode=_MODE,
        line={"color": color, "shape": _LINE_SHAPE},
        marker={"color": color},
        name=name,
    )
    if error_bars:
        trace.error_y = _error_bars(points)
    return trace


def _memory_trace(
    points: list[SeriesPoint], name: str, color: str | None, unit: str
) -> go.Scatter:
    return go.Scatter(
        x=[_commit_label(p) for p in points],
        y=[p.result.bytes_allocated for p in points],
        text=[_memory_text(p, unit) for p in points],
        customdata=[_hover_details(p) for p in points],
        hovertemplate=_HOVER_TEMPLATE,
        hoverlabel={"align": "left", "bordercolor": "black"},
        connectgaps=True,
        mode=_MODE,
        line={"color": color, "shape": _LINE_SHAPE},
        marker={"color": color},
        name=name,
    )


def create_series_figure(chart: SeriesChart) -> go.Figure:
    """
    Create a figure for a single-series chart.

    Time is plotted on the primary axis and, when the series carries
    allocations, memory on a secondary axis to the right.
    """
    points = chart.dataset
    fig = go.Figure()

    time_trace = _time_trace(points, "Time", chart.colors.time, chart.error_bars)
    time_trace.fill = "tozeroy"
    fig.add_trace(time_trace)

    time_title = f"t ({points[0].result.unit})" if points else "t"
    layout: dict[str, Any] = {
        "title": {"text": chart.name},
        "yaxis": _value_axis(time_title),
    }

    if chart.has_memory:
        unit = _memory_unit(points)
        memory_trace = _memory_trace(points, "Memory", chart.colors.memory, unit)
        memory_trace.yaxis = "y2"
        memory_trace.marker.symbol = "triangle-up"
        fig.add_trace(memory_trace)

        memory_axis = _value_axis(unit, overlaying="y", side="right")
        if all(p.result.bytes_allocated == 0 for p in points):
            memory_axis.update({"range": [0, 1], "tickformat": ".0f"})
        layout["yaxis2"] = memory_axis

    _apply_template(fig, **layout)
    return fig


def create_job_figure(chart: JobChart) -> go.Figure:
    """Create a figure with one line per job for a multi-series chart."""
    fig = go.Figure()
    is_time = chart.kind == ChartKind.TIME

    first = next((points[0] for points in chart.dataset.values() if points), None)
    if first is None:
        axis_title = ""
    elif is_time:
        axis_title = f"t ({first.result.unit})"
    else:
        axis_title = first.result.memory_unit or DEFAULT_MEMORY_UNIT

    for index, (job, points) in enumerate(chart.dataset.items()):
        color = chart.color_for(index)
        if is_time:
            fig.add_trace(_time_trace(points, job, color, chart.error_bars))
        else:
            fig.add_trace(_memory_trace(points, job, color, _memory_unit(points)))

    yaxis = _value_axis(axis_title)
    if not is_time and _is_bytes(axis_title):
        yaxis["tickformat"] = ".0f"

    _apply_template(fig, title={"text": chart.name}, yaxis=yaxis)
    return fig


def create_chart_figure(chart: SeriesChart | JobChart) -> go.Figure:
    """Create the figure for any chart configuration."""
    if isinstance(chart, JobChart):
        return create_job_figure(chart)
    return create_series_figure(chart)


def _save_image(fig: go.Figure, image_file: Path, image_format: str) -> None:
    """Save figure as a static image, skipping if kaleido is unavailable."""
    try:
        fig.write_image(image_file, format=image_format, width=1200, height=600)
    except Exception as e:
        # HTML version is still available and is interactive
        import warnings

        warnings.warn(f"Skipping {image_format} generation: {e}", stacklevel=2)


def write_chart_files(
    chart: SeriesChart | JobChart,
    output_dir: Path,
    images: bool = False,
    fig: go.Figure | None = None,
) -> str:
    """
    Write a chart as standalone HTML and, optionally, as a static image.

    Args:
        chart: Chart configuration
        output_dir: Directory to save files in
        images: Whether to also export a static image
        fig: Figure already created for the chart, if any

    Returns:
        Path to the created HTML file
    """
    if fig is None:
        fig = create_chart_figure(chart)
    filename = safe_filename(f"{chart.suite_name}-{chart.name}")

    html_file = output_dir / f"{filename}.html"
    fig.write_html(html_file, include_plotlyjs="cdn")

    if images:
        _save_image(
            fig, output_dir / f"{filename}.{chart.image_format}", chart.image_format
        )

    return str(html_file)
