"""Chart configurations handed to the renderer."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..common.enums import ChartKind
from ..config import DEFAULT_PALETTE, ChartColors
from ..models import Run, SeriesPoint
from ..series import group_benchmarks, group_benchmarks_by_job


class _ChartModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    suite_name: str
    image_format: str = "png"
    error_bars: bool = False

    @property
    def chart_id(self) -> str:
        return f"{self.id}-chart"

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    def to_dict(self) -> dict[str, Any]:
        data = self.model_dump(mode="json", by_alias=True)
        data["chartId"] = self.chart_id
        return data


class SeriesChart(_ChartModel):
    """A chart of one series with a time trace and an optional memory trace."""

    dataset: list[SeriesPoint]
    colors: ChartColors = ChartColors()

    @property
    def has_memory(self) -> bool:
        return any(p.result.bytes_allocated is not None for p in self.dataset)


class JobChart(_ChartModel):
    """A chart with one line per job of a benchmark, plotting time or memory."""

    dataset: dict[str, list[SeriesPoint]]
    kind: ChartKind = ChartKind.TIME
    palette: list[str] = DEFAULT_PALETTE

    def color_for(self, index: int) -> str | None:
        """Return the palette color of the job at ``index``, wrapping around."""
        if not self.palette:
            return None
        return self.palette[index % len(self.palette)]


def chart_title(base_name: str, kind: ChartKind) -> str:
    label = "Memory" if kind == ChartKind.MEMORY else "Time"
    return f"{base_name} — {label}"


def build_series_charts(
    suite: str, runs: list[Run], config: dict[str, Any]
) -> list[SeriesChart]:
    """
    Create one single-series chart per benchmark series of a suite.

    Args:
        suite: Suite name, used in chart ids
        runs: Benchmark runs of the suite
        config: Dashboard configuration

    Returns:
        Charts in first-seen series order
    """
    return [
        SeriesChart(
            id=f"{suite}-{name}",
            name=name,
            suite_name=suite,
            dataset=points,
            image_format=config["image_format"],
            error_bars=config["error_bars"],
            colors=ChartColors(**config["colors"]),
        )
        for name, points in group_benchmarks(runs).items()
    ]


def build_job_charts(
    suite: str, runs: list[Run], config: dict[str, Any]
) -> list[JobChart]:
    """
    Create multi-series charts comparing the jobs of each benchmark of a suite.

    Every benchmark gets a time chart; a memory chart is added when any of
    its points carries allocated bytes.

    Args:
        suite: Suite name, used in chart ids
        runs: Benchmark runs of the suite
        config: Dashboard configuration

    Returns:
        Charts in first-seen benchmark order
    """
    charts: list[JobChart] = []

    for base_name, jobs in group_benchmarks_by_job(runs).items():
        kinds = [ChartKind.TIME]
        if any(
            p.result.bytes_allocated is not None
            for points in jobs.values()
            for p in points
        ):
            kinds.append(ChartKind.MEMORY)

        for kind in kinds:
            charts.append(
                JobChart(
                    id=f"{suite}-{base_name}-{kind.value}",
                    name=chart_title(base_name, kind),
                    suite_name=suite,
                    dataset=jobs,
                    kind=kind,
                    image_format=config["image_format"],
                    error_bars=config["error_bars"],
                    palette=config["palette"],
                )
            )

    return charts
