"""Tests for Plotly figure generation."""

from __future__ import annotations

import pytest
from conftest import make_commit, make_measurement, make_point, make_run

from benchdash.common.enums import ChartKind
from benchdash.config import default_config
from benchdash.models import SeriesPoint
from benchdash.report.charts import JobChart, SeriesChart, build_job_charts
from benchdash.report.figures import (
    MESSAGE_MAX_LINES,
    MESSAGE_MAX_WIDTH,
    _hover_details,
    _time_text,
    create_chart_figure,
    create_job_figure,
    create_series_figure,
    write_chart_files,
)


def _series_chart(points, **kwargs) -> SeriesChart:
    return SeriesChart(id="S-x", name="x", suite_name="S", dataset=points, **kwargs)


class TestSeriesFigure:
    def test_time_only(self):
        points = [make_point(1.5, unit="ms"), make_point(2.0, sha="def5678", unit="ms")]

        fig = create_series_figure(_series_chart(points))

        assert len(fig.data) == 1
        assert list(fig.data[0].y) == [1.5, 2.0]
        assert list(fig.data[0].x) == ["abc1234", "def5678"]
        assert fig.layout.yaxis.title.text == "t (ms)"
        assert fig.layout.title.text == "x"

    def test_memory_on_secondary_axis(self):
        points = [make_point(1.0, unit="ns", bytes_allocated=3.5, memory_unit="KB")]

        fig = create_series_figure(_series_chart(points))

        assert len(fig.data) == 2
        assert fig.data[1].yaxis == "y2"
        assert fig.data[1].text == ("3.50KB",)
        assert fig.layout.yaxis2.title.text == "KB"
        assert fig.layout.yaxis2.overlaying == "y"

    def test_all_zero_memory_gets_fixed_range(self):
        points = [make_point(1.0, bytes_allocated=0, memory_unit="B")]

        fig = create_series_figure(_series_chart(points))

        assert tuple(fig.layout.yaxis2.range) == (0, 1)

    def test_error_bars(self):
        points = [make_point(1.0, unit="µs", range="± 0.25"), make_point(2.0)]

        fig = create_series_figure(_series_chart(points, error_bars=True))

        error_array = list(fig.data[0].error_y.array)
        assert error_array[0] == 0.25
        assert error_array[1] != error_array[1]  # NaN where no range

    def test_no_error_bars_by_default(self):
        points = [make_point(1.0, range="± 0.25")]
        fig = create_series_figure(_series_chart(points))
        assert fig.data[0].error_y.array is None


class TestJobFigure:
    def test_one_trace_per_job(self):
        runs = [
            make_run(
                "a",
                0,
                [
                    make_measurement("Sort[Fast]", 1.0, unit="ms"),
                    make_measurement("Sort[Slow]", 2.0, unit="ms"),
                ],
            )
        ]
        chart = build_job_charts("S", runs, default_config())[0]

        fig = create_job_figure(chart)

        assert [trace.name for trace in fig.data] == ["Fast", "Slow"]
        assert fig.data[0].line.color == chart.palette[0]
        assert fig.data[1].line.color == chart.palette[1]
        assert fig.layout.yaxis.title.text == "t (ms)"

    def test_memory_chart_plots_bytes(self):
        point = make_point(1.0, bytes_allocated=12, memory_unit="B")
        chart = JobChart(
            id="S-x-memory",
            name="x — Memory",
            suite_name="S",
            dataset={"default": [point]},
            kind=ChartKind.MEMORY,
        )

        fig = create_job_figure(chart)

        assert list(fig.data[0].y) == [12]
        assert fig.layout.yaxis.title.text == "B"
        assert fig.layout.yaxis.tickformat == ".0f"

    def test_dispatch(self):
        chart = JobChart(id="x", name="x", suite_name="S", dataset={})
        assert len(create_chart_figure(chart).data) == 0


class TestHoverText:
    def test_message_truncated(self):
        message = "\n".join(["x" * 100] * 30)
        point = SeriesPoint(
            commit=make_commit("abc", message=message),
            result=make_measurement("b", 1.0),
        )

        details = _hover_details(point)
        lines = details.split("<br>")

        assert lines[0] == "x" * MESSAGE_MAX_WIDTH + "..."
        assert details.count("x" * MESSAGE_MAX_WIDTH) == MESSAGE_MAX_LINES
        assert "authored by @alice" in details

    @pytest.mark.parametrize(
        "kwargs,expected",
        [
            ({"unit": "ms"}, "1.50ms"),
            ({"unit": "ns", "range": "± 0.125"}, "1.50ns (± 0.125)"),
        ],
    )
    def test_time_text(self, kwargs, expected):
        assert _time_text(make_point(1.5, **kwargs)) == expected

    def test_nan_text(self):
        assert _time_text(make_point(float("nan"))) == "NaN"


def test_write_chart_files(tmp_path):
    chart = SeriesChart(
        id="My Suite-a/b", name="a/b", suite_name="My Suite", dataset=[make_point(1.0)]
    )

    html_file = write_chart_files(chart, tmp_path)

    assert html_file == str(tmp_path / "My_Suite-a_b.html")
    assert "plotly" in (tmp_path / "My_Suite-a_b.html").read_text().lower()
