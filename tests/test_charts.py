"""Tests for chart configuration building."""

from __future__ import annotations

import json

import pytest
from conftest import make_measurement, make_run

from benchdash.common.enums import ChartKind
from benchdash.config import DEFAULT_PALETTE, default_config
from benchdash.models import parse_document
from benchdash.report.charts import (
    JobChart,
    SeriesChart,
    build_job_charts,
    build_series_charts,
    chart_title,
)


@pytest.fixture
def config():
    return default_config()


# =============================================================================
# Single-series charts
# =============================================================================


class TestSeriesCharts:
    def test_one_chart_per_series(self, config, sample_document):
        runs = parse_document(sample_document).suites["Core"]

        charts = build_series_charts("Core", runs, config)

        assert [c.name for c in charts] == ["Sort", "Parse[Short]", "Parse[Long]"]
        assert charts[0].id == "Core-Sort"
        assert charts[0].chart_id == "Core-Sort-chart"
        assert all(isinstance(c, SeriesChart) for c in charts)

    def test_dataset_is_normalized(self, config, sample_document):
        runs = parse_document(sample_document).suites["Core"]

        sort_chart = build_series_charts("Core", runs, config)[0]

        assert [p.result.unit for p in sort_chart.dataset] == ["µs", "µs"]
        assert [p.result.range for p in sort_chart.dataset] == ["± 0.04", "± 0.045"]

    def test_has_memory(self, config, sample_document):
        runs = parse_document(sample_document).suites["Core"]
        charts = {c.name: c for c in build_series_charts("Core", runs, config)}

        assert charts["Parse[Short]"].has_memory
        assert not charts["Sort"].has_memory

    def test_config_options_carried(self, config):
        config["image_format"] = "svg"
        config["error_bars"] = True
        config["colors"] = {"time": "#000000", "memory": "#ffffff"}
        runs = [make_run("a", 0, [make_measurement("Sort", 1.0)])]

        chart = build_series_charts("S", runs, config)[0]

        assert chart.image_format == "svg"
        assert chart.error_bars is True
        assert chart.colors.time == "#000000"

    def test_to_dict_uses_camel_case(self, config):
        runs = [
            make_run(
                "a",
                0,
                [make_measurement("Sort", 1.0, bytes_allocated=5, memory_unit="B")],
            )
        ]
        data = build_series_charts("S", runs, config)[0].to_dict()

        assert data["chartId"] == "S-Sort-chart"
        assert data["suiteName"] == "S"
        assert data["imageFormat"] == "png"
        assert data["dataset"][0]["result"]["bytesAllocated"] == 5
        assert data["dataset"][0]["commit"]["sha"] == "a"

    def test_to_json_is_serializable(self, config):
        runs = [make_run("a", 0, [make_measurement("Sort", 1.0)])]
        chart = build_series_charts("S", runs, config)[0]

        assert json.loads(chart.to_json())["errorBars"] is False


# =============================================================================
# Multi-series charts
# =============================================================================


class TestJobCharts:
    def test_time_and_memory_charts(self, config, sample_document):
        runs = parse_document(sample_document).suites["Core"]

        charts = build_job_charts("Core", runs, config)

        assert [c.id for c in charts] == [
            "Core-Sort-time",
            "Core-Parse-time",
            "Core-Parse-memory",
        ]
        assert [c.kind for c in charts] == [
            ChartKind.TIME,
            ChartKind.TIME,
            ChartKind.MEMORY,
        ]
        assert charts[1].name == "Parse — Time"
        assert list(charts[1].dataset) == ["Short", "Long"]

    def test_jobs_normalized_together(self, config, sample_document):
        runs = parse_document(sample_document).suites["Core"]

        parse_chart = build_job_charts("Core", runs, config)[1]

        units = {
            p.result.unit for points in parse_chart.dataset.values() for p in points
        }
        assert units == {"ms"}

    def test_palette_wraps(self):
        chart = JobChart(
            id="x", name="x", suite_name="s", dataset={}, palette=["#111111", "#222222"]
        )
        assert chart.color_for(0) == "#111111"
        assert chart.color_for(3) == "#222222"

    def test_default_palette(self):
        chart = JobChart(id="x", name="x", suite_name="s", dataset={})
        assert chart.color_for(0) == DEFAULT_PALETTE[0]

    def test_empty_palette_gives_no_color(self):
        chart = JobChart(id="x", name="x", suite_name="s", dataset={}, palette=[])
        assert chart.color_for(0) is None


def test_chart_title():
    assert chart_title("Sort", ChartKind.TIME) == "Sort — Time"
    assert chart_title("Sort", ChartKind.MEMORY) == "Sort — Memory"
