"""Dashboard rendering: from a benchmark document to charts and an HTML page."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..models import BenchmarkDocument, Run
from ..util import ensure_directory, save_json
from .charts import JobChart, SeriesChart, build_job_charts, build_series_charts
from .figures import create_chart_figure, write_chart_files
from .html_renderer import render_dashboard_html

logger = logging.getLogger(__name__)

Chart = SeriesChart | JobChart


class DashboardRenderer:
    """Renders a benchmark document into chart configurations and a dashboard page."""

    def __init__(self, config: dict[str, Any]):
        self.config = config
        self.output_path = Path(config["output_path"])

    def _selected_suites(self, document: BenchmarkDocument) -> dict[str, list[Run]]:
        """Return the suites to chart, honouring the configured allow-list."""
        allowed = self.config.get("suites")
        if not allowed:
            return dict(document.suites)

        missing = [name for name in allowed if name not in document.suites]
        if missing:
            logger.warning(f"Suites not found in document: {', '.join(missing)}")

        return {
            name: runs for name, runs in document.suites.items() if name in allowed
        }

    def build_charts(self, document: BenchmarkDocument) -> dict[str, list[Chart]]:
        """
        Build chart configurations for every selected suite.

        Args:
            document: Benchmark document

        Returns:
            Mapping of suite name to its charts

        Raises:
            InvalidUnitError: If a measurement uses an unknown unit
            MalformedRangeError: If a measurement range cannot be parsed
        """
        charts: dict[str, list[Chart]] = {}

        for suite, runs in self._selected_suites(document).items():
            if self.config.get("group_jobs"):
                charts[suite] = build_job_charts(suite, runs, self.config)
            else:
                charts[suite] = build_series_charts(suite, runs, self.config)
            logger.info(f"Built {len(charts[suite])} charts for suite '{suite}'")

        return charts

    def export_charts(self, document: BenchmarkDocument) -> dict[str, Any]:
        """Return chart configurations as JSON-ready data."""
        return {
            suite: [chart.to_dict() for chart in charts]
            for suite, charts in self.build_charts(document).items()
        }

    def save_charts(self, document: BenchmarkDocument, path: str | Path) -> Path:
        """Write chart configurations to a JSON file."""
        output_file = Path(path)
        save_json(self.export_charts(document), output_file)
        return output_file

    def render(
        self,
        document: BenchmarkDocument,
        output_dir: str | Path | None = None,
        images: bool = False,
    ) -> Path:
        """
        Render the dashboard page and per-chart files.

        Args:
            document: Benchmark document
            output_dir: Directory to write into (defaults to config output_path)
            images: Whether to also export static images of every chart

        Returns:
            Path to the dashboard HTML page
        """
        outdir = ensure_directory(output_dir or self.output_path)
        charts_dir = ensure_directory(outdir / "charts")

        suites_context = []
        for suite, charts in self.build_charts(document).items():
            chart_context = []
            for chart in charts:
                fig = create_chart_figure(chart)
                chart_context.append(
                    {
                        "id": chart.id,
                        "name": chart.name,
                        "html": fig.to_html(
                            full_html=False,
                            include_plotlyjs=False,
                            div_id=chart.chart_id,
                        ),
                    }
                )
                write_chart_files(chart, charts_dir, images=images, fig=fig)
            suites_context.append({"name": suite, "charts": chart_context})

        context = {
            "title": self.config["title"],
            "repository": self.config.get("repository") or document.repo_url,
            "branch": self.config.get("branch"),
            "last_updated": document.last_updated,
            "generated_at": datetime.now(timezone.utc),
            "suites": suites_context,
        }

        output_file = outdir / "index.html"
        render_dashboard_html(context, output_file=output_file)
        logger.info(f"Dashboard written to {output_file}")
        return output_file


def render_dashboard(
    document: BenchmarkDocument,
    config: dict[str, Any],
    output_dir: str | Path | None = None,
    images: bool = False,
) -> Path:
    """Render a benchmark document into an HTML dashboard."""
    renderer = DashboardRenderer(config)
    return renderer.render(document, output_dir=output_dir, images=images)
