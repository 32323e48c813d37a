"""Report generation modules."""

from .charts import JobChart, SeriesChart, build_job_charts, build_series_charts
from .figures import create_chart_figure
from .render import DashboardRenderer, render_dashboard
from .tables import format_table_markdown, job_summary_table, series_summary_table

__all__ = [
    "DashboardRenderer",
    "JobChart",
    "SeriesChart",
    "build_job_charts",
    "build_series_charts",
    "create_chart_figure",
    "format_table_markdown",
    "job_summary_table",
    "render_dashboard",
    "series_summary_table",
]
