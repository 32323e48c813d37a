"""HTML rendering for the benchmark dashboard."""

from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "templates"


def _format_timestamp(value: datetime | None) -> str:
    """Format a timestamp for display."""
    if value is None:
        return "N/A"
    return value.strftime("%Y-%m-%d %H:%M:%S %Z").strip()


def render_dashboard_html(
    context: dict[str, Any],
    template_dir: str | Path = TEMPLATE_DIR,
    output_file: Path | None = None,
) -> str:
    """
    Render the dashboard page as HTML using template.

    Args:
        context: Template context with title, suites and their charts
        template_dir: Directory containing templates
        output_file: Path to save HTML output

    Returns:
        Rendered HTML content
    """
    jinja_env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(enabled_extensions=("html", "j2")),
        trim_blocks=True,
        lstrip_blocks=True,
    )

    jinja_env.filters["format_timestamp"] = _format_timestamp

    template = jinja_env.get_template("dashboard.html.j2")
    html_content = template.render(**context)

    if output_file:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(html_content)

    return html_content
