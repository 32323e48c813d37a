"""Command line interface for the benchmark dashboard."""

import json
from pathlib import Path
from typing import Any, NoReturn

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .common.errors import InvalidUnitError, MalformedRangeError
from .config import default_config, load_config
from .debug import set_debug
from .models import BenchmarkDocument, load_document
from .report.render import DashboardRenderer
from .report.tables import (
    format_table_markdown,
    job_summary_table,
    series_summary_table,
)
from .series import group_benchmarks, group_benchmarks_by_job
from .util import Timer

app = typer.Typer(
    name="benchdash",
    help="Turn historical benchmark results into chart-ready series and dashboards",
    no_args_is_help=True,
)

console = Console()


def _load_config_or_exit(config: str | None) -> dict[str, Any]:
    """Load configuration from a file, or the defaults when no file is given."""
    if config is None:
        return default_config()

    try:
        return load_config(config)
    except FileNotFoundError as e:
        console.print(f"[red]Configuration file not found:[/red] {config}")
        raise typer.Exit(1) from e
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e


def _load_document_or_exit(document: str) -> BenchmarkDocument:
    """Load a benchmark document, reporting unreadable files on the console."""
    try:
        return load_document(document)
    except FileNotFoundError as e:
        console.print(f"[red]Benchmark document not found:[/red] {document}")
        raise typer.Exit(1) from e
    except json.JSONDecodeError as e:
        console.print(f"[red]Benchmark document is not valid JSON:[/red] {e}")
        raise typer.Exit(1) from e
    except ValidationError as e:
        console.print(f"[red]Benchmark document is malformed:[/red]\n{e}")
        raise typer.Exit(1) from e


def _exit_on_invalid_data(error: Exception) -> NoReturn:
    console.print(f"[red]✗ Benchmark data cannot be normalized:[/red] {error}")
    console.print("[dim]The whole document is treated as unusable.[/dim]")
    raise typer.Exit(1) from error


def _print_frame(title: str, df: Any) -> None:
    """Print a summary DataFrame as a rich table."""
    table = Table(title=title, show_lines=False)
    for column in df.columns:
        justify = "right" if df[column].dtype.kind in "fi" else "left"
        table.add_column(str(column), justify=justify)

    for row in df.itertuples(index=False):
        table.add_row(*["" if value is None else str(value) for value in row])

    console.print(table)


@app.command()
def check(
    config: str = typer.Option(..., "--config", "-c", help="Path to config YAML file"),
    dump: bool = typer.Option(
        False,
        "--dump",
        "-d",
        help="Dump full config with defaults as YAML (for redirection)",
    ),
) -> None:
    """Check and display configuration file contents."""
    config_path = Path(config)
    cfg = _load_config_or_exit(config)

    # If dump requested, output YAML and exit (no rich formatting)
    if dump:
        typer.echo(yaml.safe_dump(cfg, sort_keys=False, allow_unicode=True))
        return

    status_text = Text()
    status_text.append("Configuration: ", style="bold")
    status_text.append(str(config_path), style="cyan")
    status_text.append("\nStatus: ", style="bold")
    status_text.append("✓ Valid", style="green bold")
    console.print(Panel(status_text, border_style="green"))

    settings_table = Table(show_header=False, box=None, padding=(0, 2))
    settings_table.add_column("Setting", style="bold")
    settings_table.add_column("Value")
    for key, value in cfg.items():
        if isinstance(value, dict):
            value = ", ".join(f"{k}={v}" for k, v in value.items())
        elif isinstance(value, list):
            value = ", ".join(str(v) for v in value)
        settings_table.add_row(key, "-" if value is None else str(value))
    console.print(settings_table)


@app.command()
def series(
    document: str = typer.Argument(..., help="Path to benchmark JSON document"),
    suite: str | None = typer.Option(
        None, "--suite", "-s", help="Only summarize this suite"
    ),
    by_job: bool = typer.Option(
        False, "--by-job", help="Group by benchmark and job instead of by series"
    ),
    markdown: bool = typer.Option(
        False, "--markdown", help="Print markdown tables instead of rich tables"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug output for grouping and scaling"
    ),
) -> None:
    """Group and normalize a benchmark document and summarize its series."""
    set_debug(debug)

    doc = _load_document_or_exit(document)
    suites = doc.suites
    if suite is not None:
        if suite not in suites:
            console.print(
                f"[red]Suite '{suite}' not found. Available: {list(suites)}[/red]"
            )
            raise typer.Exit(1)
        suites = {suite: suites[suite]}

    for name, runs in suites.items():
        try:
            if by_job:
                df = job_summary_table(group_benchmarks_by_job(runs))
            else:
                df = series_summary_table(group_benchmarks(runs))
        except (InvalidUnitError, MalformedRangeError) as e:
            _exit_on_invalid_data(e)

        if markdown:
            typer.echo(f"## {name}\n")
            typer.echo(format_table_markdown(df))
            typer.echo("")
        elif df.empty:
            console.print(f"[yellow]{name}: no data[/yellow]")
        else:
            _print_frame(name, df)


@app.command()
def charts(
    document: str = typer.Argument(..., help="Path to benchmark JSON document"),
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Write chart configurations to this file"
    ),
    group_jobs: bool = typer.Option(
        False, "--group-jobs", help="Plot the jobs of each benchmark on shared charts"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug output for grouping and scaling"
    ),
) -> None:
    """Emit chart configurations for a benchmark document as JSON."""
    set_debug(debug)

    cfg = _load_config_or_exit(config)
    if group_jobs:
        cfg["group_jobs"] = True

    doc = _load_document_or_exit(document)
    renderer = DashboardRenderer(cfg)

    try:
        if output:
            output_file = renderer.save_charts(doc, output)
            console.print(f"[green]✓ Chart configurations saved to:[/] {output_file}")
        else:
            typer.echo(
                json.dumps(renderer.export_charts(doc), indent=2, ensure_ascii=False)
            )
    except (InvalidUnitError, MalformedRangeError) as e:
        _exit_on_invalid_data(e)


@app.command()
def render(
    document: str = typer.Argument(..., help="Path to benchmark JSON document"),
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
    output_dir: str | None = typer.Option(
        None, "--output-dir", "-o", help="Directory to write the dashboard into"
    ),
    images: bool = typer.Option(
        False, "--images", help="Also export static images (requires kaleido)"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug output for grouping and scaling"
    ),
) -> None:
    """Render a benchmark document into an HTML dashboard."""
    set_debug(debug)

    cfg = _load_config_or_exit(config)
    doc = _load_document_or_exit(document)
    renderer = DashboardRenderer(cfg)

    console.print(f"[blue]Rendering dashboard:[/] {cfg['title']}")

    try:
        with Timer("Render") as timer:
            output_file = renderer.render(doc, output_dir=output_dir, images=images)
    except (InvalidUnitError, MalformedRangeError) as e:
        _exit_on_invalid_data(e)

    console.print(f"[green]✓ Dashboard saved to:[/] {output_file}")
    console.print(f"[dim]Rendered in {timer.elapsed:.2f}s[/]")


def main() -> None:
    app()
