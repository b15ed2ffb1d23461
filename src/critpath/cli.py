"""Command-line interface for critpath."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Annotated

import typer

from . import context
from .exceptions import CritpathError
from .graph import GraphGenerator, GraphView
from .loader import discover_config, load_project
from .logger import setup_logger
from .report import (
    describe_early,
    describe_late,
    export_schedule_csv,
    format_date,
    render_table,
    schedule_rows,
)
from .scheduler import Scheduler
from .unified_config import UnifiedConfig, get_display_config

app = typer.Typer(
    name="critpath",
    help="Critical Path Method scheduling for task dependency graphs",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show changes, 2=show all checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to unified config file (default: critpath_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for critpath commands."""
    setup_logger(verbose)
    context.set_config_path(config)


def _parse_date_option(date_str: str | None, option_name: str) -> date | None:
    """Parse a date string from a CLI option.

    Args:
        date_str: Date string in YYYY-MM-DD format or None
        option_name: Name of the option for error messages

    Returns:
        Parsed date object or None if date_str is None
    """
    if date_str is None:
        return None

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        typer.echo(
            f"Error: Invalid {option_name} format '{date_str}'. Use YYYY-MM-DD",
            err=True,
        )
        raise typer.Exit(1) from None


def _load(file: Path, start_date: str | None) -> tuple[Scheduler, UnifiedConfig | None]:
    """Load config and project, turning engine errors into exit code 1."""
    parsed_start = _parse_date_option(start_date, "start-date")

    try:
        config = discover_config(file)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: Invalid config: {e}", err=True)
        raise typer.Exit(1) from e

    try:
        scheduler = load_project(file, start_date=parsed_start, config=config)
    except CritpathError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    return scheduler, config


@app.command()
def schedule(
    file: Annotated[Path, typer.Argument(help="Path to the project YAML file")] = Path(
        "project.yaml"
    ),
    *,
    start_date: Annotated[
        str | None,
        typer.Option(
            "--start-date",
            "-s",
            help="Project start date (YYYY-MM-DD). Overrides file and config; defaults to today",
        ),
    ] = None,
    output_csv: Annotated[
        Path | None,
        typer.Option("--output-csv", help="Export computed dates to a CSV file"),
    ] = None,
    sentences: Annotated[
        bool,
        typer.Option("--sentences", help="Describe each task in a sentence instead of a table"),
    ] = False,
) -> None:
    """Compute early and late dates for every task and the project end date."""
    scheduler, config = _load(file, start_date)
    display = get_display_config(config)

    if output_csv:
        export_schedule_csv(scheduler, output_csv)
        typer.echo(f"Schedule exported to {output_csv}")
        return

    if sentences:
        for task in scheduler.list_tasks():
            typer.echo(describe_early(task, display.date_format))
            if display.show_late_dates:
                typer.echo(describe_late(task, display.date_format))
    else:
        rows = schedule_rows(
            scheduler, display.date_format, show_late_dates=display.show_late_dates
        )
        typer.echo(render_table(rows))

    typer.echo("")
    typer.echo(f"Project start: {format_date(scheduler.start_date, display.date_format)}")
    typer.echo(f"Project end:   {format_date(scheduler.project_end_date, display.date_format)}")


@app.command()
def graph(
    file: Annotated[Path, typer.Argument(help="Path to the project YAML file")] = Path(
        "project.yaml"
    ),
    *,
    view: Annotated[
        GraphView, typer.Option("--view", help="Type of graph to generate")
    ] = GraphView.ALL,
    start_date: Annotated[
        str | None,
        typer.Option("--start-date", "-s", help="Project start date (YYYY-MM-DD)"),
    ] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Generate the task dependency graph in DOT format."""
    scheduler, config = _load(file, start_date)
    display = get_display_config(config)

    generator = GraphGenerator(scheduler, display.date_format)
    dot_output = generator.generate(view)

    if output:
        output.write_text(dot_output, encoding="utf-8")
        typer.echo(f"Graph written to {output}")
    else:
        typer.echo(dot_output)


@app.command(name="critical-path")
def critical_path(
    file: Annotated[Path, typer.Argument(help="Path to the project YAML file")] = Path(
        "project.yaml"
    ),
    *,
    start_date: Annotated[
        str | None,
        typer.Option("--start-date", "-s", help="Project start date (YYYY-MM-DD)"),
    ] = None,
) -> None:
    """List the tasks that cannot slip without delaying the project."""
    scheduler, config = _load(file, start_date)
    display = get_display_config(config)

    path = scheduler.critical_path()
    if not path:
        typer.echo("No tasks")
        return

    for name in path:
        task = scheduler.get_task(name)
        typer.echo(
            f"{name}: {format_date(task.early_start, display.date_format)}"
            f" -> {format_date(task.early_finish, display.date_format)}"
        )
    typer.echo(f"Project end: {format_date(scheduler.project_end_date, display.date_format)}")


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
