"""Command-line interface for the downtime report."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .annotate import add_nice_dates, mark_off_hours
from .config import ReportSettings
from .paths import DEFAULT_RETENTION_PATH
from .reporting import DowntimeReport
from .retention import RetentionFileError, load_downtime_file

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Display all scheduled downtime in a Nagios retention file sorted by end time.",
)

MISSING_FILE_MESSAGE = "You must give me the path to the retention file as an argument..."


@app.command()
def main(
    ctx: typer.Context,
    retention_file: Optional[Path] = typer.Argument(
        None,
        help=f"Nagios retention file to read. Defaults to {DEFAULT_RETENTION_PATH}.",
        show_default=False,
    ),
    output_format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output layout: 'table' for a boxed ASCII table, 'tsv' for tab-delimited text.",
    ),
    off_hours: bool = typer.Option(
        False,
        "--off-hours",
        help="Add a column flagging downtime that expires on a weekend or outside working hours.",
    ),
    workday_start: int = typer.Option(
        8, "--workday-start", min=0, max=23, help="First hour of the working day."
    ),
    workday_end: int = typer.Option(
        18, "--workday-end", min=1, max=24, help="Hour at which the working day ends."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
) -> None:
    """Print host and service downtime entries, soonest to expire first."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        settings = ReportSettings.from_options(
            retention_file,
            output_format=output_format,
            flag_off_hours=off_hours,
            workday_start=workday_start,
            workday_end=workday_end,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if not settings.retention_path.is_file():
        typer.echo(MISSING_FILE_MESSAGE, err=True)
        typer.echo(ctx.get_usage(), err=True)
        raise typer.Exit(code=1)

    try:
        records = load_downtime_file(settings.retention_path)
    except RetentionFileError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    add_nice_dates(records)
    if settings.flag_off_hours:
        mark_off_hours(
            records,
            workday_start=settings.workday_start,
            workday_end=settings.workday_end,
        )
    logger.debug("Rendering %d downtime entries as %s", len(records), settings.output_format)
    DowntimeReport(settings).print_report(records)
