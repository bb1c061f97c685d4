"""Command-line entry point: load the data file, run the menu loop, save on exit."""

import logging
from pathlib import Path
from typing import Optional

import typer

from .config import MAX_BOATS, USAGE
from .logging import get_logger, set_level
from .repository import BoatRepo
from .shell import MarinaShell
from .storage import load_boats

logger = get_logger(__name__)

app = typer.Typer(add_completion=False)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    help="Marina boat inventory manager.",
)
def main(
    ctx: typer.Context,
    data_file: Optional[Path] = typer.Argument(None, help="Boat data file (CSV)"),
    capacity: int = typer.Option(
        MAX_BOATS, "--capacity", "-c", min=0, help="Maximum number of boats (0 = no limit)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    # unknown options are passed through as plain arguments; treat them as bad usage
    if data_file is None or ctx.args or str(data_file).startswith("-"):
        typer.echo(USAGE)
        raise typer.Exit(1)

    if verbose:
        set_level(logging.DEBUG)

    repo = BoatRepo(capacity=capacity or None)
    report = load_boats(data_file, repo)
    if report.dropped_for_capacity:
        typer.echo(f"Boat limit reached! {report.dropped_for_capacity} record(s) not loaded")
    if report.errors:
        typer.echo(f"Skipped {len(report.errors)} unreadable record(s) in {data_file}")

    shell = MarinaShell(repo, data_file)
    status = shell.run()
    raise typer.Exit(status)


def run() -> None:
    """Console-script entry point."""
    app()
