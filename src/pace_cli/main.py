#!/usr/bin/env python3
"""
pace - running pace calculator CLI

Convert between pace and speed and work out race times from the terminal.

Usage:
    pace convert 8:30            # Pace to speed
    pace finish 8:00 -d 5k       # Finish time at a pace
    pace required 1:45:00 -d half
    pace splits 25:00 -d 5k      # Negative split plan
    pace reference               # Pace/speed chart
    pace history                 # Recent conversions
    pace favorites               # Pinned conversions
"""

import logging
import sys

import typer
from rich.console import Console

from pace_cli import __version__, display
from pace_cli.commands import convert, favorites, history, race
from pacecalc.config import get_settings
from pacecalc.errors import StoreError

# Create the main app
app = typer.Typer(
    name="pace",
    help="Running pace calculator.",
    no_args_is_help=True,
    add_completion=True,
)

# Add command groups
app.add_typer(history.app, name="history", help="Recent conversions")
app.add_typer(favorites.app, name="favorites", help="Pinned conversions")

# Console for output
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"pace version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr at the configured level."""
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, is_eager=True, help="Show version"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
) -> None:
    """
    pace - Running pace calculator.

    Convert paces and speeds, predict finish times and plan splits.
    """
    configure_logging(verbose)


# Register commands directly on the app
app.command(name="convert")(convert.convert_value)
app.command(name="quick")(convert.quick)
app.command(name="reference")(convert.reference)
app.command(name="finish")(race.finish)
app.command(name="required")(race.required)
app.command(name="splits")(race.splits)


def cli() -> None:
    """Entry point for the CLI."""
    try:
        app()
    except StoreError as e:
        display.display_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    cli()
