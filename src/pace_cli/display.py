"""Display utilities for the pace CLI with Rich formatting."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from pacecalc.engine import (
    ReferenceRow,
    format_duration_seconds,
    format_pace_minutes,
    format_speed,
)
from pacecalc.models import ConversionRecord, FavoriteConversion, SplitRow, SpeedUnit

console = Console()

# Shown in place of a value that could not be computed
PLACEHOLDER = "-"


def format_pace_or_placeholder(pace_minutes: float) -> str:
    return format_pace_minutes(pace_minutes) or PLACEHOLDER


def display_conversion(
    input_text: str,
    input_suffix: str,
    result: str,
    result_suffix: str,
    title: str,
) -> None:
    """Display a single conversion."""
    body = (
        f"[bold]{input_text}[/bold] [dim]{input_suffix}[/dim]\n"
        f"[bold green]{result or PLACEHOLDER}[/bold green] [dim]{result_suffix}[/dim]"
    )
    console.print(Panel(body, title=f"[bold cyan]{title}[/bold cyan]", border_style="cyan"))


def display_finish_time(
    distance_name: str,
    distance: float,
    unit: SpeedUnit,
    pace_minutes: float,
    finish_seconds: int,
) -> None:
    """Display the finish time for a pace over a race distance."""
    table = Table(title="Finish Time", show_header=True, border_style="cyan")
    table.add_column("Distance", style="cyan")
    table.add_column("Pace", justify="right", style="yellow")
    table.add_column("Finish", justify="right", style="green")

    table.add_row(
        f"{distance_name} ({distance:g} {_distance_suffix(unit)})",
        f"{format_pace_or_placeholder(pace_minutes)} {unit.pace_label}",
        format_duration_seconds(finish_seconds),
    )

    console.print(table)


def display_required_pace(
    distance_name: str,
    distance: float,
    unit: SpeedUnit,
    total_seconds: int,
    pace_minutes: float,
    speed: float,
) -> None:
    """Display the even pace needed for a target time."""
    table = Table(title="Even Splits", show_header=True, border_style="cyan")
    table.add_column("Distance", style="cyan")
    table.add_column("Target", justify="right")
    table.add_column("Pace", justify="right", style="yellow")
    table.add_column("Speed", justify="right", style="green")

    table.add_row(
        f"{distance_name} ({distance:g} {_distance_suffix(unit)})",
        format_duration_seconds(total_seconds),
        f"{format_pace_or_placeholder(pace_minutes)} {unit.pace_label}",
        f"{format_speed(speed)} {unit.speed_label}",
    )

    console.print(table)


def display_splits(rows: list[SplitRow], unit: SpeedUnit, drop_seconds: float) -> None:
    """Display a negative split schedule."""
    table = Table(
        title=f"Negative Splits ({drop_seconds:g}s faster per {unit.distance_name})",
        show_header=True,
        border_style="cyan",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Distance", justify="right", style="cyan")
    table.add_column("Split", justify="right", style="green")
    table.add_column("Pace", justify="right", style="yellow")
    table.add_column("Elapsed", justify="right")

    for row in rows:
        table.add_row(
            str(row.index),
            f"{row.distance:.2f} {_distance_suffix(unit)}",
            format_duration_seconds(row.seconds),
            f"{format_pace_or_placeholder(row.pace_minutes)} {unit.pace_label}",
            format_duration_seconds(row.elapsed),
        )

    console.print(table)


def display_reference(rows: list[ReferenceRow], unit: SpeedUnit) -> None:
    """Display the pace/speed reference chart."""
    table = Table(title=f"Pace Reference ({unit.speed_label})", show_header=True, border_style="cyan")
    table.add_column("Pace", justify="right", style="yellow")
    table.add_column("Speed", justify="right", style="green")

    for row in rows:
        table.add_row(f"{row.pace} {row.pace_suffix}", f"{row.speed} {row.speed_suffix}")

    console.print(table)


def display_history(records: tuple[ConversionRecord, ...]) -> None:
    """Display recent conversions."""
    if not records:
        display_info("No conversions yet")
        return

    table = Table(title=f"History ({len(records)})", show_header=True, border_style="cyan")
    table.add_column("When", style="dim")
    table.add_column("Input", justify="right", style="cyan")
    table.add_column("Result", justify="right", style="green")

    for record in records:
        table.add_row(
            record.date.strftime("%Y-%m-%d %H:%M"),
            f"{record.input} {record.input_suffix}",
            f"{record.result} {record.result_suffix}",
        )

    console.print(table)


def display_favorites(favorites: tuple[FavoriteConversion, ...]) -> None:
    """Display pinned conversions."""
    if not favorites:
        display_info("No favorites yet")
        return

    table = Table(title=f"Favorites ({len(favorites)})", show_header=True, border_style="cyan")
    table.add_column("ID", style="dim")
    table.add_column("Input", justify="right", style="cyan")
    table.add_column("Result", justify="right", style="green")

    for favorite in favorites:
        table.add_row(
            str(favorite.id)[:8],
            f"{favorite.input} {favorite.input_suffix}",
            f"{favorite.result} {favorite.result_suffix}",
        )

    console.print(table)


def _distance_suffix(unit: SpeedUnit) -> str:
    return "mi" if unit is SpeedUnit.MPH else "km"


def display_success(message: str) -> None:
    """Display success message."""
    console.print(f"[green]✓[/green] {message}")


def display_error(message: str) -> None:
    """Display error message."""
    console.print(f"[red]✗[/red] {message}")


def display_warning(message: str) -> None:
    """Display warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def display_info(message: str) -> None:
    """Display info message."""
    console.print(f"[dim]ℹ[/dim] {message}")
