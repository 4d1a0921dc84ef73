"""Race commands for the pace CLI."""

import json
import math

import typer

from pace_cli import display, session
from pacecalc.engine import (
    even_split_pace,
    finish_time_seconds,
    format_duration_seconds,
    negative_splits,
    parse_distance,
    parse_duration_seconds,
    parse_pace,
    sanitize_duration_input,
    split_rows,
)
from pacecalc.models import RaceDistance, SpeedUnit

DISTANCE_OPTION = typer.Option(RaceDistance.FIVE_K, "--distance", "-d", help="Race distance")
CUSTOM_DISTANCE_OPTION = typer.Option(
    None, "--custom-distance", "-c", help="Distance in miles or km for --distance custom"
)
UNIT_OPTION = typer.Option(None, "--unit", "-u", help="Unit system")
JSON_OPTION = typer.Option(False, "--json", "-j", help="Output raw JSON")


# Longest custom distance accepted, in miles or km
MAX_CUSTOM_DISTANCE = 1000.0


def resolve_distance(distance: RaceDistance, custom_distance: str | None, unit: SpeedUnit) -> float:
    """
    Distance of the race in ``unit``.

    Raises:
        typer.Exit: If a custom distance is missing, invalid or too long
    """
    value = distance.in_units(unit)
    if value is not None:
        return value

    parsed = parse_distance(custom_distance) if custom_distance is not None else None
    if parsed is None:
        display.display_error("Custom distance must be a positive number")
        raise typer.Exit(1)
    if parsed > MAX_CUSTOM_DISTANCE:
        display.display_error(f"Custom distance must be at most {MAX_CUSTOM_DISTANCE:g}")
        raise typer.Exit(1)
    return parsed


def parse_target_time(text: str) -> int:
    """
    Parse a target finish time.

    Raises:
        typer.Exit: Unless the time is a positive h:mm:ss, mm:ss or minutes value
    """
    total_seconds = parse_duration_seconds(sanitize_duration_input(text))
    if total_seconds is None or total_seconds <= 0:
        display.display_error(f"Invalid time '{text}' (use h:mm:ss, mm:ss or minutes)")
        raise typer.Exit(1)
    return total_seconds


def finish(
    pace: str = typer.Argument(..., help="Pace per mile or km (mm:ss)"),
    distance: RaceDistance = DISTANCE_OPTION,
    custom_distance: str | None = CUSTOM_DISTANCE_OPTION,
    unit: SpeedUnit | None = UNIT_OPTION,
    json_output: bool = JSON_OPTION,
) -> None:
    """Predict a finish time from a pace."""
    unit = session.resolve_unit(unit)
    distance_units = resolve_distance(distance, custom_distance, unit)

    pace_minutes = parse_pace(pace)
    if pace_minutes is None:
        display.display_error(f"Invalid pace '{pace}'")
        raise typer.Exit(1)

    total_seconds = finish_time_seconds(pace_minutes, distance_units)

    if json_output:
        data = {
            "distance": distance.value,
            "distance_units": distance_units,
            "unit": unit.value,
            "pace_minutes": pace_minutes,
            "finish_seconds": total_seconds,
            "finish": format_duration_seconds(total_seconds),
        }
        print(json.dumps(data, indent=2))
    else:
        display.display_finish_time(
            distance.display_name, distance_units, unit, pace_minutes, total_seconds
        )


def required(
    time: str = typer.Argument(..., help="Target finish time (h:mm:ss)"),
    distance: RaceDistance = DISTANCE_OPTION,
    custom_distance: str | None = CUSTOM_DISTANCE_OPTION,
    unit: SpeedUnit | None = UNIT_OPTION,
    json_output: bool = JSON_OPTION,
) -> None:
    """Show the even pace needed for a target finish time."""
    unit = session.resolve_unit(unit)
    distance_units = resolve_distance(distance, custom_distance, unit)
    total_seconds = parse_target_time(time)

    even = even_split_pace(total_seconds, distance_units)
    if even is None:
        display.display_error("Distance must be a positive number")
        raise typer.Exit(1)
    pace_minutes, speed = even

    if json_output:
        data = {
            "distance": distance.value,
            "distance_units": distance_units,
            "unit": unit.value,
            "target_seconds": total_seconds,
            "pace_minutes": pace_minutes,
            "speed": speed,
        }
        print(json.dumps(data, indent=2))
    else:
        display.display_required_pace(
            distance.display_name, distance_units, unit, total_seconds, pace_minutes, speed
        )


def splits(
    time: str = typer.Argument(..., help="Target finish time (h:mm:ss)"),
    distance: RaceDistance = DISTANCE_OPTION,
    custom_distance: str | None = CUSTOM_DISTANCE_OPTION,
    drop: float = typer.Option(5.0, "--drop", help="Seconds faster per mile or km"),
    unit: SpeedUnit | None = UNIT_OPTION,
    json_output: bool = JSON_OPTION,
) -> None:
    """
    Plan negative splits for a target finish time.

    Examples:
        pace splits 25:00 -d 5k --drop 3
        pace splits 3:30:00 -d marathon -u kph
    """
    if not math.isfinite(drop):
        display.display_error(f"Invalid drop '{drop}'")
        raise typer.Exit(1)

    unit = session.resolve_unit(unit)
    distance_units = resolve_distance(distance, custom_distance, unit)
    total_seconds = parse_target_time(time)

    rows = split_rows(negative_splits(total_seconds, distance_units, drop))
    if not rows:
        display.display_error("No splits for this distance and drop")
        raise typer.Exit(1)

    if json_output:
        print(json.dumps([row.model_dump() for row in rows], indent=2))
    else:
        display.display_splits(rows, unit, drop)
