"""Conversion commands for the pace CLI."""

import json

import typer

from pace_cli import display, session
from pacecalc.engine import (
    handle_input,
    quick_pace_to_speed,
    quick_speed_to_pace,
    record_current_conversion,
    reference_table,
    switch_unit,
)
from pacecalc.errors import PaceCalcError
from pacecalc.models import ConversionDirection, ConverterState, SpeedUnit


def convert_value(
    value: str = typer.Argument(..., help="Pace (mm:ss or decimal minutes) or speed"),
    direction: ConversionDirection | None = typer.Option(
        None, "--direction", "-d", help="Conversion direction"
    ),
    unit: SpeedUnit | None = typer.Option(None, "--unit", "-u", help="Unit of the input"),
    to_unit: SpeedUnit | None = typer.Option(
        None, "--to-unit", "-t", help="Rescale the input into this unit first"
    ),
    save: bool = typer.Option(True, "--save/--no-save", help="Record in history"),
    favorite: bool = typer.Option(False, "--favorite", "-f", help="Pin the conversion"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """
    Convert a pace to a speed, or a speed to a pace.

    Examples:
        pace convert 8:30                       # 7.06 MPH
        pace convert 10 -d speed-to-pace        # 6:00 /mi
        pace convert 8:00 --to-unit kph         # 4:58 /km -> 12.07 KM/H
    """
    state = ConverterState(
        direction=session.resolve_direction(direction),
        unit=session.resolve_unit(unit),
    )
    state = handle_input(state, value)

    if to_unit is not None:
        state = switch_unit(state, to_unit)

    result = state.result
    if not result:
        display.display_error(f"Could not convert '{value}'")
        display.display_info(state.helper_text)
        raise typer.Exit(1)

    if save:
        record_current_conversion(state, session.get_history())
    if favorite:
        favorites = session.get_favorites()
        pinned = (state.input_text, state.input_suffix, result, state.result_suffix)
        if favorites.is_favorited(*pinned):
            if not json_output:
                display.display_warning("Already in favorites")
        else:
            favorites.add(*pinned)

    if json_output:
        data = {
            "direction": state.direction.value,
            "unit": state.unit.value,
            "input": state.input_text,
            "input_suffix": state.input_suffix,
            "result": result,
            "result_suffix": state.result_suffix,
        }
        print(json.dumps(data, indent=2))
    else:
        display.display_conversion(
            state.input_text,
            state.input_suffix,
            result,
            state.result_suffix,
            title=state.direction.label,
        )


def quick(
    value: str = typer.Argument(..., help="Pace (mm:ss) or speed"),
    direction: ConversionDirection | None = typer.Option(
        None, "--direction", "-d", help="Conversion direction"
    ),
    unit: SpeedUnit | None = typer.Option(None, "--unit", "-u", help="Unit system"),
) -> None:
    """Answer a conversion in one sentence."""
    direction = session.resolve_direction(direction)
    unit = session.resolve_unit(unit)

    try:
        if direction is ConversionDirection.PACE_TO_SPEED:
            answer = quick_pace_to_speed(value, unit)
        else:
            try:
                speed = float(value)
            except ValueError:
                speed = 0.0
            answer = quick_speed_to_pace(speed, unit)
    except PaceCalcError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from None

    display.console.print(answer.dialog)


def reference(
    unit: SpeedUnit | None = typer.Option(None, "--unit", "-u", help="Unit system"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show the pace/speed reference chart."""
    unit = session.resolve_unit(unit)
    rows = reference_table(unit)

    if json_output:
        print(json.dumps([row.model_dump() for row in rows], indent=2))
    else:
        display.display_reference(rows, unit)
