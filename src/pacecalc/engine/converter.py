"""Pace/speed conversion and converter state transitions."""

import logging

from pacecalc.models.enums import ConversionDirection, SpeedUnit
from pacecalc.models.state import ConverterState
from pacecalc.stores import ConversionHistory

from .parsing import format_pace_minutes, format_speed, parse_pace, parse_speed, sanitize_input
from .units import convert_pace, convert_speed, pace_to_speed, speed_to_pace

logger = logging.getLogger(__name__)


def convert(direction: ConversionDirection, text: str) -> str:
    """
    Run a full conversion on raw input.

    Args:
        direction: Pace to speed or speed to pace
        text: Raw user input

    Returns:
        Formatted result, or an empty string if the input does not parse
    """
    trimmed = text.strip()
    if not trimmed:
        return ""

    if direction is ConversionDirection.PACE_TO_SPEED:
        pace = parse_pace(trimmed)
        if pace is None:
            return ""
        return format_speed(pace_to_speed(pace))

    speed = parse_speed(trimmed)
    if speed is None:
        return ""
    return format_pace_minutes(speed_to_pace(speed)) or ""


def handle_input(state: ConverterState, text: str) -> ConverterState:
    """Replace the typed input, dropping characters illegal for the direction."""
    return state.model_copy(update={"input_text": sanitize_input(state.direction, text)})


def record_current_conversion(state: ConverterState, history: ConversionHistory) -> None:
    """Add the current conversion to ``history`` if it produced a result."""
    result = state.result
    if not result or not state.input_text.strip():
        return
    history.add(
        input=state.input_text,
        input_suffix=state.input_suffix,
        result=result,
        result_suffix=state.result_suffix,
    )


def switch_direction(
    state: ConverterState,
    direction: ConversionDirection,
    history: ConversionHistory | None = None,
) -> ConverterState:
    """
    Flip the conversion direction.

    The current conversion is recorded first; the input is cleared since a
    pace is not a valid speed entry and vice versa.
    """
    if direction == state.direction:
        return state
    if history is not None:
        record_current_conversion(state, history)
    logger.debug(f"Direction {state.direction.value} -> {direction.value}")
    return state.model_copy(update={"direction": direction, "input_text": ""})


def switch_unit(
    state: ConverterState,
    unit: SpeedUnit,
    history: ConversionHistory | None = None,
) -> ConverterState:
    """
    Change the unit system, rescaling whatever has been typed.

    "8:00" in /mi becomes "4:58" in /km; "10.00" MPH becomes "16.09" KM/H.
    Input that does not parse is cleared.
    """
    if unit == state.unit:
        return state
    if history is not None:
        record_current_conversion(state, history)
    logger.debug(f"Unit {state.unit.value} -> {unit.value}")
    return state.model_copy(
        update={
            "unit": unit,
            "input_text": _rescale_input(state.direction, state.input_text, state.unit, unit),
        }
    )


def _rescale_input(
    direction: ConversionDirection, text: str, from_unit: SpeedUnit, to_unit: SpeedUnit
) -> str:
    trimmed = text.strip()
    if not trimmed:
        return text

    if direction is ConversionDirection.PACE_TO_SPEED:
        pace = parse_pace(trimmed)
        if pace is None:
            return ""
        return format_pace_minutes(convert_pace(pace, from_unit, to_unit)) or ""

    speed = parse_speed(trimmed)
    if speed is None:
        return ""
    return format_speed(convert_speed(speed, from_unit, to_unit))
