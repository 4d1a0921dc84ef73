"""One-shot conversions for voice shortcuts and widgets."""

import logging
import math

from pydantic import BaseModel, Field

from pacecalc.errors import InvalidInputError
from pacecalc.models.enums import SpeedUnit

from .parsing import format_pace_minutes, format_speed, parse_pace
from .units import pace_to_speed, speed_to_pace

logger = logging.getLogger(__name__)


class QuickConversion(BaseModel):
    """Result value plus the sentence spoken back to the user."""

    value: str = Field(description="Formatted result, e.g. '7.50' or '6:00'")
    dialog: str = Field(description="Human readable answer")


def quick_pace_to_speed(pace: str, unit: SpeedUnit = SpeedUnit.MPH) -> QuickConversion:
    """
    Convert a pace per mile (MPH) or per kilometer (KPH) to a speed.

    Raises:
        InvalidInputError: If the pace does not parse
    """
    pace_minutes = parse_pace(pace)
    if pace_minutes is None:
        logger.info(f"Rejected pace input: {pace!r}")
        raise InvalidInputError("Please provide a valid pace in mm:ss format, e.g. 7:30")

    formatted = format_speed(pace_to_speed(pace_minutes))
    dialog = f"A pace of {pace} per {unit.distance_name} is {formatted} {unit.value}"
    return QuickConversion(value=formatted, dialog=dialog)


def quick_speed_to_pace(speed: float, unit: SpeedUnit = SpeedUnit.MPH) -> QuickConversion:
    """
    Convert a speed in MPH or KPH to a pace in the same unit system.

    Raises:
        InvalidInputError: If the speed is not a positive number
    """
    if not math.isfinite(speed) or speed <= 0:
        raise InvalidInputError("Please provide a speed greater than zero")

    formatted = format_pace_minutes(speed_to_pace(speed))
    if formatted is None:
        raise InvalidInputError("Could not convert that speed to a pace")

    dialog = f"{format_speed(speed)} {unit.value} is a {formatted} {unit.pace_label} pace"
    return QuickConversion(value=formatted, dialog=dialog)
