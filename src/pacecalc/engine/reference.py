"""Pace/speed reference chart."""

from pydantic import BaseModel, Field

from pacecalc.models.enums import SpeedUnit

from .parsing import format_pace_minutes, format_speed
from .units import convert_pace, convert_speed, pace_to_speed

# Mile paces listed in the chart: 5:00 to 12:00 in 30 second steps
FIRST_MINUTE = 5
LAST_MINUTE = 12


class ReferenceRow(BaseModel):
    """One line of the reference chart."""

    pace: str = Field(description="Pace in the chart's unit, e.g. '8:00'")
    pace_suffix: str = Field(description="'/mi' or '/km'")
    speed: str = Field(description="Speed in the chart's unit, e.g. '7.50'")
    speed_suffix: str = Field(description="'MPH' or 'KM/H'")


def mile_paces() -> list[float]:
    """Mile paces shown in the chart, in minutes."""
    paces = []
    for minute in range(FIRST_MINUTE, LAST_MINUTE + 1):
        paces.append(float(minute))
        if minute < LAST_MINUTE:
            paces.append(minute + 0.5)
    return paces


def reference_table(unit: SpeedUnit = SpeedUnit.MPH) -> list[ReferenceRow]:
    """
    Build the reference chart for ``unit``.

    Rows follow the mile paces 5:00 to 12:00. For the kilometer chart each
    mile pace is shown as its equivalent km pace and speed.
    """
    rows = []
    for mile_pace in mile_paces():
        pace = convert_pace(mile_pace, SpeedUnit.MPH, unit)
        speed = convert_speed(pace_to_speed(mile_pace), SpeedUnit.MPH, unit)
        rows.append(
            ReferenceRow(
                pace=format_pace_minutes(pace) or "–",
                pace_suffix=unit.pace_label,
                speed=format_speed(speed),
                speed_suffix=unit.speed_label,
            )
        )
    return rows
