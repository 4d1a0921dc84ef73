"""Unit conversion utilities for pace and speed."""

from pacecalc.models.enums import SpeedUnit

# Conversion constant, used in both directions
KM_PER_MILE = 1.60934

MINUTES_PER_HOUR = 60.0


def pace_to_speed(pace_minutes: float) -> float:
    """
    Convert a pace to a speed in the same unit system.

    Args:
        pace_minutes: Minutes per mile or kilometer

    Returns:
        Miles or kilometers per hour
    """
    return MINUTES_PER_HOUR / pace_minutes


def speed_to_pace(speed: float) -> float:
    """
    Convert a speed to a pace in the same unit system.

    Args:
        speed: Miles or kilometers per hour

    Returns:
        Minutes per mile or kilometer
    """
    return MINUTES_PER_HOUR / speed


def convert_speed(speed: float, from_unit: SpeedUnit, to_unit: SpeedUnit) -> float:
    """
    Rescale a speed from one unit system to the other.

    Args:
        speed: Speed expressed in ``from_unit``
        from_unit: Unit system of the input
        to_unit: Unit system wanted

    Returns:
        Speed expressed in ``to_unit``
    """
    if from_unit == to_unit:
        return speed
    if from_unit is SpeedUnit.MPH:
        return speed * KM_PER_MILE
    return speed / KM_PER_MILE


def convert_pace(pace_minutes: float, from_unit: SpeedUnit, to_unit: SpeedUnit) -> float:
    """
    Rescale a pace from one unit system to the other.

    A kilometer is shorter than a mile, so a mile pace becomes a smaller
    kilometer pace: 8:00 /mi is about 4:58 /km.

    Args:
        pace_minutes: Pace expressed in ``from_unit``
        from_unit: Unit system of the input
        to_unit: Unit system wanted

    Returns:
        Pace expressed in ``to_unit``
    """
    if from_unit == to_unit:
        return pace_minutes
    if from_unit is SpeedUnit.MPH:
        return pace_minutes / KM_PER_MILE
    return pace_minutes * KM_PER_MILE
