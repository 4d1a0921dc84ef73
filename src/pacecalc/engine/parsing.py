"""Parsing and formatting of pace, speed and duration text."""

import math
import re

from pacecalc.models.enums import ConversionDirection

DIGITS = "0123456789"
PACE_CHARS = frozenset(DIGITS + ":.")
SPEED_CHARS = frozenset(DIGITS + ".")
DURATION_CHARS = frozenset(DIGITS + ":")

_INTEGER_SEGMENT = re.compile(r"[0-9]+")


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _keep(text: str, allowed: frozenset[str]) -> str:
    return "".join(ch for ch in text if ch in allowed)


def _finite_float(text: str) -> float | None:
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


# Parsing


def parse_pace(text: str) -> float | None:
    """
    Parse a pace like "8:30" or "8.5" into minutes per unit.

    Characters other than digits, ``:`` and ``.`` are dropped first, so
    "8:30 /mi" parses the same as "8:30".

    Args:
        text: Raw user input

    Returns:
        Pace in minutes, or None if the text is not a positive pace
    """
    normalized = _keep(text.strip(), PACE_CHARS)
    if not normalized:
        return None

    segments = normalized.split(":")

    if len(segments) == 1:
        minutes = _finite_float(segments[0])
        if minutes is None or minutes <= 0:
            return None
        return minutes

    if len(segments) == 2:
        minutes = _finite_float(segments[0])
        seconds = _finite_float(segments[1])
        if minutes is None or seconds is None:
            return None
        total = minutes + seconds / 60.0
        return total if total > 0 else None

    return None


def parse_speed(text: str) -> float | None:
    """
    Parse a speed like "10.5" into units per hour.

    Returns:
        Speed, or None unless the text holds a positive number
    """
    normalized = _keep(text.strip(), SPEED_CHARS)
    if not normalized:
        return None
    value = _finite_float(normalized)
    if value is None or value <= 0:
        return None
    return value


def parse_duration_seconds(text: str) -> int | None:
    """
    Parse "M", "M:SS" or "H:MM:SS" into total seconds.

    Every segment must be a non-negative integer. Seconds, and minutes
    when hours are given, must be below 60.

    Args:
        text: Raw user input, e.g. "1:30:00"

    Returns:
        Total seconds, or None if the text is not a duration
    """
    segments = text.strip().split(":")
    if len(segments) > 3:
        return None
    if not all(_INTEGER_SEGMENT.fullmatch(segment) for segment in segments):
        return None

    values = [int(segment) for segment in segments]

    if len(values) == 1:
        return values[0] * 60

    if len(values) == 2:
        minutes, seconds = values
        if seconds >= 60:
            return None
        return minutes * 60 + seconds

    hours, minutes, seconds = values
    if minutes >= 60 or seconds >= 60:
        return None
    return hours * 3600 + minutes * 60 + seconds


def parse_distance(text: str) -> float | None:
    """Parse a custom race distance; None unless positive and finite."""
    value = _finite_float(text.strip())
    if value is None or value <= 0:
        return None
    return value


# Formatting


def format_speed(value: float) -> str:
    """Format a speed to 2 decimal places (7.5 -> "7.50")."""
    return f"{value:.2f}"


def format_pace_minutes(value: float) -> str | None:
    """
    Format minutes per unit as "M:SS".

    The pace is rounded to the nearest whole second first, so 7.9999
    renders as "8:00" rather than "7:60".

    Args:
        value: Pace in minutes

    Returns:
        Formatted pace, or None unless the pace is positive and finite
    """
    if not math.isfinite(value) or value <= 0:
        return None

    minutes, seconds = divmod(round_half_away(value * 60), 60)
    return f"{minutes}:{seconds:02d}"


def format_duration_seconds(value: int) -> str:
    """
    Format total seconds as "H:MM:SS", or "M:SS" under one hour.

    Negative durations render as "0:00".
    """
    if value < 0:
        return "0:00"

    hours, remainder = divmod(value, 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


# Input sanitization


def sanitize_input(direction: ConversionDirection, text: str) -> str:
    """
    Drop characters that can never be part of the entry for ``direction``.

    Pace entry keeps digits, ``:`` and ``.``; speed entry keeps digits and ``.``.
    """
    if direction is ConversionDirection.PACE_TO_SPEED:
        return _keep(text, PACE_CHARS)
    return _keep(text, SPEED_CHARS)


def sanitize_duration_input(text: str) -> str:
    """Keep only digits and ``:`` in a finish time entry."""
    return _keep(text, DURATION_CHARS)
