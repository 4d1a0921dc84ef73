"""Conversion and race-math engine."""

from .converter import (
    convert,
    handle_input,
    record_current_conversion,
    switch_direction,
    switch_unit,
)
from .parsing import (
    format_duration_seconds,
    format_pace_minutes,
    format_speed,
    parse_distance,
    parse_duration_seconds,
    parse_pace,
    parse_speed,
    sanitize_duration_input,
    sanitize_input,
)
from .race import (
    even_split_pace,
    finish_time_seconds,
    negative_splits,
    required_pace_minutes,
    split_rows,
)
from .reference import ReferenceRow, reference_table
from .shortcuts import QuickConversion, quick_pace_to_speed, quick_speed_to_pace
from .units import (
    KM_PER_MILE,
    convert_pace,
    convert_speed,
    pace_to_speed,
    speed_to_pace,
)

__all__ = [
    # Parsing and formatting
    "parse_pace",
    "parse_speed",
    "parse_duration_seconds",
    "parse_distance",
    "format_speed",
    "format_pace_minutes",
    "format_duration_seconds",
    "sanitize_input",
    "sanitize_duration_input",
    # Units
    "KM_PER_MILE",
    "pace_to_speed",
    "speed_to_pace",
    "convert_speed",
    "convert_pace",
    # Race math
    "finish_time_seconds",
    "required_pace_minutes",
    "even_split_pace",
    "negative_splits",
    "split_rows",
    # Converter
    "convert",
    "handle_input",
    "record_current_conversion",
    "switch_direction",
    "switch_unit",
    # Reference chart
    "ReferenceRow",
    "reference_table",
    # Shortcuts
    "QuickConversion",
    "quick_pace_to_speed",
    "quick_speed_to_pace",
]
