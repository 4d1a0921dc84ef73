"""Data models for pacecalc."""

from .enums import ConversionDirection, RaceDistance, SpeedUnit
from .records import ConversionRecord, FavoriteConversion
from .splits import Split, SplitRow
from .state import ConverterState

__all__ = [
    # Enums
    "ConversionDirection",
    "RaceDistance",
    "SpeedUnit",
    # Records
    "ConversionRecord",
    "FavoriteConversion",
    # Splits
    "Split",
    "SplitRow",
    # State
    "ConverterState",
]
