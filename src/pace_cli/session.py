"""Settings-backed stores for the pace CLI."""

from pacecalc.config import get_settings
from pacecalc.models import ConversionDirection, SpeedUnit
from pacecalc.stores import ConversionHistory, FavoritesStore


def get_history() -> ConversionHistory:
    """Open the history file named by the settings."""
    settings = get_settings()
    return ConversionHistory(max_items=settings.history_max, path=settings.history_path)


def get_favorites() -> FavoritesStore:
    """Open the favorites file named by the settings."""
    settings = get_settings()
    return FavoritesStore(max_items=settings.favorites_max, path=settings.favorites_path)


def resolve_unit(unit: SpeedUnit | None) -> SpeedUnit:
    """Use the given unit, falling back to the configured default."""
    return unit if unit is not None else get_settings().default_unit


def resolve_direction(direction: ConversionDirection | None) -> ConversionDirection:
    """Use the given direction, falling back to the configured default."""
    return direction if direction is not None else get_settings().default_direction
