"""Configuration management for pacecalc."""

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import ConversionDirection, SpeedUnit

logger = logging.getLogger(__name__)


def find_env_file() -> Path | None:
    """Find .env file at git root (project root)."""
    # Search up for git root and use .env there
    current = Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / ".git").exists():
            env_file = parent / ".env"
            if env_file.exists():
                return env_file
            break
    # Fallback to current directory
    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env
    return None


# Find env file once at module load
_env_file = find_env_file()


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field can be set with a ``PACECALC_`` prefixed variable,
    e.g. ``PACECALC_DEFAULT_UNIT=kph``, or from a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="PACECALC_",
        env_file=_env_file,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Converter defaults
    default_unit: SpeedUnit = Field(
        default=SpeedUnit.MPH,
        description="Unit system used when none is given",
    )
    default_direction: ConversionDirection = Field(
        default=ConversionDirection.PACE_TO_SPEED,
        description="Conversion direction used when none is given",
    )

    # Stores
    data_dir: Path = Field(
        default=Path.home() / ".config" / "pace",
        description="Directory holding history and favorites",
    )
    history_max: int = Field(
        default=20,
        ge=1,
        description="Maximum number of history records kept",
    )
    favorites_max: int = Field(
        default=20,
        ge=1,
        description="Maximum number of favorites kept",
    )

    # Application Settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )

    @property
    def history_path(self) -> Path:
        return self.data_dir / "history.json"

    @property
    def favorites_path(self) -> Path:
        return self.data_dir / "favorites.json"


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern).

    Returns:
        Settings instance with all configuration
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug(f"Loaded settings (env file: {_env_file})")
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
