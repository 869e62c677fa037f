"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from underbar.config import UnderbarSettings, get_settings, set_settings

    # Load from environment variables (UNDERBAR_*)
    settings = get_settings()

    # Or override with explicit values
    previous = set_settings(UnderbarSettings(shuffle_seed=7))
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class UnderbarSettings(BaseSettings):  # type: ignore[misc]
    """Library-wide configuration.

    Attributes:
        shuffle_seed: Seed for shuffle's random source (None = unseeded).
        warn_on_shape_mismatch: Log a warning whenever a shape-mismatch
            failure value is returned.
        log_level: Level used by configure_logging() when none is given.

    Environment Variables:
        UNDERBAR_SHUFFLE_SEED
        UNDERBAR_WARN_ON_SHAPE_MISMATCH
        UNDERBAR_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="UNDERBAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    shuffle_seed: int | None = None
    warn_on_shape_mismatch: bool = True
    log_level: str = "WARNING"


# Module-level settings instance, created on first access
_settings: UnderbarSettings | None = None


def get_settings() -> UnderbarSettings:
    """Access the process-wide settings, loading them on first use.

    Returns:
        The active UnderbarSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = UnderbarSettings()
    return _settings


def set_settings(settings: UnderbarSettings | None) -> UnderbarSettings | None:
    """Replace the process-wide settings.

    Args:
        settings: New settings, or None to reload from the environment on
            next access.

    Returns:
        The previously active settings (None if never loaded).
    """
    global _settings
    previous = _settings
    _settings = settings
    return previous
