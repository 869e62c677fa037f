"""Configuration module using Pydantic Settings.

Usage:
    from underbar.config import UnderbarSettings, get_settings

    seed = get_settings().shuffle_seed
"""

from underbar.config.settings import UnderbarSettings, get_settings, set_settings

__all__ = [
    "UnderbarSettings",
    "get_settings",
    "set_settings",
]
