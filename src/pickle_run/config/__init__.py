"""Configuration: environment settings and YAML themes."""

from .settings import Settings, DisplaySettings, GameplaySettings, AudioSettings, get_settings
from .theme import Theme, load_theme, list_themes

__all__ = [
    "Settings",
    "DisplaySettings",
    "GameplaySettings",
    "AudioSettings",
    "get_settings",
    "Theme",
    "load_theme",
    "list_themes",
]
