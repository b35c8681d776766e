"""Configuration for SKYFLAP."""

from skyflap.config.settings import (
    Settings,
    FieldSettings,
    BirdSettings,
    ObstacleSettings,
    DisplaySettings,
    get_settings,
)

__all__ = [
    "Settings",
    "FieldSettings",
    "BirdSettings",
    "ObstacleSettings",
    "DisplaySettings",
    "get_settings",
]
