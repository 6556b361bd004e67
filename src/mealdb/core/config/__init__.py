"""Configuration module with environment variable support."""

from .settings import LoggingSettings, MealDBSettings, Settings, get_settings


__all__ = [
    "LoggingSettings",
    "MealDBSettings",
    "Settings",
    "get_settings",
]
