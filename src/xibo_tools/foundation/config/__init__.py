"""Configuration loaded from the environment."""

from .settings import (
    HttpSettings,
    LoggingSettings,
    PathSettings,
    WeatherSettings,
    XiboSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "HttpSettings",
    "LoggingSettings",
    "PathSettings",
    "WeatherSettings",
    "XiboSettings",
    "clear_settings_cache",
    "get_settings",
]
