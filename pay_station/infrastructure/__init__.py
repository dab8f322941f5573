"""
Infrastructure layer - Configuration.

Contains:
- Settings
"""

from .settings import (
    LoggingSettings,
    RateSettings,
    Settings,
    StationSettings,
    build_rate_table,
    get_settings,
    reset_settings,
)


__all__ = [
    # Settings
    "LoggingSettings",
    "RateSettings",
    "Settings",
    "StationSettings",
    "build_rate_table",
    "get_settings",
    "reset_settings",
]
