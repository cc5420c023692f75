"""Configuration management for gtime."""

from .file import TimezoneConfig
from .settings import GtimeSettings, default_config_file, get_settings, reload_settings
from .timezones import resolve_timezones

__all__ = [
    "GtimeSettings",
    "TimezoneConfig",
    "default_config_file",
    "get_settings",
    "reload_settings",
    "resolve_timezones",
]
