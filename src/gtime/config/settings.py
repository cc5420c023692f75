"""Configuration settings for gtime using Pydantic Settings."""

import os
from pathlib import Path
from typing import Annotated, Any, Literal

from platformdirs import user_config_dir
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def default_config_file() -> Path:
    """Per-user config file location for the current platform."""
    return Path(user_config_dir("gtime")) / "config.toml"


class GtimeSettings(BaseSettings):
    """Settings read from GTIME_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GTIME_",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    # === Timezones ===
    timezones: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Comma-separated default timezones (GTIME_TIMEZONES)",
    )

    config_file: Path = Field(
        default_factory=default_config_file,
        description="TOML file with a 'timezones' array",
    )

    # === Logging Configuration ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Application log level",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("timezones", mode="before")
    @classmethod
    def split_timezones(cls, v: Any) -> Any:
        """Split a comma-separated list, trimming entries and dropping empty ones."""
        if isinstance(v, str):
            return [name.strip() for name in v.split(",") if name.strip()]
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("config_file", "log_file")
    @classmethod
    def expand_path(cls, v: Path | None) -> Path | None:
        """Expand user home directory in paths."""
        if v is None:
            return None
        return Path(os.path.expanduser(str(v)))


# Global settings instance
_settings: GtimeSettings | None = None


def get_settings() -> GtimeSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = GtimeSettings()
    return _settings


def reload_settings() -> GtimeSettings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = GtimeSettings()
    return _settings
