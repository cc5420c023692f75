"""TOML config file holding default timezones."""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gtime.errors import ConfigFileError

logger = logging.getLogger(__name__)


class TimezoneConfig(BaseModel):
    """Contents of the config file.

    Example:
        timezones = ["America/New_York", "Europe/London", "Asia/Tokyo"]
    """

    model_config = ConfigDict(extra="ignore")

    timezones: list[str] = Field(default_factory=list)

    @classmethod
    def from_file(cls, path: Path) -> "TimezoneConfig":
        """
        Read and validate a config file.

        Raises:
            ConfigFileError: If the file cannot be read, is not valid TOML,
                or 'timezones' is not an array of strings
        """
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise ConfigFileError(f"Invalid TOML in config file {path}: {e}") from e
        except OSError as e:
            raise ConfigFileError(f"Cannot read config file {path}: {e}") from e

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigFileError(
                f"Invalid config file {path}: 'timezones' must be an array of strings"
            ) from e

    @classmethod
    def load(cls, path: Path) -> "TimezoneConfig":
        """Read the config file, treating a missing file as an empty config."""
        if not path.exists():
            logger.debug(f"No config file at {path}")
            return cls()
        logger.debug(f"Reading config file {path}")
        return cls.from_file(path)
