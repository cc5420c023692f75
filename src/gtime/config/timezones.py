"""Pick the timezones to show from the command line, environment or config file."""

import logging
from collections.abc import Sequence

from gtime.config.file import TimezoneConfig
from gtime.config.settings import GtimeSettings, get_settings
from gtime.errors import ConfigurationError

logger = logging.getLogger(__name__)


def resolve_timezones(
    cli_timezones: Sequence[str] | None,
    settings: GtimeSettings | None = None,
) -> list[str]:
    """
    Resolve the timezones to display.

    Precedence, first non-empty source wins:
    1. -z/--timezone arguments (nothing else is read)
    2. GTIME_TIMEZONES environment variable
    3. 'timezones' array in the config file

    Args:
        cli_timezones: Values of repeated -z/--timezone arguments
        settings: Settings to use; defaults to the global settings

    Returns:
        Non-empty list of timezone identifiers

    Raises:
        ConfigurationError: If no source provides any timezone
        ConfigFileError: If the config file exists but is invalid
    """
    if cli_timezones:
        logger.debug("Using timezones from command line arguments")
        return list(cli_timezones)

    settings = settings or get_settings()

    if settings.timezones:
        logger.debug("Using timezones from GTIME_TIMEZONES")
        return list(settings.timezones)

    config = TimezoneConfig.load(settings.config_file)
    if config.timezones:
        logger.debug(f"Using timezones from {settings.config_file}")
        return config.timezones

    raise ConfigurationError(
        "No timezone specified. Use -z or --timezone to specify one or more timezones, "
        "set GTIME_TIMEZONES environment variable, "
        f"or configure timezones in {settings.config_file}"
    )
