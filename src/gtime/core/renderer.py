"""Render a UTC instant as wall-clock time in requested timezones."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo

import pendulum

from gtime.errors import RenderError, TimezoneResolutionError
from gtime.utils.time import ParsedInstant, TimeFormat

logger = logging.getLogger(__name__)

# Input formats whose output keeps the 'T' date/time separator
_T_SEPARATED_FORMATS = frozenset({TimeFormat.RFC3339, TimeFormat.ISO8601})

# Some zones have no name and report their offset (e.g. "+09") as the abbreviation
_OFFSET_ABBREVIATION_CHARS = frozenset("0123456789+-")


@dataclass(frozen=True)
class RenderedLine:
    """One line of output: a requested timezone and the time shown in it."""

    timezone: str
    body: str

    def __str__(self) -> str:
        return f"{self.timezone}: {self.body}"


def resolve_timezone(name: str) -> tzinfo:
    """
    Look up an IANA timezone identifier.

    Args:
        name: Identifier such as 'America/New_York'

    Returns:
        tzinfo for the zone

    Raises:
        TimezoneResolutionError: If the identifier is not in the database
    """
    try:
        return pendulum.timezone(name)
    except (ValueError, KeyError, OSError) as e:
        raise TimezoneResolutionError(name, f"'{name}' is not a valid timezone") from e


def format_offset(offset: timedelta) -> str:
    """
    Format a UTC offset as '+HH:MM' or '-HH:MM'.

    Sub-minute parts of historical offsets are dropped.
    """
    total_seconds = int(offset.total_seconds())
    sign = "-" if total_seconds < 0 else "+"
    hours, remainder = divmod(abs(total_seconds), 3600)
    return f"{sign}{hours:02d}:{remainder // 60:02d}"


def format_local_time(local: datetime, time_format: TimeFormat) -> str:
    """Format the wall-clock part of a localized datetime for the given input format."""
    separator = "T" if time_format in _T_SEPARATED_FORMATS else " "
    return local.replace(tzinfo=None, microsecond=0).isoformat(sep=separator)


def format_timezone_output(local: datetime, time_format: TimeFormat) -> str:
    """
    Build the display body for a localized datetime.

    The abbreviation and offset annotation follows three cases:
    - no abbreviation: "<time> (<offset>)"
    - abbreviation is itself an offset such as "+09": "<time> +09"
    - named abbreviation: "<time> EST (-05:00)"

    Args:
        local: Aware datetime in the target timezone
        time_format: Format the input was recognized as

    Returns:
        Formatted body string
    """
    formatted_time = format_local_time(local, time_format)
    offset_str = format_offset(local.utcoffset() or timedelta(0))
    tz_name = local.tzname() or ""

    if not tz_name:
        return f"{formatted_time} ({offset_str})"
    if set(tz_name) <= _OFFSET_ABBREVIATION_CHARS:
        return f"{formatted_time} {tz_name}"
    return f"{formatted_time} {tz_name} ({offset_str})"


def render_timezone(instant: datetime, timezone: str, time_format: TimeFormat) -> RenderedLine:
    """
    Show an instant in one timezone.

    Args:
        instant: Aware datetime
        timezone: Timezone identifier as requested by the user
        time_format: Format the input was recognized as

    Returns:
        RenderedLine labelled with the identifier as given

    Raises:
        TimezoneResolutionError: If the identifier is unknown
        RenderError: If the instant cannot be represented in the zone
    """
    tz = resolve_timezone(timezone)
    try:
        local = instant.astimezone(tz)
    except OverflowError as e:
        raise RenderError(timezone, "time is outside the supported date range") from e
    return RenderedLine(timezone=timezone, body=format_timezone_output(local, time_format))


def render_timezones(
    parsed: ParsedInstant, timezones: Iterable[str]
) -> list[RenderedLine | RenderError]:
    """
    Show a parsed instant in every requested timezone.

    A timezone that fails is returned as its error in place of a line, and
    the remaining timezones are still rendered.

    Args:
        parsed: Result of parse_time
        timezones: Identifiers in the order requested

    Returns:
        One entry per requested timezone, in request order
    """
    results: list[RenderedLine | RenderError] = []
    for timezone in timezones:
        try:
            results.append(render_timezone(parsed.instant, timezone, parsed.format))
        except RenderError as e:
            logger.debug(f"Skipping timezone {timezone!r}: {e.reason}")
            results.append(e)
    return results
