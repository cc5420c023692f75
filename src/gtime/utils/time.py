"""Time parsing for the input formats gtime accepts."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo
from enum import Enum

import pendulum
from dateutil import parser as dateutil_parser

from gtime.errors import (
    DateRangeError,
    NonexistentLocalTimeError,
    TimeFormatError,
    TimestampRangeError,
)
from gtime.utils.clock import Clock, SystemClock

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_RFC3339_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:[Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)
_ISO8601_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}", re.ASCII)
_TIMESTAMP_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)

_HUMAN_READABLE_FORMAT = "%Y-%m-%d %H:%M:%S"
_TIME_ONLY_FORMATS = ("%H:%M", "%H:%M:%S")

INVALID_FORMAT_MESSAGE = (
    "Invalid time format. Expected: timestamp (e.g., '1704110400'), 'now', "
    "RFC3339 (e.g., '2024-01-01T12:00:00Z'), "
    "ISO8601 (e.g., '2024-01-01T12:00:00+00:00'), "
    "date time string (e.g., '2024-01-01 12:00:00'), "
    "or time only (e.g., '15:00' or '15:30:45')"
)


class TimeFormat(Enum):
    """The input format a time string was recognized as."""

    TIMESTAMP = "timestamp"
    NOW = "now"
    RFC3339 = "rfc3339"
    ISO8601 = "iso8601"
    HUMAN_READABLE = "human_readable"
    TIME_ONLY = "time_only"


@dataclass(frozen=True)
class ParsedInstant:
    """A parsed time string.

    Attributes:
        echo: The input exactly as typed, or "now" for the now keyword
        instant: Aware datetime in UTC
        format: Which input format matched
    """

    echo: str
    instant: datetime
    format: TimeFormat


def _to_utc(dt: datetime) -> datetime:
    """Convert an aware datetime (stdlib or pendulum) to a stdlib UTC datetime."""
    offset = dt.utcoffset() or timedelta(0)
    wall = datetime(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second, dt.microsecond)
    return (wall - offset).replace(tzinfo=UTC)


def _parse_with_offset(text: str) -> datetime | None:
    """
    Parse an ISO 8601 string carrying an offset, or return None.

    A leap second (":60") is clamped to ":59".

    Raises:
        DateRangeError: If the time is valid but cannot be expressed in UTC
    """
    if text[17:19] == "60":
        text = f"{text[:17]}59{text[19:]}"

    try:
        # Try pendulum first (better ISO 8601 support)
        parsed = pendulum.parse(text)
    except (ValueError, OverflowError):
        logger.debug(f"pendulum could not parse {text!r}, falling back to dateutil")
        try:
            parsed = dateutil_parser.isoparse(text)
        except (ValueError, OverflowError):
            return None

    # pendulum may hand back Date, Time or Duration objects
    if not isinstance(parsed, datetime):
        return None

    try:
        return _to_utc(parsed)
    except OverflowError as e:
        raise DateRangeError(
            f"Invalid time: '{text}' is outside the supported date range"
        ) from e


def _zone_name(tz: tzinfo, wall: datetime) -> str:
    return getattr(tz, "key", None) or tz.tzname(wall) or str(tz)


def parse_now(text: str, clock: Clock | None = None) -> datetime | None:
    """
    Parse the 'now' keyword (any casing).

    Args:
        text: Raw input
        clock: Clock to read; defaults to the system clock

    Returns:
        The clock's current time in UTC, or None if text is not 'now'
    """
    if text.lower() != "now":
        return None
    return _to_utc((clock or SystemClock()).now())


def parse_rfc3339(text: str) -> datetime | None:
    """
    Parse an RFC 3339 timestamp such as '2024-01-01T12:00:00Z'.

    Accepts 'T', 't' or a space between date and time, fractional seconds,
    and either a 'Z' designator or a numeric offset. Strings in the plain
    '%Y-%m-%dT%H:%M:%S+HH:MM' shape are left to parse_iso8601.

    Returns:
        datetime in UTC, or None if text is not RFC 3339
    """
    if not _RFC3339_PATTERN.fullmatch(text) or _ISO8601_PATTERN.fullmatch(text):
        return None
    # Only the separator and the designator can be lowercase
    return _parse_with_offset(text.upper())


def parse_iso8601(text: str) -> datetime | None:
    """
    Parse an ISO 8601 timestamp with a numeric offset, e.g. '2024-01-01T12:00:00+02:00'.

    Returns:
        datetime in UTC, or None if text is not in that form
    """
    if not _ISO8601_PATTERN.fullmatch(text):
        return None
    return _parse_with_offset(text)


def parse_unix_timestamp(text: str) -> datetime | None:
    """
    Parse a signed 64-bit count of seconds since the Unix epoch.

    Returns:
        datetime in UTC, or None if text is not a 64-bit integer

    Raises:
        TimestampRangeError: If the integer is outside the datetime range
    """
    if not _TIMESTAMP_PATTERN.fullmatch(text):
        return None

    seconds = int(text)
    if not _INT64_MIN <= seconds <= _INT64_MAX:
        return None

    try:
        return _EPOCH + timedelta(seconds=seconds)
    except OverflowError as e:
        raise TimestampRangeError(
            f"Invalid timestamp: {text} is outside the supported date range"
        ) from e


def parse_human_readable(text: str) -> datetime | None:
    """Parse 'YYYY-MM-DD HH:MM:SS' as a UTC wall-clock time, or return None."""
    try:
        wall = datetime.strptime(text, _HUMAN_READABLE_FORMAT)
    except ValueError:
        return None
    return wall.replace(tzinfo=UTC)


def parse_time_only(text: str, clock: Clock | None = None) -> datetime | None:
    """
    Parse a bare time of day ('HH:MM' or 'HH:MM:SS') as today in the local timezone.

    "Today" is the current date in the clock's local timezone. A time that
    falls in a daylight saving overlap resolves to the earlier instant.

    Args:
        text: Raw input
        clock: Clock to read; defaults to the system clock

    Returns:
        datetime in UTC, or None if text is not a time of day

    Raises:
        NonexistentLocalTimeError: If the time is skipped by a daylight saving gap
    """
    for fmt in _TIME_ONLY_FORMATS:
        try:
            time_of_day = datetime.strptime(text, fmt).time()
            break
        except ValueError:
            continue
    else:
        return None

    clock = clock or SystemClock()
    local_tz = clock.local_timezone()
    today = clock.now().astimezone(local_tz).date()
    wall = datetime.combine(today, time_of_day)

    candidate = wall.replace(tzinfo=local_tz, fold=0)
    utc = candidate.astimezone(UTC)
    if utc.astimezone(local_tz).replace(tzinfo=None) != wall:
        raise NonexistentLocalTimeError(
            f"Time '{text}' does not exist on {today.isoformat()} in "
            f"{_zone_name(local_tz, wall)} (skipped by a daylight saving transition)"
        )
    return utc


# Order matters: the first parser to return a datetime wins.
_CASCADE: tuple[tuple[TimeFormat, Callable[[str, Clock], datetime | None]], ...] = (
    (TimeFormat.NOW, parse_now),
    (TimeFormat.RFC3339, lambda text, clock: parse_rfc3339(text)),
    (TimeFormat.ISO8601, lambda text, clock: parse_iso8601(text)),
    (TimeFormat.TIMESTAMP, lambda text, clock: parse_unix_timestamp(text)),
    (TimeFormat.HUMAN_READABLE, lambda text, clock: parse_human_readable(text)),
    (TimeFormat.TIME_ONLY, parse_time_only),
)


def parse_time(raw: str, clock: Clock | None = None) -> ParsedInstant:
    """
    Recognize a time string and convert it to a UTC instant.

    Supports, in this order:
    - 'now' (any casing)
    - RFC 3339: "2024-01-01T12:00:00Z"
    - ISO 8601 with offset: "2024-01-01T12:00:00+02:00"
    - Unix timestamp in seconds: "1704110400"
    - Date and time in UTC: "2024-01-01 12:00:00"
    - Time of day, today in the local timezone: "15:00", "15:30:45"

    Args:
        raw: Time string as typed by the user
        clock: Clock for 'now' and time-of-day input; defaults to the system clock

    Returns:
        ParsedInstant echoing the raw input

    Raises:
        TimeFormatError: If no format matches
        TimestampRangeError: If a timestamp is outside the datetime range
        DateRangeError: If an offset time falls outside the datetime range in UTC
        NonexistentLocalTimeError: If a time of day falls in a daylight saving gap
    """
    clock = clock or SystemClock()

    for time_format, parser in _CASCADE:
        instant = parser(raw, clock)
        if instant is not None:
            logger.debug(f"Parsed {raw!r} as {time_format.value}: {instant.isoformat()}")
            echo = "now" if time_format is TimeFormat.NOW else raw
            return ParsedInstant(echo=echo, instant=instant, format=time_format)

    raise TimeFormatError(INVALID_FORMAT_MESSAGE)
