"""Time parsing utilities."""

from .clock import Clock, SystemClock
from .time import (
    ParsedInstant,
    TimeFormat,
    parse_human_readable,
    parse_iso8601,
    parse_now,
    parse_rfc3339,
    parse_time,
    parse_time_only,
    parse_unix_timestamp,
)

__all__ = [
    "Clock",
    "ParsedInstant",
    "SystemClock",
    "TimeFormat",
    "parse_human_readable",
    "parse_iso8601",
    "parse_now",
    "parse_rfc3339",
    "parse_time",
    "parse_time_only",
    "parse_unix_timestamp",
]
