"""Core rendering of parsed times into timezones."""

from .renderer import (
    RenderedLine,
    format_offset,
    format_timezone_output,
    render_timezone,
    render_timezones,
    resolve_timezone,
)

__all__ = [
    "RenderedLine",
    "format_offset",
    "format_timezone_output",
    "render_timezone",
    "render_timezones",
    "resolve_timezone",
]
