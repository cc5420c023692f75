"""Exception hierarchy for gtime."""


class GtimeError(Exception):
    """Base class for all gtime errors."""

    pass


class TimeParseError(GtimeError):
    """Raised when a time string cannot be turned into an instant."""

    pass


class TimeFormatError(TimeParseError):
    """Raised when the input matches none of the accepted time formats."""

    pass


class DateRangeError(TimeParseError):
    """Raised when a well-formed time is outside the representable date range."""

    pass


class TimestampRangeError(DateRangeError):
    """Raised when a numeric timestamp is outside the representable range."""

    pass


class NonexistentLocalTimeError(TimeParseError):
    """Raised when a time of day falls in a daylight saving gap."""

    pass


class RenderError(GtimeError):
    """Raised when a time cannot be shown in one requested timezone."""

    def __init__(self, timezone: str, reason: str) -> None:
        self.timezone = timezone
        self.reason = reason
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"Cannot show time in '{self.timezone}': {self.reason}"


class TimezoneResolutionError(RenderError):
    """Raised when a timezone identifier is not in the timezone database."""

    def _describe(self) -> str:
        return f"Invalid timezone '{self.timezone}': {self.reason}"


class ConfigurationError(GtimeError):
    """Raised when no timezones are configured or settings are invalid."""

    pass


class ConfigFileError(ConfigurationError):
    """Raised when the config file exists but cannot be read or parsed."""

    pass
