"""Injectable access to the system clock and the process-local timezone."""

from datetime import UTC, datetime, tzinfo
from typing import Protocol

import pendulum


class Clock(Protocol):
    """Source of the current instant and the local timezone."""

    def now(self) -> datetime:
        """Return the current time as an aware UTC datetime."""
        ...

    def local_timezone(self) -> tzinfo:
        """Return the timezone the process runs in."""
        ...


class SystemClock:
    """Clock backed by the operating system."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def local_timezone(self) -> tzinfo:
        return pendulum.local_timezone()
