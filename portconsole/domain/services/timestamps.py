"""Wall clock abstraction and line timestamp formatting."""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Protocol for wall clock time (for testability)."""

    def now(self) -> datetime:
        """Get current local time."""
        ...


class SystemClock:
    """Clock implementation using the local system time."""

    def now(self) -> datetime:
        return datetime.now()


def format_timestamp(moment: datetime) -> str:
    """Format a line prefix such as ``"14:03:07.042 -> "``."""
    return f"{moment:%H:%M:%S}.{moment.microsecond // 1000:03d} -> "
