"""Scheduler port - interface for the periodic flush tick."""

from collections.abc import Callable
from typing import Protocol


class TickScheduler(Protocol):
    """Protocol for a recurring timer driving the console flush."""

    def start(self, callback: Callable[[], object]) -> None:
        """Start calling ``callback`` at a fixed cadence."""
        ...

    def stop(self) -> None:
        """Stop calling the callback."""
        ...
