"""Scheduling infrastructure - periodic flush ticks."""

from .asyncio_scheduler import DEFAULT_TICK_RATE, AsyncioTickScheduler

__all__ = [
    "AsyncioTickScheduler",
    "DEFAULT_TICK_RATE",
]
