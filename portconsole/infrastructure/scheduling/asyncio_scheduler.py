"""Tick scheduler running on the asyncio event loop."""

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_TICK_RATE = 24.0  # Hz


class AsyncioTickScheduler:
    """Call a function at a fixed rate from an asyncio task.

    Must be started from within a running event loop.
    """

    def __init__(self, rate_hz: float = DEFAULT_TICK_RATE) -> None:
        if rate_hz <= 0:
            raise ValueError("Tick rate must be positive")
        self._interval = 1.0 / rate_hz
        self._task: asyncio.Task | None = None

    @property
    def interval(self) -> float:
        """Seconds between ticks."""
        return self._interval

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, callback: Callable[[], object]) -> None:
        """Start ticking. Restarts if already running."""
        self.stop()
        self._task = asyncio.get_running_loop().create_task(self._run(callback))

    def stop(self) -> None:
        """Stop ticking."""
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self, callback: Callable[[], object]) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                callback()
            except Exception:
                logger.exception("Tick callback failed")
