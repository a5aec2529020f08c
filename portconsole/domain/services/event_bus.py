"""Synchronous publish/subscribe for console events."""

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]


class EventBus:
    """Dispatch events to handlers registered per event type.

    Handlers run synchronously in publish order. A failing handler is
    logged and does not prevent the remaining handlers from running.
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: type, handler: Handler) -> Callable[[], None]:
        """Register a handler for an event type.

        Returns:
            Callable that removes the subscription.
        """
        self._handlers[event_type].append(handler)

        def unsubscribe() -> None:
            handlers = self._handlers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def publish(self, event: Any) -> None:
        """Deliver an event to every handler of its type."""
        for handler in list(self._handlers.get(type(event), ())):
            try:
                handler(event)
            except Exception:
                logger.exception("Event handler failed event=%s", type(event).__name__)

    def handler_count(self, event_type: type) -> int:
        return len(self._handlers.get(event_type, ()))
