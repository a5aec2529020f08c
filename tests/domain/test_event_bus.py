"""Tests for EventBus."""

import logging

from portconsole.domain import BufferChanged, EventBus, LineReceived


class TestEventBus:
    """Tests for EventBus."""

    def test_publish_to_subscribers_of_type(self):
        """Test handlers only receive their event type."""
        bus = EventBus()
        lines: list = []
        changes: list = []
        bus.subscribe(LineReceived, lines.append)
        bus.subscribe(BufferChanged, changes.append)

        bus.publish(LineReceived("hi"))

        assert lines == [LineReceived("hi")]
        assert changes == []

    def test_publish_without_subscribers(self):
        """Test publishing with nobody listening is fine."""
        EventBus().publish(BufferChanged())

    def test_handlers_called_in_order(self):
        """Test handlers run in subscription order."""
        bus = EventBus()
        calls: list[str] = []
        bus.subscribe(BufferChanged, lambda e: calls.append("a"))
        bus.subscribe(BufferChanged, lambda e: calls.append("b"))

        bus.publish(BufferChanged())

        assert calls == ["a", "b"]

    def test_unsubscribe(self):
        """Test the returned callable removes the handler."""
        bus = EventBus()
        received: list = []
        unsubscribe = bus.subscribe(LineReceived, received.append)

        unsubscribe()
        unsubscribe()
        bus.publish(LineReceived("x"))

        assert received == []
        assert bus.handler_count(LineReceived) == 0

    def test_failing_handler_does_not_stop_others(self, caplog):
        """Test a raising handler is logged and the rest still run."""
        bus = EventBus()
        received: list = []

        def broken(event):
            raise RuntimeError("boom")

        bus.subscribe(LineReceived, broken)
        bus.subscribe(LineReceived, received.append)

        with caplog.at_level(logging.ERROR):
            bus.publish(LineReceived("x"))

        assert received == [LineReceived("x")]
        assert "Event handler failed" in caplog.text
