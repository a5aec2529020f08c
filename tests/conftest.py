"""Shared test fixtures and configuration."""

from datetime import datetime

import pytest

from portconsole.domain import (
    BufferChanged,
    BufferLimits,
    ConsoleSettings,
    EventBus,
    FragmentReceived,
    HistoryCursorChanged,
    HistoryRing,
    LineBuffer,
    LineReceived,
    SettingChanged,
)

# ============= Domain Fixtures =============

FIXED_TIME = datetime(2024, 3, 9, 13, 45, 6, 789_123)


class FakeClock:
    """Fake wall clock for deterministic timestamps."""

    def __init__(self, moment: datetime = FIXED_TIME):
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def set(self, moment: datetime) -> None:
        self._moment = moment


@pytest.fixture
def fake_clock():
    """Fake clock frozen at FIXED_TIME."""
    return FakeClock()


@pytest.fixture
def event_bus():
    """Empty event bus."""
    return EventBus()


class EventRecorder:
    """Collects every console event published on a bus."""

    EVENT_TYPES = (
        LineReceived,
        FragmentReceived,
        BufferChanged,
        HistoryCursorChanged,
        SettingChanged,
    )

    def __init__(self, bus: EventBus):
        self.events: list = []
        for event_type in self.EVENT_TYPES:
            bus.subscribe(event_type, self.events.append)

    def of_type(self, event_type: type) -> list:
        return [event for event in self.events if isinstance(event, event_type)]

    def lines(self) -> list[str]:
        return [event.text for event in self.of_type(LineReceived)]

    def fragments(self) -> list[str]:
        return [event.text for event in self.of_type(FragmentReceived)]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def recorder(event_bus):
    """Recorder subscribed to the shared event bus."""
    return EventRecorder(event_bus)


@pytest.fixture
def line_buffer(fake_clock, event_bus):
    """Empty line buffer using the fake clock and shared bus."""
    return LineBuffer(clock=fake_clock, events=event_bus)


@pytest.fixture
def history_ring(event_bus):
    """Empty history ring on the shared bus."""
    return HistoryRing(events=event_bus)


# ============= Mock Fixtures =============


class FakeTransport:
    """Fake transport for testing."""

    def __init__(self, connected: bool = True):
        self.connected = connected
        self.handler = None
        self.written: list[bytes] = []
        self.write_result: int | None = None
        self.write_error: Exception | None = None
        self.error = ""

    def is_connected(self) -> bool:
        return self.connected

    def write(self, data: bytes) -> int:
        if self.write_error is not None:
            raise self.write_error
        self.written.append(data)
        if self.write_result is not None:
            return self.write_result
        return len(data)

    def error_string(self) -> str:
        return self.error

    def set_data_handler(self, handler) -> None:
        self.handler = handler

    # Test helpers
    def receive(self, data: bytes) -> None:
        """Simulate the device sending data."""
        assert self.handler is not None, "console not started"
        self.handler(data)


@pytest.fixture
def fake_transport():
    """Connected fake transport."""
    return FakeTransport()


class ManualScheduler:
    """Scheduler whose ticks are fired by the test."""

    def __init__(self):
        self.callback = None
        self.stopped = False

    def start(self, callback) -> None:
        self.callback = callback
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True
        self.callback = None

    def tick(self):
        assert self.callback is not None, "scheduler not started"
        return self.callback()


@pytest.fixture
def manual_scheduler():
    """Scheduler driven by the test."""
    return ManualScheduler()


# ============= Service Fixtures =============


@pytest.fixture
def console_service(fake_transport, manual_scheduler, fake_clock, event_bus):
    """Started console service with plain settings and timestamps off."""
    from portconsole.application.services import ConsoleService

    service = ConsoleService(
        transport=fake_transport,
        settings=ConsoleSettings(show_timestamp=False),
        limits=BufferLimits(),
        events=event_bus,
        clock=fake_clock,
        scheduler=manual_scheduler,
    )
    service.start()
    return service
