"""Console service - coordinates inbound buffering, display and sending."""

import logging
import threading
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any

from portconsole.domain import (
    BufferLimits,
    Clock,
    ConsoleSettings,
    DataMode,
    DisplayMode,
    EventBus,
    HistoryRing,
    LineBuffer,
    LineEnding,
    MalformedHexError,
    SettingChanged,
    SystemClock,
    TickScheduler,
    TransportPort,
    TransportWriteError,
    UnencodableTextError,
    decode,
    encode,
)

from .export_service import ExportResult, ExportService

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Whether raw bytes are waiting for the next flush."""

    IDLE = "idle"
    PENDING = "pending"


class SendStatus(Enum):
    """Outcome of a send attempt."""

    SENT = "sent"
    IGNORED = "ignored"
    INVALID_INPUT = "invalid_input"
    WRITE_FAILED = "write_failed"


@dataclass(frozen=True)
class SendResult:
    """Result of sending user input to the device."""

    status: SendStatus
    bytes_written: int = 0
    reason: str | None = None

    @property
    def success(self) -> bool:
        return self.status is SendStatus.SENT


class ConsoleService:
    """Service owning the scrollback and command history of one device console.

    Inbound chunks are accumulated and only decoded when ``flush`` runs,
    so redraw frequency depends on the tick rate and not on how often
    the device delivers data. All mutations are serialized by a lock.
    """

    def __init__(
        self,
        transport: TransportPort,
        settings: ConsoleSettings | None = None,
        limits: BufferLimits | None = None,
        events: EventBus | None = None,
        clock: Clock | None = None,
        scheduler: TickScheduler | None = None,
        export_service: ExportService | None = None,
    ) -> None:
        self._transport = transport
        self._settings = settings or ConsoleSettings()
        self._limits = limits or BufferLimits()
        self._events = events or EventBus()
        self._scheduler = scheduler
        self._export_service = export_service or ExportService()
        self._lock = threading.RLock()
        self._pending = bytearray()

        self._line_buffer = LineBuffer(
            capacity=self._limits.scrollback,
            clock=clock or SystemClock(),
            events=self._events,
        )
        self._history = HistoryRing(capacity=self._limits.history_size, events=self._events)

    # ============= Lifecycle =============

    def start(self) -> None:
        """Attach to the transport and start the flush tick."""
        self._transport.set_data_handler(self.on_data_received)
        if self._scheduler is not None:
            self._scheduler.start(self.flush)
        logger.debug("Console started display_mode=%s", self._settings.display_mode.name)

    def stop(self) -> None:
        """Detach from the transport, stop the tick and flush what is left."""
        if self._scheduler is not None:
            self._scheduler.stop()
        self._transport.set_data_handler(None)
        self.flush()
        logger.debug("Console stopped")

    # ============= Inbound data =============

    @property
    def state(self) -> SessionState:
        return SessionState.PENDING if self._pending else SessionState.IDLE

    @property
    def pending_bytes(self) -> int:
        return len(self._pending)

    def on_data_received(self, data: bytes) -> None:
        """Accumulate a raw chunk until the next flush."""
        if not data:
            return
        with self._lock:
            self._pending.extend(data)

    def flush(self) -> bool:
        """Decode accumulated bytes into the scrollback.

        Returns:
            True if any bytes were flushed.
        """
        with self._lock:
            if not self._pending:
                return False

            data = bytes(self._pending)
            self._pending.clear()
            text = decode(data, self._settings.display_mode)
            self._line_buffer.append(text, self._settings.show_timestamp)
            return True

    # ============= Outbound data =============

    def send(self, text: str) -> SendResult:
        """Send user input to the device.

        Text is encoded per the data mode, terminated per the line
        ending and written to the transport. Sent commands are kept in
        the history even if the write fails; input that cannot be
        encoded (malformed hex, lone surrogates) is rejected before
        anything is recorded.
        """
        if not text or not self._transport.is_connected():
            return SendResult(SendStatus.IGNORED)

        with self._lock:
            try:
                payload = encode(text, self._settings.data_mode)
            except (MalformedHexError, UnencodableTextError) as e:
                logger.info("Rejected input: %s", e)
                return SendResult(SendStatus.INVALID_INPUT, reason=str(e))

            self._history.push(text)
            payload += self._settings.line_ending.terminator

            written, error = self._write(payload)
            if written <= 0:
                logger.warning("Write failed bytes=%d: %s", len(payload), error)
                return SendResult(SendStatus.WRITE_FAILED, reason=error)

            if self._settings.echo:
                sent = payload[:written]
                self._line_buffer.append(
                    decode(sent, self._settings.display_mode),
                    self._settings.show_timestamp,
                    fresh=True,
                )

            return SendResult(SendStatus.SENT, bytes_written=written)

    def _write(self, payload: bytes) -> tuple[int, str | None]:
        """Write to the transport, returning (bytes written, error description)."""
        try:
            written = self._transport.write(payload)
        except (OSError, TransportWriteError) as e:
            return -1, str(e) or self._transport.error_string()

        if written <= 0:
            return written, self._transport.error_string()
        return written, None

    # ============= History =============

    @property
    def history(self) -> list[str]:
        return self._history.entries

    @property
    def current_history_string(self) -> str:
        return self._history.current()

    def history_up(self) -> bool:
        with self._lock:
            return self._history.up()

    def history_down(self) -> bool:
        with self._lock:
            return self._history.down()

    # ============= Scrollback =============

    @property
    def lines(self) -> list[str]:
        return self._line_buffer.lines

    @property
    def line_count(self) -> int:
        return self._line_buffer.line_count

    @property
    def save_available(self) -> bool:
        """Whether there is anything to export."""
        return self.line_count > 0

    def clear(self) -> None:
        """Drop the scrollback and any bytes waiting for a flush."""
        with self._lock:
            self._pending.clear()
            self._line_buffer.clear()

    def reset(self) -> None:
        """Return to the start-of-session state, dropping the history too."""
        with self._lock:
            self.clear()
            self._history.clear()

    def export(self, path: Path | str) -> ExportResult:
        """Write the scrollback to ``path``."""
        with self._lock:
            lines = self._line_buffer.lines
        return self._export_service.export(lines, path)

    # ============= Events =============

    @property
    def events(self) -> EventBus:
        return self._events

    # ============= Settings =============

    @property
    def settings(self) -> ConsoleSettings:
        return self._settings

    @property
    def data_mode(self) -> DataMode:
        return self._settings.data_mode

    @data_mode.setter
    def data_mode(self, mode: DataMode) -> None:
        self._update_setting("data_mode", DataMode(mode))

    @property
    def line_ending(self) -> LineEnding:
        return self._settings.line_ending

    @line_ending.setter
    def line_ending(self, mode: LineEnding) -> None:
        self._update_setting("line_ending", LineEnding(mode))

    @property
    def display_mode(self) -> DisplayMode:
        return self._settings.display_mode

    @display_mode.setter
    def display_mode(self, mode: DisplayMode) -> None:
        self._update_setting("display_mode", DisplayMode(mode))

    @property
    def echo(self) -> bool:
        return self._settings.echo

    @echo.setter
    def echo(self, enabled: bool) -> None:
        self._update_setting("echo", bool(enabled))

    @property
    def autoscroll(self) -> bool:
        return self._settings.autoscroll

    @autoscroll.setter
    def autoscroll(self, enabled: bool) -> None:
        self._update_setting("autoscroll", bool(enabled))

    @property
    def show_timestamp(self) -> bool:
        return self._settings.show_timestamp

    @show_timestamp.setter
    def show_timestamp(self, enabled: bool) -> None:
        self._update_setting("show_timestamp", bool(enabled))

    def _update_setting(self, name: str, value: Any) -> None:
        with self._lock:
            self._settings = replace(self._settings, **{name: value})
        self._events.publish(SettingChanged(name, value))

    # Option labels, in enum order, for selection widgets

    @staticmethod
    def data_modes() -> list[str]:
        return [mode.label for mode in DataMode]

    @staticmethod
    def line_endings() -> list[str]:
        return [mode.label for mode in LineEnding]

    @staticmethod
    def display_modes() -> list[str]:
        return [mode.label for mode in DisplayMode]
