"""In-memory transport implementation."""

from portconsole.domain import DataHandler


class LoopbackTransport:
    """Transport keeping written payloads in memory.

    With ``echo_writes`` enabled every written payload is delivered back
    as inbound data, which behaves like a device wired TX to RX.
    """

    def __init__(self, connected: bool = True, echo_writes: bool = False) -> None:
        self._connected = connected
        self._echo_writes = echo_writes
        self._handler: DataHandler | None = None
        self._written: list[bytes] = []
        self._error = ""
        self._write_limit: int | None = None

    def is_connected(self) -> bool:
        return self._connected

    def set_connected(self, connected: bool) -> None:
        self._connected = connected

    def set_data_handler(self, handler: DataHandler | None) -> None:
        self._handler = handler

    def write(self, data: bytes) -> int:
        if not self._connected:
            self._error = "Device not connected"
            return -1

        if self._write_limit is not None:
            data = data[: self._write_limit]
            self._write_limit = None
            if not data:
                self._error = "Write timeout"
                return 0

        self._written.append(data)
        if self._echo_writes:
            self.feed(data)
        return len(data)

    def error_string(self) -> str:
        return self._error

    def feed(self, data: bytes) -> None:
        """Deliver inbound data as if the device had sent it."""
        if self._handler is not None and data:
            self._handler(data)

    def limit_next_write(self, size: int) -> None:
        """Truncate the next write to ``size`` bytes (0 makes it fail)."""
        self._write_limit = size

    @property
    def written(self) -> list[bytes]:
        """Payloads written so far."""
        return list(self._written)
