"""Transport port - interface for the device connection."""

from collections.abc import Callable
from typing import Protocol

DataHandler = Callable[[bytes], None]


class TransportPort(Protocol):
    """Protocol for a byte-oriented device connection.

    Infrastructure layer implements this with serial ports, sockets or
    in-memory loopbacks.
    """

    def is_connected(self) -> bool:
        """Check if the device is connected."""
        ...

    def write(self, data: bytes) -> int:
        """Write data, returning the number of bytes written (<= 0 on failure)."""
        ...

    def error_string(self) -> str:
        """Description of the last error."""
        ...

    def set_data_handler(self, handler: DataHandler | None) -> None:
        """Register the callback receiving inbound byte chunks."""
        ...
