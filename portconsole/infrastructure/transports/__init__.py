"""Transport infrastructure - device connections."""

from .loopback import LoopbackTransport
from .serial_port import DEFAULT_BAUDRATE, SerialTransport

__all__ = [
    "LoopbackTransport",
    "SerialTransport",
    "DEFAULT_BAUDRATE",
]
