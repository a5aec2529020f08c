"""Domain services - pure business logic operations."""

from .codec import decode, encode, hex_to_bytes, hexadecimal_str, plain_text_str
from .event_bus import EventBus
from .timestamps import Clock, SystemClock, format_timestamp

__all__ = [
    "decode",
    "encode",
    "hex_to_bytes",
    "hexadecimal_str",
    "plain_text_str",
    "EventBus",
    "Clock",
    "SystemClock",
    "format_timestamp",
]
