"""Pure domain layer - no infrastructure dependencies."""

# Entities
from .entities import HistoryRing, LineBuffer

# Errors
from .errors import (
    ConsoleError,
    ExportIOError,
    MalformedHexError,
    MalformedHexInputError,
    TransportWriteError,
    UnencodableTextError,
)

# Events
from .events import (
    BufferChanged,
    ConsoleEvent,
    FragmentReceived,
    HistoryCursorChanged,
    LineReceived,
    SettingChanged,
)

# Ports
from .ports import DataHandler, TickScheduler, TransportPort

# Services
from .services import (
    Clock,
    EventBus,
    SystemClock,
    decode,
    encode,
    format_timestamp,
    hex_to_bytes,
    hexadecimal_str,
    plain_text_str,
)

# Value Objects
from .values import (
    DEFAULT_HISTORY_SIZE,
    DEFAULT_SCROLLBACK,
    BufferLimits,
    ConsoleSettings,
    DataMode,
    DisplayMode,
    LineEnding,
)

__all__ = [
    # Values
    "DisplayMode",
    "DataMode",
    "LineEnding",
    "ConsoleSettings",
    "BufferLimits",
    "DEFAULT_SCROLLBACK",
    "DEFAULT_HISTORY_SIZE",
    # Entities
    "LineBuffer",
    "HistoryRing",
    # Events
    "ConsoleEvent",
    "LineReceived",
    "FragmentReceived",
    "BufferChanged",
    "HistoryCursorChanged",
    "SettingChanged",
    # Errors
    "ConsoleError",
    "MalformedHexError",
    "MalformedHexInputError",
    "TransportWriteError",
    "UnencodableTextError",
    "ExportIOError",
    # Services
    "decode",
    "encode",
    "hex_to_bytes",
    "hexadecimal_str",
    "plain_text_str",
    "EventBus",
    "Clock",
    "SystemClock",
    "format_timestamp",
    # Ports
    "TransportPort",
    "DataHandler",
    "TickScheduler",
]
