"""Domain value objects - immutable data structures."""

from .buffer_limits import DEFAULT_HISTORY_SIZE, DEFAULT_SCROLLBACK, BufferLimits
from .console_modes import DataMode, DisplayMode, LineEnding
from .console_settings import ConsoleSettings

__all__ = [
    "DisplayMode",
    "DataMode",
    "LineEnding",
    "ConsoleSettings",
    "BufferLimits",
    "DEFAULT_SCROLLBACK",
    "DEFAULT_HISTORY_SIZE",
]
