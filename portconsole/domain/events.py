"""Domain events published by the console engine."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class LineReceived:
    """A line was closed by a terminator."""

    text: str


@dataclass(frozen=True, slots=True)
class FragmentReceived:
    """Text was appended to the open line without closing it."""

    text: str


@dataclass(frozen=True, slots=True)
class BufferChanged:
    """The scrollback content changed."""


@dataclass(frozen=True, slots=True)
class HistoryCursorChanged:
    """The command history cursor moved or the history changed."""

    cursor: int


@dataclass(frozen=True, slots=True)
class SettingChanged:
    """A console setting was assigned."""

    name: str
    value: Any


ConsoleEvent = (
    LineReceived | FragmentReceived | BufferChanged | HistoryCursorChanged | SettingChanged
)
