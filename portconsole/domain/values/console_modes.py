"""Console mode enumerations (value objects)."""

from enum import Enum


class DisplayMode(Enum):
    """How incoming bytes are rendered."""

    PLAIN_TEXT = 0
    HEXADECIMAL = 1

    @property
    def label(self) -> str:
        return _DISPLAY_LABELS[self]


class DataMode(Enum):
    """How text typed by the user is turned into bytes."""

    UTF8 = 0
    HEXADECIMAL = 1

    @property
    def label(self) -> str:
        return _DATA_LABELS[self]


class LineEnding(Enum):
    """Terminator appended to every outbound payload."""

    NONE = 0
    NEW_LINE = 1
    CARRIAGE_RETURN = 2
    BOTH = 3

    @property
    def label(self) -> str:
        return _LINE_ENDING_LABELS[self]

    @property
    def terminator(self) -> bytes:
        """Bytes appended to the payload."""
        return _LINE_ENDING_BYTES[self]


_DISPLAY_LABELS = {
    DisplayMode.PLAIN_TEXT: "Plain text",
    DisplayMode.HEXADECIMAL: "Hexadecimal",
}

_DATA_LABELS = {
    DataMode.UTF8: "ASCII",
    DataMode.HEXADECIMAL: "HEX",
}

_LINE_ENDING_LABELS = {
    LineEnding.NONE: "No line ending",
    LineEnding.NEW_LINE: "New line",
    LineEnding.CARRIAGE_RETURN: "Carriage return",
    LineEnding.BOTH: "NL + CR",
}

# BOTH sends CR first, then LF
_LINE_ENDING_BYTES = {
    LineEnding.NONE: b"",
    LineEnding.NEW_LINE: b"\n",
    LineEnding.CARRIAGE_RETURN: b"\r",
    LineEnding.BOTH: b"\r\n",
}
