"""Domain errors for the console engine."""

from typing import Any


class ConsoleError(Exception):
    """Base error carrying optional context information."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if not self.context:
            return base_msg
        context_str = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{base_msg} ({context_str})"


class MalformedHexError(ConsoleError, ValueError):
    """User-typed hex has odd length or non-hex characters."""

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message, {"input": text})
        self.text = text


# Name used by UI layers that report validation failures
MalformedHexInputError = MalformedHexError


class TransportWriteError(ConsoleError):
    """The transport could not write the payload."""


class ExportIOError(ConsoleError):
    """Writing the scrollback to a file failed."""


class UnencodableTextError(ConsoleError, ValueError):
    """User text cannot be encoded for sending (e.g. a lone surrogate)."""

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message, {"input": text})
        self.text = text
