"""Byte <-> text conversion for the console.

Inbound bytes are rendered either as text (UTF-8 with a Latin-1
fallback) or as a spaced hex dump. Outbound text is either sent as
UTF-8 or parsed from user-typed hex.
"""

import string

from ..errors import MalformedHexError, UnencodableTextError
from ..values import DataMode, DisplayMode

_HEX_DIGITS = frozenset(string.hexdigits)


def plain_text_str(data: bytes) -> str:
    """Decode bytes as UTF-8, falling back to Latin-1.

    The UTF-8 result is only kept when encoding it again reproduces
    ``data`` exactly, so this never raises.
    """
    text = data.decode("utf-8", errors="replace")
    if text.encode("utf-8") != data:
        text = data.decode("latin-1")
    return text


def hexadecimal_str(data: bytes) -> str:
    """Render bytes as two-digit hex groups, each followed by a space.

    Line feed and carriage return bytes are marked so the dump breaks
    lines where the device did: ``0a`` gains a trailing CR and ``0d``
    a trailing LF.
    """
    text = "".join(f"{byte:02x} " for byte in data)
    text = text.replace("0a", "0a\r")
    return text.replace("0d", "0d\n")


def hex_to_bytes(text: str) -> bytes:
    """Parse user-typed hex such as ``"de ad be ef"`` into bytes.

    Raises:
        MalformedHexError: odd digit count or a non-hex character.
    """
    digits = text.replace(" ", "")
    if len(digits) % 2:
        raise MalformedHexError("Hex input has an odd number of digits", text)

    result = bytearray()
    for i in range(0, len(digits), 2):
        pair = digits[i : i + 2]
        if not _HEX_DIGITS.issuperset(pair):
            raise MalformedHexError(f"Invalid hex byte {pair!r}", text)
        result.append(int(pair, 16))
    return bytes(result)


def decode(data: bytes, mode: DisplayMode) -> str:
    """Convert inbound bytes to display text."""
    if mode is DisplayMode.HEXADECIMAL:
        return hexadecimal_str(data)
    return plain_text_str(data)


def encode(text: str, mode: DataMode) -> bytes:
    """Convert user text to outbound bytes (without line ending).

    Raises:
        MalformedHexError: hex mode input that cannot be parsed.
        UnencodableTextError: text that has no UTF-8 form.
    """
    if mode is DataMode.HEXADECIMAL:
        return hex_to_bytes(text)
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        bad = e.object[e.start : e.end]
        raise UnencodableTextError(f"Cannot encode {bad!r} as UTF-8", text) from e
