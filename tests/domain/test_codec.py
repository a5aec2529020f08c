"""Tests for the console codec."""

import pytest

from portconsole.domain import (
    DataMode,
    DisplayMode,
    MalformedHexError,
    MalformedHexInputError,
    UnencodableTextError,
    decode,
    encode,
    hex_to_bytes,
    hexadecimal_str,
    plain_text_str,
)


class TestPlainTextDecoding:
    """Tests for plain text rendering."""

    def test_ascii(self):
        """Test ASCII bytes decode unchanged."""
        assert plain_text_str(b"hello\r\n") == "hello\r\n"

    def test_utf8_round_trip(self):
        """Test valid UTF-8 decodes to the original string."""
        text = "température 25°C ✓ 温度"
        assert decode(text.encode("utf-8"), DisplayMode.PLAIN_TEXT) == text

    def test_invalid_utf8_falls_back_to_latin1(self):
        """Test invalid UTF-8 is rendered one character per byte."""
        data = b"abc\xff\xfe"
        assert plain_text_str(data) == "abc\xff\xfe"

    def test_truncated_multibyte_sequence(self):
        """Test a split UTF-8 sequence falls back instead of raising."""
        data = "é".encode("utf-8")[:1]
        assert plain_text_str(data) == "\xc3"

    def test_never_raises_for_any_byte(self):
        """Test every single byte value decodes."""
        for value in range(256):
            assert len(plain_text_str(bytes([value]))) == 1

    def test_empty(self):
        """Test empty input decodes to empty text."""
        assert decode(b"", DisplayMode.PLAIN_TEXT) == ""


class TestHexadecimalDecoding:
    """Tests for hex dump rendering."""

    def test_bytes_grouped_with_trailing_space(self):
        """Test each byte becomes two lowercase digits and a space."""
        assert hexadecimal_str(b"\x01\xab\xff") == "01 ab ff "

    def test_line_feed_marked_with_carriage_return(self):
        """Test 0x0A is followed by a carriage return."""
        assert hexadecimal_str(b"\x0a") == "0a\r "

    def test_carriage_return_marked_with_line_feed(self):
        """Test 0x0D is followed by a line feed."""
        assert hexadecimal_str(b"\x0d") == "0d\n "

    def test_crlf_sequence(self):
        """Test a CR LF pair in a realistic frame."""
        assert decode(b"OK\r\n", DisplayMode.HEXADECIMAL) == "4f 4b 0d\n 0a\r "

    def test_uppercase_input_digits_not_involved(self):
        """Test bytes not rendering as 0a/0d are untouched."""
        assert hexadecimal_str(b"\xa0\xd0\x00") == "a0 d0 00 "

    def test_empty(self):
        """Test empty input gives empty dump."""
        assert hexadecimal_str(b"") == ""


class TestHexEncoding:
    """Tests for parsing user-typed hex."""

    def test_spaced_pairs(self):
        """Test spaced byte groups parse."""
        assert hex_to_bytes("de ad be ef") == b"\xde\xad\xbe\xef"

    def test_unspaced_and_mixed_case(self):
        """Test digits without spaces and in either case parse."""
        assert hex_to_bytes("0A0d") == b"\x0a\x0d"

    def test_spaces_anywhere(self):
        """Test spaces inside a pair are ignored."""
        assert hex_to_bytes(" 4 1  42 ") == b"AB"

    def test_round_trip_with_hex_dump_groups(self):
        """Test a dump without line marks parses back to the same bytes."""
        data = bytes(range(0x10, 0x30))
        assert encode(hexadecimal_str(data), DataMode.HEXADECIMAL) == data

    def test_odd_length_raises(self):
        """Test odd digit count is rejected."""
        with pytest.raises(MalformedHexInputError):
            encode("0af", DataMode.HEXADECIMAL)

    def test_non_hex_pair_raises(self):
        """Test non-hex characters are rejected."""
        with pytest.raises(MalformedHexError, match="zz"):
            hex_to_bytes("01 zz")

    def test_sign_characters_rejected(self):
        """Test pairs int() would accept but are not hex digits."""
        with pytest.raises(MalformedHexError):
            hex_to_bytes("+f")

    def test_error_carries_input(self):
        """Test the error keeps the rejected text."""
        with pytest.raises(MalformedHexError) as exc_info:
            hex_to_bytes("abc")
        assert exc_info.value.text == "abc"
        assert isinstance(exc_info.value, ValueError)

    def test_empty_text(self):
        """Test empty input gives no bytes."""
        assert hex_to_bytes("") == b""


class TestUtf8Encoding:
    """Tests for UTF-8 sending."""

    def test_encodes_verbatim(self):
        """Test text is sent as its UTF-8 bytes."""
        assert encode("AT+GMR ✓", DataMode.UTF8) == "AT+GMR ✓".encode()

    def test_hex_looking_text_not_parsed(self):
        """Test hex digits are sent literally in UTF-8 mode."""
        assert encode("0a", DataMode.UTF8) == b"0a"

    def test_lone_surrogate_rejected(self):
        """Test text without a UTF-8 form raises a console error."""
        with pytest.raises(UnencodableTextError) as exc_info:
            encode("ok\udcff", DataMode.UTF8)

        assert exc_info.value.text == "ok\udcff"
        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)
