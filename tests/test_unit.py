"""
Unit Tests - cursor, VarInt codec, enums and small views in isolation.
"""

import pytest

from notepad_tabstate import varint
from notepad_tabstate.cursor import ByteCursor
from notepad_tabstate.enums import (
    CarriageType,
    Encoding,
    FileState,
    carriage_type_from_byte,
    classify_state,
    encoding_from_byte,
)
from notepad_tabstate.errors import (
    InvalidCarriageTypeError,
    InvalidEncodingError,
    InvalidVarintError,
    TruncatedError,
)
from notepad_tabstate.footer import Footer
from notepad_tabstate.util import hex_bytes, hex_dump
from notepad_tabstate.varint import VarInt, read_varint
from notepad_tabstate.widestr import WideStr


# =============================================================================
# ByteCursor
# =============================================================================

class TestByteCursor:

    def test_read_byte_advances(self):
        cursor = ByteCursor(b"\x0a\x0b")
        assert cursor.read_byte() == 0x0A
        assert cursor.offset == 1
        assert cursor.remaining == 1

    def test_read_bytes_is_zero_copy(self):
        data = bytearray(b"abcdef")
        cursor = ByteCursor(data)
        cursor.read_byte()
        chunk = cursor.read_bytes(3)
        assert isinstance(chunk, memoryview)
        assert bytes(chunk) == b"bcd"
        data[1] = ord("X")
        assert bytes(chunk) == b"Xcd"

    def test_read_bytes_zero(self):
        cursor = ByteCursor(b"ab")
        assert bytes(cursor.read_bytes(0)) == b""
        assert cursor.offset == 0

    def test_peek_does_not_advance(self):
        cursor = ByteCursor(b"\x01\x02\x03")
        assert cursor.peek_byte() == 1
        assert cursor.peek_byte(2) == 3
        assert cursor.offset == 0

    def test_peek_negative_offset_rejected(self):
        cursor = ByteCursor(b"\x01\x02\x03")
        cursor.read_bytes(2)
        with pytest.raises(ValueError):
            cursor.peek_byte(-1)
        assert cursor.offset == 2

    def test_is_empty(self):
        cursor = ByteCursor(b"\x01")
        assert not cursor.is_empty()
        cursor.read_byte()
        assert cursor.is_empty()
        assert cursor.remaining == 0

    def test_read_past_end(self):
        cursor = ByteCursor(b"\x01\x02")
        cursor.read_byte()
        with pytest.raises(TruncatedError) as exc:
            cursor.read_bytes(4)
        assert exc.value.offset == 1
        assert exc.value.requested == 4
        assert exc.value.remaining == 1
        # A failed read leaves the cursor where it was
        assert cursor.offset == 1

    def test_read_byte_on_empty(self):
        with pytest.raises(TruncatedError):
            ByteCursor(b"").read_byte()

    def test_peek_past_end(self):
        cursor = ByteCursor(b"\x01\x02")
        with pytest.raises(TruncatedError):
            cursor.peek_byte(2)

    def test_negative_size_rejected(self):
        with pytest.raises(TruncatedError):
            ByteCursor(b"\x01").read_bytes(-1)

    def test_fork_is_independent(self):
        cursor = ByteCursor(b"\x01\x02\x03")
        cursor.read_byte()
        fork = cursor.fork()
        fork.read_bytes(2)
        assert fork.is_empty()
        assert cursor.offset == 1

    def test_buffer_is_read_only(self):
        cursor = ByteCursor(bytearray(b"abc"))
        chunk = cursor.read_bytes(2)
        with pytest.raises(TypeError):
            chunk[0] = 0

    def test_get_remaining(self):
        cursor = ByteCursor(b"abcd")
        cursor.read_bytes(2)
        assert bytes(cursor.get_remaining()) == b"cd"
        assert cursor.offset == 2


# =============================================================================
# VarInt codec
# =============================================================================

class TestVarIntEncode:

    def test_large_value(self):
        assert varint.encode(35259) == bytes([0xBB, 0x93, 0x02])

    def test_medium_value(self):
        assert varint.encode(263) == bytes([0x87, 0x02])

    def test_max_single_byte(self):
        assert varint.encode(0x7F) == bytes([0x7F])

    def test_sign_bit_needs_two_bytes(self):
        assert varint.encode(0x80) == bytes([0x80, 0x01])

    def test_zero(self):
        assert varint.encode(0) == b"\x00"

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            varint.encode(-1)

    @pytest.mark.parametrize("value", [0, 1, 0x7F, 0x80, 0x3FFF, 0x4000, 2**32, 2**64 + 5])
    def test_round_trip(self, value):
        assert varint.decode(varint.encode(value)) == value


class TestVarIntDecode:

    def test_two_bytes(self):
        assert varint.decode(bytes([0x80, 0x01])) == 0x80

    def test_three_bytes(self):
        assert varint.decode(bytes([0xBB, 0x93, 0x02])) == 35259

    def test_validate_accepts(self):
        assert varint.validate([0x87, 0x02]) == b"\x87\x02"

    def test_validate_rejects_missing_continuation(self):
        with pytest.raises(InvalidVarintError) as exc:
            varint.validate(bytes([0x10, 0x80, 0x05]))
        assert "continuation" in str(exc.value)
        assert "10 80 05" in str(exc.value)

    def test_validate_rejects_signed_last_byte(self):
        with pytest.raises(InvalidVarintError):
            varint.validate(bytes([0x80, 0x80, 0x90]))

    def test_validate_rejects_empty(self):
        with pytest.raises(InvalidVarintError):
            varint.validate(b"")


class TestVarIntObject:

    def test_from_value(self):
        v = VarInt.from_value(263)
        assert v.raw == b"\x87\x02"
        assert v.value == 263
        assert v.size == 2
        assert int(v) == 263

    def test_from_bytes_validates(self):
        with pytest.raises(InvalidVarintError):
            VarInt.from_bytes(b"\x80")

    def test_equality_is_on_wire_bytes(self):
        # Same value, different encoding
        padded = VarInt.from_bytes(b"\x80\x00")
        assert padded.value == 0
        assert padded != VarInt.from_value(0)
        assert VarInt.from_value(5) == VarInt.from_bytes(b"\x05")

    def test_read_varint_consumes_exact_bytes(self):
        cursor = ByteCursor(b"\xbb\x93\x02\xff")
        v = read_varint(cursor)
        assert v.value == 35259
        assert v.raw == b"\xbb\x93\x02"
        assert cursor.offset == 3

    def test_read_varint_truncated(self):
        with pytest.raises(TruncatedError):
            read_varint(ByteCursor(b"\x80\x80"))


# =============================================================================
# Enums
# =============================================================================

class TestEnums:

    def test_classify_state(self):
        assert classify_state(0) is FileState.UNSAVED
        assert classify_state(1) is FileState.SAVED
        assert classify_state(2) is None

    @pytest.mark.parametrize("raw,expected", [(1, Encoding.ANSI), (2, Encoding.UTF16LE), (5, Encoding.UTF8)])
    def test_encoding_lookup(self, raw, expected):
        assert encoding_from_byte(raw) is expected

    def test_encoding_rejected(self):
        with pytest.raises(InvalidEncodingError) as exc:
            encoding_from_byte(0x06, offset=0x30)
        assert exc.value.value == 6
        assert exc.value.allowed == (1, 2, 3, 4, 5)
        assert "0x06" in str(exc.value)
        assert "0x30" in str(exc.value)

    def test_carriage_lookup(self):
        assert carriage_type_from_byte(1) is CarriageType.UNIX
        assert carriage_type_from_byte(3) is CarriageType.CRLF

    def test_carriage_rejected(self):
        with pytest.raises(InvalidCarriageTypeError) as exc:
            carriage_type_from_byte(2)
        assert exc.value.allowed == (1, 3)
        assert "0x02" in str(exc.value)


# =============================================================================
# WideStr / Footer / helpers
# =============================================================================

class TestWideStr:

    def test_length_in_units(self):
        w = WideStr(memoryview("héllo".encode("utf-16-le")))
        assert len(w) == 5
        assert w.to_str() == "héllo"
        assert w == "héllo"

    def test_surrogate_pair_counts_two_units(self):
        w = WideStr(memoryview("\U0001F600".encode("utf-16-le")))
        assert len(w) == 2
        assert w.units() == (0xD83D, 0xDE00)

    def test_lone_surrogate_does_not_raise(self):
        w = WideStr(memoryview(b"\x3d\xd8"))
        assert w.to_str() == "\ud83d"

    def test_hashable(self):
        a = WideStr(memoryview(bytearray("notes".encode("utf-16-le"))))
        b = WideStr(memoryview("notes".encode("utf-16-le")))
        assert a == b
        assert hash(a) == hash(b)
        # Equal to the str, so it must hash the same
        assert hash(a) == hash("notes")
        assert {a: 1}["notes"] == 1

    def test_odd_length_rejected(self):
        with pytest.raises(ValueError):
            WideStr(memoryview(b"abc"))


class TestFooter:

    def test_fields(self):
        footer = Footer.from_cursor(ByteCursor(b"\x00\xde\xad\xbe\xef"))
        assert footer.leading_byte == 0
        assert footer.reserved == b"\xde\xad\xbe\xef"

    def test_not_validated(self):
        footer = Footer.from_cursor(ByteCursor(b"\x07\x00\x00\x00\x00"))
        assert footer.leading_byte == 7

    def test_too_short(self):
        with pytest.raises(TruncatedError):
            Footer.from_cursor(ByteCursor(b"\x00\x00\x00\x00"))


class TestHexHelpers:

    def test_hex_bytes(self):
        assert hex_bytes(b"\x01\x00\xab") == "01 00 AB"

    def test_hex_dump(self):
        dump = hex_dump(b"NP\x00\x01")
        assert dump.startswith("00000000: 4E 50 00 01")
        assert dump.endswith("NP..")
