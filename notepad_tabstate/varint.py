"""
Continuation-bit variable-length integers.

Layout: little-endian base-128. The low seven bits of each byte carry
data and the high bit (0x80) is set on every byte except the last::

    0x7F   -> 7F
    0x80   -> 80 01
    263    -> 87 02
    35259  -> BB 93 02
"""

from __future__ import annotations

from notepad_tabstate.consts import MAX_VAL, SIGN_BIT
from notepad_tabstate.errors import InvalidVarintError


def encode(value: int) -> bytes:
    if value < 0:
        raise ValueError(f"VarInt cannot encode negative value {value}")
    buffer = bytearray()
    while value > MAX_VAL:
        buffer.append((value & MAX_VAL) | SIGN_BIT)
        value >>= 7
    buffer.append(value)
    return bytes(buffer)


def decode(raw) -> int:
    """Decodes the bytes of a single VarInt. Does not validate continuation bits."""
    value = 0
    for i, byte in enumerate(raw):
        value |= (byte & MAX_VAL) << (7 * i)
    return value


def validate(raw) -> bytes:
    """
    Checks that ``raw`` holds exactly one VarInt.

    The buffer must be non-empty, every leading byte must have the
    continuation bit set and the last byte must have it clear.
    """
    raw = bytes(raw)
    if not raw:
        raise InvalidVarintError(raw, "buffer is empty")
    if raw[-1] & SIGN_BIT:
        raise InvalidVarintError(raw, "last byte has the continuation bit set")
    for i, byte in enumerate(raw[:-1]):
        if not byte & SIGN_BIT:
            raise InvalidVarintError(
                raw, f"byte {i} (0x{byte:02X}) is missing the continuation bit"
            )
    return raw


class VarInt:
    """A VarInt as it appeared on the wire, with its decoded value."""

    __slots__ = ("raw", "value")

    def __init__(self, raw: bytes, value: int) -> None:
        self.raw = raw
        self.value = value

    @classmethod
    def from_bytes(cls, raw) -> VarInt:
        raw = validate(raw)
        return cls(raw, decode(raw))

    @classmethod
    def from_value(cls, value: int) -> VarInt:
        return cls(encode(value), value)

    @property
    def size(self) -> int:
        return len(self.raw)

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other) -> bool:
        if not isinstance(other, VarInt):
            return NotImplemented
        return self.raw == other.raw

    def __hash__(self) -> int:
        return hash(self.raw)

    def __repr__(self) -> str:
        return f"VarInt({self.value}, raw={self.raw.hex(' ').upper()!r})"


def read_varint(cursor) -> VarInt:
    """
    Reads one VarInt from the cursor.

    Peeks forward until a byte with the continuation bit clear, then
    consumes exactly that many bytes. Running off the end of the buffer
    raises ``TruncatedError``.
    """
    count = 0
    while True:
        byte = cursor.peek_byte(count)
        count += 1
        if not byte & SIGN_BIT:
            break
    raw = bytes(cursor.read_bytes(count))
    return VarInt(raw, decode(raw))
