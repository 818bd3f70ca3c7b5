"""
Error taxonomy for TabState decoding.

Every failure is a subclass of :class:`TabStateError` (itself a
``ValueError``) and keeps the raw values it was built from as attributes,
so callers can inspect a failure without parsing the message. Byte values
are rendered in hex in messages to make unseen variants easier to compare
against a hex dump.

:class:`TrailingData` is not an exception. It is a non-fatal diagnostic
attached to a successfully decoded view.
"""

from __future__ import annotations

from dataclasses import dataclass

from notepad_tabstate.consts import FILE_STATE_UNSAVED, FOOTER_SIZE, UNSUPPORTED_MESSAGE
from notepad_tabstate.util import hex_bytes


class TabStateError(ValueError):
    """Base class for all TabState decoding failures."""


class EmptyBufferError(TabStateError):

    def __init__(self) -> None:
        super().__init__("TabState buffer is empty")


class TruncatedError(TabStateError):
    """A read asked for more bytes than the buffer has left."""

    def __init__(self, offset: int, requested: int, remaining: int) -> None:
        self.offset = offset
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"Read of {requested} byte(s) at offset 0x{offset:X} exceeds buffer: "
            f"{remaining} byte(s) remaining"
        )


class InvalidMagicError(TabStateError):

    def __init__(self, expected: bytes, actual: bytes) -> None:
        self.expected = bytes(expected)
        self.actual = bytes(actual)
        super().__init__(
            f"Magic bytes invalid. Should be \"NP\" and a null byte. "
            f"Expected: {hex_bytes(self.expected)} Got: {hex_bytes(self.actual)} "
            f"raw: {self.actual!r}"
        )


class InvalidVarintError(TabStateError):

    def __init__(self, raw: bytes, reason: str) -> None:
        self.raw = bytes(raw)
        self.reason = reason
        super().__init__(f"Invalid VarInt [{hex_bytes(self.raw)}]: {reason}")


class _InvalidEnumError(TabStateError):
    kind = "value"

    def __init__(self, value: int, allowed, offset: int | None = None) -> None:
        self.value = value
        self.allowed = tuple(allowed)
        self.offset = offset
        allowed_hex = ", ".join(f"0x{v:02X}" for v in self.allowed)
        where = f" at offset 0x{offset:X}" if offset is not None else ""
        super().__init__(
            f"Unknown {self.kind}{where}. Expected one of: [{allowed_hex}]. Got: 0x{value:02X}"
        )


class InvalidEncodingError(_InvalidEnumError):
    kind = "encoding"


class InvalidCarriageTypeError(_InvalidEnumError):
    kind = "carriage type"


class UnrecognizedMarkerError(TabStateError):
    """A fixed marker literal did not match the bytes at the reader's position."""

    def __init__(self, expected: bytes, actual: bytes, offset: int) -> None:
        self.expected = bytes(expected)
        self.actual = bytes(actual)
        self.offset = offset
        super().__init__(
            f"Unknown marker encountered at offset 0x{offset:X}. "
            f"Expected: [{hex_bytes(self.expected)}] Got: [{hex_bytes(self.actual)}]."
        )


class UnsupportedStateError(TabStateError):
    """
    The header state byte is neither saved nor unsaved.

    An out-of-range state usually means the tab was still open when the file
    was copied, and the byte holds a size rather than a state.
    """

    def __init__(self, state: int, remaining: int, message: str | None = None) -> None:
        self.state = state
        self.remaining = remaining
        if message is None:
            message = (
                f"File state should be 0x01 or 0x00. Got: 0x{state:02X} ({state}). "
                f"There are likely {state + FOOTER_SIZE} bytes left in the buffer. "
                f"Remaining: {remaining}"
            )
        super().__init__(message)


class UnknownBufferSizeError(UnsupportedStateError):
    """An unsaved tab whose text size was never written."""

    def __init__(self, remaining: int) -> None:
        super().__init__(
            FILE_STATE_UNSAVED,
            remaining,
            f"{UNSUPPORTED_MESSAGE}. Remaining after footer: {remaining}",
        )


@dataclass(frozen=True)
class TrailingData:
    """Bytes left in the buffer after the footer."""

    offset: int
    length: int
    preview: bytes

    def __str__(self) -> str:
        return (
            f"{self.length} byte(s) remaining after footer at offset 0x{self.offset:X}: "
            f"{hex_bytes(self.preview)}"
        )
