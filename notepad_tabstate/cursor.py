"""Bounds-checked sequential reader over an immutable byte buffer."""

from __future__ import annotations

from notepad_tabstate.errors import TruncatedError


class ByteCursor:
    """
    Reads forward through a buffer, one field at a time.

    The cursor holds a read-only ``memoryview`` of the caller's buffer and an
    offset. ``read_bytes`` hands back zero-copy slices of that view, so the
    slices stay valid only as long as the caller keeps the buffer alive.
    Nothing outside this class moves the offset.
    """

    __slots__ = ("_view", "_pos")

    def __init__(self, buffer, offset: int = 0) -> None:
        self._view = memoryview(buffer).cast("B").toreadonly()
        if offset < 0 or offset > len(self._view):
            raise TruncatedError(0, offset, len(self._view))
        self._pos = offset

    @property
    def offset(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._view) - self._pos

    def is_empty(self) -> bool:
        return self._pos >= len(self._view)

    def _check(self, size: int) -> None:
        if size < 0 or size > self.remaining:
            raise TruncatedError(self._pos, size, self.remaining)

    def read_byte(self) -> int:
        self._check(1)
        byte = self._view[self._pos]
        self._pos += 1
        return byte

    def read_bytes(self, size: int) -> memoryview:
        self._check(size)
        chunk = self._view[self._pos:self._pos + size]
        self._pos += size
        return chunk

    def peek_byte(self, offset: int = 0) -> int:
        """Byte ``offset`` positions ahead of the cursor, without advancing."""
        if offset < 0:
            raise ValueError(f"peek offset must not be negative, got {offset}")
        self._check(offset + 1)
        return self._view[self._pos + offset]

    def get_remaining(self) -> memoryview:
        """Everything after the cursor, without advancing."""
        return self._view[self._pos:]

    def fork(self) -> ByteCursor:
        """An independent cursor over the same buffer at the current offset."""
        return ByteCursor(self._view, self._pos)
