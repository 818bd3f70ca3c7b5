"""Zero-copy view over UTF-16LE code units inside a larger buffer."""

from __future__ import annotations

import struct


class WideStr:
    """
    UTF-16LE text that still lives in the caller's buffer.

    ``len()`` counts code units, not code points. Nothing is decoded until
    :meth:`to_str` is called, and surrogate pairs are not checked.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: memoryview) -> None:
        if len(raw) % 2:
            raise ValueError(f"UTF-16 buffer must have an even length, got {len(raw)}")
        self._raw = raw

    @property
    def raw(self) -> memoryview:
        return self._raw

    def __len__(self) -> int:
        return len(self._raw) // 2

    def units(self) -> tuple[int, ...]:
        return struct.unpack(f"<{len(self)}H", self._raw)

    def to_str(self) -> str:
        return bytes(self._raw).decode("utf-16-le", "surrogatepass")

    def __str__(self) -> str:
        return self.to_str()

    def __eq__(self, other) -> bool:
        if isinstance(other, WideStr):
            return self._raw == other._raw
        if isinstance(other, str):
            return self.to_str() == other
        return NotImplemented

    def __hash__(self) -> int:
        # Equal to the matching str, so it has to hash like one.
        return hash(self.to_str())

    def __repr__(self) -> str:
        return f"WideStr({self.to_str()!r})"
