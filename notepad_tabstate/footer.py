"""Fixed-size trailer."""

from __future__ import annotations

from dataclasses import dataclass

from notepad_tabstate.consts import FOOTER_SIZE


@dataclass(frozen=True)
class Footer:
    """The last five bytes of a TabState. Only their presence is checked."""

    raw: bytes

    @property
    def leading_byte(self) -> int:
        # Zero in every sample seen so far.
        return self.raw[0]

    @property
    def reserved(self) -> bytes:
        return self.raw[1:]

    @classmethod
    def from_cursor(cls, cursor) -> Footer:
        return cls(bytes(cursor.read_bytes(FOOTER_SIZE)))
