"""The 4-byte header: magic and file state."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from notepad_tabstate.consts import MAGIC
from notepad_tabstate.enums import FileState, classify_state
from notepad_tabstate.errors import InvalidMagicError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Header:
    magic: bytes
    raw_state: int

    @property
    def state(self) -> FileState | None:
        """The classified state, or ``None`` when the byte is not a known state."""
        return classify_state(self.raw_state)

    @classmethod
    def from_cursor(cls, cursor) -> Header:
        # The magic is technically just "NP", but the third byte has always
        # been null, so all three are checked.
        magic = bytes(cursor.read_bytes(len(MAGIC)))
        if magic != MAGIC:
            raise InvalidMagicError(MAGIC, magic)
        raw_state = cursor.read_byte()
        log.debug(f"[Header: magic OK, state byte 0x{raw_state:02X}]")
        return cls(magic, raw_state)
