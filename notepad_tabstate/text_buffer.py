"""Length-prefixed UTF-16 text."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from notepad_tabstate.varint import VarInt, read_varint
from notepad_tabstate.widestr import WideStr

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextBuffer:
    length: VarInt
    text: WideStr

    @property
    def char_count(self) -> int:
        return self.length.value

    @classmethod
    def from_cursor(cls, cursor) -> TextBuffer:
        length = read_varint(cursor)
        # The length is in UTF-16 units, two bytes each.
        raw = cursor.read_bytes(length.value * 2)
        log.debug(f"[Text buffer: {length.value} chars at offset 0x{cursor.offset - len(raw):X}]")
        return cls(length, WideStr(raw))
