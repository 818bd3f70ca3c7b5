"""Marker-framed cursor position / selection range."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from notepad_tabstate.consts import SIZE_END_MARKER, SIZE_START_MARKER
from notepad_tabstate.errors import TabStateError, UnrecognizedMarkerError
from notepad_tabstate.varint import VarInt, read_varint

log = logging.getLogger(__name__)


def expect_marker(cursor, marker: bytes) -> None:
    offset = cursor.offset
    actual = bytes(cursor.read_bytes(len(marker)))
    if actual != marker:
        raise UnrecognizedMarkerError(marker, actual, offset)


@dataclass(frozen=True)
class CursorRange:
    """
    Start and end of the tab's cursor, in characters.

    The two are equal when nothing is selected.
    """

    start: VarInt
    end: VarInt

    @property
    def is_selection(self) -> bool:
        return self.start != self.end

    @classmethod
    def from_cursor(cls, cursor) -> CursorRange:
        expect_marker(cursor, SIZE_START_MARKER)
        start = read_varint(cursor)
        end = read_varint(cursor)
        expect_marker(cursor, SIZE_END_MARKER)
        log.debug(f"[Cursor range: start={start.value} end={end.value}]")
        return cls(start, end)


def has_cursor_range(cursor) -> bool:
    """True when a complete cursor range frame starts at the cursor. Never advances it."""
    trial = cursor.fork()
    try:
        CursorRange.from_cursor(trial)
    except TabStateError:
        return False
    return True
