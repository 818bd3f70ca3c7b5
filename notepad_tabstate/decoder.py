"""
TabState decoder.

Reads a Notepad tab state buffer front to back in one pass::

    START -> HEADER_READ -> SAVED_METADATA -> CURSOR_RANGE -> TEXT_BUFFER -> FOOTER -> DONE
                         \\-> UNSAVED_SKIP --/

Usage:
    with open(path, "rb") as f:
        data = f.read()
    view = parse(data)
    print(view.path, view.text)

The returned :class:`TabStateView` borrows the file path and text from
``data``; keep ``data`` alive for as long as the view is used.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from notepad_tabstate.consts import MAGIC, MAX_RESERVED_SCAN
from notepad_tabstate.cursor import ByteCursor
from notepad_tabstate.enums import FileState
from notepad_tabstate.errors import (
    EmptyBufferError,
    TrailingData,
    UnknownBufferSizeError,
    UnsupportedStateError,
)
from notepad_tabstate.footer import Footer
from notepad_tabstate.header import Header
from notepad_tabstate.metadata import Metadata
from notepad_tabstate.selection import CursorRange
from notepad_tabstate.text_buffer import TextBuffer
from notepad_tabstate.util import hex_dump
from notepad_tabstate.varint import VarInt
from notepad_tabstate.widestr import WideStr

log = logging.getLogger(__name__)

# Leftover bytes kept on a TrailingData diagnostic.
TRAILING_PREVIEW_SIZE = 0x40


class DecodeState(Enum):
    START = "start"
    HEADER_READ = "header_read"
    SAVED_METADATA = "saved_metadata"
    UNSAVED_SKIP = "unsaved_skip"
    CURSOR_RANGE = "cursor_range"
    TEXT_BUFFER = "text_buffer"
    FOOTER = "footer"
    DONE = "done"


@dataclass(frozen=True)
class TabStateView:
    """Read-only view over one decoded TabState buffer."""

    header: Header
    metadata: Metadata | None
    selection: CursorRange
    text_buffer: TextBuffer
    footer: Footer
    diagnostics: tuple[TrailingData, ...] = ()

    @property
    def state(self) -> FileState:
        return self.header.state

    @property
    def is_saved(self) -> bool:
        return self.metadata is not None

    @property
    def path(self) -> str | None:
        """Path of the file this tab represents. Unsaved tabs have none."""
        if self.metadata is None:
            return None
        return self.metadata.path.to_str()

    @property
    def buffer_size(self) -> VarInt:
        return self.text_buffer.length

    @property
    def buffer(self) -> WideStr:
        return self.text_buffer.text

    @property
    def text(self) -> str:
        return self.text_buffer.text.to_str()

    @property
    def cursor_start(self) -> int:
        return self.selection.start.value

    @property
    def cursor_end(self) -> int:
        return self.selection.end.value

    @property
    def is_selection(self) -> bool:
        return self.selection.is_selection

    @property
    def trailing_data(self) -> TrailingData | None:
        for diagnostic in self.diagnostics:
            if isinstance(diagnostic, TrailingData):
                return diagnostic
        return None


class _Parts:
    """Fields gathered so far in one decode call."""

    def __init__(self) -> None:
        self.header = None
        self.metadata = None
        self.selection = None
        self.text_buffer = None
        self.footer = None
        self.diagnostics = []


class TabStateDecoder:
    """
    Decodes a TabState buffer.

    Options:
        reserved_size: length of the opaque tail after the metadata content
            hash. ``None`` finds it by looking for the cursor range frame.
        max_reserved_scan: how many bytes past the hash to look.
    """

    def __init__(self, buffer, *, reserved_size: int | None = None,
                 max_reserved_scan: int = MAX_RESERVED_SCAN) -> None:
        if memoryview(buffer).nbytes == 0:
            raise EmptyBufferError()
        if reserved_size is not None and reserved_size < 0:
            raise ValueError(f"reserved_size must be >= 0, got {reserved_size}")
        self._buffer = buffer
        self.reserved_size = reserved_size
        self.max_reserved_scan = max_reserved_scan
        self._steps = {
            DecodeState.START: self._read_header,
            DecodeState.HEADER_READ: self._branch_on_state,
            DecodeState.SAVED_METADATA: self._read_metadata,
            DecodeState.UNSAVED_SKIP: self._skip_metadata,
            DecodeState.CURSOR_RANGE: self._read_cursor_range,
            DecodeState.TEXT_BUFFER: self._read_text_buffer,
            DecodeState.FOOTER: self._read_footer,
        }

    def parse(self) -> TabStateView:
        cursor = ByteCursor(self._buffer)
        parts = _Parts()
        state = DecodeState.START
        while state is not DecodeState.DONE:
            next_state = self._steps[state](cursor, parts)
            log.debug(f"[{state.value} -> {next_state.value} @ 0x{cursor.offset:X}]")
            state = next_state
        return TabStateView(
            parts.header, parts.metadata, parts.selection,
            parts.text_buffer, parts.footer, tuple(parts.diagnostics),
        )

    get_refs = parse

    def _read_header(self, cursor, parts):
        parts.header = Header.from_cursor(cursor)
        return DecodeState.HEADER_READ

    def _branch_on_state(self, cursor, parts):
        state = parts.header.state
        if state is FileState.SAVED:
            return DecodeState.SAVED_METADATA
        if state is FileState.UNSAVED:
            return DecodeState.UNSAVED_SKIP
        # The remaining count includes the state byte itself.
        raise UnsupportedStateError(parts.header.raw_state, cursor.remaining + 1)

    def _read_metadata(self, cursor, parts):
        parts.metadata = Metadata.from_cursor(
            cursor, self.reserved_size, self.max_reserved_scan
        )
        return DecodeState.CURSOR_RANGE

    def _skip_metadata(self, cursor, parts):
        return DecodeState.CURSOR_RANGE

    def _read_cursor_range(self, cursor, parts):
        parts.selection = CursorRange.from_cursor(cursor)
        return DecodeState.TEXT_BUFFER

    def _read_text_buffer(self, cursor, parts):
        parts.text_buffer = TextBuffer.from_cursor(cursor)
        return DecodeState.FOOTER

    def _read_footer(self, cursor, parts):
        parts.footer = Footer.from_cursor(cursor)
        if cursor.is_empty():
            return DecodeState.DONE

        leftover = cursor.get_remaining()
        if parts.metadata is None and parts.text_buffer.char_count == 0:
            # Tabs that were never saved only get a size once Notepad closes.
            raise UnknownBufferSizeError(len(leftover))

        trailing = TrailingData(
            cursor.offset, len(leftover), bytes(leftover[:TRAILING_PREVIEW_SIZE])
        )
        log.warning(f"[Bytes still remaining in the buffer: {trailing}]")
        log.debug("Remaining bytes:\n" + hex_dump(leftover))
        parts.diagnostics.append(trailing)
        return DecodeState.DONE


def parse(buffer, **options) -> TabStateView:
    """Decode ``buffer``. See :class:`TabStateDecoder` for the options."""
    return TabStateDecoder(buffer, **options).parse()


def is_tabstate(buffer) -> bool:
    """Cheap check of the magic bytes only."""
    return bytes(memoryview(buffer)[:len(MAGIC)]) == MAGIC
