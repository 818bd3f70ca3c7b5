"""
Metadata present only in tabs backed by a file on disk.

Layout after the header::

    path length      VarInt (UTF-16 units)
    path             length * 2 bytes
    full size        VarInt
    encoding         1 byte
    carriage type    1 byte
    filetime         VarInt
    content hash     32 bytes
    reserved         variable, opaque

The reserved tail has changed size between Notepad versions, so it is not
read as a fixed structure. Either the caller names its length, or it is
taken to be whatever lies between the hash and the next cursor range frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

import pytz

from notepad_tabstate.consts import CONTENT_HASH_SIZE, MAX_RESERVED_SCAN, RESERVED_SIZE_V1, SIZE_START_MARKER
from notepad_tabstate.enums import CarriageType, Encoding, carriage_type_from_byte, encoding_from_byte
from notepad_tabstate.selection import has_cursor_range
from notepad_tabstate.varint import VarInt, read_varint
from notepad_tabstate.widestr import WideStr

log = logging.getLogger(__name__)

# Windows FILETIME counts 100ns ticks from this instant.
FILETIME_EPOCH = datetime(1601, 1, 1, tzinfo=pytz.utc)
_MAX_FILETIME_MICROS = (datetime.max.replace(tzinfo=pytz.utc) - FILETIME_EPOCH) // timedelta(microseconds=1)


@dataclass(frozen=True)
class Metadata:
    path_length: VarInt
    path: WideStr
    # Size in chars of the file on disk. Includes carriage returns, which
    # are not always present in the tab's text buffer.
    full_buffer_size: VarInt
    encoding: Encoding
    carriage_type: CarriageType
    filetime: VarInt
    content_hash: bytes
    reserved: bytes

    @property
    def content_hash_hex(self) -> str:
        return self.content_hash.hex()

    @property
    def modified_at(self) -> datetime | None:
        micros = self.filetime.value // 10
        if micros > _MAX_FILETIME_MICROS:
            return None
        return FILETIME_EPOCH + timedelta(microseconds=micros)

    def modified_at_in(self, tz_name: str) -> datetime | None:
        modified = self.modified_at
        if modified is None:
            return None
        return modified.astimezone(pytz.timezone(tz_name))

    @classmethod
    def from_cursor(cls, cursor, reserved_size: int | None = None,
                    max_reserved_scan: int = MAX_RESERVED_SCAN) -> Metadata:
        path_length = read_varint(cursor)
        path = WideStr(cursor.read_bytes(path_length.value * 2))
        full_buffer_size = read_varint(cursor)

        offset = cursor.offset
        encoding = encoding_from_byte(cursor.read_byte(), offset)
        carriage_type = carriage_type_from_byte(cursor.read_byte(), offset + 1)

        filetime = read_varint(cursor)
        content_hash = bytes(cursor.read_bytes(CONTENT_HASH_SIZE))

        if reserved_size is None:
            reserved_size = find_reserved_size(cursor, max_reserved_scan)
        reserved = bytes(cursor.read_bytes(reserved_size))

        log.debug(
            f"[Metadata: path={path.to_str()!r} full_size={full_buffer_size.value} "
            f"encoding={encoding.name} carriage={carriage_type.name} "
            f"filetime={filetime.value} reserved={reserved.hex(' ').upper() or '(none)'}]"
        )
        return cls(
            path_length, path, full_buffer_size, encoding, carriage_type,
            filetime, content_hash, reserved,
        )


def find_reserved_size(cursor, max_scan: int = MAX_RESERVED_SCAN) -> int:
    """
    Number of bytes between the cursor and the next cursor range frame.

    Only offsets holding the start marker byte are tried, and the whole
    frame has to parse for the offset to count. When no offset within the
    window parses, the first start marker byte is used, or
    ``RESERVED_SIZE_V1`` when there is none, and the frame is left for
    ``CursorRange.from_cursor`` to reject at its real position.
    """
    window = cursor.get_remaining()[:max_scan + 1]
    candidates = [size for size, byte in enumerate(window) if byte == SIZE_START_MARKER[0]]
    for size in candidates:
        trial = cursor.fork()
        trial.read_bytes(size)
        if has_cursor_range(trial):
            return size

    size = candidates[0] if candidates else RESERVED_SIZE_V1
    log.debug(f"[No cursor range within {max_scan} bytes of 0x{cursor.offset:X}, assuming reserved size {size}]")
    return size
