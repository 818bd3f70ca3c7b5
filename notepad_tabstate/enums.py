"""Enumerated single-byte fields and their checked conversions."""

from __future__ import annotations

from enum import IntEnum

from notepad_tabstate.errors import InvalidCarriageTypeError, InvalidEncodingError


class FileState(IntEnum):
    UNSAVED = 0
    SAVED = 1


class Encoding(IntEnum):
    ANSI = 1
    UTF16LE = 2
    UTF16BE = 3
    UTF8BOM = 4
    UTF8 = 5


class CarriageType(IntEnum):
    UNIX = 1
    CRLF = 3


_FILE_STATES = {state.value: state for state in FileState}
_ENCODINGS = {encoding.value: encoding for encoding in Encoding}
_CARRIAGE_TYPES = {carriage.value: carriage for carriage in CarriageType}


def classify_state(raw: int) -> FileState | None:
    """``None`` for any byte that is not a known state."""
    return _FILE_STATES.get(raw)


def encoding_from_byte(raw: int, offset: int | None = None) -> Encoding:
    try:
        return _ENCODINGS[raw]
    except KeyError:
        raise InvalidEncodingError(raw, _ENCODINGS, offset) from None


def carriage_type_from_byte(raw: int, offset: int | None = None) -> CarriageType:
    try:
        return _CARRIAGE_TYPES[raw]
    except KeyError:
        raise InvalidCarriageTypeError(raw, _CARRIAGE_TYPES, offset) from None
