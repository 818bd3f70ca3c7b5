"""Builders for synthetic TabState buffers."""

import pytest

from notepad_tabstate.consts import MAGIC, SIZE_END_MARKER, SIZE_START_MARKER
from notepad_tabstate.varint import encode

FILETIME_2024 = 133485408000000000  # 2024-01-01T00:00:00Z
CONTENT_HASH = bytes(range(0x20))


def build_tabstate(
    state=1,
    path="C:\\Users\\test\\notes.txt",
    full_size=None,
    encoding=5,
    carriage=3,
    filetime=FILETIME_2024,
    content_hash=CONTENT_HASH,
    reserved=b"\x00\x00",
    selection=(0, 0),
    text="hello world",
    footer=b"\x00\x00\x00\x00\x00",
    trailing=b"",
):
    text_bytes = text.encode("utf-16-le")
    out = bytearray(MAGIC)
    out.append(state)
    if state == 1:
        path_bytes = path.encode("utf-16-le")
        out += encode(len(path_bytes) // 2)
        out += path_bytes
        out += encode(len(text_bytes) // 2 if full_size is None else full_size)
        out.append(encoding)
        out.append(carriage)
        out += encode(filetime)
        out += content_hash
        out += reserved
    out += SIZE_START_MARKER
    out += encode(selection[0])
    out += encode(selection[1])
    out += SIZE_END_MARKER
    out += encode(len(text_bytes) // 2)
    out += text_bytes
    out += footer
    out += trailing
    return bytes(out)


@pytest.fixture
def build():
    return build_tabstate


@pytest.fixture
def saved_buffer():
    return build_tabstate()


@pytest.fixture
def unsaved_buffer():
    return build_tabstate(state=0, text="scratch pad")
