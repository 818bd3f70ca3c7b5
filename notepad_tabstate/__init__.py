"""
notepad-tabstate - decoder for Windows Notepad TabState files.

Notepad keeps one binary blob per open tab under
``%LOCALAPPDATA%\\Packages\\Microsoft.WindowsNotepad_8wekyb3d8bbwe\\LocalState\\TabState``.
This package turns the bytes of one such blob into a read-only view.
"""

import logging

__version__ = "0.3.0"

from notepad_tabstate.decoder import DecodeState, TabStateDecoder, TabStateView, is_tabstate, parse
from notepad_tabstate.enums import CarriageType, Encoding, FileState
from notepad_tabstate.errors import (
    EmptyBufferError,
    InvalidCarriageTypeError,
    InvalidEncodingError,
    InvalidMagicError,
    InvalidVarintError,
    TabStateError,
    TrailingData,
    TruncatedError,
    UnknownBufferSizeError,
    UnrecognizedMarkerError,
    UnsupportedStateError,
)
from notepad_tabstate.varint import VarInt
from notepad_tabstate.widestr import WideStr

logging.getLogger(__name__).addHandler(logging.NullHandler())
