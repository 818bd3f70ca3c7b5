"""Byte-level constants of the Notepad TabState format."""

MAGIC = b"NP\x00"
HEADER_SIZE = 0x4

FILE_STATE_UNSAVED = 0
FILE_STATE_SAVED = 1

# VarInt
SIGN_BIT = 0x80
MAX_VAL = 0x7F

CONTENT_HASH_SIZE = 0x20

# Bytes framing the selection VarInts.
SIZE_START_MARKER = b"\x01"
SIZE_END_MARKER = b"\x01\x00\x00\x00"

FOOTER_SIZE = 0x5

# Reserved tail after the content hash, as observed in current samples.
RESERVED_SIZE_V1 = 0x2
# How far past the hash the decoder looks for the selection frame.
MAX_RESERVED_SCAN = 0x10

ENCODINGS = (1, 2, 3, 4, 5)
CARRIAGE_TYPES = (1, 3)

UNSUPPORTED_MESSAGE = (
    "Buffer file has unknown size. The TabState buffer doesn't get the size of the "
    "buffer until Notepad has been \"closed\". Currently unsupported"
)
