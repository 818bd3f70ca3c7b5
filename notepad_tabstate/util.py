"""Hex formatting used in diagnostics and log output."""


def hex_bytes(data):
    """Space separated uppercase hex, e.g. ``01 00 00 00``."""
    return bytes(data).hex(" ").upper()


def hex_dump(data, bytes_per_line=16):
    """Returns a formatted hex dump string of the given data."""
    data = bytes(data)
    output = []
    for i in range(0, len(data), bytes_per_line):
        chunk = data[i:i + bytes_per_line]
        hex_part = " ".join(f"{b:02X}" for b in chunk)
        text_part = "".join(chr(b) if 32 <= b <= 126 else "." for b in chunk)
        output.append(f"{i:08X}: {hex_part.ljust(bytes_per_line * 3)}  {text_part}")
    return "\n".join(output)
