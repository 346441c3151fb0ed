"""Hex rendering of byte sequences for traces and diagnostics."""


def format_hex(data: bytes | bytearray | memoryview) -> str:
    """Render bytes as lowercase hex, two bytes per space-separated group.

    Example:
        >>> format_hex(b'\\xff\\x01\\x00')
        'ff01 00'
    """
    data = bytes(data)
    return ' '.join(data[i:i + 2].hex() for i in range(0, len(data), 2))
