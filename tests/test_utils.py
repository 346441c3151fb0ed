"""Shared test utilities for prefixint tests."""
from prefixint.utils.hexdump import format_hex


# (value, expected encoding) pairs covering every length class at its lower
# bound, upper bound and a value with scattered bits
ENCODING_VECTORS = [
    (0x00, b'\x00'),
    (0x40, b'\x40'),
    (0x7f, b'\x7f'),
    (0x80, b'\x80\x80'),
    (0x2010, b'\xa0\x10'),
    (0x3fff, b'\xbf\xff'),
    (0x4000, b'\xc0\x40\x00'),
    (0x100804, b'\xd0\x08\x04'),
    (0x1fffff, b'\xdf\xff\xff'),
    (0x200000, b'\xe0\x20\x00\x00'),
    (0x8040201, b'\xe8\x04\x02\x01'),
    (0xfffffff, b'\xef\xff\xff\xff'),
    (0x10000000, b'\xf0\x10\x00\x00\x00'),
    (0x402018040, b'\xf4\x02\x01\x80\x40'),
    (0x7ffffffff, b'\xf7\xff\xff\xff\xff'),
    (0x800000000, b'\xf8\x08\x00\x00\x00\x00'),
    (0x20180402010, b'\xfa\x01\x80\x40\x20\x10'),
    (0x3ffffffffff, b'\xfb\xff\xff\xff\xff\xff'),
    (0x40000000000, b'\xfc\x04\x00\x00\x00\x00\x00'),
    (0x1804020100804, b'\xfd\x80\x40\x20\x10\x08\x04'),
    (0x1ffffffffffff, b'\xfd\xff\xff\xff\xff\xff\xff'),
    (0x2000000000000, b'\xfe\x02\x00\x00\x00\x00\x00\x00'),
    (0x80402010080402, b'\xfe\x80\x40\x20\x10\x08\x04\x02'),
    (0xffffffffffffff, b'\xfe\xff\xff\xff\xff\xff\xff\xff'),
    (0x0100000000000000, b'\xff\x01\x00\x00\x00\x00\x00\x00\x00'),
    (0x8040201008040201, b'\xff\x80\x40\x20\x10\x08\x04\x02\x01'),
    (0xffffffffffffffff, b'\xff\xff\xff\xff\xff\xff\xff\xff\xff'),
]


def read_encoded(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Read one encoded integer back, for checking what the encoder produced.

    Returns:
        Tuple of (value, bytes_consumed)
    """
    first_byte = data[offset]

    # Count leading 1 bits to determine byte count
    length = 1
    mask = 0x80
    while length <= 8 and first_byte & mask:
        length += 1
        mask >>= 1

    if length > len(data) - offset:
        raise AssertionError(f"Truncated sequence: {format_hex(data[offset:])}")

    if length == 9:
        value = 0
    else:
        value = first_byte & ((1 << (8 - length)) - 1)
    for byte in data[offset + 1:offset + length]:
        value = (value << 8) | byte

    return value, length


def diff_message(expected: bytes, actual: bytes) -> str:
    """Render a mismatch between two encodings."""
    return f"\n< {format_hex(expected)}\n---\n> {format_hex(actual)}"
