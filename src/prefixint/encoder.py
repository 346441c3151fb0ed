"""Prefix-length encoding of unsigned 64-bit integers.

Each value is encoded as the shortest sequence of 1 to 9 bytes for its length
class (see length_class). The marker byte packs the class prefix together with
the most significant value bits; the remaining bytes hold the low-order bits
in big-endian order. Values above 2^56-1 use the escape form: a 0xff marker
followed by all 64 bits.

Examples:
    >>> encode(0x7f)
    b'\\x7f'
    >>> encode(0x2010)
    b'\\xa0\\x10'
    >>> encode(0x0100000000000000)
    b'\\xff\\x01\\x00\\x00\\x00\\x00\\x00\\x00\\x00'
"""
import logging

from .length_class import (
    ESCAPE_LENGTH,
    ESCAPE_MARKER,
    MAX_VALUE,
    data_mask,
    length_class,
    prefix_mask,
)
from .utils.hexdump import format_hex

logger = logging.getLogger(__name__)


def check_value(value: int) -> None:
    """Reject values outside the unsigned 64-bit domain.

    Raises:
        TypeError: If value is not an integer
        ValueError: If value is negative or exceeds 2^64-1
    """
    if not isinstance(value, int):
        raise TypeError(f"Cannot encode {type(value).__name__} value: {value!r}")
    if value < 0:
        raise ValueError(f"Cannot encode negative value: {value}")
    if value > MAX_VALUE:
        raise ValueError(f"Value {value} exceeds maximum (2^64-1)")


def encoded_length(value: int) -> int:
    """Number of bytes encode() produces for value, in [1, 9]."""
    check_value(value)
    return length_class(value)


def encode(value: int) -> bytes:
    """Encode an unsigned 64-bit integer.

    Args:
        value: Integer in [0, 2^64-1]

    Returns:
        The encoded sequence, 1 to 9 bytes long

    Raises:
        TypeError: If value is not an integer
        ValueError: If value is negative or exceeds 2^64-1
    """
    check_value(value)

    n = length_class(value)
    if n == ESCAPE_LENGTH:
        result = bytes([ESCAPE_MARKER]) + value.to_bytes(8, 'big')
    elif n == 1:
        # Top bit of a class 1 value is already clear
        result = bytes([value])
    else:
        payload = value & ((1 << (8 * (n - 1))) - 1)
        marker = prefix_mask(n) | ((value >> (8 * (n - 1))) & data_mask(n))
        result = bytes([marker]) + payload.to_bytes(n - 1, 'big')

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Encoded %#x as class %d: %s", value, n, format_hex(result))

    return result
