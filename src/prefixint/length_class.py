"""Length classes of the prefix-length integer encoding.

An encoded integer occupies between 1 and 9 bytes. The number of bytes is its
length class, and it can be read back from the leading bits of the first
(marker) byte alone:

    n=1  0-------
    n=2  10------
    n=3  110-----
    n=4  1110----
    n=5  11110---
    n=6  111110--
    n=7  1111110-
    n=8  11111110
    n=9  11111111  (escape form, followed by all 64 bits)

Bits marked ``-`` carry the most significant bits of the value.
"""

MAX_VALUE = (1 << 64) - 1
MAX_LENGTH = 9
ESCAPE_LENGTH = MAX_LENGTH
ESCAPE_MARKER = 0xFF

# Largest value representable by each of the classes 1-8 (7 data bits per byte)
CLASS_MAXIMUMS: tuple[int, ...] = tuple((1 << (7 * n)) - 1 for n in range(1, 9))


def length_class_by_scan(value: int) -> int:
    """Select the length class by testing each class in turn.

    Starts at class 1 and advances while the value exceeds the class maximum.
    Values too large for class 8 fall through to the escape class.

    Args:
        value: Unsigned 64-bit integer

    Returns:
        Length class in [1, 9]
    """
    for n, maximum in enumerate(CLASS_MAXIMUMS, start=1):
        if value <= maximum:
            return n
    return ESCAPE_LENGTH


def length_class(value: int) -> int:
    """Select the length class from the position of the highest set bit.

    Yields the same result as length_class_by_scan() for every value.

    Args:
        value: Unsigned 64-bit integer

    Returns:
        Length class in [1, 9]
    """
    n = max(1, (value.bit_length() + 6) // 7)
    if n > 8:
        return ESCAPE_LENGTH
    return n


def prefix_mask(n: int) -> int:
    """Marker bits of class n: (n - 1) ones followed by a zero, left-justified."""
    _check_packed_class(n)
    return ((1 << (n - 1)) - 1) << (9 - n)


def data_mask(n: int) -> int:
    """Marker bits of class n that carry value bits."""
    _check_packed_class(n)
    return (1 << (8 - n)) - 1


def _check_packed_class(n: int):
    if not 1 <= n <= 8:
        raise ValueError(f"Length class {n} has no packed marker (expected 1 to 8)")
