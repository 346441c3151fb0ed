"""Writing encoded integers to byte sinks.

A sink is any object with a ``write(data)`` method: io.BytesIO, a file opened
in binary mode, a raw io.FileIO, a socket's file object. Each integer is handed
to the sink in a single write() call. Exceptions raised by the sink propagate
unchanged; a raw sink reporting a short write raises IncompleteWriteError so the
partial sequence is never mistaken for a complete one.

Typical usage example:

    with open(path, 'wb') as f:
        for value in values:
            write(f, value)

Sinks shared between threads:

    writer = SequenceWriter(shared_stream)
    writer.write(value)             # from any thread
    writer.write_all(batch)         # batch stays contiguous
"""
import io
import logging
import threading
from contextlib import AbstractContextManager
from typing import Iterable, Protocol

from .encoder import encode
from .utils.hexdump import format_hex

logger = logging.getLogger(__name__)


class ByteSink(Protocol):
    def write(self, data: bytes, /) -> int | None: ...


class IncompleteWriteError(OSError):
    """Sink accepted only part of an encoded sequence.

    Attributes:
        value: The integer being written
        data: The complete encoded sequence
        written: Number of leading bytes of data the sink accepted
    """

    def __init__(self, value: int, data: bytes, written: int):
        super().__init__(
            f"Sink accepted {written} of {len(data)} bytes encoding {value:#x} ({format_hex(data)})")
        self.value = value
        self.data = data
        self.written = written


def write(sink: ByteSink, value: int) -> int:
    """Encode value and append it to sink.

    Args:
        sink: Object with a write() method accepting bytes
        value: Integer in [0, 2^64-1]

    Returns:
        Number of bytes written (1 to 9)

    Raises:
        IncompleteWriteError: Sink reported accepting fewer bytes than the sequence length,
            or is a raw stream that returned None (nothing accepted)
        TypeError: If value is not an integer
        ValueError: If value is out of range
    """
    data = encode(value)
    written = sink.write(data)
    if written is None and isinstance(sink, io.RawIOBase):
        # Non-blocking raw streams return None when no bytes were accepted
        written = 0
    if written is not None and written < len(data):
        logger.warning("Short write of %#x: %d of %d bytes", value, written, len(data))
        raise IncompleteWriteError(value, data, written)
    return len(data)


class SequenceWriter:
    """Serializes writes of encoded integers to a shared sink.

    Every write() holds the lock for the whole encoded sequence, and write_all()
    holds it for the whole batch, so bytes of different integers written from
    different threads never interleave.

    Example:
        >>> writer = SequenceWriter(io.BytesIO())
        >>> writer.write(0x2010)
        2
    """

    def __init__(self, sink: ByteSink, lock: AbstractContextManager | None = None):
        """Wrap a sink.

        Args:
            sink: Destination of all writes
            lock: Lock to hold while writing; pass the lock other users of the
                  sink already take to share it with them. Defaults to a new Lock.
        """
        self._sink = sink
        self._lock = lock if lock is not None else threading.Lock()

    @property
    def sink(self) -> ByteSink:
        return self._sink

    def write(self, value: int) -> int:
        """Write one integer; returns the number of bytes written."""
        with self._lock:
            return write(self._sink, value)

    def write_all(self, values: Iterable[int]) -> int:
        """Write a batch of integers contiguously; returns the total byte count.

        Values are consumed while the lock is held. If one of them fails, the
        integers before it remain written and the error propagates.
        """
        total = 0
        with self._lock:
            for value in values:
                total += write(self._sink, value)
        return total
