"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from typing import Any, Iterator, Optional, Union

__all__ = ["LineReader", "BUFFER_SIZE"]

BUFFER_SIZE = 42

Line = Union[str, bytes]


def _newline_index(buffer: Optional[Line]) -> int:
    """Index of the first newline in ``buffer``, or -1 if there is none."""
    if buffer is None:
        return -1
    newline: Line = "\n" if isinstance(buffer, str) else b"\n"
    return buffer.find(newline)


class LineReader:
    """Yield lines, each ending in its newline, from a file object or descriptor.

    ``source`` is an integer file descriptor or any object with a
    ``read(size)`` method returning ``str`` or ``bytes``. Lines come back in
    the same type. The last line lacks a newline if the data does not end
    with one. Reading past the end keeps trying the source, so data that
    arrives later is still returned.
    """

    def __init__(self, source: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if isinstance(source, int) and source < 0:
            raise ValueError(f"invalid file descriptor {source}")
        self._source = source
        self._size = buffer_size
        self._buffer: Optional[Line] = None

    def _read_chunk(self) -> Optional[Line]:
        if isinstance(self._source, int):
            return os.read(self._source, self._size)
        return self._source.read(self._size)

    def read_line(self) -> Optional[Line]:
        """The next line, or None when no data is left."""
        buffer = self._buffer
        try:
            while _newline_index(buffer) < 0:
                chunk = self._read_chunk()
                if not chunk:
                    break
                buffer = chunk if buffer is None else buffer + chunk
        except OSError:
            self._buffer = None
            raise
        if not buffer:
            self._buffer = None
            return None
        end = _newline_index(buffer)
        if end < 0:
            self._buffer = None
            return buffer
        self._buffer = buffer[end + 1:]
        return buffer[: end + 1]

    def __iter__(self) -> Iterator[Line]:
        return iter(self.read_line, None)