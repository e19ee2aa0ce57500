"""Read a file descriptor one line at a time, keeping unread data between calls."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 1000

_NEWLINE = b"\n"


def _check_buffer_size(buffer_size: int) -> None:
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")


def _check_fd(fd: int) -> None:
    if fd < 0:
        raise ValueError(f"invalid file descriptor: {fd}")


def _take_line(fd: int, pending: bytes, buffer_size: int) -> tuple[bytes | None, bytes]:
    """Return the next line read from *fd* after *pending*, and the data left over.

    Reads in chunks of *buffer_size* until a newline has been seen or the
    descriptor reports end of file. The line keeps its trailing newline; the
    final line of a stream may lack one. ``None`` means nothing is left.
    """
    data = bytearray(pending)
    if _NEWLINE not in data:
        while chunk := os.read(fd, buffer_size):
            data += chunk
            if _NEWLINE in chunk:
                break
    cut = data.find(_NEWLINE) + 1
    if cut == 0 or cut == len(data):
        return (bytes(data) or None), b""
    return bytes(data[:cut]), bytes(data[cut:])


class LineReader:
    """Line reader for one stream at a time.

    Data read past the end of a line is kept and handed back before anything
    else on the next call, whichever descriptor that call names.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        _check_buffer_size(buffer_size)
        self.buffer_size = buffer_size
        self._pending = b""

    def next_line(self, fd: int) -> bytes | None:
        """Return the next line from *fd*, or ``None`` once nothing is left.

        Raises ``ValueError`` for a negative descriptor and lets ``OSError``
        from reading propagate, in which case the kept data is dropped.
        """
        _check_fd(fd)
        pending, self._pending = self._pending, b""
        line, self._pending = _take_line(fd, pending, self.buffer_size)
        return line

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield lines from *fd* until it is exhausted."""
        while (line := self.next_line(fd)) is not None:
            yield line


_default_reader = LineReader()


def get_next_line(fd: int) -> bytes | None:
    """Return the next line from *fd* using a shared module-wide reader."""
    return _default_reader.next_line(fd)