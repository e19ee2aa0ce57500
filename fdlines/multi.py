"""Line reading that keeps separate leftover data for each file descriptor."""

from __future__ import annotations

from collections.abc import Iterator

from fdlines.reader import DEFAULT_BUFFER_SIZE, _check_buffer_size, _check_fd, _take_line

DEFAULT_MAX_FD = 1024


class MultiLineReader:
    """Line reader that can interleave reads from many descriptors."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE, max_fd: int = DEFAULT_MAX_FD) -> None:
        _check_buffer_size(buffer_size)
        if max_fd <= 0:
            raise ValueError(f"max_fd must be positive, got {max_fd}")
        self.buffer_size = buffer_size
        self.max_fd = max_fd
        self._pending: dict[int, bytes] = {}

    def _check(self, fd: int) -> None:
        _check_fd(fd)
        if fd >= self.max_fd:
            raise ValueError(f"file descriptor {fd} is not below max_fd {self.max_fd}")

    def next_line(self, fd: int) -> bytes | None:
        """Return the next line from *fd*, or ``None`` once nothing is left.

        Raises ``ValueError`` for a descriptor outside ``0 <= fd < max_fd``;
        ``OSError`` from reading propagates and drops that descriptor's kept data.
        """
        self._check(fd)
        pending = self._pending.pop(fd, b"")
        line, rest = _take_line(fd, pending, self.buffer_size)
        if rest:
            self._pending[fd] = rest
        return line

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield lines from *fd* until it is exhausted."""
        while (line := self.next_line(fd)) is not None:
            yield line


_default_reader = MultiLineReader()


def get_next_line(fd: int) -> bytes | None:
    """Return the next line from *fd* using a shared module-wide reader."""
    return _default_reader.next_line(fd)