"""Reading a file descriptor line by line."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 64


class LineReader:
    """Reads newline-terminated lines from a file descriptor in fixed-size chunks."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> bytes | None:
        """Return the next line with its newline, or ``None`` at end of input."""
        try:
            while b"\n" not in self._pending:
                chunk = os.read(self._fd, self._buffer_size)
                if not chunk:
                    break
                self._pending += chunk
        except OSError:
            self._pending.clear()
            raise
        if not self._pending:
            return None
        newline = self._pending.find(b"\n")
        end = len(self._pending) if newline < 0 else newline + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(fd: int, buffer_size: int = BUFFER_SIZE) -> Iterator[bytes]:
    """Yield every remaining line of ``fd``."""
    yield from LineReader(fd, buffer_size)