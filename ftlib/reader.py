"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFFER_SIZE = 15
_MAX_BUFFER_SIZE = 2147483647


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Data is read in chunks of ``buffer_size`` bytes; whatever follows the
    returned line is kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if not 0 < buffer_size <= _MAX_BUFFER_SIZE:
            raise ValueError(f"invalid buffer size {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._stash = b""

    def _fill(self) -> None:
        """Read until the stash holds a newline or the input is exhausted."""
        while b"\n" not in self._stash:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._stash = b""
                raise
            if not chunk:
                return
            self._stash += chunk

    def read_line(self) -> Optional[bytes]:
        """Return the next line including its newline, or None at end of input.

        The last line is returned without a newline if the input lacks one.
        """
        self._fill()
        newline = self._stash.find(b"\n")
        if newline >= 0:
            line = self._stash[:newline + 1]
            self._stash = self._stash[newline + 1:]
            return line
        if not self._stash:
            return None
        line, self._stash = self._stash, b""
        return line

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(fd: int, buffer_size: int = BUFFER_SIZE) -> Iterator[bytes]:
    """Yield every remaining line of ``fd``."""
    yield from LineReader(fd, buffer_size)