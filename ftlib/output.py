"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Union

from ftlib.numbers import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: Union[str, int], fd: int) -> None:
    """Write one character to ``fd``.

    An int is written as a single raw byte; a string must hold exactly one
    character and is written UTF-8 encoded.
    """
    if isinstance(c, bool):
        raise TypeError("expected a character or a byte value, got bool")
    if isinstance(c, int):
        _write_all(fd, bytes([c & 0xFF]))
        return
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode("utf-8"))


def putstr_fd(s: str, fd: int) -> None:
    """Write ``s`` to ``fd``."""
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    _write_all(fd, (s + "\n").encode("utf-8"))


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of a 32-bit signed integer to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))