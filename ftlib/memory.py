"""Byte-buffer operations: filling, searching, comparing and copying.

Buffers are mutable ``bytearray`` (or ``memoryview``) objects. Byte values
may be given as integers, which are truncated to their low eight bits, or as
one-character ``str``/``bytes`` values.
"""

from __future__ import annotations

from typing import Optional, Union

SIZE_MAX = 2**64 - 1

ByteLike = Union[int, str, bytes]


def _byte(c: ByteLike) -> int:
    """Return ``c`` as a value in 0..255."""
    if isinstance(c, bool):
        raise TypeError("expected a byte value, got bool")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, (str, bytes)):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return (ord(c) if isinstance(c, str) else c[0]) & 0xFF
    raise TypeError(f"expected a byte value, got {type(c).__name__}")


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf, c: ByteLike, length: int):
    """Set the first ``length`` bytes of ``buf`` to ``c`` and return ``buf``."""
    _check_count(length, buf)
    buf[:length] = bytes([_byte(c)]) * length
    return buf


def bzero(buf, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the product would not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes overflows the addressable size")
    return bytearray(count * size)


def memchr(buf, c: ByteLike, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``.

    Returns None when no such byte exists.
    """
    _check_count(n, buf)
    index = bytes(buf[:n]).find(_byte(c))
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` to the start of ``dest``; return ``dest``."""
    if dest is None and src is None:
        return dest
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf, dest_offset: int, src_offset: int, n: int):
    """Move ``n`` bytes within ``buf`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source were first copied
    to a temporary buffer. Returns ``buf``.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dest_offset, src_offset) + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf