"""String searching, slicing, joining, trimming and mapping helpers.

Positions are returned as indexes into the string (or ``None`` when nothing
is found). The bounded copy and concatenation functions work on mutable,
NUL-terminated ``bytearray`` buffers.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; ints are truncated to a byte."""
    if isinstance(c, bool):
        raise TypeError("expected a character or a character code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or a character code, got {type(c).__name__}")


def _encode(src: Union[str, bytes, bytearray]) -> bytes:
    return src.encode("utf-8") if isinstance(src, str) else bytes(src)


def _terminated_length(buf: bytearray) -> int:
    """Return the length of the NUL-terminated string held in ``buf``."""
    end = buf.find(0)
    if end < 0:
        raise ValueError("buffer holds no NUL terminator")
    return end


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    sep = _char(sep)
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character yields the index just past the end.
    """
    c = _char(c)
    if c == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character yields the index just past the end.
    """
    c = _char(c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of the first ``little`` lying wholly within the first
    ``length`` characters of ``big``, or None. An empty ``little`` is found at 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns the difference of the character codes at the first position where
    they differ (the end of a string counts as code 0), or 0.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for x, y in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``s``.

    A ``None`` charset returns ``s`` unchanged; a ``None`` string gives None.
    """
    if s is None:
        return None
    if charset is None:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end, or a zero length, gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s) or length == 0:
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate two strings; a ``None`` operand counts as empty."""
    return (s1 or "") + (s2 or "")


def strlcpy(dst: bytearray, src: Union[str, bytes, bytearray], size: int) -> int:
    """Copy ``src`` into ``dst`` with at most ``size - 1`` bytes plus a NUL.

    Nothing is written when ``size`` is 0. Returns the length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    data = _encode(src)
    if size == 0:
        return len(data)
    chunk = data[:size - 1] + b"\0"
    if len(chunk) > len(dst):
        raise ValueError(f"destination of {len(dst)} bytes cannot hold {len(chunk)} bytes")
    dst[:len(chunk)] = chunk
    return len(data)


def strlcat(dst: bytearray, src: Union[str, bytes, bytearray], size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst``.

    The result occupies at most ``size`` bytes including the terminator.
    When ``size`` is smaller than the current length, nothing is written and
    ``len(src) + size`` is returned; otherwise ``len(src)`` plus the original
    length of ``dst`` is returned.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    data = _encode(src)
    dest_len = _terminated_length(dst)
    if size < dest_len:
        return len(data) + size
    room = max(0, size - dest_len - 1)
    chunk = data[:room] + b"\0"
    if dest_len + len(chunk) > len(dst):
        raise ValueError("destination buffer is too small for the result")
    dst[dest_len:dest_len + len(chunk)] = chunk
    return len(data) + dest_len


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Call ``f(index, item)`` for each item of ``chars``.

    When ``f`` returns something other than None, that value replaces the
    item in place.
    """
    for index, item in enumerate(list(chars)):
        replacement = f(index, item)
        if replacement is not None:
            chars[index] = replacement