"""A small formatted-output facility with a fixed set of conversions.

Supported conversions: ``%d`` and ``%i`` (signed decimal), ``%u`` (unsigned
decimal), ``%x`` and ``%X`` (hexadecimal), ``%c`` (character), ``%s``
(string, ``None`` prints as ``(null)``), ``%p`` (pointer) and ``%%``.
Spaces between ``%`` and the conversion letter are skipped. An unknown
conversion letter produces no output and consumes no argument. Integer
arguments are treated as 32-bit C ``int`` values, pointers as 64-bit
addresses.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from ftlib.output import putstr_fd

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_STDOUT = 1


def _int32(value: Any) -> int:
    """Return ``value`` reduced to a 32-bit signed integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int argument, got {type(value).__name__}")
    value &= _UINT32_MASK
    return value - 2**32 if value >= 2**31 else value


def to_hex(n: int, upper: bool = False) -> str:
    """Return the hexadecimal digits of a non-negative integer, without prefix."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return format(n, "X" if upper else "x")


def pointer_repr(address: Optional[int]) -> str:
    """Return ``0x`` followed by the lowercase hex digits of a 64-bit address.

    ``None`` stands for the null pointer and gives ``0x0``.
    """
    if address is None:
        return "0x0"
    if isinstance(address, bool) or not isinstance(address, int):
        raise TypeError(f"expected an address, got {type(address).__name__}")
    return "0x" + to_hex(address & _UINT64_MASK)


def unsigned_repr(n: int) -> str:
    """Return the decimal text of a 32-bit int read as unsigned."""
    return str(_int32(n) & _UINT32_MASK)


def _char_arg(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_int32(value) & 0xFF)


def _string_arg(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"expected a str argument, got {type(value).__name__}")
    return value


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec in ("d", "i"):
        return str(_int32(_next_arg(args, spec)))
    if spec == "c":
        return _char_arg(_next_arg(args, spec))
    if spec == "x":
        return to_hex(_int32(_next_arg(args, spec)) & _UINT32_MASK)
    if spec == "X":
        return to_hex(_int32(_next_arg(args, spec)) & _UINT32_MASK, upper=True)
    if spec == "s":
        return _string_arg(_next_arg(args, spec))
    if spec == "u":
        return unsigned_repr(_next_arg(args, spec))
    if spec == "p":
        return pointer_repr(_next_arg(args, spec))
    if spec == "%":
        return "%"
    return ""


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    remaining = iter(args)
    pieces: list[str] = []
    j = 0
    length = len(fmt)
    while j < length:
        ch = fmt[j]
        if ch != "%":
            pieces.append(ch)
            j += 1
            continue
        j += 1
        while j < length and fmt[j] == " ":
            j += 1
        if j >= length:
            break
        pieces.append(_convert(fmt[j], remaining))
        j += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the bytes written."""
    text = render(fmt, *args)
    putstr_fd(text, _STDOUT)
    return len(text.encode("utf-8"))