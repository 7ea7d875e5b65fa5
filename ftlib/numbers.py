"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, then any run of '+' and '-' signs. A single
    '-' makes the result negative; any other combination of more than one sign
    yields 0. Parsing stops at the first non-digit. Arithmetic wraps as a
    32-bit signed integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    signs_end = len(stripped) - len(stripped.lstrip("+-"))
    signs = stripped[:signs_end]
    rest = stripped[signs_end:]

    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    num = _wrap32(int("".join(digits))) if digits else 0

    minus = signs.count("-")
    plus = signs.count("+")
    if minus == 1:
        num = _wrap32(-num)
    if (minus > 0 and plus > 0) or minus > 1 or plus > 1:
        num = 0
    return num


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)