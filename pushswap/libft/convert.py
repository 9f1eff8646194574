"""Integer parsing and formatting with 32-bit semantics, and word splitting."""

from __future__ import annotations

from typing import List

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1

_SKIPPED = {chr(code) for code in range(9, 14)} | {" "}


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a 32-bit C ``atoi`` does.

    Leading whitespace is skipped, one sign is accepted, parsing stops at the
    first non-digit, and values outside the 32-bit range wrap around.
    Text without digits gives 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SKIPPED:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    result = _wrap32(int(digits)) if digits else 0
    return _wrap32(-result) if negative else result


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]