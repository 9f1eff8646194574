"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

from typing import Any, List

from pushswap.libft.output import put_str

CONVERSIONS = frozenset("cspdiuxX")

_NUL = "\0"
_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1


def _until_nul(text: str) -> str:
    end = text.find(_NUL)
    return text if end < 0 else text[:end]


def _signed32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value > 0x7FFFFFFF else value


def _require_int(value: Any, conv: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{conv} expects an integer, got {type(value).__name__}")
    return value


def to_hex(n: int, upper: bool = False) -> str:
    """Return the hexadecimal digits of a non-negative integer, without prefix."""
    if n < 0:
        raise ValueError("to_hex expects a non-negative integer")
    return format(n, "X" if upper else "x")


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def format_conversion(value: Any, conv: str) -> str:
    """Return the text one conversion produces for ``value``.

    ``%`` gives a percent sign and ignores ``value``; an unknown conversion
    gives an empty string.
    """
    if conv == "%":
        return "%"
    if conv == "c":
        return _char(value)
    if conv == "s":
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, got {type(value).__name__}")
        return _until_nul(value)
    if conv == "p":
        return "0x" + to_hex(_require_int(value, conv) & _MASK64)
    if conv in ("d", "i"):
        return str(_signed32(_require_int(value, conv)))
    if conv == "u":
        return str(_require_int(value, conv) & _MASK32)
    if conv in ("x", "X"):
        return to_hex(_require_int(value, conv) & _MASK32, upper=conv == "X")
    return ""


def render(fmt: str, *args: Any) -> str:
    """Return the text ``fmt`` produces with ``args`` substituted.

    An unknown conversion character is dropped and consumes no argument;
    a lone ``%`` at the end produces nothing. Raises TypeError when there
    are fewer arguments than conversions.
    """
    fmt = _until_nul(fmt)
    pieces: List[str] = []
    remaining = iter(args)
    pos = 0
    while True:
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        if percent + 1 >= len(fmt):
            break
        conv = fmt[percent + 1]
        if conv in CONVERSIONS:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{conv}") from None
            pieces.append(format_conversion(value, conv))
        elif conv == "%":
            pieces.append("%")
        pos = percent + 2
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered text to standard output; return the bytes written."""
    text = render(fmt, *args)
    put_str(text, 1)
    return len(text.encode("utf-8"))