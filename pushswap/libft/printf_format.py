"""Field-width, precision and prefix calculations for printf conversion specs.

A *spec* is the text between ``%`` and the conversion character, for
example ``"-08.3"``. Arguments are Python values; None stands for an
argument that prints nothing.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from pushswap.libft.convert import atoi, itoa
from pushswap.libft.printf import to_hex

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1
_NONZERO_DIGITS = "123456789"
_DIGITS = "0123456789"

LEFT = "l"
ZERO = "0"
SPACE = " "
NO_ALIGNMENT = ""


def _is_text(conv: str) -> bool:
    return conv in ("s", "c")


def _is_hex(conv: str) -> bool:
    return conv in ("x", "X")


def _is_signed(conv: str) -> bool:
    return conv in ("d", "i")


def _signed32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value > 0x7FFFFFFF else value


def _first_index(spec: str, chars: str) -> Optional[int]:
    for index, char in enumerate(spec):
        if char in chars:
            return index
    return None


def min_width(spec: str) -> int:
    """Return the minimum field width given in ``spec``, or 0.

    The width starts at the first non-zero digit; digits after the
    precision dot do not count as a width.
    """
    start = _first_index(spec, _NONZERO_DIGITS)
    if start is None:
        return 0
    dot = spec.find(".")
    if dot >= 0 and start > dot:
        return 0
    return atoi(spec[start:])


def alignment(spec: str) -> str:
    """Return the alignment ``spec`` asks for.

    ``"l"`` for left alignment, ``"0"`` for zero padding, ``" "`` for
    right alignment with spaces, and ``""`` when no width is given.
    """
    if "-" in spec:
        return LEFT
    first_digit = _first_index(spec, _DIGITS)
    if first_digit is not None and spec[first_digit] == "0":
        return ZERO
    if min_width(spec) > 0:
        return SPACE
    return NO_ALIGNMENT


def shift_group(spec: str, conv: str, arg: Any) -> str:
    """Classify which prefix a conversion may carry.

    ``"t"`` text, ``"u"`` unsigned, ``"#"`` hex prefix, ``"+"`` plus sign,
    ``" "`` space sign, ``"x"`` plain hex, ``"n"`` plain signed number.
    """
    if _is_text(conv):
        return "t"
    if conv == "u":
        return "u"
    nonzero_hex = _is_hex(conv) and arg is not None and (arg & _MASK32) != 0
    if ("#" in spec and nonzero_hex) or conv == "p":
        return "#"
    if "+" in spec and _is_signed(conv):
        return "+"
    if " " in spec and _is_signed(conv):
        return " "
    if _is_hex(conv):
        return "x"
    return "n"


def precision_limit(spec: str, width: int, conv: str) -> int:
    """Return the character limit set by the precision in ``spec``.

    Without a dot the limit equals ``width``. A string is never limited
    beyond its width. A zero precision on a number gives -1, marking the
    case where a zero argument prints nothing.
    """
    dot = spec.find(".")
    if dot < 0:
        return width
    limit = atoi(spec[dot + 1 :])
    if conv == "s" and limit > width:
        return width
    if not _is_text(conv) and limit == 0:
        return -1
    return limit


def zero_count(limit: int, width: int) -> int:
    """Return how many precision zeros are needed to reach ``limit``."""
    return limit - width if limit > width else 0


def arg_width(arg: Any, conv: str) -> int:
    """Return the printed width of ``arg`` without any sign or hex prefix."""
    if arg is None:
        return 0
    if conv == "c":
        return 1
    if conv == "s":
        return len(arg)
    if conv == "p":
        return len(to_hex(arg & _MASK64))
    if _is_signed(conv):
        value = _signed32(arg)
        text = itoa(value)
        return len(text) - 1 if value < 0 else len(text)
    if conv == "u":
        return len(str(arg & _MASK32))
    if _is_hex(conv):
        return len(to_hex(arg & _MASK32))
    return 0


def _width_with_prefix(width: int, group: str, arg: Any) -> int:
    if group == "n":
        if arg is None:
            return width
        return width + 1 if _signed32(arg) < 0 else width
    if group in ("+", " "):
        return width + 1
    if group == "#":
        return width + 2
    return width


def padding(spec: str, conv: str, arg: Any, limit: int) -> Tuple[int, int]:
    """Return the number of padding characters and the effective limit.

    A number equal to zero with a limit of -1 prints nothing, so it is
    measured as an absent argument.
    """
    if not _is_text(conv) and arg is not None and (arg & _MASK32) == 0 and limit == -1:
        arg = None
    width = arg_width(arg, conv)
    limit = precision_limit(spec, width, conv)
    if limit == -1:
        limit = 0
    wanted = min_width(spec)
    group = shift_group(spec, conv, arg)
    zeros = 0 if _is_text(conv) else zero_count(limit, width)
    if not _is_text(conv):
        width = _width_with_prefix(width, group, arg)
    return max(wanted - width - zeros, 0), limit


def prefix(group: str, arg: Any, conv: str) -> Tuple[str, Any]:
    """Return the prefix to print and the argument left to print after it.

    A negative number gives ``"-"`` and its magnitude; other arguments are
    returned unchanged. An absent argument has no prefix.
    """
    if arg is None:
        return "", None
    value = _signed32(arg)
    if group == "#" and not (value == 0 and conv != "p"):
        return ("0X" if conv == "X" else "0x"), arg
    if value >= 0 and group == "+":
        return "+", arg
    if value >= 0 and group == " ":
        return " ", arg
    if value < 0 and group in ("n", "+", " "):
        return "-", -value
    return "", arg


def pad(n: int, char: str) -> str:
    """Return ``n`` copies of ``char``; nothing when ``n`` is not positive."""
    return char * n if n > 0 else ""