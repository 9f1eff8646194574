"""String helpers: length, search, comparison, bounded copies and mapping."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

_NUL = "\0"


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``.

    Searching for the NUL character finds the terminator at ``len(s)``.
    Returns None when ``c`` does not occur.
    """
    _check_char(c)
    if c == _NUL:
        nul = s.find(_NUL)
        return len(s) if nul < 0 else nul
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference at the first mismatch or at the end of
    either string, and 0 when the first ``n`` characters agree.
    """
    _check_size("n", n)
    for i in range(n):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca == 0 or cb == 0 or ca != cb:
            return ca - cb
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    _check_size("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the (possibly truncated) copy and the full length of ``src``.
    """
    _check_size("size", size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had:
    ``len(src) + min(size, len(dst))``.
    """
    _check_size("size", size)
    room = max(0, size - 1 - len(dst))
    result = dst + src[:room]
    total = len(src) + (size if size < len(dst) else len(dst))
    return result, total


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(s))


Chars = Union[MutableSequence[str], bytearray]


def striteri(s: Chars, func: Callable[[int, object], object]) -> Chars:
    """Call ``func(index, item)`` for each item of ``s`` in place.

    A non-None return value replaces the item. Returns ``s``.
    """
    for index, item in enumerate(s):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement
    return s