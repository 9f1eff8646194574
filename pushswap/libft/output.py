"""Write characters, strings and integers directly to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from pushswap.libft.convert import itoa

_ENCODING = "utf-8"


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: Union[str, int], fd: int) -> None:
    """Write a single character (or byte value) to ``fd``."""
    if isinstance(c, int):
        _write_all(fd, bytes([c & 0xFF]))
        return
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode(_ENCODING))


def put_str(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; None writes nothing."""
    if s:
        _write_all(fd, s.encode(_ENCODING))


def put_endl(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline; None writes nothing."""
    if s is not None:
        put_str(s, fd)
        put_char("\n", fd)


def put_nbr(n: int, fd: int) -> None:
    """Write a 32-bit signed integer in decimal to ``fd``."""
    put_str(itoa(n), fd)