"""Read text from file descriptors one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Optional

DEFAULT_BUFFER_SIZE = 50
MAX_FD = 10240


class LineReader:
    """Line-by-line reader that keeps leftover data per file descriptor."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytes] = {}

    def read_line(self, fd: int) -> Optional[str]:
        """Return the next line of ``fd``, newline included.

        The final line may lack a newline. Returns None at end of input,
        for a descriptor outside the supported range, or on a read error
        (which also discards anything buffered for ``fd``).
        """
        if fd < 0 or fd >= MAX_FD:
            return None
        buffer = self._pending.pop(fd, b"")
        while True:
            newline = buffer.find(b"\n")
            if newline >= 0:
                rest = buffer[newline + 1 :]
                if rest:
                    self._pending[fd] = rest
                return self._decode(buffer[: newline + 1])
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                return None
            if not chunk:
                return self._decode(buffer) if buffer else None
            buffer += chunk

    @staticmethod
    def _decode(data: bytes) -> str:
        return data.decode("utf-8", errors="replace")


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line of ``fd`` using a shared reader, or None."""
    return _default_reader.read_line(fd)