"""Line-by-line reading from several descriptors or streams at once."""

from __future__ import annotations

import os
from collections.abc import Hashable, Iterator
from typing import Any

BUFFER_SIZE = 1


class LineReader:
    """Reads one line at a time from file descriptors or readable streams.

    Data read past the end of a line is kept per source and handed out by the
    next call for that same source, so several sources can be read in turn.
    A source is either an ``int`` file descriptor or an object with a
    ``read(size)`` method returning ``bytes`` or ``str``.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE, encoding: str = "utf-8") -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer_size must be an int, got {type(buffer_size).__name__}")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self.encoding = encoding
        self._pending: dict[Hashable, bytes] = {}

    def _read(self, fd: Any) -> bytes:
        if isinstance(fd, int) and not isinstance(fd, bool):
            return os.read(fd, self.buffer_size)
        data = fd.read(self.buffer_size)
        if not data:
            return b""
        if isinstance(data, str):
            return data.encode(self.encoding, "surrogateescape")
        return bytes(data)

    def _decode(self, data: bytes) -> str:
        return data.decode(self.encoding, "surrogateescape")

    def next_line(self, fd: Any) -> str | None:
        """The next line from ``fd``, newline included; None once nothing is left.

        The last line of a source is returned without a newline if it has none.
        A read error discards what was buffered for ``fd`` and is raised.
        """
        buffer = bytearray(self._pending.pop(fd, b""))
        while b"\n" not in buffer:
            chunk = self._read(fd)
            if not chunk:
                break
            buffer += chunk
        if not buffer:
            return None
        end = buffer.find(b"\n")
        if end < 0:
            return self._decode(bytes(buffer))
        rest = bytes(buffer[end + 1 :])
        if rest:
            self._pending[fd] = rest
        return self._decode(bytes(buffer[: end + 1]))

    def discard(self, fd: Any) -> str | None:
        """Forget what is buffered for ``fd``; return it, or None if nothing was."""
        rest = self._pending.pop(fd, None)
        return None if rest is None else self._decode(rest)

    def lines(self, fd: Any) -> Iterator[str]:
        """Yield the lines of ``fd`` until it is exhausted."""
        while (line := self.next_line(fd)) is not None:
            yield line