"""Buffered line-by-line reading from a stream or file descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, AnyStr, Generic

__all__ = ["BUFFER_SIZE", "LineReader"]

BUFFER_SIZE = 10000


def _find_newline(data: str | bytes) -> int:
    """Return the index of the first newline in *data*, or -1."""
    if isinstance(data, (bytes, bytearray)):
        return data.find(b"\n")
    return data.find("\n")


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a file object or descriptor.

    Data is fetched in chunks of *buffer_size*; text following the last
    returned line is kept for the next call until :meth:`discard` drops it.
    """

    def __init__(self, stream: IO[AnyStr] | int, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if isinstance(stream, int) and stream < 0:
            raise ValueError("file descriptor must not be negative")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _read_chunk(self):
        if isinstance(self._stream, int):
            return os.read(self._stream, self._buffer_size)
        return self._stream.read(self._buffer_size)

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the input is exhausted."""
        pending = self._pending
        while pending is None or _find_newline(pending) < 0:
            try:
                chunk = self._read_chunk()
            except OSError:
                self._pending = None
                raise
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        index = _find_newline(pending)
        if index < 0:
            self._pending = None
            return pending
        line, rest = pending[: index + 1], pending[index + 1:]
        self._pending = rest or None
        return line

    def discard(self) -> None:
        """Drop any buffered text not yet returned."""
        self._pending = None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line