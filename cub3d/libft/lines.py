"""Line-at-a-time reading from a text stream using a fixed read size."""

from __future__ import annotations

import os
from typing import IO, Iterator, Optional, Union

BUFFER_SIZE = 256


class LineReader:
    """Read lines from a stream, pulling buffer_size characters at a time.

    Each line keeps its trailing newline; the last line of a stream that
    does not end with a newline is returned as it is.
    """

    def __init__(self, stream: IO[str], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""
        self._eof = False

    def next_line(self) -> Optional[str]:
        """Return the next line, or None once the stream is exhausted."""
        while "\n" not in self._pending and not self._eof:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find("\n")
        if end < 0:
            line, self._pending = self._pending, ""
        else:
            line, self._pending = self._pending[: end + 1], self._pending[end + 1:]
        return line

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_lines(filename: Union[str, os.PathLike]) -> Iterator[str]:
    """Yield the lines of a file, newlines kept exactly as stored."""
    with open(filename, encoding="utf-8", newline="") as stream:
        yield from LineReader(stream)