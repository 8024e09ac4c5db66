"""Reading a text stream line by line, or all at once."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

from ftkit.split import split

BUFFER_SIZE = 4096


class LineReader:
    """Reads lines from a stream in chunks of buffer_size characters.

    Each line keeps its terminating newline, if it has one.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def _fill(self) -> None:
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
            if len(chunk) < self._buffer_size:
                break

    def next_line(self) -> str | None:
        """The next line, or None once the stream is exhausted."""
        self._fill()
        if not self._pending:
            return None
        cut = self._pending.find("\n")
        if cut < 0:
            line, self._pending = self._pending, ""
        else:
            line, self._pending = self._pending[: cut + 1], self._pending[cut + 1 :]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


def get_lines(stream: TextIO) -> list[str]:
    """All non-empty lines of stream, without their newlines."""
    chunks = []
    while chunk := stream.read(BUFFER_SIZE):
        chunks.append(chunk)
    return split("".join(chunks), "\n")