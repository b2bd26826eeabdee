"""Read a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Yield lines, each with its trailing newline, from a text or binary stream.

    The last line is returned without a newline when the stream does not end
    with one. At end of input :meth:`read_line` returns ``None``.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._exhausted = False

    def read_line(self) -> AnyStr | None:
        """Return the next line, or ``None`` once the stream is used up."""
        while True:
            pending = self._pending
            if pending is not None:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline)  # type: ignore[arg-type]
                if index >= 0:
                    self._pending = pending[index + 1:]
                    return pending[:index + 1]
            if self._exhausted:
                break
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._exhausted = True
                continue
            self._pending = chunk if pending is None else pending + chunk
        line, self._pending = self._pending, None
        return line if line else None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read every line of the text file at ``path``, newlines kept."""
    with open(path, encoding="utf-8", newline="") as handle:
        return list(LineReader(handle))