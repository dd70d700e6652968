"""Reading a stream one line at a time, keeping what was read past the newline."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Union

Source = Union[IO[str], IO[bytes], int]


class LineReader(Generic[AnyStr]):
    """Read lines from a file object or descriptor, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, source: Source, buffer_size: int = 1) -> None:
        if isinstance(source, int) and source < 0:
            raise ValueError(f"invalid file descriptor: {source}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.source = source
        self.buffer_size = buffer_size
        self._remainder: AnyStr | None = None

    def _read(self) -> AnyStr:
        if isinstance(self.source, int):
            return os.read(self.source, self.buffer_size)  # type: ignore[return-value]
        return self.source.read(self.buffer_size)  # type: ignore[return-value]

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return b"\n" if isinstance(sample, bytes) else "\n"  # type: ignore[return-value]

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None at the end of input."""
        pending = self._remainder
        while pending is None or self._newline(pending) not in pending:
            chunk = self._read()
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._remainder = None
            return None
        newline = self._newline(pending)
        index = pending.find(newline)
        if index < 0:
            self._remainder = None
            return pending
        self._remainder = pending[index + 1 :]
        return pending[: index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def get_next_line(reader: LineReader) -> str | bytes | None:
    """Return the next line from ``reader``, or None at the end of input."""
    return reader.next_line()