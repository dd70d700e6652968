"""Writing characters, strings and numbers to a stream or file descriptor."""

from __future__ import annotations

import os
from typing import IO, Union

Stream = Union[IO[str], IO[bytes], int]


def _write(stream: Stream, text: str) -> None:
    if isinstance(stream, int):
        data = text.encode()
        while data:
            written = os.write(stream, data)
            data = data[written:]
        return
    if isinstance(getattr(stream, "mode", ""), str) and "b" in getattr(
        stream, "mode", ""
    ):
        stream.write(text.encode())  # type: ignore[arg-type]
        return
    try:
        stream.write(text)  # type: ignore[arg-type]
    except TypeError:
        stream.write(text.encode())  # type: ignore[arg-type]


def putchar_fd(c: str, stream: Stream) -> None:
    """Write one character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(stream, c)


def putstr_fd(s: str | None, stream: Stream) -> None:
    """Write a string; a missing string writes nothing."""
    if s is None:
        return
    _write(stream, s)


def putendl_fd(s: str | None, stream: Stream) -> None:
    """Write a string followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    _write(stream, f"{s}\n")


def putnbr_fd(n: int, stream: Stream) -> None:
    """Write an integer in decimal."""
    _write(stream, str(int(n)))