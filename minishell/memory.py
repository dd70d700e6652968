"""Byte-buffer operations with C memory-function semantics.

Buffers are ``bytearray`` objects changed in place; positions are indices
and a missing match is ``None``. Byte values are taken modulo 256.
"""

from __future__ import annotations

from collections.abc import Sequence


def _check(buf: Sequence[int], n: int, start: int = 0) -> None:
    if n < 0 or start < 0 or start + n > len(buf):
        raise ValueError(f"range {start}..{start + n} outside buffer of length {len(buf)}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nelem: int, elsize: int) -> bytearray:
    """Return a zeroed buffer of ``nelem * elsize`` bytes (empty if either is not positive)."""
    if nelem <= 0 or elsize <= 0:
        return bytearray()
    return bytearray(nelem * elsize)


def memccpy(dest: bytearray, src: Sequence[int], c: int, n: int) -> int | None:
    """Copy bytes from ``src`` until byte ``c`` has been copied or ``n`` bytes are done.

    Returns the index in ``dest`` just after the copied ``c``, or None when
    ``c`` was not among the first ``n`` bytes.
    """
    _check(src, n)
    _check(dest, n)
    target = c & 0xFF
    for index, byte in enumerate(src[:n]):
        dest[index] = byte
        if byte == target:
            return index + 1
    return None


def memchr(s: Sequence[int], c: int, n: int) -> int | None:
    """Return the index of the first byte ``c`` among the first ``n`` bytes, or None."""
    _check(s, n)
    index = bytes(s[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(s1: Sequence[int], s2: Sequence[int], n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch, else 0."""
    _check(s1, n)
    _check(s2, n)
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: Sequence[int], n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``; return ``dest``."""
    _check(src, n)
    _check(dest, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dest`` within ``buf``.

    Overlapping ranges are handled as if through a temporary copy.
    """
    _check(buf, n, src)
    _check(buf, n, dest)
    buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``c``; return ``buf``."""
    _check(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf