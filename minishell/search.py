"""Searching and comparing strings, with C string semantics.

Positions are returned as indices; a missing match is ``None``. Looking for
``"\\0"`` finds the position just past the end, where a terminator would be.
"""

from __future__ import annotations

_NUL = "\0"


def strlen(s: str) -> int:
    """Return the length of ``s``."""
    return len(s)


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None."""
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None."""
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> int | None:
    """Find ``little`` wholly inside the first ``length`` characters of ``big``."""
    if not little:
        return 0
    index = big.find(little, 0, max(length, 0))
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; the sign tells their order, 0 means equal."""
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    tail1 = ord(s1[len(s2)]) if len(s1) > len(s2) else 0
    tail2 = ord(s2[len(s1)]) if len(s2) > len(s1) else 0
    return tail1 - tail2


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    if n <= 0:
        return 0
    return strcmp(s1[:n], s2[:n])