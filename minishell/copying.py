"""Copying and appending strings with C size limits.

Strings are immutable, so the functions return the new content of the
destination instead of writing into it.
"""

from __future__ import annotations


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the new destination and the length of ``src``. With ``size`` 0
    the destination is left as it is.
    """
    if size <= 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` so the result, plus terminator, fits in ``size``.

    Returns the new destination and the length the result would have had
    without the limit: ``min(size, len(dst)) + len(src)``.
    """
    room = size - 1 - len(dst)
    result = dst + src[:room] if size > 0 and room > 0 else dst
    return result, min(size, len(dst)) + len(src)


def strcpy(dst: str, src: str) -> str:
    """Return the destination after ``src`` is copied over it: ``src`` itself."""
    return src


def strcat(dst: str, src: str) -> str:
    """Return ``dst`` with ``src`` appended."""
    return dst + src


def strdup(s: str | None) -> str | None:
    """Return a copy of ``s``; None stays None."""
    if s is None:
        return None
    return str(s)