"""Formatting with the conversions ``%c %s %p %d %i %u %x %X`` and ``%%``.

Integers follow 32-bit C rules: ``%d`` and ``%i`` wrap to a signed int, and
``%u``, ``%x`` and ``%X`` to an unsigned one. An unknown conversion prints
nothing and uses no argument.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any

_MASK32 = 0xFFFFFFFF


def _take(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _signed32(value: Any) -> int:
    number = operator.index(value) & _MASK32
    return number - (1 << 32) if number & 0x80000000 else number


def _unsigned32(value: Any) -> int:
    return operator.index(value) & _MASK32


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _pointer(value: Any) -> str:
    address = 0 if value is None else operator.index(value)
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _char(_take(args, spec))
    if spec == "s":
        value = _take(args, spec)
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(_take(args, spec))
    if spec in ("d", "i"):
        return str(_signed32(_take(args, spec)))
    if spec == "u":
        return str(_unsigned32(_take(args, spec)))
    if spec == "x":
        return f"{_unsigned32(_take(args, spec)):x}"
    if spec == "X":
        return f"{_unsigned32(_take(args, spec)):X}"
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the arguments.

    Raises TypeError when there are fewer arguments than conversions.
    """
    parts: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)