"""Character classes, case mapping and integer/text conversion with ASCII rules.

Characters may be given as one-character strings or as integer codes; case
mapping returns a value of the same kind it was given.
"""

from __future__ import annotations

_WHITESPACE = " \t\n\r\v\f"


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one ``+`` or ``-`` sign is accepted, and
    digits are read until the first non-digit. No digits give 0.
    """
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] == "-":
        sign = -1
        text = text[1:]
    elif text[:1] == "+":
        text = text[1:]
    number = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        number = number * 10 + (ord(ch) - ord("0"))
    return sign * number


def isalpha(c: str | int) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: str | int) -> bool:
    """Return True for an ASCII decimal digit."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalnum(c: str | int) -> bool:
    """Return True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """Return True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def tolower(c: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading ``-`` when negative."""
    if n < 0:
        return "-" + itoa(-n)
    digits = []
    while True:
        n, digit = divmod(n, 10)
        digits.append(chr(ord("0") + digit))
        if n == 0:
            break
    return "".join(reversed(digits))