"""Number parsing and formatting, splitting, trimming and per-character mapping."""

from __future__ import annotations

import re
from typing import Callable, List, MutableSequence, Optional, Union

__all__ = ["atoi", "itoa", "split", "strtrim", "strmapi", "striteri"]

CharLike = Union[int, str]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACE = "\t\n\f\v\r "
_DIGITS = re.compile(r"[0-9]*")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. No digits gives 0. The result wraps like a
    32-bit signed integer.
    """
    rest = s.lstrip(_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = _DIGITS.match(rest).group()
    if not digits:
        return 0
    return _wrap_int32(sign * int(digits))


def itoa(n: int) -> str:
    """Decimal representation of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(s: str, sep: CharLike) -> List[str]:
    """The non-empty runs of ``s`` between occurrences of ``sep``."""
    ch = _char(sep)
    if ch == "\0":
        return [s] if s else []
    return [word for word in s.split(ch) if word]


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """``s`` with every leading and trailing character found in ``charset`` removed.

    Returns None when either argument is None.
    """
    if s is None or charset is None:
        return None
    if not charset:
        return s
    return s.strip(charset)


def strmapi(s: Optional[str], func: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """A new string built from ``func(index, char)`` for each character of ``s``.

    Returns None when either argument is None.
    """
    if s is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    buf: Optional[MutableSequence],
    func: Optional[Callable[[int, object], object]],
) -> Optional[MutableSequence]:
    """Replace each element of ``buf`` in place with ``func(index, element)``.

    ``buf`` is a mutable sequence of characters (a list of one-character
    strings or a bytearray). Processing stops at the first NUL element.
    Returns ``buf``, or None when either argument is None.
    """
    if buf is None or func is None:
        return None
    for index, item in enumerate(buf):
        if item in ("\0", 0):
            break
        buf[index] = func(index, item)
    return buf