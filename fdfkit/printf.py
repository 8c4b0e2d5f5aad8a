"""Formatted output supporting the conversions ``%c %s %p %d %i %u %x %X %%``.

Integer conversions behave like their 32-bit C counterparts: ``%d``/``%i``
wrap to a signed 32-bit value, ``%u``, ``%x`` and ``%X`` to an unsigned one.
An unknown conversion character produces no output and is skipped.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

__all__ = [
    "format_hex",
    "format_pointer",
    "format_unsigned",
    "format_int",
    "format_str",
    "render",
    "printf",
]

_UINT32 = 2**32
_INT32_MIN = -(2**31)
_UINT64_MASK = 2**64 - 1


def _as_int(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"expected an integer, got {type(value).__name__}") from None


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of ``n`` taken as an unsigned 32-bit value."""
    text = format(_as_int(n) % _UINT32, "x")
    return text.upper() if upper else text


def format_pointer(addr: Optional[int]) -> str:
    """``0x`` followed by the address in lower-case hex, or ``(nil)`` for a null address."""
    if addr is None:
        return "(nil)"
    value = _as_int(addr) & _UINT64_MASK
    if value == 0:
        return "(nil)"
    return "0x" + format(value, "x")


def format_unsigned(n: int) -> str:
    """Decimal digits of ``n`` taken as an unsigned 32-bit value."""
    return str(_as_int(n) % _UINT32)


def format_int(n: int) -> str:
    """Decimal representation of ``n`` taken as a signed 32-bit value."""
    value = (_as_int(n) - _INT32_MIN) % _UINT32 + _INT32_MIN
    return str(value)


def format_str(s: Optional[str]) -> str:
    """``s`` itself, or ``(null)`` for None."""
    return "(null)" if s is None else s


def _format_char(c: Any) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_as_int(c) & 0xFF)


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "u": format_unsigned,
    "p": format_pointer,
    "x": lambda v: format_hex(v, False),
    "X": lambda v: format_hex(v, True),
    "i": format_int,
    "d": format_int,
    "s": format_str,
}


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for conversion %{spec}") from None
        yield convert(value)


def render(fmt: Optional[str], *args: Any) -> str:
    """The text that :func:`printf` would write for ``fmt`` and ``args``."""
    if fmt is None:
        return ""
    return "".join(_pieces(fmt, args))


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    if text:
        (sys.stdout if stream is None else stream).write(text)
    return len(text)