"""String searching, comparison, copying and joining.

Strings behave as if they ended in a NUL character. Searching for ``"\\0"``
(or code 0) therefore finds the position just past the last character.
Positions are returned as indices, and ``None`` means "not found".
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple, Union

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strdup",
    "strlcpy",
    "strlcat",
    "substr",
    "strjoin",
]

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def strlen(s: Optional[str]) -> int:
    """Length of ``s``; ``None`` counts as empty."""
    return 0 if s is None else len(s)


def strchr(s: Optional[str], c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    A NUL character matches the terminator at ``len(s)``. ``None`` yields None.
    """
    if s is None:
        return None
    ch = _char(c)
    if ch == "\0" and ch not in s:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    A NUL character matches the terminator at ``len(s)``.
    """
    if s is None:
        raise TypeError("strrchr() needs a string")
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first unequal pair, or 0 when the
    compared parts are equal.
    """
    _check_size(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            return 0
    return 0


def strnstr(haystack: Optional[str], needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at 0. Returns None when there is no match.
    """
    _check_size(length, "length")
    if haystack is None:
        if length == 0:
            return None
        raise TypeError("strnstr() needs a haystack when length is non-zero")
    if needle == "":
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """An equal copy of ``s``; ``None`` duplicates to the empty string."""
    return "" if s is None else "".join(s)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """What a destination of ``size`` slots holds after copying ``src``.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``; a result length below the total means truncation.
    """
    _check_size(size, "size")
    total = len(src)
    if size == 0:
        return "", total
    return src[: size - 1], total


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have.
    When ``dst`` already fills the buffer it is left unchanged and the
    returned length is ``size + len(src)``.
    """
    _check_size(size, "size")
    d_len, s_len = strlen(dst), strlen(src)
    dst = dst or ""
    src = src or ""
    if d_len >= size:
        return dst, size + s_len
    if s_len < size - d_len:
        return dst + src, d_len + s_len
    return dst + src[: size - d_len - 1], d_len + s_len


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Up to ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives the empty string; ``None`` gives None.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if s is None:
        return None
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate two strings, treating ``None`` as empty."""
    return (s1 or "") + (s2 or "")