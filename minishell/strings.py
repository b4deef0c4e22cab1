"""Searching and comparing text with C string semantics.

Strings are treated like NUL-terminated C strings: anything from the first
``"\\0"`` onwards is ignored. Positions are returned as indexes into the
given string, or ``None`` where nothing is found.
"""

from __future__ import annotations

import operator
from typing import Optional, Union

CharLike = Union[str, int]


def _cstr(s: str) -> str:
    """Return *s* cut at its first NUL character."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    """Return *c* as a one-character string; an integer is taken as a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of *c* in *s*, or ``None``.

    Searching for the NUL character finds the terminator, at ``len(s)``.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of *c* in *s*, or ``None``.

    Searching for the NUL character finds the terminator, at ``len(s)``.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: Optional[str], length: int) -> Optional[int]:
    """Index of *needle* lying wholly within the first *length* characters.

    An empty (or missing) needle is found at index 0.
    """
    if not needle or not _cstr(needle):
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    window = _cstr(haystack)[:length]
    index = window.find(_cstr(needle))
    return None if index < 0 else index


def _compare(s1: str, s2: str, limit: Optional[int]) -> int:
    a = _cstr(s1)
    b = _cstr(s2)
    span = max(len(a), len(b))
    if limit is not None:
        span = min(span, limit)
    for pos in range(span):
        left = ord(a[pos]) if pos < len(a) else 0
        right = ord(b[pos]) if pos < len(b) else 0
        if left != right:
            return left - right
    return 0


def strncmp(s1: Optional[str], s2: Optional[str], n: int) -> int:
    """Compare at most *n* characters; the sign tells the ordering.

    A missing string on either side compares as equal (0).
    """
    if s1 is None or s2 is None:
        return 0
    if n < 0:
        raise ValueError("n must not be negative")
    return _compare(s1, s2, n)


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; the difference of the first unequal characters."""
    if s1 is None or s2 is None:
        raise TypeError("strcmp() requires two strings")
    return _compare(s1, s2, None)


def strequ(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both strings are present and identical."""
    if s1 is None or s2 is None:
        return False
    return _cstr(s1) == _cstr(s2)