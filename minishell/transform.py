"""Building new strings out of existing ones.

Strings are immutable, so the bounded copy and concatenation helpers return
the resulting text together with the length the caller would have needed.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* beginning at *start*.

    A start past the end of *s* gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *s*."""
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split *s* on the single character *sep*, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [field for field in s.split(sep) if field]


def strmapi(s: Optional[str], func: Callable[[int, str], str]) -> Optional[str]:
    """Return a new string of ``func(index, char)`` for each character of *s*.

    ``None`` for *s* gives ``None``.
    """
    if s is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], str]],
) -> None:
    """Replace each item of *chars* in place with ``func(index, item)``.

    Does nothing when either argument is ``None``.
    """
    if chars is None or func is None:
        return
    for index, ch in enumerate(list(chars)):
        chars[index] = func(index, ch)


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters including its terminator.

    Returns the new buffer contents and the full length of *src*. With a
    size of zero the buffer is left as it was.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters.

    Returns the new buffer contents and the length the full result would
    have had. If *dst* is already longer than *size*, or *size* is zero,
    the buffer is unchanged and the length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(dst) > size or size == 0:
        return dst, size + len(src)
    room = max(size - 1 - len(dst), 0)
    return dst + src[:room], len(dst) + len(src)