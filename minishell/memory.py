"""Byte-buffer helpers working on ``bytearray`` and other byte sequences.

Functions that modify memory do so in place on a mutable buffer and return
it. Byte counts larger than a buffer raise ``IndexError``.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check(buf: BytesLike, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(buf):
        raise IndexError(f"{n} bytes requested from a {len(buf)}-byte {name}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    _check(buf, n)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *count* elements of *size* bytes.

    Raises ``MemoryError`` when the total size would exceed ``SIZE_MAX``.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count > 0 and size > 0 and count > SIZE_MAX // size:
        raise MemoryError("requested size overflows")
    return bytearray(count * size)


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to *value* within *n* bytes, or ``None``."""
    _check(data, n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare *n* bytes; the difference of the first unequal pair, or 0."""
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    _check(a, n, "first buffer")
    _check(b, n, "second buffer")
    return 0


def memcpy(dst: Optional[bytearray], src: Optional[BytesLike], n: int) -> Optional[bytearray]:
    """Copy *n* bytes from *src* to the start of *dst* and return *dst*."""
    if dst is None and src is None:
        return dst
    if dst is None or src is None:
        raise TypeError("memcpy() needs both a source and a destination")
    _check(src, n, "source")
    _check(dst, n, "destination")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy *length* bytes inside *buf* from offset *src* to offset *dst*.

    The regions may overlap; the result is as if the source were copied
    out first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check(buf, max(dst, src) + length)
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first *length* bytes of *buf* with *value* as a byte."""
    _check(buf, length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf