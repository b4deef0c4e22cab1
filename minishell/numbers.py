"""Lenient number parsing and formatting.

The parsers skip leading whitespace, accept one optional sign and read
digits until the first character that is not one; they never raise on
malformed text but return whatever prefix could be read.
"""

from __future__ import annotations

import operator
import re
from typing import Optional

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = re.compile(r"[0-9]*")


def _wrap(value: int, bits: int) -> int:
    """Reduce *value* to a two's complement integer of *bits* width."""
    span = 1 << bits
    value &= span - 1
    return value - span if value >= span >> 1 else value


def _split_sign(text: str) -> tuple[int, str]:
    body = text.lstrip(_WHITESPACE)
    if body.startswith(("-", "+")):
        return (-1 if body[0] == "-" else 1), body[1:]
    return 1, body


def _leading_digits(text: str) -> str:
    match = _DIGITS.match(text)
    return match.group() if match else ""


def atoi(text: str) -> int:
    """Parse a leading integer as a 32-bit value.

    The digits are accumulated in a 64-bit register; if that overflows the
    result is -1 for a positive number and 0 for a negative one. Otherwise
    the value is truncated to 32 bits.
    """
    sign, body = _split_sign(text)
    result = 0
    for ch in _leading_digits(body):
        result = _wrap(result * 10 + int(ch), 64)
        if result < 0:
            return -1 if sign == 1 else 0
    return _wrap(result * sign, 32)


def atol(text: str) -> int:
    """Parse a leading integer, clamping to LONG_MAX or LONG_MIN on overflow."""
    sign, body = _split_sign(text)
    result = 0
    for ch in _leading_digits(body):
        digit = int(ch)
        if result > (LONG_MAX - digit) // 10:
            return LONG_MAX if sign == 1 else LONG_MIN
        result = result * 10 + digit
    return sign * result


def atof(text: Optional[str]) -> float:
    """Parse a leading decimal number with an optional fractional part.

    ``None`` yields 0.0. No exponent notation is recognised.
    """
    if text is None:
        return 0.0
    sign, body = _split_sign(text)
    result = 0.0
    whole = _leading_digits(body)
    for ch in whole:
        result = result * 10 + int(ch)
    rest = body[len(whole):]
    if rest.startswith("."):
        rest = rest[1:]
    scale = 1
    for ch in _leading_digits(rest):
        result = result * 10 + int(ch)
        scale *= 10
    return (result / scale) * sign


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading minus when negative."""
    return str(operator.index(n))