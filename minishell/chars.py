"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The predicates return booleans; the case converters return a value of the
same kind they were given.
"""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[str, int]

_WHITESPACE_CODES = frozenset({32, 9, 10, 11, 12, 13})


def _code(c: CharLike) -> int:
    """Return the integer code of *c*; a string must be one character long."""
    if isinstance(c, str):
        return ord(c)
    return operator.index(c)


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for ASCII decimal digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes in the 7-bit ASCII range 0-127."""
    return 0 <= _code(c) < 128


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return 32 <= _code(c) <= 126


def is_whitespace(c: CharLike) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    return _code(c) in _WHITESPACE_CODES


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lowercase letter to uppercase; leave anything else as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _convert(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII uppercase letter to lowercase; leave anything else as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _convert(c, code)