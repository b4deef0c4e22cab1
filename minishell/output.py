"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import operator
from typing import Optional, TextIO, Union


def put_char(c: Union[str, int], stream: TextIO) -> None:
    """Write one character, given as a string or an integer code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        stream.write(c)
    else:
        stream.write(chr(operator.index(c)))


def put_str(s: Optional[str], stream: TextIO) -> None:
    """Write *s*; ``None`` writes nothing."""
    if s is None:
        return
    stream.write(s)


def put_endl(s: Optional[str], stream: TextIO) -> None:
    """Write *s* followed by a newline; ``None`` writes nothing at all."""
    if s is None:
        return
    stream.write(s)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write an integer in decimal."""
    stream.write(str(operator.index(n)))