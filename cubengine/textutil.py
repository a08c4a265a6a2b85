"""Small text helpers for reading map configuration values."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

_LEADING = " \t\n\v\f\r"


def is_blank(char: str) -> bool:
    """Return whether ``char`` is a space, tab or newline."""
    return char in (" ", "\t", "\n")


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def rgb_atoi(text: str) -> int:
    """Parse a colour component, returning -1 if it holds a stray character.

    Leading whitespace and one sign are allowed; blanks among the digits
    are skipped.
    """
    rest = text.lstrip(_LEADING)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if "0" <= char <= "9":
            value = _to_int32(value * 10 + int(char))
        elif not is_blank(char):
            return -1
    return _to_int32(sign * value)


def copy_char_matrix(rows: Optional[Sequence[str]]) -> Optional[list[str]]:
    """Return a new list holding the same rows, or None for None."""
    if rows is None:
        return None
    return list(rows)