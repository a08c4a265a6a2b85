"""Substring search and word splitting used by the XPM reader."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def str_str(text: str, find: str) -> int:
    """Return the position of the first occurrence of ``find``, or -1."""
    return text.find(find)


def str_str_quoted(text: str, find: str) -> int:
    """Like :func:`str_str`, but ignore matches inside double quotes."""
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]