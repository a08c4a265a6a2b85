"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from .colors import lookup_color
from .image import Image
from .wordtab import split_words, str_str, str_str_quoted

TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63
_ATOI = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _blank(chars: list[str], start: int, count: int) -> None:
    end = min(start + count, len(chars))
    chars[start:end] = " " * (end - start)


def strip_comments(text: str) -> str:
    """Blank out /* */ and // comments that lie outside double quotes.

    The result keeps the length and layout of the input.
    """
    chars = list(text)
    while (begin := str_str_quoted("".join(chars), "/*")) != -1:
        end = str_str("".join(chars[begin + 2:]), "*/")
        _blank(chars, begin, end + 4)
    while (begin := str_str_quoted("".join(chars), "//")) != -1:
        end = str_str("".join(chars[begin + 2:]), "\n")
        _blank(chars, begin, end + 3)
    return "".join(chars)


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings."""
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header: {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError(f"bad XPM header: {line!r}")
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError(f"bad XPM header: {line!r}")
    return width, height, ncolors, cpp


def _color_of(words: list[str]) -> int:
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError("colour line has no 'c' key") from None
    if index >= len(words):
        raise XpmError("colour line has no colour after 'c'")
    name = words[index]
    if not name.startswith("#") and index + 1 < len(words):
        name = f"{name} {words[index + 1]}"[:_NAME_LIMIT]
    return lookup_color(name)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM rows: header, colour lines, then pixel rows.

    Pixels with the colour "None" are stored as 0xFF000000.
    """
    rows = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(rows, "XPM header"))
    last_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour line")
        key = line[:cpp]
        color = _color_of(split_words(line[cpp:]))
        if last_wins:
            palette[key] = color
        else:
            palette.setdefault(key, color)
    image = Image(width, height, 32, False)
    for y in range(height):
        line = _next_line(rows, "pixel row")
        for x in range(width):
            color = palette.get(line[cpp * x:cpp * x + cpp], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(data: Iterable[str]) -> Image:
    """Build an image from in-memory XPM strings."""
    return parse_xpm(data)


def xpm_file_to_image(path: str | PathLike) -> Image:
    """Read an XPM file and build an image from it."""
    with open(path, "rb") as handle:
        text = handle.read().decode("latin-1")
    return parse_xpm(quoted_lines(strip_comments(text)))