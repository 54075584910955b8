"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from os import PathLike
from typing import Iterable, Iterator, Union

from fdfview.colors import parse_color
from fdfview.image import Image
from fdfview.visual import good_color

_WORD_SEPARATOR = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")
_TRANSPARENT = -1
_DEPTH = 24


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def split_words(text: str) -> list[str]:
    """Split on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATOR.split(text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Position of the first ``needle`` outside double quotes, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments that are not inside strings, keeping offsets."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        if end == -1:
            raise XpmError("unterminated comment")
        stop = end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in turn."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_header(lines: Iterator[str]) -> tuple[int, int, int, int]:
    words = split_words(_next_line(lines, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"invalid header values: {values}")
    return values  # type: ignore[return-value]


def _read_colour(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
        spec = words[index]
    except (ValueError, IndexError):
        raise XpmError(f"no colour given in {line!r}") from None
    suffix = words[index + 1] if index + 1 < len(words) else None
    rgb = parse_color(spec, suffix)
    if rgb != _TRANSPARENT:
        rgb = good_color(rgb, _DEPTH, ())
    return line[:cpp], rgb


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colours, then pixel rows."""
    rows = iter(lines)
    width, height, ncolors, cpp = _read_header(rows)
    colours: dict[str, int] = {}
    for _ in range(ncolors):
        key, rgb = _read_colour(_next_line(rows, "colour definition"), cpp)
        if cpp <= 2 or key not in colours:
            colours[key] = rgb
    image = Image(width, height, 32, False)
    for y in range(height):
        line = _next_line(rows, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            colour = colours.get(line[x * cpp:(x + 1) * cpp], 0)
            if colour == _TRANSPARENT:
                image.set_transparent(x, y)
            else:
                image.put_pixel(x, y, colour)
    return image


def xpm_from_data(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings held in memory."""
    return parse_xpm(lines)


def xpm_from_file(path: Union[str, PathLike]) -> Image:
    """Read an XPM file and build an image from it."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(quoted_lines(strip_comments(text)))