"""Reading height maps: rows of whitespace-separated altitudes."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike, fspath
from typing import Iterable, Iterator, Union

WRONG_LENGTH = "Found wrong line length. Exiting."
NO_DATA = "No data found."
UNDEFINED = "Undefined behavior."
_RANDOM_DEVICE = "/dev/random/"

_ATOI = re.compile(r"[\t\n \r\f\v]*([+-]?)([0-9]*)")


class MapError(ValueError):
    """Raised when a map cannot be read."""


@dataclass(frozen=True)
class Point:
    """A grid point: column, row, altitude and 1-based position in the map."""

    x: int
    y: int
    z: int
    nb: int


@dataclass
class HeightMap:
    """The points of a map in row order, with the grid dimensions."""

    points: list[Point] = field(default_factory=list)
    line_size: int = 0
    nb_line: int = 0

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def below(self, index: int) -> Point:
        """The point one row under the point at ``index``."""
        target = index + self.line_size
        if index < 0 or target >= len(self.points):
            raise IndexError(f"no point below index {index}")
        return self.points[target]


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Read a leading signed decimal number; 0 when there is none.

    Leading whitespace is skipped and anything after the digits is
    ignored.  The result wraps around as a 32-bit integer.
    """
    sign, digits = _ATOI.match(text).groups()
    if not digits:
        return 0
    value = _wrap32(int(digits))
    return _wrap32(-value) if sign == "-" else value


def split_fields(line: str, separator: str = " ") -> list[str]:
    """Split ``line`` on a single character, dropping empty fields."""
    if len(separator) != 1:
        raise ValueError(f"separator must be one character, got {separator!r}")
    return [part for part in line.split(separator) if part]


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from its text lines.

    Every row must have as many fields as the first one.
    """
    heightmap = HeightMap()
    nb = 1
    y = 0
    for y, line in enumerate(lines):
        fields = split_fields(line, " ")
        for x, text in enumerate(fields):
            heightmap.points.append(Point(x, y, atoi(text), nb))
            nb += 1
        if y == 0:
            heightmap.line_size = len(fields)
        elif len(fields) != heightmap.line_size:
            raise MapError(WRONG_LENGTH)
        heightmap.nb_line = y + 1
    if not heightmap.points:
        raise MapError(NO_DATA)
    return heightmap


def _text_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def load_map(path: Union[str, PathLike]) -> HeightMap:
    """Read a map file and build its height map."""
    name = fspath(path)
    try:
        with open(name, "rb") as handle:
            raw = handle.read()
    except OSError:
        if name == _RANDOM_DEVICE:
            raise MapError(UNDEFINED) from None
        raise MapError(f"No file {name} or no data found.") from None
    if not raw:
        raise MapError(NO_DATA)
    return parse_map(_text_lines(raw.decode("latin-1")))