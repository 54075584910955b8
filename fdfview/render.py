"""Isometric projection of height maps and wire-frame drawing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from fdfview.image import Image
from fdfview.mapfile import HeightMap, Point

WIDTH = 1800
HEIGHT = 2000

_HALF_SQRT2 = math.sqrt(2.0) / 2.0
_SQRT_TWO_THIRDS = math.sqrt(2.0 / 3.0)
_INV_SQRT6 = 1 / math.sqrt(6)

Coord = tuple[int, int]


@dataclass(frozen=True)
class View:
    """Where and how a map is drawn.

    ``xstart`` and ``ystart`` place the first grid point, ``zoom`` is the
    grid spacing, ``deep`` divides altitudes, and the colour channels are
    written into each drawn pixel one byte apiece.
    """

    xstart: int = 900
    ystart: int = 600
    zoom: int = 10
    deep: int = 5
    color_r: int = 255
    color_g: int = 255
    color_b: int = 255

    @property
    def pixel(self) -> int:
        """The 32-bit value stored for a drawn pixel in a little-endian image."""
        return (
            (self.color_r & 0xFF)
            | (self.color_g & 0xFF) << 8
            | (self.color_b & 0xFF) << 16
        )


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def project(point: Point, view: View) -> Coord:
    """Screen position of a grid point under the isometric projection."""
    zoom = view.zoom
    x = view.xstart + _HALF_SQRT2 * (point.x * zoom - point.y * zoom)
    y = view.ystart - (
        _SQRT_TWO_THIRDS * _cdiv(point.z * zoom, view.deep)
        - _INV_SQRT6 * (zoom * (point.x + point.y))
    )
    return int(x), int(y)


def line_points(start: Coord, end: Coord) -> Iterator[Coord]:
    """Yield the pixels of a line from ``start`` up to, not including, ``end``."""
    x, y = start
    x_end, y_end = end
    dx = abs(x_end - x)
    sx = 1 if x < x_end else -1
    dy = abs(y_end - y)
    sy = 1 if y < y_end else -1
    err = _cdiv(dx if dx > dy else -dy, 2)
    while (x, y) != (x_end, y_end):
        yield x, y
        e2 = err
        if e2 > -dx:
            err -= dy
            x += sx
        if e2 < dy:
            err += dx
            y += sy


def draw_line(image: Image, start: Coord, end: Coord, color: int) -> None:
    """Draw a line into ``image``; pixels outside it are skipped."""
    for x, y in line_points(start, end):
        if 0 <= x < image.width and 0 <= y < image.height:
            image.put_pixel(x, y, color)


def render_map(heightmap: HeightMap, view: View, image: Image) -> None:
    """Draw the wire frame joining each point to its right and lower neighbours."""
    points = heightmap.points
    line_size = heightmap.line_size
    last_row_start = line_size * (heightmap.nb_line - 1)
    color = view.pixel
    for index, point in enumerate(points[:-1]):
        here = project(point, view)
        if point.nb % line_size != 0:
            draw_line(image, here, project(points[index + 1], view), color)
        if not point.nb > last_row_start:
            draw_line(image, here, project(heightmap.below(index), view), color)


def render(heightmap: HeightMap, view: View) -> Image:
    """Draw a map into a fresh window-sized image."""
    image = Image(WIDTH, HEIGHT, 32, False)
    render_map(heightmap, view, image)
    return image