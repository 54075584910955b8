import pytest

from fdfview.image import Image
from fdfview.mapfile import Point, parse_map
from fdfview.render import (
    HEIGHT,
    WIDTH,
    View,
    draw_line,
    line_points,
    project,
    render,
    render_map,
)


def test_origin_projects_to_start():
    view = View()
    assert project(Point(0, 0, 0, 1), view) == (view.xstart, view.ystart)


@pytest.mark.parametrize("n", [1, 2, 3, 7])
def test_diagonal_points_stay_on_vertical_axis(n):
    view = View()
    x, y = project(Point(n, n, 0, 1), view)
    assert x == view.xstart
    assert y > view.ystart


def test_swapped_coordinates_fall_on_either_side():
    view = View()
    a = project(Point(3, 1, 0, 1), view)
    b = project(Point(1, 3, 0, 1), view)
    assert a[1] == b[1]
    assert a[0] > view.xstart > b[0]


def test_altitude_raises_point():
    view = View()
    flat = project(Point(2, 1, 0, 1), view)
    high = project(Point(2, 1, 10, 1), view)
    assert high[0] == flat[0]
    assert high[1] < flat[1]


def test_deeper_view_flattens_relief():
    point = Point(2, 1, 10, 1)
    flat_y = project(Point(2, 1, 0, 1), View())[1]
    shallow = project(point, View(deep=1))[1]
    deep = project(point, View(deep=10))[1]
    assert shallow < deep < flat_y


def test_view_defaults_give_white_pixel():
    assert View().pixel == 0xFFFFFF


def test_pixel_channels_wrap_to_bytes():
    base = View(color_r=0x12, color_g=0x34, color_b=0x56)
    wrapped = View(color_r=256 + 0x12, color_g=512 + 0x34, color_b=256 + 0x56)
    assert wrapped.pixel == base.pixel


def test_same_point_gives_no_pixels():
    assert list(line_points((4, 4), (4, 4))) == []


@pytest.mark.parametrize(
    "start,end",
    [((0, 0), (5, 0)), ((0, 0), (0, -6)), ((2, 3), (9, 5)),
     ((10, 10), (1, 4)), ((0, 0), (3, 8)), ((-4, 2), (4, -2))],
)
def test_line_points_invariants(start, end):
    points = list(line_points(start, end))
    assert len(points) == max(abs(end[0] - start[0]), abs(end[1] - start[1]))
    assert points[0] == start
    assert end not in points
    for (x0, y0), (x1, y1) in zip(points, points[1:] + [end]):
        assert max(abs(x1 - x0), abs(y1 - y0)) == 1


def test_draw_line_clips_outside_image():
    image = Image(10, 10)
    draw_line(image, (-5, -5), (5, 5), 0xABCDEF)
    assert image.get_pixel(0, 0) == 0xABCDEF
    assert image.get_pixel(4, 4) == 0xABCDEF
    assert image.get_pixel(5, 5) == 0


def test_square_map_draws_all_but_last_corner():
    heightmap = parse_map(["0 0", "0 0"])
    view = View(xstart=100, ystart=50)
    image = Image(200, 200)
    render_map(heightmap, view, image)
    first, second, third, last = (project(p, view) for p in heightmap.points)
    assert image.get_pixel(*first) == view.pixel
    assert image.get_pixel(*second) == view.pixel
    assert image.get_pixel(*third) == view.pixel
    assert image.get_pixel(*last) == 0


def test_single_row_has_no_vertical_lines():
    heightmap = parse_map(["0 0 0"])
    view = View(xstart=100, ystart=50)
    image = Image(200, 200)
    render_map(heightmap, view, image)
    start = project(heightmap.points[0], view)
    below = project(Point(0, 1, 0, 0), view)
    assert image.get_pixel(*start) == view.pixel
    assert image.get_pixel(*below) == 0


def test_single_point_map_draws_nothing():
    heightmap = parse_map(["7"])
    view = View(xstart=25, ystart=25)
    image = Image(50, 50)
    render_map(heightmap, view, image)
    assert image.get_pixel(*project(heightmap.points[0], view)) == 0
    assert bytes(image.data) == bytes(image.size_line * 50)


def test_render_makes_window_sized_image():
    heightmap = parse_map(["0 0", "0 0"])
    view = View()
    image = render(heightmap, view)
    assert (image.width, image.height) == (WIDTH, HEIGHT)
    assert image.get_pixel(*project(heightmap.points[0], view)) == view.pixel