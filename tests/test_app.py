import pytest

from fdfview.app import Key, apply_key, main
from fdfview.render import View


def test_zoom_in_adds_one():
    view = View()
    assert apply_key(view, Key.ZOOM_IN).zoom == view.zoom + 1


def test_zoom_out_stops_at_one():
    view = View(zoom=1)
    assert apply_key(view, Key.ZOOM_OUT).zoom == 1
    assert apply_key(View(zoom=4), Key.ZOOM_OUT).zoom == 3


@pytest.mark.parametrize(
    "key,dx,dy",
    [(Key.RIGHT, 1, 0), (Key.LEFT, -1, 0), (Key.DOWN, 0, 1), (Key.UP, 0, -1)],
)
def test_arrows_move_by_ten_times_zoom(key, dx, dy):
    view = View(zoom=3)
    moved = apply_key(view, key)
    assert moved.xstart == view.xstart + dx * view.zoom * 10
    assert moved.ystart == view.ystart + dy * view.zoom * 10


def test_depth_keys():
    view = View(deep=1)
    assert apply_key(view, Key.RAISE).deep == 1
    assert apply_key(view, Key.FLATTEN).deep == 2
    assert apply_key(View(deep=5), Key.RAISE).deep == 4


def test_color_key_shifts_channels():
    view = View()
    shifted = apply_key(view, Key.COLOR)
    assert shifted.color_r == view.color_r + 5
    assert shifted.color_g == view.color_g + 25
    assert shifted.color_b == view.color_b + 125


def test_unknown_key_leaves_view_unchanged():
    view = View(xstart=10, ystart=20, zoom=2, deep=3)
    assert apply_key(view, 0) == view


def test_escape_exits_with_status_two():
    with pytest.raises(SystemExit) as info:
        apply_key(View(), Key.ESCAPE)
    assert info.value.code == 2


@pytest.mark.parametrize("argv", [[], ["a.fdf", "b.fdf"]])
def test_wrong_argument_count_prints_usage(argv, capsys):
    assert main(argv) == 2
    assert "Usage" in capsys.readouterr().err


def test_missing_file_is_reported(tmp_path, capsys):
    path = tmp_path / "absent.fdf"
    assert main([str(path)]) == 255
    err = capsys.readouterr().err
    assert "No file" in err
    assert str(path) in err


def test_empty_file_is_reported(tmp_path, capsys):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    assert main([str(path)]) == 255
    assert "No data found." in capsys.readouterr().err


def test_ragged_map_is_reported(tmp_path, capsys):
    path = tmp_path / "ragged.fdf"
    path.write_text("0 0 0\n0 0\n")
    assert main([str(path)]) == 255
    assert "Found wrong line length. Exiting." in capsys.readouterr().err