# fdfview

`fdfview` draws a height map as an isometric wireframe. A map file is plain
text: each line is a row of the grid, and each space-separated integer on that
line is the height of one point. Fields are split on the space character only;
runs of spaces count as one separator. Every row must have as many points as
the first.

```
0  0  0  0
0 10 10  0
0 10 10  0
0  0  0  0
```

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running the viewer

```
fdfview path/to/map.fdf
```

The command opens a pygame window of 1800 × 2000 pixels titled `FDF_42` and
redraws the map after every key press. Keys:

| Key                 | Effect                                          |
|---------------------|-------------------------------------------------|
| Escape              | quit (exit status 2)                            |
| keypad `+` / `-`    | zoom in / out (zoom never goes below 1)         |
| arrow keys          | move the drawing by ten times the zoom          |
| Page Up             | divide heights by less (never below 1)          |
| Page Down           | divide heights by more                          |
| `C`                 | shift the line colour                           |

Closing the window ends the program with status 0.

Called with no file name, or with more than one, the command prints a usage
line to standard error and exits with status 2. A missing file, an empty file,
or rows of unequal length print one of these messages to standard error and
exit with status 255:

- `No file <name> or no data found.`
- `No data found.`
- `Found wrong line length. Exiting.`

## Using it as a library

```python
from fdfview.mapfile import load_map
from fdfview.render import View, render

heightmap = load_map("map.fdf")
image = render(heightmap, View())
print(image.get_pixel(900, 600))
```

- `fdfview.mapfile`: `load_map` and `parse_map` build a `HeightMap` (a list of
  `Point(x, y, z, nb)` with `line_size` and `nb_line`); `atoi` and
  `split_fields` are the field readers they use. Errors raise `MapError`.
- `fdfview.render`: `View` holds the start position, zoom, height divisor and
  colour; `project` gives a point's screen position, `line_points` and
  `draw_line` draw straight lines, and `render_map` / `render` draw the whole
  wireframe into an `Image`.
- `fdfview.app`: `apply_key` returns the `View` after a `Key` press; `main` is
  the `fdfview` command.
- `fdfview.image`: `Image`, an in-memory pixel buffer with a chosen bits per
  pixel and byte order, rows padded to 32 bits, and per-pixel transparency;
  `Canvas`, an in-memory RGB surface that images and single pixels are drawn
  onto, clipped at its edges.
- `fdfview.xpm`: `xpm_from_file` and `xpm_from_data` read XPM pixmaps into an
  `Image`; pixels whose colour is `None` are marked transparent. Malformed data
  raises `XpmError`.
- `fdfview.colors`: `lookup_color` resolves X11 colour names (raising
  `KeyError` for unknown ones); `parse_color` also reads `#rrggbb` values and
  gives 0 for unknown names.
- `fdfview.visual`: `channel_shifts` and `good_color` convert `0xRRGGBB`
  colours to pixel values for visuals shallower than 24 bits.
- `fdfview.events`: `HookTable` holds the callbacks of one window and
  `EventLoop` sends `Event`s (typed by `EventType`, selected by `EventMask`)
  to them.

## What it does not do

Only the `fdfview` command shows anything on screen. `Canvas`, `HookTable` and
`EventLoop` work entirely in memory: they do not open windows or read events
from a display by themselves. There is no text drawing and no way to write
images or XPM files back out.