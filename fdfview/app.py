"""The map viewer: keyboard controls and the command that opens a window."""

from __future__ import annotations

import enum
import sys
from dataclasses import replace
from typing import Optional, Sequence

from fdfview.events import Event, EventLoop, EventMask, EventType
from fdfview.image import Image
from fdfview.mapfile import HeightMap, MapError, load_map
from fdfview.render import HEIGHT, WIDTH, View, render

USAGE = "Usage : fdfview <filename>"
TITLE = "FDF_42"
_WINDOW = "main"
_UNMAPPED = -1
_EXIT_USAGE = 2
_EXIT_ERROR = 255


class Key(enum.IntEnum):
    """Key codes the viewer reacts to."""

    COLOR = 8
    ESCAPE = 53
    ZOOM_IN = 69
    ZOOM_OUT = 78
    RAISE = 116
    FLATTEN = 121
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


def apply_key(view: View, key: int) -> View:
    """Return the view after pressing ``key``.

    Escape raises SystemExit with status 2.
    """
    if key == Key.ESCAPE:
        raise SystemExit(_EXIT_USAGE)
    zoom = view.zoom
    if key == Key.ZOOM_IN:
        zoom += 1
    elif key == Key.ZOOM_OUT and zoom > 1:
        zoom -= 1
    step = zoom * 10
    xstart, ystart = view.xstart, view.ystart
    if key == Key.RIGHT:
        xstart += step
    elif key == Key.LEFT:
        xstart -= step
    elif key == Key.DOWN:
        ystart += step
    elif key == Key.UP:
        ystart -= step
    deep = view.deep
    if key == Key.RAISE and deep > 1:
        deep -= 1
    elif key == Key.FLATTEN:
        deep += 1
    colors = {}
    if key == Key.COLOR:
        colors = {
            "color_r": view.color_r + 5,
            "color_g": view.color_g + 5 * 5,
            "color_b": view.color_b + 5 * 5 * 5,
        }
    return replace(view, xstart=xstart, ystart=ystart, zoom=zoom, deep=deep, **colors)


def _to_surface(image: Image):
    import pygame

    rgb = bytearray(image.width * image.height * 3)
    pixels = bytes(
        image.data[row * image.size_line: row * image.size_line + image.width * 4]
        for row in range(image.height)
    ) if image.size_line != image.width * 4 else bytes(image.data)
    rgb[0::3] = pixels[2::4]
    rgb[1::3] = pixels[1::4]
    rgb[2::3] = pixels[0::4]
    return pygame.image.frombuffer(bytes(rgb), (image.width, image.height), "RGB")


class _Session:
    def __init__(self, heightmap: HeightMap, view: View, screen) -> None:
        self.heightmap = heightmap
        self.view = view
        self.screen = screen

    def redraw(self) -> None:
        import pygame

        self.screen.blit(_to_surface(render(self.heightmap, self.view)), (0, 0))
        pygame.display.flip()


def _on_key(key: int, session: _Session) -> None:
    session.view = apply_key(session.view, key)
    session.redraw()


def _key_table() -> dict[int, int]:
    import pygame

    return {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_KP_PLUS: Key.ZOOM_IN,
        pygame.K_KP_MINUS: Key.ZOOM_OUT,
        pygame.K_PAGEUP: Key.RAISE,
        pygame.K_PAGEDOWN: Key.FLATTEN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_UP: Key.UP,
        pygame.K_c: Key.COLOR,
    }


def _run(heightmap: HeightMap, view: View) -> int:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        session = _Session(heightmap, view, screen)
        session.redraw()
        loop = EventLoop()
        hooks = loop.add_window(_WINDOW)
        hooks.set_hook(
            EventType.KEY_PRESS,
            EventMask.KEY_PRESS | EventMask.KEY_RELEASE,
            _on_key,
            session,
        )
        keys = _key_table()
        while True:
            pending = [pygame.event.wait(), *pygame.event.get()]
            if any(event.type == pygame.QUIT for event in pending):
                return 0
            loop.process(
                Event(EventType.KEY_PRESS, _WINDOW, key=int(keys.get(event.key, _UNMAPPED)))
                for event in pending
                if event.type == pygame.KEYDOWN
            )
    except SystemExit as exit_request:
        return exit_request.code if isinstance(exit_request.code, int) else _EXIT_ERROR
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the map file named on the command line in a window."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return _EXIT_USAGE
    try:
        heightmap = load_map(args[0])
    except MapError as error:
        print(error, file=sys.stderr)
        return _EXIT_ERROR
    return _run(heightmap, View())


if __name__ == "__main__":
    sys.exit(main())