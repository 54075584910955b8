"""Window event hooks and the loop that hands events to them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Callable, Hashable, Iterable, Optional

MAX_EVENT = 36


class EventType(enum.IntEnum):
    """Event codes as numbered by the X protocol."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


class EventMask(enum.IntFlag):
    """Event selection bits as defined by the X protocol."""

    NONE = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    POINTER_MOTION_HINT = 1 << 7
    BUTTON1_MOTION = 1 << 8
    BUTTON2_MOTION = 1 << 9
    BUTTON3_MOTION = 1 << 10
    BUTTON4_MOTION = 1 << 11
    BUTTON5_MOTION = 1 << 12
    BUTTON_MOTION = 1 << 13
    KEYMAP_STATE = 1 << 14
    EXPOSURE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    STRUCTURE_NOTIFY = 1 << 17
    RESIZE_REDIRECT = 1 << 18
    SUBSTRUCTURE_NOTIFY = 1 << 19
    SUBSTRUCTURE_REDIRECT = 1 << 20
    FOCUS_CHANGE = 1 << 21
    PROPERTY_CHANGE = 1 << 22
    COLORMAP_CHANGE = 1 << 23
    OWNER_GRAB_BUTTON = 1 << 24


@dataclass(frozen=True)
class Event:
    """An event aimed at a window.

    ``key`` holds the key symbol of key events, ``button`` the button of
    button events, ``x`` and ``y`` the pointer position, and ``count`` the
    number of expose events still to follow.
    """

    type: int
    window: Hashable
    key: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0


@dataclass
class _Hook:
    mask: int = 0
    callback: Optional[Callable[..., Any]] = None
    param: Any = None


_UNDEFINED = frozenset({0, 1})
_KEY_EVENTS = frozenset({EventType.KEY_PRESS, EventType.KEY_RELEASE})
_BUTTON_EVENTS = frozenset({EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE})


class HookTable:
    """The callbacks attached to one window, one slot per event type."""

    def __init__(self) -> None:
        self._hooks = [_Hook() for _ in range(MAX_EVENT)]

    def set_hook(
        self,
        event_type: int,
        mask: int,
        callback: Optional[Callable[..., Any]],
        param: Any = None,
    ) -> None:
        """Attach ``callback`` to an event type, selecting events by ``mask``."""
        if not 0 <= event_type < MAX_EVENT:
            raise ValueError(f"event type must lie in 0..{MAX_EVENT - 1}, got {event_type}")
        self._hooks[event_type] = _Hook(int(mask), callback, param)

    def key_hook(self, callback: Optional[Callable[..., Any]], param: Any = None) -> None:
        """Call ``callback(key, param)`` when a key is released."""
        self.set_hook(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, callback, param)

    def mouse_hook(self, callback: Optional[Callable[..., Any]], param: Any = None) -> None:
        """Call ``callback(button, x, y, param)`` when a button is pressed."""
        self.set_hook(EventType.BUTTON_PRESS, EventMask.BUTTON_PRESS, callback, param)

    def expose_hook(self, callback: Optional[Callable[..., Any]], param: Any = None) -> None:
        """Call ``callback(param)`` when the window needs redrawing."""
        self.set_hook(EventType.EXPOSE, EventMask.EXPOSURE, callback, param)

    def __getitem__(self, event_type: int) -> tuple[int, Optional[Callable[..., Any]], Any]:
        hook = self._hooks[event_type]
        return hook.mask, hook.callback, hook.param

    def event_mask(self) -> int:
        """The union of the masks of every slot."""
        return reduce(lambda acc, hook: acc | hook.mask, self._hooks, 0)

    def dispatch(self, event: Event) -> bool:
        """Run the callback for ``event``; True when one was run."""
        kind = event.type
        if not 0 <= kind < MAX_EVENT or kind in _UNDEFINED:
            return False
        hook = self._hooks[kind]
        callback = hook.callback
        if callback is None:
            return False
        if kind in _KEY_EVENTS:
            callback(event.key, hook.param)
        elif kind in _BUTTON_EVENTS:
            callback(event.button, event.x, event.y, hook.param)
        elif kind == EventType.MOTION_NOTIFY:
            callback(event.x, event.y, hook.param)
        elif kind == EventType.EXPOSE:
            if event.count:
                return False
            callback(hook.param)
        else:
            callback(hook.param)
        return True


@dataclass
class EventLoop:
    """Routes events to the hook tables of the windows they are aimed at."""

    _windows: dict = field(default_factory=dict)
    _loop_hook: Optional[Callable[..., Any]] = None
    _loop_param: Any = None

    def add_window(self, window_id: Hashable, hooks: Optional[HookTable] = None) -> HookTable:
        """Register a window and return its hook table."""
        if window_id in self._windows:
            raise ValueError(f"window {window_id!r} is already registered")
        table = hooks if hooks is not None else HookTable()
        self._windows[window_id] = table
        return table

    def remove_window(self, window_id: Hashable) -> None:
        """Forget a window; later events aimed at it are dropped."""
        try:
            del self._windows[window_id]
        except KeyError:
            raise KeyError(f"no window {window_id!r}") from None

    def __contains__(self, window_id: Hashable) -> bool:
        return window_id in self._windows

    @property
    def windows(self) -> list:
        return list(self._windows)

    def event_masks(self) -> dict:
        """The event selection of each registered window."""
        return {window: table.event_mask() for window, table in self._windows.items()}

    def set_loop_hook(self, callback: Optional[Callable[..., Any]], param: Any = None) -> None:
        """Call ``callback(param)`` each time the pending events are drained."""
        self._loop_hook = callback
        self._loop_param = param

    def process(self, events: Iterable[Event]) -> int:
        """Dispatch a batch of pending events, then run the loop hook.

        Returns the number of events a callback was run for.
        """
        handled = 0
        for event in events:
            table = self._windows.get(event.window)
            if table is not None and table.dispatch(event):
                handled += 1
        if self._loop_hook is not None:
            self._loop_hook(self._loop_param)
        return handled