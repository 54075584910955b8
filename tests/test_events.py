import pytest

from fdfview.events import Event, EventLoop, EventMask, EventType, HookTable


def _recorder():
    calls = []

    def callback(*args):
        calls.append(args)
        return 0

    return calls, callback


def test_key_hook_listens_to_key_release():
    table = HookTable()
    calls, callback = _recorder()
    table.key_hook(callback, "p")
    mask, stored, param = table[EventType.KEY_RELEASE]
    assert mask == EventMask.KEY_RELEASE
    assert stored is callback and param == "p"
    assert table.dispatch(Event(EventType.KEY_RELEASE, "w", key=0xFF1B)) is True
    assert calls == [(0xFF1B, "p")]


def test_key_press_not_handled_by_key_hook():
    table = HookTable()
    calls, callback = _recorder()
    table.key_hook(callback)
    assert table.dispatch(Event(EventType.KEY_PRESS, "w", key=53)) is False
    assert calls == []


def test_mouse_hook_receives_button_and_position():
    table = HookTable()
    calls, callback = _recorder()
    table.mouse_hook(callback, None)
    table.dispatch(Event(EventType.BUTTON_PRESS, "w", button=1, x=10, y=20))
    assert calls == [(1, 10, 20, None)]
    assert table[EventType.BUTTON_PRESS][0] == EventMask.BUTTON_PRESS


def test_motion_hook_receives_position():
    table = HookTable()
    calls, callback = _recorder()
    table.set_hook(EventType.MOTION_NOTIFY, EventMask.POINTER_MOTION, callback, 7)
    assert table.dispatch(Event(EventType.MOTION_NOTIFY, "w", x=3, y=4)) is True
    assert calls == [(3, 4, 7)]
    assert table.event_mask() == EventMask.POINTER_MOTION


def test_expose_only_fires_on_last_of_series():
    table = HookTable()
    calls, callback = _recorder()
    table.expose_hook(callback, "param")
    assert table.dispatch(Event(EventType.EXPOSE, "w", count=2)) is False
    assert table.dispatch(Event(EventType.EXPOSE, "w", count=0)) is True
    assert calls == [("param",)]


def test_generic_event_passes_only_param():
    table = HookTable()
    calls, callback = _recorder()
    table.set_hook(EventType.DESTROY_NOTIFY, EventMask.STRUCTURE_NOTIFY, callback, "x")
    assert table.dispatch(Event(EventType.DESTROY_NOTIFY, "w")) is True
    assert calls == [("x",)]
    assert table.event_mask() == EventMask.STRUCTURE_NOTIFY


def test_key_press_hook_with_raw_mask():
    table = HookTable()
    calls, callback = _recorder()
    table.set_hook(2, 3, callback, "info")
    table.dispatch(Event(2, "w", key=69))
    assert calls == [(69, "info")]
    assert table.event_mask() == 3


def test_event_mask_unions_all_hooks():
    table = HookTable()
    _, callback = _recorder()
    assert table.event_mask() == 0
    table.key_hook(callback)
    table.mouse_hook(callback)
    table.expose_hook(callback)
    assert table.event_mask() == (
        EventMask.KEY_RELEASE | EventMask.BUTTON_PRESS | EventMask.EXPOSURE
    )


def test_set_hook_rejects_out_of_range_type():
    table = HookTable()
    with pytest.raises(ValueError):
        table.set_hook(36, 0, print, None)
    with pytest.raises(ValueError):
        table.set_hook(-1, 0, print, None)


def test_undefined_and_out_of_range_events_ignored():
    table = HookTable()
    calls, callback = _recorder()
    table.set_hook(1, 0, callback, None)
    assert table.dispatch(Event(1, "w")) is False
    assert table.dispatch(Event(99, "w")) is False
    assert calls == []


def test_loop_routes_to_matching_window():
    loop = EventLoop()
    calls1, cb1 = _recorder()
    calls2, cb2 = _recorder()
    loop.add_window("win1").key_hook(cb1, 1)
    loop.add_window("win2").key_hook(cb2, 2)
    handled = loop.process(
        [
            Event(EventType.KEY_RELEASE, "win2", key=65),
            Event(EventType.KEY_RELEASE, "nowhere", key=66),
        ]
    )
    assert handled == 1
    assert calls1 == []
    assert calls2 == [(65, 2)]


def test_loop_hook_runs_after_batch():
    loop = EventLoop()
    order = []
    loop.add_window("w").key_hook(lambda key, p: order.append(("key", key)))
    loop.set_loop_hook(lambda p: order.append(("loop", p)), "lp")
    loop.process([Event(EventType.KEY_RELEASE, "w", key=1)])
    assert order == [("key", 1), ("loop", "lp")]


def test_loop_without_hook_only_dispatches():
    loop = EventLoop()
    assert loop.process([]) == 0


def test_add_and_remove_window():
    loop = EventLoop()
    loop.add_window("a")
    with pytest.raises(ValueError):
        loop.add_window("a")
    loop.remove_window("a")
    assert "a" not in loop
    with pytest.raises(KeyError):
        loop.remove_window("a")


def test_event_masks_per_window():
    loop = EventLoop()
    loop.add_window("a").mouse_hook(print)
    loop.add_window("b")
    assert loop.event_masks() == {"a": EventMask.BUTTON_PRESS, "b": 0}


def test_mouse_replaces_window_like_new_win():
    loop = EventLoop()
    state = {"win1": "win1", "created": 0}

    def gere_mouse(button, x, y, param):
        loop.remove_window(state["win1"])
        state["created"] += 1
        state["win1"] = f"new win {state['created']}"
        loop.add_window(state["win1"]).mouse_hook(gere_mouse, None)

    loop.add_window("win1").mouse_hook(gere_mouse, None)
    loop.add_window("win2").mouse_hook(gere_mouse, None)

    handled = loop.process(
        [
            Event(EventType.BUTTON_PRESS, "win1", button=1),
            Event(EventType.BUTTON_PRESS, "win1", button=1),
            Event(EventType.BUTTON_PRESS, "win2", button=1),
        ]
    )
    assert handled == 2
    assert "win1" not in loop
    assert "win2" in loop
    assert loop.windows == ["win2", "new win 2"]