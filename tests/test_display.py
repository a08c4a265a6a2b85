import random

import pytest

from cubengine.display import Display, Event, EventMask, EventType
from cubengine.image import Image


@pytest.fixture
def display():
    return Display(800, 600, 24)


def test_event_mask_combines_hooks(display):
    win = display.new_window(10, 10, "w")
    win.key_hook(lambda k, p: None)
    win.mouse_hook(lambda b, x, y, p: None)
    win.expose_hook(lambda p: None)
    assert win.event_mask() == 0x8006


def test_key_release_passes_keysym_and_param(display):
    seen = []
    win = display.new_window(10, 10, "w")
    win.key_hook(lambda key, param: seen.append((key, param)), "ctx")
    display.post_event(win, Event(EventType.KEY_RELEASE, keysym=0xFF1B))
    display.loop()
    assert seen == [(0xFF1B, "ctx")]


def test_mouse_hook_gets_button_and_position(display):
    seen = []
    win = display.new_window(10, 10, "w")
    win.mouse_hook(lambda b, x, y, p: seen.append((b, x, y, p)), 7)
    display.post_event(win, Event(EventType.BUTTON_PRESS, button=1, x=3, y=4))
    display.loop()
    assert seen == [(1, 3, 4, 7)]


def test_motion_hook_via_generic_hook(display):
    seen = []
    win = display.new_window(10, 10, "w")
    win.hook(EventType.MOTION_NOTIFY, EventMask.POINTER_MOTION,
             lambda x, y, p: seen.append((x, y)), None)
    display.post_event(win, Event(EventType.MOTION_NOTIFY, x=5, y=6))
    display.loop()
    assert seen == [(5, 6)]
    assert win.event_mask() == int(EventMask.POINTER_MOTION)


def test_first_expose_is_delivered_once(display):
    calls = []
    win = display.new_window(10, 10, "w")
    win.expose_hook(lambda p: calls.append(p), "x")
    display.post_event(win, Event(EventType.EXPOSE, count=2))
    display.loop()
    assert calls == ["x"]


def test_close_request_calls_destroy_hook(display):
    calls = []
    win = display.new_window(10, 10, "w")
    win.hook(EventType.DESTROY_NOTIFY, 0, lambda p: calls.append(p), "bye")
    display.post_event(win, Event(EventType.CLIENT_MESSAGE, close_request=True))
    display.loop()
    assert calls == ["bye"]


def test_generic_event_passes_param_only(display):
    calls = []
    win = display.new_window(10, 10, "w")
    win.hook(EventType.FOCUS_IN, 0, lambda p: calls.append(p), 3)
    display.post_event(win, Event(EventType.FOCUS_IN))
    display.loop()
    assert calls == [3]


def test_events_for_destroyed_window_are_dropped(display):
    calls = []
    win1 = display.new_window(10, 10, "a")
    display.new_window(10, 10, "b")
    win1.key_hook(lambda k, p: calls.append(k))
    display.post_event(win1, Event(EventType.KEY_RELEASE, keysym=1))
    display.destroy_window(win1)
    display.loop()
    assert calls == []
    assert win1.destroyed is True
    assert win1 not in display.windows


def test_windows_listed_newest_first(display):
    a = display.new_window(10, 10, "a")
    b = display.new_window(10, 10, "b")
    assert display.windows == (b, a)


def test_loop_hook_runs_until_loop_end(display):
    display.new_window(10, 10, "w")
    counter = []

    def tick(param):
        counter.append(param)
        if len(counter) == 3:
            display.loop_end()

    display.loop_hook(tick, "p")
    display.loop()
    assert counter == ["p", "p", "p"]
    assert display.end_loop is True


def test_loop_without_windows_returns_without_hook_call(display):
    calls = []
    display.loop_hook(lambda p: calls.append(p), None)
    display.loop()
    assert calls == []


def test_key_hook_can_destroy_window_and_end_loop(display):
    win = display.new_window(10, 10, "w")
    win.key_hook(lambda k, p: display.destroy_window(win) if k == 0xFF1B else None)
    display.loop_hook(lambda p: None)
    display.post_event(win, Event(EventType.KEY_RELEASE, keysym=0xFF1B))
    display.loop()
    assert display.windows == ()


def test_flush_events_discards_queue(display):
    win = display.new_window(10, 10, "w")
    display.post_event(win, Event(EventType.KEY_PRESS))
    assert display.flush_events() == 2
    assert display.pending == 0


def test_pixel_put_and_clear(display):
    win = display.new_window(4, 4, "w")
    win.pixel_put(1, 2, 0x123456)
    win.pixel_put(10, 10, 0xFFFFFF)
    assert win.get_pixel(1, 2) == 0x123456
    win.clear()
    assert win.get_pixel(1, 2) == 0


def test_put_image_is_clipped(display):
    win = display.new_window(4, 4, "w")
    img = Image(3, 3)
    img.fill(0x00FF00)
    win.put_image(img, 2, 2)
    assert win.get_pixel(3, 3) == 0x00FF00
    assert win.get_pixel(2, 2) == 0x00FF00
    assert win.get_pixel(1, 1) == 0


def test_color_value_depth_16():
    d = Display(100, 100, 16)
    assert d.color_value(0xFFFFFF) == 0xFFFF
    assert d.color_value(0xFF0000) == 0xF800


def test_color_value_depth_24_unchanged(display):
    assert display.color_value(0xABCDEF) == 0xABCDEF


def test_invalid_depth_rejected():
    with pytest.raises(ValueError):
        Display(100, 100, 8)


def test_invalid_window_size_rejected(display):
    with pytest.raises(ValueError):
        display.new_window(0, 10, "w")


def test_hook_out_of_range_rejected(display):
    win = display.new_window(10, 10, "w")
    with pytest.raises(ValueError):
        win.hook(40, 0, lambda p: None, None)


def test_screen_size(display):
    assert display.screen_size() == (800, 600)


def test_mouse_move_and_pos(display):
    win = display.new_window(10, 10, "w")
    win.mouse_move(3, 7)
    assert win.mouse_pos() == (3, 7)


def test_mouse_click_replaces_window():
    rng = random.Random(0)
    display = Display()
    state = {}

    def on_mouse(button, x, y, param):
        display.destroy_window(state["win1"])
        state["win1"] = display.new_window(rng.randint(1, 500), rng.randint(1, 500), "new win")
        state["win1"].mouse_hook(on_mouse, None)

    state["win1"] = display.new_window(300, 300, "win1")
    win2 = display.new_window(600, 600, "win2")
    state["win1"].mouse_hook(on_mouse, None)
    win2.mouse_hook(on_mouse, None)
    first = state["win1"]
    display.post_event(first, Event(EventType.BUTTON_PRESS, button=1))
    display.loop()
    assert first.destroyed is True
    assert state["win1"].title == "new win"
    assert set(display.windows) == {state["win1"], win2}
    assert state["win1"].event_mask() == int(EventMask.BUTTON_PRESS)