"""An in-memory display: windows, event hooks, an event queue and a loop.

Windows keep their contents as pixel buffers and events are posted to the
display's queue, then delivered by :meth:`Display.loop` to the hooks that
windows have registered, with the same arguments and filtering rules a
windowing system would use.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any, Optional

from .colors import RgbShifts, good_color, rgb_shifts
from .image import Image


class EventType(IntEnum):
    """Event numbers, matching the X protocol."""

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


LAST_EVENT = 36


class EventMask(IntFlag):
    """Event selection masks, matching the X protocol."""

    NONE = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    EXPOSURE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    STRUCTURE_NOTIFY = 1 << 17


Hook = Callable[..., Any]

_VISUAL_MASKS = {
    15: (0x7C00, 0x03E0, 0x001F),
    16: (0xF800, 0x07E0, 0x001F),
    24: (0xFF0000, 0x00FF00, 0x0000FF),
    32: (0xFF0000, 0x00FF00, 0x0000FF),
}


@dataclass
class Event:
    """One input or window event.

    ``close_request`` marks a client message asking the window to close.
    """

    type: int
    keysym: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    close_request: bool = False


@dataclass
class _HookEntry:
    mask: int
    func: Hook
    param: Any


class Window:
    """A fixed-size window with a pixel surface and per-event hooks."""

    def __init__(self, display: "Display", width: int, height: int, title: str):
        self.display = display
        self.width = width
        self.height = height
        self.title = title
        self.destroyed = False
        self.pointer = (0, 0)
        self.surface = Image(width, height, 32, False)
        self.hooks: dict[int, _HookEntry] = {}

    def __repr__(self) -> str:
        return f"Window({self.title!r}, {self.width}x{self.height})"

    def hook(self, event_type: int, mask: int, func: Hook, param: Any = None) -> None:
        """Register ``func`` for events of ``event_type``, selecting them with ``mask``."""
        if not 0 <= int(event_type) < LAST_EVENT:
            raise ValueError(f"event type out of range: {event_type}")
        self.hooks[int(event_type)] = _HookEntry(int(mask), func, param)

    def key_hook(self, func: Hook, param: Any = None) -> None:
        """Call ``func(keysym, param)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, func, param)

    def mouse_hook(self, func: Hook, param: Any = None) -> None:
        """Call ``func(button, x, y, param)`` when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, EventMask.BUTTON_PRESS, func, param)

    def expose_hook(self, func: Hook, param: Any = None) -> None:
        """Call ``func(param)`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, EventMask.EXPOSURE, func, param)

    def event_mask(self) -> int:
        """Return the union of the masks of all registered hooks."""
        mask = 0
        for entry in self.hooks.values():
            mask |= entry.mask
        return mask

    def clear(self) -> None:
        """Paint the whole window with the black background."""
        self.surface.fill(0)

    def pixel_put(self, x: int, y: int, color: int) -> None:
        """Draw one pixel; points outside the window are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.surface.put_pixel(x, y, self.display.color_value(color))

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value shown at (x, y)."""
        return self.surface.get_pixel(x, y)

    def put_image(self, image: Image, x: int, y: int) -> None:
        """Copy ``image`` into the window with its top left corner at (x, y)."""
        for src_y in range(image.height):
            dst_y = y + src_y
            if not 0 <= dst_y < self.height:
                continue
            for src_x in range(image.width):
                dst_x = x + src_x
                if 0 <= dst_x < self.width:
                    self.surface.put_pixel(dst_x, dst_y, image.get_pixel(src_x, src_y))

    def mouse_move(self, x: int, y: int) -> None:
        """Move the pointer to (x, y) relative to this window."""
        self.pointer = (x, y)

    def mouse_pos(self) -> tuple[int, int]:
        """Return the pointer position relative to this window."""
        return self.pointer


def _call_key(entry: _HookEntry, event: Event) -> None:
    entry.func(event.keysym, entry.param)


def _call_button(entry: _HookEntry, event: Event) -> None:
    entry.func(event.button, event.x, event.y, entry.param)


def _call_motion(entry: _HookEntry, event: Event) -> None:
    entry.func(event.x, event.y, entry.param)


def _call_expose(entry: _HookEntry, event: Event) -> None:
    if not event.count:
        entry.func(entry.param)


def _call_generic(entry: _HookEntry, event: Event) -> None:
    entry.func(entry.param)


_DISPATCH: dict[int, Callable[[_HookEntry, Event], None]] = {
    EventType.KEY_PRESS: _call_key,
    EventType.KEY_RELEASE: _call_key,
    EventType.BUTTON_PRESS: _call_button,
    EventType.BUTTON_RELEASE: _call_button,
    EventType.MOTION_NOTIFY: _call_motion,
    EventType.EXPOSE: _call_expose,
}

# Event numbers below this are reserved by the protocol and never dispatched.
_FIRST_EVENT = int(EventType.KEY_PRESS)


class Display:
    """A screen holding windows, a queue of pending events and a main loop."""

    def __init__(self, width: int = 1920, height: int = 1080, depth: int = 24):
        if depth not in _VISUAL_MASKS:
            raise ValueError(f"no TrueColor visual available for depth {depth}")
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.depth = depth
        self.shifts: RgbShifts = rgb_shifts(*_VISUAL_MASKS[depth])
        self._windows: list[Window] = []
        self._queue: deque[tuple[Window, Event]] = deque()
        self._loop_hook: Optional[tuple[Hook, Any]] = None
        self.end_loop = False
        self.do_flush = True

    @property
    def windows(self) -> tuple[Window, ...]:
        """Open windows, newest first."""
        return tuple(self._windows)

    @property
    def pending(self) -> int:
        """Number of events waiting in the queue."""
        return len(self._queue)

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window; its first expose event is queued ahead of all others."""
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        window = Window(self, width, height, title)
        self._windows.insert(0, window)
        self._queue.appendleft((window, Event(EventType.EXPOSE)))
        return window

    def destroy_window(self, window: Window) -> None:
        """Close a window; events still queued for it are dropped on delivery."""
        self._windows = [w for w in self._windows if w is not window]
        window.destroyed = True
        window.hooks.clear()

    def post_event(self, window: Window, event: Event) -> None:
        """Queue an event for a window."""
        self._queue.append((window, event))

    def flush_events(self) -> int:
        """Discard all pending events and return how many there were."""
        count = len(self._queue)
        self._queue.clear()
        return count

    def loop_hook(self, func: Optional[Hook], param: Any = None) -> None:
        """Call ``func(param)`` once per loop pass when the queue runs dry."""
        self._loop_hook = None if func is None else (func, param)

    def _find(self, window: Window) -> Optional[Window]:
        return next((w for w in self._windows if w is window), None)

    def _deliver(self, target: Window, event: Event) -> None:
        window = self._find(target)
        if window is None:
            return
        if event.type == EventType.CLIENT_MESSAGE and event.close_request:
            destroy = window.hooks.get(EventType.DESTROY_NOTIFY)
            if destroy is not None:
                destroy.func(destroy.param)
        if not _FIRST_EVENT <= event.type < LAST_EVENT:
            return
        entry = window.hooks.get(int(event.type))
        if entry is not None:
            _DISPATCH.get(int(event.type), _call_generic)(entry, event)

    def loop(self) -> None:
        """Deliver events and run the loop hook until no window is left or the loop ends.

        Without a loop hook the loop returns once the queue is empty, as
        there is nothing left that could produce events.
        """
        self.do_flush = False
        while self._windows and not self.end_loop:
            while not self.end_loop and self._queue:
                target, event = self._queue.popleft()
                self._deliver(target, event)
            if self._loop_hook is None:
                break
            func, param = self._loop_hook
            func(param)

    def loop_end(self) -> bool:
        """Ask the running loop to stop."""
        self.end_loop = True
        return True

    def screen_size(self) -> tuple[int, int]:
        """Return the screen's width and height."""
        return self.width, self.height

    def color_value(self, color: int) -> int:
        """Convert 0xRRGGBB to a pixel value for this display's visual."""
        return good_color(color, self.depth, self.shifts)