"""Window event dispatch and the session that routes events and timers."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any

from asteroidz.listeners import (
    KeyboardListener,
    MouseListener,
    TimerListener,
    WindowListener,
)

ESCAPE_KEY = 27
KEY_F1 = 1
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _exit_program() -> None:
    sys.exit(0)


def _without(items: list[Any], item: Any) -> list[Any]:
    return [entry for entry in items if entry is not item]


@dataclass(frozen=True)
class _Geometry:
    width: int
    height: int
    x: int
    y: int


class Window:
    """A top-level window that forwards input and window events to listeners.

    ``width``, ``height``, ``x`` and ``y`` describe the window as last reported;
    reshape events update the size.  Escape ends the program and F1 toggles
    full-screen mode.  ``frames_drawn`` counts cleared frames, ``idle_ticks``
    counts idle callbacks and ``last_timer_value`` holds the last window timer.
    """

    def __init__(self, width: int, height: int, x: int = -1, y: int = -1, title: str = "") -> None:
        self.width = width
        self.height = height
        self.x = x
        self.y = y
        self.title = title
        self.fullscreen = False
        self.frames_drawn = 0
        self.idle_ticks = 0
        self.last_timer_value: int | None = None
        self._windowed: _Geometry | None = None
        self._keyboard_listeners: list[KeyboardListener] = []
        self._mouse_listeners: list[MouseListener] = []
        self._window_listeners: list[WindowListener] = []

    def on_display(self) -> None:
        """Clear the window for a new frame."""
        self.frames_drawn += 1

    def on_idle(self) -> None:
        """Record an idle callback between events."""
        self.idle_ticks += 1

    def on_timer(self, value: int) -> None:
        """Record the value of a window timer that fired."""
        self.last_timer_value = value

    def on_key_pressed(self, key: int, x: int, y: int) -> None:
        """Escape ends the program; otherwise tell the keyboard listeners."""
        if key == ESCAPE_KEY:
            _exit_program()
        for listener in list(self._keyboard_listeners):
            listener.on_key_pressed(key, x, y)

    def on_key_released(self, key: int, x: int, y: int) -> None:
        for listener in list(self._keyboard_listeners):
            listener.on_key_released(key, x, y)

    def on_special_key_pressed(self, key: int, x: int, y: int) -> None:
        """F1 toggles full-screen mode; then tell the keyboard listeners."""
        if key == KEY_F1:
            self.set_fullscreen(not self.fullscreen)
        for listener in list(self._keyboard_listeners):
            listener.on_special_key_pressed(key, x, y)

    def on_special_key_released(self, key: int, x: int, y: int) -> None:
        for listener in list(self._keyboard_listeners):
            listener.on_special_key_released(key, x, y)

    def on_mouse_dragged(self, x: int, y: int) -> None:
        for listener in list(self._mouse_listeners):
            listener.on_mouse_dragged(x, y)

    def on_mouse_button(self, button: int, state: int, x: int, y: int) -> None:
        for listener in list(self._mouse_listeners):
            listener.on_mouse_button(button, state, x, y)

    def on_mouse_moved(self, x: int, y: int) -> None:
        for listener in list(self._mouse_listeners):
            listener.on_mouse_moved(x, y)

    def on_window_reshaped(self, w: int, h: int) -> None:
        """Record the new size and tell the window listeners."""
        self.width = w
        self.height = h
        for listener in list(self._window_listeners):
            listener.on_window_reshaped(w, h)

    def on_window_visible(self, visible: int) -> None:
        for listener in list(self._window_listeners):
            listener.on_window_visible(visible)

    def set_fullscreen(self, fullscreen: bool) -> None:
        """Enter or leave full-screen mode, restoring the windowed geometry on leaving."""
        if fullscreen == self.fullscreen:
            return
        self.fullscreen = fullscreen
        if fullscreen:
            self._windowed = _Geometry(self.width, self.height, self.x, self.y)
        elif self._windowed is not None:
            self.width = self._windowed.width
            self.height = self._windowed.height
            self.x = self._windowed.x
            self.y = self._windowed.y

    def add_keyboard_listener(self, listener: KeyboardListener) -> None:
        self._keyboard_listeners.append(listener)

    def remove_keyboard_listener(self, listener: KeyboardListener) -> None:
        self._keyboard_listeners = _without(self._keyboard_listeners, listener)

    def add_mouse_listener(self, listener: MouseListener) -> None:
        self._mouse_listeners.append(listener)

    def remove_mouse_listener(self, listener: MouseListener) -> None:
        self._mouse_listeners = _without(self._mouse_listeners, listener)

    def add_window_listener(self, listener: WindowListener) -> None:
        self._window_listeners.append(listener)

    def remove_window_listener(self, listener: WindowListener) -> None:
        self._window_listeners = _without(self._window_listeners, listener)


@dataclass(frozen=True)
class _Timer:
    listener: TimerListener
    value: int
    msecs: int


class Session:
    """Routes idle callbacks to its window and fires one-shot timers by key."""

    def __init__(self) -> None:
        self.window: Window | None = None
        self.idle_enabled = False
        self._timers: dict[int, _Timer] = {}
        self._last_key = INT_MIN

    def set_window(self, window: Window | None) -> None:
        """Make ``window`` the one that receives events."""
        self.window = window

    def enable_idle_function(self) -> None:
        self.idle_enabled = True

    def disable_idle_function(self) -> None:
        self.idle_enabled = False

    def idle(self) -> None:
        """Pass an idle callback to the window when idling is enabled."""
        if self.window is not None and self.idle_enabled:
            self.window.on_idle()

    def set_timer(self, msecs: int, listener: TimerListener, value: int = 0) -> int:
        """Register a one-shot timer and return the key it will fire with."""
        key = self._last_key + 1
        if key == INT_MAX:
            key = INT_MIN
        self._last_key = key
        self._timers[key] = _Timer(listener, value, msecs)
        return key

    def on_timer(self, key: int) -> None:
        """Fire the timer registered under ``key``; unknown keys are ignored."""
        timer = self._timers.get(key)
        if timer is None:
            return
        timer.listener.on_timer(timer.value)
        self._timers.pop(key, None)

    def pending_timers(self) -> dict[int, int]:
        """Keys of timers not yet fired, mapped to their delay in milliseconds."""
        return {key: timer.msecs for key, timer in self._timers.items()}

    def stop(self) -> None:
        """End the program without error."""
        _exit_program()