"""Frame timing for animated sprites."""

from __future__ import annotations

from typing import Any

FRAMES_PER_SECOND = 12
MILLIS_PER_FRAME = 1000 // FRAMES_PER_SECOND


class Sprite:
    """An animation of ``animation.num_frames`` frames played at a fixed rate."""

    def __init__(self, width: int, height: int, animation: Any, loop: bool = True) -> None:
        frames = int(animation.num_frames)
        if frames <= 0:
            raise ValueError("a sprite needs at least one frame")
        self.width = width
        self.height = height
        self.offset_x = width // 2
        self.offset_y = height // 2
        self.animation = animation
        self.frames = frames
        self.loop = loop
        self.millis_per_frame = MILLIS_PER_FRAME
        self._current_frame = 0
        self._animating = True
        self._frame_millis = 0

    @property
    def current_frame(self) -> int:
        return self._current_frame

    @current_frame.setter
    def current_frame(self, frame: int) -> None:
        self._current_frame = frame % self.frames

    @property
    def animating(self) -> bool:
        """False once a non-looping animation has played to its end."""
        return self._animating

    def update(self, t: int) -> None:
        """Advance the animation by ``t`` milliseconds."""
        self._frame_millis += t
        if self._frame_millis < self.millis_per_frame:
            return
        steps, self._frame_millis = divmod(self._frame_millis, self.millis_per_frame)
        self._current_frame += steps
        if self._current_frame >= self.frames:
            if self.loop:
                self._current_frame %= self.frames
            else:
                self._current_frame = 0
                self._animating = False