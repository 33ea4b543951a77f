"""Frame-by-frame animations built from a list of images."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from .clock import Time
from .drawable import Drawable, Matrices
from .image import Image
from .logger import Level

_log = logging.getLogger(__name__)


class State(Enum):
    """Playback state of an animation."""

    PLAY = "play"
    PAUSE = "pause"
    COOLDOWN = "cooldown"
    ENDED = "ended"


class Animation(Drawable):
    """Cycles through image frames at a fixed interval.

    A looping animation waits ``cooldown`` milliseconds after its last frame
    and then starts again; a non-looping one ends on its last frame. Time is
    read from ``clock``, which the caller updates once per frame; a private
    clock is made when none is given.
    """

    def __init__(
        self,
        paths: Sequence[str],
        play: bool,
        interval: float,
        looping: bool = True,
        cooldown: int = 100,
        clock: Optional[Time] = None,
    ) -> None:
        self._frames: List[Image] = [Image(path) for path in paths]
        self._state = State.PLAY if play else State.PAUSE
        self.interval = interval
        self.looping = looping
        self.cooldown = cooldown
        self._clock = clock if clock is not None else Time()
        self._frame_changed = False
        self._cooldown_end = 0
        self._since_last_frame = 0.0
        self._index = 0

    @property
    def interval(self) -> float:
        """Milliseconds between frames."""
        return self._interval

    @interval.setter
    def interval(self, value: float) -> None:
        if value <= 0:
            raise ValueError("Interval must be positive")
        self._interval = float(value)

    @property
    def frame_count(self) -> int:
        """Number of frames."""
        return len(self._frames)

    @property
    def current_frame_index(self) -> int:
        """Index of the frame shown."""
        return self._index

    @property
    def state(self) -> State:
        """Current playback state."""
        return self._state

    @property
    def size(self) -> np.ndarray:
        """Size of the frame shown."""
        return self._frames[self._index].size

    def set_current_frame(self, index: int) -> None:
        """Show frame ``index``; when stopped, playback resumes from it."""
        self._index = index
        if self._state in (State.ENDED, State.COOLDOWN):
            self._frame_changed = True

    def draw(self, data: Matrices) -> None:
        """Draw the current frame, then advance the animation."""
        self._frames[self._index].draw(data)
        self.update()

    def play(self) -> None:
        """Start or resume playing; a finished animation restarts."""
        if self._state is State.PLAY:
            return
        if self._state in (State.ENDED, State.COOLDOWN):
            if not self._frame_changed:
                self._index = 0
            self._frame_changed = False
        self._state = State.PLAY

    def pause(self) -> None:
        """Pause if playing or cooling down."""
        if self._state in (State.PLAY, State.COOLDOWN):
            self._state = State.PAUSE

    def update(self) -> None:
        """Advance frames by the time passed since the last clock update."""
        now = int(self._clock.elapsed_ms())
        if self._state in (State.PAUSE, State.ENDED):
            _log.log(Level.TRACE, "[ANI] is pause")
            return

        if self._state is State.COOLDOWN:
            if now >= self._cooldown_end:
                self.play()
            return

        self._since_last_frame += self._clock.delta_ms()
        steps = int(self._since_last_frame / self._interval)
        if steps <= 0:
            return

        self._index += steps
        self._since_last_frame = 0.0

        if self._index >= len(self._frames):
            if self.looping:
                self._cooldown_end = now + self.cooldown
                self._state = State.COOLDOWN
            else:
                self._state = State.ENDED
            self._index = len(self._frames) - 1