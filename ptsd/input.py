"""Keyboard, mouse and window-close state gathered from a frame's events."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence, Tuple

import numpy as np
import pygame

from .config import WINDOW_HEIGHT, WINDOW_WIDTH
from .keycode import Keycode

_MOUSE_BUTTON_BASE = 512


class Input:
    """Keyboard and mouse state, refreshed once per frame by :meth:`update`.

    Each key keeps whether it was held in the previous frame and whether it
    is held now, which gives pressed, down (just pressed) and up (just
    released) queries.
    """

    def __init__(self, window_width: int = WINDOW_WIDTH, window_height: int = WINDOW_HEIGHT) -> None:
        self._half_width = window_width / 2
        self._half_height = window_height / 2
        self._cursor = np.zeros(2)
        self._scroll_distance = np.array([-1.0, -1.0])
        self._keys: Dict[int, Tuple[bool, bool]] = {
            int(Keycode.MOUSE_LB): (False, False),
            int(Keycode.MOUSE_RB): (False, False),
            int(Keycode.MOUSE_MB): (False, False),
        }
        self._scrolling = False
        self._mouse_moving = False
        self._exit = False

    def _state(self, key: int) -> Tuple[bool, bool]:
        return self._keys.get(int(key), (False, False))

    def is_key_pressed(self, key: Keycode) -> bool:
        """Whether ``key`` is held in this frame."""
        return self._state(key)[1]

    def is_key_down(self, key: Keycode) -> bool:
        """Whether ``key`` went down in this frame."""
        previous, current = self._state(key)
        return current and not previous

    def is_key_up(self, key: Keycode) -> bool:
        """Whether ``key`` was released in this frame."""
        previous, current = self._state(key)
        return previous and not current

    def is_scrolling(self) -> bool:
        """Whether the mouse wheel moved in this frame."""
        return self._scrolling

    def is_mouse_moving(self) -> bool:
        """Whether the mouse moved in this frame."""
        return self._mouse_moving

    def exit_requested(self) -> bool:
        """Whether the window was asked to close."""
        return self._exit

    def scroll_distance(self) -> np.ndarray:
        """The last wheel movement as (x, y)."""
        return self._scroll_distance.copy()

    def cursor_position(self) -> np.ndarray:
        """The cursor position with the origin at the window centre and y up."""
        return self._cursor.copy()

    def set_cursor_position(self, pos: Sequence[float]) -> None:
        """Move the system cursor to ``pos`` in window pixel coordinates.

        Does nothing when no window is open.
        """
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            x, y = pos
            pygame.mouse.set_pos((int(x), int(y)))

    def _set_key(self, code: int, held: bool) -> None:
        previous = self._state(code)[0]
        self._keys[int(code)] = (previous, held)

    def update(
        self,
        events: Iterable[pygame.event.Event],
        mouse_position: Optional[Sequence[float]] = None,
    ) -> None:
        """Advance to a new frame and apply its events.

        ``mouse_position`` is the cursor in window pixels; when omitted the
        cursor position is left as it was.
        """
        if mouse_position is not None:
            x, y = mouse_position
            self._cursor = np.array(
                [float(x) - self._half_width, -(float(y) - self._half_height)]
            )

        self._scrolling = False
        self._mouse_moving = False
        self._keys = {code: (held, held) for code, (_, held) in self._keys.items()}

        for event in events:
            kind = event.type
            if kind in (pygame.KEYDOWN, pygame.KEYUP):
                scancode = getattr(event, "scancode", None)
                if scancode is not None:
                    self._set_key(scancode, kind == pygame.KEYDOWN)
            elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                self._set_key(
                    _MOUSE_BUTTON_BASE + event.button, kind == pygame.MOUSEBUTTONDOWN
                )

            if kind == pygame.MOUSEWHEEL:
                self._scrolling = True
                self._scroll_distance = np.array(
                    [float(event.x), float(event.y)]
                )
            if kind == pygame.MOUSEMOTION:
                self._mouse_moving = True
            self._exit = kind == pygame.QUIT