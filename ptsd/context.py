"""The window, frame loop timing and shared per-frame state."""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from . import logger
from .clock import Time
from .config import FPS_CAP, TITLE, WINDOW_HEIGHT, WINDOW_WIDTH
from .input import Input

_log = logging.getLogger(__name__)


class Context:
    """Opens the window and audio, and drives input, drawing and timing.

    Use :meth:`get_instance` for the shared context. ``input`` and ``time``
    are refreshed once per frame by :meth:`update`.
    """

    _instance: Optional["Context"] = None

    def __init__(self) -> None:
        logger.init()

        pygame.mixer.pre_init(44100, -16, 2, 2048)
        pygame.init()
        if pygame.mixer.get_init() is None:
            _log.error("Failed to initialize the mixer")

        self._window: Optional[pygame.Surface]
        try:
            self._window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(TITLE)
        except pygame.error as exc:
            _log.error("Failed to create window")
            _log.error("%s", exc)
            self._window = None

        self.exit = False
        self.window_width = WINDOW_WIDTH
        self.window_height = WINDOW_HEIGHT
        self.icon: Optional[pygame.Surface] = None
        self.time = Time()
        self.input = Input(WINDOW_WIDTH, WINDOW_HEIGHT)
        self._before_update = self.time.elapsed_ms()

    @classmethod
    def get_instance(cls) -> "Context":
        """Return the shared context, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __enter__(self) -> "Context":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def window(self) -> Optional[pygame.Surface]:
        """The window surface, or None if it could not be created."""
        return self._window

    def set_window_icon(self, path: str) -> None:
        """Use the image at ``path`` as the window icon."""
        try:
            image = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            _log.error("Failed to load window icon: '%s'", path)
            _log.error("%s", exc)
            raise
        pygame.display.set_icon(image)
        self.icon = image

    def setup(self) -> None:
        """Prepare a new frame, keeping the window responsive."""
        if pygame.display.get_init():
            pygame.event.pump()

    def update(self) -> None:
        """Read input, show the frame, clear it, and wait out the frame cap."""
        if pygame.display.get_init():
            events = pygame.event.get()
            mouse = pygame.mouse.get_pos()
        else:
            events, mouse = [], None
        self.input.update(events, mouse)

        if self._window is not None:
            pygame.display.flip()
            self._window.fill((0, 0, 0))

        frame_time = 1000.0 / FPS_CAP if FPS_CAP != 0 else 0.0
        update_time = self.time.elapsed_ms() - self._before_update
        if update_time < frame_time:
            pygame.time.delay(int(frame_time - update_time))
        self._before_update = self.time.elapsed_ms()

        self.time.update()

    def close(self) -> None:
        """Stop all sound and shut the window and libraries down."""
        if pygame.mixer.get_init() is not None:
            pygame.mixer.stop()
            pygame.mixer.music.stop()
        pygame.quit()
        self._window = None
        if Context._instance is self:
            Context._instance = None