"""Text rendered with a font into a drawable surface."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np
import pygame

from .color import Color
from .drawable import Drawable, Matrices
from .image import blit_with_matrices

_log = logging.getLogger(__name__)

_DEFAULT_COLOR = Color(127, 127, 127)


class Text(Drawable):
    """A block of text; lines are split on newlines.

    ``font`` is the path of a font file, or None for the built-in font.
    """

    def __init__(
        self,
        font: Optional[str],
        size: int,
        text: str,
        color: Color = _DEFAULT_COLOR,
    ) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        if font is not None and not Path(font).is_file():
            _log.error("Failed to open font: '%s'", font)
            raise FileNotFoundError(f"Font not found: {font}")
        self._font = pygame.font.Font(font, int(size))
        self._text = text
        self._color = color
        self._surface = self._render()

    def _render(self) -> pygame.Surface:
        r, g, b, a = self._color.to_sdl_color()
        lines = [
            self._font.render(line, True, (r, g, b)) for line in self._text.split("\n")
        ]
        line_step = self._font.get_linesize()
        width = max(1, max(line.get_width() for line in lines))
        height = max(1, line_step * (len(lines) - 1) + self._font.get_height())

        surface = pygame.Surface((width, height), pygame.SRCALPHA)
        surface.fill((r, g, b, 0))
        for number, line in enumerate(lines):
            surface.blit(line, (0, number * line_step), special_flags=pygame.BLEND_RGBA_MAX)
        if a < 255:
            surface.fill((255, 255, 255, a), special_flags=pygame.BLEND_RGBA_MULT)
        return surface

    @property
    def surface(self) -> pygame.Surface:
        """The rendered pixels."""
        return self._surface

    @property
    def size(self) -> np.ndarray:
        """Width and height of the rendered text in pixels."""
        return np.array(self._surface.get_size(), dtype=float)

    @property
    def text(self) -> str:
        """The text shown; setting it renders again."""
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self._surface = self._render()

    @property
    def color(self) -> Color:
        """The colour of the text; setting it renders again."""
        return self._color

    @color.setter
    def color(self, value: Color) -> None:
        self._color = value
        self._surface = self._render()

    def draw(self, data: Matrices) -> None:
        """Draw onto the display surface, if a window is open."""
        if not pygame.display.get_init():
            return
        target = pygame.display.get_surface()
        if target is None:
            return
        blit_with_matrices(self._surface, data, target)