"""Images loaded from files and drawn with model and projection matrices."""

from __future__ import annotations

import logging
import math
from itertools import product
from typing import Optional

import numpy as np
import pygame

from .asset_store import AssetStore
from .drawable import Drawable, Matrices

_log = logging.getLogger(__name__)

_MISSING_SIZE = 256
_MISSING_CELL = 32
_MISSING_LIGHT = (255, 0, 220, 255)
_MISSING_DARK = (0, 0, 0, 255)


def missing_texture_surface() -> pygame.Surface:
    """Build the checkerboard shown in place of an image that failed to load."""
    surface = pygame.Surface((_MISSING_SIZE, _MISSING_SIZE), pygame.SRCALPHA)
    surface.fill(_MISSING_DARK)
    cells = range(0, _MISSING_SIZE, _MISSING_CELL)
    for x, y in product(cells, repeat=2):
        if (x // _MISSING_CELL + y // _MISSING_CELL) % 2 == 0:
            surface.fill(_MISSING_LIGHT, (x, y, _MISSING_CELL, _MISSING_CELL))
    return surface


def load_surface(filepath: str) -> pygame.Surface:
    """Load an image file, falling back to the missing texture on failure."""
    try:
        return pygame.image.load(filepath)
    except (pygame.error, OSError) as exc:
        _log.error("Failed to load image: '%s'", filepath)
        _log.error("%s", exc)
        return missing_texture_surface()


_store: AssetStore[pygame.Surface] = AssetStore(load_surface)


def _screen_vector(clip: np.ndarray, width: int, height: int) -> np.ndarray:
    return np.array([clip[0] / 2.0 * width, -clip[1] / 2.0 * height])


def blit_with_matrices(
    surface: pygame.Surface, data: Matrices, target: pygame.Surface
) -> Optional[pygame.Rect]:
    """Draw ``surface`` onto ``target`` as a unit quad placed by ``data``.

    Returns the area of ``target`` that was drawn to, or None when the quad
    has no visible size.
    """
    mvp = np.asarray(data.projection, dtype=float) @ np.asarray(data.model, dtype=float)
    target_w, target_h = target.get_size()

    centre_clip = mvp @ np.array([0.0, 0.0, 0.0, 1.0])
    centre = (
        (centre_clip[0] + 1.0) / 2.0 * target_w,
        (1.0 - centre_clip[1]) / 2.0 * target_h,
    )
    across = _screen_vector(mvp @ np.array([1.0, 0.0, 0.0, 0.0]), target_w, target_h)
    # Texture rows run from the quad's top edge downwards.
    down = -_screen_vector(mvp @ np.array([0.0, 1.0, 0.0, 0.0]), target_w, target_h)

    width = math.hypot(*across)
    height = math.hypot(*down)
    if not (math.isfinite(width) and math.isfinite(height) and all(map(math.isfinite, centre))):
        return None
    size = (int(round(width)), int(round(height)))
    if size[0] < 1 or size[1] < 1:
        return None

    image = pygame.transform.scale(surface, size)
    if across[0] * down[1] - across[1] * down[0] < 0:
        image = pygame.transform.flip(image, False, True)
    angle = round(math.degrees(math.atan2(-across[1], across[0])), 6) % 360.0
    if angle:
        image = pygame.transform.rotate(image, angle)

    rect = image.get_rect(center=(int(round(centre[0])), int(round(centre[1]))))
    return target.blit(image, rect)


def _display_target() -> Optional[pygame.Surface]:
    if not pygame.display.get_init():
        return None
    return pygame.display.get_surface()


class Image(Drawable):
    """A drawable image loaded from a file; loaded files are cached and shared."""

    def __init__(self, filepath: str) -> None:
        self._path = filepath
        self._surface = _store.get(filepath)

    @property
    def path(self) -> str:
        """Path of the image currently shown."""
        return self._path

    @property
    def surface(self) -> pygame.Surface:
        """The pixels of the image currently shown."""
        return self._surface

    @property
    def size(self) -> np.ndarray:
        """Width and height in pixels."""
        return np.array(self._surface.get_size(), dtype=float)

    def set_image(self, filepath: str) -> None:
        """Show the image at ``filepath`` instead."""
        self._surface = _store.get(filepath)
        self._path = filepath

    def draw(self, data: Matrices) -> None:
        """Draw onto the display surface, if a window is open."""
        target = _display_target()
        if target is None:
            return
        blit_with_matrices(self._surface, data, target)