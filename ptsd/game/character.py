"""Characters of the game: a still image or a frame animation on the scene."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from ..animation import Animation, State
from ..clock import Time
from ..game_object import GameObject
from ..image import Image

_FRAME_INTERVAL_MS = 500


class Character(GameObject):
    """A game object drawn from a single image file."""

    def __init__(self, image_path: str) -> None:
        super().__init__()
        self._image_path = ""
        self.set_image(image_path)
        self._reset_position()

    @property
    def image_path(self) -> str:
        """Path of the image shown."""
        return self._image_path

    @property
    def position(self) -> np.ndarray:
        """Where the character stands; setting it moves the character."""
        return self.transform.translation.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self.transform.translation = np.array(value, dtype=float).reshape(2)

    def set_image(self, image_path: str) -> None:
        """Show the image at ``image_path``."""
        self._image_path = image_path
        self.drawable = Image(image_path)

    def if_collides(self, other: "Character") -> bool:
        """Whether this character touches ``other``; no collisions are detected yet."""
        return False

    def _reset_position(self) -> None:
        self.transform.translation = np.zeros(2)


class AnimatedCharacter(GameObject):
    """A game object drawn from a paused, non-looping frame animation."""

    def __init__(self, animation_paths: Sequence[str], clock: Optional[Time] = None) -> None:
        super().__init__(
            Animation(animation_paths, False, _FRAME_INTERVAL_MS, False, 0, clock)
        )

    @property
    def animation(self) -> Animation:
        """The animation drawn by this character."""
        return self.drawable  # type: ignore[return-value]

    @property
    def looping(self) -> bool:
        """Whether the animation starts again after its last frame."""
        return self.animation.looping

    @looping.setter
    def looping(self, value: bool) -> None:
        self.animation.looping = value

    @property
    def is_playing(self) -> bool:
        """Whether the animation is playing."""
        return self.animation.state is State.PLAY

    def if_animation_ends(self) -> bool:
        """Whether the last frame is shown."""
        animation = self.animation
        return animation.current_frame_index == animation.frame_count - 1