"""Base interface for anything that can be drawn."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np


@dataclass(eq=False)
class Matrices:
    """Model and projection matrices passed to a drawable."""

    model: np.ndarray
    projection: np.ndarray


class Drawable(ABC):
    """Something with a size that can draw itself with given matrices."""

    @abstractmethod
    def draw(self, data: Matrices) -> None:
        """Draw using the given matrices."""

    @property
    @abstractmethod
    def size(self) -> np.ndarray:
        """Width and height in pixels."""