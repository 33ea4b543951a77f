"""Scene objects with a drawable, a transform, a z-index and children."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import numpy as np

from .drawable import Drawable
from .transform import Transform, convert_to_uniform_buffer_data


class GameObject:
    """An object in the scene.

    A greater ``z_index`` draws on top. The ``pivot`` offsets the point the
    object is positioned and rotated around, in pixels.
    """

    def __init__(
        self,
        drawable: Optional[Drawable] = None,
        z_index: float = 0.0,
        pivot: Sequence[float] = (0.0, 0.0),
        visible: bool = True,
        children: Optional[Iterable["GameObject"]] = None,
    ) -> None:
        self.transform = Transform()
        self.drawable = drawable
        self.z_index = float(z_index)
        self.pivot = np.array(pivot, dtype=float).reshape(2)
        self.visible = visible
        self.children: List[GameObject] = list(children) if children is not None else []

    def scaled_size(self) -> np.ndarray:
        """The drawable's size multiplied by the transform's scale."""
        if self.drawable is None:
            raise ValueError("Game object has no drawable")
        return np.asarray(self.drawable.size, dtype=float) * self.transform.scale

    def add_child(self, child: "GameObject") -> None:
        """Append a child object."""
        self.children.append(child)

    def remove_child(self, child: "GameObject") -> None:
        """Remove every occurrence of ``child``."""
        self.children[:] = [c for c in self.children if c is not child]

    def draw(self) -> None:
        """Draw the drawable if the object is visible and has one."""
        if not self.visible or self.drawable is None:
            return
        size = np.asarray(self.drawable.size, dtype=float)
        data = convert_to_uniform_buffer_data(self.transform, size, self.z_index)
        with np.errstate(divide="ignore", invalid="ignore"):
            offset = -(self.pivot / size)
        shift = np.eye(4)
        shift[0, 3], shift[1, 3] = offset
        data.model = data.model @ shift
        self.drawable.draw(data)