"""2D transforms and their conversion to model and projection matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .config import WINDOW_HEIGHT, WINDOW_WIDTH
from .drawable import Matrices

_NEAR_CLIP = -100.0
_FAR_CLIP = 100.0


def _vec2(values) -> np.ndarray:
    array = np.array(values, dtype=float).reshape(2)
    return array


@dataclass(eq=False)
class Transform:
    """Translation, rotation in radians and scale, applied in TRS order."""

    translation: np.ndarray = field(default_factory=lambda: np.zeros(2))
    rotation: float = 0.0
    scale: np.ndarray = field(default_factory=lambda: np.ones(2))

    def __post_init__(self) -> None:
        self.translation = _vec2(self.translation)
        self.scale = _vec2(self.scale)
        self.rotation = float(self.rotation)


def _translate(x: float, y: float, z: float) -> np.ndarray:
    matrix = np.eye(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def _scale(x: float, y: float, z: float) -> np.ndarray:
    return np.diag([x, y, z, 1.0])


def _rotate_z(angle: float) -> np.ndarray:
    cos, sin = math.cos(angle), math.sin(angle)
    matrix = np.eye(4)
    matrix[0, 0], matrix[0, 1] = cos, -sin
    matrix[1, 0], matrix[1, 1] = sin, cos
    return matrix


def _ortho(left, right, bottom, top, near, far) -> np.ndarray:
    matrix = np.eye(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (far - near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(far + near) / (far - near)
    return matrix


def convert_to_uniform_buffer_data(transform: Transform, size, z_index: float) -> Matrices:
    """Build the model matrix of an object and the shared projection-view matrix."""
    width, height = (float(v) for v in size)
    projection = _ortho(0.0, 1.0, 0.0, 1.0, _NEAR_CLIP, _FAR_CLIP)
    view = _scale(1.0 / WINDOW_WIDTH, 1.0 / WINDOW_HEIGHT, 1.0) @ _translate(
        WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2, 0.0
    )
    tx, ty = transform.translation
    sx, sy = transform.scale
    model = (
        _translate(tx, ty, float(z_index))
        @ _rotate_z(transform.rotation)
        @ _scale(sx * width, sy * height, 1.0)
    )
    return Matrices(model=model, projection=projection @ view)