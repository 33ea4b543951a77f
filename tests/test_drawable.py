import numpy as np
import pytest

from ptsd.drawable import Drawable, Matrices


class _Square(Drawable):
    def __init__(self, side):
        self._side = side
        self.drawn = []

    def draw(self, data):
        self.drawn.append(data)

    @property
    def size(self):
        return np.array([self._side, self._side], dtype=float)


def test_drawable_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Drawable()


def test_matrices_hold_given_arrays():
    data = Matrices(model=np.eye(4) * 3, projection=np.eye(4) * 2)
    assert np.array_equal(data.model, np.eye(4) * 3)
    assert np.array_equal(data.projection, np.eye(4) * 2)


def test_concrete_drawable_receives_matrices():
    square = _Square(3)
    data = Matrices(model=np.eye(4), projection=np.eye(4) * 2)
    square.draw(data)
    assert square.drawn == [data]
    assert np.array_equal(square.drawn[0].projection, np.eye(4) * 2)