import math

import numpy as np
import pytest

from ptsd.config import WINDOW_HEIGHT, WINDOW_WIDTH
from ptsd.transform import Transform, convert_to_uniform_buffer_data

TOLERANCE = 1e-5


def test_default_constructor():
    transform = Transform()
    assert np.array_equal(transform.scale, np.array([1.0, 1.0]))
    assert transform.rotation == 0
    assert np.array_equal(transform.translation, np.array([0.0, 0.0]))


def test_translation():
    expected = np.array([6.0, 9.0])
    transform = Transform()
    transform.translation += expected
    assert np.array_equal(transform.translation, expected)


@pytest.mark.parametrize("degrees", [365.0, 360.0, 90.0])
def test_rotate(degrees):
    expected = math.radians(degrees)
    transform = Transform()
    transform.rotation += expected
    assert transform.rotation == pytest.approx(expected, abs=TOLERANCE)


def test_scaling():
    expected = np.array([4.0, 2.0])
    transform = Transform()
    transform.scale *= expected
    assert transform.scale[0] == pytest.approx(expected[0], abs=TOLERANCE)
    assert transform.scale[1] == pytest.approx(expected[1], abs=TOLERANCE)


def test_separate_instances_do_not_share_vectors():
    first = Transform()
    second = Transform()
    first.translation += np.array([1.0, 1.0])
    assert np.array_equal(second.translation, np.array([0.0, 0.0]))


def test_identity_model():
    data = convert_to_uniform_buffer_data(Transform(), (1, 1), 0)
    assert np.allclose(data.model, np.eye(4))


def test_model_translation_includes_z_index():
    transform = Transform(translation=(6, 9))
    data = convert_to_uniform_buffer_data(transform, (1, 1), 3)
    assert np.allclose(data.model[:3, 3], [6, 9, 3])


def test_model_rotates_after_scaling():
    transform = Transform(rotation=math.pi / 2)
    data = convert_to_uniform_buffer_data(transform, (2, 3), 0)
    point = data.model @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(point, [0.0, 2.0, 0.0, 1.0], atol=TOLERANCE)


def test_model_scale_multiplies_size():
    transform = Transform(scale=(2, 5))
    data = convert_to_uniform_buffer_data(transform, (10, 4), 0)
    assert data.model[0, 0] == pytest.approx(20)
    assert data.model[1, 1] == pytest.approx(20)


def test_projection_maps_window_centre_to_origin():
    data = convert_to_uniform_buffer_data(Transform(), (1, 1), 0)
    point = data.projection @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(point, [0.0, 0.0, 0.0, 1.0])


def test_projection_maps_window_corner_to_clip_corner():
    data = convert_to_uniform_buffer_data(Transform(), (1, 1), 0)
    corner = np.array([WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2, 0.0, 1.0])
    point = data.projection @ corner
    assert np.allclose(point, [1.0, 1.0, 0.0, 1.0])