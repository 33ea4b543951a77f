import pytest

from ptsd import config
from ptsd.logger import Level, format_transform, get_level, init, set_level
from ptsd.transform import Transform


@pytest.mark.parametrize("level", list(Level))
def test_set_then_get_level_round_trips(level):
    set_level(level)
    assert get_level() is level


def test_init_applies_default_level():
    set_level(Level.CRITICAL)
    init()
    assert get_level() is config.DEFAULT_LOG_LEVEL


def test_init_twice_keeps_default_level():
    set_level(Level.ERROR)
    init()
    init()
    assert get_level() is config.DEFAULT_LOG_LEVEL


def test_levels_are_ordered_by_verbosity():
    set_level(Level.INFO)
    current = get_level()
    assert Level.TRACE < Level.DEBUG < current < Level.WARN < Level.ERROR < Level.CRITICAL


def test_format_default_transform():
    assert (
        format_transform(Transform())
        == "T: vec2(0.000000, 0.000000) R: 0 rad S: vec2(1.000000, 1.000000)"
    )


def test_format_custom_transform():
    transform = Transform(translation=(1.5, -2), rotation=0.25, scale=(2, 3))
    assert (
        format_transform(transform)
        == "T: vec2(1.500000, -2.000000) R: 0.25 rad S: vec2(2.000000, 3.000000)"
    )