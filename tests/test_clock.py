import pytest

from ptsd.clock import Time


class FakeCounter:
    def __init__(self, value=100):
        self.value = value

    def __call__(self):
        return self.value


def test_delta_is_zero_before_first_update():
    clock = Time(FakeCounter(), 1000)
    assert clock.delta_ms() == 0.0
    assert clock.delta_seconds() == 0.0


def test_elapsed_counts_from_creation():
    counter = FakeCounter(100)
    clock = Time(counter, 1000)
    assert clock.elapsed_ms() == 0.0
    counter.value = 350
    assert clock.elapsed_ms() == pytest.approx(counter.value - 100)


def test_frequency_scales_ticks_to_milliseconds():
    counter = FakeCounter(0)
    clock = Time(counter, 2000)
    counter.value = 4000
    # 4000 ticks at 2000 ticks per second are two seconds.
    assert clock.elapsed_ms() == pytest.approx(2000.0)


def test_first_update_measures_from_start():
    counter = FakeCounter(100)
    clock = Time(counter, 1000)
    counter.value = 116
    clock.update()
    assert clock.delta_ms() == pytest.approx(counter.value - 100)


def test_update_measures_between_frames():
    counter = FakeCounter(0)
    clock = Time(counter, 1000)
    counter.value = 10
    clock.update()
    counter.value = 35
    clock.update()
    assert clock.delta_ms() == pytest.approx(35 - 10)
    assert clock.delta_seconds() == pytest.approx(clock.delta_ms() / 1000.0)


def test_delta_does_not_change_without_update():
    counter = FakeCounter(0)
    clock = Time(counter, 1000)
    counter.value = 20
    clock.update()
    before = clock.delta_ms()
    counter.value = 500
    assert clock.delta_ms() == before


@pytest.mark.parametrize("frequency", [0, -5])
def test_invalid_frequency_rejected(frequency):
    with pytest.raises(ValueError):
        Time(FakeCounter(), frequency)


def test_default_counter_is_monotonic():
    clock = Time()
    first = clock.elapsed_ms()
    second = clock.elapsed_ms()
    assert 0.0 <= first <= second