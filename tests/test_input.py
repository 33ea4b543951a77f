import numpy as np
import pygame
import pytest

from ptsd.input import Input
from ptsd.keycode import Keycode

WIDTH, HEIGHT = 1280, 720


def key_event(kind, key):
    return pygame.event.Event(kind, scancode=int(key))


def test_initial_state():
    state = Input(WIDTH, HEIGHT)
    assert not state.is_key_pressed(Keycode.A)
    assert not state.is_scrolling()
    assert not state.is_mouse_moving()
    assert not state.exit_requested()
    assert np.array_equal(state.scroll_distance(), [-1.0, -1.0])
    assert np.array_equal(state.cursor_position(), [0.0, 0.0])


def test_key_press_lifecycle():
    state = Input(WIDTH, HEIGHT)
    state.update([key_event(pygame.KEYDOWN, Keycode.A)])
    assert state.is_key_pressed(Keycode.A)
    assert state.is_key_down(Keycode.A)
    assert not state.is_key_up(Keycode.A)

    state.update([])
    assert state.is_key_pressed(Keycode.A)
    assert not state.is_key_down(Keycode.A)

    state.update([key_event(pygame.KEYUP, Keycode.A)])
    assert not state.is_key_pressed(Keycode.A)
    assert state.is_key_up(Keycode.A)

    state.update([])
    assert not state.is_key_up(Keycode.A)


def test_keys_are_independent():
    state = Input(WIDTH, HEIGHT)
    state.update([key_event(pygame.KEYDOWN, Keycode.RETURN)])
    assert state.is_key_pressed(Keycode.RETURN)
    assert not state.is_key_pressed(Keycode.ESCAPE)


@pytest.mark.parametrize(
    "button, key",
    [(1, Keycode.MOUSE_LB), (2, Keycode.MOUSE_MB), (3, Keycode.MOUSE_RB)],
)
def test_mouse_buttons_map_to_keycodes(button, key):
    state = Input(WIDTH, HEIGHT)
    state.update([pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button)])
    assert state.is_key_down(key)
    state.update([pygame.event.Event(pygame.MOUSEBUTTONUP, button=button)])
    assert state.is_key_up(key)


def test_scroll_sets_distance_for_one_frame():
    state = Input(WIDTH, HEIGHT)
    state.update([pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=1)])
    assert state.is_scrolling()
    assert np.array_equal(state.scroll_distance(), [0.0, 1.0])

    state.update([])
    assert not state.is_scrolling()
    assert np.array_equal(state.scroll_distance(), [0.0, 1.0])


def test_mouse_motion_flag_resets():
    state = Input(WIDTH, HEIGHT)
    state.update([pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), rel=(1, 1), buttons=(0, 0, 0))])
    assert state.is_mouse_moving()
    state.update([])
    assert not state.is_mouse_moving()


def test_quit_requests_exit_and_persists():
    state = Input(WIDTH, HEIGHT)
    state.update([pygame.event.Event(pygame.QUIT)])
    assert state.exit_requested()
    state.update([])
    assert state.exit_requested()


def test_cursor_centre_is_origin():
    state = Input(WIDTH, HEIGHT)
    state.update([], (WIDTH / 2, HEIGHT / 2))
    assert np.array_equal(state.cursor_position(), [0.0, 0.0])


def test_cursor_y_axis_points_up():
    state = Input(WIDTH, HEIGHT)
    state.update([], (WIDTH / 2 + 10, HEIGHT / 2 + 20))
    x, y = state.cursor_position()
    assert x == 10
    assert y == -20


def test_cursor_kept_without_position():
    state = Input(WIDTH, HEIGHT)
    state.update([], (WIDTH / 2 + 5, HEIGHT / 2))
    before = state.cursor_position()
    state.update([])
    assert np.array_equal(state.cursor_position(), before)


def test_returned_vectors_are_copies():
    state = Input(WIDTH, HEIGHT)
    distance = state.scroll_distance()
    distance[0] = 42.0
    assert np.array_equal(state.scroll_distance(), [-1.0, -1.0])