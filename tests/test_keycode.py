import pygame
import pytest

from ptsd.keycode import Keycode


def test_values_are_unique():
    assert all(Keycode(member.value) is member for member in Keycode)


def test_mouse_buttons_follow_scancode_range():
    assert Keycode.MOUSE_LB == 513
    assert Keycode.MOUSE_MB == 514
    assert Keycode.MOUSE_RB == 515
    assert Keycode(512 + 1) is Keycode.MOUSE_LB
    assert Keycode(512 + 3) is Keycode.MOUSE_RB


def test_letters_are_consecutive():
    letters = [Keycode[chr(code)] for code in range(ord("A"), ord("Z") + 1)]
    assert [Keycode(int(Keycode.A) + i) for i in range(len(letters))] == letters


def test_digits_are_consecutive_ending_with_zero():
    digits = [Keycode[f"NUM_{d}"] for d in "1234567890"]
    assert [Keycode(int(Keycode.NUM_1) + i) for i in range(len(digits))] == digits
    assert Keycode(int(Keycode.NUM_9) + 1) is Keycode.NUM_0


def test_keyboard_codes_below_num_scancodes():
    ordered = sorted(Keycode, key=int)
    assert ordered[-4:] == [
        Keycode(int(Keycode.NUM_SCANCODES)),
        Keycode(513),
        Keycode(514),
        Keycode(515),
    ]


@pytest.mark.parametrize(
    "name",
    ["A", "Z", "RETURN", "ESCAPE", "SPACE", "LEFT", "RIGHT", "UP", "DOWN", "F1", "LSHIFT"],
)
def test_matches_pygame_scancodes(name):
    assert Keycode(getattr(pygame, f"KSCAN_{name}")) is Keycode[name]


def test_lookup_by_value_and_name():
    assert Keycode(int(Keycode.K)) is Keycode.K
    assert Keycode["ESCAPE"] is Keycode.ESCAPE
    with pytest.raises(ValueError):
        Keycode(-1)