import pytest

from ptsd.color import Color, Colors


def test_from_name_white_matches_hex():
    assert Color.from_name(Colors.WHITE) == Color.from_hex("FFFFFFFF")


def test_from_hex_number_and_string_agree():
    assert Color.from_hex(0x11223344) == Color.from_hex("11223344")


def test_from_hex_splits_channels():
    assert Color.from_hex(0x11223344) == Color.from_rgb(0x11, 0x22, 0x33, 0x44)


def test_from_name_is_opaque():
    assert Color.from_name(Colors.TEAL).a == 255


def test_aliases_give_same_color():
    assert Color.from_name(Colors.AQUA) == Color.from_name(Colors.CYAN)
    assert Color.from_name(Colors.FUCHSIA) == Color.from_name(Colors.MAGENTA)


def test_to_sdl_color_round_trip():
    color = Color.from_rgb(10, 20, 30, 40)
    assert color.to_sdl_color() == (10, 20, 30, 40)
    assert Color(*color.to_sdl_color()) == color


def test_string_form():
    assert str(Color(1, 2, 3, 4)) == "Color(1,2,3,4)"


def test_default_alpha_matches_from_rgb_default():
    assert Color(5, 6, 7) == Color.from_rgb(5, 6, 7)


@pytest.mark.parametrize("channels", [(256, 0, 0, 0), (0, 0, 0, 300), (-1, 0, 0, 0)])
def test_from_rgb_rejects_out_of_range(channels):
    with pytest.raises(ValueError):
        Color.from_rgb(*channels)


def test_from_hex_rejects_bad_string():
    with pytest.raises(ValueError):
        Color.from_hex("not a colour")


def test_from_hex_rejects_too_large_number():
    with pytest.raises(ValueError):
        Color.from_hex(0x1FFFFFFFF)


def test_from_hsl_pure_red():
    assert Color.from_hsl(0.0, 1.0, 0.5) == Color.from_name(Colors.RED)


def test_from_hsl_without_saturation_is_gray():
    color = Color.from_hsl(0.3, 0.0, 0.5)
    assert color.r == color.g == color.b
    assert color.a == 255


def test_from_hsv_pure_red():
    assert Color.from_hsv(0.0, 1.0, 1.0) == Color.from_name(Colors.RED)


def test_from_hsv_black_when_value_zero():
    assert Color.from_hsv(0.5, 1.0, 0.0) == Color.from_name(Colors.BLACK)


def test_from_hsv_without_saturation_keeps_alpha_unscaled():
    color = Color.from_hsv(0.0, 0.0, 1.0)
    assert color.r == color.g == color.b
    assert color.a == 1