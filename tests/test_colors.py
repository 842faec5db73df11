import math

import pytest

from mobagen.core import colors
from mobagen.core.colors import Color32, Colorf, hsv_to_rgb, rgb_to_hsv


def test_default_color_is_opaque_black():
    assert Color32() == Color32(0, 0, 0, 255)
    assert Color32() == colors.BLACK


def test_from_packed_layout():
    c = Color32.from_packed(0xFF0000FF)
    assert (c.r, c.g, c.b, c.a) == (255, 0, 0, 255)
    assert c == colors.RED


def test_named_colors_from_source_values():
    assert colors.BLUE == Color32(0, 0, 255)
    assert colors.WHITE == Color32(255, 255, 255, 255)
    assert colors.TRANSPARENT == Color32(0, 0, 0, 0)
    assert colors.GRAY == Color32(0x80, 0x80, 0x80)
    assert colors.MAGENTA == colors.FUCHSIA
    assert colors.AQUA == colors.CYAN


def test_channel_out_of_range_rejected():
    with pytest.raises(ValueError):
        Color32(256, 0, 0)
    with pytest.raises(ValueError):
        Color32(0, -1, 0)


def test_getitem_channel_order():
    c = Color32(10, 20, 30, 40)
    assert [c[i] for i in range(4)] == [40, 10, 20, 30]
    assert c[4] == c.a


@pytest.mark.parametrize("index", [-1, 5, 10])
def test_getitem_out_of_range(index):
    with pytest.raises(IndexError):
        Color32(1, 2, 3)[index]


def test_light_and_dark_invariants():
    c = Color32(10, 100, 200, 50)
    light = c.light()
    dark = c.dark()
    assert light.a == 255 and dark.a == 255
    for channel in ("r", "g", "b"):
        original = getattr(c, channel)
        assert getattr(light, channel) >= original
        assert getattr(dark, channel) <= original
    assert colors.WHITE.light() == colors.WHITE
    assert colors.BLACK.dark() == colors.BLACK


def test_color32_colorf_round_trip():
    c = Color32(12, 34, 56, 78)
    assert Color32.from_colorf(Colorf.from_color32(c)) == c


def test_colorf_from_color32_bounds():
    f = Colorf.from_color32(colors.WHITE)
    assert (f.r, f.g, f.b, f.a) == (1.0, 1.0, 1.0, 1.0)


def test_colorf_from_packed_blue_reads_green_byte():
    f = Colorf.from_packed(0xFF00FF00)
    assert f.a == 1.0
    assert f.g == 1.0
    assert f.b == f.g
    assert f.r == 0.0


def test_random_color_within_bounds():
    for _ in range(50):
        c = Color32.random_color(31, 255)
        assert 31 <= c.r <= 255
        assert 31 <= c.g <= 255
        assert 31 <= c.b <= 255
        assert c.a == 255


def test_random_color_default_range_is_black():
    assert Color32.random_color() == colors.BLACK


def test_hsv_zero_saturation_is_gray():
    c = hsv_to_rgb(0.3, 0.0, 0.5)
    assert (c.r, c.g, c.b, c.a) == (0.5, 0.5, 0.5, 1.0)


def test_hsv_zero_value_is_black():
    c = hsv_to_rgb(0.7, 1.0, 0.0)
    assert (c.r, c.g, c.b) == (0.0, 0.0, 0.0)


def test_hsv_pure_red():
    c = hsv_to_rgb(0.0, 1.0, 1.0)
    assert (c.r, c.g, c.b) == (1.0, 0.0, 0.0)


def test_hsv_clamped_without_hdr():
    c = hsv_to_rgb(0.0, 0.5, 2.0, hdr=False)
    for channel in (c.r, c.g, c.b):
        assert 0.0 <= channel <= 1.0
    c_hdr = hsv_to_rgb(0.0, 0.5, 2.0, hdr=True)
    assert c_hdr.r == 2.0


def test_hsv_out_of_range_hue_raises():
    with pytest.raises(ValueError):
        hsv_to_rgb(5.0, 1.0, 1.0)


@pytest.mark.parametrize(
    "rgb",
    [(0.2, 0.4, 0.6), (0.9, 0.1, 0.3), (0.3, 0.8, 0.2), (0.5, 0.5, 0.1), (0.7, 0.2, 0.9)],
)
def test_rgb_hsv_round_trip(rgb):
    h, s, v = rgb_to_hsv(Colorf(*rgb))
    assert 0.0 <= h <= 1.0
    assert 0.0 <= s <= 1.0
    assert v == max(rgb)
    back = hsv_to_rgb(h, s, v)
    for got, want in zip((back.r, back.g, back.b), rgb):
        assert math.isclose(got, want, abs_tol=1e-9)


def test_rgb_to_hsv_black():
    assert rgb_to_hsv(Colorf(0.0, 0.0, 0.0)) == (0.0, 0.0, 0.0)