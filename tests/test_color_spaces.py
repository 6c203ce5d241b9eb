"""Tests for palette_swatch.core.color_spaces — RGB <-> HSV/YUV/XYZ/Lab."""

import pytest
from palette_swatch.core.color_spaces import (
    HSV,
    YUV,
    Lab,
    lab_distance,
    lab_to_rgb,
    relative_luminance,
    rgb_to_hsv,
    rgb_to_lab,
    rgb_to_xyz,
    rgb_to_yuv,
    xyz_to_rgb,
    yuv_to_rgb,
)
from palette_swatch.core.palette import Color

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
CYAN = Color(0, 255, 255)
MAGENTA = Color(255, 0, 255)

# Black, white, primaries, secondaries, plus a few in-between colours
SAMPLES = [
    BLACK,
    WHITE,
    RED,
    GREEN,
    BLUE,
    YELLOW,
    CYAN,
    MAGENTA,
    Color(128, 128, 128),
    Color(1, 1, 1),
    Color(37, 99, 235),
    Color(244, 162, 97),
    Color(42, 157, 143),
]


def _close(a: Color, b: Color, tol: int = 1) -> bool:
    return all(abs(x - y) <= tol for x, y in zip(a.rgb, b.rgb))


class TestRgbToHsv:
    def test_black_has_no_saturation_or_hue(self):
        assert rgb_to_hsv(BLACK) == HSV(0.0, 0.0, 0.0)

    def test_grey_has_zero_hue(self):
        hsv = rgb_to_hsv(Color(128, 128, 128))
        assert hsv.h == 0.0
        assert hsv.s == 0.0
        assert hsv.v == pytest.approx(50.196, abs=0.01)

    def test_white(self):
        assert rgb_to_hsv(WHITE) == HSV(0.0, 0.0, 100.0)

    @pytest.mark.parametrize(
        'color,hue',
        [(RED, 0.0), (YELLOW, 60.0), (GREEN, 120.0), (CYAN, 180.0), (BLUE, 240.0), (MAGENTA, 300.0)],
    )
    def test_primary_and_secondary_hues(self, color, hue):
        hsv = rgb_to_hsv(color)
        assert hsv.h == pytest.approx(hue)
        assert hsv.s == pytest.approx(100.0)
        assert hsv.v == pytest.approx(100.0)

    def test_hue_always_below_360(self):
        for color in SAMPLES + [Color(255, 0, 1), Color(255, 1, 2)]:
            assert 0.0 <= rgb_to_hsv(color).h < 360.0

    def test_half_saturation(self):
        assert rgb_to_hsv(Color(255, 128, 128)).s == pytest.approx(49.8, abs=0.1)


class TestYuv:
    def test_white(self):
        yuv = rgb_to_yuv(WHITE)
        assert yuv.y == pytest.approx(255.0)
        assert yuv.u == pytest.approx(128.0)
        assert yuv.v == pytest.approx(128.0)

    def test_red(self):
        yuv = rgb_to_yuv(RED)
        assert yuv.y == pytest.approx(76.245)
        assert yuv.u == pytest.approx(0.492 * (0 - 76.245) + 128.0)
        assert yuv.v == pytest.approx(0.877 * (255 - 76.245) + 128.0)

    def test_grey_back_to_rgb(self):
        assert yuv_to_rgb(YUV(100.0, 128.0, 128.0)) == Color(100, 100, 100)

    def test_green_channel_formula(self):
        # G = Y - 0.344 (U - 128) - 0.714 (V - 128)
        c = yuv_to_rgb(YUV(128.0, 138.0, 118.0))
        assert c.g == round(128.0 - 0.344 * 10.0 + 0.714 * 10.0)

    def test_out_of_range_is_clamped(self):
        c = yuv_to_rgb(YUV(255.0, 255.0, 255.0))
        assert all(0 <= ch <= 255 for ch in c.rgb)
        assert c.r == 255


class TestXyz:
    def test_white_is_d65(self):
        xyz = rgb_to_xyz(WHITE)
        assert xyz.x == pytest.approx(95.047, abs=0.01)
        assert xyz.y == pytest.approx(100.0, abs=0.01)
        assert xyz.z == pytest.approx(108.883, abs=0.01)

    def test_black_is_origin(self):
        assert rgb_to_xyz(BLACK) == (0.0, 0.0, 0.0)

    @pytest.mark.parametrize('color', SAMPLES)
    def test_round_trip(self, color):
        assert _close(xyz_to_rgb(rgb_to_xyz(color)), color)


class TestLab:
    def test_white(self):
        lab = rgb_to_lab(WHITE)
        assert lab.l == pytest.approx(100.0, abs=0.01)
        assert lab.a == pytest.approx(0.0, abs=0.05)
        assert lab.b == pytest.approx(0.0, abs=0.05)

    def test_black(self):
        lab = rgb_to_lab(BLACK)
        assert lab.l == pytest.approx(0.0, abs=1e-9)
        assert lab.a == pytest.approx(0.0, abs=1e-9)
        assert lab.b == pytest.approx(0.0, abs=1e-9)

    def test_red(self):
        lab = rgb_to_lab(RED)
        assert lab.l == pytest.approx(53.24, abs=0.5)
        assert lab.a == pytest.approx(80.09, abs=0.5)
        assert lab.b == pytest.approx(67.20, abs=0.5)

    def test_lightness_in_range(self):
        for color in SAMPLES:
            assert 0.0 <= rgb_to_lab(color).l <= 100.0

    def test_white_lightness_capped(self):
        assert rgb_to_lab(WHITE).l <= 100.0
        assert rgb_to_lab(Color(254, 255, 255)).l <= 100.0

    @pytest.mark.parametrize('color', SAMPLES)
    def test_round_trip(self, color):
        assert _close(lab_to_rgb(rgb_to_lab(color)), color)

    def test_distance_black_white(self):
        assert lab_distance(rgb_to_lab(BLACK), rgb_to_lab(WHITE)) == pytest.approx(100.0, abs=0.1)

    def test_distance_zero(self):
        assert lab_distance(Lab(50.0, 10.0, -10.0), Lab(50.0, 10.0, -10.0)) == 0.0


class TestRelativeLuminance:
    def test_extremes(self):
        assert relative_luminance(BLACK) == 0.0
        assert relative_luminance(WHITE) == pytest.approx(1.0)

    def test_weights(self):
        assert relative_luminance(RED) == pytest.approx(0.2126)
        assert relative_luminance(GREEN) == pytest.approx(0.7152)
        assert relative_luminance(BLUE) == pytest.approx(0.0722)

    def test_matches_xyz_y(self):
        color = Color(37, 99, 235)
        assert relative_luminance(color) * 100.0 == pytest.approx(rgb_to_xyz(color).y, abs=0.01)
