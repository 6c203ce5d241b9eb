"""Tests for palette_swatch.core.palette — hex parsing, colour lists, RGB distance."""

import pytest
from palette_swatch.core.errors import InvalidColorCount, MalformedColorInput
from palette_swatch.core.palette import (
    Color,
    parse_color_list,
    parse_hex,
    rgb_distance,
)


class TestHexRgb:
    def test_white(self):
        assert parse_hex('#ffffff').rgb == (255, 255, 255)

    def test_black(self):
        assert parse_hex('#000000').rgb == (0, 0, 0)

    def test_blue600(self):
        assert parse_hex('#2563eb').rgb == (37, 99, 235)

    def test_uppercase(self):
        assert parse_hex('#FFFFFF').rgb == (255, 255, 255)

    def test_short_hex(self):
        assert parse_hex('#fff').rgb == (255, 255, 255)

    def test_no_hash(self):
        assert parse_hex('ff0000').rgb == (255, 0, 0)

    def test_surrounding_whitespace(self):
        assert parse_hex('  #00ff00 ').rgb == (0, 255, 0)

    def test_invalid_hex_raises(self):
        for bad in ['invalid', '#ff', '#fffffff', '#gggggg', '', '##ffffff']:
            with pytest.raises(MalformedColorInput):
                parse_hex(bad)


class TestParseHex:
    def test_alpha_is_parsed_but_not_in_rgb(self):
        c = parse_hex('#11223380')
        assert c.rgb == (0x11, 0x22, 0x33)
        assert c.a == 0x80

    def test_default_alpha_opaque(self):
        assert parse_hex('#112233').a == 255

    def test_hex_property_round_trips(self):
        assert parse_hex('#A1B2C3').hex == '#a1b2c3'

    def test_color_is_immutable(self):
        c = Color(1, 2, 3)
        with pytest.raises(AttributeError):
            c.r = 9  # type: ignore[misc]

    def test_channel_out_of_range(self):
        with pytest.raises(MalformedColorInput):
            Color(256, 0, 0)


class TestParseColorList:
    def test_three_colours_in_order(self):
        colors = parse_color_list('#FF0000,#00FF00,#0000FF')
        assert [c.rgb for c in colors] == [(255, 0, 0), (0, 255, 0), (0, 0, 255)]

    def test_duplicates_kept(self):
        assert len(parse_color_list('fff,fff,fff')) == 3

    def test_empty_rejected(self):
        with pytest.raises(InvalidColorCount):
            parse_color_list('')

    def test_blank_rejected(self):
        with pytest.raises(InvalidColorCount):
            parse_color_list('   ')

    def test_max_255(self):
        assert len(parse_color_list(','.join(['000000'] * 255))) == 255

    def test_256_rejected(self):
        with pytest.raises(InvalidColorCount):
            parse_color_list(','.join(['000000'] * 256))

    def test_bad_token_names_position(self):
        with pytest.raises(MalformedColorInput, match='#2'):
            parse_color_list('ff0000,nothex,0000ff')

    def test_trailing_comma_is_malformed(self):
        with pytest.raises(MalformedColorInput):
            parse_color_list('ff0000,')


class TestRgbDistance:
    def test_same_colour(self):
        assert rgb_distance((255, 255, 255), (255, 255, 255)) == 0.0

    def test_black_white(self):
        d = rgb_distance((0, 0, 0), (255, 255, 255))
        assert d > 400  # sqrt(3 * 255^2) ≈ 441.7

    def test_symmetry(self):
        a = (100, 50, 200)
        b = (120, 60, 180)
        assert rgb_distance(a, b) == rgb_distance(b, a)

    def test_uses_int_not_uint8(self):
        """Ensure no numpy uint8 overflow: (0 - 200) must not wrap."""
        import numpy as np

        d = rgb_distance(tuple(np.array([0, 0, 0], dtype=np.uint8)), (200, 200, 200))
        assert d > 300
