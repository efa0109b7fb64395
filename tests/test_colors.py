"""
Tests for the greyscale color model and flake glyph choice.
"""

import pytest

from colors import color_for, glyph_for, hex_to_rgb
from constants import FLAKE_GLYPH_LARGE, FLAKE_GLYPH_MEDIUM, FLAKE_GLYPH_SMALL


class TestColorFor:
    """Mass to greyscale mapping."""

    def test_zero_mass_is_mid_grey(self):
        assert color_for(0) == "#9b9b9b"

    def test_saturates_to_white(self):
        assert color_for(100) == "#ffffff"
        assert color_for(100) == color_for(500)

    def test_negative_mass_clamps(self):
        assert color_for(-1000) == "#000000"

    def test_channels_are_equal(self):
        r, g, b = hex_to_rgb(color_for(42.5))
        assert r == g == b

    def test_heavier_is_brighter(self):
        assert hex_to_rgb(color_for(10))[0] < hex_to_rgb(color_for(60))[0]


class TestGlyphFor:
    """Flake symbols by descending mass thresholds."""

    @pytest.mark.parametrize("mass,expected", [
        (200, FLAKE_GLYPH_LARGE),
        (90, FLAKE_GLYPH_LARGE),
        (89.9, FLAKE_GLYPH_MEDIUM),
        (50, FLAKE_GLYPH_MEDIUM),
        (49.9, FLAKE_GLYPH_SMALL),
        (5, FLAKE_GLYPH_SMALL),
        (0, FLAKE_GLYPH_SMALL),
    ])
    def test_thresholds(self, mass, expected):
        symbol, _ = glyph_for(mass)
        assert symbol == expected

    def test_color_follows_mass(self):
        _, color = glyph_for(70)
        assert color == color_for(70)


class TestHexToRgb:
    def test_parses(self):
        assert hex_to_rgb("#18ff00") == (24, 255, 0)

    def test_rejects_malformed(self):
        with pytest.raises(ValueError):
            hex_to_rgb("#fff")
