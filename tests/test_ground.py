"""
Tests for the ground map piling algorithm.
"""

import pytest

from colors import color_for
from ground import GroundMap


@pytest.fixture
def ground():
    return GroundMap({'pile_factor': 100}, rows=10, cols=20)


class TestPile:
    """Accumulation and stacking."""

    def test_first_landing_divides_by_pile_factor(self, ground):
        assert ground.pile(5, 9, 80) == (5, 9, pytest.approx(0.8))
        assert ground.mass_at(5, 9) == pytest.approx(0.8)

    def test_mass_never_decreases(self, ground):
        previous = 0.0
        for mass in (10, 0, 55, 99, 3):
            ground.pile(4, 9, mass)
            current = ground.mass_at(4, 9)
            assert current >= previous
            previous = current
        assert previous == pytest.approx(1.67)

    def test_saturated_cell_stacks_upward(self, ground, surface):
        ground.masses[9, 5] = 100.0
        x, y, mass = ground.pile(5, 9, 50, surface)
        assert (x, y) == (5, 8)
        assert mass == pytest.approx(0.5)
        assert ground.mass_at(5, 9) == 100.0
        assert (9, 5) not in surface.cells
        assert (8, 5) in surface.cells

    def test_climbs_past_several_full_cells(self, ground):
        ground.masses[7:10, 3] = 120.0
        _, y, _ = ground.pile(3, 9, 100)
        assert y == 6

    def test_top_row_takes_overflow(self, ground):
        ground.masses[:, 2] = 100.0
        x, y, mass = ground.pile(2, 9, 50)
        assert (x, y) == (2, 0)
        assert mass == pytest.approx(100.5)

    def test_grows_for_out_of_range_landing(self, ground):
        ground.pile(25, 12, 100)
        assert ground.shape == (13, 26)
        assert ground.mass_at(25, 12) == pytest.approx(1.0)

    def test_negative_column_is_ignored(self, ground):
        assert ground.pile(-1, 9, 100) is None
        assert ground.masses.sum() == 0.0

    def test_reset_clears(self, ground):
        ground.pile(1, 9, 100)
        ground.reset()
        assert ground.mass_at(1, 9) == 0.0


class TestGlyphs:
    """Fraction to glyph lookup."""

    def test_blank_at_zero(self, ground):
        assert ground.glyph_for_mass(0) == " "

    def test_full_block_at_hundred(self, ground):
        assert ground.glyph_for_mass(100) == "█"

    def test_half(self, ground):
        assert ground.glyph_for_mass(50) == "▄"

    def test_small_mass_rounds_up_to_dot(self, ground):
        assert ground.glyph_for_mass(0.8) == "."

    def test_overflow_clamps_to_full(self, ground):
        assert ground.glyph_for_mass(1000) == "█"

    def test_pile_writes_glyph_and_color(self, ground, surface):
        ground.pile(5, 9, 80, surface)
        assert surface.cells[(9, 5)] == (".", color_for(0.8))

    def test_custom_table(self):
        ground = GroundMap({'pile_glyphs': [[0.0, "a"], [0.5, "b"], [1.0, "c"]]})
        assert ground.glyph_for_mass(20) == "b"
        assert ground.glyph_for_mass(70) == "c"


class TestColorSaturation:
    def test_color_identical_above_hundred(self, surface):
        heavy = GroundMap({'pile_factor': 1})
        heavy.pile(0, 0, 100, surface)
        at_hundred = surface.cells[(0, 0)]

        heavy.pile(1, 0, 1000, surface)
        at_thousand = surface.cells[(0, 1)]
        assert at_hundred == at_thousand == ("█", "#ffffff")


class TestConfiguration:
    def test_rejects_non_positive_pile_factor(self):
        with pytest.raises(ValueError, match="Configuration error"):
            GroundMap({'pile_factor': 0})

    def test_rejects_descending_table(self):
        with pytest.raises(ValueError, match="ascending"):
            GroundMap({'pile_glyphs': [[0.5, "a"], [0.25, "b"]]})

    def test_rejects_malformed_table(self):
        with pytest.raises(ValueError, match="pairs"):
            GroundMap({'pile_glyphs': [[0.5]]})
