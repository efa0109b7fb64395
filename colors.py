# colors.py
"""
Greyscale color model for flakes and piled snow.

Mass is the only input: light flakes are a dim grey and anything at or
above mass 100 is pure white.
"""
from typing import Tuple

from constants import (
    FLAKE_GLYPH_LARGE, FLAKE_GLYPH_MEDIUM, FLAKE_GLYPH_SMALL,
    FLAKE_MASS_LARGE, FLAKE_MASS_MEDIUM
)

# --- Data Contracts ---
#
# color_for(mass: float) -> str:
#   - Inputs: mass, any float (values below 0 clamp, values above ~100 saturate).
#   - Outputs: "#rrggbb" greyscale string, every channel equal.
#
# glyph_for(mass: float) -> Tuple[str, str]:
#   - Outputs: (symbol, color) for an airborne flake of that mass.


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def color_for(mass: float) -> str:
    """Maps a mass to a greyscale hex color."""
    level = int(round(255 * _clamp01((mass + 155) / 255)))
    return f"#{level:02x}{level:02x}{level:02x}"


def glyph_for(mass: float) -> Tuple[str, str]:
    """
    Picks the symbol and color for a flake.

    The heaviest flakes get the snowflake glyph, medium ones a star and
    everything lighter a dot.
    """
    if mass >= FLAKE_MASS_LARGE:
        symbol = FLAKE_GLYPH_LARGE
    elif mass >= FLAKE_MASS_MEDIUM:
        symbol = FLAKE_GLYPH_MEDIUM
    else:
        symbol = FLAKE_GLYPH_SMALL
    return symbol, color_for(mass)


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Converts a "#rrggbb" string into an (r, g, b) tuple."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
