# flake.py
"""
A single airborne snowflake.

This module defines the Flake value type together with its per-frame
motion rules (wind, jitter, fall) and its on-screen overlay handling.
Mass drives everything: heavier flakes jitter less and fall more
reliably.
"""
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from colors import glyph_for
from utils import uniform_int

# --- Data Contracts ---
#
# class Flake:
#   - x, y: int grid column and row (y grows downward).
#   - mass: float, roughly 0..200 depending on storm intensity at spawn.
#   - glyph, color: chosen once at spawn from the mass.
#   - handle: Optional overlay handle owned by this flake only.
#   - Invariants: A set handle always belongs to an airborne flake that
#     was in view on the previous render. release() clears it at most once.
#
#   - apply_wind / apply_jitter / apply_fall(...) -> None:
#     - Side Effects: Mutate x or y by at most one cell.
#
#   - draw(self, surface, cols: int) -> None:
#     - Side Effects: Creates, moves or releases the overlay on the surface.


@dataclass
class Flake:
    x: int
    y: int
    mass: float
    glyph: str
    color: str
    handle: Optional[Any] = None

    @classmethod
    def spawn(cls, x: int, mass: float) -> "Flake":
        """Creates a flake at the top row with the glyph for its mass."""
        glyph, color = glyph_for(mass)
        return cls(x=x, y=0, mass=mass, glyph=glyph, color=color)

    def apply_wind(self, wind: float, wind_max: float, rng: np.random.Generator) -> None:
        """Drifts one column downwind, more often the stronger the wind."""
        if wind == 0 or wind_max <= 0:
            return
        if rng.uniform(0, wind_max) <= abs(wind):
            self.x += 1 if wind > 0 else -1

    def apply_jitter(self, rng: np.random.Generator) -> None:
        """
        Random sideways wobble.

        Two independent gates: a mass check, so heavy flakes rarely
        wobble, and a damping check that passes about two times in three.
        """
        if uniform_int(rng, 0, 100) > self.mass and uniform_int(rng, 0, 2) > 0:
            self.x += 1 if rng.integers(0, 2) else -1

    def apply_fall(self, rng: np.random.Generator) -> None:
        """Drops one row; the gate (100 - mass) / 3 shrinks as mass grows."""
        if uniform_int(rng, 0, 100) > (100 - self.mass) / 3:
            self.y += 1

    def draw(self, surface, cols: int) -> None:
        """
        Places the flake's overlay at its current cell.

        A flake blown past the side edges loses its overlay but stays
        alive, so it can drift back into view later.
        """
        if not 0 <= self.x <= cols - 1:
            self.release(surface)
            return
        if self.handle is not None:
            surface.move_overlay(self.handle, self.y, self.x)
        else:
            self.handle = surface.create_overlay(self.y, self.x, self.glyph, self.color)

    def release(self, surface) -> None:
        """Drops the overlay, if any. Safe to call repeatedly."""
        if self.handle is None:
            return
        surface.release_overlay(self.handle)
        self.handle = None
