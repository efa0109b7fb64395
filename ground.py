# ground.py
"""
Accumulated snow on the ground.

This module defines the GroundMap class, which stores how much mass has
landed on every grid cell in a NumPy array and turns that mass into a
pile-density glyph and color. Once a cell is full, further snow stacks
onto the cell above it.
"""
import logging
import numpy as np
from numba import jit
from typing import Dict, Any, List, Optional, Sequence, Tuple

from colors import color_for
from constants import DEFAULT_PILE_FACTOR, DEFAULT_PILE_GLYPHS, PILE_SATURATION

# --- Data Contracts ---
#
# class GroundMap:
#   - __init__(self, params: Dict[str, Any], rows: int = 0, cols: int = 0):
#     - Inputs:
#       - params: Dictionary of simulation parameters from config.json.
#         - "pile_factor": float, divisor from flake mass to pile mass.
#         - "pile_glyphs": List of [fraction, glyph] pairs, ascending.
#     - Side Effects: Allocates self.masses, a float64 array (rows, cols).
#
#   - pile(self, x: int, y: int, mass: float, surface=None) -> Optional[Tuple[int, int, float]]:
#     - Outputs: The landing cell (x, y) and its new accumulated mass.
#     - Side Effects: Stores the new mass and, given a surface, writes
#       the pile glyph and color into the landing cell.
#     - Invariants: Stored masses never decrease. A cell at or above
#       PILE_SATURATION never receives more snow unless it is row 0.


@jit(nopython=True)
def _find_landing_row_numba(masses, x, y, saturation):
    """
    Numba-jitted climb from (x, y) to the first cell that is not full.

    Row 0 is the last resort; it receives the snow even when saturated.
    """
    while y > 0 and masses[y, x] >= saturation:
        y -= 1
    return y


class GroundMap:
    """
    Per-cell accumulated snow mass with pile glyph rendering.
    """
    def __init__(self, params: Dict[str, Any], rows: int = 0, cols: int = 0):
        self.pile_factor = float(params.get('pile_factor', DEFAULT_PILE_FACTOR))
        if self.pile_factor <= 0:
            msg = f"Configuration error: pile_factor must be positive, got {self.pile_factor}."
            logging.critical(msg)
            raise ValueError(msg)

        table = params.get('pile_glyphs') or DEFAULT_PILE_GLYPHS
        self.thresholds, self.glyphs = self._parse_glyph_table(table)

        self.masses = np.zeros((max(rows, 0), max(cols, 0)), dtype=np.float64)

        logging.info(
            f"GroundMap initialized: pile factor {self.pile_factor:.1f}, "
            f"{len(self.glyphs)} pile glyph levels."
        )

    @staticmethod
    def _parse_glyph_table(table: Sequence[Sequence[Any]]) -> Tuple[np.ndarray, List[str]]:
        try:
            fractions = [float(entry[0]) for entry in table]
            glyphs = [str(entry[1]) for entry in table]
        except (TypeError, ValueError, IndexError) as e:
            msg = f"Configuration error: pile_glyphs must be a list of [fraction, glyph] pairs ({e})."
            logging.critical(msg)
            raise ValueError(msg) from e

        if not fractions or any(b <= a for a, b in zip(fractions, fractions[1:])):
            msg = "Configuration error: pile_glyphs must be non-empty and strictly ascending."
            logging.critical(msg)
            raise ValueError(msg)
        return np.array(fractions, dtype=np.float64), glyphs

    @property
    def shape(self) -> Tuple[int, int]:
        return self.masses.shape

    def ensure_size(self, rows: int, cols: int) -> None:
        """Grows the mass grid to at least (rows, cols). Never shrinks."""
        cur_rows, cur_cols = self.masses.shape
        if rows <= cur_rows and cols <= cur_cols:
            return
        new_rows, new_cols = max(rows, cur_rows), max(cols, cur_cols)
        self.masses = np.pad(
            self.masses,
            ((0, new_rows - cur_rows), (0, new_cols - cur_cols)),
            mode='constant'
        )
        logging.debug(f"GroundMap grown to {new_rows}x{new_cols}.")

    def reset(self) -> None:
        """Clears all accumulated snow."""
        self.masses.fill(0.0)

    def mass_at(self, x: int, y: int) -> float:
        rows, cols = self.masses.shape
        if 0 <= x < cols and 0 <= y < rows:
            return float(self.masses[y, x])
        return 0.0

    def glyph_for_mass(self, mass: float) -> str:
        """Returns the glyph of the first threshold at or above mass / 100."""
        index = int(np.searchsorted(self.thresholds, mass / PILE_SATURATION, side='left'))
        return self.glyphs[min(index, len(self.glyphs) - 1)]

    def pile(self, x: int, y: int, mass: float, surface=None) -> Optional[Tuple[int, int, float]]:
        """
        Deposits a landed flake's mass, climbing past full cells.

        Args:
            x (int): Column the flake landed in.
            y (int): Row the flake landed in.
            mass (float): The flake's mass before the pile factor.
            surface: Optional display surface to draw the pile cell on.

        Returns:
            Optional[Tuple[int, int, float]]: The landing cell and its new
            mass, or None when x lies left of the grid.
        """
        if x < 0:
            return None
        y = max(y, 0)
        self.ensure_size(y + 1, x + 1)
        y = int(_find_landing_row_numba(self.masses, x, y, PILE_SATURATION))

        new_mass = self.masses[y, x] + mass / self.pile_factor
        self.masses[y, x] = new_mass

        if surface is not None:
            surface.set_cell(
                y, x,
                self.glyph_for_mass(new_mass),
                color_for(min(new_mass, PILE_SATURATION))
            )
        logging.debug(f"Snow piled at ({x}, {y}): mass {new_mass:.3f}.")
        return x, y, float(new_mass)
