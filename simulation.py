# simulation.py
"""
Handles the core snowfall simulation.

This module defines the SnowField class, which is responsible for
advancing the scene by one frame: evolving the storm, spawning new
flakes, moving every live flake and handing landed flakes over to the
ground map.
"""
import logging
import numpy as np
from dataclasses import dataclass
from typing import Dict, Any, List

from flake import Flake
from ground import GroundMap
from storm import StormController
from utils import uniform_int

# --- Data Contracts ---
#
# class SnowField:
#   - __init__(self, params: Dict[str, Any], rng: np.random.Generator):
#     - Inputs:
#       - params: Dictionary of simulation parameters from config.json,
#         shared with StormController and GroundMap.
#       - rng: The single seeded generator used for every random draw.
#     - Side Effects: Creates the storm and the ground map.
#
#   - step(self, surface) -> FieldStatus:
#     - Inputs: surface, the DisplaySurface; its dimensions are read
#       fresh on every call.
#     - Outputs: A FieldStatus summary of the frame.
#     - Side Effects: Mutates storm, flakes and ground; draws overlays
#       and pile cells on the surface.
#     - Invariants: Every removed flake has released its overlay. Flakes
#       that reach the bottom row never survive the frame.


@dataclass
class FieldStatus:
    flakes: int
    frames_since_reset: int
    storm_factor: float
    wind: float
    frame: int
    landed: int

    def format(self) -> str:
        return (
            f"flakes: {self.flakes}  storm: {self.storm_factor:.2f}  "
            f"wind: {self.wind:+.2f}  shift: {self.frames_since_reset}  "
            f"landed: {self.landed}"
        )


class SnowField:
    """
    Owns the live flakes, the storm and the ground, and steps them together.
    """
    def __init__(self, params: Dict[str, Any], rng: np.random.Generator):
        """
        Initializes the snow field.

        Args:
            params (Dict[str, Any]): Simulation parameters from config.
            rng (np.random.Generator): Shared random source.
        """
        self.rng = rng
        self.storm = StormController(params, rng)
        self.ground = GroundMap(params)
        self.flakes: List[Flake] = []
        self.frame = 0
        self.landed = 0

        logging.info("SnowField initialized.")

    def reset(self, surface=None) -> None:
        """Drops every flake and restores storm and ground to a fresh start."""
        self.clear(surface)
        self.storm.reset()
        self.ground.reset()
        self.frame = 0
        self.landed = 0

    def clear(self, surface=None) -> None:
        """Releases every live overlay and empties the flake list."""
        if surface is not None:
            for flake in self.flakes:
                flake.release(surface)
        self.flakes = []

    def add_flake(self, x: int, mass: float) -> Flake:
        """Adds a flake at the top row of column x."""
        flake = Flake.spawn(x, mass)
        self.flakes.append(flake)
        return flake

    def _spawn(self, cols: int) -> None:
        # At most one flake per frame.
        if self.rng.random() >= self.storm.factor:
            return
        x = uniform_int(self.rng, 0, cols)
        mass = self.storm.factor * uniform_int(self.rng, 0, 100)
        self.add_flake(x, float(mass))

    def _advance(self, flake: Flake, rows: int, cols: int, surface) -> bool:
        """Moves one flake and reports whether it is still airborne."""
        flake.apply_wind(self.storm.wind, self.storm.wind_max, self.rng)
        flake.apply_jitter(self.rng)
        flake.apply_fall(self.rng)

        if flake.y < rows - 1:
            flake.draw(surface, cols)
            return True

        # Flakes blown off the last usable column are dropped unpiled. A
        # surface that shrank mid-fall still piles on its bottom row.
        if 0 <= flake.x <= cols - 2:
            self.ground.pile(flake.x, min(flake.y, rows - 1), flake.mass, surface)
            self.landed += 1
        flake.release(surface)
        return False

    def step(self, surface) -> FieldStatus:
        """
        Executes one frame of the simulation.
        """
        rows, cols = surface.dimensions()
        self.ground.ensure_size(rows, cols)

        # 1. Let the storm ebb or swell
        self.storm.maybe_advance()

        # 2. Maybe spawn a new flake at the top
        self._spawn(cols)

        # 3. Move, land or redraw every flake, in spawn order
        self.flakes = [f for f in self.flakes if self._advance(f, rows, cols, surface)]

        self.frame += 1
        return self.status()

    def status(self) -> FieldStatus:
        return FieldStatus(
            flakes=len(self.flakes),
            frames_since_reset=self.storm.frames_since_reset,
            storm_factor=self.storm.factor,
            wind=self.storm.wind,
            frame=self.frame,
            landed=self.landed,
        )
