# storm.py
"""
Global storm state: spawn intensity and wind.

The StormController performs a slow random walk. Every `reset_threshold`
frames the intensity and the wind each take one small step up or down,
so the storm ebbs and flows instead of jumping between extremes.
"""
import logging
import numpy as np
from typing import Dict, Any, Union

from constants import (
    STORM_FACTOR_MIN, STORM_FACTOR_MAX, STORM_FACTOR_STEP, WIND_STEP,
    DEFAULT_WIND_MAX, STORM_INTERVAL_RANDOM_RANGE, STORM_INITIAL_RANDOM_RANGE
)
from utils import uniform_int

RANDOM_POLICY = "random"

# --- Data Contracts ---
#
# class StormController:
#   - __init__(self, params: Dict[str, Any], rng: np.random.Generator):
#     - Inputs:
#       - params: Dictionary of simulation parameters from config.json.
#         - "storm_interval": int or "random"
#         - "storm_initial_factor": float or "random"
#         - "wind_max": float
#       - rng: The shared random generator.
#     - Side Effects: Rolls the initial factor and reset threshold.
#
#   - maybe_advance(self) -> None:
#     - Side Effects: Either increments frames_since_reset or, once the
#       threshold is reached, re-rolls it and steps factor and wind.
#     - Invariants: STORM_FACTOR_MIN <= factor <= STORM_FACTOR_MAX and
#       -wind_max <= wind <= wind_max after every call.


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class StormController:
    """
    Evolves the storm factor and wind at frame boundaries.
    """
    def __init__(self, params: Dict[str, Any], rng: np.random.Generator):
        self.rng = rng
        self.interval_policy: Union[int, str] = params.get('storm_interval', RANDOM_POLICY)
        self.initial_factor_policy: Union[float, str] = params.get('storm_initial_factor', RANDOM_POLICY)
        self.wind_max = float(params.get('wind_max', DEFAULT_WIND_MAX))

        if self.wind_max < 0:
            msg = f"Configuration error: wind_max must be non-negative, got {self.wind_max}."
            logging.critical(msg)
            raise ValueError(msg)
        self._check_policy('storm_interval', self.interval_policy, int)
        self._check_policy('storm_initial_factor', self.initial_factor_policy, (int, float))

        self.factor = STORM_FACTOR_MIN
        self.wind = 0.0
        self.frames_since_reset = 0
        self.reset_threshold = 1
        self.reset()

        logging.info(
            f"StormController initialized: factor={self.factor:.2f}, "
            f"wind_max={self.wind_max:.2f}, interval policy={self.interval_policy}."
        )

    @staticmethod
    def _check_policy(name: str, policy: Any, numeric_type) -> None:
        if policy == RANDOM_POLICY:
            return
        if isinstance(policy, bool) or not isinstance(policy, numeric_type) or policy <= 0:
            msg = (
                f"Configuration error: {name} must be a positive number or "
                f"'{RANDOM_POLICY}', got {policy!r}."
            )
            logging.critical(msg)
            raise ValueError(msg)

    def _roll_threshold(self) -> int:
        if self.interval_policy == RANDOM_POLICY:
            low, high = STORM_INTERVAL_RANDOM_RANGE
            return uniform_int(self.rng, low, high)
        return int(self.interval_policy)

    def _roll_initial_factor(self) -> float:
        if self.initial_factor_policy == RANDOM_POLICY:
            low, high = STORM_INITIAL_RANDOM_RANGE
            return round(float(self.rng.uniform(low, high)), 1)
        return float(self.initial_factor_policy)

    def reset(self) -> None:
        """Restores the storm to its starting state."""
        self.factor = _clamp(self._roll_initial_factor(), STORM_FACTOR_MIN, STORM_FACTOR_MAX)
        self.wind = 0.0
        self.frames_since_reset = 0
        self.reset_threshold = self._roll_threshold()

    def maybe_advance(self) -> None:
        """
        Advances the storm by one frame.
        """
        if self.frames_since_reset < self.reset_threshold:
            self.frames_since_reset += 1
            return

        self.reset_threshold = self._roll_threshold()

        factor_step = STORM_FACTOR_STEP if self.rng.integers(0, 2) else -STORM_FACTOR_STEP
        self.factor = _clamp(round(self.factor + factor_step, 2), STORM_FACTOR_MIN, STORM_FACTOR_MAX)

        wind_step = WIND_STEP if self.rng.integers(0, 2) else -WIND_STEP
        self.wind = _clamp(round(self.wind + wind_step, 2), -self.wind_max, self.wind_max)

        self.frames_since_reset = 0
        logging.debug(
            f"Storm shifted: factor={self.factor:.2f}, wind={self.wind:+.2f}, "
            f"next shift in {self.reset_threshold} frames."
        )
