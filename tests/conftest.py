"""
Shared fakes for the snowfall tests.
"""

import itertools

import pytest


class FakeSurface:
    """Records every DisplaySurface call instead of drawing."""

    def __init__(self, rows=10, cols=20):
        self.rows = rows
        self.cols = cols
        self.cells = {}
        self.overlays = {}
        self.created = []
        self.released = []
        self.backgrounds = []
        self.status = None
        self.clears = 0
        self._handles = itertools.count(1)

    def dimensions(self):
        return self.rows, self.cols

    def set_cell(self, row, col, glyph, color):
        self.cells[(row, col)] = (glyph, color)

    def create_overlay(self, row, col, glyph, color):
        handle = next(self._handles)
        self.overlays[handle] = (row, col, glyph, color)
        self.created.append(handle)
        return handle

    def move_overlay(self, handle, row, col):
        _, _, glyph, color = self.overlays[handle]
        self.overlays[handle] = (row, col, glyph, color)

    def release_overlay(self, handle):
        self.released.append(handle)
        self.overlays.pop(handle, None)

    def clear(self):
        self.clears += 1
        self.cells.clear()
        self.overlays.clear()

    def draw_background(self, art, start_row):
        self.backgrounds.append((art, start_row))
        for row, col, glyph, color in art.cells():
            self.set_cell(start_row + row, col, glyph, color)

    def set_status(self, text):
        self.status = text


class FakeScheduler:
    """Hands out timer handles and records cancellations."""

    def __init__(self):
        self.scheduled = []
        self.cancelled = []
        self._handles = itertools.count(1)

    def schedule(self, interval_ms, callback):
        handle = next(self._handles)
        self.scheduled.append((handle, interval_ms, callback))
        return handle

    def cancel(self, handle):
        self.cancelled.append(handle)


class ScriptedRng:
    """
    Deterministic stand-in for numpy's Generator.

    By default integer draws over [0, 100] return 100 and every other
    draw returns its lower bound, so flakes fall every frame and never
    jitter, wind always pushes, and spawns land in column 0.
    """

    def __init__(self, random_value=0.5):
        self.random_value = random_value

    def random(self):
        return self.random_value

    def integers(self, low, high=None, endpoint=False):
        if endpoint and high == 100:
            return 100
        return low

    def uniform(self, low=0.0, high=1.0):
        return low


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def scripted_rng():
    return ScriptedRng()


@pytest.fixture
def calm_params():
    """Fixed storm (factor 1.0, wind 0) that does not shift during a test."""
    return {
        'storm_interval': 1000,
        'storm_initial_factor': 1.0,
        'wind_max': 0.5,
        'pile_factor': 100,
    }
