# constants.py
"""
Application-level constants.

These values are static and do not change between simulation runs.
They are fundamental to the application's framework, such as glyph
tables, storm bounds, or default window and cell sizes that are not
part of the experimental configuration.
"""

# Visualization settings
FPS = 60
DEFAULT_CELL_SIZE = 16
DEFAULT_COLUMNS = 80
DEFAULT_ROWS = 30
DEFAULT_FONT_NAME = "dejavusansmono"
# One grid row at the bottom of the window is reserved for the status line.
STATUS_ROWS = 1
BACKGROUND_COLOR = "#181818"  # Dark Gray
FOREGROUND_COLOR = "#c0c0c0"

# --- Scene timing ---
FRAME_INTERVAL_MS = 90

# --- Flake glyphs ---
# Checked most-restrictive-first: mass >= 90, then mass >= 50, else the dot.
FLAKE_GLYPH_LARGE = "❄"
FLAKE_GLYPH_MEDIUM = "*"
FLAKE_GLYPH_SMALL = "."
FLAKE_MASS_LARGE = 90
FLAKE_MASS_MEDIUM = 50

# --- Storm bounds ---
STORM_FACTOR_MIN = 0.1
STORM_FACTOR_MAX = 2.0
STORM_FACTOR_STEP = 0.1
WIND_STEP = 0.05
DEFAULT_WIND_MAX = 0.5
# Range used when the storm interval policy is "random".
STORM_INTERVAL_RANDOM_RANGE = (1, 100)
# Range used when the initial storm factor policy is "random".
STORM_INITIAL_RANDOM_RANGE = (0.1, 1.0)

# --- Ground piling ---
DEFAULT_PILE_FACTOR = 100.0
# Accumulated mass at which a ground cell is full and snow stacks upward.
PILE_SATURATION = 100.0

# Ascending (fraction, glyph) pairs, blank to full block.
DEFAULT_PILE_GLYPHS = [
    (0.0, " "),
    (0.03125, "."),
    (0.0625, "_"),
    (0.125, "▁"),
    (0.25, "▂"),
    (0.375, "▃"),
    (0.5, "▄"),
    (0.625, "▅"),
    (0.75, "▆"),
    (0.875, "▇"),
    (1.0, "█"),
]
