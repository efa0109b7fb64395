# visualization.py
"""
Handles the display of the snowfall using Pygame.

PygameGridSurface is a character-cell grid: every cell holds a glyph and
a foreground color, and flakes float above the cells as overlays.
PygameScheduler drives periodic callbacks off pygame's event timers.
"""
import itertools
import logging
import pygame
from typing import Callable, Dict, Optional, Tuple

from background import BackgroundArt
from colors import hex_to_rgb
from constants import (
    BACKGROUND_COLOR, DEFAULT_CELL_SIZE, DEFAULT_COLUMNS, DEFAULT_FONT_NAME,
    DEFAULT_ROWS, FOREGROUND_COLOR, STATUS_ROWS
)

# --- Data Contracts ---
#
# class PygameGridSurface:
#   - __init__(self, vis_params: Dict):
#     - Inputs:
#       - vis_params: The "visualization" section of config.json.
#         - "cell_size", "columns", "rows": int
#         - "foreground_color", "background_color": "#rrggbb"
#         - "font_name": str
#     - Side Effects: Initializes Pygame and opens a resizable window.
#
#   - dimensions() -> Tuple[int, int]: current (rows, cols) of the grid.
#   - set_cell / create_overlay / move_overlay / release_overlay / clear
#     - Invariants: Coordinates outside the grid are kept but not drawn.
#       Releasing an unknown handle is a no-op.
#
# class PygameScheduler:
#   - schedule(interval_ms: int, callback) -> int: a custom event type.
#   - cancel(handle: int) -> None: disarms the timer; idempotent.
#   - dispatch(event) -> bool: runs the callback bound to event.type.

Cell = Tuple[str, str]


class PygameGridSurface:
    """
    Renders a grid of colored characters plus a status line.
    """
    def __init__(self, vis_params: Optional[dict] = None):
        vis_params = vis_params if vis_params is not None else {}
        pygame.init()
        pygame.font.init()

        self.cell_size = vis_params.get('cell_size', DEFAULT_CELL_SIZE)
        self.fg_color = vis_params.get('foreground_color', FOREGROUND_COLOR)
        self.bg_rgb = hex_to_rgb(vis_params.get('background_color', BACKGROUND_COLOR))

        cols = vis_params.get('columns', DEFAULT_COLUMNS)
        rows = vis_params.get('rows', DEFAULT_ROWS)
        width, height = cols * self.cell_size, (rows + STATUS_ROWS) * self.cell_size
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Snowfall")

        font_name = vis_params.get('font_name', DEFAULT_FONT_NAME)
        try:
            self.font = pygame.font.SysFont(font_name, self.cell_size)
        except pygame.error:
            logging.warning(f"Font '{font_name}' not found, falling back to the default font.")
            self.font = pygame.font.Font(None, self.cell_size)

        self.rows, self.cols = rows, cols
        self.cells: Dict[Tuple[int, int], Cell] = {}
        self.overlays: Dict[int, Tuple[int, int, str, str]] = {}
        self.status_text = ""
        self._handles = itertools.count(1)
        self._glyph_cache: Dict[Cell, pygame.Surface] = {}

        logging.info(f"PygameGridSurface initialized ({cols}x{rows} cells, {width}x{height}px).")

    # --- DisplaySurface contract ---

    def dimensions(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def set_cell(self, row: int, col: int, glyph: str, color: str) -> None:
        self.cells[(row, col)] = (glyph, color)

    def create_overlay(self, row: int, col: int, glyph: str, color: str) -> int:
        handle = next(self._handles)
        self.overlays[handle] = (row, col, glyph, color)
        return handle

    def move_overlay(self, handle: int, row: int, col: int) -> None:
        entry = self.overlays.get(handle)
        if entry is None:
            return
        self.overlays[handle] = (row, col, entry[2], entry[3])

    def release_overlay(self, handle: int) -> None:
        self.overlays.pop(handle, None)

    def clear(self) -> None:
        self.cells.clear()
        self.overlays.clear()
        self.status_text = ""

    def draw_background(self, art: BackgroundArt, start_row: int) -> None:
        for row, col, glyph, color in art.cells():
            self.set_cell(start_row + row, col, glyph, color)

    def set_status(self, text: str) -> None:
        self.status_text = text

    # --- Window handling ---

    def handle_resize(self, width: int, height: int) -> None:
        """Recomputes the grid size after the window was resized."""
        self.cols = max(1, width // self.cell_size)
        self.rows = max(1, height // self.cell_size - STATUS_ROWS)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        logging.info(f"Display resized to {self.cols}x{self.rows} cells.")

    def _glyph_surface(self, glyph: str, color: str) -> pygame.Surface:
        key = (glyph, color)
        surf = self._glyph_cache.get(key)
        if surf is None:
            surf = self.font.render(glyph, True, hex_to_rgb(color))
            self._glyph_cache[key] = surf
        return surf

    def _blit_cell(self, row: int, col: int, glyph: str, color: str) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            return
        surf = self._glyph_surface(glyph, color)
        rect = surf.get_rect(center=(
            col * self.cell_size + self.cell_size // 2,
            row * self.cell_size + self.cell_size // 2
        ))
        self.screen.blit(surf, rect)

    def render(self) -> None:
        """Draws cells, then overlays, then the status line, and flips."""
        self.screen.fill(self.bg_rgb)
        for (row, col), (glyph, color) in self.cells.items():
            self._blit_cell(row, col, glyph, color)
        for row, col, glyph, color in self.overlays.values():
            self._blit_cell(row, col, glyph, color)

        if self.status_text:
            text_surf = self.font.render(self.status_text, True, hex_to_rgb(self.fg_color))
            self.screen.blit(text_surf, (0, self.rows * self.cell_size))
        pygame.display.flip()

    def close(self) -> None:
        """Shuts down Pygame."""
        pygame.font.quit()
        pygame.quit()


class PygameScheduler:
    """
    Periodic callbacks on top of pygame.time.set_timer.

    Each scheduled callback gets its own custom event type; the main loop
    hands events to dispatch().
    """
    def __init__(self):
        self._callbacks: Dict[int, Callable[[], object]] = {}

    def schedule(self, interval_ms: int, callback: Callable[[], object]) -> int:
        event_type = pygame.event.custom_type()
        self._callbacks[event_type] = callback
        pygame.time.set_timer(event_type, interval_ms)
        logging.debug(f"Timer {event_type} armed every {interval_ms} ms.")
        return event_type

    def cancel(self, handle: int) -> None:
        if self._callbacks.pop(handle, None) is None:
            return
        pygame.time.set_timer(handle, 0)
        logging.debug(f"Timer {handle} cancelled.")

    def cancel_all(self) -> None:
        for handle in list(self._callbacks):
            self.cancel(handle)

    def dispatch(self, event: pygame.event.Event) -> bool:
        """Runs the callback for a timer event. Returns False for other events."""
        callback = self._callbacks.get(event.type)
        if callback is None:
            return False
        callback()
        return True
