# background.py
"""
Static decorative scenery drawn once beneath the falling snow.

The art is a block of text plus a color per character. Blank characters
are transparent and leave the underlying cell alone.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from constants import FOREGROUND_COLOR


@dataclass
class BackgroundArt:
    lines: List[str]
    colors: Dict[str, str] = field(default_factory=dict)
    default_color: str = FOREGROUND_COLOR

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def width(self) -> int:
        return max((len(line) for line in self.lines), default=0)

    def cells(self) -> Iterator[Tuple[int, int, str, str]]:
        """Yields (row offset, column, glyph, color) for every visible character."""
        for row, line in enumerate(self.lines):
            for col, ch in enumerate(line):
                if ch == " ":
                    continue
                yield row, col, ch, self.colors.get(ch, self.default_color)

    def start_row(self, rows: int) -> int:
        """
        Row at which the art sits flush with the bottom of the grid.

        Raises:
            ValueError: If the art is taller than the grid.
        """
        if self.height > rows:
            msg = (
                f"Configuration error: background art is {self.height} rows tall "
                f"but the display only has {rows} rows."
            )
            logging.critical(msg)
            raise ValueError(msg)
        return rows - self.height


WINTER_VILLAGE = BackgroundArt(
    lines=[
        "       ^                          /\\              ^      ",
        "      /^\\         _____          /  \\            /^\\     ",
        "     /^^^\\       /_____\\        /____\\          /^^^\\    ",
        "    /^^^^^\\      | [] |         | [] |         /^^^^^\\   ",
        "      |||        |  # |         |  # |           |||     ",
    ],
    colors={
        "^": "#2e6b3a",
        "/": "#8a5a3c",
        "\\": "#8a5a3c",
        "_": "#8a5a3c",
        "|": "#6b4a2e",
        "[": "#e8c766",
        "]": "#e8c766",
        "#": "#5a3a22",
    },
)
