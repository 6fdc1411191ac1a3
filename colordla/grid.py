"""Colour grid used by the aggregation simulations, with text and PPM output."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterator, Union

_RESET = "\033[0m"


class Color(enum.IntEnum):
    """Cell values; the numbers double as ANSI foreground colour codes."""

    EMPTY = 0
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    PURPLE = 35


_LIGHT_RGB = {
    Color.RED: (255, 0, 0),
    Color.BLUE: (0, 0, 255),
    Color.PURPLE: (128, 0, 128),
    Color.YELLOW: (255, 255, 0),
}
_LIGHT_DEFAULT = (173, 216, 230)

_DARK_RGB = {
    Color.EMPTY: (0, 0, 0),
    Color.RED: (255, 0, 0),
    Color.GREEN: (0, 255, 0),
    Color.YELLOW: (255, 255, 0),
    Color.BLUE: (0, 0, 255),
    Color.PURPLE: (0, 0, 0),
}
_DARK_DEFAULT = (128, 128, 128)

_LETTERS = {
    Color.RED: "R",
    Color.BLUE: "B",
    Color.PURPLE: "P",
    Color.YELLOW: "Y",
}


class Palette(enum.Enum):
    """Mapping from cell values to RGB triples for image export."""

    LIGHT = "light"
    DARK = "dark"

    def rgb(self, cell: int) -> tuple[int, int, int]:
        """Return the RGB triple for a cell value."""
        if self is Palette.LIGHT:
            return _LIGHT_RGB.get(cell, _LIGHT_DEFAULT)
        return _DARK_RGB.get(cell, _DARK_DEFAULT)


@dataclass
class ColorCounts:
    """How many cells of each tracked colour a grid holds."""

    red: int = 0
    yellow: int = 0
    blue: int = 0
    purple: int = 0

    def format(self) -> str:
        """Return the statistics block as printed after an export."""
        return (
            "__STATS___\n"
            f"RED:{self.red}\n"
            f"BLUE:{self.blue}\n"
            f"PURPLE:{self.purple}\n"
            f"YELLOW:{self.yellow}\n"
        )


class Grid:
    """A width x height field of integer cells, stored row by row, all empty at first."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells: list[int] = [Color.EMPTY] * (width * height)

    def __repr__(self) -> str:
        return f"Grid({self.width}, {self.height}, occupied={self.occupied()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.cells == other.cells
        )

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        """Whether (x, y) lies on the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        """Return the value at (x, y)."""
        return self.cells[self._index(x, y)]

    def set(self, x: int, y: int, value: int) -> None:
        """Store a value at (x, y)."""
        self.cells[self._index(x, y)] = value

    def seed_center(self, color: int = Color.YELLOW) -> None:
        """Place the two-cell starting seed at the centre of the grid."""
        cx, cy = self.width // 2, self.height // 2
        self.set(cx, cy, color)
        self.set(cx + 1, cy, color)

    def occupied(self) -> int:
        """Number of non-empty cells."""
        return sum(1 for cell in self.cells if cell != Color.EMPTY)

    def merge_max(self, other: Grid) -> None:
        """Combine another grid of the same size into this one, keeping the larger value per cell."""
        if (other.width, other.height) != (self.width, self.height):
            raise ValueError(
                f"cannot merge {other.width}x{other.height} grid "
                f"into {self.width}x{self.height} grid"
            )
        self.cells = [max(a, b) for a, b in zip(self.cells, other.cells)]

    def count_colors(self) -> ColorCounts:
        """Count the red, yellow, blue and purple cells."""
        counts = ColorCounts()
        for cell in self.cells:
            if cell == Color.RED:
                counts.red += 1
            elif cell == Color.BLUE:
                counts.blue += 1
            elif cell == Color.PURPLE:
                counts.purple += 1
            elif cell == Color.YELLOW:
                counts.yellow += 1
        return counts

    def _rows(self) -> Iterator[list[int]]:
        for start in range(0, len(self.cells), self.width):
            yield self.cells[start:start + self.width]

    def render(self) -> str:
        """Render the grid as lettered, ANSI-coloured text, two characters per cell."""
        lines = []
        for row in self._rows():
            parts = []
            for cell in row:
                if cell == Color.EMPTY:
                    parts.append("  ")
                elif cell in _LETTERS:
                    parts.append(f"\033[{int(cell)}m{_LETTERS[cell]} {_RESET}")
                else:
                    parts.append("? ")
            lines.append("".join(parts) + "\n")
        return "".join(lines)

    def render_colored(self) -> str:
        """Render the grid as bold '#' marks in each cell's own ANSI colour."""
        lines = []
        for row in self._rows():
            line = "".join(
                f"\033[1;{int(cell)}m#{_RESET}" if cell != Color.EMPTY else " "
                for cell in row
            )
            lines.append(line + "\n")
        return "".join(lines)

    def to_ppm(self, palette: Palette = Palette.LIGHT) -> str:
        """Return the grid as a plain-text (P3) PPM image."""
        out = [f"P3\n{self.width} {self.height}\n255\n"]
        for row in self._rows():
            out.append("".join("%d %d %d " % palette.rgb(cell) for cell in row))
            out.append("\n")
        return "".join(out)

    def export_ppm(
        self,
        path: Union[str, PathLike],
        palette: Palette = Palette.LIGHT,
    ) -> ColorCounts:
        """Write the grid to a PPM file and return its colour counts."""
        Path(path).write_text(self.to_ppm(palette), encoding="ascii")
        return self.count_colors()