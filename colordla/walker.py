"""Random walkers that drift across a grid until they touch a cluster."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from colordla.grid import Color, Grid

# Direction codes drawn from the generator: up, down, left, right.
_MOVES = ((0, -1), (0, 1), (-1, 0), (1, 0))


@dataclass
class Walker:
    """A particle at (x, y) carrying a colour, plus the colours it last saw around it."""

    x: int
    y: int
    color: int
    neighbours: list[int] = field(default_factory=list)

    def step(self, grid: Grid, rng: random.Random, paint: bool = False) -> None:
        """Take one random step, staying on the grid.

        A step that would leave the grid keeps the walker where it is.
        With ``paint`` set, the old cell is cleared and the new one takes
        the walker's colour.
        """
        if paint:
            grid.set(self.x, self.y, Color.EMPTY)
        dx, dy = _MOVES[rng.randrange(4)]
        nx, ny = self.x + dx, self.y + dy
        if grid.in_bounds(nx, ny):
            self.x, self.y = nx, ny
        if paint:
            grid.set(self.x, self.y, self.color)

    def scan_neighbours(self, grid: Grid) -> int:
        """Record the distinct colours of the four adjacent cells; return how many."""
        self.neighbours = []
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nx, ny = self.x + dx, self.y + dy
            if not grid.in_bounds(nx, ny):
                continue
            cell = grid.get(nx, ny)
            if cell != Color.EMPTY and cell not in self.neighbours:
                self.neighbours.append(cell)
        return len(self.neighbours)

    def touches(self, color: int) -> bool:
        """Whether the last scan found a neighbour of the given colour."""
        return color in self.neighbours

    def place(self, grid: Grid) -> None:
        """Fix the walker's colour into the grid at its position."""
        grid.set(self.x, self.y, self.color)


def spawn_at_edge(grid: Grid, color: int, rng: random.Random) -> Walker:
    """Create a walker at a random cell on a randomly chosen edge of the grid."""
    edge = rng.randrange(4)
    if edge == 0:
        return Walker(rng.randrange(grid.width), 0, color)
    if edge == 1:
        return Walker(rng.randrange(grid.width), grid.height - 1, color)
    if edge == 2:
        return Walker(0, rng.randrange(grid.height), color)
    return Walker(grid.width - 1, rng.randrange(grid.height), color)