"""Plain single-colour diffusion-limited aggregation on a bounded field."""

from __future__ import annotations

import random
import time
from typing import Optional

# Step directions: the first coordinate changes in the first two, the second in the last two.
_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class ClassicDLA:
    """Particles released at random cells wander until they stick next to the cluster.

    A particle that wanders off the field is moved to a fresh random cell.
    Cells are addressed as (x, y) with ``0 <= x < width`` and ``0 <= y < height``.
    """

    def __init__(
        self,
        width: int = 100,
        height: int = 100,
        rng: Optional[random.Random] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"field dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random(int(time.time()))
        self.occupied: set[tuple[int, int]] = set()

    def __repr__(self) -> str:
        return f"ClassicDLA({self.width}, {self.height}, occupied={len(self.occupied)})"

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _random_cell(self) -> tuple[int, int]:
        return self.rng.randrange(self.width), self.rng.randrange(self.height)

    def is_adjacent(self, x: int, y: int) -> bool:
        """Whether one of the four cells next to (x, y) is occupied."""
        return any((x + dx, y + dy) in self.occupied for dx, dy in _DIRECTIONS)

    def run(self, particles: int = 1000) -> None:
        """Seed the centre cell and let ``particles`` particles aggregate onto it."""
        if particles < 0:
            raise ValueError(f"particle count must not be negative, got {particles}")
        if particles and self.width == 1 and self.height == 1:
            raise ValueError("a 1x1 field leaves no room for particles to stick")

        self.occupied.add((self.width // 2, self.height // 2))
        for _ in range(particles):
            x, y = self._random_cell()
            while True:
                dx, dy = _DIRECTIONS[self.rng.randrange(4)]
                x, y = x + dx, y + dy
                if not self._in_bounds(x, y):
                    x, y = self._random_cell()
                if self.is_adjacent(x, y):
                    self.occupied.add((x, y))
                    break

    def render(self) -> str:
        """Render one line per x value, '#' for occupied cells and ' ' for empty ones."""
        return "".join(
            "".join("#" if (x, y) in self.occupied else " " for y in range(self.height))
            + "\n"
            for x in range(self.width)
        )