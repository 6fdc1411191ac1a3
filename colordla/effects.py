"""Side effects of a walker's contact with a cluster: green seeding and detonations."""

from __future__ import annotations

import random

from colordla.grid import Color, Grid
from colordla.walker import Walker

_GREEN_MAX_STEPS = 100


def _first_occupied_near(grid: Grid, x: int, y: int, radius: int) -> tuple[int, int] | None:
    """Return the first non-empty cell in the square around (x, y), column by column."""
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            nx, ny = x + dx, y + dy
            if grid.in_bounds(nx, ny) and grid.get(nx, ny) != Color.EMPTY:
                return nx, ny
    return None


def _square(x: int, y: int, radius: int):
    """Yield the coordinates of the square of the given radius around (x, y)."""
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            yield x + dx, y + dy


def spawn_green(
    walker: Walker,
    grid: Grid,
    rng: random.Random,
    radius: int = 1,
    probability: float = 0.1,
) -> None:
    """With the given probability, send a green walker through the nearby cluster.

    The green walker starts on the first occupied cell within ``radius`` of
    ``walker`` and wanders for at most a hundred steps. On reaching an empty
    cell it turns every empty cell of the 3x3 block around it purple.
    """
    if rng.random() >= probability:
        return
    start = _first_occupied_near(grid, walker.x, walker.y, radius)
    if start is None:
        return
    green = Walker(start[0], start[1], Color.GREEN)
    for _ in range(_GREEN_MAX_STEPS):
        green.step(grid, rng)
        if grid.get(green.x, green.y) == Color.EMPTY:
            for nx, ny in _square(green.x, green.y, 1):
                if grid.in_bounds(nx, ny) and grid.get(nx, ny) == Color.EMPTY:
                    grid.set(nx, ny, Color.PURPLE)
            return


def detonate(
    grid: Grid,
    x: int,
    y: int,
    rng: random.Random,
    radius: int = 1,
    p_detonate: float = 1.0,
    p_purple: float = 0.2,
) -> None:
    """Blast the area around (x, y).

    With probability ``p_detonate`` every non-yellow cell within ``radius``
    is cleared. Then each red or blue cell within ``radius + 1`` turns purple
    with probability ``p_purple``. If the blast cleared anything, the centre
    cell is cleared too, whatever it held.
    """
    if not grid.in_bounds(x, y):
        raise IndexError(f"cell ({x}, {y}) outside {grid.width}x{grid.height} grid")

    destroyed = False
    if rng.random() < p_detonate:
        for nx, ny in _square(x, y, radius):
            if grid.in_bounds(nx, ny) and grid.get(nx, ny) != Color.YELLOW:
                grid.set(nx, ny, Color.EMPTY)
                destroyed = True

    for nx, ny in _square(x, y, radius + 1):
        if not grid.in_bounds(nx, ny):
            continue
        if grid.get(nx, ny) in (Color.RED, Color.BLUE) and rng.random() < p_purple:
            grid.set(nx, ny, Color.PURPLE)

    if destroyed:
        grid.set(x, y, Color.EMPTY)