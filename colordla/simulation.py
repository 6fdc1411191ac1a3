"""Coloured diffusion-limited aggregation: serial, threaded and partitioned runs."""

from __future__ import annotations

import itertools
import random
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

from colordla.effects import detonate, spawn_green
from colordla.grid import Color, Grid
from colordla.walker import spawn_at_edge

_CHUNK = 10
_SEED_STRIDE = 1999


@dataclass(frozen=True)
class Rules:
    """Parameters that steer a run.

    Walkers in the first half of a run detonate with the ``early_*``
    settings, the rest with the ``late_*`` ones. ``paint`` makes a walker
    mark its current cell as it moves. ``max_steps`` bounds each walk;
    ``None`` lets a walker wander until it touches a cluster.
    """

    paint: bool = True
    early_radius: int = 1
    early_p_detonate: float = 1.0
    early_p_purple: float = 0.2
    late_radius: int = 1
    late_p_detonate: float = 0.4
    late_p_purple: float = 0.1
    green_radius: int = 1
    green_probability: float = 0.1
    max_steps: Optional[int] = None


_SERIAL_RULES = Rules()
_PARALLEL_RULES = Rules(paint=False, late_p_purple=0.2)


def _time_seed() -> int:
    return int(time.time())


def _check_run(grid: Grid, walkers: int, rules: Rules) -> None:
    if walkers < 0:
        raise ValueError(f"walker count must not be negative, got {walkers}")
    if rules.max_steps is not None and rules.max_steps < 0:
        raise ValueError(f"max_steps must not be negative, got {rules.max_steps}")
    if walkers and rules.max_steps is None and grid.occupied() == 0:
        raise ValueError("grid has no cluster to aggregate on; walkers would never stop")


def _walk(grid: Grid, index: int, total: int, rng: random.Random, rules: Rules) -> None:
    """Release walker number ``index`` and let it wander until it interacts."""
    color = Color.RED if index % 2 == 0 else Color.BLUE
    walker = spawn_at_edge(grid, color, rng)
    steps = itertools.count() if rules.max_steps is None else range(rules.max_steps)
    for _ in steps:
        walker.step(grid, rng, paint=rules.paint)
        if not walker.scan_neighbours(grid):
            continue
        if (
            walker.touches(Color.YELLOW)
            or walker.touches(Color.PURPLE)
            or walker.touches(walker.color)
        ):
            walker.place(grid)
            spawn_green(walker, grid, rng, rules.green_radius, rules.green_probability)
        elif index < total // 2:
            detonate(
                grid, walker.x, walker.y, rng,
                rules.early_radius, rules.early_p_detonate, rules.early_p_purple,
            )
        else:
            detonate(
                grid, walker.x, walker.y, rng,
                rules.late_radius, rules.late_p_detonate, rules.late_p_purple,
            )
        return


def generate_dla(
    grid: Grid,
    walkers: int,
    rng: Optional[random.Random] = None,
    rules: Optional[Rules] = None,
) -> None:
    """Release ``walkers`` walkers one after another onto ``grid``.

    Even-numbered walkers are red, odd-numbered ones blue. A walker that
    touches yellow, purple or its own colour joins the cluster; otherwise
    it detonates where it stands.
    """
    rules = rules or _SERIAL_RULES
    rng = rng if rng is not None else random.Random(_time_seed())
    _check_run(grid, walkers, rules)
    for index in range(walkers):
        _walk(grid, index, walkers, rng, rules)


def generate_threaded(
    grid: Grid,
    walkers: int,
    threads: int,
    seed: Optional[int] = None,
    rules: Optional[Rules] = None,
) -> float:
    """Run the walkers on ``threads`` threads sharing one grid; return seconds taken.

    Threads take walkers in chunks of ten as they become free. Thread ``n``
    draws from a generator seeded with ``seed ^ ((n + 1) * 1999)``.
    """
    if threads < 1:
        raise ValueError(f"thread count must be positive, got {threads}")
    rules = rules or _PARALLEL_RULES
    base = _time_seed() if seed is None else seed
    _check_run(grid, walkers, rules)

    chunks = iter(range(0, walkers, _CHUNK))
    lock = threading.Lock()

    def work(thread_num: int) -> None:
        rng = random.Random(base ^ ((thread_num + 1) * _SEED_STRIDE))
        while True:
            with lock:
                start = next(chunks, None)
            if start is None:
                return
            for index in range(start, min(start + _CHUNK, walkers)):
                _walk(grid, index, walkers, rng, rules)

    started = time.perf_counter()
    with ThreadPoolExecutor(max_workers=threads) as pool:
        futures = [pool.submit(work, n) for n in range(threads)]
        for future in futures:
            future.result()
    return time.perf_counter() - started


def partition_walkers(total: int, parts: int, rank: int) -> range:
    """Return the block of walker indices that worker ``rank`` of ``parts`` handles.

    Blocks are contiguous; the first ``total % parts`` workers take one extra.
    """
    if total < 0:
        raise ValueError(f"walker count must not be negative, got {total}")
    if parts < 1:
        raise ValueError(f"number of parts must be positive, got {parts}")
    if not 0 <= rank < parts:
        raise ValueError(f"rank {rank} outside 0..{parts - 1}")
    share, remainder = divmod(total, parts)
    start = rank * share + min(rank, remainder)
    end = start + share + (1 if rank < remainder else 0)
    return range(start, end)


def generate_distributed(
    width: int,
    height: int,
    walkers: int,
    processes: int,
    seed: Optional[int] = None,
    rules: Optional[Rules] = None,
) -> Grid:
    """Split the walkers among independent workers and merge their grids.

    Each worker grows its own seeded copy of the grid from its block of
    walkers, drawing from a generator seeded with
    ``seed ^ ((rank + 1) * 1999)``. The result keeps, for every cell, the
    largest value any worker produced.
    """
    if processes < 1:
        raise ValueError(f"process count must be positive, got {processes}")
    rules = rules or _PARALLEL_RULES
    base = _time_seed() if seed is None else seed

    result = Grid(width, height)
    for rank in range(processes):
        local = Grid(width, height)
        local.seed_center(Color.YELLOW)
        _check_run(local, walkers, rules)
        rng = random.Random(base ^ ((rank + 1) * _SEED_STRIDE))
        for index in partition_walkers(walkers, processes, rank):
            _walk(local, index, walkers, rng, rules)
        result.merge_max(local)
    return result