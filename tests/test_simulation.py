import random

import pytest

from colordla.grid import Color, Grid
from colordla.simulation import (
    Rules,
    generate_distributed,
    generate_dla,
    generate_threaded,
    partition_walkers,
)

ALLOWED = {Color.EMPTY, Color.RED, Color.YELLOW, Color.BLUE, Color.PURPLE}
PARALLEL = Rules(paint=False, late_p_purple=0.2)


def seeded_grid(width=20, height=20):
    grid = Grid(width, height)
    grid.seed_center(Color.YELLOW)
    return grid


def test_generate_dla_is_deterministic_for_a_seed():
    first, second = seeded_grid(), seeded_grid()
    generate_dla(first, 40, random.Random(7))
    generate_dla(second, 40, random.Random(7))
    assert first == second


def test_generate_dla_keeps_seed_and_uses_known_colors():
    grid = seeded_grid()
    generate_dla(grid, 60, random.Random(3))
    assert grid.get(10, 10) == Color.YELLOW
    assert grid.get(11, 10) == Color.YELLOW
    assert set(grid.cells) <= ALLOWED


def test_generate_dla_grows_the_cluster():
    grid = seeded_grid()
    generate_dla(grid, 60, random.Random(11), PARALLEL)
    assert grid.occupied() > 2


def test_zero_walkers_leave_grid_unchanged():
    grid = seeded_grid()
    generate_dla(grid, 0, random.Random(1))
    assert grid == seeded_grid()


def test_zero_max_steps_leaves_grid_unchanged():
    grid = seeded_grid()
    generate_dla(grid, 25, random.Random(1), Rules(paint=False, max_steps=0))
    assert grid == seeded_grid()


def test_empty_grid_without_step_limit_is_rejected():
    with pytest.raises(ValueError):
        generate_dla(Grid(10, 10), 5, random.Random(1))


def test_negative_walker_count_is_rejected():
    with pytest.raises(ValueError):
        generate_dla(seeded_grid(), -1, random.Random(1))


def test_single_thread_matches_serial_run():
    threaded = seeded_grid()
    serial = seeded_grid()
    elapsed = generate_threaded(threaded, 45, 1, seed=123, rules=PARALLEL)
    generate_dla(serial, 45, random.Random(123 ^ 1999), PARALLEL)
    assert threaded == serial
    assert elapsed >= 0.0


def test_many_threads_keep_invariants():
    grid = seeded_grid()
    generate_threaded(grid, 80, 4, seed=5)
    assert grid.get(10, 10) == Color.YELLOW
    assert grid.get(11, 10) == Color.YELLOW
    assert set(grid.cells) <= ALLOWED


def test_threaded_rejects_non_positive_thread_count():
    with pytest.raises(ValueError):
        generate_threaded(seeded_grid(), 10, 0, seed=1)


@pytest.mark.parametrize("total,parts", [(10, 3), (7, 7), (3, 5), (0, 2), (100, 4)])
def test_partition_covers_all_walkers_in_order(total, parts):
    blocks = [partition_walkers(total, parts, rank) for rank in range(parts)]
    joined = [index for block in blocks for index in block]
    assert joined == list(range(total))
    sizes = [len(block) for block in blocks]
    assert max(sizes) - min(sizes) <= 1
    assert sizes == sorted(sizes, reverse=True)


def test_partition_gives_remainder_to_first_ranks():
    assert partition_walkers(10, 3, 0) == range(0, 4)
    assert partition_walkers(10, 3, 2) == range(7, 10)


@pytest.mark.parametrize("parts,rank", [(0, 0), (3, 3), (3, -1)])
def test_partition_rejects_bad_arguments(parts, rank):
    with pytest.raises(ValueError):
        partition_walkers(10, parts, rank)


def test_distributed_single_process_matches_serial_run():
    merged = generate_distributed(20, 20, 40, 1, seed=99, rules=PARALLEL)
    serial = seeded_grid()
    generate_dla(serial, 40, random.Random(99 ^ 1999), PARALLEL)
    assert merged == serial


def test_distributed_is_deterministic_and_keeps_seed():
    first = generate_distributed(20, 20, 60, 3, seed=42)
    second = generate_distributed(20, 20, 60, 3, seed=42)
    assert first == second
    assert (first.width, first.height) == (20, 20)
    assert first.get(10, 10) == Color.YELLOW
    assert first.get(11, 10) == Color.YELLOW
    assert set(first.cells) <= ALLOWED


def test_distributed_rejects_non_positive_process_count():
    with pytest.raises(ValueError):
        generate_distributed(20, 20, 10, 0, seed=1)