import random

import pytest

from colordla.classic import ClassicDLA


def _neighbours(x, y):
    return [(x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)]


def test_rejects_non_positive_dimensions():
    with pytest.raises(ValueError):
        ClassicDLA(0, 5)
    with pytest.raises(ValueError):
        ClassicDLA(5, -1)


def test_rejects_negative_particle_count():
    dla = ClassicDLA(5, 5, random.Random(1))
    with pytest.raises(ValueError):
        dla.run(-1)


def test_single_cell_field_cannot_take_particles():
    dla = ClassicDLA(1, 1, random.Random(1))
    with pytest.raises(ValueError):
        dla.run(1)


def test_run_without_particles_places_only_the_seed():
    dla = ClassicDLA(3, 3, random.Random(1))
    dla.run(0)
    assert dla.occupied == {(1, 1)}
    assert dla.render() == "   \n # \n   \n"


def test_is_adjacent_checks_the_four_neighbours_only():
    dla = ClassicDLA(10, 10, random.Random(1))
    dla.run(0)
    assert dla.is_adjacent(4, 5)
    assert dla.is_adjacent(6, 5)
    assert dla.is_adjacent(5, 4)
    assert dla.is_adjacent(5, 6)
    assert not dla.is_adjacent(5, 5)
    assert not dla.is_adjacent(4, 4)
    assert not dla.is_adjacent(0, 0)


def test_every_stuck_particle_touches_the_cluster():
    dla = ClassicDLA(20, 20, random.Random(7))
    dla.run(60)
    centre = (10, 10)
    assert centre in dla.occupied
    assert 1 < len(dla.occupied) <= 61
    for cell in dla.occupied:
        assert any(n in dla.occupied for n in _neighbours(*cell))


def test_occupied_cells_stay_on_the_field():
    dla = ClassicDLA(12, 7, random.Random(3))
    dla.run(40)
    for x, y in dla.occupied:
        assert 0 <= x < 12
        assert 0 <= y < 7


def test_render_shape_matches_field_and_marks():
    dla = ClassicDLA(6, 9, random.Random(5))
    dla.run(15)
    lines = dla.render().splitlines()
    assert len(lines) == 6
    assert all(len(line) == 9 for line in lines)
    assert dla.render().count("#") == len(dla.occupied)
    for x, y in dla.occupied:
        assert lines[x][y] == "#"


def test_same_seed_gives_same_cluster():
    first = ClassicDLA(15, 15, random.Random(42))
    second = ClassicDLA(15, 15, random.Random(42))
    first.run(30)
    second.run(30)
    assert first.occupied == second.occupied
    assert first.render() == second.render()