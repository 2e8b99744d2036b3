"""Tile spawning — placement, 2-vs-4 weighting, and starting grids."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.models.board import Grid
from conftest import ScriptedRandom


def test_spawn_uses_chosen_empty_cell() -> None:
    grid = Grid.from_rows([[2, 0], [0, 0]])
    gen = GameGenerator(ScriptedRandom(indices=[2], floats=[0.5]))

    cell = gen.spawn(grid)

    # empty cells are (0, 1), (1, 0), (1, 1); index 2 picks the last one
    assert cell == (1, 1)
    assert grid.tiles == [[2, 0], [0, 2]]


@pytest.mark.parametrize(
    ("draw", "value"),
    [(0.0, 2), (0.5, 2), (0.8999, 2), (0.9, 4), (0.999, 4)],
)
def test_tile_value_threshold(draw: float, value: int) -> None:
    gen = GameGenerator(ScriptedRandom(floats=[draw]))
    assert gen.tile_value() == value


def test_spawn_on_full_grid_is_a_no_op() -> None:
    grid = Grid.from_rows([[2, 4], [8, 16]])
    gen = GameGenerator(random.Random(0))

    assert gen.spawn(grid) is None
    assert grid.tiles == [[2, 4], [8, 16]]


def test_generate_places_two_starting_tiles() -> None:
    grid = GameGenerator(random.Random(42)).generate(4)

    values = [v for row in grid.tiles for v in row if v]
    assert grid.size == 4
    assert len(values) == 2
    assert set(values) <= {2, 4}


def test_fours_are_about_one_in_ten() -> None:
    gen = GameGenerator(random.Random(1234))
    counts = Counter(gen.tile_value() for _ in range(10_000))

    assert set(counts) == {2, 4}
    assert 0.08 < counts[4] / 10_000 < 0.12


def test_cells_are_chosen_uniformly() -> None:
    gen = GameGenerator(random.Random(99))
    hits: Counter[tuple[int, int]] = Counter()
    for _ in range(4000):
        cell = gen.spawn(Grid.empty(2))
        assert cell is not None
        hits[cell] += 1

    assert set(hits) == {(0, 0), (0, 1), (1, 0), (1, 1)}
    assert all(850 < n < 1150 for n in hits.values())


def test_default_random_source() -> None:
    gen = GameGenerator()
    assert isinstance(gen.rng, random.Random)
