from __future__ import annotations

import pytest

from backend.models.board import Direction, Grid


def test_from_flat_is_row_major() -> None:
    grid = Grid.from_flat(2, [2, 0, 0, 4])
    assert grid.tiles == [[2, 0], [0, 4]]
    assert grid.get_tile(1, 1) == 4


def test_from_flat_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        Grid.from_flat(3, [2, 4])


def test_from_rows_rejects_ragged_input() -> None:
    with pytest.raises(ValueError):
        Grid.from_rows([[2, 0], [0]])


def test_empty_cells_in_row_major_order() -> None:
    grid = Grid.from_rows([[0, 2], [4, 0]])
    assert grid.empty_cells() == [(0, 0), (1, 1)]


@pytest.mark.parametrize(
    ("rows", "expected"),
    [
        ([[2, 4], [4, 2]], False),
        ([[2, 2], [4, 8]], True),
        ([[2, 4], [2, 8]], True),
        ([[2, 4], [8, 0]], True),
    ],
    ids=["locked", "horizontal-pair", "vertical-pair", "empty-cell"],
)
def test_has_moves(rows: list[list[int]], expected: bool) -> None:
    assert Grid.from_rows(rows).has_moves() is expected


def test_copy_and_freeze_are_detached() -> None:
    grid = Grid.from_rows([[2, 0], [0, 0]])
    clone = grid.copy()
    frozen = grid.freeze()

    grid.tiles[0][0] = 4

    assert clone.tiles[0][0] == 2
    assert frozen == ((2, 0), (0, 0))


def test_totals() -> None:
    grid = Grid.from_rows([[2, 8], [0, 4]])
    assert grid.total() == 14
    assert grid.max_tile() == 8


def test_direction_values() -> None:
    assert [d.value for d in Direction] == ["up", "down", "left", "right"]
    assert Direction("left") is Direction.LEFT
