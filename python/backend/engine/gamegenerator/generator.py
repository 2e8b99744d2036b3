"""Builds starting grids and spawns new tiles."""

from __future__ import annotations

import random
from typing import Protocol

from backend.models.board import Grid

# 90% chance for 2, 10% chance for 4
TWO_PROBABILITY = 0.9
START_TILES = 2


class RandomSource(Protocol):
    """The slice of ``random.Random`` the generator relies on."""

    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


class GameGenerator:
    """Places 2/4 tiles into empty cells using an injectable random source."""

    def __init__(self, rng: RandomSource | None = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()

    @staticmethod
    def empty(size: int) -> Grid:
        """Return an all-empty grid."""
        return Grid.empty(size)

    def generate(self, size: int) -> Grid:
        """Return a fresh grid seeded with the starting tiles."""
        grid = self.empty(size)
        for _ in range(START_TILES):
            self.spawn(grid)
        return grid

    def spawn(self, grid: Grid) -> tuple[int, int] | None:
        """Place one tile on *grid* in-place.

        Returns the cell that received the tile, or ``None`` when the grid
        has no empty cell.
        """
        empty_cells = grid.empty_cells()
        if not empty_cells:
            return None
        row, col = empty_cells[self.rng.randrange(len(empty_cells))]
        grid.tiles[row][col] = self.tile_value()
        return row, col

    def tile_value(self) -> int:
        return 2 if self.rng.random() < TWO_PROBABILITY else 4
