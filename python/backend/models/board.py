"""Grid model for the 2048 merge puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


EMPTY = 0

Cells = tuple[tuple[int, ...], ...]


@dataclass
class Grid:
    """Represents the square tile grid.

    Tiles are stored as a 2D list of ints. 0 represents an empty cell,
    anything else is a power-of-two tile value.
    """

    size: int
    tiles: list[list[int]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls, size: int) -> Grid:
        return cls(size=size, tiles=[[EMPTY] * size for _ in range(size)])

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Grid:
        """Create a grid from a flat row-major tile list.

        Example::

            Grid.from_flat(2, [2, 0, 0, 4])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} grid, "
                f"got {len(flat)}."
            )
        tiles = [list(flat[r * size : (r + 1) * size]) for r in range(size)]
        return cls(size=size, tiles=tiles)

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Grid:
        size = len(rows)
        if not rows or any(len(row) != size for row in rows):
            raise ValueError("Grid rows must form a non-empty square matrix.")
        return cls(size=size, tiles=[list(row) for row in rows])

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return the (row, col) of every empty cell, row-major."""
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.tiles[r][c] == EMPTY
        ]

    def has_moves(self) -> bool:
        """Check whether any slide or merge is still possible.

        True as soon as one empty cell or one pair of equal horizontal or
        vertical neighbours is found.
        """
        n = self.size
        for r in range(n):
            for c in range(n):
                if self.tiles[r][c] == EMPTY:
                    return True
        for r in range(n):
            for c in range(n - 1):
                if self.tiles[r][c] == self.tiles[r][c + 1]:
                    return True
        for c in range(n):
            for r in range(n - 1):
                if self.tiles[r][c] == self.tiles[r + 1][c]:
                    return True
        return False

    def total(self) -> int:
        return sum(sum(row) for row in self.tiles)

    def max_tile(self) -> int:
        return max(max(row) for row in self.tiles)

    def freeze(self) -> Cells:
        """Return an immutable copy of the cell values."""
        return tuple(tuple(row) for row in self.tiles)

    def copy(self) -> Grid:
        return Grid(size=self.size, tiles=[row[:] for row in self.tiles])
