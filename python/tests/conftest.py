"""Shared fixtures: scripted randomness and store doubles."""

from __future__ import annotations

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.models.board import Grid


class ScriptedRandom:
    """Replays fixed draws so tile placement is fully predictable.

    ``indices`` feeds ``randrange`` (which empty cell), ``floats`` feeds
    ``random`` (2 vs 4). Both repeat their last value once exhausted.
    """

    def __init__(self, indices: list[int] | None = None, floats: list[float] | None = None) -> None:
        self._indices = list(indices or [0])
        self._floats = list(floats or [0.0])

    def randrange(self, stop: int) -> int:
        value = self._indices.pop(0) if len(self._indices) > 1 else self._indices[0]
        assert 0 <= value < stop, f"scripted index {value} out of range({stop})"
        return value

    def random(self) -> float:
        return self._floats.pop(0) if len(self._floats) > 1 else self._floats[0]


class FailingStore:
    """Key-value store whose reads and/or writes always raise."""

    def __init__(self, fail_get: bool = False, fail_set: bool = True) -> None:
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.writes = 0

    def get(self, key: str) -> int | None:
        if self.fail_get:
            raise OSError("storage unavailable")
        return None

    def set(self, key: str, value: int) -> None:
        self.writes += 1
        if self.fail_set:
            raise OSError("disk full")


class RecordingGenerator(GameGenerator):
    """Remembers the grid and chosen cell of the most recent spawn."""

    def __init__(self, rng) -> None:
        super().__init__(rng)
        self.before: Grid | None = None
        self.cell: tuple[int, int] | None = None

    def spawn(self, grid: Grid) -> tuple[int, int] | None:
        self.before = grid.copy()
        self.cell = super().spawn(grid)
        return self.cell


@pytest.fixture
def first_cell_twos() -> ScriptedRandom:
    """Always spawn a 2 into the first empty cell (row-major)."""
    return ScriptedRandom(indices=[0], floats=[0.0])
