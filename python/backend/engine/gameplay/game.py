"""Core gameplay logic — slides and merges tiles, scores, and ends the game."""

from __future__ import annotations

import logging

from backend.engine.gamegenerator import GameGenerator, RandomSource
from backend.engine.gamestate import GameSnapshot, GameState
from backend.models.board import EMPTY, Cells, Direction, Grid
from backend.models.highscore import BEST_SCORE_KEY, KeyValueStore, read_best_score

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 4
WIN_VALUE = 2048


def slide_line(values: list[int]) -> tuple[list[int], int, list[int]]:
    """Slide and merge one line toward index 0.

    *values* must already be ordered with the target edge first. Returns the
    new line (padded with empties to the same length), the points gained,
    and the values produced by merges. Each tile merges at most once.
    """
    tiles = [v for v in values if v != EMPTY]
    line: list[int] = []
    merged: list[int] = []
    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            value = tiles[i] * 2
            line.append(value)
            merged.append(value)
            i += 2  # both source tiles are consumed
        else:
            line.append(tiles[i])
            i += 1
    line += [EMPTY] * (len(values) - len(line))
    return line, sum(merged), merged


def line_coords(size: int, direction: Direction) -> list[list[tuple[int, int]]]:
    """Return the cells of every line, each ordered target edge first."""
    forward = list(range(size))
    backward = forward[::-1]
    if direction == Direction.LEFT:
        return [[(r, c) for c in forward] for r in forward]
    if direction == Direction.RIGHT:
        return [[(r, c) for c in backward] for r in forward]
    if direction == Direction.UP:
        return [[(r, c) for r in forward] for c in forward]
    return [[(r, c) for r in backward] for c in forward]


class GameEngine:
    """Owns one game session: the grid, the scores and the terminal flags.

    Frontends drive it through :meth:`move` and :meth:`reset` and re-render
    from :meth:`snapshot`. Randomness and best-score persistence are
    injected so the engine itself stays deterministic under test.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        win_value: int = WIN_VALUE,
        rng: RandomSource | None = None,
        store: KeyValueStore | None = None,
    ) -> None:
        self._setup(size, win_value, rng, store)
        self.reset()

    @classmethod
    def from_grid(
        cls,
        grid: Grid,
        win_value: int = WIN_VALUE,
        rng: RandomSource | None = None,
        store: KeyValueStore | None = None,
    ) -> GameEngine:
        """Create a session from an existing grid (e.g. a hand-built position).

        No starting tiles are spawned; the grid is used as given.
        """
        obj = object.__new__(cls)
        obj._setup(grid.size, win_value, rng, store)
        obj.state = GameState(grid.copy(), best_score=obj.state.best_score)
        return obj

    def _setup(
        self,
        size: int,
        win_value: int,
        rng: RandomSource | None,
        store: KeyValueStore | None,
    ) -> None:
        if size < 2:
            raise ValueError(f"Grid size must be at least 2, got {size}.")
        self.size = size
        self.win_value = win_value
        self.generator = GameGenerator(rng)
        self.store = store
        self.persist_error: Exception | None = None
        self.state = GameState(Grid.empty(size), best_score=self._load_best())

    # -- lifecycle ------------------------------------------------------------

    def reset(self) -> None:
        """Start a new game. The best score carries over."""
        grid = self.generator.generate(self.size)
        self.state = GameState(grid, best_score=self.state.best_score)

    # -- queries --------------------------------------------------------------

    def get_grid(self) -> Cells:
        return self.state.grid.freeze()

    def get_score(self) -> int:
        return self.state.score

    def get_best_score(self) -> int:
        return self.state.best_score

    def is_game_over(self) -> bool:
        return self.state.game_over

    def has_won(self) -> bool:
        return self.state.won

    def snapshot(self) -> GameSnapshot:
        return self.state.snapshot()

    # -- movement -------------------------------------------------------------

    def move(self, direction: Direction | str) -> bool:
        """Slide every line toward *direction*, merging equal neighbours.

        Returns True if any cell changed. A move that changes nothing does
        not spawn a tile or touch the score. Raises ``ValueError`` for an
        unknown direction.
        """
        direction = Direction(direction)
        state = self.state
        if state.game_over:
            return False

        grid = state.grid.copy()
        moved = False
        gained = 0
        reached_win = False
        for coords in line_coords(self.size, direction):
            before = [grid.tiles[r][c] for r, c in coords]
            after, points, merged = slide_line(before)
            if after != before:
                moved = True
                for (r, c), value in zip(coords, after):
                    grid.tiles[r][c] = value
            gained += points
            if self.win_value in merged:
                reached_win = True

        if not moved:
            return False

        self.generator.spawn(grid)
        state.grid = grid
        state.add_score(gained)
        if reached_win and not state.won:
            logger.info("Reached the %d tile with score %d", self.win_value, state.score)
            state.mark_won()
        if not grid.has_moves():
            logger.info("Game over with score %d", state.score)
            state.mark_game_over()
        if state.raise_best():
            self._save_best(state.best_score)
        return True

    # -- persistence ----------------------------------------------------------

    def _load_best(self) -> int:
        if self.store is None:
            return 0
        try:
            return read_best_score(self.store)
        except Exception as exc:
            logger.warning("Could not read the best score: %s", exc)
            self.persist_error = exc
            return 0

    def _save_best(self, value: int) -> None:
        logger.debug("New best score %d", value)
        if self.store is None:
            return
        try:
            self.store.set(BEST_SCORE_KEY, value)
        except Exception as exc:
            logger.warning("Could not save the best score %d: %s", value, exc)
            self.persist_error = exc
        else:
            self.persist_error = None
