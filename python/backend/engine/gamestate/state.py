"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Cells, Grid


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view handed to frontends after every operation."""

    grid: Cells
    score: int
    best_score: int
    game_over: bool
    won: bool


class GameState:
    """Holds the current grid, scores, and terminal flags."""

    def __init__(self, grid: Grid, best_score: int = 0) -> None:
        self.grid = grid
        self.score: int = 0
        self.best_score: int = best_score
        self.game_over: bool = False
        self.won: bool = False

    # -- scoring --------------------------------------------------------------

    def add_score(self, points: int) -> None:
        self.score += points

    def raise_best(self) -> bool:
        """Lift the best score to the current score. True if it went up."""
        if self.score > self.best_score:
            self.best_score = self.score
            return True
        return False

    # -- flags ----------------------------------------------------------------

    def mark_won(self) -> None:
        self.won = True

    def mark_game_over(self) -> None:
        self.game_over = True

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            grid=self.grid.freeze(),
            score=self.score,
            best_score=self.best_score,
            game_over=self.game_over,
            won=self.won,
        )
