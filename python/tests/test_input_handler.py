from __future__ import annotations

import pytest

from backend.models.board import Direction
from frontend.cli.input_handler import resolve, to_direction


@pytest.mark.parametrize(
    ("raw", "action"),
    [
        ("w", "up"),
        ("S", "down"),
        ("a", "left"),
        ("D", "right"),
        ("\x1bA", "up"),
        ("\x1bB", "down"),
        ("\x1bC", "right"),
        ("\x1bD", "left"),
        ("r", "restart"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("\r", "enter"),
        ("1", "1"),
        ("\x07", ""),
    ],
)
def test_resolve(raw: str, action: str) -> None:
    assert resolve(raw) == action


def test_to_direction() -> None:
    assert to_direction("left") is Direction.LEFT
    assert to_direction("restart") is None
