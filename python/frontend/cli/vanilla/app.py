"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Includes a small menu for playing and checking the best score.
"""

from __future__ import annotations

import sys
from pathlib import Path

from backend.engine.gamestate import GameSnapshot
from backend.engine.gameplay import GameEngine
from backend.models.highscore import BEST_SCORE_FILE, open_store
from frontend.cli.input_handler import get_key, to_direction
from frontend.theme import hex_to_rgb, tile_colors


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

CELL_W = 6


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _paint(value: int) -> str:
    """Return one cell, coloured with 24-bit ANSI background/foreground."""
    bg, fg = tile_colors(value)
    br, bgr, bb = hex_to_rgb(bg)
    fr, fgr, fb = hex_to_rgb(fg)
    text = "" if value == 0 else str(value)
    return (
        f"\033[48;2;{br};{bgr};{bb}m\033[38;2;{fr};{fgr};{fb}m{_BOLD}"
        f"{text:^{CELL_W}}{_R}"
    )


# -- board rendering ----------------------------------------------------------


def _render_grid(snap: GameSnapshot) -> str:
    """Return an ANSI-coloured text representation of the grid."""
    size = len(snap.grid)
    sep = "+" + (("-" * CELL_W + "+") * size)

    lines: list[str] = [sep]
    for row in snap.grid:
        lines.append("|" + "|".join(_paint(v) for v in row) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _score_line(snap: GameSnapshot) -> str:
    return f"  Score: {_Y}{snap.score}{_R}  |  Best: {_Y}{snap.best_score}{_R}"


# -- screens ------------------------------------------------------------------


def _show_menu(best: int) -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}              2  0  4  8              {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()
    print(f"    Join the numbers and get to the {_BOLD}2048 tile!{_R}")
    print(f"    Best score: {_Y}{best}{_R}")
    print()
    print(f"    {_C}1{_R}  Play")
    print(f"    {_DIM}Q{_R}  Quit")
    print()


def _show_game(engine: GameEngine, status: str = "") -> None:
    snap = engine.snapshot()
    _clear()
    print(f"  {_C}=== 2048 ==={_R}")
    print()
    print(_score_line(snap))
    print()
    print(_render_grid(snap))
    print()
    if snap.game_over:
        print(f"  {_RED}GAME OVER!{_R}  Press {_C}R{_R} to try again, {_C}Q{_R} to go back.")
    elif snap.won:
        print(f"  {_G}★ YOU WIN! ★{_R}  {_DIM}Keep going for a higher score.{_R}")
    if engine.persist_error is not None:
        print(f"  {_Y}Best score not saved: {engine.persist_error}{_R}")
    if status:
        print(f"  {status}")
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}R{_R}: new game  |  "
        f"{_C}Q{_R}: back"
    )
    sys.stdout.flush()


# -- game loop ----------------------------------------------------------------


def _play_game(engine: GameEngine) -> None:
    engine.reset()
    status = ""

    while True:
        _show_game(engine, status)
        status = ""
        key = get_key()

        direction = to_direction(key)
        if direction is not None:
            if not engine.move(direction) and not engine.is_game_over():
                status = f"{_DIM}Nothing moves that way.{_R}"
        elif key == "restart":
            engine.reset()
        elif key == "quit":
            return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(data_dir: Path) -> None:
    engine = GameEngine(store=open_store(data_dir / BEST_SCORE_FILE))

    while True:
        _show_menu(engine.get_best_score())
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        elif key in ("1", "enter"):
            _play_game(engine)


# -- public entry point -------------------------------------------------------


def run(data_dir: Path) -> None:
    """Launch the vanilla CLI with interactive menu."""
    _menu_loop(data_dir)
