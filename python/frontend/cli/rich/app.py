"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and engine as the vanilla CLI.
"""

from __future__ import annotations

from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamestate import GameSnapshot
from backend.engine.gameplay import GameEngine
from backend.models.highscore import BEST_SCORE_FILE, open_store
from frontend.cli.input_handler import get_key, to_direction
from frontend.theme import BOARD_BG, tile_colors

console = Console()

CELL_W = 6


# -- board rendering ----------------------------------------------------------


def _render_grid(snap: GameSnapshot) -> Table:
    """Return a Rich Table representing the tile grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        show_lines=True,
        box=rich.box.HEAVY,
        border_style=BOARD_BG,
        padding=(0, 0),
    )
    for _ in snap.grid:
        table.add_column(width=CELL_W, justify="center")

    for row in snap.grid:
        cells: list[Text] = []
        for val in row:
            bg, fg = tile_colors(val)
            label = str(val) if val else ""
            cells.append(Text(f"{label:^{CELL_W}}", style=f"bold {fg} on {bg}"))
        table.add_row(*cells)

    return table


def _scores(snap: GameSnapshot) -> Text:
    text = Text()
    text.append("  Score: ", style="dim")
    text.append(str(snap.score), style="bold yellow")
    text.append("    Best: ", style="dim")
    text.append(str(snap.best_score), style="bold yellow")
    return text


# -- menu screen --------------------------------------------------------------


def _draw_menu(best: int) -> None:
    console.clear()

    tagline = Text()
    tagline.append("Join the numbers and get to the ")
    tagline.append("2048 tile!", style="bold")

    best_line = Text()
    best_line.append("Best score: ", style="dim")
    best_line.append(str(best), style="bold yellow")

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(tagline),
        Align.center(best_line),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]2  0  4  8[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screen --------------------------------------------------------------


def _draw_game(engine: GameEngine, status: str = "") -> None:
    console.clear()
    snap = engine.snapshot()

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  new game   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    parts = [Align.center(_scores(snap)), Text(""), Align.center(_render_grid(snap))]
    if snap.game_over:
        banner = Text("\n  Game over!  ", style="bold red")
        banner.append("Press R to try again.", style="dim")
        parts.append(Align.center(banner))
        border = "red"
    elif snap.won:
        banner = Text("\n  ★ ", style="bold yellow")
        banner.append("You win!", style="bold green")
        banner.append("  Keep going. ", style="green")
        banner.append("★", style="bold yellow")
        parts.append(Align.center(banner))
        border = "bold green"
    else:
        border = "bright_blue"

    panel = Panel(
        Group(*parts),
        title="[bold cyan]2048[/bold cyan]",
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if engine.persist_error is not None:
        console.print(
            Align.center(Text(f"Best score not saved: {engine.persist_error}", style="yellow"))
        )
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _play_game(engine: GameEngine) -> None:
    engine.reset()
    status = ""

    while True:
        _draw_game(engine, status)
        status = ""
        key = get_key()

        direction = to_direction(key)
        if direction is not None:
            if not engine.move(direction) and not engine.is_game_over():
                status = "[dim]Nothing moves that way.[/dim]"
        elif key == "restart":
            engine.reset()
        elif key == "quit":
            return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(data_dir: Path) -> None:
    engine = GameEngine(store=open_store(data_dir / BEST_SCORE_FILE))

    while True:
        _draw_menu(engine.get_best_score())
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(
                Align.center(Text("\nGoodbye!\n", style="bold cyan"))
            )
            return
        elif key in ("1", "enter"):
            _play_game(engine)


# -- public entry point -------------------------------------------------------


def run(data_dir: Path) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(data_dir)
