#!/usr/bin/env python3
"""2048 merge puzzle.

Usage::

    python main.py                # interactive menu
    python main.py -f rich        # Rich terminal
    python main.py -f pygame      # Pygame GUI (has its own menu)
    python main.py --best         # print the best score
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _print_best(data_dir: Path) -> None:
    from backend.models.highscore import BEST_SCORE_FILE, open_store, read_best_score

    store = open_store(data_dir / BEST_SCORE_FILE)
    print(f"\n  Best score: {read_best_score(store)}\n")


def _menu_loop(data_dir: Path) -> None:
    while True:
        print()
        print("  ====================================")
        print("              2  0  4  8              ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  4.  Play  (PyQt GUI)")
        print("  5.  View Best Score")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        frontends = {
            "1": Frontend.vanilla,
            "2": Frontend.rich,
            "3": Frontend.pygame,
            "4": Frontend.pyqt,
        }
        if choice in frontends:
            mod = importlib.import_module(_RUNNERS[frontends[choice]])
            mod.run(data_dir=data_dir)
        elif choice == "5":
            _print_best(data_dir)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir",
        envvar="MERGE2048_DATA_DIR",
        file_okay=False,
        help="Directory holding the best score file.",
    ),
    best: bool = typer.Option(
        False, "--best",
        help="Show the best score and exit.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """2048 merge puzzle."""
    _configure_logging(log_level)

    if best:
        _print_best(data_dir)
        return

    if frontend is None:
        _menu_loop(data_dir)
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(data_dir=data_dir)


if __name__ == "__main__":
    app()
