"""Single-keypress reader for the terminal frontends.

Arrow keys and WASD move, R starts a new game, Q / Escape / Ctrl-C quit.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from backend.models.board import Direction


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    ch = msvcrt.getwch()
    # Arrow keys arrive as a 0xe0 / 0x00 prefix followed by a scan code.
    if ch in ("\x00", "\xe0"):
        return _WINDOWS_ARROWS.get(msvcrt.getwch(), "")
    return ch


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ----------------------------------------------------------------

# Sentinels returned for arrow keys so both platforms share one table.
_UP, _DOWN, _LEFT, _RIGHT = "\x1bA", "\x1bB", "\x1bD", "\x1bC"

_WINDOWS_ARROWS: dict[str, str] = {"H": _UP, "P": _DOWN, "K": _LEFT, "M": _RIGHT}

_ACTIONS: dict[str, str] = {
    _UP: "up",
    _DOWN: "down",
    _LEFT: "left",
    _RIGHT: "right",
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "r": "restart",
    "n": "restart",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "\x1b": "quit",  # bare Escape
    "\r": "enter",
    "\n": "enter",
}

DIRECTIONS: dict[str, Direction] = {d.value: d for d in Direction}


def resolve(ch: str) -> str:
    """Map a raw key (or arrow sentinel) to its action string.

    Unmapped printable characters come back unchanged so menus can use
    digits; anything else maps to ``""``.
    """
    action = _ACTIONS.get(ch.lower() if len(ch) == 1 else ch)
    if action is not None:
        return action
    return ch if ch.isprintable() else ""


def to_direction(action: str) -> Direction | None:
    return DIRECTIONS.get(action)


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block for one keypress and return a normalised action string.

    Possible return values:
        "up", "down", "left", "right"  — movement
        "restart"                      — r / n
        "quit"                         — q / Ctrl-C / Escape
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    # Unix arrow keys: ESC [ A/B/C/D
    if ch == "\x1b":
        if _getch() == "[":
            return resolve("\x1b" + _getch())
        return "quit"

    return resolve(ch)
