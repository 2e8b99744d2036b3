"""Tile palette shared by the coloured frontends.

Classic 2048 colours: light tiles with dark text up to 4, warm tiles with
light text after that, and a single dark colour for anything past 2048.
"""

from __future__ import annotations

BOARD_BG = "#bbada0"
EMPTY_CELL = "#cdc1b4"
PAGE_BG = "#faf8ef"
TEXT_DARK = "#776e65"
TEXT_LIGHT = "#f9f6f2"
ACCENT = "#8f7a66"

TILE_BG: dict[int, str] = {
    2: "#eee4da",
    4: "#ede0c8",
    8: "#f2b179",
    16: "#f59563",
    32: "#f67c5f",
    64: "#f65e3b",
    128: "#edcf72",
    256: "#edcc61",
    512: "#edc850",
    1024: "#edc53f",
    2048: "#edc22e",
}
SUPER_TILE = "#3c3a32"


def tile_colors(value: int) -> tuple[str, str]:
    """Return ``(background, foreground)`` hex colours for a tile value."""
    if value == 0:
        return EMPTY_CELL, EMPTY_CELL
    bg = TILE_BG.get(value, SUPER_TILE)
    fg = TEXT_DARK if value <= 4 else TEXT_LIGHT
    return bg, fg


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    color = color.lstrip("#")
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)
