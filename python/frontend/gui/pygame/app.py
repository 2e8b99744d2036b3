"""Pygame GUI frontend — fully self-contained.

Includes a title menu, the game board with score boxes, and the
"You win!" / "Game over!" overlays.  No terminal interaction required.
"""

from __future__ import annotations

import enum
from pathlib import Path

import pygame

from backend.engine.gameplay import GameEngine
from backend.models.board import Direction
from backend.models.highscore import BEST_SCORE_FILE, open_store
from frontend.theme import (
    ACCENT,
    BOARD_BG,
    PAGE_BG,
    TEXT_DARK,
    TEXT_LIGHT,
    hex_to_rgb,
    tile_colors,
)

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
COL_PAGE = hex_to_rgb(PAGE_BG)
COL_BOARD = hex_to_rgb(BOARD_BG)
COL_TEXT = hex_to_rgb(TEXT_DARK)
COL_LIGHT = hex_to_rgb(TEXT_LIGHT)
COL_ACCENT = hex_to_rgb(ACCENT)
COL_ACCENT_HOT = (159, 139, 119)
COL_WARN = (200, 90, 60)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 500, 640
TILE_GAP = 12
MARGIN = 30
HEADER_H = 150
BOARD_PX = WIN_W - 2 * MARGIN


# ---------------------------------------------------------------------------
# Screen enum
# ---------------------------------------------------------------------------
class _Screen(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = COL_ACCENT_HOT if self._hot else COL_ACCENT
        pygame.draw.rect(surf, c, self.rect, border_radius=6)
        lbl = self.font.render(self.text, True, COL_LIGHT)
        surf.blit(lbl, lbl.get_rect(center=self.rect.center))

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, ((WIN_W - rendered.get_width()) // 2, y))


_KEYS: dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, data_dir: Path) -> None:
        self._engine = GameEngine(store=open_store(data_dir / BEST_SCORE_FILE))

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("2048")
        self._clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 64, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 40, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 17)
        self._f_btn = pygame.font.SysFont("Helvetica", 18, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13, bold=True)

        self._screen = _Screen.MENU
        # The win overlay is shown once; "keep going" hides it for the session.
        self._win_seen = False

        self._play_btn = _Btn(((WIN_W - 220) // 2, 360, 220, 52), "P L A Y", self._f_btn)
        self._quit_btn = _Btn(((WIN_W - 220) // 2, 428, 220, 44), "Q U I T", self._f_btn)
        self._new_btn = _Btn((WIN_W - MARGIN - 130, 96, 130, 40), "New Game", self._f_btn)
        self._overlay_btn = _Btn(((WIN_W - 180) // 2, 0, 180, 46), "", self._f_btn)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        s = self._surf
        s.fill(COL_PAGE)
        _blit_center(s, self._f_big.render("2048", True, COL_TEXT), 150)
        _blit_center(
            s,
            self._f_body.render("Join the numbers and get to the 2048 tile!", True, COL_TEXT),
            240,
        )
        best = self._f_body.render(f"Best score: {self._engine.get_best_score()}", True, COL_TEXT)
        _blit_center(s, best, 280)
        self._play_btn.draw(s)
        self._quit_btn.draw(s)

    def _draw_score_box(self, label: str, value: int, x: int) -> None:
        rect = pygame.Rect(x, 30, 100, 56)
        pygame.draw.rect(self._surf, COL_BOARD, rect, border_radius=6)
        lbl = self._f_small.render(label, True, hex_to_rgb(tile_colors(2)[0]))
        self._surf.blit(lbl, lbl.get_rect(midtop=(rect.centerx, rect.y + 6)))
        val = self._f_btn.render(str(value), True, COL_LIGHT)
        self._surf.blit(val, val.get_rect(midtop=(rect.centerx, rect.y + 26)))

    def _draw_game(self) -> None:
        s = self._surf
        snap = self._engine.snapshot()
        s.fill(COL_PAGE)

        s.blit(self._f_title.render("2048", True, COL_TEXT), (MARGIN, 32))
        self._draw_score_box("SCORE", snap.score, WIN_W - MARGIN - 210)
        self._draw_score_box("BEST", snap.best_score, WIN_W - MARGIN - 100)
        self._new_btn.draw(s)

        if self._engine.persist_error is not None:
            warn = self._f_small.render("Best score not saved", True, COL_WARN)
            s.blit(warn, (MARGIN, 106))

        size = len(snap.grid)
        board = pygame.Rect(MARGIN, HEADER_H, BOARD_PX, BOARD_PX)
        pygame.draw.rect(s, COL_BOARD, board, border_radius=8)
        tile_px = (BOARD_PX - (size + 1) * TILE_GAP) // size
        for r, row in enumerate(snap.grid):
            for c, val in enumerate(row):
                x = board.x + TILE_GAP + c * (tile_px + TILE_GAP)
                y = board.y + TILE_GAP + r * (tile_px + TILE_GAP)
                bg, fg = tile_colors(val)
                rect = pygame.Rect(x, y, tile_px, tile_px)
                pygame.draw.rect(s, hex_to_rgb(bg), rect, border_radius=6)
                if val:
                    font = self._f_title if val < 1000 else self._f_btn
                    lbl = font.render(str(val), True, hex_to_rgb(fg))
                    s.blit(lbl, lbl.get_rect(center=rect.center))

        hint = self._f_small.render("Arrows / WASD  move     R  new game     Esc  menu", True, COL_TEXT)
        _blit_center(s, hint, board.bottom + 14)

        if snap.game_over:
            self._draw_overlay(board, "Game over!", "Try Again")
        elif snap.won and not self._win_seen:
            self._draw_overlay(board, "You win!", "Keep Going")

    def _draw_overlay(self, board: pygame.Rect, title: str, action: str) -> None:
        veil = pygame.Surface(board.size, pygame.SRCALPHA)
        veil.fill((*COL_PAGE, 190))
        self._surf.blit(veil, board.topleft)
        lbl = self._f_big.render(title, True, COL_TEXT)
        self._surf.blit(lbl, lbl.get_rect(center=(board.centerx, board.centery - 40)))
        self._overlay_btn.text = action
        self._overlay_btn.rect.y = board.centery + 20
        self._overlay_btn.draw(self._surf)

    # ── events ──────────────────────────────────────────────────────────────

    def _ev_menu(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._play_btn.motion(ev.pos)
            self._quit_btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._play_btn.hit(ev.pos):
                self._start_game()
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_RETURN:
                self._start_game()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _overlay_active(self) -> bool:
        return self._engine.is_game_over() or (self._engine.has_won() and not self._win_seen)

    def _overlay_action(self) -> None:
        if self._engine.is_game_over():
            self._start_game()
        else:
            self._win_seen = True

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._new_btn.motion(ev.pos)
            self._overlay_btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._new_btn.hit(ev.pos):
                self._start_game()
            elif self._overlay_active() and self._overlay_btn.hit(ev.pos):
                self._overlay_action()
        elif ev.type == pygame.KEYDOWN:
            if ev.key in _KEYS:
                if self._engine.has_won():
                    self._win_seen = True
                self._engine.move(_KEYS[ev.key])
            elif ev.key == pygame.K_RETURN and self._overlay_active():
                self._overlay_action()
            elif ev.key in (pygame.K_r, pygame.K_n):
                self._start_game()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    # ── game state ──────────────────────────────────────────────────────────

    def _start_game(self) -> None:
        self._engine.reset()
        self._win_seen = False
        self._screen = _Screen.PLAYING

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.MENU: self._ev_menu,
            _Screen.PLAYING: self._ev_game,
        }
        _draw = {
            _Screen.MENU: self._draw_menu,
            _Screen.PLAYING: self._draw_game,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                if not _dispatch[self._screen](ev):
                    running = False
                    break

            _draw[self._screen]()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(data_dir: Path = Path("data")) -> None:
    """Launch the Pygame GUI (opens directly to the menu)."""
    app = PygameApp(data_dir)
    app.run_loop()
