"""PyQt6 GUI frontend — fully self-contained.

Includes a title menu and the game page with score boxes, a New Game
button, and the win / game-over banner.  No terminal interaction required.
"""

from __future__ import annotations

import sys
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSpacerItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from backend.engine.gameplay import GameEngine
from backend.models.board import Direction
from backend.models.highscore import BEST_SCORE_FILE, open_store
from frontend.theme import ACCENT, BOARD_BG, PAGE_BG, TEXT_DARK, TEXT_LIGHT, tile_colors

_ACCENT_H = "#9f8b77"
_WARN = "#c85a3c"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {PAGE_BG}; }}
    QLabel {{ color: {TEXT_DARK}; }}
"""

_IDX_MENU = 0
_IDX_GAME = 1

_DIRS = {
    Qt.Key.Key_Up: Direction.UP,
    Qt.Key.Key_W: Direction.UP,
    Qt.Key.Key_Down: Direction.DOWN,
    Qt.Key.Key_S: Direction.DOWN,
    Qt.Key.Key_Left: Direction.LEFT,
    Qt.Key.Key_A: Direction.LEFT,
    Qt.Key.Key_Right: Direction.RIGHT,
    Qt.Key.Key_D: Direction.RIGHT,
}


def _styled_btn(text: str, *, font_size: int = 14, min_w: int = 0, min_h: int = 44) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{ACCENT}; color:{TEXT_LIGHT};"
        f" border:none; border-radius:6px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{_ACCENT_H}; }}"
    )
    return btn


def _score_box(title: str) -> tuple[QFrame, QLabel]:
    box = QFrame()
    box.setStyleSheet(f"background:{BOARD_BG}; border-radius:6px;")
    lay = QVBoxLayout(box)
    lay.setContentsMargins(14, 4, 14, 6)
    lay.setSpacing(0)
    cap = QLabel(title)
    cap.setFont(QFont("Helvetica", 10, QFont.Weight.Bold))
    cap.setStyleSheet(f"color:{tile_colors(2)[0]};")
    cap.setAlignment(Qt.AlignmentFlag.AlignCenter)
    value = QLabel("0")
    value.setFont(QFont("Helvetica", 17, QFont.Weight.Bold))
    value.setStyleSheet(f"color:{TEXT_LIGHT};")
    value.setAlignment(Qt.AlignmentFlag.AlignCenter)
    lay.addWidget(cap)
    lay.addWidget(value)
    return box, value


# ═══════════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════════


class _MenuPage(QWidget):
    """Title screen with the best score, play and quit."""

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(12)
        root.setContentsMargins(30, 30, 30, 30)

        title = QLabel("2048")
        title.setFont(QFont("Helvetica", 64, QFont.Weight.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(title)

        sub = QLabel("Join the numbers and get to the <b>2048 tile!</b>")
        sub.setFont(QFont("Helvetica", 15))
        sub.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(sub)

        self.best = QLabel()
        self.best.setFont(QFont("Helvetica", 14))
        self.best.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self.best)

        root.addSpacerItem(QSpacerItem(0, 24))

        self.play_btn = _styled_btn("P L A Y", font_size=16, min_w=240, min_h=52)
        self.quit_btn = _styled_btn("Q U I T", min_w=240)
        for btn in (self.play_btn, self.quit_btn):
            root.addWidget(btn, alignment=Qt.AlignmentFlag.AlignCenter)

    def set_best(self, best: int) -> None:
        self.best.setText(f"Best score: {best}")


class _GamePage(QWidget):
    """The tile board with score boxes and a status banner."""

    def __init__(self, engine: GameEngine) -> None:
        super().__init__()
        self.setObjectName("page")
        self.engine = engine
        self._win_seen = False
        size = engine.size

        tile_px = max(48, min(100, 420 // size))
        self._f_tile = max(12, tile_px // 3)

        root = QVBoxLayout(self)
        root.setSpacing(10)
        root.setContentsMargins(24, 16, 24, 16)

        # header: title, scores, new game
        header = QHBoxLayout()
        t = QLabel("2048")
        t.setFont(QFont("Helvetica", 40, QFont.Weight.Bold))
        header.addWidget(t)
        header.addStretch(1)
        score_box, self._score = _score_box("SCORE")
        best_box, self._best = _score_box("BEST")
        header.addWidget(score_box)
        header.addWidget(best_box)
        root.addLayout(header)

        actions = QHBoxLayout()
        self._status = QLabel()
        self._status.setFont(QFont("Helvetica", 13, QFont.Weight.Bold))
        actions.addWidget(self._status)
        actions.addStretch(1)
        self.new_btn = _styled_btn("New Game", font_size=13, min_h=36)
        self.new_btn.clicked.connect(self.restart)
        actions.addWidget(self.new_btn)
        root.addLayout(actions)

        # board
        frame = QFrame()
        frame.setStyleSheet(f"background:{BOARD_BG}; border-radius:8px;")
        grid = QGridLayout(frame)
        grid.setSpacing(10)
        grid.setContentsMargins(10, 10, 10, 10)
        root.addWidget(frame, alignment=Qt.AlignmentFlag.AlignCenter)

        self._cells: list[list[QLabel]] = []
        for r in range(size):
            row: list[QLabel] = []
            for c in range(size):
                cell = QLabel()
                cell.setFixedSize(tile_px, tile_px)
                cell.setAlignment(Qt.AlignmentFlag.AlignCenter)
                grid.addWidget(cell, r, c)
                row.append(cell)
            self._cells.append(row)

        hint = QLabel("Arrows / WASD  move     R  new game     M  menu     Esc  quit")
        hint.setFont(QFont("Helvetica", 11))
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(hint)

        self._sync()

    # -- helpers --

    def _sync(self) -> None:
        snap = self.engine.snapshot()
        for r, row in enumerate(snap.grid):
            for c, v in enumerate(row):
                bg, fg = tile_colors(v)
                px = self._f_tile if v < 1000 else self._f_tile * 3 // 4
                cell = self._cells[r][c]
                cell.setText(str(v) if v else "")
                cell.setStyleSheet(
                    f"background:{bg}; color:{fg}; border-radius:6px;"
                    f" font: bold {px}px 'Helvetica';"
                )
        self._score.setText(str(snap.score))
        self._best.setText(str(snap.best_score))

        if snap.game_over:
            self._status.setText("Game over!   R  try again")
            self._status.setStyleSheet(f"color:{_WARN};")
        elif snap.won and not self._win_seen:
            self._status.setText("You win!   keep going")
            self._status.setStyleSheet(f"color:{ACCENT};")
        elif self.engine.persist_error is not None:
            self._status.setText("Best score not saved")
            self._status.setStyleSheet(f"color:{_WARN};")
        else:
            self._status.setText("")

    def move(self, d: Direction) -> None:
        if self.engine.has_won():
            self._win_seen = True
        self.engine.move(d)
        self._sync()

    def restart(self) -> None:
        self.engine.reset()
        self._win_seen = False
        self._sync()


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════


class _MainWindow(QMainWindow):
    def __init__(self, data_dir: Path) -> None:
        super().__init__()
        self.setWindowTitle("2048")
        self.setStyleSheet(_GLOBAL_CSS)
        self.resize(540, 680)

        self._engine = GameEngine(store=open_store(data_dir / BEST_SCORE_FILE))

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        self._menu = _MenuPage()
        self._menu.play_btn.clicked.connect(self._on_play)
        self._menu.quit_btn.clicked.connect(self.close)
        self._game_page = _GamePage(self._engine)
        self._stack.insertWidget(_IDX_MENU, self._menu)
        self._stack.insertWidget(_IDX_GAME, self._game_page)
        self._show_menu()

    def _show_menu(self) -> None:
        self._menu.set_best(self._engine.get_best_score())
        self._stack.setCurrentIndex(_IDX_MENU)

    def _on_play(self) -> None:
        self._game_page.restart()
        self._stack.setCurrentIndex(_IDX_GAME)

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        idx = self._stack.currentIndex()

        if idx == _IDX_MENU:
            if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
                self._on_play()
            elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
                self.close()

        elif idx == _IDX_GAME:
            if key in _DIRS:
                self._game_page.move(_DIRS[key])
            elif key in (Qt.Key.Key_R, Qt.Key.Key_N):
                self._game_page.restart()
            elif key == Qt.Key.Key_M:
                self._show_menu()
            elif key == Qt.Key.Key_Escape:
                self.close()

        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(data_dir: Path = Path("data")) -> None:
    """Launch the PyQt6 GUI (opens directly to the menu)."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(data_dir)
    window.show()
    qapp.exec()
