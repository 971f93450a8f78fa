"""PyQt6 GUI frontend — fully self-contained.

Includes main menu, size selection, gameplay with corner rotation
buttons, a JSON mode for pasting or opening a board, and a how-to-play
page.  No terminal interaction required.
"""

from __future__ import annotations

import sys
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QSpacerItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from backend.config import SIZE_CHOICES
from backend.engine.boardimport import BoardImporter
from backend.engine.gameplay import GamePlay
from backend.models.errors import PuzzleError
from backend.models.selection import Position
from frontend.help import HOW_TO_PLAY, JSON_HELP
from frontend.palette import label_hex
from frontend.quick_rotate import QuickRotation, quick_rotations

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_SUBTEXT = "#a6adc8"
_BLUE = "#89b4fa"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_PINK = "#f5c2e7"
_YELLOW = "#f9e2af"
_YELLOW_H = "#fbecc8"
_RED = "#f38ba8"
_RED_H = "#f5a0b8"
_LAVENDER = "#b4befe"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
    QPlainTextEdit {{ background: {_MANTLE}; color: {_TEXT};
        border: 1px solid {_SURFACE1}; border-radius: 6px; }}
"""

_SAMPLE_JSON = "\n".join(JSON_HELP[2:16])


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 14,
    bold: bool = True,
    min_w: int = 0,
    min_h: int = 44,
    radius: int = 8,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold if bold else QFont.Weight.Normal))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:{radius}px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )
    return btn


def _title(text: str, size: int = 26) -> QLabel:
    lbl = QLabel(text)
    lbl.setFont(QFont("Helvetica", size, QFont.Weight.Bold))
    lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
    return lbl


# ═══════════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════════


class _MenuPage(QWidget):
    """Main menu with size selection, play, JSON mode, help, quit."""

    def __init__(self, default_size: int = 4) -> None:
        super().__init__()
        self.setObjectName("page")
        self.selected_size = default_size

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(12)
        root.setContentsMargins(30, 30, 30, 30)

        root.addWidget(_title("ROTATION  PUZZLE", 34))
        root.addSpacerItem(QSpacerItem(0, 24))

        # subtitle
        sub = QLabel("Select board size")
        sub.setFont(QFont("Helvetica", 15))
        sub.setStyleSheet(f"color:{_SUBTEXT};")
        sub.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(sub)

        root.addSpacerItem(QSpacerItem(0, 8))

        # size buttons
        self._size_btns: dict[int, QPushButton] = {}
        hbox = QHBoxLayout()
        hbox.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hbox.setSpacing(10)
        for s in SIZE_CHOICES:
            btn = _styled_btn(f"{s}×{s}", min_w=72, min_h=46, font_size=13)
            btn.clicked.connect(lambda _, sz=s: self._pick_size(sz))
            hbox.addWidget(btn)
            self._size_btns[s] = btn
        root.addLayout(hbox)

        root.addSpacerItem(QSpacerItem(0, 18))

        # action buttons
        self.play_btn = _styled_btn(
            "P L A Y", bg=_BLUE, hover=_LAVENDER, fg=_BASE,
            font_size=16, min_w=240, min_h=52,
        )
        root.addWidget(self.play_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addSpacerItem(QSpacerItem(0, 6))

        self.json_btn = _styled_btn(
            "JSON MODE", bg=_YELLOW, hover=_YELLOW_H, fg=_BASE,
            min_w=240, font_size=13,
        )
        root.addWidget(self.json_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self.help_btn = _styled_btn("HOW TO PLAY", min_w=240, font_size=13)
        root.addWidget(self.help_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addSpacerItem(QSpacerItem(0, 4))

        self.quit_btn = _styled_btn(
            "Q U I T", bg=_RED, hover=_RED_H, fg=_BASE, min_w=240, font_size=13
        )
        root.addWidget(self.quit_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self._refresh_size_highlight()

    def _pick_size(self, s: int) -> None:
        self.selected_size = s
        self._refresh_size_highlight()

    def _refresh_size_highlight(self) -> None:
        for s, btn in self._size_btns.items():
            if s == self.selected_size:
                btn.setStyleSheet(
                    f"QPushButton {{ background:{_GREEN}; color:{_BASE};"
                    f" border:none; border-radius:8px; padding:6px 18px; font-weight:bold; }}"
                    f" QPushButton:hover {{ background:{_GREEN_H}; }}"
                )
            else:
                btn.setStyleSheet(
                    f"QPushButton {{ background:{_SURFACE0}; color:{_TEXT};"
                    f" border:none; border-radius:8px; padding:6px 18px; font-weight:bold; }}"
                    f" QPushButton:hover {{ background:{_SURFACE1}; }}"
                )


class _GamePage(QWidget):
    """The puzzle board with clickable cells and live stats."""

    def __init__(self, game: GamePlay) -> None:
        super().__init__()
        self.setObjectName("page")
        self.game = game
        self._btns: list[list[QPushButton]] = []
        self._quick_btns: list[QPushButton] = []

        root = QVBoxLayout(self)
        root.setSpacing(6)
        root.setContentsMargins(16, 10, 16, 10)

        self._heading = _title("", 17)
        root.addWidget(self._heading)

        # stats
        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 13))
        self._stats.setStyleSheet(f"color:{_PINK};")
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        # board
        self._frame = QFrame()
        self._frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        self._grid = QGridLayout(self._frame)
        self._grid.setSpacing(4)
        self._grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(self._frame, alignment=Qt.AlignmentFlag.AlignCenter)

        # rotation counters
        self._counts = QLabel()
        self._counts.setFont(QFont("Helvetica", 12))
        self._counts.setStyleSheet(f"color:{_SUBTEXT};")
        self._counts.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._counts)

        # fixed rotations
        self._quick_row = QHBoxLayout()
        self._quick_row.setSpacing(6)
        self._quick_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addLayout(self._quick_row)

        # actions
        actions = QHBoxLayout()
        actions.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.undo_btn = _styled_btn("UNDO (U)", bg=_YELLOW, hover=_YELLOW_H, fg=_BASE, font_size=12)
        self.undo_btn.clicked.connect(self.undo)
        self.reset_btn = _styled_btn("RESET (R)", bg=_PINK, hover=_RED_H, fg=_BASE, font_size=12)
        self.reset_btn.clicked.connect(self.reset)
        self.menu_btn = _styled_btn("MENU (M)", font_size=12)
        for b in (self.undo_btn, self.reset_btn, self.menu_btn):
            actions.addWidget(b)
        root.addLayout(actions)

        # hint / status
        self._hint = QLabel()
        self._hint.setFont(QFont("Helvetica", 11))
        self._hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._hint)

        self._rebuild()

    # -- helpers --

    def _rebuild(self) -> None:
        """Recreate the cell buttons after the board size changed."""
        for row in self._btns:
            for b in row:
                self._grid.removeWidget(b)
                b.deleteLater()
        self._btns = []
        for b in self._quick_btns:
            self._quick_row.removeWidget(b)
            b.deleteLater()
        self._quick_btns = []

        size = self.game.size
        tile_px = max(32, min(84, 400 // size))
        f_sz = max(10, tile_px // 3)
        for r in range(size):
            row: list[QPushButton] = []
            for c in range(size):
                b = QPushButton()
                b.setFixedSize(tile_px, tile_px)
                b.setFont(QFont("Helvetica", f_sz, QFont.Weight.Bold))
                b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
                b.clicked.connect(lambda _, rr=r, cc=c: self._click(rr, cc))
                self._grid.addWidget(b, r, c)
                row.append(b)
            self._btns.append(row)
        for q in quick_rotations(size):
            b = _styled_btn(q.label, font_size=11, min_h=30, radius=6)
            b.clicked.connect(lambda _, qq=q: self.quick_rotate(qq))
            self._quick_row.addWidget(b)
            self._quick_btns.append(b)
        self._heading.setText(f"Rotation Puzzle  {size}×{size}")
        self._status("")
        self._sync()

    def _sync(self) -> None:
        view = self.game.view()
        pending = view.pending
        for r in range(view.size):
            for c in range(view.size):
                v = view.tiles[r][c]
                b = self._btns[r][c]
                b.setText(str(v))
                border = f"3px solid {_RED}" if Position(r, c) == pending else "none"
                b.setStyleSheet(
                    f"QPushButton{{background:{label_hex(v)};color:{_BASE};"
                    f"border:{border};border-radius:8px;font-weight:bold;}}"
                    f"QPushButton:hover{{border:2px solid {_BASE};}}"
                )
        self._stats.setText(f"Score: {view.score}    Moves: {view.moves}")
        self._counts.setText(
            "   ".join(f"{s}×{s}: {n}" for s, n in sorted(view.rotation_counts.items()))
        )
        self.undo_btn.setEnabled(view.can_undo)

    def _status(self, text: str, colour: str = _OVERLAY0) -> None:
        self._hint.setText(
            text or "Click two diagonal corners     U  undo     R  reset     +/-  size     M  menu"
        )
        self._hint.setStyleSheet(f"color:{colour if text else _OVERLAY0};")

    def _click(self, r: int, c: int) -> None:
        if self.game.select_cell(Position(r, c)):
            self._status(f"Rotated!  Score {self.game.score}", _GREEN)
        else:
            self._status("")
        self._sync()

    # -- actions --

    def quick_rotate(self, q: QuickRotation) -> None:
        if self.game.rotate(q.row, q.col, q.size):
            self._status(f"Rotated {q.label}!  Score {self.game.score}", _GREEN)
        self._sync()

    def undo(self) -> None:
        if self.game.undo():
            self._status("Undid last rotation", _YELLOW)
        self._sync()

    def reset(self) -> None:
        self.game.reset()
        self._status("New board", _YELLOW)
        self._sync()

    def step_size(self, step: int) -> None:
        size = self.game.size + step
        if size % 2:
            size += 1 if step > 0 else -1
        if size not in SIZE_CHOICES:
            return
        try:
            self.game.change_size(size)
        except PuzzleError as e:
            self._status(str(e), _RED)
            return
        self._rebuild()


class _JsonPage(QWidget):
    """JSON mode — paste or open a board payload and load it."""

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setSpacing(8)
        root.setContentsMargins(24, 20, 24, 16)

        root.addWidget(_title("JSON  MODE"))

        self.editor = QPlainTextEdit()
        self.editor.setFont(QFont("Courier", 12))
        self.editor.setPlaceholderText(_SAMPLE_JSON)
        root.addWidget(self.editor)

        self.error = QLabel()
        self.error.setFont(QFont("Helvetica", 12))
        self.error.setStyleSheet(f"color:{_RED};")
        self.error.setWordWrap(True)
        root.addWidget(self.error)

        row = QHBoxLayout()
        row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.load_btn = _styled_btn("L O A D", bg=_BLUE, hover=_LAVENDER, fg=_BASE, min_w=140)
        self.open_btn = _styled_btn("OPEN FILE…", min_w=140, font_size=13)
        self.open_btn.clicked.connect(self._open_file)
        self.back_btn = _styled_btn("B A C K", min_w=140, font_size=13)
        for b in (self.load_btn, self.open_btn, self.back_btn):
            row.addWidget(b)
        root.addLayout(row)

    def _open_file(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self, "Open board", "", "JSON files (*.json);;All files (*)"
        )
        if path:
            try:
                self.editor.setPlainText(Path(path).read_text(encoding="utf-8"))
            except OSError as e:
                self.error.setText(f"Cannot read {path}: {e.strerror}")


class _HelpPage(QWidget):
    """How-to-play text with a back button."""

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setSpacing(8)
        root.setContentsMargins(24, 20, 24, 16)

        root.addWidget(_title("HOW  TO  PLAY"))

        rules = QLabel("\n".join(f"•  {line}" for line in HOW_TO_PLAY))
        rules.setFont(QFont("Helvetica", 13))
        rules.setWordWrap(True)
        root.addWidget(rules)

        fmt = QLabel("\n".join(JSON_HELP))
        fmt.setFont(QFont("Courier", 11))
        fmt.setStyleSheet(f"color:{_SUBTEXT};")
        root.addWidget(fmt)

        self.back_btn = _styled_btn("B A C K", min_w=200, font_size=13)
        root.addWidget(self.back_btn, alignment=Qt.AlignmentFlag.AlignCenter)


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════

_IDX_MENU = 0
_IDX_GAME = 1
_IDX_JSON = 2
_IDX_HELP = 3


class _MainWindow(QMainWindow):
    def __init__(self, default_size: int, board_path: Path | None) -> None:
        super().__init__()

        self.setWindowTitle("Rotation Puzzle")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(520, 640)

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        # menu
        self._menu = _MenuPage(default_size if default_size in SIZE_CHOICES else 4)
        self._menu.play_btn.clicked.connect(self._on_play)
        self._menu.json_btn.clicked.connect(self._show_json)
        self._menu.help_btn.clicked.connect(self._show_help)
        self._menu.quit_btn.clicked.connect(self.close)
        self._stack.addWidget(self._menu)  # 0

        # placeholder (replaced dynamically)
        self._game_page: _GamePage | None = None
        self._stack.addWidget(QWidget())  # 1

        # json mode
        self._json_page = _JsonPage()
        self._json_page.load_btn.clicked.connect(self._on_json_load)
        self._json_page.back_btn.clicked.connect(self._show_menu)
        self._stack.addWidget(self._json_page)  # 2

        # help
        self._help_page = _HelpPage()
        self._help_page.back_btn.clicked.connect(self._show_menu)
        self._stack.addWidget(self._help_page)  # 3

        self._stack.setCurrentIndex(_IDX_MENU)

        if board_path is not None:
            self._show_json()
            try:
                self._json_page.editor.setPlainText(board_path.read_text(encoding="utf-8"))
            except OSError as e:
                self._json_page.error.setText(f"Cannot read {board_path}: {e.strerror}")
            else:
                self._on_json_load()

    # -- navigation ---

    def _show_menu(self) -> None:
        self._stack.setCurrentIndex(_IDX_MENU)

    def _show_json(self) -> None:
        self._json_page.error.setText("")
        self._stack.setCurrentIndex(_IDX_JSON)

    def _show_help(self) -> None:
        self._stack.setCurrentIndex(_IDX_HELP)

    def _show_game(self, game: GamePlay) -> None:
        page = _GamePage(game)
        page.menu_btn.clicked.connect(self._show_menu)
        self._game_page = page

        old = self._stack.widget(_IDX_GAME)
        self._stack.removeWidget(old)
        old.deleteLater()
        self._stack.insertWidget(_IDX_GAME, page)
        self._stack.setCurrentIndex(_IDX_GAME)

    def _on_play(self) -> None:
        self._show_game(GamePlay(self._menu.selected_size))

    def _on_json_load(self) -> None:
        try:
            payload = BoardImporter.parse(self._json_page.editor.toPlainText())
        except PuzzleError as e:
            self._json_page.error.setText(str(e))
            return
        self._show_game(GamePlay.from_board(payload.to_board()))

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        idx = self._stack.currentIndex()

        if idx == _IDX_MENU:
            if key == Qt.Key.Key_Return:
                self._on_play()
            elif key == Qt.Key.Key_J:
                self._show_json()
            elif key == Qt.Key.Key_H:
                self._show_help()
            elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
                self.close()

        elif idx == _IDX_GAME and self._game_page is not None:
            gp = self._game_page
            if key in (Qt.Key.Key_U, Qt.Key.Key_Z, Qt.Key.Key_Backspace):
                gp.undo()
            elif key == Qt.Key.Key_R:
                gp.reset()
            elif key in (Qt.Key.Key_Plus, Qt.Key.Key_Equal):
                gp.step_size(+2)
            elif key == Qt.Key.Key_Minus:
                gp.step_size(-2)
            elif key in (Qt.Key.Key_M, Qt.Key.Key_Escape):
                self._show_menu()

        elif idx in (_IDX_JSON, _IDX_HELP):
            if key == Qt.Key.Key_Escape:
                self._show_menu()

        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(size: int = 4, board_path: Path | None = None) -> None:
    """Launch the PyQt6 GUI (opens directly to the menu)."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(size, board_path)
    window.show()
    qapp.exec()
