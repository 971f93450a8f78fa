"""Pygame GUI frontend — fully self-contained.

Includes main menu, size selection, gameplay with mouse gestures, corner
rotation buttons, undo, board import from the ``--board`` file, and a
help screen.  No terminal interaction required.
"""

from __future__ import annotations

import enum
from pathlib import Path

import pygame

from backend.config import SIZE_CHOICES
from backend.engine.boardimport import BoardImporter
from backend.engine.gameplay import GamePlay, GameView
from backend.models.errors import PuzzleError
from backend.models.rotation import RotationSpec
from backend.models.selection import Position
from frontend.help import HOW_TO_PLAY, JSON_HELP
from frontend.palette import label_rgb
from frontend.quick_rotate import QuickRotation, quick_rotations

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 520, 740
TILE_GAP = 4
MARGIN = 20
BOARD_TOP = 76
BOARD_MAX = WIN_W - 2 * MARGIN  # max board width/height in px


# ---------------------------------------------------------------------------
# Screen enum
# ---------------------------------------------------------------------------
class _Screen(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    HELP = "help"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Centring helpers
# ---------------------------------------------------------------------------
def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, default_size: int, board_path: Path | None) -> None:
        self._board_path = board_path
        self._sel_size = default_size if default_size in SIZE_CHOICES else SIZE_CHOICES[1]

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Rotation Puzzle")
        self._clock = pygame.time.Clock()

        # Fonts
        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)
        self._f_mono = pygame.font.SysFont("Courier", 13)

        self._screen = _Screen.MENU
        self._return_to = _Screen.MENU
        self._game: GamePlay | None = None
        self._hover_cell: Position | None = None
        self._status_msg: str = ""
        self._status_col: tuple = COL_YELLOW
        self._quick_size = 0
        self._quick_btns: list[tuple[QuickRotation, _Btn]] = []

        # Pre-build buttons that don't move
        self._build_menu_btns()
        self._build_game_btns()
        self._help_back = _Btn(
            (_cx(180), WIN_H - 64, 180, 46), "B A C K", self._f_btn_sm
        )

    # ── menu buttons ────────────────────────────────────────────────────────

    def _build_menu_btns(self) -> None:
        bw, bh, gap = 84, 46, 8
        total_w = len(SIZE_CHOICES) * bw + (len(SIZE_CHOICES) - 1) * gap
        sx = _cx(total_w)

        self._size_btns: dict[int, _Btn] = {}
        for i, s in enumerate(SIZE_CHOICES):
            self._size_btns[s] = _Btn(
                (sx + i * (bw + gap), 250, bw, bh),
                f"{s}×{s}",
                self._f_btn_sm,
            )

        bw_lg = 220
        self._play_btn = _Btn(
            (_cx(bw_lg), 330, bw_lg, 50),
            "P L A Y",
            self._f_btn,
            bg=COL_BLUE,
            hover=COL_LAVENDER,
            fg=COL_BASE,
        )
        self._load_btn = _Btn(
            (_cx(bw_lg), 394, bw_lg, 42),
            "L O A D   B O A R D",
            self._f_btn_sm,
            bg=COL_YELLOW,
            hover=(255, 240, 200),
            fg=COL_BASE,
        )
        self._help_btn = _Btn(
            (_cx(bw_lg), 450, bw_lg, 42),
            "HOW TO PLAY",
            self._f_btn_sm,
        )
        self._quit_btn = _Btn(
            (_cx(bw_lg), 506, bw_lg, 42),
            "Q U I T",
            self._f_btn_sm,
            bg=COL_RED,
            hover=(255, 170, 185),
            fg=COL_BASE,
        )

        self._menu_all: list[_Btn] = [
            *self._size_btns.values(),
            self._play_btn,
            self._load_btn,
            self._help_btn,
            self._quit_btn,
        ]

    def _build_game_btns(self) -> None:
        """Build in-game action buttons (placed below the board)."""
        bw, gap = 110, 10
        total = 3 * bw + 2 * gap
        sx = _cx(total)
        self._undo_btn = _Btn(
            (sx, 0, bw, 36), "UNDO (U)", self._f_btn_sm,
            bg=COL_YELLOW, hover=(255, 240, 200), fg=COL_BASE,
        )
        self._reset_btn = _Btn(
            (sx + bw + gap, 0, bw, 36), "RESET (R)", self._f_btn_sm,
            bg=COL_PINK, hover=(245, 210, 227), fg=COL_BASE,
        )
        self._menu_btn = _Btn(
            (sx + 2 * (bw + gap), 0, bw, 36), "MENU (M)", self._f_btn_sm,
        )
        self._game_action_btns = [self._undo_btn, self._reset_btn, self._menu_btn]

    def _quick_row(self, board_size: int) -> list[tuple[QuickRotation, _Btn]]:
        """Fixed-rotation buttons, rebuilt whenever the board size changes."""
        if self._quick_size != board_size:
            shortcuts = quick_rotations(board_size)
            n, gap = len(shortcuts), 6
            bw = min(96, (BOARD_MAX - (n - 1) * gap) // max(n, 1))
            sx = _cx(n * bw + (n - 1) * gap)
            self._quick_btns = [
                (q, _Btn((sx + i * (bw + gap), 0, bw, 30), q.label, self._f_small, radius=6))
                for i, q in enumerate(shortcuts)
            ]
            self._quick_size = board_size
        return self._quick_btns

    # ── helpers ─────────────────────────────────────────────────────────────

    def _tile_layout(self) -> tuple[int, int, int, int]:
        """Return (tile_px, origin_x, origin_y, total_px) for current game."""
        sz = self._game.size  # type: ignore[union-attr]
        tile_px = (BOARD_MAX - (sz + 1) * TILE_GAP) // sz
        total = sz * tile_px + (sz + 1) * TILE_GAP
        ox = _cx(total) + TILE_GAP
        oy = BOARD_TOP + TILE_GAP
        return tile_px, ox, oy, total

    def _tile_rect(
        self, r: int, c: int, tpx: int, ox: int, oy: int
    ) -> pygame.Rect:
        return pygame.Rect(
            ox + c * (tpx + TILE_GAP),
            oy + r * (tpx + TILE_GAP),
            tpx,
            tpx,
        )

    def _cell_at(self, pos: tuple[int, int]) -> Position | None:
        tpx, ox, oy, _ = self._tile_layout()
        sz = self._game.size  # type: ignore[union-attr]
        for r in range(sz):
            for c in range(sz):
                if self._tile_rect(r, c, tpx, ox, oy).collidepoint(pos):
                    return Position(r, c)
        return None

    def _set_status(self, msg: str, col: tuple = COL_YELLOW) -> None:
        self._status_msg = msg
        self._status_col = col

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        self._surf.fill(COL_BASE)

        _blit_center(
            self._surf,
            self._f_big.render("ROTATION  PUZZLE", True, COL_TEXT),
            80,
        )
        _blit_center(
            self._surf,
            self._f_body.render("Select board size", True, COL_SUBTEXT),
            210,
        )

        for s, btn in self._size_btns.items():
            btn.bg = COL_GREEN if s == self._sel_size else COL_SURFACE0
            btn.fg = COL_BASE if s == self._sel_size else COL_TEXT
            btn.draw(self._surf)

        self._play_btn.draw(self._surf)
        if self._board_path is not None:
            self._load_btn.draw(self._surf)
        self._help_btn.draw(self._surf)
        self._quit_btn.draw(self._surf)

        if self._status_msg:
            _blit_center(
                self._surf,
                self._f_small.render(self._status_msg, True, self._status_col),
                570,
            )

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        assert game is not None
        view = game.view()
        sz = view.size
        tpx, ox, oy, total = self._tile_layout()
        f_tile = pygame.font.SysFont(
            "Helvetica", max(12, tpx // 3), bold=True
        )

        # header
        _blit_center(
            self._surf,
            self._f_title.render(
                f"Rotation Puzzle  {sz}×{sz}", True, COL_TEXT
            ),
            14,
        )
        _blit_center(
            self._surf,
            self._f_body.render(
                f"Score: {view.score}    Moves: {view.moves}",
                True,
                COL_PINK,
            ),
            44,
        )

        # board bg
        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(_cx(total), BOARD_TOP, total, total),
            border_radius=10,
        )

        preview = self._preview(view)
        pending = view.pending

        # tiles
        for r in range(sz):
            for c in range(sz):
                val = view.tiles[r][c]
                rect = self._tile_rect(r, c, tpx, ox, oy)
                pygame.draw.rect(self._surf, label_rgb(val), rect, border_radius=6)
                lbl = f_tile.render(str(val), True, COL_BASE)
                self._surf.blit(
                    lbl,
                    (
                        rect.centerx - lbl.get_width() // 2,
                        rect.centery - lbl.get_height() // 2,
                    ),
                )
                pos = Position(r, c)
                if pos == pending:
                    pygame.draw.rect(
                        self._surf, COL_RED, rect, width=4, border_radius=6
                    )
                elif pos in preview:
                    pygame.draw.rect(
                        self._surf, COL_BASE, rect, width=2, border_radius=6
                    )

        # fixed rotations row
        quick_y = BOARD_TOP + total + 10
        for _, btn in self._quick_row(sz):
            btn.rect.y = quick_y
            btn.draw(self._surf)

        # action buttons row
        btn_y = quick_y + 40
        self._undo_btn.bg = COL_YELLOW if view.can_undo else COL_SURFACE0
        self._undo_btn.fg = COL_BASE if view.can_undo else COL_OVERLAY0
        for btn in self._game_action_btns:
            btn.rect.y = btn_y
            btn.draw(self._surf)

        # rotation counters
        counts = "   ".join(
            f"{s}×{s}: {n}" for s, n in sorted(view.rotation_counts.items())
        )
        _blit_center(
            self._surf,
            self._f_small.render(counts, True, COL_SUBTEXT),
            btn_y + 46,
        )

        # status message
        footer_y = btn_y + 68
        if self._status_msg:
            _blit_center(
                self._surf,
                self._f_small.render(self._status_msg, True, self._status_col),
                footer_y,
            )
            footer_y += 20

        _blit_center(
            self._surf,
            self._f_small.render(
                "Click two diagonal corners     U  undo     R  reset"
                "     +/-  size     M  menu",
                True,
                COL_OVERLAY0,
            ),
            footer_y,
        )

    def _draw_help(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(
            self._surf,
            self._f_big.render("HOW  TO  PLAY", True, COL_TEXT),
            24,
        )
        y = 90
        for line in HOW_TO_PLAY:
            self._surf.blit(self._f_small.render(f"• {line}", True, COL_SUBTEXT), (24, y))
            y += 22
        y += 10
        for line in JSON_HELP:
            self._surf.blit(self._f_mono.render(line, True, COL_OVERLAY0), (24, y))
            y += 16
        self._help_back.draw(self._surf)

    def _preview(self, view: GameView) -> set[Position]:
        pending = view.pending
        if pending is None or self._hover_cell is None:
            return set()
        spec = RotationSpec.from_corners(pending, self._hover_cell)
        if spec is None or not spec.fits(view.size):
            return set()
        return set(spec.cells())

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_menu(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._menu_all:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for s, b in self._size_btns.items():
                if b.hit(ev.pos):
                    self._sel_size = s
                    return True
            if self._play_btn.hit(ev.pos):
                self._start_game()
            elif self._board_path is not None and self._load_btn.hit(ev.pos):
                self._load_board()
            elif self._help_btn.hit(ev.pos):
                self._open_help()
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_RETURN:
                self._start_game()
            elif ev.key == pygame.K_l and self._board_path is not None:
                self._load_board()
            elif ev.key == pygame.K_h:
                self._open_help()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        game = self._game
        assert game is not None
        if ev.type == pygame.MOUSEMOTION:
            for btn in self._game_action_btns:
                btn.motion(ev.pos)
            for _, btn in self._quick_row(game.size):
                btn.motion(ev.pos)
            self._hover_cell = self._cell_at(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            # Check action buttons first
            if self._undo_btn.hit(ev.pos):
                self._do_undo()
                return True
            if self._reset_btn.hit(ev.pos):
                self._do_reset()
                return True
            if self._menu_btn.hit(ev.pos):
                self._screen = _Screen.MENU
                return True
            for q, btn in self._quick_row(game.size):
                if btn.hit(ev.pos):
                    self._do_quick(q)
                    return True
            # Then check tiles
            cell = self._cell_at(ev.pos)
            if cell is not None:
                if game.select_cell(cell):
                    self._set_status(f"Rotated!  Score {game.score}", COL_GREEN)
                else:
                    self._set_status("")
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_u, pygame.K_z, pygame.K_BACKSPACE):
                self._do_undo()
            elif ev.key == pygame.K_r:
                self._do_reset()
            elif ev.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                self._step_size(+2)
            elif ev.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                self._step_size(-2)
            elif ev.key == pygame.K_h:
                self._open_help()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    def _ev_help(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._help_back.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._help_back.hit(ev.pos):
                self._screen = self._return_to
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (
                pygame.K_ESCAPE,
                pygame.K_BACKSPACE,
                pygame.K_m,
                pygame.K_h,
            ):
                self._screen = self._return_to
        return True

    # ── game actions ────────────────────────────────────────────────────────

    def _do_undo(self) -> None:
        game = self._game
        assert game is not None
        if game.undo():
            self._set_status("Undid last rotation")
        else:
            self._set_status("Nothing to undo", COL_OVERLAY0)

    def _do_quick(self, q: QuickRotation) -> None:
        game = self._game
        assert game is not None
        if game.rotate(q.row, q.col, q.size):
            self._set_status(f"Rotated {q.label}!  Score {game.score}", COL_GREEN)

    def _do_reset(self) -> None:
        game = self._game
        assert game is not None
        game.reset()
        self._set_status("New board")

    def _step_size(self, step: int) -> None:
        game = self._game
        assert game is not None
        size = game.size + step
        if size % 2:
            size += 1 if step > 0 else -1
        if size not in SIZE_CHOICES:
            return
        try:
            game.change_size(size)
        except PuzzleError as e:
            self._set_status(str(e), COL_RED)
            return
        self._sel_size = size
        self._set_status(f"Board size {size}×{size}")

    def _open_help(self) -> None:
        self._return_to = self._screen
        self._screen = _Screen.HELP

    # ── game state ──────────────────────────────────────────────────────────

    def _start_game(self) -> None:
        self._game = GamePlay(self._sel_size)
        self._hover_cell = None
        self._set_status("")
        self._screen = _Screen.PLAYING

    def _load_board(self) -> None:
        assert self._board_path is not None
        try:
            payload = BoardImporter.load_file(self._board_path)
        except PuzzleError as e:
            self._set_status(f"Import failed: {e}", COL_RED)
            return
        self._game = GamePlay.from_board(payload.to_board())
        self._hover_cell = None
        self._set_status(f"Imported {self._board_path.name}", COL_GREEN)
        self._screen = _Screen.PLAYING

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.MENU: self._ev_menu,
            _Screen.PLAYING: self._ev_game,
            _Screen.HELP: self._ev_help,
        }
        _draw = {
            _Screen.MENU: self._draw_menu,
            _Screen.PLAYING: self._draw_game,
            _Screen.HELP: self._draw_help,
        }

        if self._board_path is not None:
            self._load_board()

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                handler = _dispatch.get(self._screen)
                if handler and not handler(ev):
                    running = False
                    break

            drawer = _draw.get(self._screen)
            if drawer:
                drawer()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(size: int = 4, board_path: Path | None = None) -> None:
    """Launch the Pygame GUI (opens directly to the menu)."""
    app = PygameApp(size, board_path)
    app.run_loop()
