"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Includes a built-in menu for size selection, play, board import, and help.
"""

from __future__ import annotations

import sys
from pathlib import Path

from backend.config import SIZE_CHOICES
from backend.engine.gameplay import GamePlay, GameView
from backend.models.rotation import RotationSpec
from backend.models.selection import Position
from frontend.cli.controls import CursorControl, Status, Tone
from frontend.cli.input_handler import get_key, read_line
from frontend.help import HOW_TO_PLAY, JSON_HELP
from frontend.palette import label_rgb


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_UL = "\033[4m"      # underline
_R = "\033[0m"       # reset
_BG_SEL = "\033[42;30m"  # green bg, black fg (selected size)

_TONES = {Tone.INFO: _C, Tone.GOOD: _G, Tone.ERROR: _RED}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _bg(label: int) -> str:
    r, g, b = label_rgb(label)
    return f"\033[48;2;{r};{g};{b}m\033[30m"


def _status_line(status: Status | None) -> str:
    if status is None:
        return ""
    return f"{_TONES[status.tone]}{status.text}{_R}"


# -- board rendering ----------------------------------------------------------


def _preview(view: GameView, cursor: Position) -> set[Position]:
    """Cells that would rotate if the cursor cell were clicked now."""
    pending = view.pending
    if pending is None:
        return set()
    spec = RotationSpec.from_corners(pending, cursor)
    if spec is None or not spec.fits(view.size):
        return set()
    return set(spec.cells())


def _render_board(view: GameView, cursor: Position) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = max(len(str(v)) for row in view.tiles for v in row)
    preview = _preview(view, cursor)
    pending = view.pending

    lines: list[str] = []
    for r, row in enumerate(view.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            pos = Position(r, c)
            left, right = " ", " "
            if pos == cursor:
                left, right = "[", "]"
            elif pos == pending:
                left, right = "*", "*"
            style = _bg(val) + (_UL if pos in preview else "")
            cells.append(f"{style}{left}{val:>{width}}{right}{_R}")
        lines.append("  " + " ".join(cells))
    return "\n".join(lines)


def _stats_line(view: GameView) -> str:
    counts = "  ".join(
        f"{s}×{s}:{n}" for s, n in sorted(view.rotation_counts.items())
    )
    undo = f"{_G}yes{_R}" if view.can_undo else f"{_DIM}no{_R}"
    return (
        f"  Score: {_Y}{view.score}{_R}  |  Moves: {_Y}{view.moves}{_R}  |  "
        f"Undo: {undo}\n  {_DIM}Rotations  {counts}{_R}"
    )


# -- menu screen --------------------------------------------------------------


def _show_menu(sel_size: int, status: Status | None) -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}     R O T A T I O N   P U Z Z L E    {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()

    # Size selector
    sizes_str = ""
    for s in SIZE_CHOICES:
        if s == sel_size:
            sizes_str += f"  {_BG_SEL} {s}×{s} {_R}"
        else:
            sizes_str += f"  {_DIM}{s}×{s}{_R}"
    print(f"    Size:{sizes_str}")
    print(f"    {_DIM}← → to change{_R}")
    print()

    # Options
    print(f"    {_C}1{_R}  Play")
    print(f"    {_Y}2{_R}  Import board (JSON)")
    print(f"    {_DIM}H{_R}  How to play")
    print(f"    {_DIM}Q{_R}  Quit")
    print()
    if status:
        print(f"  {_status_line(status)}")


# -- game screens -------------------------------------------------------------


def _show_game(control: CursorControl, status: Status | None) -> None:
    _clear()
    view = control.game.view()
    size = view.size
    print(f"  {_C}=== Rotation Puzzle ({size}×{size}) ==={_R}")
    print()
    print(_render_board(view, control.cursor))
    print()
    print(_stats_line(view))
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: cursor  |  "
        f"{_C}Space{_R}: pick  |  "
        f"{_C}2-9{_R}: rotate at cursor  |  "
        f"{_C}0{_R}: rotate all  |  "
        f"{_C}U{_R}: undo  |  "
        f"{_C}R{_R}: reset  |  "
        f"{_C}+/-{_R}: size  |  "
        f"{_C}I{_R}: import  |  "
        f"{_C}Q{_R}: back"
    )
    if status:
        print(f"\n  {_status_line(status)}")
    sys.stdout.flush()


def _show_help() -> None:
    _clear()
    print()
    print(f"  {_BOLD}=== HOW TO PLAY ==={_R}")
    print()
    for line in HOW_TO_PLAY:
        print(f"  • {line}")
    print()
    for line in JSON_HELP:
        print(f"  {_DIM}{line}{_R}")
    print(f"\n  {_DIM}Press any key to go back.{_R}")
    get_key()


def _prompt_path() -> str:
    print()
    return read_line("  Path to JSON board (empty to cancel): ")


# -- game loop ----------------------------------------------------------------


def _play_game(control: CursorControl, status: Status | None = None) -> None:
    while True:
        _show_game(control, status)
        key = get_key()

        if key == "quit":
            return
        if key == "help":
            _show_help()
            status = None
        elif key == "import":
            status = control.import_file(_prompt_path())
        else:
            status = control.handle(key)


# -- menu loop ----------------------------------------------------------------


def _menu_loop(sel_size: int, board_path: Path | None) -> None:
    status: Status | None = None

    if board_path is not None:
        control, status = CursorControl.open_file(str(board_path))
        if control is not None:
            _play_game(control, status)
            status = None

    while True:
        _show_menu(sel_size, status)
        status = None
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        elif key == "left":
            idx = SIZE_CHOICES.index(sel_size)
            sel_size = SIZE_CHOICES[max(0, idx - 1)]
        elif key == "right":
            idx = SIZE_CHOICES.index(sel_size)
            sel_size = SIZE_CHOICES[min(len(SIZE_CHOICES) - 1, idx + 1)]
        elif key in ("1", "enter"):
            _play_game(CursorControl(GamePlay(sel_size)))
        elif key in ("2", "import"):
            control, result = CursorControl.open_file(_prompt_path())
            if control is not None:
                _play_game(control, result)
            else:
                status = result
        elif key == "help":
            _show_help()


# -- public entry point -------------------------------------------------------


def run(size: int, board_path: Path | None = None) -> None:
    """Launch the vanilla CLI with interactive menu."""
    _menu_loop(size, board_path)
