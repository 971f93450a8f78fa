"""Rich terminal frontend — coloured tables and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler, cursor controls and backend as the vanilla CLI.  Includes
a built-in menu for size selection, play, board import and help.
"""

from __future__ import annotations

from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import SIZE_CHOICES
from backend.engine.gameplay import GamePlay, GameView
from backend.models.rotation import RotationSpec
from backend.models.selection import Position
from frontend.cli.controls import CursorControl, Status, Tone
from frontend.cli.input_handler import get_key
from frontend.help import HOW_TO_PLAY, JSON_HELP
from frontend.palette import label_hex

console = Console()

_TONE_STYLE = {Tone.INFO: "cyan", Tone.GOOD: "bold green", Tone.ERROR: "bold red"}


# -- board rendering ----------------------------------------------------------


def _render_board(view: GameView, cursor: Position) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = max(len(str(v)) for row in view.tiles for v in row)
    pending = view.pending
    preview: set[Position] = set()
    if pending is not None:
        spec = RotationSpec.from_corners(pending, cursor)
        if spec is not None and spec.fits(view.size):
            preview = set(spec.cells())

    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 0),
    )
    for _ in range(view.size):
        table.add_column(width=width + 2, justify="center")

    for r, row in enumerate(view.tiles):
        cells: list[Text] = []
        for c, val in enumerate(row):
            pos = Position(r, c)
            style = f"black on {label_hex(val)}"
            if pos in preview:
                style += " underline"
            if pos == cursor:
                cells.append(Text(f"[{val:>{width}}]", style=style + " bold"))
            elif pos == pending:
                cells.append(Text(f"*{val:>{width}}*", style=style + " bold"))
            else:
                cells.append(Text(f" {val:>{width}} ", style=style))
        table.add_row(*cells)

    return table


def _render_counts(view: GameView) -> Table:
    table = Table(box=rich.box.SIMPLE, show_edge=False, padding=(0, 1))
    for s in sorted(view.rotation_counts):
        table.add_column(f"{s}×{s}", justify="right", style="yellow")
    table.add_row(*(str(view.rotation_counts[s]) for s in sorted(view.rotation_counts)))
    return table


# -- menu screen --------------------------------------------------------------


def _draw_menu(sel_size: int, status: Status | None) -> None:
    """Draw the main menu."""
    console.clear()

    # Build size selector line
    sizes = Text()
    for i, s in enumerate(SIZE_CHOICES):
        if i:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    nav = Text("  ← →  change size", style="dim")

    # Build options
    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("2", style="bold yellow")
    opts.append("  Import    ")
    opts.append("H", style="dim bold")
    opts.append("  Help    ", style="dim")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]R O T A T I O N   P U Z Z L E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text(status.text, style=_TONE_STYLE[status.tone])))


# -- game screens -------------------------------------------------------------


def _draw_game(control: CursorControl, status: Status | None = None) -> None:
    """Draw the game screen."""
    console.clear()

    view = control.game.view()
    size = view.size

    stats = Text()
    stats.append("  Score: ", style="dim")
    stats.append(str(view.score), style="bold yellow")
    stats.append("    Moves: ", style="dim")
    stats.append(str(view.moves), style="bold yellow")
    stats.append("    Undo: ", style="dim")
    stats.append("yes" if view.can_undo else "no", style="bold green" if view.can_undo else "dim")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  pick   ", style="dim")
    controls.append("2-9", style="bold cyan")
    controls.append("  rotate at cursor   ", style="dim")
    controls.append("0", style="bold cyan")
    controls.append("  rotate all   ", style="dim")
    controls.append("U", style="bold cyan")
    controls.append("  undo   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("+/-", style="bold cyan")
    controls.append("  size   ", style="dim")
    controls.append("I", style="bold cyan")
    controls.append("  import   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    body = [Align.center(_render_board(view, control.cursor))]
    if view.rotation_counts:
        body.append(Align.center(_render_counts(view)))

    panel = Panel(
        Group(*body),
        title=f"[bold cyan]Rotation Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text(f"  {status.text}", style=_TONE_STYLE[status.tone])))
    console.print(Align.center(controls))


def _draw_help() -> None:
    """Full-screen how-to-play view."""
    console.clear()

    rules = Text()
    for line in HOW_TO_PLAY:
        rules.append("  • ", style="bold cyan")
        rules.append(f"{line}\n")

    panel = Panel(
        Group(rules, Text("\n".join(JSON_HELP), style="dim")),
        title="[bold]HOW  TO  PLAY[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


def _prompt_path() -> str:
    raw = console.input(
        "  [bold yellow]Path to JSON board[/bold yellow] [dim](empty to cancel)[/dim]: "
    )
    return raw.strip()


# -- game loop ----------------------------------------------------------------


def _play_game(control: CursorControl, status: Status | None = None) -> None:
    while True:
        _draw_game(control, status)
        key = get_key()

        if key == "quit":
            return
        if key == "help":
            _draw_help()
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
        _draw_menu(sel_size, status)
        status = None
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(
                Align.center(Text("\nGoodbye!\n", style="bold cyan"))
            )
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
            _draw_help()


# -- public entry point -------------------------------------------------------


def run(size: int, board_path: Path | None = None) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(size, board_path)
