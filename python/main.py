#!/usr/bin/env python3
"""Rotation Puzzle.

Usage::

    python main.py                     # interactive menu
    python main.py -f rich -s 6        # Rich terminal, 6×6
    python main.py -f pyqt -b b.json   # PyQt GUI, start from an imported board
    python main.py --log-level debug --log-file puzzle.log
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import (  # noqa: E402
    DEFAULT_SIZE,
    LOG_DATEFMT,
    LOG_FORMAT,
    MAX_SIZE,
    MIN_SIZE,
)
from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.models.errors import ConfigurationError  # noqa: E402

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(
    level: LogLevel, log_file: Optional[Path], frontend: Optional[Frontend]
) -> None:
    handlers: list[logging.Handler] = []
    if frontend is Frontend.rich:
        from rich.logging import RichHandler

        handlers.append(RichHandler(show_path=False, log_time_format=LOG_DATEFMT))
    else:
        handlers.append(logging.StreamHandler())
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.value.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=handlers,
        force=True,
    )


def _menu_loop(size: int, board: Optional[Path]) -> None:
    while True:
        print()
        print("  ====================================")
        print("     R O T A T I O N   P U Z Z L E    ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  4.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        frontend = {
            "1": Frontend.vanilla,
            "2": Frontend.rich,
            "3": Frontend.pygame,
            "4": Frontend.pyqt,
        }.get(choice)
        if frontend is None:
            print("  Unknown option.")
            continue

        mod = importlib.import_module(_RUNNERS[frontend])
        mod.run(size=size, board_path=board)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Board size, an even number ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    board: Optional[Path] = typer.Option(
        None, "-b", "--board",
        exists=True, dir_okay=False, readable=True,
        help="JSON board to import at start-up.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        help="Logging verbosity.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        dir_okay=False,
        help="Also write the log to this file.",
    ),
) -> None:
    """Rotation Puzzle."""
    _configure_logging(log_level, log_file, frontend)

    try:
        GameGenerator.validate_size(size)
    except ConfigurationError as e:
        raise typer.BadParameter(str(e), param_hint="'-s' / '--size'") from e

    if frontend is None:
        _menu_loop(size, board)
        return

    logger.info("Starting %s frontend (%dx%d)", frontend.value, size, size)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(size=size, board_path=board)


if __name__ == "__main__":
    app()
