"""Keyboard-driven play shared by the terminal frontends.

A terminal has no mouse, so the player moves a cursor over the board
and presses Space/Enter to click the cell under it.  Number keys 2-9
rotate the square of that side whose top-left corner is the cursor; 0
rotates the whole board.  This module turns
the action strings from ``input_handler`` into calls on ``GamePlay``;
the frontends only draw.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from backend.config import MAX_SIZE, MIN_SIZE
from backend.engine.boardimport import BoardImporter, BoardPayload
from backend.engine.gameplay import GamePlay
from backend.models.errors import PuzzleError
from backend.models.selection import Position


class Tone(StrEnum):
    INFO = "info"
    GOOD = "good"
    ERROR = "error"


@dataclass(frozen=True)
class Status:
    text: str
    tone: Tone = Tone.INFO


_OFFSETS: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}

_QUICK_SIZES: dict[str, int] = {str(k): k for k in range(2, 10)}


class CursorControl:
    """A ``GamePlay`` plus the terminal cursor."""

    def __init__(self, game: GamePlay) -> None:
        self.game = game
        self.cursor = Position(0, 0)

    def handle(self, key: str) -> Status | None:
        """Apply one action.  Returns a status line for the frontend, if any."""
        game = self.game

        if key in _OFFSETS:
            dr, dc = _OFFSETS[key]
            n = game.size
            self.cursor = Position(
                min(max(self.cursor.row + dr, 0), n - 1),
                min(max(self.cursor.col + dc, 0), n - 1),
            )
            return None

        if key in ("select", "enter"):
            if game.select_cell(self.cursor):
                return Status(f"Rotated! Score {game.score}", Tone.GOOD)
            return None

        if key == "0":
            return self.rotate(0, 0, game.size)
        if key in _QUICK_SIZES:
            return self.rotate(self.cursor.row, self.cursor.col, _QUICK_SIZES[key])

        if key == "undo":
            if game.undo():
                return Status("Undid last rotation.")
            return Status("Nothing to undo.")

        if key == "reset":
            game.reset()
            self._clamp_cursor()
            return Status("New board.")

        if key in ("grow", "shrink"):
            step = 2 if key == "grow" else -2
            size = min(max(game.size + step, MIN_SIZE), MAX_SIZE)
            if size % 2:
                size += 1 if key == "grow" else -1
            if size == game.size:
                return None
            return self.change_size(size)

        return None

    def rotate(self, row: int, col: int, size: int) -> Status:
        if self.game.rotate(row, col, size):
            return Status(f"Rotated {size}×{size}! Score {self.game.score}", Tone.GOOD)
        return Status(f"No {size}×{size} square fits there.", Tone.ERROR)

    def change_size(self, size: int) -> Status:
        try:
            self.game.change_size(size)
        except PuzzleError as e:
            return Status(str(e), Tone.ERROR)
        self._clamp_cursor()
        return Status(f"Board size {size}×{size}.")

    def import_file(self, raw_path: str) -> Status:
        """Import the board stored at *raw_path* into the running game."""
        payload, status = _load(raw_path)
        if payload is None:
            return status
        self.game.import_board(payload.size, payload.entities)
        self._clamp_cursor()
        return status

    @classmethod
    def open_file(cls, raw_path: str) -> tuple[CursorControl | None, Status]:
        """Start a new game on the board stored at *raw_path*."""
        payload, status = _load(raw_path)
        if payload is None:
            return None, status
        return cls(GamePlay.from_board(payload.to_board())), status

    def _clamp_cursor(self) -> None:
        n = self.game.size
        self.cursor = Position(min(self.cursor.row, n - 1), min(self.cursor.col, n - 1))


def _load(raw_path: str) -> tuple[BoardPayload | None, Status]:
    if not raw_path:
        return None, Status("Import cancelled.")
    try:
        payload = BoardImporter.load_file(Path(raw_path).expanduser())
    except PuzzleError as e:
        return None, Status(f"Import failed: {e}", Tone.ERROR)
    return payload, Status(f"Imported {payload.size}×{payload.size} board.", Tone.GOOD)
