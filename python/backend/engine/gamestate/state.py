"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from dataclasses import dataclass, field

from backend.engine.gamescore import Scorer
from backend.models.board import Board
from backend.models.selection import IDLE, Selection


def empty_counts(size: int) -> dict[int, int]:
    """Rotation counters for every square size a board of *size* allows."""
    return {s: 0 for s in range(2, size + 1)}


@dataclass(frozen=True)
class Snapshot:
    """Board, score and rotation counters as they were before a move."""

    board: Board
    score: int
    rotation_counts: dict[int, int] = field(default_factory=dict)


class GameState:
    """Holds the current board, score, counters, selection and history."""

    def __init__(
        self, board: Board, score: int = 0, history_limit: int | None = None
    ) -> None:
        self.board = board
        self.score = score
        self.moves: int = 0
        self.rotation_counts: dict[int, int] = empty_counts(board.size)
        self.selection: Selection = IDLE
        self.history: list[Snapshot] = []
        self.history_limit = history_limit

    # -- history --------------------------------------------------------------

    def push_snapshot(self) -> None:
        self.history.append(
            Snapshot(
                board=self.board.copy(),
                score=self.score,
                rotation_counts=dict(self.rotation_counts),
            )
        )
        if self.history_limit is not None and len(self.history) > self.history_limit:
            del self.history[0]

    def pop_snapshot(self) -> bool:
        """Restore the latest snapshot.  Returns False if there is none."""
        if not self.history:
            return False
        snap = self.history.pop()
        self.board = snap.board
        self.score = snap.score
        self.rotation_counts = dict(snap.rotation_counts)
        self.moves -= 1
        return True

    @property
    def can_undo(self) -> bool:
        return bool(self.history)

    # -- moves ----------------------------------------------------------------

    def record_rotation(self, board: Board, size: int) -> None:
        self.board = board
        self.score = Scorer.score(board)
        self.rotation_counts[size] = self.rotation_counts.get(size, 0) + 1
        self.moves += 1
