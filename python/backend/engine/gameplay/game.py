"""Core gameplay logic — cell selection, rotations, undo and board changes."""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from backend.config import DEFAULT_HISTORY_LIMIT, DEFAULT_SIZE
from backend.engine.boardimport import BoardImporter
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamescore import Scorer
from backend.engine.gamestate import GameState
from backend.engine.rotation import Rotator
from backend.models.board import Board
from backend.models.errors import PuzzleError
from backend.models.rotation import RotationSpec
from backend.models.selection import IDLE, Idle, Pending, Position, Selection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameView:
    """Everything a frontend needs to draw one frame."""

    tiles: tuple[tuple[int, ...], ...]
    size: int
    number_of_labels: int
    score: int
    moves: int
    rotation_counts: dict[int, int]
    selection: Selection
    can_undo: bool

    @property
    def pending(self) -> Position | None:
        if isinstance(self.selection, Pending):
            return self.selection.position
        return None


class GamePlay:
    """Orchestrates a single game session.

    This is the only object a frontend talks to.  Every action either
    commits completely or leaves the session exactly as it was.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        rng: random.Random | None = None,
        history_limit: int | None = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self._rng = rng
        self._history_limit = history_limit
        board = GameGenerator.generate(size, rng)
        self.state = GameState(board, history_limit=history_limit)

    @classmethod
    def from_board(
        cls, board: Board, history_limit: int | None = DEFAULT_HISTORY_LIMIT
    ) -> "GamePlay":
        """Create a session around an existing board (e.g. loaded from file).

        The board is scored immediately, as an imported board would be.
        """
        obj = object.__new__(cls)
        obj._rng = None
        obj._history_limit = history_limit
        obj.state = GameState(
            board, score=Scorer.score(board), history_limit=history_limit
        )
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.state.board.size

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def moves(self) -> int:
        return self.state.moves

    @property
    def selection(self) -> Selection:
        return self.state.selection

    @property
    def can_undo(self) -> bool:
        return self.state.can_undo

    def view(self) -> GameView:
        board = self.state.board
        return GameView(
            tiles=board.as_tuple(),
            size=board.size,
            number_of_labels=board.number_of_labels,
            score=self.state.score,
            moves=self.state.moves,
            rotation_counts=dict(self.state.rotation_counts),
            selection=self.state.selection,
            can_undo=self.state.can_undo,
        )

    # -- gesture --------------------------------------------------------------

    def select_cell(self, position: Position) -> bool:
        """Feed one click into the two-click gesture.

        The first click marks a corner.  Clicking it again cancels.  A
        second, different click is taken as the opposite corner of the
        square to rotate; if the two cells do not span a legal square the
        gesture is dropped.  Either way the selection returns to idle.

        Returns True only if a rotation was applied.
        """
        state = self.state
        if not position.on_board(self.size):
            return False

        selection = state.selection
        if isinstance(selection, Idle):
            state.selection = Pending(position)
            return False

        first = selection.position
        state.selection = IDLE
        if first == position:
            logger.debug("Selection at %s cancelled", position)
            return False

        spec = RotationSpec.from_corners(first, position)
        if spec is None or not spec.fits(self.size):
            logger.debug("Discarded gesture %s -> %s", first, position)
            return False

        return self._apply(spec)

    # -- movement -------------------------------------------------------------

    def rotate(self, row: int, col: int, size: int) -> bool:
        """Rotate the *size* square whose top-left cell is (*row*, *col*).

        Returns True if the square fits the board and the rotation was
        applied.
        """
        spec = RotationSpec(row=row, col=col, size=size)
        if not spec.fits(self.size):
            return False
        self.state.selection = IDLE
        return self._apply(spec)

    def undo(self) -> bool:
        """Revert the most recent rotation.  Returns False if there is none."""
        if not self.state.pop_snapshot():
            return False
        self.state.selection = IDLE
        logger.debug("Undo -> moves=%d score=%d", self.state.moves, self.state.score)
        return True

    # -- new boards -----------------------------------------------------------

    def reset(self, size: int | None = None) -> None:
        """Start over on a fresh board of *size* (default: the current size)."""
        size = self.size if size is None else size
        try:
            board = GameGenerator.generate(size, self._rng)
        except PuzzleError:
            logger.warning("Rejected board size %r", size)
            raise
        self.state = GameState(board, history_limit=self._history_limit)
        logger.info("New %dx%d game", size, size)

    def change_size(self, size: int) -> None:
        self.reset(size)

    def import_board(self, size: Any, entities: Any) -> None:
        """Replace the board with *entities*, validated against *size*.

        Raises ``BoardValidationError`` and leaves the session unchanged if
        the grid is not ``size`` x ``size`` or holds anything but ints >= 0.
        """
        try:
            payload = BoardImporter.validate(size, entities)
        except PuzzleError as e:
            logger.warning("Rejected board import: %s", e)
            raise
        self._load(payload.to_board())

    def import_payload(self, payload: str | bytes | Mapping[str, Any]) -> None:
        """Parse a JSON payload and import the board it describes."""
        try:
            parsed = BoardImporter.parse(payload)
        except PuzzleError as e:
            logger.warning("Rejected board import: %s", e)
            raise
        self._load(parsed.to_board())

    # -- helpers --------------------------------------------------------------

    def _apply(self, spec: RotationSpec) -> bool:
        state = self.state
        board = Rotator.rotate(state.board, spec)
        state.push_snapshot()
        state.record_rotation(board, spec.size)
        logger.debug(
            "Rotated %dx%d at (%d, %d) -> score=%d moves=%d",
            spec.size, spec.size, spec.row, spec.col, state.score, state.moves,
        )
        return True

    def _load(self, board: Board) -> None:
        self.state = GameState(
            board, score=Scorer.score(board), history_limit=self._history_limit
        )
        logger.info("Imported %dx%d board (score %d)", board.size, board.size, self.state.score)
        unpaired = sorted(label for label, n in board.label_counts().items() if n != 2)
        if unpaired:
            logger.info("Labels not appearing exactly twice: %s", unpaired)
