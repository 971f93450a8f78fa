from backend.models.board import Board
from backend.models.errors import (
    BoardValidationError,
    ConfigurationError,
    PuzzleError,
)
from backend.models.rotation import RotationSpec
from backend.models.selection import IDLE, Idle, Pending, Position, Selection

__all__ = [
    "Board",
    "BoardValidationError",
    "ConfigurationError",
    "IDLE",
    "Idle",
    "Pending",
    "Position",
    "PuzzleError",
    "RotationSpec",
    "Selection",
]
