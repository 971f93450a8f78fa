"""Rotates a square region of the board by 90 degrees clockwise."""

from __future__ import annotations

from backend.models.board import Board
from backend.models.rotation import RotationSpec


class Rotator:
    """Stateless — all methods are static."""

    @staticmethod
    def rotate(board: Board, spec: RotationSpec) -> Board:
        """Return a copy of *board* with the square at *spec* turned clockwise.

        *board* is left untouched.  Raises ``ValueError`` if the square
        does not fit; callers are expected to check ``spec.fits`` first.
        """
        if not spec.fits(board.size):
            raise ValueError(
                f"Rotation {spec} does not fit a {board.size}x{board.size} board."
            )

        result = board.copy()
        row, col, size = spec.row, spec.col, spec.size
        for i in range(size):
            for j in range(size):
                result.tiles[row + j][col + size - 1 - i] = board.tiles[row + i][col + j]
        return result
