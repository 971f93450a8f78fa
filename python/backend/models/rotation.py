"""Sub-square rotation targets."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.selection import Position


@dataclass(frozen=True)
class RotationSpec:
    """Top-left corner and side length of a square to rotate."""

    row: int
    col: int
    size: int

    @classmethod
    def from_corners(cls, a: Position, b: Position) -> RotationSpec | None:
        """Derive the square whose diagonal runs from *a* to *b*.

        Returns ``None`` when the two cells are the same or do not lie on
        a common diagonal.  Whether the square fits a given board is left
        to :meth:`fits`.
        """
        d_row = abs(a.row - b.row)
        d_col = abs(a.col - b.col)
        if d_row != d_col or d_row == 0:
            return None

        distance = d_row + d_col
        if distance % 2:
            return None
        return cls(
            row=min(a.row, b.row),
            col=min(a.col, b.col),
            size=distance // 2 + 1,
        )

    def fits(self, board_size: int) -> bool:
        return (
            2 <= self.size <= board_size
            and self.row >= 0
            and self.col >= 0
            and self.row + self.size <= board_size
            and self.col + self.size <= board_size
        )

    def cells(self) -> list[Position]:
        return [
            Position(self.row + i, self.col + j)
            for i in range(self.size)
            for j in range(self.size)
        ]
