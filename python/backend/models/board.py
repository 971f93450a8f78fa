"""Board model for the rotation puzzle."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass


@dataclass
class Board:
    """Represents the puzzle board.

    Labels are stored as a 2D list of non-negative ints.  A generated
    board holds every label in ``[0, size * size // 2)`` exactly twice;
    an imported board is only guaranteed to be square.
    """

    size: int
    tiles: list[list[int]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from a list of rows, copying each row.

        Example::

            Board.from_rows([[0, 1], [1, 0]])
        """
        size = len(rows)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(
                    f"Row {r} has {len(row)} cells, expected {size}."
                )
        return cls(size=size, tiles=[list(row) for row in rows])

    # -- queries --------------------------------------------------------------

    @property
    def number_of_labels(self) -> int:
        """Distinct labels a generated board of this size uses."""
        return self.size * self.size // 2

    def label_counts(self) -> Counter[int]:
        return Counter(v for row in self.tiles for v in row)

    def as_tuple(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self.tiles)

    def copy(self) -> Board:
        return Board(size=self.size, tiles=[row[:] for row in self.tiles])
