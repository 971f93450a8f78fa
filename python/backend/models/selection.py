"""Cell positions and the two-click selection state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def on_board(self, size: int) -> bool:
        return 0 <= self.row < size and 0 <= self.col < size


@dataclass(frozen=True)
class Idle:
    """No cell is waiting for a second click."""


@dataclass(frozen=True)
class Pending:
    """The first corner of a gesture has been clicked."""

    position: Position


Selection = Idle | Pending

IDLE = Idle()
