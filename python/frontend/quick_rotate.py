"""Fixed rotation shortcuts offered next to the board.

The corner squares of side 2 and 3 plus the whole board, in the order
the buttons are laid out.
"""

from __future__ import annotations

from dataclasses import dataclass

_CORNERS: tuple[tuple[str, bool, bool], ...] = (
    ("TL", False, False),
    ("TR", False, True),
    ("BL", True, False),
    ("BR", True, True),
)


@dataclass(frozen=True)
class QuickRotation:
    label: str
    row: int
    col: int
    size: int


def quick_rotations(board_size: int) -> list[QuickRotation]:
    """Shortcuts for a board of side *board_size*."""
    shortcuts: list[QuickRotation] = []
    for k in (2, 3):
        if k >= board_size:
            continue
        far = board_size - k
        for corner, bottom, right in _CORNERS:
            shortcuts.append(
                QuickRotation(
                    f"{k}×{k} {corner}",
                    far if bottom else 0,
                    far if right else 0,
                    k,
                )
            )
    if board_size >= 2:
        shortcuts.append(QuickRotation("ALL", 0, 0, board_size))
    return shortcuts
