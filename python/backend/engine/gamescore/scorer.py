"""Adjacency scoring."""

from __future__ import annotations

from backend.models.board import Board


class Scorer:
    """Stateless — all methods are static."""

    @staticmethod
    def score(board: Board) -> int:
        """Count orthogonally adjacent cell pairs that share a label."""
        tiles = board.tiles
        n = board.size
        total = 0
        for r in range(n):
            for c in range(n - 1):
                if tiles[r][c] == tiles[r][c + 1]:
                    total += 1
        for r in range(n - 1):
            for c in range(n):
                if tiles[r][c] == tiles[r + 1][c]:
                    total += 1
        return total
