"""Generates rotation puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.models.board import Board
from backend.models.errors import ConfigurationError

logger = logging.getLogger(__name__)


class GameGenerator:
    """Fills boards so that every label appears exactly twice."""

    @staticmethod
    def validate_size(size: int) -> None:
        """Raise ``ConfigurationError`` unless *size* is a positive even int."""
        if isinstance(size, bool) or not isinstance(size, int):
            raise ConfigurationError(
                f"Board size must be an integer, got {size!r}."
            )
        if size < 2 or size % 2:
            raise ConfigurationError(
                f"Board size must be a positive even number, got {size}."
            )

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a random board of the given size.

        Cells are filled in row-major order.  Each cell draws uniformly
        from the labels placed fewer than twice so far, so the last two
        cells always resolve to the one remaining label.
        """
        GameGenerator.validate_size(size)
        choice = rng.choice if rng is not None else random.choice

        number_of_labels = size * size // 2
        counts = [0] * number_of_labels
        tiles: list[list[int]] = []
        for _ in range(size):
            row: list[int] = []
            for _ in range(size):
                available = [n for n, c in enumerate(counts) if c < 2]
                label = choice(available)
                counts[label] += 1
                row.append(label)
            tiles.append(row)

        logger.info("Generated %dx%d board with %d labels", size, size, number_of_labels)
        return Board(size=size, tiles=tiles)
