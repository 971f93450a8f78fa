"""Exceptions raised by the puzzle engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every engine failure surfaced to a frontend."""


class ConfigurationError(PuzzleError, ValueError):
    """A board size the generator cannot work with."""


class BoardValidationError(PuzzleError, ValueError):
    """An import payload with the wrong shape or bad labels."""
