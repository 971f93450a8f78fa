"""Rotation engine and scoring tests.

Expected boards live in ``<project_root>/fixtures/rotations.json`` and
``scores.json``; each entry becomes one parametrised case.
"""

from __future__ import annotations

import json
import random
from collections import Counter
from pathlib import Path

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamescore import Scorer
from backend.engine.rotation import Rotator
from backend.models.board import Board
from backend.models.rotation import RotationSpec
from backend.models.selection import Position

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(data: dict) -> str:
    return data["id"]


_ROTATIONS = _load("rotations.json")
_SCORES = _load("scores.json")


def _spec(data: dict) -> RotationSpec:
    return RotationSpec(**data["rotation"])


# -- rotation -----------------------------------------------------------------


@pytest.mark.parametrize("case", _ROTATIONS, ids=_ids)
def test_rotation_matches_fixture(case: dict) -> None:
    board = Board.from_rows(case["board"])
    rotated = Rotator.rotate(board, _spec(case))
    assert rotated.tiles == case["expected"]
    assert Scorer.score(rotated) == case["expected_score"]


@pytest.mark.parametrize("case", _ROTATIONS, ids=_ids)
def test_rotation_does_not_mutate_input(case: dict) -> None:
    board = Board.from_rows(case["board"])
    before = board.copy()
    Rotator.rotate(board, _spec(case))
    assert board == before


@pytest.mark.parametrize("case", _ROTATIONS, ids=_ids)
def test_four_rotations_restore_board(case: dict) -> None:
    board = Board.from_rows(case["board"])
    spec = _spec(case)
    result = board
    for _ in range(4):
        result = Rotator.rotate(result, spec)
    assert result == board


def test_rotation_only_moves_cells_inside_square() -> None:
    rng = random.Random(7)
    for _ in range(100):
        board = GameGenerator.generate(8, rng)
        size = rng.randint(2, 8)
        spec = RotationSpec(rng.randint(0, 8 - size), rng.randint(0, 8 - size), size)
        rotated = Rotator.rotate(board, spec)

        inside = set(spec.cells())
        for r in range(8):
            for c in range(8):
                if Position(r, c) not in inside:
                    assert rotated.tiles[r][c] == board.tiles[r][c]

        before = Counter(board.tiles[p.row][p.col] for p in inside)
        after = Counter(rotated.tiles[p.row][p.col] for p in inside)
        assert before == after


@pytest.mark.parametrize(
    "spec",
    [
        RotationSpec(0, 0, 1),
        RotationSpec(0, 0, 5),
        RotationSpec(3, 0, 2),
        RotationSpec(0, 3, 2),
        RotationSpec(-1, 0, 2),
        RotationSpec(1, 1, 4),
    ],
)
def test_rotation_rejects_squares_off_the_board(spec: RotationSpec) -> None:
    board = Board.from_rows([[6, 3, 4, 0], [1, 5, 3, 5], [2, 7, 0, 6], [1, 2, 7, 4]])
    with pytest.raises(ValueError):
        Rotator.rotate(board, spec)


# -- gesture geometry ---------------------------------------------------------


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Position(0, 0), Position(1, 1), RotationSpec(0, 0, 2)),
        (Position(1, 1), Position(0, 0), RotationSpec(0, 0, 2)),
        (Position(3, 0), Position(0, 3), RotationSpec(0, 0, 4)),
        (Position(1, 3), Position(3, 1), RotationSpec(1, 1, 3)),
        (Position(2, 2), Position(3, 3), RotationSpec(2, 2, 2)),
    ],
)
def test_spec_from_diagonal_corners(a: Position, b: Position, expected: RotationSpec) -> None:
    assert RotationSpec.from_corners(a, b) == expected


@pytest.mark.parametrize(
    "a, b",
    [
        (Position(0, 0), Position(0, 0)),
        (Position(0, 0), Position(0, 1)),
        (Position(0, 0), Position(2, 1)),
        (Position(1, 1), Position(3, 0)),
    ],
)
def test_spec_from_non_diagonal_corners(a: Position, b: Position) -> None:
    assert RotationSpec.from_corners(a, b) is None


# -- scoring ------------------------------------------------------------------


@pytest.mark.parametrize("case", _SCORES, ids=_ids)
def test_score_matches_fixture(case: dict) -> None:
    board = Board.from_rows(case["board"])
    assert Scorer.score(board) == case["score"]
    assert Scorer.score(board) == case["score"]
