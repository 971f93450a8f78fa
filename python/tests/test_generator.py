"""Board generator tests."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.models.errors import ConfigurationError


@pytest.mark.parametrize("size", [2, 4, 6, 8, 10, 16])
def test_every_label_appears_twice(size: int) -> None:
    board = GameGenerator.generate(size, random.Random(size))

    assert board.size == size
    assert len(board.tiles) == size
    assert all(len(row) == size for row in board.tiles)

    counts = board.label_counts()
    assert counts == Counter({label: 2 for label in range(size * size // 2)})


def test_many_seeds_keep_the_pair_invariant() -> None:
    for seed in range(200):
        board = GameGenerator.generate(4, random.Random(seed))
        assert sorted(board.label_counts().values()) == [2] * 8
        assert set(board.label_counts()) == set(range(8))


def test_same_seed_same_board() -> None:
    a = GameGenerator.generate(6, random.Random(42))
    b = GameGenerator.generate(6, random.Random(42))
    assert a == b


def test_different_seeds_vary() -> None:
    boards = {GameGenerator.generate(4, random.Random(s)).as_tuple() for s in range(20)}
    assert len(boards) > 1


def test_unseeded_generation_works() -> None:
    board = GameGenerator.generate(4)
    assert sorted(board.label_counts().values()) == [2] * 8


@pytest.mark.parametrize("size", [0, 1, 3, 5, -2, 2.0, "4", None, True])
def test_rejects_bad_sizes(size: object) -> None:
    with pytest.raises(ConfigurationError):
        GameGenerator.generate(size)  # type: ignore[arg-type]


def test_configuration_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        GameGenerator.validate_size(7)
