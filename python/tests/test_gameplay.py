"""Puzzle session tests — gestures, undo, resets and imports."""

from __future__ import annotations

import logging
import random

import pytest

from backend.engine.gameplay import GamePlay
from backend.engine.gamescore import Scorer
from backend.models.board import Board
from backend.models.errors import BoardValidationError, ConfigurationError
from backend.models.selection import IDLE, Idle, Pending, Position, Selection

EXAMPLE = [[6, 3, 4, 0], [1, 5, 3, 5], [2, 7, 0, 6], [1, 2, 7, 4]]


# -- helpers ------------------------------------------------------------------


def _game() -> GamePlay:
    return GamePlay.from_board(Board.from_rows(EXAMPLE))


def _state_of(game: GamePlay) -> tuple:
    s = game.state
    return (
        s.board.as_tuple(),
        s.score,
        s.moves,
        dict(s.rotation_counts),
        len(s.history),
    )


def _click(game: GamePlay, a: tuple[int, int], b: tuple[int, int]) -> bool:
    game.select_cell(Position(*a))
    return game.select_cell(Position(*b))


# -- construction -------------------------------------------------------------


def test_new_game_starts_clean() -> None:
    game = GamePlay(6, rng=random.Random(1))
    view = game.view()
    assert view.size == 6
    assert view.number_of_labels == 18
    assert view.score == 0
    assert view.moves == 0
    assert view.rotation_counts == {2: 0, 3: 0, 4: 0, 5: 0, 6: 0}
    assert view.selection == IDLE
    assert view.pending is None
    assert isinstance(view.selection, Selection)
    assert not view.can_undo


def test_new_game_rejects_odd_size() -> None:
    with pytest.raises(ConfigurationError):
        GamePlay(5)


def test_from_board_scores_immediately() -> None:
    game = GamePlay.from_board(Board.from_rows([[0, 0], [1, 1]]))
    assert game.score == 2


# -- gesture ------------------------------------------------------------------


def test_example_gesture() -> None:
    game = _game()

    assert game.select_cell(Position(0, 0)) is False
    assert game.selection == Pending(Position(0, 0))
    assert game.view().pending == Position(0, 0)

    assert game.select_cell(Position(1, 1)) is True
    assert game.state.board.tiles == [[1, 6, 4, 0], [5, 3, 3, 5], [2, 7, 0, 6], [1, 2, 7, 4]]
    assert game.moves == 1
    assert game.score == 1
    assert game.state.rotation_counts == {2: 1, 3: 0, 4: 0}
    assert isinstance(game.selection, Idle)
    assert game.can_undo


def test_gesture_corner_order_does_not_matter() -> None:
    a, b = _game(), _game()
    _click(a, (3, 0), (0, 3))
    _click(b, (0, 3), (3, 0))
    assert a.state.board == b.state.board
    assert a.state.rotation_counts[4] == 1


def test_same_cell_twice_cancels() -> None:
    game = _game()
    before = _state_of(game)
    assert _click(game, (2, 2), (2, 2)) is False
    assert game.selection == IDLE
    assert _state_of(game) == before


@pytest.mark.parametrize(
    "a, b",
    [
        ((0, 0), (0, 1)),
        ((0, 0), (1, 0)),
        ((0, 0), (2, 1)),
        ((3, 3), (1, 2)),
    ],
)
def test_non_diagonal_gesture_is_discarded(a: tuple[int, int], b: tuple[int, int]) -> None:
    game = _game()
    before = _state_of(game)
    assert _click(game, a, b) is False
    assert game.selection == IDLE
    assert _state_of(game) == before


def test_off_board_click_is_ignored() -> None:
    game = _game()
    game.select_cell(Position(0, 0))
    before = _state_of(game)
    assert game.select_cell(Position(4, 4)) is False
    assert game.selection == Pending(Position(0, 0))
    assert _state_of(game) == before


def test_next_click_after_discard_starts_a_new_gesture() -> None:
    game = _game()
    _click(game, (0, 0), (0, 2))
    assert game.select_cell(Position(2, 2)) is False
    assert game.selection == Pending(Position(2, 2))
    assert game.select_cell(Position(3, 3)) is True
    assert game.state.rotation_counts[2] == 1


# -- direct rotation ----------------------------------------------------------


def test_rotate_validates_square() -> None:
    game = _game()
    before = _state_of(game)
    assert game.rotate(3, 3, 2) is False
    assert game.rotate(0, 0, 1) is False
    assert game.rotate(0, 0, 5) is False
    assert _state_of(game) == before


def test_rotate_clears_pending_selection() -> None:
    game = _game()
    game.select_cell(Position(0, 0))
    assert game.rotate(1, 1, 3) is True
    assert game.selection == IDLE
    assert game.state.rotation_counts == {2: 0, 3: 1, 4: 0}


def test_rotate_counts_sizes_beyond_initial_keys() -> None:
    game = _game()
    game.state.rotation_counts = {2: 0}
    assert game.rotate(0, 0, 4) is True
    assert game.state.rotation_counts == {2: 0, 4: 1}


# -- undo ---------------------------------------------------------------------


def test_undo_restores_exact_state() -> None:
    game = _game()
    before = _state_of(game)
    _click(game, (0, 0), (1, 1))
    assert game.undo() is True
    assert _state_of(game) == before
    assert not game.can_undo


def test_undo_walks_back_one_move_at_a_time() -> None:
    game = GamePlay(6, rng=random.Random(3))
    rng = random.Random(4)
    checkpoints = [_state_of(game)]
    for _ in range(25):
        size = rng.randint(2, 6)
        assert game.rotate(rng.randint(0, 6 - size), rng.randint(0, 6 - size), size)
        assert game.score == Scorer.score(game.state.board)
        checkpoints.append(_state_of(game))

    assert game.moves == 25
    assert sum(game.state.rotation_counts.values()) == 25

    for expected in reversed(checkpoints[:-1]):
        assert game.undo() is True
        assert _state_of(game) == expected
        assert game.moves == len(game.state.history)

    assert game.undo() is False


def test_undo_on_empty_history_is_noop() -> None:
    game = _game()
    before = _state_of(game)
    assert game.undo() is False
    assert _state_of(game) == before


def test_undo_clears_pending_selection() -> None:
    game = _game()
    game.rotate(0, 0, 2)
    game.select_cell(Position(1, 1))
    game.undo()
    assert game.selection == IDLE


def test_history_limit_drops_oldest() -> None:
    game = GamePlay(4, rng=random.Random(0), history_limit=2)
    for _ in range(5):
        game.rotate(0, 0, 2)
    assert game.moves == 5
    assert len(game.state.history) == 2
    assert game.undo() and game.undo()
    assert game.undo() is False
    assert game.moves == 3


# -- reset / resize -----------------------------------------------------------


def test_change_size_resets_everything() -> None:
    game = _game()
    _click(game, (0, 0), (1, 1))
    game.select_cell(Position(2, 2))

    game.change_size(6)

    view = game.view()
    assert view.size == 6
    assert view.score == 0
    assert view.moves == 0
    assert view.rotation_counts == {2: 0, 3: 0, 4: 0, 5: 0, 6: 0}
    assert view.selection == IDLE
    assert not view.can_undo
    assert game.undo() is False
    assert sorted(game.state.board.label_counts().values()) == [2] * 18


def test_reset_keeps_size() -> None:
    game = GamePlay(4, rng=random.Random(9))
    game.rotate(0, 0, 2)
    game.reset()
    assert game.size == 4
    assert game.moves == 0
    assert game.state.history == []


@pytest.mark.parametrize("size", [3, 0, -4])
def test_bad_size_leaves_state_untouched(size: int) -> None:
    game = _game()
    _click(game, (0, 0), (1, 1))
    before = _state_of(game)
    with pytest.raises(ConfigurationError):
        game.change_size(size)
    assert _state_of(game) == before


# -- import -------------------------------------------------------------------


def test_import_board_replaces_state() -> None:
    game = GamePlay(4, rng=random.Random(2))
    game.rotate(0, 0, 2)

    game.import_board(3, [[1, 1, 2], [0, 0, 2], [5, 6, 7]])

    view = game.view()
    assert view.size == 3
    assert view.tiles == ((1, 1, 2), (0, 0, 2), (5, 6, 7))
    assert view.score == 3
    assert view.moves == 0
    assert view.rotation_counts == {2: 0, 3: 0}
    assert not view.can_undo


def test_import_board_copies_entities() -> None:
    entities = [[0, 1], [1, 0]]
    game = _game()
    game.import_board(2, entities)
    entities[0][0] = 7
    assert game.state.board.tiles == [[0, 1], [1, 0]]


def test_import_rejects_wrong_row_count_and_keeps_state() -> None:
    game = _game()
    _click(game, (0, 0), (1, 1))
    before = _state_of(game)

    with pytest.raises(BoardValidationError):
        game.import_board(3, [[0, 1, 2], [3, 4, 5], [6, 7, 8], [0, 1, 2]])

    assert _state_of(game) == before
    assert game.undo() is True


def test_import_payload_nested_json() -> None:
    game = GamePlay(2, rng=random.Random(0))
    game.import_payload(
        '{"startsAt": 1743489020, "problem": {"field": {"size": 4, '
        '"entities": [[6,3,4,0],[1,5,3,5],[2,7,0,6],[1,2,7,4]]}}}'
    )
    assert game.state.board.tiles == EXAMPLE
    assert game.state.rotation_counts == {2: 0, 3: 0, 4: 0}


def test_import_payload_rejects_bad_label() -> None:
    game = _game()
    before = _state_of(game)
    with pytest.raises(BoardValidationError):
        game.import_payload({"size": 2, "entities": [[0, -1], [1, 0]]})
    assert _state_of(game) == before


def test_imported_board_can_be_played() -> None:
    game = _game()
    game.import_board(3, [[0, 1, 2], [3, 4, 5], [6, 7, 8]])
    assert _click(game, (0, 0), (2, 2)) is True
    assert game.state.board.tiles == [[6, 3, 0], [7, 4, 1], [8, 5, 2]]
    assert game.state.rotation_counts == {2: 0, 3: 1}


def test_view_is_a_copy() -> None:
    game = _game()
    view = game.view()
    view.rotation_counts[2] = 99
    assert game.state.rotation_counts[2] == 0


def test_import_logs_labels_that_are_not_pairs(caplog: pytest.LogCaptureFixture) -> None:
    game = _game()
    with caplog.at_level(logging.INFO, logger="backend.engine.gameplay.game"):
        game.import_board(2, [[0, 0], [0, 1]])
    assert "Labels not appearing exactly twice: [0, 1]" in caplog.text

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="backend.engine.gameplay.game"):
        game.import_board(4, EXAMPLE)
    assert "exactly twice" not in caplog.text
