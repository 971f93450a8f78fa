"""Board import parsing and validation tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from backend.engine.boardimport import BoardImporter
from backend.models.errors import BoardValidationError

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"

with open(FIXTURES_DIR / "payloads.json") as f:
    _PAYLOADS = json.load(f)


def _ids(data: dict) -> str:
    return data["id"]


@pytest.mark.parametrize("case", _PAYLOADS["valid"], ids=_ids)
def test_valid_payload_from_mapping(case: dict) -> None:
    parsed = BoardImporter.parse(case["payload"])
    assert parsed.size == case["size"]
    assert len(parsed.entities) == case["size"]


@pytest.mark.parametrize("case", _PAYLOADS["valid"], ids=_ids)
def test_valid_payload_from_json_text(case: dict) -> None:
    parsed = BoardImporter.parse(json.dumps(case["payload"]))
    board = parsed.to_board()
    assert board.size == case["size"]


@pytest.mark.parametrize("case", _PAYLOADS["invalid"], ids=_ids)
def test_invalid_payload_is_rejected(case: dict) -> None:
    with pytest.raises(BoardValidationError, match=case["error"]):
        BoardImporter.parse(case["payload"])


def test_nested_payload_keeps_labels_verbatim() -> None:
    parsed = BoardImporter.load_file(FIXTURES_DIR / "example_board.json")
    assert parsed.entities == [[6, 3, 4, 0], [1, 5, 3, 5], [2, 7, 0, 6], [1, 2, 7, 4]]


def test_malformed_json() -> None:
    with pytest.raises(BoardValidationError, match="Invalid JSON"):
        BoardImporter.parse('{"size": 2, "entities": [[0, 1], [1, 0]')


def test_bytes_payload() -> None:
    parsed = BoardImporter.parse(b'{"size": 2, "entities": [[1, 1], [0, 0]]}')
    assert parsed.entities == [[1, 1], [0, 0]]


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(BoardValidationError, match="Cannot read"):
        BoardImporter.load_file(tmp_path / "nope.json")


def test_validate_copies_rows() -> None:
    rows = [[0, 1], [1, 0]]
    parsed = BoardImporter.validate(2, rows)
    rows[0][0] = 9
    assert parsed.entities[0][0] == 0


def test_to_board_does_not_share_rows() -> None:
    parsed = BoardImporter.validate(2, [[0, 1], [1, 0]])
    board = parsed.to_board()
    board.tiles[0][0] = 9
    assert parsed.entities[0][0] == 0
    assert board.tiles[1] == [1, 0]


def test_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        BoardImporter.validate(2, [[0, 1]])
