"""Parses and validates externally supplied boards.

Two payload layouts are accepted::

    {"size": 4, "entities": [[6, 3, 4, 0], ...]}

    {"startsAt": 1743489020,
     "problem": {"field": {"size": 4, "entities": [[6, 3, 4, 0], ...]}}}

Fields other than ``size`` and ``entities`` are ignored.  Only the
shape and the label type are checked: an imported board may use any
label any number of times.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from backend.models.board import Board
from backend.models.errors import BoardValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardPayload:
    size: int
    entities: list[list[int]]

    def to_board(self) -> Board:
        return Board.from_rows(self.entities)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class BoardImporter:
    """Stateless — all methods are static."""

    @staticmethod
    def validate(size: Any, entities: Any) -> BoardPayload:
        """Check that *entities* is a ``size`` x ``size`` grid of labels >= 0."""
        if not _is_int(size) or size < 1:
            raise BoardValidationError(
                f"size must be a positive integer, got {size!r}."
            )
        if not isinstance(entities, list):
            raise BoardValidationError("entities must be a 2D array.")
        if len(entities) != size:
            raise BoardValidationError(
                f"entities has {len(entities)} rows, expected {size}."
            )

        rows: list[list[int]] = []
        for r, row in enumerate(entities):
            if not isinstance(row, list):
                raise BoardValidationError(f"Row {r} is not an array.")
            if len(row) != size:
                raise BoardValidationError(
                    f"Row {r} has {len(row)} columns, expected {size}."
                )
            for c, value in enumerate(row):
                if not _is_int(value):
                    raise BoardValidationError(
                        f"Cell ({r}, {c}) must be an integer, got {value!r}."
                    )
                if value < 0:
                    raise BoardValidationError(
                        f"Cell ({r}, {c}) must be 0 or greater, got {value}."
                    )
            rows.append(list(row))

        return BoardPayload(size=size, entities=rows)

    @staticmethod
    def parse(payload: str | bytes | Mapping[str, Any]) -> BoardPayload:
        """Decode *payload* (JSON text or an already-decoded mapping)."""
        if isinstance(payload, (str, bytes)):
            try:
                data = json.loads(payload)
            except json.JSONDecodeError as e:
                raise BoardValidationError(f"Invalid JSON: {e.msg} (line {e.lineno}).") from e
        else:
            data = payload

        if not isinstance(data, Mapping):
            raise BoardValidationError("Payload must be a JSON object.")

        field = data
        problem = data.get("problem")
        if isinstance(problem, Mapping) and isinstance(problem.get("field"), Mapping):
            field = problem["field"]

        missing = [key for key in ("size", "entities") if key not in field]
        if missing:
            raise BoardValidationError(
                f"Payload is missing {', '.join(missing)}."
            )

        result = BoardImporter.validate(field["size"], field["entities"])
        logger.debug("Parsed %dx%d board payload", result.size, result.size)
        return result

    @staticmethod
    def load_file(path: Path) -> BoardPayload:
        """Read and parse a payload file."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise BoardValidationError(f"Cannot read {path}: {e.strerror}.") from e
        return BoardImporter.parse(text)
