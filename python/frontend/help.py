"""How-to-play text shown by the frontends."""

from __future__ import annotations

HOW_TO_PLAY: tuple[str, ...] = (
    "Pick two cells that lie on a diagonal; the square they span turns 90° clockwise.",
    "Pick the same cell twice to cancel the selection.",
    "Rotate buttons (number keys in the terminal) turn a corner square or the whole board.",
    "Every pair of equal neighbouring labels scores one point.",
    "Undo reverts the last rotation; Reset starts again on a new board.",
)

JSON_HELP: tuple[str, ...] = (
    "A board can be loaded from JSON:",
    "",
    "  {",
    '    "startsAt": 1743489020,',
    '    "problem": {',
    '      "field": {',
    '        "size": 4,',
    '        "entities": [',
    "          [6, 3, 4, 0],",
    "          [1, 5, 3, 5],",
    "          [2, 7, 0, 6],",
    "          [1, 2, 7, 4]",
    "        ]",
    "      }",
    "    }",
    "  }",
    "",
    "size is the side length; entities must have exactly size rows of",
    "size integers, each 0 or greater.  startsAt is ignored.",
    'A bare {"size": ..., "entities": [...]} object is accepted too.',
)
