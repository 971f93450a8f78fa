"""Key decoding tests — raw reads are replaced by a canned sequence."""

from __future__ import annotations

import pytest

from frontend.cli import input_handler


def _feed(monkeypatch: pytest.MonkeyPatch, chars: str) -> None:
    it = iter(chars)
    monkeypatch.setattr(input_handler, "_read_char", lambda: next(it))


@pytest.mark.parametrize(
    "chars, action",
    [
        ("w", "up"),
        ("D", "right"),
        (" ", "select"),
        ("\r", "enter"),
        ("z", "undo"),
        ("=", "grow"),
        ("_", "shrink"),
        ("?", "help"),
        ("\x03", "quit"),
        ("\x1b[A", "up"),
        ("\x1b[D", "left"),
        ("\x1bx", "quit"),
        ("\x1b[Z", ""),
        ("3", "3"),
        ("0", "0"),
        ("\x01", ""),
    ],
)
def test_get_key(monkeypatch: pytest.MonkeyPatch, chars: str, action: str) -> None:
    _feed(monkeypatch, chars)
    assert input_handler.get_key() == action


def test_read_line_on_eof(monkeypatch: pytest.MonkeyPatch) -> None:
    def _eof(prompt: str) -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    assert input_handler.read_line("> ") == ""
