"""Keyboard input for the terminal frontends.

``get_key`` reads one keypress in raw mode and names the puzzle action
bound to it, so the play loops never see escape sequences.  Digits and
other unbound printable keys come back as themselves; the menus use
``1``/``2`` and the board uses ``0``/``2``-``9`` for quick rotations.
"""

from __future__ import annotations

import os
import sys


# -- raw reads -----------------------------------------------------------------


def _read_posix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _read_nt() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_read_char = _read_nt if os.name == "nt" else _read_posix


# -- bindings ------------------------------------------------------------------

_BINDINGS: dict[str, tuple[str, ...]] = {
    "up": ("w", "W"),
    "down": ("s", "S"),
    "left": ("a", "A"),
    "right": ("d", "D"),
    "select": (" ",),
    "enter": ("\r", "\n"),
    "undo": ("u", "U", "z", "Z"),
    "reset": ("r", "R"),
    "grow": ("+", "="),
    "shrink": ("-", "_"),
    "import": ("i", "I"),
    "help": ("h", "H", "?"),
    "quit": ("q", "Q", "\x03"),
}

_ACTIONS: dict[str, str] = {
    ch: action for action, chars in _BINDINGS.items() for ch in chars
}

# final byte of ESC [ x
_CSI_ARROWS: dict[str, str] = {"A": "up", "B": "down", "C": "right", "D": "left"}


def _action_for(ch: str) -> str:
    if ch in _ACTIONS:
        return _ACTIONS[ch]
    return ch if ch.isprintable() else ""


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block for one keypress and return the puzzle action bound to it.

    Arrow keys and WASD give ``"up"``/``"down"``/``"left"``/``"right"``;
    Escape and Ctrl-C give ``"quit"``.  See ``_BINDINGS`` for the rest.
    An empty string means the key has no meaning here.
    """
    ch = _read_char()
    if ch != "\x1b":
        return _action_for(ch)
    if _read_char() != "[":
        return "quit"
    return _CSI_ARROWS.get(_read_char(), "")


def read_line(prompt: str) -> str:
    """Ask for a line of text (a file path) with normal echo."""
    try:
        return input(prompt).strip()
    except EOFError:
        return ""
