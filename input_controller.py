import curses
from dataclasses import dataclass
from typing import Callable, Optional


MOVE = "move"
EXPAND = "expand"
COLLAPSE = "collapse"
TOGGLE = "toggle"
CONFIRM = "confirm"
QUIT = "quit"
RESIZE = "resize"


@dataclass(frozen=True)
class Intent:
    kind: str
    delta: int = 0


def Move(delta: int) -> Intent:
    return Intent(MOVE, delta)


_KEYMAP = {
    curses.KEY_UP: Move(-1),
    ord("k"): Move(-1),
    curses.KEY_DOWN: Move(1),
    ord("j"): Move(1),
    curses.KEY_RIGHT: Intent(EXPAND),
    ord("l"): Intent(EXPAND),
    curses.KEY_LEFT: Intent(COLLAPSE),
    ord("h"): Intent(COLLAPSE),
    ord(" "): Intent(TOGGLE),
    9: Intent(TOGGLE),  # Tab
    10: Intent(CONFIRM),
    13: Intent(CONFIRM),
    curses.KEY_ENTER: Intent(CONFIRM),
    ord("q"): Intent(QUIT),
    27: Intent(QUIT),  # Esc
    3: Intent(QUIT),  # Ctrl+C under raw mode
    curses.KEY_RESIZE: Intent(RESIZE),
}


def translate(key) -> Optional[Intent]:
    if isinstance(key, str):
        if len(key) != 1:
            return None
        key = ord(key)
    return _KEYMAP.get(key)


def read_intent(read_key: Callable[[], int]) -> Intent:
    """Block until a key we understand arrives."""
    while True:
        intent = translate(read_key())
        if intent is not None:
            return intent
