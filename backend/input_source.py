"""
Keyboard input for the snake game.

Keys are read one at a time from the controlling terminal while it is in
cbreak mode (unbuffered, unechoed) and decoded into Commands.
"""

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional

import blessed

from domain.geometry import Direction

logger = logging.getLogger(__name__)


class InputError(RuntimeError):
    """Reading from the terminal failed; the game cannot continue."""


class Command(Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    RESTART = "RESTART"
    QUIT = "QUIT"

    @property
    def direction(self) -> Optional[Direction]:
        """The Direction for a directional command, None otherwise."""
        try:
            return Direction(self.value)
        except ValueError:
            return None


KEY_BINDINGS = {
    "w": Command.UP,
    "s": Command.DOWN,
    "a": Command.LEFT,
    "d": Command.RIGHT,
    "r": Command.RESTART,
    "q": Command.QUIT,
}


def decode_key(key: str) -> Optional[Command]:
    """
    Map a single raw key to a Command, case-insensitively.

    Returns None for anything unbound, including multi-character escape
    sequences and empty reads.
    """
    if not key or len(key) != 1:
        return None
    return KEY_BINDINGS.get(key.lower())


@contextmanager
def raw_mode(term: blessed.Terminal) -> Iterator[blessed.Terminal]:
    """Hold the terminal in cbreak mode with a hidden cursor, restoring it on exit."""
    with term.cbreak(), term.hidden_cursor():
        logger.debug("Terminal switched to cbreak mode")
        yield term
    logger.debug("Terminal mode restored")


class KeyReader:
    """
    Blocking source of raw keys from a blessed Terminal.

    ``keys()`` is an endless generator; each key is yielded as soon as the
    terminal delivers it. Call it inside ``raw_mode`` so keys arrive
    unbuffered.
    """

    def __init__(self, term: blessed.Terminal):
        self.term = term

    def keys(self) -> Iterator[str]:
        while True:
            key = self.term.inkey()
            if key:
                yield str(key)
