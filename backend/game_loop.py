"""
The game loop: merges a fixed tick with keyboard commands.

A background thread turns raw keys into Commands and puts them on a queue.
The loop thread waits on that queue until the next tick is due, so exactly
one event (a tick or a command) is handled per iteration and the GameState
is only ever touched from the loop thread.
"""

import logging
import queue
import threading
import time
from typing import Callable, Iterable, Optional, Union

from domain.constants import TICK_SECONDS
from domain.game_state import GameState
from input_source import Command, InputError, decode_key

logger = logging.getLogger(__name__)

QueueItem = Union[Command, BaseException]


class GameLoop:
    """
    Drives a GameState from a key source and a periodic tick.

    Attributes:
        state: the GameState this loop exclusively owns
        renderer: anything with a ``render(snapshot)`` method
        key_source: iterable of raw keys; read on a background thread
        tick_seconds: interval between advances
        commands: queue handing Commands (or an input failure) to the loop
    """

    def __init__(
        self,
        state: GameState,
        renderer,
        key_source: Iterable[str],
        tick_seconds: float = TICK_SECONDS,
        clock: Callable[[], float] = time.monotonic
    ):
        self.state = state
        self.renderer = renderer
        self.key_source = key_source
        self.tick_seconds = tick_seconds
        self.clock = clock
        self.commands: "queue.Queue[QueueItem]" = queue.Queue()
        self._input_thread: Optional[threading.Thread] = None

    def start_input(self) -> None:
        """Start the background thread that feeds the command queue."""
        self._input_thread = threading.Thread(
            target=self._pump_input,
            name="snake-input",
            daemon=True
        )
        self._input_thread.start()

    def _pump_input(self) -> None:
        try:
            for key in self.key_source:
                command = decode_key(key)
                if command is not None:
                    self.commands.put(command)
        except Exception as exc:  # noqa: BLE001 - re-raised on the loop thread
            logger.error("Keyboard input failed: %s", exc)
            self.commands.put(exc)
            return
        logger.error("Keyboard input stream closed")
        self.commands.put(EOFError("keyboard input stream closed"))

    def tick(self) -> None:
        """Advance the game one step and draw the result."""
        self.state.advance()
        self.renderer.render(self.state.snapshot())

    def handle_command(self, command: Command) -> bool:
        """
        Apply a single command to the game.

        Returns False when the loop should stop (quit), True otherwise.
        Commands never trigger a redraw; the next tick shows their effect.
        """
        if command is Command.QUIT:
            return False

        if command is Command.RESTART:
            if self.state.is_game_over:
                logger.info("Restart requested after scoring %d", self.state.score)
                self.state.reset()
            return True

        direction = command.direction
        if direction is not None:
            self.state.set_direction(direction)
        return True

    def run(self) -> None:
        """
        Run until a quit command arrives.

        The first frame is drawn by the first tick.

        Raises:
            InputError: if the key source fails or runs dry
        """
        self.start_input()
        next_tick = self.clock() + self.tick_seconds

        while True:
            now = self.clock()
            if now >= next_tick:
                self.tick()
                next_tick += self.tick_seconds
                # Fell behind by more than a tick: resync instead of bursting.
                if next_tick <= now:
                    next_tick = now + self.tick_seconds
                continue

            try:
                item = self.commands.get(timeout=next_tick - now)
            except queue.Empty:
                continue

            if isinstance(item, BaseException):
                raise InputError("Reading keyboard input failed") from item

            if not self.handle_command(item):
                logger.info(
                    "Quit with score %d, length %d", self.state.score, self.state.length
                )
                return
