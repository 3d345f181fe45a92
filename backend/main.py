#!/usr/bin/env python3
"""
Terminal snake game.

Usage:
    python main.py
    python main.py --seed 42 --log-file snake.log --log-level DEBUG

Controls: W/A/S/D to steer, R to restart after a crash, Q to quit.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

import blessed

from domain.constants import BOARD_WIDTH, BOARD_HEIGHT, TICK_SECONDS
from domain.game_state import GameState
from game_loop import GameLoop
from input_source import InputError, KeyReader, raw_mode
from renderer import TerminalRenderer

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play snake in the terminal."
    )
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for food placement (reproducible games)")
    parser.add_argument("--log-file", type=str, required=False, default=None,
                        help="Write log records to this file (nothing is logged otherwise)")
    parser.add_argument("--log-level", type=str, required=False, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level for --log-file")
    return parser.parse_args(argv)


def configure_logging(log_file: Optional[str], log_level: str = "INFO") -> None:
    """Send log records to a file; the screen belongs to the game."""
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file)
    else:
        handler = logging.NullHandler()
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler],
        force=True
    )


def play(term: blessed.Terminal, seed: Optional[int] = None) -> int:
    """Run one session on ``term`` and return the process exit code."""
    state = GameState(BOARD_WIDTH, BOARD_HEIGHT, rng=random.Random(seed))
    renderer = TerminalRenderer(term)

    try:
        with raw_mode(term):
            loop = GameLoop(state, renderer, KeyReader(term).keys(), tick_seconds=TICK_SECONDS)
            loop.run()
    except InputError as e:
        logger.error("Stopping: %s (%s)", e, e.__cause__)
        print(f"Error: {e}: {e.__cause__}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error("Stopping: terminal output failed: %s", e)
        print(f"Error: terminal output failed: {e}", file=sys.stderr)
        return 1

    renderer.farewell()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    if not sys.stdin.isatty():
        print("Error: snake needs an interactive terminal on stdin.", file=sys.stderr)
        return 1

    logger.info("Starting snake (seed=%s)", args.seed)
    return play(blessed.Terminal(), seed=args.seed)


if __name__ == "__main__":
    sys.exit(main())
