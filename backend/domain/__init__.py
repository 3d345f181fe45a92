"""
Domain entities for the terminal snake game.

This module contains the core game entities that are independent of
terminal concerns (raw mode, key reading, screen painting).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, BOARD_WIDTH, BOARD_HEIGHT, TICK_SECONDS, FOOD_SCORE
from .geometry import Point, Direction
from .snake import Snake
from .game_state import GameState, BoardSnapshot

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'BOARD_WIDTH', 'BOARD_HEIGHT', 'TICK_SECONDS', 'FOOD_SCORE',
    'Point', 'Direction',
    'Snake',
    'GameState', 'BoardSnapshot',
]
