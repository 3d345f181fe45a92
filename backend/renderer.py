"""
Screen rendering for the snake game.

render_frame() lays a BoardSnapshot out as text; TerminalRenderer paints
that text over the whole screen once per tick.
"""

import sys
from typing import List, TextIO

import blessed

from domain.constants import (
    EMPTY_GLYPH,
    FOOD_GLYPH,
    HEAD_GLYPH,
    BODY_GLYPH,
    CONTROLS_TEXT,
    GAME_OVER_TEXT,
    FAREWELL_TEXT,
)
from domain.game_state import BoardSnapshot


def render_frame(snapshot: BoardSnapshot) -> str:
    """
    Returns a string representation of the board with:
    ' ' = empty space
    ● = food
    █ = snake head
    ▓ = snake body
    followed by the status line, the controls and, once the snake has
    crashed, the game-over message.
    """
    # Create empty board
    board = [[EMPTY_GLYPH for _ in range(snapshot.width)] for _ in range(snapshot.height)]

    # Place food
    board[snapshot.food.y][snapshot.food.x] = FOOD_GLYPH

    # Place snake
    for pos_idx, (x, y) in enumerate(snapshot.snake):
        board[y][x] = HEAD_GLYPH if pos_idx == 0 else BODY_GLYPH

    rule = "─" * (snapshot.width * 2)
    lines: List[str] = ["┌" + rule + "┐"]
    for row in board:
        lines.append("│" + "".join(cell + " " for cell in row) + "│")
    lines.append("└" + rule + "┘")

    lines.append("")
    lines.append(f"Score: {snapshot.score} | Length: {snapshot.length}")
    lines.append(CONTROLS_TEXT)

    if snapshot.game_over:
        lines.append("")
        lines.append(GAME_OVER_TEXT)

    return "\n".join(lines)


class TerminalRenderer:
    """Clears the screen and draws a full frame for every snapshot it is given."""

    def __init__(self, term: blessed.Terminal, stream: TextIO = None):
        self.term = term
        self.stream = stream if stream is not None else sys.stdout

    def clear(self) -> None:
        self.stream.write(self.term.home + self.term.clear)

    def render(self, snapshot: BoardSnapshot) -> None:
        self.clear()
        self.stream.write(render_frame(snapshot) + "\n")
        self.stream.flush()

    def farewell(self) -> None:
        self.clear()
        self.stream.write(FAREWELL_TEXT + "\n")
        self.stream.flush()
