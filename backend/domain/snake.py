"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Iterator

from .geometry import Point


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Point from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Point]):
        self.positions = deque(Point(*p) for p in positions)
        if not self.positions:
            raise ValueError("A snake needs at least one segment.")

    @property
    def head(self) -> Point:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Point:
        return self.positions[-1]

    def push_head(self, point: Point) -> None:
        self.positions.appendleft(point)

    def drop_tail(self) -> Point:
        return self.positions.pop()

    def __contains__(self, point) -> bool:
        return point in self.positions

    def __iter__(self) -> Iterator[Point]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}>"
