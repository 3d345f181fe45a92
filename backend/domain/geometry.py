"""
Grid geometry: discrete points and the four cardinal directions.

Coordinates follow the screen: x grows to the right, y grows downward.
"""

from enum import Enum
from typing import NamedTuple, Tuple

from . import constants


class Point(NamedTuple):
    """An immutable (x, y) cell on the board."""

    x: int
    y: int

    def moved(self, direction: "Direction") -> "Point":
        """Return the adjacent point one step in ``direction``."""
        dx, dy = direction.delta
        return Point(self.x + dx, self.y + dy)

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height


class Direction(Enum):
    UP = constants.UP
    DOWN = constants.DOWN
    LEFT = constants.LEFT
    RIGHT = constants.RIGHT

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def step(self, point: Point) -> Point:
        return point.moved(self)


_DELTAS = {
    Direction.UP: (0, -1),     # Up => y - 1 (screen rows)
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
