"""
GameState entity - the mutable state of a single snake game.

Only the game loop holds a GameState; everything else sees a BoardSnapshot.
"""

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .constants import BOARD_WIDTH, BOARD_HEIGHT, FOOD_SCORE
from .geometry import Direction, Point
from .snake import Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardSnapshot:
    """
    A read-only view of the game at a specific tick.

    Attributes:
        width, height: board dimensions
        snake: tuple of Point, head first
        food: position of the food
        direction: direction of travel
        score: current score
        game_over: whether the snake has crashed
    """

    width: int
    height: int
    snake: Tuple[Point, ...]
    food: Point
    direction: Direction
    score: int
    game_over: bool

    @property
    def length(self) -> int:
        return len(self.snake)


class GameState:
    """
    Owns the snake, the food, the score, the direction and the game-over flag.

    Every operation is total during play: invalid direction changes are
    ignored and collisions end the game instead of raising.
    """

    def __init__(
        self,
        width: int = BOARD_WIDTH,
        height: int = BOARD_HEIGHT,
        rng: Optional[random.Random] = None
    ):
        if width < 1 or height < 1 or width * height < 2:
            raise ValueError(f"Board needs room for the snake and the food, got {width}x{height}.")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()

        self.snake = Snake([self.center])
        self.food = self.center
        self.direction = Direction.RIGHT
        self.score = 0
        self.game_over = False
        self.death_reason: Optional[str] = None  # 'wall' or 'self'
        self.ticks = 0
        self.reset()

    @property
    def center(self) -> Point:
        return Point(self.width // 2, self.height // 2)

    @property
    def head(self) -> Point:
        return self.snake.head

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def is_game_over(self) -> bool:
        return self.game_over

    def reset(self) -> None:
        """Start a fresh game: one segment at the center, heading right."""
        self.snake = Snake([self.center])
        self.direction = Direction.RIGHT
        self.score = 0
        self.game_over = False
        self.death_reason = None
        self.ticks = 0
        self.spawn_food()
        logger.info("New game on %dx%d board, food at %s", self.width, self.height, self.food)

    def spawn_food(self) -> None:
        """
        Move the food to a random cell not occupied by the snake.

        Resamples until a free cell turns up, so this never returns on a
        completely filled board.
        """
        while True:
            cell = Point(
                self.rng.randrange(self.width),
                self.rng.randrange(self.height)
            )
            if not self.occupies(cell):
                self.food = cell
                return

    def set_direction(self, direction: Direction) -> None:
        """Change direction unless it would reverse the snake onto itself."""
        if direction is self.direction.opposite:
            return
        self.direction = direction

    def occupies(self, point: Point) -> bool:
        return point in self.snake

    def hits_wall(self, point: Point) -> bool:
        return not point.in_bounds(self.width, self.height)

    def is_food(self, point: Point) -> bool:
        return point == self.food

    def advance(self) -> None:
        """
        Move the snake one cell in the current direction.

        Hitting a wall or any body segment sets the game-over flag and
        leaves the snake untouched. Eating food scores and grows the snake
        by keeping its tail.
        """
        if self.game_over:
            return

        new_head = self.direction.step(self.head)

        if self.hits_wall(new_head):
            self._end("wall", new_head)
            return

        if self.occupies(new_head):
            self._end("self", new_head)
            return

        self.snake.push_head(new_head)
        self.ticks += 1

        if self.is_food(new_head):
            self.score += FOOD_SCORE
            logger.info("Food eaten at %s, score %d, length %d", new_head, self.score, self.length)
            self.spawn_food()
        else:
            self.snake.drop_tail()

    def _end(self, reason: str, point: Point) -> None:
        self.game_over = True
        self.death_reason = reason
        logger.info(
            "Game over: %s collision at %s after %d ticks, score %d",
            reason, point, self.ticks, self.score
        )

    def place_snake(self, positions: Iterable[Point], direction: Direction = Direction.RIGHT) -> None:
        """
        Put the snake at explicit positions, head first.

        Food under the new body is moved to a free cell.

        Raises:
            ValueError: if a segment is off the board or segments overlap
        """
        snake = Snake(positions)
        for segment in snake:
            if self.hits_wall(segment):
                raise ValueError(f"Snake segment out of bounds at {tuple(segment)}.")
        if len(set(snake)) != len(snake):
            raise ValueError("Snake segments must not overlap.")
        self.snake = snake
        self.direction = direction
        if self.occupies(self.food):
            self.spawn_food()

    def place_food(self, point: Point) -> None:
        """
        Put the food on an explicit cell.

        Raises:
            ValueError: if the cell is off the board or under the snake
        """
        point = Point(*point)
        if self.hits_wall(point):
            raise ValueError(f"Food out of bounds at {tuple(point)}.")
        if self.occupies(point):
            raise ValueError(f"Food cannot sit on the snake at {tuple(point)}.")
        self.food = point

    def snapshot(self) -> BoardSnapshot:
        """Return a read-only snapshot of the current board."""
        return BoardSnapshot(
            width=self.width,
            height=self.height,
            snake=tuple(self.snake),
            food=self.food,
            direction=self.direction,
            score=self.score,
            game_over=self.game_over
        )

    def __repr__(self):
        return (
            f"<GameState head={self.head}, length={self.length}, food={self.food}, "
            f"score={self.score}, game_over={self.game_over}>"
        )
