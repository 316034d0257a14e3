"""
Game constants for Snake Grid.
"""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Movement directions in screen coordinates (y grows downward)."""
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def opposite(self) -> "Direction":
        return OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        return DELTAS[self]

    @classmethod
    def parse(cls, value) -> "Direction":
        """
        Accept a Direction or its name in any case ("up", "Right", ...).

        Raises:
            ValueError: if the value names no direction
        """
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {value!r}") from None


UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Game settings
DEFAULT_GRID_SIZE = 6
DEFAULT_TICK_INTERVAL_MS = 300
DEFAULT_CANVAS_SIZE = 300
DEFAULT_DIRECTION = RIGHT
INITIAL_SNAKE_LENGTH = 1

DEFAULT_BODY_COLOR = "#e1ffb7"
DEFAULT_HEAD_COLOR = "#0f0"
DEFAULT_APPLE_COLOR = "#f00"
