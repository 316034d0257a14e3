"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Optional, Tuple

from .constants import INITIAL_SNAKE_LENGTH

Cell = Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        target_length: length the snake grows into; +1 per apple eaten
    """

    def __init__(self, positions: Optional[Iterable[Cell]] = None, target_length: int = INITIAL_SNAKE_LENGTH):
        self.positions = deque(positions or [])
        self.target_length = target_length

    @property
    def head(self) -> Optional[Cell]:
        """Return the head position (first element), or None before the first tick."""
        return self.positions[0] if self.positions else None

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell: Cell) -> bool:
        return cell in self.positions

    def push_head(self, cell: Cell) -> None:
        self.positions.appendleft(cell)

    def trim(self) -> None:
        """Drop tail cells until the snake is no longer than its target length."""
        while len(self.positions) > self.target_length:
            self.positions.pop()

    def head_hits_body(self) -> bool:
        if len(self.positions) < 2:
            return False
        head = self.positions[0]
        return any(cell == head for cell in list(self.positions)[1:])

    def reset(self) -> None:
        self.positions.clear()
        self.target_length = INITIAL_SNAKE_LENGTH
