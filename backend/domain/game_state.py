"""
GameState and TickResult - snapshots of the game at a point in time.
"""

from dataclasses import dataclass
from typing import List, Tuple, Optional

from .constants import Direction

Cell = Tuple[int, int]


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: number of ticks advanced since the game started
        snake_positions: list of (x, y), head first
        apple: (x, y) of the apple, or None when unset
        direction: current direction of travel
        snake_length: target length of the snake
        alive: whether the game is still running
        apples_eaten: apples eaten since the game started
        grid_size: the board is grid_size x grid_size cells
    """

    def __init__(
        self,
        tick: int,
        snake_positions: List[Cell],
        apple: Optional[Cell],
        direction: Direction,
        snake_length: int,
        alive: bool,
        apples_eaten: int,
        grid_size: int
    ):
        self.tick = tick
        self.snake_positions = snake_positions
        self.apple = apple
        self.direction = direction
        self.snake_length = snake_length
        self.alive = alive
        self.apples_eaten = apples_eaten
        self.grid_size = grid_size

    @property
    def head(self) -> Optional[Cell]:
        return self.snake_positions[0] if self.snake_positions else None

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = apple
        T = snake body
        H = snake head
        (0,0) is the top left, matching the rendered surface.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.apple is not None:
            ax, ay = self.apple
            board[ay][ax] = 'A'

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = ["   " + " ".join(str(i % 10) for i in range(self.grid_size))]
        for y in range(self.grid_size):
            result.append(f"{y:2d} {' '.join(board[y])}")

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, apple={self.apple}, "
            f"length={self.snake_length}, alive={self.alive}>"
        )


@dataclass(frozen=True)
class TickResult:
    """
    Outcome of a single engine tick, consumed by the renderer and the driver.

    game_over is True only on the tick the snake ran into itself; later
    no-op ticks report alive=False with game_over=False.
    """
    tick: int
    snake: List[Cell]
    apple: Optional[Cell]
    ate_apple: bool
    game_over: bool
    alive: bool
    snake_length: int
    apples_eaten: int

    @property
    def head(self) -> Optional[Cell]:
        return self.snake[0] if self.snake else None
