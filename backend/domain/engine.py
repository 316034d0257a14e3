"""
GameEngine - owns the game state and advances it one tick at a time.

The engine has no timer and never draws. A host driver calls advance() on a
fixed cadence and hands the TickResult to a renderer.
"""

import logging
import random
from typing import Iterable, List, Optional, Tuple, Union

from .constants import Direction, DEFAULT_DIRECTION, DEFAULT_GRID_SIZE
from .game_state import GameState, TickResult
from .snake import Snake

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


def _check_grid_size(grid_size) -> int:
    if isinstance(grid_size, bool) or not isinstance(grid_size, int) or grid_size <= 0:
        raise ValueError(f"grid_size must be a positive integer, got {grid_size!r}")
    return grid_size


class GameEngine:
    """
    Manages:
      - Snake (positions and target length)
      - The single apple
      - Current direction
      - Alive / stopped flags
    """

    def __init__(self, grid_size: int = DEFAULT_GRID_SIZE, rng: Optional[random.Random] = None):
        self.grid_size = _check_grid_size(grid_size)
        self.rng = rng if rng is not None else random.Random()

        self.snake = Snake()
        self.apple: Optional[Cell] = None
        self.direction = DEFAULT_DIRECTION
        self.alive = True
        self.stopped = False
        self.apples_eaten = 0
        self.tick = 0

    @property
    def snake_length(self) -> int:
        return self.snake.target_length

    def initialize(self, grid_size: Optional[int] = None) -> None:
        """
        Reset to a fresh game: empty snake of target length 1, no apple, heading right.

        Args:
            grid_size: new number of cells per side; keeps the current size when None
        """
        if grid_size is not None:
            self.grid_size = _check_grid_size(grid_size)
        self.snake = Snake()
        self.apple = None
        self.direction = DEFAULT_DIRECTION
        self.alive = True
        self.stopped = False
        self.apples_eaten = 0
        self.tick = 0

    def start(self) -> None:
        self.initialize()
        logger.info(f"Game started on a {self.grid_size}x{self.grid_size} grid.")

    def stop(self) -> None:
        self.stopped = True
        logger.info("Game stopped.")

    def set_direction(self, requested: Union[Direction, str]) -> bool:
        """
        Change direction unless the request would reverse the snake into itself.

        The check is against the direction applied last, so several calls
        between two ticks each compare against the previous accepted one.

        Returns:
            True if the direction was applied, False if it was ignored
        """
        requested = Direction.parse(requested)
        if requested is self.direction.opposite:
            return False

        self.direction = requested
        logger.debug(f"Direction {requested.value}")
        return True

    def place_snake(self, positions: Iterable[Cell], direction: Optional[Direction] = None) -> None:
        """
        Put the snake at known positions (head first). The target length becomes
        the number of cells given.
        """
        cells = [tuple(cell) for cell in positions]
        for cell in cells:
            self._check_in_bounds(cell, "Snake cell")
        if len(set(cells)) != len(cells):
            raise ValueError(f"Snake cells overlap: {cells}")

        self.snake = Snake(cells, target_length=max(1, len(cells)))
        if self.apple is not None and self.apple in self.snake:
            self.apple = None
        if direction is not None:
            self.direction = Direction.parse(direction)

    def set_apple(self, apple: Optional[Cell]) -> None:
        """Put the apple at a known cell, or clear it with None."""
        if apple is None:
            self.apple = None
            return
        apple = tuple(apple)
        self._check_in_bounds(apple, "Apple")
        if apple in self.snake:
            raise ValueError(f"Apple at {apple} is on the snake.")
        self.apple = apple

    def advance(self) -> TickResult:
        """
        Execute one tick:
          1) Compute the next head (random cell on the first tick, else one step with wrap)
          2) Insert the new head
          3) Eat the apple if the head is on it (grow by one)
          4) Trim the tail down to the target length
          5) Place a new apple if none is set
          6) End the game if the head ran into the body
        """
        if not self.alive or self.stopped:
            return self._result(ate_apple=False, game_over=False)

        head = self._next_head()
        self.snake.push_head(head)

        ate_apple = head == self.apple
        if ate_apple:
            self.snake.target_length += 1
            self.apples_eaten += 1
            self.apple = None
            logger.info(f"Apple eaten. Snake length: {self.snake.target_length}")

        self.snake.trim()

        if self.apple is None:
            self.apple = self._random_free_cell()

        self.tick += 1

        game_over = self.snake.head_hits_body()
        if game_over:
            logger.info(f"Snake ate its tail at {head} on tick {self.tick}.")
            self.alive = False
            self.snake.reset()

        return self._result(ate_apple=ate_apple, game_over=game_over)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.tick,
            snake_positions=list(self.snake.positions),
            apple=self.apple,
            direction=self.direction,
            snake_length=self.snake.target_length,
            alive=self.alive,
            apples_eaten=self.apples_eaten,
            grid_size=self.grid_size
        )

    def _next_head(self) -> Cell:
        if self.snake.head is None:
            return self._random_cell()

        x, y = self.snake.head
        dx, dy = self.direction.delta
        return ((x + dx) % self.grid_size, (y + dy) % self.grid_size)

    def _random_cell(self) -> Cell:
        return (self.rng.randrange(self.grid_size), self.rng.randrange(self.grid_size))

    def _random_free_cell(self) -> Cell:
        """
        Return a random cell (x, y) not occupied by the snake.
        Loops forever if the snake fills the whole grid.
        """
        while True:
            cell = self._random_cell()
            if cell not in self.snake:
                return cell

    def _check_in_bounds(self, cell: Cell, label: str) -> None:
        x, y = cell
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            raise ValueError(f"{label} out of bounds at {cell}.")

    def _result(self, ate_apple: bool, game_over: bool) -> TickResult:
        cells: List[Cell] = list(self.snake.positions)
        return TickResult(
            tick=self.tick,
            snake=cells,
            apple=self.apple,
            ate_apple=ate_apple,
            game_over=game_over,
            alive=self.alive,
            snake_length=self.snake.target_length,
            apples_eaten=self.apples_eaten
        )
