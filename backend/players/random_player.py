"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import Direction, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    Autopilot for headless runs: a random direction that neither reverses
    nor steps onto the snake's own body.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        snake_positions = game_state.snake_positions
        if not snake_positions:
            return None

        head_x, head_y = snake_positions[0]
        size = game_state.grid_size
        candidates = sorted(
            (move for move in VALID_MOVES if move is not game_state.direction.opposite),
            key=lambda move: move.value
        )

        # Filter out moves that hit the body (except the tail, which will move)
        valid_moves: List[Direction] = []
        for move in candidates:
            dx, dy = move.delta
            new_cell = ((head_x + dx) % size, (head_y + dy) % size)
            if new_cell in snake_positions[1:-1]:
                continue
            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(candidates)

        return self.rng.choice(valid_moves)
