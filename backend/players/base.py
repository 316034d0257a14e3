"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    The driver asks the player for a move before every tick and passes any
    answer to GameEngine.set_direction, where the no-reverse rule applies.
    """

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Return a direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction, or None to keep the current one
        """
        raise NotImplementedError
