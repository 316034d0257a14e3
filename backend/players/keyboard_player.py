"""
Keyboard player - maps arrow key events to direction changes.
"""

import logging
from typing import Dict, Optional

from domain.constants import Direction, UP, DOWN, LEFT, RIGHT
from domain.engine import GameEngine
from domain.game_state import GameState
from .base import Player

logger = logging.getLogger(__name__)

# Browser-style key names plus the names pygame.key.name() reports.
KEY_BINDINGS: Dict[str, Direction] = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


class KeyboardPlayer(Player):
    """
    Input collaborator. Key events go straight to the engine as they arrive;
    get_move() has nothing to add at tick time.
    """

    def __init__(self, engine: GameEngine):
        self.engine = engine

    def handle_key(self, key: str) -> bool:
        """
        Apply an arrow key to the engine.

        Returns:
            True if the engine accepted a new direction; False for reversals
            and for keys that are not arrows
        """
        direction = KEY_BINDINGS.get(key)
        if direction is None:
            return False

        accepted = self.engine.set_direction(direction)
        if not accepted:
            logger.debug(f"Ignored {key}: cannot reverse into the snake")
        return accepted

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        return None
