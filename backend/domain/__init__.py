"""
Domain entities for the Snake Grid game engine.

This module contains the core game entities that are independent of
presentation concerns (windows, drawing surfaces, keyboards, timers).
"""

from .constants import Direction, UP, DOWN, LEFT, RIGHT, VALID_MOVES
from .snake import Snake
from .game_state import GameState, TickResult
from .engine import GameEngine

__all__ = [
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'Snake',
    'GameState',
    'TickResult',
    'GameEngine',
]
