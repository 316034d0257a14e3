"""
Player implementations for Snake Grid.

This module contains the input sources that steer the snake: the arrow-key
player used in the interactive window and the random autopilot used for
headless runs.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, KEY_BINDINGS
from .random_player import RandomPlayer
from .registry import get_player_class, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'KeyboardPlayer',
    'KEY_BINDINGS',
    'RandomPlayer',
    'get_player_class',
    'AVAILABLE_PLAYERS',
]
