"""
Registry for player kinds.

Maps the names accepted by the command line ('keyboard', 'random') to
player classes.
"""

from typing import Callable, Dict, Optional, Type

from .base import Player


def _get_keyboard_player() -> Type[Player]:
    from .keyboard_player import KeyboardPlayer
    return KeyboardPlayer


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "keyboard": _get_keyboard_player,
    "random": _get_random_player,
}

AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())


def get_player_class(name: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given name.

    Args:
        name: 'keyboard' or 'random'. If None or empty, returns the keyboard player.

    Raises:
        ValueError: If name is not recognized.
    """
    if not name or name.strip() == "":
        name = "keyboard"

    name = name.strip().lower()

    if name not in PLAYER_LOADERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(f"Unknown player '{name}'. Available players: {available}")

    return PLAYER_LOADERS[name]()
