"""
Tests for the players package: keyboard input, random autopilot and registry.
"""

import random
import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT  # noqa: E402
from domain.engine import GameEngine  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from players import (  # noqa: E402
    Player,
    KeyboardPlayer,
    RandomPlayer,
    get_player_class,
    AVAILABLE_PLAYERS,
)


def make_state(snake_positions, direction=RIGHT, grid_size=6):
    return GameState(
        tick=0,
        snake_positions=snake_positions,
        apple=None,
        direction=direction,
        snake_length=max(1, len(snake_positions)),
        alive=True,
        apples_eaten=0,
        grid_size=grid_size
    )


class TestKeyboardPlayer:
    """Tests for the arrow-key input collaborator."""

    def setup_method(self):
        self.engine = GameEngine(grid_size=6, rng=random.Random(0))
        self.engine.start()
        self.player = KeyboardPlayer(self.engine)

    @pytest.mark.parametrize("key, expected", [
        ("ArrowUp", UP),
        ("ArrowDown", DOWN),
        ("up", UP),
        ("down", DOWN),
    ])
    def test_arrow_keys_turn_the_snake(self, key, expected):
        assert self.player.handle_key(key) is True
        assert self.engine.direction is expected

    def test_reverse_key_is_ignored(self):
        """Heading right, ArrowLeft is dropped by the engine."""
        assert self.player.handle_key("ArrowLeft") is False
        assert self.engine.direction is RIGHT

    @pytest.mark.parametrize("key", ["w", "space", "Enter", "", None])
    def test_other_keys_are_ignored(self, key):
        assert self.player.handle_key(key) is False
        assert self.engine.direction is RIGHT

    def test_last_key_before_tick_wins(self):
        self.player.handle_key("ArrowUp")
        self.player.handle_key("ArrowLeft")
        assert self.engine.direction is LEFT

    def test_get_move_defers_to_key_events(self):
        assert self.player.get_move(self.engine.get_current_state()) is None


class TestRandomPlayer:
    """Tests for the RandomPlayer autopilot."""

    def test_empty_snake_has_no_move(self):
        assert RandomPlayer().get_move(make_state([])) is None

    def test_never_reverses(self):
        player = RandomPlayer(rng=random.Random(3))
        state = make_state([(2, 2)], direction=RIGHT)

        for _ in range(50):
            assert player.get_move(state) in {UP, DOWN, RIGHT}

    def test_boxed_in_still_returns_a_move(self):
        """Head at (2,2) heading left with body on every side."""
        player = RandomPlayer(rng=random.Random(5))
        state = make_state(
            [(2, 2), (3, 2), (3, 1), (2, 1), (1, 1), (1, 2), (1, 3), (2, 3), (3, 3)],
            direction=LEFT
        )
        # LEFT leads to (1,2), which is body, UP to (2,1) body, DOWN to (2,3) body.
        # Every option is blocked, so any non-reversing move comes back.
        for _ in range(20):
            assert player.get_move(state) in {UP, DOWN, LEFT}

    def test_prefers_the_only_free_cell(self):
        player = RandomPlayer(rng=random.Random(11))
        state = make_state([(2, 2), (3, 2), (3, 1), (2, 1), (1, 1), (1, 2), (0, 2)], direction=LEFT)
        # UP -> (2,1) body, LEFT -> (1,2) body, DOWN -> (2,3) free.
        for _ in range(20):
            assert player.get_move(state) is DOWN

    def test_tail_cell_counts_as_free(self):
        """The tail moves away this tick, so stepping onto it is allowed."""
        player = RandomPlayer(rng=random.Random(2))
        state = make_state([(2, 2), (3, 2), (3, 3), (2, 3)], direction=LEFT)
        moves = {player.get_move(state) for _ in range(50)}
        assert DOWN in moves

    def test_wraps_when_checking_cells(self):
        """At the right edge, RIGHT leads to column 0."""
        player = RandomPlayer(rng=random.Random(9))
        state = make_state([(5, 2), (4, 2), (4, 1), (5, 1), (0, 1), (0, 2), (0, 3)], direction=RIGHT)
        # RIGHT -> (0,2) body, UP -> (5,1) body, DOWN -> (5,3) free.
        for _ in range(20):
            assert player.get_move(state) is DOWN


class TestRegistry:
    """Tests for the player registry."""

    def test_default_is_keyboard(self):
        assert get_player_class() is KeyboardPlayer
        assert get_player_class("  ") is KeyboardPlayer

    def test_lookup_by_name(self):
        assert get_player_class("random") is RandomPlayer
        assert get_player_class("Random") is RandomPlayer

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Available players"):
            get_player_class("minimax")

    def test_available_players_match_loaders(self):
        assert AVAILABLE_PLAYERS == ["keyboard", "random"]

    def test_base_player_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state([(0, 0)]))
