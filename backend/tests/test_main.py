"""
Tests for main.py - command line host for the game.
"""

import sys
import os
from unittest.mock import Mock, patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main  # noqa: E402
from config import GameConfig  # noqa: E402
from domain.constants import UP  # noqa: E402
from domain.engine import GameEngine  # noqa: E402
from players.keyboard_player import KeyboardPlayer  # noqa: E402
from players.random_player import RandomPlayer  # noqa: E402


class TestBuilders:
    """Tests for the engine and player factories."""

    def test_build_engine_uses_config(self):
        engine = main.build_engine(GameConfig(grid_size=9, canvas_size=90, seed=3))
        assert isinstance(engine, GameEngine)
        assert engine.grid_size == 9

    def test_seeded_engines_agree(self):
        config = GameConfig(seed=5)
        first = main.build_engine(config)
        second = main.build_engine(config)
        first.start()
        second.start()
        assert first.advance() == second.advance()

    def test_build_keyboard_player(self):
        engine = main.build_engine(GameConfig())
        player = main.build_player("keyboard", engine)
        assert isinstance(player, KeyboardPlayer)
        assert player.engine is engine

    def test_build_random_player_shares_engine_rng(self):
        engine = main.build_engine(GameConfig())
        player = main.build_player("random", engine)
        assert isinstance(player, RandomPlayer)
        assert player.rng is engine.rng


class TestRunHeadless:
    """Tests for run_headless()."""

    def test_runs_until_max_ticks_or_game_over(self):
        config = GameConfig(tick_interval_ms=1, seed=11)

        summary = main.run_headless(config, max_ticks=5)

        assert 1 <= summary["ticks"] <= 5
        assert summary["snake_length"] >= 1
        if summary["ticks"] < 5:
            assert summary["game_over"] is True

    @patch('main.SessionRecorder')
    def test_records_every_frame(self, mock_recorder_class, tmp_path):
        recorder = mock_recorder_class.return_value
        recorder.__len__.return_value = 3
        config = GameConfig(tick_interval_ms=1, seed=11)

        main.run_headless(config, max_ticks=3, record_path=str(tmp_path / "run.mp4"))

        mock_recorder_class.assert_called_once_with(str(tmp_path / "run.mp4"), 1)
        assert recorder.add_frame.call_count == 3
        recorder.save.assert_called_once()


class TestMain:
    """Tests for argument handling in main()."""

    @patch('main.run_headless')
    def test_headless_flags_override_config(self, mock_run):
        mock_run.return_value = {"ticks": 0}

        main.main(["--headless", "--grid-size", "8", "--interval", "50",
                   "--seed", "4", "--max-ticks", "10"])

        config = mock_run.call_args[0][0]
        assert config.grid_size == 8
        assert config.tick_interval_ms == 50
        assert config.seed == 4
        assert mock_run.call_args[1]["max_ticks"] == 10
        assert mock_run.call_args[1]["record_path"] is None

    @patch('main.run_interactive')
    def test_interactive_is_the_default(self, mock_run):
        mock_run.return_value = {"ticks": 0}

        main.main([])

        mock_run.assert_called_once()
        assert mock_run.call_args[1]["player_name"] == "keyboard"

    def test_headless_keyboard_is_rejected(self):
        with pytest.raises(SystemExit):
            main.main(["--headless", "--player", "keyboard"])

    @pytest.mark.parametrize("value", ["0", "-3", "ten"])
    def test_max_ticks_must_be_positive(self, value):
        with pytest.raises(SystemExit):
            main.main(["--headless", "--max-ticks", value])

    def test_invalid_grid_size_is_rejected(self):
        with pytest.raises(ValueError):
            main.main(["--headless", "--grid-size", "0"])


class TestRunInteractive:
    """Tests for run_interactive() with a scripted window in place of pygame."""

    def setup_method(self):
        self.engines = []
        self.build_engine = main.build_engine

    def capture_engine(self, config):
        engine = self.build_engine(config)
        self.engines.append(engine)
        return engine

    def run(self, events, record_path=None):
        window = Mock()
        window.events.side_effect = events
        with patch('services.game_window.GameWindow', return_value=window), \
                patch('main.build_engine', side_effect=self.capture_engine):
            summary = main.run_interactive(
                GameConfig(tick_interval_ms=1, seed=2), record_path=record_path
            )
        return summary, window

    def test_arrow_keys_reach_the_engine(self):
        batches = [[("key", "up")], [("key", "escape")]]

        summary, window = self.run(lambda: batches.pop(0) if batches else [])

        assert self.engines[0].direction is UP
        assert summary["game_over"] is False

    def test_escape_stops_and_closes_the_window(self):
        summary, window = self.run(lambda: [("key", "escape")])

        engine = self.engines[0]
        assert engine.stopped is True
        assert summary["ticks"] == 0
        window.close.assert_called_once()

    def test_closing_the_window_quits(self):
        summary, window = self.run(lambda: [("quit", None)])

        assert self.engines[0].stopped is True
        window.close.assert_called_once()

    @patch('main.SessionRecorder')
    def test_r_after_game_over_starts_a_fresh_game(self, mock_recorder_class):
        recorder = mock_recorder_class.return_value
        recorder.__len__.return_value = 1
        script = {"placed": False, "game_over_seen": False}

        def events():
            engine = self.engines[0]
            if not script["placed"]:
                # Head at (2,2) heading left; turning down runs into (2,3).
                engine.place_snake([(2, 2), (3, 2), (3, 3), (2, 3), (1, 3)], direction="left")
                engine.set_apple((5, 5))
                script["placed"] = True
                return [("key", "down")]
            if not engine.alive:
                script["game_over_seen"] = True
                return [("key", "r")]
            if script["game_over_seen"]:
                return [("key", "escape")]
            return []

        summary, window = self.run(events, record_path="session.mp4")

        engine = self.engines[0]
        assert script["game_over_seen"] is True
        assert engine.alive is True
        assert engine.tick == 0
        assert summary["ticks"] == 0
        assert recorder.add_frame.call_count == 1
        recorder.save.assert_called_once()
        window.close.assert_called_once()
