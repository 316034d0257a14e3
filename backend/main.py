import argparse
import json
import logging
import random
import time
from typing import Dict, List, Optional

from config import GameConfig, LOG_FORMAT, load_config
from domain.engine import GameEngine
from domain.game_state import TickResult
from players.base import Player
from players.keyboard_player import KeyboardPlayer
from players.registry import get_player_class, AVAILABLE_PLAYERS
from services.renderer import SnakeRenderer
from services.tick_driver import TickDriver, INPUT_POLL_SECONDS
from services.video_recorder import SessionRecorder

logger = logging.getLogger(__name__)

DEFAULT_HEADLESS_MAX_TICKS = 200


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_engine(config: GameConfig) -> GameEngine:
    return GameEngine(grid_size=config.grid_size, rng=random.Random(config.seed))


def build_player(name: Optional[str], engine: GameEngine) -> Player:
    """Instantiate a player by registry name, wired to the engine it steers."""
    player_class = get_player_class(name)
    if issubclass(player_class, KeyboardPlayer):
        return player_class(engine)
    return player_class(rng=engine.rng)


def summarize(driver: TickDriver) -> Dict:
    """
    Build a JSON-friendly summary of a finished session.
    """
    result = driver.last_result
    state = driver.engine.get_current_state()
    return {
        "ticks": driver.ticks,
        "apples_eaten": state.apples_eaten,
        "snake_length": state.snake_length,
        "alive": state.alive,
        "game_over": bool(result is not None and result.game_over),
    }


# -------------------------------
# Headless run
# -------------------------------

def run_headless(config: GameConfig, max_ticks: Optional[int] = DEFAULT_HEADLESS_MAX_TICKS,
                 record_path: Optional[str] = None) -> Dict:
    """
    Play one game with the random autopilot and no window.

    Args:
        config: game settings
        max_ticks: stop after this many ticks even if the snake is still alive
        record_path: optional MP4 path; every frame is recorded when given

    Returns:
        A dictionary summarizing the session (ticks, apples eaten, final length, ...)
    """
    engine = build_engine(config)
    renderer = SnakeRenderer.from_config(config)
    recorder = SessionRecorder(record_path, config.tick_interval_ms) if record_path else None

    def on_frame(result: TickResult, frame) -> None:
        logger.info("\n" + engine.get_current_state().print_board() + "\n")
        if recorder is not None and frame is not None:
            recorder.add_frame(frame)

    driver = TickDriver(
        engine,
        config.tick_interval_ms,
        renderer=renderer,
        player=build_player("random", engine),
        on_frame=on_frame
    )
    driver.run(max_ticks=max_ticks)

    if recorder is not None and len(recorder):
        recorder.save()

    return summarize(driver)


# -------------------------------
# Interactive run
# -------------------------------

def run_interactive(config: GameConfig, record_path: Optional[str] = None,
                    player_name: str = "keyboard") -> Dict:
    """
    Open a window, steer with the arrow keys. The game stops when the snake
    eats its tail; R starts a new game, Esc or closing the window quits.
    """
    from services.game_window import GameWindow

    engine = build_engine(config)
    renderer = SnakeRenderer.from_config(config)
    recorder = SessionRecorder(record_path, config.tick_interval_ms) if record_path else None
    window = GameWindow(renderer.size, title="Snake")
    player = build_player(player_name, engine)
    quit_requested = False

    def on_frame(result: TickResult, frame) -> None:
        window.show(frame)
        if recorder is not None:
            recorder.add_frame(frame)

    driver = TickDriver(
        engine,
        config.tick_interval_ms,
        renderer=renderer,
        player=player,
        on_frame=on_frame
    )

    def poll_input() -> None:
        nonlocal quit_requested
        for kind, key in window.events():
            if kind == "quit" or key == "escape":
                quit_requested = True
                driver.stop()
                return
            if isinstance(player, KeyboardPlayer):
                player.handle_key(key)

    try:
        window.show(renderer.surface)
        while not quit_requested:
            driver.run(poll_input=poll_input)
            if quit_requested:
                break

            logger.info("Press R to play again or Esc to quit.")
            restart = False
            while not (restart or quit_requested):
                for kind, key in window.events():
                    if kind == "quit" or key == "escape":
                        quit_requested = True
                    elif key == "r":
                        restart = True
                time.sleep(INPUT_POLL_SECONDS)
    finally:
        window.close()

    if recorder is not None and len(recorder):
        recorder.save()

    return summarize(driver)


# -------------------------------
# Main Entry Point
# -------------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Snake on a wrap-around grid."
    )
    parser.add_argument("--grid-size", type=int, default=None,
                        help="Number of cells per side (default: SNAKE_GRID_SIZE or 6)")
    parser.add_argument("--interval", type=int, default=None,
                        help="Tick interval in milliseconds (default: SNAKE_TICK_INTERVAL_MS or 300)")
    parser.add_argument("--canvas-size", type=int, default=None,
                        help="Window size in pixels (default: SNAKE_CANVAS_SIZE or 300)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for head and apple placement")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default: SNAKE_LOG_LEVEL or INFO)")
    parser.add_argument("--headless", action="store_true",
                        help="Run without a window, steered by the random autopilot")
    parser.add_argument("--player", type=str, default=None, choices=AVAILABLE_PLAYERS,
                        help="Who steers: keyboard (default) or random; headless runs always use random")
    parser.add_argument("--max-ticks", type=positive_int, default=DEFAULT_HEADLESS_MAX_TICKS,
                        help="Headless only: stop after this many ticks")
    parser.add_argument("--record", type=str, default=None,
                        help="Write the session to this MP4 file")
    return parser


def main(argv: Optional[List[str]] = None) -> Dict:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if args.headless and args.player == "keyboard":
        parser.error("--headless cannot be combined with --player keyboard")

    config = load_config().with_overrides(
        grid_size=args.grid_size,
        tick_interval_ms=args.interval,
        canvas_size=args.canvas_size,
        seed=args.seed,
        log_level=args.log_level.upper() if args.log_level else None
    )

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    if args.headless:
        result = run_headless(config, max_ticks=args.max_ticks, record_path=args.record)
    else:
        result = run_interactive(config, record_path=args.record, player_name=args.player or "keyboard")

    print("\nSession Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
