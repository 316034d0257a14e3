"""
Fixed-cadence driver for the game engine.

The driver owns the timer. Every interval it asks the player for a move,
advances the engine once, renders the result and hands the frame to the
host. It stops on request or as soon as a tick reports game over.
"""

import logging
import time
from typing import Callable, Optional

from PIL import Image

from domain.engine import GameEngine
from domain.game_state import TickResult
from players.base import Player
from services.renderer import SnakeRenderer

logger = logging.getLogger(__name__)

# Upper bound on how long run() sleeps before polling input again.
INPUT_POLL_SECONDS = 0.01

FrameCallback = Callable[[TickResult, Optional[Image.Image]], None]


class TickDriver:
    """Timer/driver collaborator holding one GameEngine."""

    def __init__(
        self,
        engine: GameEngine,
        tick_interval_ms: int,
        renderer: Optional[SnakeRenderer] = None,
        player: Optional[Player] = None,
        on_frame: Optional[FrameCallback] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep
    ):
        if tick_interval_ms <= 0:
            raise ValueError(f"tick_interval_ms must be positive, got {tick_interval_ms}")

        self.engine = engine
        self.interval = tick_interval_ms / 1000.0
        self.renderer = renderer
        self.player = player
        self.on_frame = on_frame
        self.clock = clock
        self.sleep = sleep

        self.running = False
        self.ticks = 0
        self.last_result: Optional[TickResult] = None
        self._next_tick = 0.0

    def start(self) -> None:
        """Reset the engine and schedule the first tick one interval from now."""
        self.engine.start()
        self.running = True
        self.ticks = 0
        self.last_result = None
        self._next_tick = self.clock() + self.interval

    def stop(self) -> None:
        if not self.running:
            return
        self.running = False
        self.engine.stop()
        logger.info(f"Driver stopped after {self.ticks} ticks.")

    def tick(self) -> TickResult:
        """Run one advance + render pass."""
        if self.player is not None:
            move = self.player.get_move(self.engine.get_current_state())
            if move is not None:
                self.engine.set_direction(move)

        result = self.engine.advance()
        self.ticks += 1
        self.last_result = result

        frame = self.renderer.render(result) if self.renderer is not None else None
        if self.on_frame is not None:
            self.on_frame(result, frame)

        if result.game_over:
            logger.info(f"Game over after {result.apples_eaten} apples.")
            self.stop()

        return result

    def poll(self) -> Optional[TickResult]:
        """Tick if the next tick is due; returns the result, or None if nothing ran."""
        if not self.running:
            return None

        now = self.clock()
        if now < self._next_tick:
            return None

        result = self.tick()
        self._next_tick += self.interval
        if self._next_tick <= now:
            # Skip missed ticks instead of bursting to catch up.
            self._next_tick = now + self.interval
        return result

    def run(self, max_ticks: Optional[int] = None, poll_input: Optional[Callable[[], None]] = None) -> Optional[TickResult]:
        """
        Block until the driver stops: the game ended, poll_input called stop(),
        or max_ticks ticks have run.

        Args:
            max_ticks: optional upper limit on ticks for this run
            poll_input: called between ticks to pump input events

        Returns:
            The last TickResult, or None if no tick ran
        """
        if not self.running:
            self.start()

        while self.running:
            if max_ticks is not None and self.ticks >= max_ticks:
                logger.info(f"Reached max ticks ({max_ticks}).")
                self.stop()
                break

            if poll_input is not None:
                poll_input()
                if not self.running:
                    break

            if self.poll() is None:
                remaining = self._next_tick - self.clock()
                if remaining > 0:
                    self.sleep(min(remaining, INPUT_POLL_SECONDS))

        return self.last_result
