"""
Runtime configuration for Snake Grid.

Values come from the environment (a local .env file is loaded first) and
can be overridden by command line flags. Configuration is fixed once the
game is built; there is no reconfiguration at runtime.
"""

import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from dotenv import load_dotenv
from PIL import ImageColor

from domain.constants import (
    DEFAULT_GRID_SIZE,
    DEFAULT_TICK_INTERVAL_MS,
    DEFAULT_CANVAS_SIZE,
    DEFAULT_BODY_COLOR,
    DEFAULT_HEAD_COLOR,
    DEFAULT_APPLE_COLOR,
)

load_dotenv()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def parse_color(value: str) -> Tuple[int, int, int]:
    """Convert a CSS color ("#0f0", "#e1ffb7", "red") to an RGB tuple."""
    try:
        return ImageColor.getrgb(value)[:3]
    except ValueError:
        raise ValueError(f"Invalid color value: {value!r}") from None


@dataclass(frozen=True)
class GameConfig:
    """Construction-time settings for the engine, renderer and driver."""
    grid_size: int = DEFAULT_GRID_SIZE
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS
    canvas_size: int = DEFAULT_CANVAS_SIZE
    body_color: str = DEFAULT_BODY_COLOR
    head_color: str = DEFAULT_HEAD_COLOR
    apple_color: str = DEFAULT_APPLE_COLOR
    log_level: str = "INFO"
    seed: Optional[int] = None

    def __post_init__(self):
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if self.tick_interval_ms <= 0:
            raise ValueError(f"tick_interval_ms must be positive, got {self.tick_interval_ms}")
        if self.canvas_size < self.grid_size:
            raise ValueError(
                f"canvas_size ({self.canvas_size}px) is smaller than the grid "
                f"({self.grid_size} cells)"
            )
        for color in (self.body_color, self.head_color, self.apple_color):
            parse_color(color)

    @property
    def square_size(self) -> int:
        return self.canvas_size // self.grid_size

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0

    def with_overrides(self, **overrides: Any) -> "GameConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def load_config(environ: Optional[Dict[str, str]] = None) -> GameConfig:
    """
    Build a GameConfig from SNAKE_* environment variables.

    Args:
        environ: optional mapping used instead of os.environ (for tests)
    """
    if environ is not None:
        getenv = environ.get
    else:
        getenv = os.getenv

    def int_setting(name: str, default: Optional[int]) -> Optional[int]:
        raw = getenv(name)
        if raw is None or str(raw).strip() == "":
            return default
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"{name} must be an integer, got {raw!r}") from None

    return GameConfig(
        grid_size=int_setting("SNAKE_GRID_SIZE", DEFAULT_GRID_SIZE),
        tick_interval_ms=int_setting("SNAKE_TICK_INTERVAL_MS", DEFAULT_TICK_INTERVAL_MS),
        canvas_size=int_setting("SNAKE_CANVAS_SIZE", DEFAULT_CANVAS_SIZE),
        body_color=getenv("SNAKE_BODY_COLOR") or DEFAULT_BODY_COLOR,
        head_color=getenv("SNAKE_HEAD_COLOR") or DEFAULT_HEAD_COLOR,
        apple_color=getenv("SNAKE_APPLE_COLOR") or DEFAULT_APPLE_COLOR,
        log_level=(getenv("SNAKE_LOG_LEVEL") or "INFO").upper(),
        seed=int_setting("SNAKE_SEED", None),
    )
