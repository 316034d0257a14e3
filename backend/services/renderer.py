"""
Rendering Service for Snake Grid

Draws a TickResult onto a square raster surface using PIL (Pillow):
- The surface is grid_size x grid_size cells of square_size px each
- Cell (x, y) covers the square whose top-left corner is (x * square_size, y * square_size)
- The surface is cleared before every redraw
- Head, body and apple each get their own color
"""

import logging
from typing import Tuple

from PIL import Image, ImageDraw

from config import GameConfig, parse_color
from domain.game_state import TickResult

logger = logging.getLogger(__name__)

BACKGROUND = "#000000"


class SnakeRenderer:
    """Render collaborator: turns engine output into pixels."""

    def __init__(
        self,
        grid_size: int,
        square_size: int,
        body_color: str,
        head_color: str,
        apple_color: str,
        background: str = BACKGROUND
    ):
        if grid_size <= 0 or square_size <= 0:
            raise ValueError(
                f"Cannot build a render surface for grid_size={grid_size}, square_size={square_size}"
            )

        self.grid_size = grid_size
        self.square_size = square_size
        self.body_color = parse_color(body_color)
        self.head_color = parse_color(head_color)
        self.apple_color = parse_color(apple_color)
        self.background = parse_color(background)

        size = grid_size * square_size
        self.surface = Image.new('RGB', (size, size), self.background)
        self._draw = ImageDraw.Draw(self.surface)
        logger.debug(f"Render surface {size}x{size}px, {square_size}px squares")

    @classmethod
    def from_config(cls, config: GameConfig) -> "SnakeRenderer":
        return cls(
            grid_size=config.grid_size,
            square_size=config.square_size,
            body_color=config.body_color,
            head_color=config.head_color,
            apple_color=config.apple_color
        )

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.size

    def clear(self) -> None:
        width, height = self.surface.size
        self._draw.rectangle([0, 0, width - 1, height - 1], fill=self.background)

    def render(self, result: TickResult) -> Image.Image:
        """
        Redraw the whole surface from a TickResult and return a copy of it.

        The apple is drawn first, then the body, then the head, so the head
        stays visible whatever else shares its square.
        """
        self.clear()

        if result.apple is not None:
            self._draw_cell(result.apple, self.apple_color)

        for cell in result.snake[1:]:
            self._draw_cell(cell, self.body_color)

        if result.snake:
            self._draw_cell(result.snake[0], self.head_color)

        return self.surface.copy()

    def _draw_cell(self, cell: Tuple[int, int], color: Tuple[int, int, int]) -> None:
        """Fill one grid square."""
        x, y = cell
        left = x * self.square_size
        top = y * self.square_size
        self._draw.rectangle(
            [left, top, left + self.square_size - 1, top + self.square_size - 1],
            fill=color
        )
