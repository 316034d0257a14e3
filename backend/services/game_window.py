"""
Interactive window for Snake Grid, backed by pygame.

The window only shows frames produced by SnakeRenderer and reports input
events; it holds no game state.
"""

import logging
from typing import List, Optional, Tuple

import pygame
from PIL import Image

logger = logging.getLogger(__name__)

WindowEvent = Tuple[str, Optional[str]]


class GameWindow:
    """A pygame display surface sized to the rendered board."""

    def __init__(self, size: Tuple[int, int], title: str = "Snake"):
        pygame.init()
        try:
            self.screen = pygame.display.set_mode(size)
        except pygame.error as e:
            pygame.quit()
            raise RuntimeError(f"Display is not available: {e}") from e

        pygame.display.set_caption(title)
        self.size = size
        self.closed = False
        logger.info(f"Opened {size[0]}x{size[1]} window")

    def show(self, frame: Image.Image) -> None:
        surface = pygame.image.frombytes(frame.convert('RGB').tobytes(), frame.size, 'RGB')
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def events(self) -> List[WindowEvent]:
        """
        Drain pending pygame events.

        Returns:
            ("quit", None) for a window close, ("key", name) for a key press,
            where name is what pygame.key.name() reports ("up", "escape", "r")
        """
        translated: List[WindowEvent] = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                translated.append(("quit", None))
            elif event.type == pygame.KEYDOWN:
                translated.append(("key", pygame.key.name(event.key)))
        return translated

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        pygame.quit()
