"""Font loading and centred text labels."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from snakegame import constants

logger = logging.getLogger(__name__)


def load_font(path: str | Path, size: float) -> pygame.font.Font:
    """Load a font file, falling back to pygame's default font if it cannot be read."""
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.Font(str(path), int(size))
    except (OSError, pygame.error):
        logger.error("Failed to load font : %s", path)
        return pygame.font.Font(None, int(size))


class TextLabel:
    """A line of text drawn centred on its position."""

    def __init__(self, size: float, color: tuple[int, int, int]) -> None:
        self.size = size
        self.color = color
        self.font = load_font(constants.FONT_PATH, size)
        self.text = ""
        self.position: tuple[float, float] = (0.0, 0.0)
        self.rendered: pygame.Surface = self.font.render("", True, color)
        self.origin: tuple[float, float] = (0.0, 0.0)

    def set_text(self, text: str) -> None:
        """Change the text and re-centre the origin on it."""
        self.text = text
        self.rendered = self.font.render(text, True, self.color)
        width, height = self.rendered.get_size()
        self.origin = (width / 2, height / 2)

    def set_position(self, x: float, y: float) -> None:
        self.position = (float(x), float(y))

    def draw(self, surface: pygame.Surface) -> pygame.Rect:
        """Blit the text onto a surface and return the area it covered."""
        x, y = self.position
        ox, oy = self.origin
        return surface.blit(self.rendered, (round(x - ox), round(y - oy)))