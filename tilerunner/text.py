"""Text labels rendered with a font."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

import pygame


class TextColor(IntEnum):
    RED = 0
    WHITE = 1
    BLACK = 2


_PRESETS = {
    TextColor.RED: (255, 0, 0),
    TextColor.WHITE: (255, 255, 255),
    TextColor.BLACK: (0, 0, 0),
}


class TextLabel:
    """A piece of text, its colour, and the image it was last rendered to."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.color: tuple[int, int, int] = _PRESETS[TextColor.WHITE]
        self.image: pygame.Surface | None = None
        self.width = 0
        self.height = 0

    def set_color(self, red: int, green: int, blue: int) -> None:
        self.color = (red, green, blue)

    def set_preset(self, color) -> None:
        """Use one of the preset colours; unknown values leave the colour as it is."""
        try:
            self.color = _PRESETS[TextColor(color)]
        except ValueError:
            pass

    def render_text(self, font: Any) -> bool:
        """Render the text with font; True when an image is available."""
        try:
            surface = font.render(self.text, False, self.color)
        except pygame.error:
            return self.image is not None
        self.image = surface
        self.width, self.height = surface.get_size()
        return True

    def draw(self, surface: pygame.Surface, x: int, y: int, clip=None) -> None:
        """Draw the rendered text (or the clipped part of it) at (x, y)."""
        if self.image is None:
            return
        if clip is None:
            surface.blit(self.image, (x, y))
        else:
            surface.blit(self.image, (x, y), area=pygame.Rect(clip))

    def free(self) -> None:
        self.image = None