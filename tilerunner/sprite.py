"""A positioned, colour-keyed image."""

from __future__ import annotations

from pathlib import Path

import pygame

from tilerunner.basefunc import COLOR_KEY


class ImageLoadError(Exception):
    """Raised when an image file cannot be loaded."""


class Sprite:
    """An image with a screen rectangle; the rectangle's size follows the image."""

    def __init__(self) -> None:
        self.image: pygame.Surface | None = None
        self.rect = pygame.Rect(0, 0, 0, 0)

    def load_image(self, path) -> None:
        """Load an image, keying out COLOR_KEY, and size the rectangle to it."""
        self.free()
        try:
            image = pygame.image.load(str(Path(path)))
        except (pygame.error, OSError) as exc:
            raise ImageLoadError(f"cannot load image {path}: {exc}") from exc
        image.set_colorkey(COLOR_KEY)
        self.image = image
        self.rect.size = image.get_size()

    def render(self, surface: pygame.Surface, clip=None) -> None:
        """Draw the image (or the clipped part of it) stretched to the rectangle."""
        if self.image is None:
            return
        if clip is None:
            piece = self.image
        else:
            area = pygame.Rect(clip).clip(self.image.get_rect())
            piece = self.image.subsurface(area)
        if piece.get_size() != self.rect.size:
            piece = pygame.transform.scale(piece, self.rect.size)
        surface.blit(piece, self.rect.topleft)

    def free(self) -> None:
        """Drop the image and reset the rectangle's size."""
        if self.image is not None:
            self.image = None
            self.rect.w = 0
            self.rect.h = 0