"""An explosion animation drawn from a horizontal strip of frames."""

from __future__ import annotations

import pygame

from tilerunner.sprite import Sprite

NUM_FRAME_EXP = 8


class ExplosionSprite(Sprite):
    """A sprite sheet of NUM_FRAME_EXP equal frames laid side by side."""

    def __init__(self) -> None:
        super().__init__()
        self.frame_width = 0
        self.frame_height = 0
        self.frame = 0
        self.frame_clips = [pygame.Rect(0, 0, 0, 0) for _ in range(NUM_FRAME_EXP)]

    def load_image(self, path) -> None:
        super().load_image(path)
        self.frame_width = self.rect.w // NUM_FRAME_EXP
        self.frame_height = self.rect.h

    def set_clips(self) -> None:
        """Compute the source rectangle of every frame."""
        if self.frame_width > 0 and self.frame_height > 0:
            self.frame_clips = [
                pygame.Rect(i * self.frame_width, 0, self.frame_width, self.frame_height)
                for i in range(NUM_FRAME_EXP)
            ]

    def show(self, surface: pygame.Surface) -> None:
        """Draw the current frame at the sprite's position."""
        if self.image is None:
            return
        clip = self.frame_clips[self.frame].clip(self.image.get_rect())
        surface.blit(self.image, self.rect.topleft, area=clip)