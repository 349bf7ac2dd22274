"""Heads-up display icons: remaining lives and the money counter icon."""

from __future__ import annotations

from pathlib import Path

import pygame

from tilerunner.basefunc import SCREEN_WIDTH
from tilerunner.sprite import ImageLoadError, Sprite

LIVES_IMAGE = "player_pw.png"
MONEY_IMAGE = "money_img.png"

START_LIVES = 3
LIFE_POSITIONS = (20, 60, 100)
LIFE_SPACING = 40


class LivesIndicator(Sprite):
    """A row of life icons along the top edge of the screen."""

    def __init__(self, image_dir="img") -> None:
        super().__init__()
        self.image_dir = Path(image_dir)
        self.number = 0
        self.positions: list[int] = []

    def init(self) -> None:
        """Load the icon and reset to the starting number of lives."""
        try:
            self.load_image(self.image_dir / LIVES_IMAGE)
        except ImageLoadError:
            pass
        self.number = START_LIVES
        self.positions.clear()
        for x_pos in LIFE_POSITIONS:
            self.add_pos(x_pos)

    def add_pos(self, x_pos: int) -> None:
        """Add an icon at horizontal position x_pos."""
        self.positions.append(x_pos)

    def show(self, surface: pygame.Surface) -> None:
        """Draw one icon per remaining life."""
        for x_pos in self.positions:
            self.rect.topleft = (x_pos, 0)
            self.render(surface)

    def decrease(self) -> None:
        """Remove the last life icon; IndexError when none are left."""
        self.positions.pop()
        self.number -= 1

    def increase(self) -> None:
        """Add a life icon after the last one; IndexError when there is none."""
        last_pos = self.positions[-1]
        self.number += 1
        self.positions.append(last_pos + LIFE_SPACING)


class MoneyIcon(Sprite):
    """The coin icon shown next to the money counter."""

    def __init__(self, image_dir="img") -> None:
        super().__init__()
        self.image_dir = Path(image_dir)
        self.x_pos = SCREEN_WIDTH // 4 + 30
        self.y_pos = 5

    def init(self) -> None:
        """Load the icon image."""
        try:
            self.load_image(self.image_dir / MONEY_IMAGE)
        except ImageLoadError:
            pass

    def show(self, surface: pygame.Surface) -> None:
        """Draw the icon at its position."""
        self.rect.topleft = (self.x_pos, self.y_pos)
        self.render(surface)