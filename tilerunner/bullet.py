"""Projectiles fired by the player and by enemies."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path

from tilerunner.sprite import Sprite


class BulletDir(IntEnum):
    RIGHT = 20
    LEFT = 21
    UP = 22
    UP_LEFT = 23
    UP_RIGHT = 24
    DOWN_LEFT = 25
    DOWN_RIGHT = 26
    DOWN = 27


class BulletType(IntEnum):
    SPHERE = 50
    LASER = 51


_STEPS = {
    BulletDir.RIGHT: (1, 0),
    BulletDir.LEFT: (-1, 0),
    BulletDir.UP: (0, -1),
    BulletDir.UP_LEFT: (-1, -1),
    BulletDir.UP_RIGHT: (1, -1),
    BulletDir.DOWN_LEFT: (-1, 1),
    BulletDir.DOWN_RIGHT: (1, 1),
    BulletDir.DOWN: (0, 1),
}

_IMAGES = {
    BulletType.SPHERE: "sphere_bullet.png",
    BulletType.LASER: "laser_bullet.png",
}


class Bullet(Sprite):
    """A sprite moving in one of eight directions until it leaves the screen."""

    def __init__(self) -> None:
        super().__init__()
        self.x_val = 0
        self.y_val = 0
        self.is_move = False
        self.bullet_dir: BulletDir | None = None
        self.bullet_type = BulletType.SPHERE
        self.image_dir = Path("img")

    def load_bullet_image(self) -> None:
        """Load the image matching the bullet type."""
        name = _IMAGES.get(self.bullet_type, _IMAGES[BulletType.SPHERE])
        self.load_image(self.image_dir / name)

    def handle_move(self, x_border: int, y_border: int) -> None:
        """Advance one step; stop moving once past a screen edge."""
        step = _STEPS.get(self.bullet_dir) if self.bullet_dir is not None else None
        if step is None:
            return
        dx, dy = step
        if dx:
            self.rect.x += dx * self.x_val
            if (dx > 0 and self.rect.x > x_border) or (dx < 0 and self.rect.x < 0):
                self.is_move = False
        if dy:
            self.rect.y += dy * self.y_val
            if (dy > 0 and self.rect.y > y_border) or (dy < 0 and self.rect.y < 0):
                self.is_move = False