"""The player character: input, movement against the tile map, and shooting."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Any

import pygame

from tilerunner.basefunc import (
    BLANK_TILE,
    MAX_MAP_X,
    MAX_MAP_Y,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STATE_MONEY,
    TILE_SIZE,
    InputState,
    TileMap,
)
from tilerunner.bullet import Bullet, BulletDir, BulletType
from tilerunner.sound import COIN, SHOOT
from tilerunner.sprite import ImageLoadError, Sprite

GRAVITY_SPEED = 0.8
MAX_FALL_SPEED = 10
PLAYER_SPEED = 8
PLAYER_JUMP_VAL = 20

NUM_FRAMES = 8
COME_BACK_FRAMES = 10
COME_BACK_STEP_BACK = 256
BULLET_SPEED = 20


class WalkType(IntEnum):
    NONE = 0
    RIGHT = 1
    LEFT = 2


def _in_grid(x1: int, x2: int, y1: int, y2: int) -> bool:
    return x1 >= 0 and x2 < MAX_MAP_X and y1 >= 0 and y2 < MAX_MAP_Y


class Player(Sprite):
    """The controllable character, animated from an eight-frame sprite sheet."""

    def __init__(self, image_dir="img", sounds: Any = None) -> None:
        super().__init__()
        self.image_dir = Path(image_dir)
        self.sounds = sounds
        self.frame = 0
        self.x_pos = 0.0
        self.y_pos = 0.0
        self.x_val = 0.0
        self.y_val = 0.0
        self.width_frame = 0
        self.height_frame = 0
        self.status = WalkType.NONE
        self.input = InputState()
        self.on_ground = False
        self.map_x = 0
        self.map_y = 0
        self.come_back_time = 0
        self.money_count = 0
        self.bullet_list: list[Bullet] = []
        self.frame_clips = [pygame.Rect(0, 0, 0, 0) for _ in range(NUM_FRAMES)]

    def _play(self, name: str) -> None:
        if self.sounds is not None:
            self.sounds.play(name)

    def load_image(self, path) -> None:
        super().load_image(path)
        self.width_frame = self.rect.w // NUM_FRAMES
        self.height_frame = self.rect.h

    def frame_rect(self) -> pygame.Rect:
        """The on-screen rectangle of a single animation frame."""
        return pygame.Rect(self.rect.x, self.rect.y, self.width_frame, self.height_frame)

    def set_clips(self) -> None:
        """Compute the source rectangle of every animation frame."""
        if self.width_frame > 0 and self.height_frame > 0:
            self.frame_clips = [
                pygame.Rect(i * self.width_frame, 0, self.width_frame, self.height_frame)
                for i in range(NUM_FRAMES)
            ]

    def show(self, surface: pygame.Surface) -> None:
        """Advance the walk animation and draw the current frame."""
        self.update_image()
        if self.input.left == 1 or self.input.right == 1:
            self.frame += 1
        else:
            self.frame = 0
        if self.frame >= NUM_FRAMES:
            self.frame = 0
        if self.come_back_time == 0:
            self.rect.x = int(self.x_pos - self.map_x)
            self.rect.y = int(self.y_pos - self.map_y)
            if self.image is not None:
                clip = self.frame_clips[self.frame].clip(self.image.get_rect())
                surface.blit(self.image, self.rect.topleft, area=clip)

    def handle_input(self, event: pygame.event.Event) -> None:
        """React to a key press, key release or mouse click."""
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_RIGHT:
                self.status = WalkType.RIGHT
                self.input.right = 1
                self.input.left = 0
                self.update_image()
            elif event.key == pygame.K_LEFT:
                self.status = WalkType.LEFT
                self.input.left = 1
                self.input.right = 0
                self.update_image()
            elif event.key == pygame.K_UP:
                self.input.jump = 1
        elif event.type == pygame.KEYUP:
            if event.key == pygame.K_RIGHT:
                self.input.right = 0
            elif event.key == pygame.K_LEFT:
                self.input.left = 0
            elif event.key == pygame.K_UP:
                self.input.jump = 0
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == pygame.BUTTON_LEFT:
            self._fire()

    def _fire(self) -> None:
        bullet = Bullet()
        bullet.image_dir = self.image_dir
        self.bullet_list.append(bullet)
        self._play(SHOOT)
        bullet.bullet_type = BulletType.SPHERE
        try:
            bullet.load_bullet_image()
        except ImageLoadError:
            pass
        y = int(self.rect.y + self.height_frame * 0.3)
        if self.status == WalkType.LEFT:
            bullet.bullet_dir = BulletDir.LEFT
            bullet.rect.topleft = (self.rect.x, y)
        else:
            bullet.bullet_dir = BulletDir.RIGHT
            bullet.rect.topleft = (self.rect.x + self.width_frame - 20, y)
        bullet.x_val = BULLET_SPEED
        bullet.y_val = BULLET_SPEED
        bullet.is_move = True

    def handle_bullets(self, surface: pygame.Surface) -> None:
        """Move and draw live bullets; drop those that have stopped."""
        remaining = []
        for bullet in self.bullet_list:
            if bullet.is_move:
                bullet.handle_move(SCREEN_WIDTH, SCREEN_HEIGHT)
                bullet.render(surface)
                remaining.append(bullet)
        self.bullet_list = remaining

    def remove_bullet(self, idx: int) -> None:
        """Remove the bullet at idx; out-of-range indices are ignored."""
        if 0 <= idx < len(self.bullet_list):
            del self.bullet_list[idx]

    def do_player(self, map_data: TileMap) -> None:
        """Run one frame of physics, or count down the respawn delay."""
        if self.come_back_time == 0:
            self.x_val = 0.0
            self.y_val += GRAVITY_SPEED
            if self.y_val >= MAX_FALL_SPEED:
                self.y_val = MAX_FALL_SPEED
            if self.input.left == 1:
                self.x_val -= PLAYER_SPEED
            elif self.input.right:
                self.x_val += PLAYER_SPEED
            if self.input.jump == 1 and self.on_ground:
                self.y_val = -PLAYER_JUMP_VAL
                self.on_ground = False
            self.check_to_map(map_data)
            self.center_on_map(map_data)
        if self.come_back_time > 0:
            self.come_back_time -= 1
            if self.come_back_time == 0:
                self.on_ground = False
                self.y_pos = 0.0
                self.x_val = 0.0
                self.y_val = 0.0
                if self.x_pos > COME_BACK_STEP_BACK:
                    self.x_pos -= COME_BACK_STEP_BACK
                else:
                    self.x_pos = 0.0

    def _collect(self, tiles: list[list[int]], *cells: tuple[int, int]) -> None:
        for row, col in cells:
            tiles[row][col] = BLANK_TILE
        self.increase_money()
        self._play(COIN)

    def check_to_map(self, map_data: TileMap) -> None:
        """Resolve movement against solid tiles, collect coins and apply velocity."""
        tiles = map_data.tiles

        height_min = min(self.height_frame, TILE_SIZE)
        x1 = int((self.x_pos + self.x_val) / TILE_SIZE)
        x2 = int((self.x_pos + self.x_val + self.width_frame - 1) / TILE_SIZE)
        y1 = int(self.y_pos / TILE_SIZE)
        y2 = int((self.y_pos + height_min - 1) / TILE_SIZE)
        if _in_grid(x1, x2, y1, y2):
            if self.x_val > 0:
                val1, val2 = tiles[y1][x2], tiles[y2][x2]
                if STATE_MONEY in (val1, val2):
                    self._collect(tiles, (y1, x2), (y2, x2))
                elif val1 != BLANK_TILE or val2 != BLANK_TILE:
                    self.x_pos = x2 * TILE_SIZE - (self.width_frame + 1)
                    self.x_val = 0.0
            elif self.x_val < 0:
                val1, val2 = tiles[y1][x1], tiles[y2][x1]
                if STATE_MONEY in (val1, val2):
                    self._collect(tiles, (y1, x1), (y2, x1))
                if val1 != BLANK_TILE or val2 != BLANK_TILE:
                    self.x_pos = (x1 + 1) * TILE_SIZE
                    self.x_val = 0.0

        width_min = min(self.width_frame, TILE_SIZE)
        x1 = int(self.x_pos / TILE_SIZE)
        x2 = int((self.x_pos + width_min) / TILE_SIZE)
        y1 = int((self.y_pos + self.y_val) / TILE_SIZE)
        y2 = int((self.y_pos + self.y_val + self.height_frame - 1) / TILE_SIZE)
        if _in_grid(x1, x2, y1, y2):
            if self.y_val > 0:
                val1, val2 = tiles[y2][x1], tiles[y2][x2]
                if STATE_MONEY in (val1, val2):
                    self._collect(tiles, (y2, x1), (y2, x2))
                if val1 != BLANK_TILE or val2 != BLANK_TILE:
                    self.y_pos = y2 * TILE_SIZE - (self.height_frame + 1)
                    self.y_val = 0.0
                    self.on_ground = True
                    if self.status == WalkType.NONE:
                        self.status = WalkType.RIGHT
            elif self.y_val < 0:
                val1, val2 = tiles[y1][x1], tiles[y1][x2]
                if STATE_MONEY in (val1, val2):
                    self._collect(tiles, (y1, x1), (y1, x2))
                if val1 != BLANK_TILE or val2 != BLANK_TILE:
                    self.y_pos = (y1 + 1) * TILE_SIZE
                    self.y_val = 0.0

        self.x_pos += self.x_val
        self.y_pos += self.y_val

        if self.x_pos < 0:
            self.x_pos = 0.0
        elif self.x_pos + self.width_frame > map_data.max_x:
            self.x_pos = map_data.max_x - self.width_frame - 1
        if self.y_pos > map_data.max_y:
            self.come_back_time = COME_BACK_FRAMES

    def center_on_map(self, map_data: TileMap) -> None:
        """Scroll the map so the player sits in the middle of the screen."""
        map_data.start_x = int(self.x_pos - SCREEN_WIDTH // 2)
        if map_data.start_x < 0:
            map_data.start_x = 0
        elif map_data.start_x + SCREEN_WIDTH >= map_data.max_x:
            map_data.start_x = map_data.max_x - SCREEN_WIDTH

        map_data.start_y = int(self.y_pos - SCREEN_HEIGHT // 2)
        if map_data.start_y < 0:
            map_data.start_y = 0
        elif map_data.start_y + SCREEN_HEIGHT >= map_data.max_y:
            map_data.start_y = map_data.max_y - SCREEN_HEIGHT

    def update_image(self) -> None:
        """Pick the walking or jumping sheet facing the current direction."""
        facing = "left" if self.status == WalkType.LEFT else "right"
        prefix = "player" if self.on_ground else "jum"
        try:
            self.load_image(self.image_dir / f"{prefix}_{facing}.png")
        except ImageLoadError:
            pass

    def increase_money(self) -> None:
        self.money_count += 1