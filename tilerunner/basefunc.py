"""Shared game constants, plain data records and rectangle collision."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

FRAME_PER_SECOND = 50

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 640
SCREEN_BPP = 32

COLOR_KEY = (167, 175, 180)

STATE_MONEY = 4
BLANK_TILE = 0

TILE_SIZE = 64
MAX_MAP_X = 400
MAX_MAP_Y = 10


@dataclass
class InputState:
    """Which movement keys are currently held."""

    left: int = 0
    right: int = 0
    up: int = 0
    down: int = 0
    jump: int = 0


def _empty_tiles() -> list[list[int]]:
    return [[BLANK_TILE] * MAX_MAP_X for _ in range(MAX_MAP_Y)]


@dataclass
class TileMap:
    """A tile grid together with its scroll position and pixel extent."""

    start_x: int = 0
    start_y: int = 0
    max_x: int = 0
    max_y: int = 0
    tiles: list[list[int]] = field(default_factory=_empty_tiles)
    file_name: str | None = None


@dataclass
class ExplosionEffect:
    """One running explosion animation."""

    x: int
    y: int
    current_frame: int = 0
    last_update_time: int = 0
    finished: bool = False


def check_collision(object1, object2) -> bool:
    """Return True when a corner of one rectangle lies strictly inside the other,
    or when both share the same top, right and bottom edges."""
    a = pygame.Rect(object1)
    b = pygame.Rect(object2)

    def corner_inside(xs, ys, outer: pygame.Rect) -> bool:
        return any(
            outer.left < x < outer.right and outer.top < y < outer.bottom
            for x in xs
            for y in ys
        )

    if corner_inside((a.left, a.right), (a.top, a.bottom), b):
        return True
    if corner_inside((b.left, b.right), (b.top, b.bottom), a):
        return True
    return a.top == b.top and a.right == b.right and a.bottom == b.bottom