"""Tile map loading and drawing."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pygame

from tilerunner.basefunc import (
    MAX_MAP_X,
    MAX_MAP_Y,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TILE_SIZE,
    TileMap,
)
from tilerunner.sprite import Sprite

MAX_TILES = 20


def parse_map(text: str) -> TileMap:
    """Build a TileMap from whitespace-separated tile numbers, row by row.

    Missing values stay blank; extra values are ignored.
    """
    tile_map = TileMap()
    tokens = text.split()[: MAX_MAP_X * MAX_MAP_Y]
    last_col = 0
    last_row = 0
    for index, token in enumerate(tokens):
        try:
            value = int(token)
        except ValueError as exc:
            raise ValueError(f"invalid tile value {token!r}") from exc
        row, col = divmod(index, MAX_MAP_X)
        tile_map.tiles[row][col] = value
        if value > 0:
            last_col = max(last_col, col)
            last_row = max(last_row, row)
    tile_map.max_x = (last_col + 1) * TILE_SIZE
    tile_map.max_y = (last_row + 1) * TILE_SIZE
    return tile_map


class GameMap:
    """The level map and the tile images used to draw it."""

    def __init__(self) -> None:
        self.map_data = TileMap()
        self.tiles = [Sprite() for _ in range(MAX_TILES)]

    def load_map(self, path) -> None:
        """Read the map file at path."""
        text = Path(path).read_text()
        self.map_data = parse_map(text)
        self.map_data.file_name = str(path)

    def load_tiles(self, directory="map") -> None:
        """Load <n>.png for every tile number that has an image in directory."""
        base = Path(directory)
        for number, tile in enumerate(self.tiles):
            path = base / f"{number}.png"
            if path.is_file():
                tile.load_image(path)

    def visible_tiles(self) -> Iterator[tuple[int, int, int]]:
        """Yield (screen_x, screen_y, tile) for each non-blank tile on screen."""
        data = self.map_data
        x1 = -(data.start_x % TILE_SIZE)
        x2 = x1 + SCREEN_WIDTH + (0 if x1 == 0 else TILE_SIZE)
        y1 = -(data.start_y % TILE_SIZE)
        y2 = y1 + SCREEN_HEIGHT + (0 if y1 == 0 else TILE_SIZE)

        first_col = data.start_x // TILE_SIZE
        for map_y, screen_y in enumerate(range(y1, y2, TILE_SIZE), data.start_y // TILE_SIZE):
            if not 0 <= map_y < MAX_MAP_Y:
                continue
            row = data.tiles[map_y]
            for map_x, screen_x in enumerate(range(x1, x2, TILE_SIZE), first_col):
                if not 0 <= map_x < MAX_MAP_X:
                    continue
                value = row[map_x]
                if value > 0:
                    yield screen_x, screen_y, value

    def draw_map(self, surface: pygame.Surface) -> None:
        """Draw every visible tile onto surface."""
        for screen_x, screen_y, value in self.visible_tiles():
            if value >= MAX_TILES:
                continue
            tile = self.tiles[value]
            tile.rect.topleft = (screen_x, screen_y)
            tile.render(surface)