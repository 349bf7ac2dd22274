import pygame
import pytest

from tilerunner.basefunc import (
    MAX_MAP_X,
    MAX_MAP_Y,
    ExplosionEffect,
    InputState,
    TileMap,
    check_collision,
)


def test_corner_of_small_rect_inside_large_one():
    assert check_collision(pygame.Rect(10, 10, 5, 5), pygame.Rect(0, 0, 100, 100))


def test_large_rect_containing_small_one():
    assert check_collision((0, 0, 100, 100), (10, 10, 5, 5))


def test_identical_rects_collide():
    assert check_collision((0, 0, 10, 10), (0, 0, 10, 10))


def test_same_top_right_bottom_collides():
    assert check_collision((0, 0, 10, 10), (5, 0, 5, 10))


def test_disjoint_rects_do_not_collide():
    assert not check_collision((0, 0, 10, 10), (50, 50, 10, 10))


def test_touching_edges_do_not_collide():
    assert not check_collision((0, 0, 10, 10), (10, 0, 10, 10))


def test_crossing_bars_without_inner_corner_do_not_collide():
    assert not check_collision((0, 10, 100, 10), (40, 0, 10, 100))


@pytest.mark.parametrize(
    "a, b",
    [((0, 0, 10, 10), (5, 5, 10, 10)), ((3, 3, 4, 4), (0, 0, 20, 20))],
)
def test_collision_is_symmetric_for_overlaps(a, b):
    assert check_collision(a, b) == check_collision(b, a)


def test_tile_map_default_grid_is_blank():
    tile_map = TileMap()
    assert len(tile_map.tiles) == MAX_MAP_Y
    assert all(len(row) == MAX_MAP_X for row in tile_map.tiles)
    assert all(v == 0 for row in tile_map.tiles for v in row)


def test_tile_map_rows_are_independent():
    tile_map = TileMap()
    tile_map.tiles[0][0] = 4
    assert tile_map.tiles[1][0] == 0


def test_input_state_defaults_to_released():
    state = InputState()
    assert (state.left, state.right, state.up, state.down, state.jump) == (0, 0, 0, 0, 0)


def test_explosion_effect_starts_unfinished():
    effect = ExplosionEffect(x=3, y=4)
    assert effect.current_frame == 0
    assert effect.finished is False