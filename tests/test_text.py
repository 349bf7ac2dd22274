import pygame
import pytest

from tilerunner.text import TextColor, TextLabel


class FakeFont:
    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    def render(self, text, antialias, color):
        self.calls.append((text, antialias, color))
        if self.fail:
            raise pygame.error("cannot render")
        surface = pygame.Surface((max(1, len(text)) * 6, 10))
        surface.fill(color)
        return surface


def test_default_color_is_white():
    assert TextLabel().color == (255, 255, 255)


@pytest.mark.parametrize(
    "preset, expected",
    [
        (TextColor.RED, (255, 0, 0)),
        (TextColor.WHITE, (255, 255, 255)),
        (TextColor.BLACK, (0, 0, 0)),
    ],
)
def test_set_preset(preset, expected):
    label = TextLabel()
    label.set_preset(preset)
    assert label.color == expected


def test_set_preset_accepts_plain_int():
    label = TextLabel()
    label.set_preset(2)
    assert label.color == (0, 0, 0)


def test_set_preset_unknown_keeps_color():
    label = TextLabel()
    label.set_color(1, 2, 3)
    label.set_preset(99)
    assert label.color == (1, 2, 3)


def test_set_color():
    label = TextLabel()
    label.set_color(10, 20, 30)
    assert label.color == (10, 20, 30)


def test_render_text_uses_text_and_color():
    font = FakeFont()
    label = TextLabel("Mark: 3")
    label.set_preset(TextColor.RED)
    assert label.render_text(font) is True
    assert font.calls == [("Mark: 3", False, (255, 0, 0))]
    assert (label.width, label.height) == label.image.get_size()


def test_render_failure_without_previous_image():
    label = TextLabel("x")
    assert label.render_text(FakeFont(fail=True)) is False
    assert label.image is None


def test_render_failure_keeps_previous_image():
    label = TextLabel("x")
    label.render_text(FakeFont())
    first = label.image
    assert label.render_text(FakeFont(fail=True)) is True
    assert label.image is first


def test_draw_puts_pixels_at_position():
    label = TextLabel("ab")
    label.set_preset(TextColor.RED)
    label.render_text(FakeFont())
    screen = pygame.Surface((100, 50))
    screen.fill((0, 0, 0))
    label.draw(screen, 10, 5)
    assert tuple(screen.get_at((10, 5)))[:3] == (255, 0, 0)
    assert tuple(screen.get_at((9, 5)))[:3] == (0, 0, 0)
    assert tuple(screen.get_at((10 + label.width, 5)))[:3] == (0, 0, 0)


def test_draw_with_clip_limits_size():
    label = TextLabel("abcdef")
    label.set_preset(TextColor.RED)
    label.render_text(FakeFont())
    screen = pygame.Surface((100, 50))
    screen.fill((0, 0, 0))
    label.draw(screen, 0, 0, clip=(0, 0, 2, 2))
    assert tuple(screen.get_at((1, 1)))[:3] == (255, 0, 0)
    assert tuple(screen.get_at((2, 0)))[:3] == (0, 0, 0)
    assert tuple(screen.get_at((0, 2)))[:3] == (0, 0, 0)


def test_draw_without_image_leaves_surface_alone():
    screen = pygame.Surface((10, 10))
    screen.fill((0, 0, 0))
    TextLabel("x").draw(screen, 0, 0)
    assert tuple(screen.get_at((0, 0)))[:3] == (0, 0, 0)


def test_free_drops_image():
    label = TextLabel("x")
    label.render_text(FakeFont())
    label.free()
    assert label.image is None