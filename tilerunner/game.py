"""The game window and main loop."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Iterable

import pygame

from tilerunner.basefunc import (
    FRAME_PER_SECOND,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    ExplosionEffect,
)
from tilerunner.explosion import NUM_FRAME_EXP, ExplosionSprite
from tilerunner.gamemap import GameMap
from tilerunner.hud import LivesIndicator, MoneyIcon
from tilerunner.player import Player
from tilerunner.sound import MUSIC, SoundBank, SoundLoadError
from tilerunner.sprite import ImageLoadError, Sprite
from tilerunner.text import TextColor, TextLabel
from tilerunner.timer import FrameTimer

TIME_LIMIT_SECONDS = 300
EXPLOSION_FRAME_MS = 50
FONT_SIZE = 15
WINDOW_TITLE = "GAME"
GAME_OVER = "GAME OVER"


def remaining_time(ticks_ms: int) -> int:
    """Seconds left on the level clock after ticks_ms milliseconds."""
    return TIME_LIMIT_SECONDS - ticks_ms // 1000


def frame_delay(elapsed_ms: int) -> int:
    """Milliseconds to wait so that a frame lasts its full share of a second."""
    return max(0, 1000 // FRAME_PER_SECOND - elapsed_ms)


def format_time(seconds: int) -> str:
    return f"Time: {seconds}"


def format_mark(mark: int) -> str:
    return f"Mark: {mark}"


def update_explosions(
    effects: Iterable[ExplosionEffect],
    now: int,
    draw: Callable[[ExplosionEffect], None] | None = None,
) -> list[ExplosionEffect]:
    """Advance each explosion's frame, draw the running ones, return those not finished."""
    running = []
    for effect in effects:
        if now - effect.last_update_time >= EXPLOSION_FRAME_MS:
            effect.current_frame += 1
            effect.last_update_time = now
        if effect.current_frame < NUM_FRAME_EXP:
            if draw is not None:
                draw(effect)
            running.append(effect)
        else:
            effect.finished = True
    return running


def _parse_args(argv) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tilerunner", description="Side-scrolling tile game.")
    parser.add_argument(
        "--assets",
        default=".",
        help="directory holding the img, map, font and Sound folders",
    )
    return parser.parse_args(argv)


def _open_window(root: Path):
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)
    pygame.font.init()
    font = pygame.font.Font(str(root / "font" / "dlxfont_.ttf"), FONT_SIZE)
    return screen, font


def _play(root: Path, sounds: SoundBank, screen: pygame.Surface, font) -> int:
    img = root / "img"

    background = Sprite()
    try:
        background.load_image(img / "background.png")
    except ImageLoadError as exc:
        print(exc)
        return 1

    game_map = GameMap()
    try:
        game_map.load_map(root / "map" / "map01.dat")
    except OSError:
        pass
    game_map.load_tiles(root / "map")

    player = Player(img, sounds)
    try:
        player.load_image(img / "player_right.png")
    except ImageLoadError:
        pass
    player.set_clips()

    lives = LivesIndicator(img)
    lives.init()
    money_icon = MoneyIcon(img)
    money_icon.init()

    exp_sprite = ExplosionSprite()
    try:
        exp_sprite.load_image(img / "exp3.png")
    except ImageLoadError as exc:
        print(exc)
        return 1
    exp_sprite.set_clips()

    def draw_explosion(effect: ExplosionEffect) -> None:
        exp_sprite.frame = effect.current_frame
        exp_sprite.rect.topleft = (effect.x, effect.y)
        exp_sprite.show(screen)

    time_label = TextLabel()
    time_label.set_preset(TextColor.WHITE)
    mark_label = TextLabel()
    mark_label.set_preset(TextColor.WHITE)
    money_label = TextLabel()
    money_label.set_preset(TextColor.WHITE)
    mark_value = 0
    explosions: list[ExplosionEffect] = []

    fps_timer = FrameTimer()
    running = True
    while running:
        fps_timer.start()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            player.handle_input(event)

        screen.fill((255, 255, 255))
        background.render(screen)
        map_data = game_map.map_data

        player.handle_bullets(screen)
        player.map_x, player.map_y = map_data.start_x, map_data.start_y
        player.do_player(map_data)
        player.show(screen)

        game_map.draw_map(screen)
        lives.show(screen)
        money_icon.show(screen)

        explosions = update_explosions(explosions, pygame.time.get_ticks(), draw_explosion)

        seconds_left = remaining_time(pygame.time.get_ticks())
        if seconds_left <= 0:
            print(GAME_OVER)
            break
        time_label.text = format_time(seconds_left)
        time_label.render_text(font)
        time_label.draw(screen, SCREEN_WIDTH - 200, 15)

        mark_label.text = format_mark(mark_value)
        mark_label.render_text(font)
        mark_label.draw(screen, SCREEN_WIDTH // 2 - 50, 15)

        money_label.text = str(player.money_count)
        money_label.render_text(font)
        money_label.draw(screen, SCREEN_WIDTH // 2 - 250, 15)

        pygame.display.flip()

        delay = frame_delay(fps_timer.elapsed())
        if delay > 0:
            pygame.time.delay(delay)

    background.free()
    return 0


def _run(root: Path) -> int:
    try:
        pygame.mixer.init(44100, -16, 2, 2048)
    except pygame.error:
        pass
    sounds = SoundBank(root / "Sound")
    try:
        sounds.load()
    except SoundLoadError as exc:
        print(exc)
        return 1
    try:
        try:
            sounds.play(MUSIC)
        except pygame.error:
            pass
        try:
            screen, font = _open_window(root)
        except (pygame.error, OSError) as exc:
            print(exc)
            return 1
        return _play(root, sounds, screen, font)
    finally:
        sounds.close()


def main(argv=None) -> int:
    """Start the game; return the process exit status."""
    args = _parse_args(argv)
    try:
        return _run(Path(args.assets))
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())