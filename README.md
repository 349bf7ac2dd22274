# tilerunner

A side-scrolling platform game played on a grid of 64-pixel tiles. Run and
jump across the level, pick up coins and fire shots before the 300-second
clock runs out.

## Installing

```
pip install .
```

The game needs pygame, which is installed along with it.

## Playing

```
tilerunner [--assets DIR]
```

`--assets` names the directory that holds the game's asset folders; it
defaults to the current directory. Inside it the game looks for:

- `img/` – sprite images: `background.png`, `player_left.png`,
  `player_right.png`, `jum_left.png`, `jum_right.png`, `sphere_bullet.png`,
  `laser_bullet.png`, `exp3.png`, `player_pw.png`, `money_img.png`
- `map/map01.dat` – the level, a whitespace-separated grid of tile numbers,
  10 rows of 400 columns; `0` is empty and `4` is a coin
- `map/<n>.png` – the image for tile number `n` (0 to 19)
- `font/dlxfont_.ttf` – the font for the on-screen counters
- `Sound/` – `Action.mid` (looped music), `beep_.wav`, `Bomb2.wav`,
  `Explosion+1.wav`, `Fire1.wav`

A missing sound, font, background or explosion image stops the game with a
message and exit status 1. A missing level file leaves the map empty.

Controls:

| Key / button      | Action |
|-------------------|--------|
| Left / Right      | walk   |
| Up                | jump   |
| Left mouse button | shoot  |

Walking into a coin tile removes it and adds one to the money counter shown
at the top of the screen. Falling below the bottom of the level hides the
player for ten frames, then puts them back at the top, 256 pixels further
left. When the timer reaches zero the game prints `GAME OVER` and ends.

## What the game does not do

The level has no enemies. Shots fly until they leave the screen but hit
nothing, so the mark counter stays at 0, and the three life icons are drawn
but are never lost. There is no pause, menu or saved progress.

## Using the pieces

The modules can be used on their own:

- `tilerunner.gamemap.parse_map(text)` turns level text into a
  `tilerunner.basefunc.TileMap`; `GameMap` loads, scrolls and draws one, and
  `GameMap.visible_tiles()` yields the on-screen tiles without drawing.
- `tilerunner.basefunc.check_collision(a, b)` tests two rectangles for
  overlap.
- `tilerunner.timer.FrameTimer` is a pausable millisecond stopwatch that
  accepts its own clock function.
- `tilerunner.player.Player` holds the movement, coin pickup and shooting
  rules; `tilerunner.bullet.Bullet` moves in one of eight `BulletDir`
  directions.
- `tilerunner.sound.SoundBank` loads and plays the music and effects and can
  be used as a context manager.
- `tilerunner.game` has `remaining_time`, `frame_delay` and
  `update_explosions`, the pieces of the main loop that need no window.

```python
from pathlib import Path

from tilerunner.basefunc import check_collision
from tilerunner.gamemap import parse_map

level = parse_map(Path("map/map01.dat").read_text())
print(level.max_x, level.max_y)
print(check_collision((0, 0, 10, 10), (5, 5, 10, 10)))  # True
```

## Running the tests

```
pip install ".[test]"
pytest
```