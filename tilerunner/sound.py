"""Loading and playing the game's sound effects and music."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pygame

MUSIC = "music"
COIN = "coin"
EXPLOSION1 = "explosion1"
EXPLOSION2 = "explosion2"
SHOOT = "shoot"

MUSIC_FILE = "Action.mid"
SOUND_FILES = {
    COIN: "beep_.wav",
    EXPLOSION1: "Bomb2.wav",
    EXPLOSION2: "Explosion+1.wav",
    SHOOT: "Fire1.wav",
}


class SoundLoadError(Exception):
    """Raised when a sound or the music cannot be loaded."""


def _play_music_forever() -> None:
    pygame.mixer.music.play(-1)


class SoundBank:
    """The background music and the named sound effects."""

    def __init__(
        self,
        directory="Sound",
        *,
        sound_factory: Callable[[str], Any] | None = None,
        music_loader: Callable[[str], None] | None = None,
        music_player: Callable[[], None] | None = None,
        music_unloader: Callable[[], None] | None = None,
    ) -> None:
        self.directory = Path(directory)
        self._sound_factory = sound_factory or pygame.mixer.Sound
        self._music_loader = music_loader or pygame.mixer.music.load
        self._music_player = music_player or _play_music_forever
        self._music_unloader = music_unloader or pygame.mixer.music.unload
        self.sounds: dict[str, Any] = {}
        self.music_loaded = False

    def load(self) -> None:
        """Load the music, then every effect; raise SoundLoadError on the first failure."""
        try:
            self._music_loader(str(self.directory / MUSIC_FILE))
        except (pygame.error, OSError) as exc:
            raise SoundLoadError(f"Failed to load {MUSIC} sound: {exc}") from exc
        self.music_loaded = True
        for name, file_name in SOUND_FILES.items():
            try:
                self.sounds[name] = self._sound_factory(str(self.directory / file_name))
            except (pygame.error, OSError) as exc:
                raise SoundLoadError(f"Failed to load {name} sound: {exc}") from exc

    def close(self) -> None:
        """Release everything that was loaded."""
        self.sounds.clear()
        if self.music_loaded:
            self.music_loaded = False
            self._music_unloader()

    def play(self, name: str) -> bool:
        """Play a named effect once, or loop the music; False if it is not loaded."""
        if name == MUSIC:
            if not self.music_loaded:
                return False
            self._music_player()
            return True
        if name not in SOUND_FILES:
            raise KeyError(name)
        sound = self.sounds.get(name)
        if sound is None:
            return False
        sound.play()
        return True

    def __enter__(self) -> "SoundBank":
        self.load()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()