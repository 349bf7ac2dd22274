from pathlib import Path

import pygame
import pytest

from tilerunner.sound import (
    COIN,
    MUSIC,
    SHOOT,
    SOUND_FILES,
    SoundBank,
    SoundLoadError,
)


class FakeSound:
    def __init__(self, path):
        self.path = path
        self.plays = 0

    def play(self):
        self.plays += 1


class Recorder:
    def __init__(self):
        self.music_paths = []
        self.music_plays = 0
        self.unloads = 0

    def load_music(self, path):
        self.music_paths.append(path)

    def play_music(self):
        self.music_plays += 1

    def unload_music(self):
        self.unloads += 1


def _bank(recorder, factory=FakeSound, directory="Sound"):
    return SoundBank(
        directory,
        sound_factory=factory,
        music_loader=recorder.load_music,
        music_player=recorder.play_music,
        music_unloader=recorder.unload_music,
    )


def test_load_uses_source_file_names():
    recorder = Recorder()
    bank = _bank(recorder)
    bank.load()
    assert recorder.music_paths == [str(Path("Sound") / "Action.mid")]
    assert bank.sounds[COIN].path == str(Path("Sound") / "beep_.wav")
    assert set(bank.sounds) == set(SOUND_FILES)


def test_failing_effect_raises():
    recorder = Recorder()

    def broken(path):
        raise pygame.error("no such file")

    bank = _bank(recorder, factory=broken)
    with pytest.raises(SoundLoadError):
        bank.load()
    assert bank.sounds == {}


def test_failing_music_raises():
    def broken_music(path):
        raise FileNotFoundError(path)

    bank = SoundBank(sound_factory=FakeSound, music_loader=broken_music)
    with pytest.raises(SoundLoadError):
        bank.load()
    assert bank.music_loaded is False


def test_play_effect():
    recorder = Recorder()
    bank = _bank(recorder)
    bank.load()
    assert bank.play(SHOOT) is True
    assert bank.sounds[SHOOT].plays == 1


def test_play_music():
    recorder = Recorder()
    bank = _bank(recorder)
    bank.load()
    assert bank.play(MUSIC) is True
    assert recorder.music_plays == 1


def test_play_before_load_does_nothing():
    recorder = Recorder()
    bank = _bank(recorder)
    assert bank.play(COIN) is False
    assert bank.play(MUSIC) is False
    assert recorder.music_plays == 0


def test_play_unknown_name_raises():
    bank = _bank(Recorder())
    with pytest.raises(KeyError):
        bank.play("trumpet")


def test_context_manager_closes():
    recorder = Recorder()
    with _bank(recorder) as bank:
        assert bank.music_loaded is True
    assert bank.sounds == {}
    assert bank.music_loaded is False
    assert recorder.unloads == 1


def test_close_twice_unloads_once():
    recorder = Recorder()
    bank = _bank(recorder)
    bank.load()
    bank.close()
    bank.close()
    assert recorder.unloads == 1