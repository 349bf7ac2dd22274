"""A pausable millisecond timer used to cap the frame rate."""

from __future__ import annotations

import time
from typing import Callable

_EPOCH = time.monotonic()


def _ticks() -> int:
    return int((time.monotonic() - _EPOCH) * 1000)


class FrameTimer:
    """Measures elapsed milliseconds and can be paused and resumed."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _ticks
        self._start_tick = 0
        self._paused_tick = 0
        self._is_paused = False
        self._is_started = False

    @property
    def is_started(self) -> bool:
        return self._is_started

    @property
    def is_paused(self) -> bool:
        return self._is_paused

    def start(self) -> None:
        self._is_started = True
        self._is_paused = False
        self._start_tick = self._clock()

    def stop(self) -> None:
        self._is_paused = True
        self._is_started = False

    def pause(self) -> None:
        if self._is_started and not self._is_paused:
            self._is_paused = True
            self._paused_tick = self._clock() - self._start_tick

    def unpause(self) -> None:
        if self._is_paused:
            self._is_paused = False
            self._start_tick = self._clock() - self._paused_tick
            self._paused_tick = 0

    def elapsed(self) -> int:
        """Milliseconds since start, excluding paused time; 0 when not started."""
        if not self._is_started:
            return 0
        if self._is_paused:
            return self._paused_tick
        return self._clock() - self._start_tick