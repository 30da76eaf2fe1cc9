"""Countdown timer driven by frame updates."""

from __future__ import annotations


class GameTimer:
    """Accumulates elapsed milliseconds until a duration is reached."""

    def __init__(self, duration: float) -> None:
        self.duration = duration
        self._elapsed = 0.0
        self._is_running = False

    def start(self) -> None:
        self._is_running = True
        self._elapsed = 0.0

    def reset(self, is_running: bool = False) -> None:
        self._is_running = is_running
        self._elapsed = 0.0

    def update(self, dt: float) -> bool:
        """Advance by dt; return True and reset when the duration is reached."""
        self._elapsed += dt
        finished = self.did_finish
        if finished:
            self.reset()
        return finished

    @property
    def did_finish(self) -> bool:
        return self._elapsed >= self.duration

    @property
    def elapsed_time(self) -> float:
        return self._elapsed

    @property
    def is_running(self) -> bool:
        return self._is_running