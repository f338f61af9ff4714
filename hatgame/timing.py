"""Game timers measured in float seconds."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

_MAX_TIMES_FINISHED = 2**32 - 1


@dataclass
class Stopwatch:
    """Accumulates elapsed time."""

    elapsed: float = 0.0

    def tick(self, delta: float) -> None:
        self.elapsed += delta

    def reset(self) -> None:
        self.elapsed = 0.0


class TimerMode(Enum):
    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """Counts up to a duration, either once or repeatedly."""

    def __init__(self, duration: float, mode: TimerMode = TimerMode.ONCE) -> None:
        if duration < 0:
            raise ValueError("timer duration must not be negative")
        self._duration = float(duration)
        self.mode = mode
        self._stopwatch = Stopwatch()
        self._finished = False
        self._times_finished_this_tick = 0

    def __repr__(self) -> str:
        return (
            f"Timer(duration={self._duration!r}, elapsed={self.elapsed!r}, "
            f"mode={self.mode})"
        )

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def elapsed(self) -> float:
        return self._stopwatch.elapsed

    @property
    def times_finished_this_tick(self) -> int:
        return self._times_finished_this_tick

    def tick(self, delta: float) -> None:
        """Advance the timer by ``delta`` seconds."""
        if delta < 0:
            raise ValueError("delta must not be negative")

        if self._finished:
            if self.mode is TimerMode.REPEATING:
                self._finished = False
                self._times_finished_this_tick = 0
            else:
                self._times_finished_this_tick = 0
                return

        self._stopwatch.tick(delta)
        self._finished = self.elapsed >= self._duration

        if not self._finished:
            self._times_finished_this_tick = 0
        elif self.mode is TimerMode.REPEATING:
            if self._duration > 0:
                self._times_finished_this_tick = int(self.elapsed // self._duration)
                self._stopwatch.elapsed = math.fmod(self.elapsed, self._duration)
            else:
                self._times_finished_this_tick = _MAX_TIMES_FINISHED
                self._stopwatch.elapsed = 0.0
        else:
            self._times_finished_this_tick = 1
            self._stopwatch.elapsed = self._duration

    def reset(self) -> None:
        self._stopwatch.reset()
        self._finished = False
        self._times_finished_this_tick = 0

    def set_duration(self, duration: float) -> None:
        if duration < 0:
            raise ValueError("timer duration must not be negative")
        self._duration = float(duration)

    def set_elapsed(self, elapsed: float) -> None:
        self._stopwatch.elapsed = float(elapsed)

    def finished(self) -> bool:
        return self._finished

    def just_finished(self) -> bool:
        return self._times_finished_this_tick > 0