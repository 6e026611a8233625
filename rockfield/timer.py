"""Countdown counters and a frame timer."""

from __future__ import annotations

import time


class Counter:
    """Counts a time value down towards zero."""

    def __init__(self, time: float = 0.0):
        self.time = time

    def tick(self, seconds: float) -> None:
        """Subtract ``seconds`` while the remaining time is positive."""
        if self.time > 0.0:
            self.time -= seconds


def _ticks_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class Timer:
    """Accumulates game time and paces frames to a fixed tick length."""

    def __init__(self):
        self.start = _ticks_ms()
        self.end: int | None = None
        self.time = 0.0

    def reset(self) -> None:
        """Restart the frame measurement from now."""
        self.start = _ticks_ms()

    def tick(self, tick_time: float) -> None:
        """Advance the accumulated time by ``tick_time`` seconds."""
        self.time += tick_time

    def tick_and_delay(self, tick_time: float) -> None:
        """Sleep for what is left of ``tick_time`` since the start, then tick."""
        self.end = _ticks_ms()
        elapsed = self.end - self.start
        delay = 1000.0 * tick_time - elapsed
        if delay > 0.0:
            time.sleep(int(delay) / 1000.0)
        self.tick(tick_time)