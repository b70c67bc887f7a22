"""Tick counter and wall-clock source."""

import time
from typing import Callable

from pages372.types import TickContext


class Clock:
    """Counts fixed ``tick_ms`` steps. Tick 1 is the first tick run."""

    def __init__(self, tick_ms: int) -> None:
        if tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        self._tick_ms = tick_ms
        self._tick_number = 0

    @property
    def tick_ms(self) -> int:
        return self._tick_ms

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt_ms=self._tick_ms,
            elapsed_ms=self._tick_number * self._tick_ms,
            request_stop=stop_fn,
        )


def wall_clock_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)
