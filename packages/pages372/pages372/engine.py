"""Engine - cooperative single-threaded loop with wall-clock pacing."""

import time

from pages372.clock import Clock
from pages372.types import System


class Engine:
    """Runs every system once per tick, in registration order.

    A system asking to stop ends the current tick early; the remaining
    systems of that tick are skipped.
    """

    def __init__(self, tick_ms: int = 100) -> None:
        self._clock = Clock(tick_ms)
        self._systems: list[System] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self.request_stop)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def advance_ms(self, ms: int) -> int:
        """Step as many whole ticks as fit in *ms*. Returns ticks run."""
        ticks = ms // self._clock.tick_ms
        for _ in range(ticks):
            self.step()
        return ticks

    def run(self, n: int) -> int:
        """Run up to *n* ticks back to back. Returns ticks actually run."""
        self._stop_requested = False
        ran = 0
        while ran < n and not self._stop_requested:
            self._tick()
            ran += 1
        return ran

    def run_forever(self) -> None:
        """Tick at the clock's rate until a stop is requested."""
        self._stop_requested = False
        period = self._clock.tick_ms / 1000.0
        deadline = time.monotonic()
        while not self._stop_requested:
            self._tick()
            deadline += period
            delay = deadline - time.monotonic()
            if delay > 0:
                time.sleep(delay)
            else:
                # Fell behind; resync instead of bursting to catch up.
                deadline = time.monotonic()
