"""Recurring timers with explicit cancellable handles."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from pages372.types import TickContext


@dataclass(eq=False)
class TimerHandle:
    """Recurring timer. Fires every ``interval_ms``, never auto-cancels."""

    name: str
    interval_ms: int
    callback: Callable[[], None]
    elapsed_ms: int = 0
    cancelled: bool = False

    @property
    def active(self) -> bool:
        return not self.cancelled


class Scheduler:
    """Owns every live TimerHandle and advances them in start order."""

    def __init__(self) -> None:
        self._handles: list[TimerHandle] = []

    def every(
        self, name: str, interval_ms: int, callback: Callable[[], None]
    ) -> TimerHandle:
        """Start a recurring timer. The first fire is one full interval away."""
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        handle = TimerHandle(name=name, interval_ms=interval_ms, callback=callback)
        self._handles.append(handle)
        return handle

    def cancel(self, handle: TimerHandle) -> None:
        """Stop *handle*. Safe to call twice or from inside a callback."""
        handle.cancelled = True
        try:
            self._handles.remove(handle)
        except ValueError:
            pass

    def cancel_all(self) -> None:
        for handle in list(self._handles):
            self.cancel(handle)

    def active(self, name: str | None = None) -> list[TimerHandle]:
        """Live handles, optionally only those called *name*."""
        if name is None:
            return list(self._handles)
        return [h for h in self._handles if h.name == name]

    def advance(self, dt_ms: int) -> int:
        """Move every timer forward by *dt_ms*. Returns the number of fires.

        A timer whose interval fits several times into *dt_ms* fires that
        many times. Timers started by a callback begin counting on the next
        advance.
        """
        if dt_ms < 0:
            raise ValueError(f"dt_ms must be >= 0, got {dt_ms}")
        fired = 0
        for handle in list(self._handles):
            if handle.cancelled:
                continue
            handle.elapsed_ms += dt_ms
            while handle.elapsed_ms >= handle.interval_ms and not handle.cancelled:
                handle.elapsed_ms -= handle.interval_ms
                handle.callback()
                fired += 1
        return fired


def make_timer_system(scheduler: Scheduler) -> Callable[[TickContext], None]:
    """Return a system that advances *scheduler* by each tick's dt."""

    def timer_system(ctx: TickContext) -> None:
        scheduler.advance(ctx.dt_ms)

    return timer_system
