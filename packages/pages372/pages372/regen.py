"""Regeneration scheduler: click regen and per-upgrade passive income."""
from __future__ import annotations

import logging
from typing import Callable

from pages372.economy import EconomyConfig
from pages372.schedule import Scheduler, TimerHandle
from pages372.state import GameState
from pages372.types import ResourceKind

logger = logging.getLogger("pages372.regen")

CLICK_REGEN_TIMER = "click_regen"


def passive_timer_name(kind: ResourceKind) -> str:
    return f"passive:{ResourceKind(kind).value}"


class RegenerationScheduler:
    """Owns the click regen timer and at most one passive timer per kind."""

    def __init__(
        self,
        state: GameState,
        economy: EconomyConfig,
        scheduler: Scheduler,
        on_change: Callable[[], None],
    ) -> None:
        self._state = state
        self._economy = economy
        self._scheduler = scheduler
        self._on_change = on_change
        self._regen: TimerHandle | None = None
        self._passive: dict[ResourceKind, TimerHandle] = {}

    @property
    def state(self) -> GameState:
        return self._state

    @state.setter
    def state(self, state: GameState) -> None:
        self._state = state

    # --- Click regeneration ---

    def start_click_regen(self) -> TimerHandle:
        if self._regen is not None:
            self._scheduler.cancel(self._regen)
        self._regen = self._scheduler.every(
            CLICK_REGEN_TIMER, self._economy.regen_interval_ms, self._regen_tick
        )
        return self._regen

    def _regen_tick(self) -> None:
        self._state.add_clicks(self._economy.regen_per_tick)
        self._on_change()

    # --- Passive income ---

    def start_passive(self, kind: ResourceKind) -> TimerHandle | None:
        """(Re)start passive income for *kind*.

        Any existing timer for the kind is cancelled first. A new one is
        started only when the upgrade is passive and owned.
        """
        kind = ResourceKind(kind)
        previous = self._passive.pop(kind, None)
        if previous is not None:
            self._scheduler.cancel(previous)

        upgrade = self._economy.upgrade(kind)
        if not upgrade.is_passive or self._state.upgrade_levels[kind] < 1:
            return None

        assert upgrade.passive_interval_ms is not None
        handle = self._scheduler.every(
            passive_timer_name(kind),
            upgrade.passive_interval_ms,
            lambda: self._passive_tick(kind),
        )
        self._passive[kind] = handle
        logger.debug(
            "passive income for %s every %d ms (level %d)",
            kind.value, upgrade.passive_interval_ms, self._state.upgrade_levels[kind],
        )
        return handle

    def _passive_tick(self, kind: ResourceKind) -> None:
        upgrade = self._economy.upgrade(kind)
        assert upgrade.passive_rate is not None
        target = self._economy.passive_target(kind)
        self._state.resources[target] += upgrade.passive_rate * self._state.upgrade_levels[kind]
        self._on_change()

    def init_passive_generators(self) -> list[ResourceKind]:
        """Start timers for every owned passive upgrade. Returns the kinds."""
        started = []
        for kind in self._economy.passive_kinds():
            if self._state.upgrade_levels[kind] > 0:
                self.start_passive(kind)
                started.append(kind)
        return started

    def passive_handle(self, kind: ResourceKind) -> TimerHandle | None:
        return self._passive.get(ResourceKind(kind))

    def stop(self) -> None:
        if self._regen is not None:
            self._scheduler.cancel(self._regen)
            self._regen = None
        for handle in self._passive.values():
            self._scheduler.cancel(handle)
        self._passive.clear()
