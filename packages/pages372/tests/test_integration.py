"""End-to-end scenarios across persistence, timers, and handlers."""
from __future__ import annotations

import json

from pages372 import DEFAULT_ECONOMY, GameState, MemoryStorage, ResourceKind, Session
from pages372.persistence import DEFAULT_SAVE_KEY

T0 = 1_700_000_000_000


class FakeNow:
    def __init__(self, value: int = T0) -> None:
        self.value = value

    def __call__(self) -> int:
        return self.value


class TestAwayAndBack:
    def test_passive_income_and_regen_survive_restart(self) -> None:
        store = MemoryStorage()
        seed = GameState.fresh(DEFAULT_ECONOMY, T0)
        seed.currency = 125
        store.put(DEFAULT_SAVE_KEY, json.dumps(seed.snapshot()))

        now = FakeNow()
        session = Session(store, now=now)
        session.start()
        assert session.on_buy_upgrade(ResourceKind.ARMADA)
        assert session.on_buy_upgrade(ResourceKind.UGLYLOVE)
        for _ in range(50):
            session.on_read(ResourceKind.RP1)
        session.advance_ms(10000)
        assert session.state.resources[ResourceKind.ARMADA] == 2
        assert session.state.resources[ResourceKind.UGLYLOVE] == 1
        assert session.state.clicks == 322 + 2
        session.stop()

        # Away for 20 s: clicks come back, passive income does not accrue offline.
        now.value += 20000
        resumed = Session(store, now=now)
        state = resumed.start()
        assert state.clicks == 324 + 5
        assert state.resources[ResourceKind.ARMADA] == 2
        assert state.upgrade_levels[ResourceKind.UGLYLOVE] == 1
        resumed.advance_ms(5000)
        assert resumed.state.resources[ResourceKind.ARMADA] == 3


class TestSpendDown:
    def test_reading_until_empty_then_regen(self) -> None:
        session = Session(MemoryStorage(), now=FakeNow())
        session.start()
        for _ in range(372):
            assert session.on_read(ResourceKind.EYEOFARGON)
        assert session.state.clicks == 0
        assert not session.on_read(ResourceKind.EYEOFARGON)
        assert session.state.resources[ResourceKind.EYEOFARGON] == 372

        session.advance_ms(4000)
        assert session.state.clicks == 1
        assert session.on_read(ResourceKind.EYEOFARGON)
        assert session.state.clicks == 0
