"""Tests for GameState bounds, serialization, and views."""
from __future__ import annotations

import pytest
from pages372 import (
    ALL_KINDS,
    DEFAULT_ECONOMY,
    EconomyConfig,
    GameState,
    ResourceKind,
    SaveFormatError,
)

NOW = 1_700_000_000_000


def _fresh() -> GameState:
    return GameState.fresh(DEFAULT_ECONOMY, NOW)


class TestFresh:
    def test_full_clicks_and_zero_everything(self) -> None:
        state = _fresh()
        assert state.clicks == 372
        assert state.max_clicks == 372
        assert state.currency == 0
        assert state.resources == {k: 0 for k in ALL_KINDS}
        assert state.upgrade_levels == {k: 0 for k in ALL_KINDS}
        assert state.last_update_time == NOW

    def test_instances_do_not_share_dicts(self) -> None:
        a, b = _fresh(), _fresh()
        a.resources[ResourceKind.RP1] = 5
        assert b.resources[ResourceKind.RP1] == 0


class TestClickBounds:
    def test_add_clamps_at_cap(self) -> None:
        state = _fresh()
        state.clicks = 370
        assert state.add_clicks(5) == 2
        assert state.clicks == 372

    def test_add_at_cap_is_noop(self) -> None:
        state = _fresh()
        assert state.add_clicks(1) == 0
        assert state.clicks == 372

    def test_negative_add_clamps_at_zero(self) -> None:
        state = _fresh()
        state.clicks = 2
        state.add_clicks(-10)
        assert state.clicks == 0

    def test_spend_click(self) -> None:
        state = _fresh()
        state.clicks = 1
        assert state.spend_click() is True
        assert state.clicks == 0
        assert state.spend_click() is False
        assert state.clicks == 0

    def test_clamp_clicks(self) -> None:
        state = _fresh()
        state.clicks = 999
        state.clamp_clicks()
        assert state.clicks == 372
        state.clicks = -4
        state.clamp_clicks()
        assert state.clicks == 0


class TestSnapshot:
    def test_record_layout(self) -> None:
        state = _fresh()
        state.clicks = 100
        state.currency = 7
        state.resources[ResourceKind.ARMADA] = 12
        state.upgrade_levels[ResourceKind.RP1] = 3
        assert state.snapshot() == {
            "clicks": 100,
            "currency": 7,
            "resources": {"rp1": 0, "armada": 12, "eyeofargon": 0, "uglylove": 0},
            "upgradeLevels": {"rp1": 3, "armada": 0, "eyeofargon": 0, "uglylove": 0},
            "lastUpdateTime": NOW,
        }

    def test_restore_matches_snapshot(self) -> None:
        state = _fresh()
        state.clicks = 42
        state.currency = 9
        state.resources[ResourceKind.UGLYLOVE] = 4
        state.upgrade_levels[ResourceKind.ARMADA] = 2
        restored = GameState.restore(state.snapshot(), DEFAULT_ECONOMY, NOW + 5)
        assert restored == state


class TestRestoreCompatibility:
    def test_missing_fields_use_defaults(self) -> None:
        state = GameState.restore({}, DEFAULT_ECONOMY, NOW)
        assert state.clicks == 372
        assert state.currency == 0
        assert state.resources[ResourceKind.RP1] == 0
        assert state.last_update_time == NOW

    def test_missing_timestamp_is_now(self) -> None:
        state = GameState.restore({"clicks": 3}, DEFAULT_ECONOMY, NOW)
        assert state.last_update_time == NOW

    def test_legacy_keys(self) -> None:
        state = GameState.restore(
            {"currentClicks": 12, "total372Pages": 30, "lastUpdateTime": NOW},
            DEFAULT_ECONOMY,
            NOW,
        )
        assert state.clicks == 12
        assert state.currency == 30

    def test_unknown_keys_ignored(self) -> None:
        state = GameState.restore(
            {"clicks": 5, "baseRates": {"rp1": 99}, "resources": {"rp1": 2, "dune": 8}},
            DEFAULT_ECONOMY,
            NOW,
        )
        assert state.clicks == 5
        assert state.resources[ResourceKind.RP1] == 2

    def test_whole_floats_accepted(self) -> None:
        state = GameState.restore({"currency": 4.0}, DEFAULT_ECONOMY, NOW)
        assert state.currency == 4

    def test_out_of_range_clicks_kept_for_clamping(self) -> None:
        state = GameState.restore({"clicks": -3}, DEFAULT_ECONOMY, NOW)
        assert state.clicks == -3


class TestRestoreRejects:
    @pytest.mark.parametrize("data", [
        [],
        "save",
        {"clicks": "many"},
        {"currency": -1},
        {"currency": True},
        {"currency": 1.5},
        {"resources": [1, 2, 3]},
        {"resources": {"rp1": -2}},
        {"upgradeLevels": {"armada": None}},
    ])
    def test_malformed_record(self, data) -> None:
        with pytest.raises(SaveFormatError):
            GameState.restore(data, DEFAULT_ECONOMY, NOW)

    def test_save_format_error_is_value_error(self) -> None:
        assert issubclass(SaveFormatError, ValueError)


class TestView:
    def test_button_states(self) -> None:
        state = _fresh()
        state.resources[ResourceKind.EYEOFARGON] = 5
        state.resources[ResourceKind.RP1] = 9
        state.currency = 15
        view = state.view(DEFAULT_ECONOMY)
        assert view.can_read is True
        assert view.can_convert[ResourceKind.EYEOFARGON] is True
        assert view.can_convert[ResourceKind.RP1] is False
        assert view.can_buy[ResourceKind.RP1] is True
        assert view.can_buy[ResourceKind.EYEOFARGON] is True
        assert view.can_buy[ResourceKind.ARMADA] is False

    def test_cannot_read_without_clicks(self) -> None:
        state = _fresh()
        state.clicks = 0
        assert state.view(DEFAULT_ECONOMY).can_read is False

    def test_view_is_a_copy(self) -> None:
        state = _fresh()
        view = state.view(DEFAULT_ECONOMY)
        state.resources[ResourceKind.RP1] = 50
        assert view.resources[ResourceKind.RP1] == 0

    def test_view_uses_given_economy(self) -> None:
        cheap = EconomyConfig.from_dict({"conversion": {"rp1": {"cost": 1}}})
        state = _fresh()
        state.resources[ResourceKind.RP1] = 1
        assert state.view(cheap).can_convert[ResourceKind.RP1] is True
        assert state.view(DEFAULT_ECONOMY).can_convert[ResourceKind.RP1] is False
