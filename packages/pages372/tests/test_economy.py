"""Tests for EconomyConfig, ConversionRate, and UpgradeDef."""
from __future__ import annotations

import pytest
from pages372 import DEFAULT_ECONOMY, ConversionRate, EconomyConfig, ResourceKind, UpgradeDef

RP1 = ResourceKind.RP1
ARMADA = ResourceKind.ARMADA
EYE = ResourceKind.EYEOFARGON
UGLY = ResourceKind.UGLYLOVE


class TestReferenceEconomy:
    def test_click_parameters(self) -> None:
        assert DEFAULT_ECONOMY.max_clicks == 372
        assert DEFAULT_ECONOMY.regen_interval_ms == 4000
        assert DEFAULT_ECONOMY.regen_per_tick == 1

    def test_base_rates_are_one(self) -> None:
        assert all(rate == 1 for rate in DEFAULT_ECONOMY.base_rate.values())

    def test_conversion_costs(self) -> None:
        costs = {k: c.cost for k, c in DEFAULT_ECONOMY.conversion.items()}
        assert costs == {RP1: 10, ARMADA: 15, EYE: 5, UGLY: 20}
        assert all(c.output == 1 for c in DEFAULT_ECONOMY.conversion.values())

    def test_click_boost_upgrades(self) -> None:
        assert DEFAULT_ECONOMY.upgrade(RP1) == UpgradeDef(cost=10, effect=1)
        assert DEFAULT_ECONOMY.upgrade(EYE) == UpgradeDef(cost=15, effect=1)
        assert not DEFAULT_ECONOMY.upgrade(RP1).is_passive

    def test_passive_upgrades(self) -> None:
        armada = DEFAULT_ECONOMY.upgrade(ARMADA)
        ugly = DEFAULT_ECONOMY.upgrade(UGLY)
        assert (armada.cost, armada.passive_rate, armada.passive_interval_ms) == (50, 1, 5000)
        assert (ugly.cost, ugly.passive_rate, ugly.passive_interval_ms) == (75, 1, 10000)
        assert armada.effect is None
        assert DEFAULT_ECONOMY.passive_kinds() == [ARMADA, UGLY]

    def test_upgrade_accepts_plain_string(self) -> None:
        assert DEFAULT_ECONOMY.upgrade("armada") is DEFAULT_ECONOMY.upgrades[ARMADA]

    def test_passive_target_defaults_to_own_kind(self) -> None:
        assert DEFAULT_ECONOMY.passive_target(ARMADA) is ARMADA


class TestValidation:
    def test_conversion_cost_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="cost must be >= 1"):
            ConversionRate(cost=0)

    def test_upgrade_passive_fields_come_together(self) -> None:
        with pytest.raises(ValueError, match="must be set together"):
            UpgradeDef(cost=5, passive_rate=1)

    def test_upgrade_interval_positive(self) -> None:
        with pytest.raises(ValueError, match="passive_interval_ms must be >= 1"):
            UpgradeDef(cost=5, passive_rate=1, passive_interval_ms=0)

    def test_upgrade_target_coerced(self) -> None:
        up = UpgradeDef(cost=5, passive_rate=1, passive_interval_ms=10, target="rp1")
        assert up.target is RP1

    def test_max_clicks_positive(self) -> None:
        with pytest.raises(ValueError, match="max_clicks"):
            EconomyConfig(max_clicks=0)

    def test_every_kind_required(self) -> None:
        with pytest.raises(ValueError, match="missing kinds: uglylove"):
            EconomyConfig(base_rate={RP1: 1, ARMADA: 1, EYE: 1})

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValueError):
            EconomyConfig.from_dict({"base_rate": {"dune": 3}})

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_ECONOMY.max_clicks = 10  # type: ignore[misc]


class TestFromDict:
    def test_empty_dict_is_reference(self) -> None:
        assert EconomyConfig.from_dict({}) == DEFAULT_ECONOMY

    def test_partial_override(self) -> None:
        econ = EconomyConfig.from_dict({
            "max_clicks": 10,
            "conversion": {"rp1": {"cost": 2, "output": 3}},
            "upgrades": {"armada": {"cost": 1, "passive_rate": 2, "passive_interval_ms": 100}},
        })
        assert econ.max_clicks == 10
        assert econ.conversion[RP1] == ConversionRate(cost=2, output=3)
        assert econ.conversion[ARMADA] == DEFAULT_ECONOMY.conversion[ARMADA]
        assert econ.upgrade(ARMADA).passive_rate == 2
        assert econ.regen_interval_ms == 4000

    def test_round_trip_through_dict(self) -> None:
        econ = EconomyConfig.from_dict({
            "upgrades": {"uglylove": {"cost": 3, "passive_rate": 1,
                                      "passive_interval_ms": 50, "target": "rp1"}},
        })
        data = econ.to_dict()
        assert data["upgrades"]["uglylove"]["target"] == "rp1"
        assert EconomyConfig.from_dict(data) == econ
