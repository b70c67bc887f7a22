"""Economy model: fixed rates, conversion costs, and upgrade definitions."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar

from pages372.types import ALL_KINDS, ResourceKind

T = TypeVar("T")


@dataclass(frozen=True)
class ConversionRate:
    """Resource units consumed per batch of currency produced.

    Attributes:
        cost: Resource units removed by one conversion.
        output: "372 Pages" added by one conversion.
    """

    cost: int
    output: int = 1

    def __post_init__(self) -> None:
        if self.cost < 1:
            raise ValueError(f"cost must be >= 1, got {self.cost}")
        if self.output < 1:
            raise ValueError(f"output must be >= 1, got {self.output}")


@dataclass(frozen=True)
class UpgradeDef:
    """Immutable upgrade definition.

    Attributes:
        cost: Currency spent to raise the level by one.
        effect: Extra yield per read, per level (None for no click boost).
        passive_rate: Resource units granted per level on each passive tick.
        passive_interval_ms: Milliseconds between passive ticks.
        target: Resource credited by passive income (None for the upgrade's
            own kind).
    """

    cost: int
    effect: int | None = None
    passive_rate: int | None = None
    passive_interval_ms: int | None = None
    target: ResourceKind | None = None

    def __post_init__(self) -> None:
        if self.cost < 1:
            raise ValueError(f"cost must be >= 1, got {self.cost}")
        if self.effect is not None and self.effect < 0:
            raise ValueError(f"effect must be >= 0, got {self.effect}")
        if (self.passive_rate is None) != (self.passive_interval_ms is None):
            raise ValueError(
                "passive_rate and passive_interval_ms must be set together"
            )
        if self.passive_rate is not None and self.passive_rate < 1:
            raise ValueError(f"passive_rate must be >= 1, got {self.passive_rate}")
        if self.passive_interval_ms is not None and self.passive_interval_ms < 1:
            raise ValueError(
                f"passive_interval_ms must be >= 1, got {self.passive_interval_ms}"
            )
        if self.target is not None and not isinstance(self.target, ResourceKind):
            object.__setattr__(self, "target", ResourceKind(self.target))

    @property
    def is_passive(self) -> bool:
        return self.passive_rate is not None and self.passive_interval_ms is not None


def _per_kind(values: dict[Any, Any], label: str) -> dict[ResourceKind, Any]:
    out = {ResourceKind(k): v for k, v in values.items()}
    missing = [k.value for k in ALL_KINDS if k not in out]
    if missing:
        raise ValueError(f"{label} missing kinds: {', '.join(missing)}")
    return out


@dataclass(frozen=True)
class EconomyConfig:
    """All numeric parameters of the game. Never mutated after startup."""

    max_clicks: int = 372
    regen_interval_ms: int = 4000
    regen_per_tick: int = 1
    base_rate: dict[ResourceKind, int] = field(default_factory=lambda: {
        ResourceKind.RP1: 1,
        ResourceKind.ARMADA: 1,
        ResourceKind.EYEOFARGON: 1,
        ResourceKind.UGLYLOVE: 1,
    })
    conversion: dict[ResourceKind, ConversionRate] = field(default_factory=lambda: {
        ResourceKind.RP1: ConversionRate(cost=10, output=1),
        ResourceKind.ARMADA: ConversionRate(cost=15, output=1),
        ResourceKind.EYEOFARGON: ConversionRate(cost=5, output=1),
        ResourceKind.UGLYLOVE: ConversionRate(cost=20, output=1),
    })
    upgrades: dict[ResourceKind, UpgradeDef] = field(default_factory=lambda: {
        ResourceKind.RP1: UpgradeDef(cost=10, effect=1),
        ResourceKind.ARMADA: UpgradeDef(
            cost=50, passive_rate=1, passive_interval_ms=5000
        ),
        ResourceKind.EYEOFARGON: UpgradeDef(cost=15, effect=1),
        ResourceKind.UGLYLOVE: UpgradeDef(
            cost=75, passive_rate=1, passive_interval_ms=10000
        ),
    })

    def __post_init__(self) -> None:
        if self.max_clicks < 1:
            raise ValueError(f"max_clicks must be >= 1, got {self.max_clicks}")
        if self.regen_interval_ms < 1:
            raise ValueError(
                f"regen_interval_ms must be >= 1, got {self.regen_interval_ms}"
            )
        if self.regen_per_tick < 0:
            raise ValueError(
                f"regen_per_tick must be >= 0, got {self.regen_per_tick}"
            )
        object.__setattr__(self, "base_rate", _per_kind(self.base_rate, "base_rate"))
        object.__setattr__(self, "conversion", _per_kind(self.conversion, "conversion"))
        object.__setattr__(self, "upgrades", _per_kind(self.upgrades, "upgrades"))
        for kind, rate in self.base_rate.items():
            if rate < 0:
                raise ValueError(f"base_rate[{kind}] must be >= 0, got {rate}")

    def upgrade(self, kind: ResourceKind) -> UpgradeDef:
        return self.upgrades[ResourceKind(kind)]

    def passive_target(self, kind: ResourceKind) -> ResourceKind:
        """Resource credited by *kind*'s passive income."""
        kind = ResourceKind(kind)
        target = self.upgrades[kind].target
        return kind if target is None else target

    def passive_kinds(self) -> list[ResourceKind]:
        return [k for k in ALL_KINDS if self.upgrades[k].is_passive]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain JSON-compatible data."""
        upgrades: dict[str, dict[str, Any]] = {}
        for kind, up in self.upgrades.items():
            entry: dict[str, Any] = {"cost": up.cost}
            if up.effect is not None:
                entry["effect"] = up.effect
            if up.is_passive:
                entry["passive_rate"] = up.passive_rate
                entry["passive_interval_ms"] = up.passive_interval_ms
            if up.target is not None:
                entry["target"] = up.target.value
            upgrades[kind.value] = entry
        return {
            "max_clicks": self.max_clicks,
            "regen_interval_ms": self.regen_interval_ms,
            "regen_per_tick": self.regen_per_tick,
            "base_rate": {k.value: v for k, v in self.base_rate.items()},
            "conversion": {
                k.value: {"cost": c.cost, "output": c.output}
                for k, c in self.conversion.items()
            },
            "upgrades": upgrades,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EconomyConfig:
        """Build an economy from *data*, falling back to the reference values.

        Missing top-level fields and missing kinds inside the per-kind tables
        keep their reference values, so a tuning file only has to name what
        it changes. Malformed values raise ``ValueError``.
        """
        base = cls()
        base_rate = dict(base.base_rate)
        for k, v in _table(data, "base_rate").items():
            base_rate[ResourceKind(k)] = _whole(v, f"base_rate.{k}")
        conversion = dict(base.conversion)
        for k, v in _table(data, "conversion").items():
            conversion[ResourceKind(k)] = _build(ConversionRate, v, f"conversion.{k}")
        upgrades = dict(base.upgrades)
        for k, v in _table(data, "upgrades").items():
            upgrades[ResourceKind(k)] = _build(UpgradeDef, v, f"upgrades.{k}")
        return cls(
            max_clicks=_whole(data.get("max_clicks", base.max_clicks), "max_clicks"),
            regen_interval_ms=_whole(
                data.get("regen_interval_ms", base.regen_interval_ms), "regen_interval_ms"
            ),
            regen_per_tick=_whole(
                data.get("regen_per_tick", base.regen_per_tick), "regen_per_tick"
            ),
            base_rate=base_rate,
            conversion=conversion,
            upgrades=upgrades,
        )


def _table(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be an object, got {value!r}")
    return value


def _whole(value: Any, name: str) -> int:
    # bool is an int subclass; true/false is never a count.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


def _build(factory: type[T], entry: Any, name: str) -> T:
    if not isinstance(entry, dict):
        raise ValueError(f"{name} must be an object, got {entry!r}")
    try:
        return factory(**entry)
    except TypeError as e:
        raise ValueError(f"{name}: {e}") from e


DEFAULT_ECONOMY = EconomyConfig()
