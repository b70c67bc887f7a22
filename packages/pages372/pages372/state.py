"""GameState - the single mutable aggregate, plus its read-only view."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pages372.economy import EconomyConfig
from pages372.types import ALL_KINDS, ResourceKind, SaveFormatError


def _zeroes() -> dict[ResourceKind, int]:
    return {k: 0 for k in ALL_KINDS}


@dataclass
class GameState:
    """Runtime values of one game session.

    ``clicks`` is kept within ``[0, max_clicks]`` by the click helpers.
    Resource and currency decrements are validated by the action handlers,
    not here.
    """

    max_clicks: int
    clicks: int
    currency: int = 0
    resources: dict[ResourceKind, int] = field(default_factory=_zeroes)
    upgrade_levels: dict[ResourceKind, int] = field(default_factory=_zeroes)
    last_update_time: int = 0

    @classmethod
    def fresh(cls, economy: EconomyConfig, now: int) -> GameState:
        return cls(
            max_clicks=economy.max_clicks,
            clicks=economy.max_clicks,
            last_update_time=now,
        )

    # --- Clicks ---

    def add_clicks(self, amount: int) -> int:
        """Add clicks, clamped to the cap. Returns the amount actually added."""
        before = self.clicks
        self.clicks = max(0, min(self.max_clicks, self.clicks + amount))
        return self.clicks - before

    def spend_click(self) -> bool:
        if self.clicks <= 0:
            self.clicks = 0
            return False
        self.clicks -= 1
        return True

    def clamp_clicks(self) -> None:
        self.clicks = max(0, min(self.max_clicks, self.clicks))

    # --- Serialization ---

    def snapshot(self) -> dict[str, Any]:
        """Serialize to the durable record layout."""
        return {
            "clicks": self.clicks,
            "currency": self.currency,
            "resources": {k.value: self.resources[k] for k in ALL_KINDS},
            "upgradeLevels": {k.value: self.upgrade_levels[k] for k in ALL_KINDS},
            "lastUpdateTime": self.last_update_time,
        }

    @classmethod
    def restore(
        cls, data: Any, economy: EconomyConfig, now: int
    ) -> GameState:
        """Rebuild a state from a durable record.

        Missing fields are not fatal: missing clicks means a full pool,
        missing counts are zero, and a missing timestamp is *now*. The
        legacy ``currentClicks`` / ``total372Pages`` keys are accepted.
        Raises ``SaveFormatError`` when present values have the wrong shape.
        """
        if not isinstance(data, dict):
            raise SaveFormatError(
                f"Saved record must be an object, got {type(data).__name__}"
            )

        clicks = _pick(data, "clicks", "currentClicks", economy.max_clicks)
        currency = _pick(data, "currency", "total372Pages", 0)
        last_update = data.get("lastUpdateTime")
        if last_update is None:
            last_update = now

        state = cls(
            max_clicks=economy.max_clicks,
            clicks=_as_int(clicks, "clicks", allow_negative=True),
            currency=_as_int(currency, "currency"),
            resources=_as_counts(data.get("resources"), "resources"),
            upgrade_levels=_as_counts(data.get("upgradeLevels"), "upgradeLevels"),
            last_update_time=_as_int(last_update, "lastUpdateTime", allow_negative=True),
        )
        return state

    def view(self, economy: EconomyConfig) -> GameStateView:
        return GameStateView(
            clicks=self.clicks,
            max_clicks=self.max_clicks,
            currency=self.currency,
            resources=dict(self.resources),
            upgrade_levels=dict(self.upgrade_levels),
            can_read=self.clicks > 0,
            can_convert={
                k: self.resources[k] >= economy.conversion[k].cost for k in ALL_KINDS
            },
            can_buy={
                k: self.currency >= economy.upgrades[k].cost for k in ALL_KINDS
            },
        )


@dataclass(frozen=True)
class GameStateView:
    """Immutable copy of GameState handed to presenters, with button states."""

    clicks: int
    max_clicks: int
    currency: int
    resources: dict[ResourceKind, int]
    upgrade_levels: dict[ResourceKind, int]
    can_read: bool
    can_convert: dict[ResourceKind, bool]
    can_buy: dict[ResourceKind, bool]


def _pick(data: dict[str, Any], key: str, legacy_key: str, default: Any) -> Any:
    if key in data:
        return data[key]
    return data.get(legacy_key, default)


def _as_int(value: Any, name: str, allow_negative: bool = False) -> int:
    # bool is an int subclass; a saved true/false is never a count.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SaveFormatError(f"{name} must be a number, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise SaveFormatError(f"{name} must be a whole number, got {value!r}")
        value = int(value)
    if not allow_negative and value < 0:
        raise SaveFormatError(f"{name} must be >= 0, got {value}")
    return value


def _as_counts(value: Any, name: str) -> dict[ResourceKind, int]:
    counts = _zeroes()
    if value is None:
        return counts
    if not isinstance(value, dict):
        raise SaveFormatError(f"{name} must be an object, got {value!r}")
    for kind in ALL_KINDS:
        if kind.value in value:
            counts[kind] = _as_int(value[kind.value], f"{name}.{kind.value}")
    return counts
