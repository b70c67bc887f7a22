"""Action handlers - guarded transitions for read, convert, and buy."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from pages372.types import ResourceKind

if TYPE_CHECKING:
    from pages372.economy import EconomyConfig
    from pages372.presenter import Presenter
    from pages372.regen import RegenerationScheduler
    from pages372.state import GameState

NO_CLICKS_MESSAGE = "You don't have enough clicks! Wait for them to regenerate."


class ActionHandlers:
    """Player intents applied to the live GameState.

    Each handler returns True when the transition happened and False when a
    precondition failed (the state is then unchanged and the presenter gets
    a notice). Both paths end with ``commit()``.
    """

    def __init__(
        self,
        state: GameState,
        economy: EconomyConfig,
        presenter: Presenter,
        regen: RegenerationScheduler,
        commit: Callable[[], None],
    ) -> None:
        self.state = state
        self._economy = economy
        self._presenter = presenter
        self._regen = regen
        self._commit = commit

    def read_gain(self, kind: ResourceKind) -> int:
        """Resource units one read of *kind* yields at the current level."""
        kind = ResourceKind(kind)
        gain = self._economy.base_rate[kind]
        effect = self._economy.upgrade(kind).effect
        if effect is not None:
            gain += self.state.upgrade_levels[kind] * effect
        return gain

    def read(self, kind: ResourceKind) -> bool:
        kind = ResourceKind(kind)
        if self.state.clicks <= 0:
            self._presenter.notify(NO_CLICKS_MESSAGE)
            self._commit()
            return False

        self.state.spend_click()
        self.state.resources[kind] += self.read_gain(kind)
        self._commit()
        return True

    def convert(self, kind: ResourceKind) -> bool:
        kind = ResourceKind(kind)
        rate = self._economy.conversion[kind]
        have = self.state.resources[kind]
        if have < rate.cost:
            self._presenter.notify(
                f"Not enough resources to convert for {kind.value}. "
                f"You need {rate.cost} but have {have}."
            )
            self._commit()
            return False

        self.state.resources[kind] -= rate.cost
        self.state.currency += rate.output
        self._presenter.notify(
            f"Converted {rate.cost} {kind.value} resource into "
            f"{rate.output} 372 Pages!"
        )
        self._commit()
        return True

    def buy_upgrade(self, kind: ResourceKind) -> bool:
        kind = ResourceKind(kind)
        upgrade = self._economy.upgrade(kind)
        if self.state.currency < upgrade.cost:
            self._presenter.notify(
                f"Not enough 372 Pages to buy this upgrade. "
                f"You need {upgrade.cost} but have {self.state.currency}."
            )
            self._commit()
            return False

        self.state.currency -= upgrade.cost
        self.state.upgrade_levels[kind] += 1
        self._presenter.notify(f"Successfully purchased upgrade for {kind.value}!")
        self._commit()
        if upgrade.is_passive:
            self._regen.start_passive(kind)
        return True
