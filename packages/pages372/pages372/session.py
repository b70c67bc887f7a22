"""Session - wires state, persistence, timers, and handlers together."""
from __future__ import annotations

import logging
from typing import Callable

from pages372.actions import ActionHandlers
from pages372.clock import wall_clock_ms
from pages372.commands import IntentQueue, make_intent_system
from pages372.config import SessionConfig
from pages372.economy import DEFAULT_ECONOMY, EconomyConfig
from pages372.engine import Engine
from pages372.persistence import Persistence, Storage
from pages372.presenter import NullPresenter, Presenter
from pages372.regen import RegenerationScheduler
from pages372.schedule import Scheduler, make_timer_system
from pages372.state import GameState
from pages372.types import ResourceKind

logger = logging.getLogger("pages372.session")


class Session:
    """One running game.

    Owns the live GameState and everything that mutates it. Nothing touches
    the state until ``start()`` has loaded it.
    """

    def __init__(
        self,
        storage: Storage,
        presenter: Presenter | None = None,
        economy: EconomyConfig = DEFAULT_ECONOMY,
        config: SessionConfig = SessionConfig(),
        now: Callable[[], int] = wall_clock_ms,
    ) -> None:
        self._presenter: Presenter = presenter if presenter is not None else NullPresenter()
        self._economy = economy
        self._config = config
        self._persistence = Persistence(
            storage,
            economy,
            key=config.save_key,
            now=now,
            notify=self._presenter.notify,
        )
        self._state = GameState.fresh(economy, now())
        self._scheduler = Scheduler()
        self._regen = RegenerationScheduler(
            self._state, economy, self._scheduler, self.commit
        )
        self._handlers = ActionHandlers(
            self._state, economy, self._presenter, self._regen, self.commit
        )
        self.intents = IntentQueue()

        self._engine = Engine(tick_ms=config.tick_ms)
        self._engine.add_system(make_intent_system(self.intents, self._handlers))
        self._engine.add_system(make_timer_system(self._scheduler))
        self._started = False

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def economy(self) -> EconomyConfig:
        return self._economy

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def regen(self) -> RegenerationScheduler:
        return self._regen

    @property
    def handlers(self) -> ActionHandlers:
        return self._handlers

    @property
    def persistence(self) -> Persistence:
        return self._persistence

    def start(self) -> GameState:
        """Load the save, start every timer, and render the first frame."""
        self._regen.stop()
        self._set_state(self._persistence.load())
        owned = self._regen.init_passive_generators()
        if owned:
            logger.info("Resumed passive income for %s", ", ".join(k.value for k in owned))
        self._regen.start_click_regen()
        self._started = True
        self.commit()
        return self._state

    def _set_state(self, state: GameState) -> None:
        self._state = state
        self._regen.state = state
        self._handlers.state = state

    def commit(self) -> None:
        """Render the current state, then save it."""
        self._presenter.render(self._state.view(self._economy))
        self._persistence.save(self._state)

    # --- Presenter intents ---

    def on_read(self, kind: ResourceKind) -> bool:
        return self._handlers.read(kind)

    def on_convert(self, kind: ResourceKind) -> bool:
        return self._handlers.convert(kind)

    def on_buy_upgrade(self, kind: ResourceKind) -> bool:
        return self._handlers.buy_upgrade(kind)

    # --- Loop ---

    def step(self) -> None:
        self._engine.step()

    def advance_ms(self, ms: int) -> int:
        return self._engine.advance_ms(ms)

    def run(self, n: int) -> int:
        return self._engine.run(n)

    def run_forever(self) -> None:
        self._engine.run_forever()

    def stop(self) -> None:
        """Stop the loop and cancel every timer. The last save stands."""
        self._engine.request_stop()
        self._regen.stop()
        self._started = False

    @property
    def started(self) -> bool:
        return self._started
