"""Queued player intents, drained inside the game loop."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from pages372.types import ResourceKind

if TYPE_CHECKING:
    from pages372.actions import ActionHandlers
    from pages372.types import TickContext


@dataclass(frozen=True)
class ReadBook:
    kind: ResourceKind


@dataclass(frozen=True)
class ConvertResource:
    kind: ResourceKind


@dataclass(frozen=True)
class BuyUpgrade:
    kind: ResourceKind


class IntentQueue:
    """FIFO of intents from a front end that polls input between ticks.

    Draining routes each intent to the matching action handler, so intents
    are applied at a tick boundary and never inside a timer callback.
    """

    def __init__(self) -> None:
        self._pending: deque[Any] = deque()

    def enqueue(self, intent: Any) -> None:
        """Add an intent. Safe to call between ticks."""
        self._pending.append(intent)

    def pending(self) -> int:
        return len(self._pending)

    def drain(self, handlers: ActionHandlers) -> list[tuple[Any, bool]]:
        """Apply all pending intents. Returns ``[(intent, accepted), ...]``.

        Raises ``TypeError`` for an intent type with no handler.
        """
        results: list[tuple[Any, bool]] = []
        while self._pending:
            intent = self._pending.popleft()
            if isinstance(intent, ReadBook):
                accepted = handlers.read(intent.kind)
            elif isinstance(intent, ConvertResource):
                accepted = handlers.convert(intent.kind)
            elif isinstance(intent, BuyUpgrade):
                accepted = handlers.buy_upgrade(intent.kind)
            else:
                raise TypeError(
                    f"No handler registered for {type(intent).__qualname__}"
                )
            results.append((intent, accepted))
        return results


def make_intent_system(
    queue: IntentQueue,
    handlers: ActionHandlers,
    on_reject: Callable[[Any], None] | None = None,
) -> Callable[[TickContext], None]:
    """Return a system that drains *queue* each tick.

    ``on_reject(intent)`` fires for every intent whose precondition failed.
    """

    def intent_system(ctx: TickContext) -> None:
        for intent, accepted in queue.drain(handlers):
            if not accepted and on_reject is not None:
                on_reject(intent)

    return intent_system
