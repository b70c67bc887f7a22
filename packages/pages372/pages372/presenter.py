"""Presentation adapter contract and two headless implementations."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pages372.state import GameStateView

logger = logging.getLogger("pages372.presenter")


class Presenter(Protocol):
    """What the engine needs from a front end.

    ``render`` is called after every mutation with a fresh view.
    ``notify`` carries user-facing status and error text.
    """

    def render(self, view: GameStateView) -> None: ...

    def notify(self, message: str) -> None: ...


class NullPresenter:
    """Ignores everything. Used when a session runs without a front end."""

    def render(self, view: GameStateView) -> None:
        pass

    def notify(self, message: str) -> None:
        pass


class LoggingPresenter:
    """Keeps the latest view and writes notices to the log."""

    def __init__(self) -> None:
        self.last_view: GameStateView | None = None

    def render(self, view: GameStateView) -> None:
        self.last_view = view

    def notify(self, message: str) -> None:
        logger.info(message)
