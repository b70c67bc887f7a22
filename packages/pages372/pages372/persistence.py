"""Persistence - durable key-value storage with offline reconciliation."""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Protocol

from pages372.clock import wall_clock_ms
from pages372.economy import EconomyConfig
from pages372.state import GameState
from pages372.types import PersistenceError, SaveFormatError, StorageError

logger = logging.getLogger("pages372.persistence")

DEFAULT_SAVE_KEY = "372pagesGame"
SAVE_ERROR_MESSAGE = "Error saving game! Please ensure the save location is writable."
LOAD_ERROR_MESSAGE = "Error loading game! Starting a new game."


class Storage(Protocol):
    """Key-value slot store. Implementations raise StorageError on I/O failure."""

    def get(self, key: str) -> str | None: ...

    def put(self, key: str, text: str) -> None: ...


class MemoryStorage:
    """Dict-backed storage."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.slots: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.slots.get(key)

    def put(self, key: str, text: str) -> None:
        self.slots[key] = text


class JsonFileStorage:
    """One ``<key>.json`` file per key inside *directory*.

    Writes go to a temporary file in the same directory and are moved into
    place, so a crash mid-write leaves the previous save intact.
    """

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    def put(self, key: str, text: str) -> None:
        path = self.path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(
                dir=self.directory, prefix=f".{key}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(text)
                os.replace(tmp, path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e


class Persistence:
    """Saves and loads the one GameState slot.

    Failures never propagate: a failed save leaves the in-memory session
    running, a failed load starts a new game. Both are logged and reported
    through *notify*.
    """

    def __init__(
        self,
        storage: Storage,
        economy: EconomyConfig,
        key: str = DEFAULT_SAVE_KEY,
        now: Callable[[], int] = wall_clock_ms,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self._storage = storage
        self._economy = economy
        self._key = key
        self._now = now
        self._notify = notify

    @property
    def key(self) -> str:
        return self._key

    def _report(self, message: str) -> None:
        if self._notify is not None:
            self._notify(message)

    def save(self, state: GameState) -> bool:
        """Stamp and write *state*. Returns False if the store refused it."""
        state.last_update_time = self._now()
        try:
            self._storage.put(self._key, json.dumps(state.snapshot()))
        except StorageError:
            logger.exception("Error saving game to slot %r", self._key)
            self._report(SAVE_ERROR_MESSAGE)
            return False
        return True

    def load(self) -> GameState:
        """Read the saved state, credit offline regen, and save it back."""
        now = self._now()
        try:
            state = self._read(now)
        except (PersistenceError, ValueError):
            logger.exception("Error loading game from slot %r", self._key)
            self._report(LOAD_ERROR_MESSAGE)
            state = GameState.fresh(self._economy, now)

        state.clamp_clicks()
        self.save(state)
        return state

    def _read(self, now: int) -> GameState:
        text = self._storage.get(self._key)
        if text is None:
            logger.info("No saved game in slot %r, starting fresh", self._key)
            return GameState.fresh(self._economy, now)

        try:
            data = json.loads(text)
            state = GameState.restore(data, self._economy, now)
        except json.JSONDecodeError as e:
            raise SaveFormatError(f"Saved game is not valid JSON: {e}") from e
        except RecursionError as e:
            raise SaveFormatError("Saved game is nested too deeply") from e

        offline = reconcile_offline_clicks(state, self._economy, now)
        if offline:
            logger.info("Credited %d clicks regenerated while away", offline)
        state.last_update_time = now
        return state


def reconcile_offline_clicks(
    state: GameState, economy: EconomyConfig, now: int
) -> int:
    """Add the clicks that regenerated since ``state.last_update_time``.

    Only applies while the pool is below the cap. A timestamp in the future
    grants nothing. Returns the number of clicks added.
    """
    elapsed = max(0, now - state.last_update_time)
    offline_ticks = elapsed // economy.regen_interval_ms
    offline_clicks = offline_ticks * economy.regen_per_tick
    if state.clicks >= economy.max_clicks:
        return 0
    before = state.clicks
    state.clicks = min(economy.max_clicks, state.clicks + offline_clicks)
    return state.clicks - before
