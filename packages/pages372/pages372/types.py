"""Shared types, tick context, and errors for pages372."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class ResourceKind(str, Enum):
    """One of the four books. Names both a resource pool and its upgrade."""

    RP1 = "rp1"
    ARMADA = "armada"
    EYEOFARGON = "eyeofargon"
    UGLYLOVE = "uglylove"

    def __str__(self) -> str:
        return self.value


ALL_KINDS: tuple[ResourceKind, ...] = tuple(ResourceKind)


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt_ms: int
    elapsed_ms: int
    request_stop: Callable[[], None]


class PersistenceError(Exception):
    """Base class for save/load failures."""


class StorageError(PersistenceError):
    """Raised when the durable store cannot be read or written."""


class SaveFormatError(PersistenceError, ValueError):
    """Raised when a saved record cannot be turned back into a GameState."""


System = Callable[[TickContext], None]
