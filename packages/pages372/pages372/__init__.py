"""pages372 - game-state engine for the 372 Pages reading clicker."""

from pages372.actions import ActionHandlers
from pages372.clock import Clock, wall_clock_ms
from pages372.commands import (
    BuyUpgrade,
    ConvertResource,
    IntentQueue,
    ReadBook,
    make_intent_system,
)
from pages372.config import SessionConfig, default_save_dir, load_economy
from pages372.economy import DEFAULT_ECONOMY, ConversionRate, EconomyConfig, UpgradeDef
from pages372.engine import Engine
from pages372.persistence import (
    JsonFileStorage,
    MemoryStorage,
    Persistence,
    Storage,
    reconcile_offline_clicks,
)
from pages372.presenter import LoggingPresenter, NullPresenter, Presenter
from pages372.regen import RegenerationScheduler
from pages372.schedule import Scheduler, TimerHandle, make_timer_system
from pages372.session import Session
from pages372.state import GameState, GameStateView
from pages372.types import (
    ALL_KINDS,
    PersistenceError,
    ResourceKind,
    SaveFormatError,
    StorageError,
    TickContext,
)

__all__ = [
    "ALL_KINDS",
    "ActionHandlers",
    "BuyUpgrade",
    "Clock",
    "ConversionRate",
    "ConvertResource",
    "DEFAULT_ECONOMY",
    "EconomyConfig",
    "Engine",
    "GameState",
    "GameStateView",
    "IntentQueue",
    "JsonFileStorage",
    "LoggingPresenter",
    "MemoryStorage",
    "NullPresenter",
    "Persistence",
    "PersistenceError",
    "Presenter",
    "ReadBook",
    "RegenerationScheduler",
    "ResourceKind",
    "SaveFormatError",
    "Scheduler",
    "Session",
    "SessionConfig",
    "Storage",
    "StorageError",
    "TickContext",
    "TimerHandle",
    "UpgradeDef",
    "default_save_dir",
    "load_economy",
    "make_intent_system",
    "make_timer_system",
    "reconcile_offline_clicks",
]
