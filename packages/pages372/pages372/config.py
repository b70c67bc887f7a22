"""Session configuration and economy files."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from pages372.economy import EconomyConfig
from pages372.persistence import DEFAULT_SAVE_KEY

HOME_ENV_VAR = "PAGES372_HOME"


@dataclass(frozen=True)
class SessionConfig:
    """Immutable configuration for one game session.

    Attributes:
        tick_ms: Milliseconds per engine tick. Timer intervals are honoured
            to this resolution.
        save_key: Storage slot the game is saved under.
        save_dir: Directory for file saves (None for ``default_save_dir()``).
    """

    tick_ms: int = 100
    save_key: str = DEFAULT_SAVE_KEY
    save_dir: Path | None = None

    def __post_init__(self) -> None:
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if not self.save_key:
            raise ValueError("save_key must be non-empty")

    def resolved_save_dir(self) -> Path:
        return self.save_dir if self.save_dir is not None else default_save_dir()


def default_save_dir() -> Path:
    """``$PAGES372_HOME`` if set, else ``~/.pages372``."""
    env = os.environ.get(HOME_ENV_VAR)
    if env:
        return Path(env)
    return Path.home() / ".pages372"


def load_economy(path: str | os.PathLike[str]) -> EconomyConfig:
    """Read a JSON economy file. Fields it omits keep the reference values."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Economy file {path} must contain a JSON object")
    return EconomyConfig.from_dict(data)
