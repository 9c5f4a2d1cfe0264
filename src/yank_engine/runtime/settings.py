"""Engine settings with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "YANK_ENGINE_"

DEFAULT_KILL_RING_MAX = 60
DEFAULT_EDIT_RETRIES = 3
DEFAULT_INTERRUPTION_MESSAGE = "Previous command was not a yank"


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_flag(env: Mapping[str, str], key: str, fallback: bool) -> bool:
    raw = env.get(f"{ENV_PREFIX}{key}")
    if raw is None:
        return fallback
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Tunables shared by every yanker created from one session."""

    kill_ring_max: int = DEFAULT_KILL_RING_MAX
    kill_ring_enabled: bool = True
    edit_retries: int = DEFAULT_EDIT_RETRIES
    interruption_message: str = DEFAULT_INTERRUPTION_MESSAGE

    def __post_init__(self) -> None:
        if self.kill_ring_max < 1:
            raise ValueError("kill_ring_max must be positive")
        if self.edit_retries < 1:
            raise ValueError("edit_retries must be positive")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EngineSettings":
        source = os.environ if env is None else env
        return cls(
            kill_ring_max=_env_int(source, "KILL_RING_MAX", DEFAULT_KILL_RING_MAX),
            kill_ring_enabled=_env_flag(source, "KILL_RING", True),
            edit_retries=_env_int(source, "EDIT_RETRIES", DEFAULT_EDIT_RETRIES),
        )


__all__ = ["EngineSettings"]
