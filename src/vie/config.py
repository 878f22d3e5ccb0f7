"""Editor configuration resolved from ``VIE_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_PREFIX = "VIE_"

DEFAULT_TICK_RATE = 0.25
DEFAULT_MAX_COUNT = 99999


def _env_value(env: Mapping[str, str], name: str) -> Optional[str]:
    value = env.get(f"{ENV_PREFIX}{name}")
    if value is None or not value.strip():
        return None
    return value.strip()


def _env_float(env: Mapping[str, str], name: str, fallback: float) -> float:
    value = _env_value(env, name)
    if value is None:
        return fallback
    try:
        parsed = float(value)
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


def _env_int(env: Mapping[str, str], name: str, fallback: int) -> int:
    value = _env_value(env, name)
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Runtime knobs for the editor loop and the mode engine.

    ``tick_rate`` is the input poll timeout in seconds; a ``Tick`` event is
    produced whenever no key arrives within it. ``max_count`` bounds the
    numeric multiplier accepted in normal mode.
    """

    tick_rate: float = DEFAULT_TICK_RATE
    max_count: int = DEFAULT_MAX_COUNT
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if self.tick_rate <= 0:
            raise ValueError("tick_rate must be positive")
        if self.max_count <= 0:
            raise ValueError("max_count must be positive")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        source = os.environ if env is None else env
        return cls(
            tick_rate=_env_float(source, "TICK_RATE", DEFAULT_TICK_RATE),
            max_count=_env_int(source, "MAX_COUNT", DEFAULT_MAX_COUNT),
            log_file=_env_value(source, "LOG_FILE"),
        )

    def with_overrides(self, **changes: object) -> "EditorConfig":
        """Return a copy with every non-``None`` override applied."""

        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied)


__all__ = ["EditorConfig", "DEFAULT_TICK_RATE", "DEFAULT_MAX_COUNT"]
