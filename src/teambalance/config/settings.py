"""Engine limits, overridable through environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_MAX_ITERATIONS_ENV = "TEAMBALANCE_MAX_ITERATIONS"
_TIME_LIMIT_ENV = "TEAMBALANCE_TIME_LIMIT_MS"
_RESHUFFLE_ATTEMPTS_ENV = "TEAMBALANCE_RESHUFFLE_ATTEMPTS"

_MAX_ITERATIONS_DEFAULT = 200
_TIME_LIMIT_MS_DEFAULT = 200.0
_RESHUFFLE_ATTEMPTS_DEFAULT = 100


@dataclass(frozen=True)
class EngineSettings:
    max_iterations: int = _MAX_ITERATIONS_DEFAULT
    time_limit_ms: float = _TIME_LIMIT_MS_DEFAULT
    active_roster_size: int = 6
    improvement_epsilon: float = 1e-9
    reshuffle_max_attempts: int = _RESHUFFLE_ATTEMPTS_DEFAULT
    reshuffle_min_moves: int = 2


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def load_settings() -> EngineSettings:
    """Build settings from the environment, falling back to defaults."""

    return EngineSettings(
        max_iterations=_env_int(_MAX_ITERATIONS_ENV, _MAX_ITERATIONS_DEFAULT, min_value=0),
        time_limit_ms=_env_float(_TIME_LIMIT_ENV, _TIME_LIMIT_MS_DEFAULT, clamp_min=0.0),
        reshuffle_max_attempts=_env_int(_RESHUFFLE_ATTEMPTS_ENV, _RESHUFFLE_ATTEMPTS_DEFAULT, min_value=1),
    )
