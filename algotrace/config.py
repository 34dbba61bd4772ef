from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

_SUPPORTED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Seconds per step; mirrors the playback speed buttons of the UI.
SPEED_PRESETS = {
    "slow":   1.0,    # teaching mode
    "medium": 0.4,
    "fast":   0.15,   # demo mode
    "turbo":  0.05,
    "instant": 0.0,
}


def _normalise_log_level(value: str | None) -> str:
    if value is None or value.strip() == "":
        return "INFO"
    value = value.strip().upper()
    if value not in _SUPPORTED_LOG_LEVELS:
        raise ValueError(f"Unsupported log level '{value}'. Expected one of {_SUPPORTED_LOG_LEVELS}.")
    return value


def _parse_optional_int(raw: str | None) -> int | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value '{raw}'") from exc


def resolve_delay(value: float | str | None) -> float:
    """Turn a preset name or a number of seconds into a non-negative delay."""

    if value is None:
        return 0.0
    if isinstance(value, str):
        key = value.strip().lower()
        if key in SPEED_PRESETS:
            return SPEED_PRESETS[key]
        try:
            value = float(key)
        except ValueError as exc:
            raise ValueError(
                f"Unknown speed '{value}'. Expected seconds or one of {sorted(SPEED_PRESETS)}."
            ) from exc
    delay = float(value)
    if delay < 0:
        raise ValueError(f"Pacing delay must be non-negative, got {delay}")
    return delay


@dataclass(frozen=True)
class RuntimeConfig:
    log_level: str
    default_delay: float
    seed: Optional[int]


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("algotrace")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    config = RuntimeConfig(
        log_level=_normalise_log_level(os.getenv("ALGOTRACE_LOG_LEVEL")),
        default_delay=resolve_delay(os.getenv("ALGOTRACE_SPEED")),
        seed=_parse_optional_int(os.getenv("ALGOTRACE_SEED")),
    )
    _configure_logging(config.log_level)
    return config


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()


__all__ = [
    "SPEED_PRESETS",
    "RuntimeConfig",
    "resolve_delay",
    "runtime_config",
    "reset_runtime_config_cache",
]
