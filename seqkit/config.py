"""Environment-driven settings."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

# Environment variable names
LOG_LEVEL_ENV = "SEQKIT_LOG_LEVEL"
METRICS_ENABLED_ENV = "SEQKIT_METRICS_ENABLED"

DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL  # Level name understood by logging
    metrics_enabled: bool = True  # Record prometheus metrics per operation


def load_settings() -> Settings:
    """Build settings from the environment (with sensible defaults)."""
    return Settings(
        log_level=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
        metrics_enabled=os.environ.get(METRICS_ENABLED_ENV, "1") != "0",
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
