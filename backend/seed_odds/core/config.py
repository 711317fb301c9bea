"""
Runtime settings read from environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class Settings:
    """Simulation and server settings."""

    total_trials: int = 1_000_000
    workers: int = 1
    bye_seeds: int = 2
    max_api_trials: int = 100_000
    log_level: str = "INFO"
    cors_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"]
    )

    @classmethod
    def from_env(cls) -> 'Settings':
        cors = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000")
        return cls(
            total_trials=_env_int("SEED_ODDS_TOTAL_TRIALS", 1_000_000),
            workers=_env_int("SEED_ODDS_WORKERS", 1),
            bye_seeds=_env_int("SEED_ODDS_BYE_SEEDS", 2),
            max_api_trials=_env_int("SEED_ODDS_MAX_API_TRIALS", 100_000),
            log_level=os.getenv("SEED_ODDS_LOG_LEVEL", "INFO").upper(),
            cors_origins=[origin.strip() for origin in cors.split(",") if origin.strip()]
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
