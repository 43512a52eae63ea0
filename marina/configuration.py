"""Mini README: Centralised configuration model for the marina manager.

Structure:
    * MarinaSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read the inventory capacity and log level.
    Nothing needs to be set: the defaults reproduce the stock behaviour, and
    ``MARINA_`` prefixed variables (or a ``.env`` file) only override them.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class MarinaSettings(BaseSettings):
    """Runtime configuration for the marina inventory manager."""

    max_boats: int = Field(
        120,
        description="Maximum number of boats the inventory holds at once.",
        ge=1,
    )
    log_level: str = Field(
        "WARNING",
        description="Logging level applied by the CLI before the session starts.",
    )

    class Config:
        env_prefix = "MARINA_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing of a standard logging level name."""

        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache()
def get_settings() -> MarinaSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return MarinaSettings()
