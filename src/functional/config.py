"""
Configuration — typed, validated library settings loaded from the environment.

Uses pydantic-settings so that the defaults of the effect scheduler and the
logging level can be tuned per deployment without code changes:

    FUNCTIONAL_PROCESSING_ORDER=parallel
    FUNCTIONAL_MAX_PARALLELISM=4
    FUNCTIONAL_LOG_LEVEL=debug

Settings are read once and cached; call ``reset_settings()`` after changing
the environment (tests do this through a fixture).
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from functional.ordering import ProcessingOrder

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def _default_parallelism() -> int:
    return os.cpu_count() or 1


class FunctionalSettings(BaseSettings):
    """
    Library-wide defaults.

    Load order (highest priority first):
      1. Environment variables prefixed with FUNCTIONAL_
      2. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="FUNCTIONAL_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    processing_order: ProcessingOrder = Field(
        default=ProcessingOrder.SEQUENTIAL,
        description="Order used by multi-callback effects when the caller passes none",
    )
    max_parallelism: int = Field(
        default_factory=_default_parallelism,
        ge=1,
        description="Upper bound on callbacks running at once in PARALLEL mode",
    )
    log_level: str = Field(default="WARNING", description="Minimum level for library log events")

    @field_validator("processing_order", mode="before")
    @classmethod
    def normalise_order(cls, value: object) -> object:
        """Accept 'parallel', 'PARALLEL' and ProcessingOrder members alike."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Reject names the logging module does not know."""
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}, expected one of {', '.join(_LOG_LEVELS)}")
        return level

    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache(maxsize=1)
def get_settings() -> FunctionalSettings:
    """Return the process-wide settings, reading the environment on first use."""
    return FunctionalSettings()


def reset_settings() -> None:
    """Forget the cached settings so the next ``get_settings()`` re-reads the environment."""
    get_settings.cache_clear()
