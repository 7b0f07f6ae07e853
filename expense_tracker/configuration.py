"""Mini README: Centralised configuration for the expense tracker.

Structure:
    * ExpenseTrackerSettings - Pydantic settings model for runtime options.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values come from ``EXPENSE_TRACKER_*`` environment variables or a local
    ``.env`` file. The CLI reads the data file location and log level from
    here unless overridden on the command line.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExpenseTrackerSettings(BaseSettings):
    """Runtime configuration for the expense tracker."""

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    data_file: Path = Field(
        Path("expenses.json"),
        description="JSON document holding the expense ledger.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root log level used by the command line interface.",
    )

    @field_validator("data_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand user directories and resolve the ledger path."""

        return Path(value).expanduser().resolve()

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> ExpenseTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return ExpenseTrackerSettings()
