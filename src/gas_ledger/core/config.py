"""Configuration for the contract store with pydantic-based settings."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_VALUES: tuple[int, ...] = (8, 4, 3, 0, 1, 3, 6, 4)


class StoreConfig(BaseModel):
    """Configuration for a contract store.

    Attributes:
        default_values: Source list the store is seeded with
        source_key: Storage key of the unsorted source list
        sorted_key: Key the cached sorted list is reported under in snapshots
    """

    default_values: list[int] = Field(
        default_factory=lambda: list(DEFAULT_VALUES),
        description="Source list the store is seeded with",
    )
    source_key: str = Field(
        default="unsorted_list",
        min_length=1,
        description="Storage key of the unsorted source list",
    )
    sorted_key: str = Field(
        default="sorted_list",
        min_length=1,
        description="Snapshot key of the cached sorted list",
    )

    @model_validator(mode="after")
    def validate_keys(self) -> "StoreConfig":
        """Validate that source and sorted keys differ."""
        if self.source_key == self.sorted_key:
            raise ValueError(
                f"source_key and sorted_key must differ, both are {self.source_key!r}"
            )
        return self


class LedgerSettings(BaseSettings):
    """Process-level settings read from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="GAS_LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_values: list[int] = Field(
        default_factory=lambda: list(DEFAULT_VALUES),
        description="Source list for the store (JSON list in the environment)",
    )
    log_level: str = Field(default="WARNING", description="Root logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level

    def to_store_config(self) -> StoreConfig:
        return StoreConfig(default_values=self.default_values)


def get_settings() -> LedgerSettings:
    """Get ledger settings from environment variables."""
    return LedgerSettings()
