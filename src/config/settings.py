# src/config/settings.py - v2
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for pagination, merge policy and logging settings.
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from linksync.cache.fingerprint import LIST_CAP, PAGE_SIZE


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Pagination ===
    page_size: int = PAGE_SIZE
    list_cap: int = LIST_CAP

    # === Event merging ===
    # "prepend" always prepends pushed links; "first_page_only" leaves
    # pages with a non-zero skip untouched until their next fetch.
    create_event_policy: Literal["prepend", "first_page_only"] = "prepend"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: str = ""
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:  # noqa: N805
        if v < 1:
            raise ValueError("page_size must be >= 1")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.list_cap < self.page_size:
            errors.append("LIST_CAP must be >= PAGE_SIZE")

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
