#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    CHARS_PER_PAGE,
    DEFAULT_PAPER_SIZE,
    LOG_FILE,
    LOG_LEVEL,
    PAGE_BREAK_MARKER,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Pagination settings, overridable through PAGINATION_* env vars."""

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========== Load-time splitting ==========
    chars_per_page: int = CHARS_PER_PAGE
    page_break_marker: str = PAGE_BREAK_MARKER

    # ========== Editing ==========
    default_paper_size: str = DEFAULT_PAPER_SIZE

    # ========== Logging ==========
    log_level: str = LOG_LEVEL
    log_file: Optional[str] = LOG_FILE

    @field_validator("chars_per_page")
    @classmethod
    def _positive_budget(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("chars_per_page must be positive")
        return value

    @field_validator("page_break_marker")
    @classmethod
    def _non_empty_marker(cls, value: str) -> str:
        if not value:
            raise ValueError("page_break_marker must not be empty")
        return value

    @field_validator("default_paper_size")
    @classmethod
    def _known_paper_size(cls, value: str) -> str:
        # Imported here: pagination imports config at module load
        from pagination.paper_sizes import PAPER_SIZES

        name = value.strip().lower()
        if name not in PAPER_SIZES:
            raise ValueError(
                f"Unknown paper size '{value}'. Expected one of: {', '.join(PAPER_SIZES)}"
            )
        return name

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
