"""Runtime settings loaded from the environment (Pydantic v2)."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import config

# Load .env if present (non-fatal if missing)
load_dotenv(dotenv_path=Path(".env"), override=False)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class Settings(BaseSettings):
    """Runtime settings loaded from env with sane defaults."""

    model_config = SettingsConfigDict(
        env_prefix="DFS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LOG_LEVEL: str = Field(default="INFO", description="Logging level for package loggers.")
    OVER_LABEL: str = Field(
        default=config.OVER_LABEL,
        description="Direction label of the prop lines kept for projections.",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_level(cls, v: object) -> str:
        level = str(v or "INFO").strip().upper()
        if level not in _LOG_LEVELS:
            logging.getLogger(__name__).warning("Unknown log level %r, falling back to INFO", v)
            return "INFO"
        return level


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
