from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_CHUNK_SIZE",
    "default_base_dir",
    "Settings",
    "get_settings",
]

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_CHUNK_SIZE = 64 * 1024


def default_base_dir() -> Path:
    """Return the `site/` directory shipped next to this module."""
    return Path(__file__).resolve().parent / "site"


def _log_level_from_env() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


class Settings(BaseModel):
    """Server settings, fixed once the app is built."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(DEFAULT_HOST, min_length=1)
    port: int = Field(DEFAULT_PORT, ge=1, le=65535)
    base_dir: Path = Field(default_factory=default_base_dir)
    chunk_size: int = Field(DEFAULT_CHUNK_SIZE, ge=1)
    log_level: str = Field(default_factory=_log_level_from_env)

    @field_validator("base_dir")
    @classmethod
    def _absolute_base_dir(cls, value: Path) -> Path:
        return value.expanduser().resolve()

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


def get_settings(**overrides: Any) -> Settings:
    """Build settings from defaults, ignoring overrides that are `None`.

    Lets CLI flags that were not given fall through to the defaults.
    """
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
