"""
Runtime configuration read from the environment.

All settings have defaults, so the library works unconfigured. Reading them
has no side effects: entry points such as ``api.py`` decide whether a
``.env`` file is loaded first.

    NUMWORDS_DEFAULT_LANG   language used when options.lang is unset (en)
    NUMWORDS_LOG_LEVEL      log level applied by the API at startup (INFO)
    NUMWORDS_CACHE_SIZE     max cached converters in the registry (128)
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field, ValidationError

from .exceptions import InvalidOptionsError

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Process-wide settings."""

    default_lang: str = "en"
    log_level: str = "INFO"
    cache_size: int = Field(default=128, ge=1)

    @classmethod
    def from_env(cls) -> Settings:
        raw = {
            "default_lang": os.environ.get("NUMWORDS_DEFAULT_LANG"),
            "log_level": os.environ.get("NUMWORDS_LOG_LEVEL"),
            "cache_size": os.environ.get("NUMWORDS_CACHE_SIZE"),
        }
        try:
            return cls(**{k: v for k, v in raw.items() if v})
        except ValidationError as e:
            raise InvalidOptionsError(
                f"Invalid NUMWORDS_* environment settings: {e.errors()[0]['msg']}",
                {"environment": {k: v for k, v in raw.items() if v}},
            ) from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings are read once per process."""
    settings = Settings.from_env()
    logger.debug("Loaded settings: %s", settings)
    return settings
