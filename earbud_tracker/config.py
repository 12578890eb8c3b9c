"""
Runtime settings, read from the environment (and a .env file when the
entry point has loaded one).

    EARBUD_RECENT_LIMIT   how many reports "view recent" shows (default 5)
    EARBUD_LOG_LEVEL      logging level name (default WARNING)
    EARBUD_LOG_FILE       optional log file; unset means stderr only
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from earbud_tracker.common.errors import TrackerError

DEFAULT_RECENT_LIMIT = 5

ENV_KEYS = {
    "recent_limit": "EARBUD_RECENT_LIMIT",
    "log_level": "EARBUD_LOG_LEVEL",
    "log_file": "EARBUD_LOG_FILE",
}


class Settings(BaseModel):
    recent_limit: int = Field(default=DEFAULT_RECENT_LIMIT, ge=1)
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level {value!r}")
        return value

    @field_validator("log_file")
    @classmethod
    def _blank_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


def load_settings(environ: Optional[Mapping[str, str]] = None, **overrides) -> Settings:
    """
    Build Settings from environment variables, then apply explicit overrides
    (command-line flags). Overrides that are None are ignored.
    """
    environ = os.environ if environ is None else environ

    data = {field: environ[key] for field, key in ENV_KEYS.items() if key in environ}
    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return Settings(**data)
    except ValidationError as e:
        raise TrackerError(f"Invalid settings: {e}") from e
