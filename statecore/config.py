"""
Runtime settings for statecore.

Environment Variables:
    STATECORE_ENV: Runtime mode (production, development) - default: development
    STATECORE_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    STATECORE_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from statecore.config import Settings

    settings = Settings.from_env()
    if not settings.production:
        ...
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


class Settings(BaseModel):
    env: str = "development"
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def production(self) -> bool:
        """Diagnostics are disabled in production mode."""
        return self.env == "production"

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Unknown values fall back to defaults instead of failing.
        """
        environ = os.environ if environ is None else environ

        env = environ.get("STATECORE_ENV", "development").strip().lower() or "development"

        log_level = environ.get("STATECORE_LOG_LEVEL", "INFO").strip().upper()
        if log_level not in LOG_LEVELS:
            log_level = "INFO"

        log_format = environ.get("STATECORE_LOG_FORMAT", "json").strip().lower()
        if log_format not in LOG_FORMATS:
            log_format = "json"

        return Settings(env=env, log_level=log_level, log_format=log_format)
