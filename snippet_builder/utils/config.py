"""Configuration management for environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

from snippet_builder.common.constants import (
    DEFAULT_HISTORY_TIMEOUT_SECONDS,
    DEFAULT_MAX_CONCURRENCY,
)
from snippet_builder.utils.exceptions import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


class Config:
    """Build configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Load configuration from .env file and environment."""
        env_path = Path(".env")
        if env_path.exists():
            load_dotenv(env_path)

        self.content_root = Path(os.getenv("SNIPPET_CONTENT_ROOT", "content"))
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.history_timeout = self._get_float(
            "HISTORY_TIMEOUT_SECONDS", DEFAULT_HISTORY_TIMEOUT_SECONDS
        )
        self.history_enabled = self._get_bool("HISTORY_ENABLED", True)
        self.max_concurrency = self._get_int("MAX_CONCURRENCY", DEFAULT_MAX_CONCURRENCY)

    def _get_float(self, key: str, default: float) -> float:
        """Get a positive float environment variable.

        Raises:
            ConfigurationError: If the value is not a positive number
        """
        raw = os.getenv(key)
        if raw is None or raw.strip() == "":
            return default
        try:
            value = float(raw)
        except ValueError as e:
            raise ConfigurationError(f"{key} must be a number, got '{raw}'") from e
        if value <= 0:
            raise ConfigurationError(f"{key} must be positive, got {value}")
        return value

    def _get_int(self, key: str, default: int) -> int:
        """Get a positive integer environment variable.

        Raises:
            ConfigurationError: If the value is not a positive integer
        """
        raw = os.getenv(key)
        if raw is None or raw.strip() == "":
            return default
        try:
            value = int(raw)
        except ValueError as e:
            raise ConfigurationError(f"{key} must be an integer, got '{raw}'") from e
        if value < 1:
            raise ConfigurationError(f"{key} must be at least 1, got {value}")
        return value

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get a boolean environment variable.

        Raises:
            ConfigurationError: If the value is not a recognised boolean
        """
        raw = os.getenv(key)
        if raw is None or raw.strip() == "":
            return default
        lowered = raw.strip().lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
        raise ConfigurationError(f"{key} must be a boolean, got '{raw}'")
