"""Environment settings."""

import os
from typing import Optional


class Settings:
    """Application settings from environment variables."""

    @staticmethod
    def get(key: str, default: Optional[str] = None, required: bool = False) -> str:
        """
        Get environment variable value.

        Args:
            key: Environment variable name
            default: Default value if not set
            required: Whether the variable is required

        Returns:
            str: Environment variable value

        Raises:
            ValueError: If required variable is not set
        """
        value = os.getenv(key, default)
        if required and not value:
            raise ValueError(f"Required environment variable not set: {key}")
        return value or ""

    @staticmethod
    def config_path() -> str:
        """Checks file path (CHECKCHAIN_CONFIG, default config/checks.yaml)."""
        return Settings.get("CHECKCHAIN_CONFIG", "config/checks.yaml")

    @staticmethod
    def log_level() -> str:
        """Log level override (CHECKCHAIN_LOG_LEVEL), empty when unset."""
        return Settings.get("CHECKCHAIN_LOG_LEVEL").upper()
