"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from storage_ls.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.config_path: str = self._get_env("STORAGE_LS_CONFIG", "storage.yaml")
        self.log_level: str = self._get_env("STORAGE_LS_LOG_LEVEL", "WARNING")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key) or default

    def log_level_value(self) -> int:
        """Numeric logging level, raising on unknown level names."""
        level = logging.getLevelName(self.log_level.strip().upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        return level


# Global settings instance
settings = Settings()
