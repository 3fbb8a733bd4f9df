"""
Configuration settings for the application.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from windsurf_recent.exceptions import ConfigurationError
from windsurf_recent.utils.windsurf_paths import default_storage_file

# Load environment variables from .env file
_ = load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(
        self, home_dir: Optional[Path] = None, platform: Optional[str] = None
    ):
        # Resolved once; everything downstream receives these explicitly
        self.platform: str = platform or sys.platform
        self.home_dir: Path = Path(home_dir) if home_dir else Path.home()

        override = self._get_env("WINDSURF_STORAGE_FILE", "")
        self.storage_file: Path = (
            Path(os.path.expanduser(override))
            if override
            else default_storage_file(self.home_dir, self.platform)
        )
        self.app_name: str = self._get_env("WINDSURF_APP_NAME", "Windsurf")
        self.command: str = self._get_env("WINDSURF_COMMAND", "windsurf")
        self.log_level: str = self._get_log_level("WINDSURF_RECENT_LOG_LEVEL", "INFO")
        self.ui_theme: str = self._get_env("WINDSURF_RECENT_UI_THEME", "dark").lower()

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default).strip() or default

    def _get_log_level(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if it is not a known level."""
        value = self._get_env(key, default).upper()
        if value not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level {value!r} in {key}; expected one of {', '.join(_LOG_LEVELS)}"
            )
        return value

    def configure_logging(self) -> None:
        """Configure root logging for an entry point."""
        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


# Global settings instance
settings = Settings()
