"""
Tests for Settings.
"""

from pathlib import Path

import pytest

from windsurf_recent.config.settings import Settings
from windsurf_recent.exceptions import ConfigurationError

_ENV_KEYS = (
    "WINDSURF_STORAGE_FILE",
    "WINDSURF_APP_NAME",
    "WINDSURF_COMMAND",
    "WINDSURF_RECENT_LOG_LEVEL",
    "WINDSURF_RECENT_UI_THEME",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestSettings:
    """Test cases for Settings."""

    def test_defaults_macos(self, tmp_path):
        settings = Settings(home_dir=tmp_path, platform="darwin")

        assert settings.home_dir == tmp_path
        assert settings.storage_file == (
            tmp_path / "Library" / "Application Support" / "Windsurf" / "User" / "globalStorage" / "storage.json"
        )
        assert settings.app_name == "Windsurf"
        assert settings.command == "windsurf"
        assert settings.log_level == "INFO"
        assert settings.ui_theme == "dark"

    def test_default_storage_file_linux(self, tmp_path):
        settings = Settings(home_dir=tmp_path, platform="linux")

        assert settings.storage_file == tmp_path / ".config" / "Windsurf" / "User" / "globalStorage" / "storage.json"

    def test_home_dir_defaults_to_user_home(self):
        assert Settings(platform="linux").home_dir == Path.home()

    def test_env_overrides(self, tmp_path, monkeypatch):
        override = tmp_path / "custom.json"
        monkeypatch.setenv("WINDSURF_STORAGE_FILE", str(override))
        monkeypatch.setenv("WINDSURF_APP_NAME", "Windsurf - Next")
        monkeypatch.setenv("WINDSURF_COMMAND", "windsurf-next")
        monkeypatch.setenv("WINDSURF_RECENT_LOG_LEVEL", "debug")
        monkeypatch.setenv("WINDSURF_RECENT_UI_THEME", "Light")

        settings = Settings(home_dir=tmp_path, platform="darwin")

        assert settings.storage_file == override
        assert settings.app_name == "Windsurf - Next"
        assert settings.command == "windsurf-next"
        assert settings.log_level == "DEBUG"
        assert settings.ui_theme == "light"

    def test_blank_env_falls_back_to_default(self, tmp_path, monkeypatch):
        monkeypatch.setenv("WINDSURF_APP_NAME", "   ")

        assert Settings(home_dir=tmp_path, platform="darwin").app_name == "Windsurf"

    def test_invalid_log_level(self, tmp_path, monkeypatch):
        monkeypatch.setenv("WINDSURF_RECENT_LOG_LEVEL", "chatty")

        with pytest.raises(ConfigurationError, match="Invalid log level 'CHATTY'"):
            Settings(home_dir=tmp_path, platform="darwin")
