"""Tests for settings loading."""

import pytest
from pathlib import Path

from tag_text.config import Settings, get_settings, load_settings


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self):
        settings = Settings()

        assert settings.default_format == "ansi"
        assert settings.strict is False
        assert settings.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch):
        """Test that TAG_TEXT_* variables are read."""
        monkeypatch.setenv("TAG_TEXT_FORMAT", "json")
        monkeypatch.setenv("TAG_TEXT_STRICT", "1")

        settings = Settings()

        assert settings.default_format == "json"
        assert settings.strict is True

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_load_settings_from_env_file(self, tmp_path: Path):
        """Test loading settings from a specific .env file."""
        env_file = tmp_path / "custom.env"
        env_file.write_text("TAG_TEXT_FORMAT=markup\nTAG_TEXT_LOG_LEVEL=DEBUG\n")

        settings = load_settings(env_file)

        assert settings.default_format == "markup"
        assert settings.log_level == "DEBUG"
        assert get_settings() is settings
