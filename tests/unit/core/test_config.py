"""Tests for configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest

from dnd_sheet.core.config import (
    Settings,
    StorageSettings,
    clear_settings_cache,
    get_settings,
)
from dnd_sheet.core.exceptions import ConfigurationError


class TestStorageSettings:
    """Tests for StorageSettings configuration."""

    def test_default_values(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default storage settings."""
        monkeypatch.chdir(tmp_path)

        settings = StorageSettings()

        assert settings.characters_path == Path("data/characters")
        assert settings.default_extension == ".dnd5e"

    def test_extension_normalized(self) -> None:
        """Test a bare or uppercase extension is normalized."""
        assert StorageSettings(default_extension="JSON").default_extension == ".json"
        assert StorageSettings(default_extension=".dnd5e").default_extension == ".dnd5e"

    def test_extension_validation(self) -> None:
        """Test that only loadable extensions are accepted."""
        with pytest.raises(ConfigurationError) as exc_info:
            StorageSettings(default_extension=".txt")

        assert "default_extension" in str(exc_info.value)

    def test_path_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test characters path can be set from the environment."""
        monkeypatch.setenv("DND_SHEET_STORAGE_CHARACTERS_PATH", str(tmp_path / "chars"))

        settings = StorageSettings()

        assert settings.characters_path == tmp_path / "chars"


class TestSettings:
    """Tests for main Settings configuration."""

    def test_default_settings(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test default settings initialization."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.app_name == "D&D 5E Character Sheet"
        assert settings.app_version == "0.1.0"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.locale == "en"
        assert settings.is_production is True

    def test_settings_from_env(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        mock_env_vars: dict[str, str],
    ) -> None:
        """Test settings loaded from environment variables."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.app_version == "9.9.9"
        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.locale == "es"
        assert settings.is_production is False

    def test_invalid_locale_rejected(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test an unsupported locale fails to load."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DND_SHEET_LOCALE", "fr")

        with pytest.raises(ConfigurationError):
            get_settings()


class TestGetSettings:
    """Tests for the settings singleton."""

    def test_get_settings_cached(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that get_settings returns cached instance."""
        monkeypatch.chdir(tmp_path)

        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_clear_settings_cache(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that clearing cache creates new instance."""
        monkeypatch.chdir(tmp_path)

        settings1 = get_settings()
        clear_settings_cache()
        settings2 = get_settings()

        assert settings1 is not settings2
