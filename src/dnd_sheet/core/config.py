"""Configuration management for the D&D 5E character sheet core.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides.

Example:
    >>> from dnd_sheet.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.app_version)
    '0.1.0'

Environment Variables:
    DND_SHEET_APP_VERSION: Version string stamped into saved files
    DND_SHEET_LOCALE: Display language for default names and labels (en, es)
    DND_SHEET_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DND_SHEET_STORAGE_CHARACTERS_PATH: Directory for saved character files
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnd_sheet.core.exceptions import ConfigurationError


class StorageSettings(BaseSettings):
    """Configuration for character file storage.

    Attributes:
        characters_path: Directory where character files are saved by default.
        default_extension: Extension appended to paths that have none.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_SHEET_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    characters_path: Path = Field(
        default=Path("data/characters"),
        description="Directory for saved character files",
    )
    default_extension: str = Field(
        default=".dnd5e",
        description="Extension for new character files",
    )

    @field_validator("default_extension", mode="after")
    @classmethod
    def validate_extension(cls, value: str) -> str:
        """Ensure the default extension is one the loader accepts.

        Args:
            value: The configured extension.

        Returns:
            The normalized extension.

        Raises:
            ConfigurationError: If the extension is not .dnd5e or .json.
        """
        normalized = value if value.startswith(".") else f".{value}"
        normalized = normalized.lower()
        if normalized not in (".dnd5e", ".json"):
            raise ConfigurationError(
                f"default_extension must be .dnd5e or .json, got {value!r}",
                config_key="default_extension",
            )
        return normalized


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name.
        app_version: Application version, written to file metadata.
        debug: Enable debug mode.
        log_level: Application logging level.
        locale: Language for default character names and modifier labels.
        storage: Character file storage settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_SHEET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="D&D 5E Character Sheet",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    locale: Literal["en", "es"] = Field(
        default="en",
        description="Display language",
    )

    storage: StorageSettings = Field(default_factory=StorageSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode.

        Returns:
            True if not in debug mode.
        """
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Primarily useful for testing or when environment variables have
    changed at runtime.
    """
    get_settings.cache_clear()


__all__ = [
    "StorageSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
