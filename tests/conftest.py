"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the D&D 5E character sheet test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from dnd_sheet.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DND_SHEET_APP_VERSION": "9.9.9",
        "DND_SHEET_DEBUG": "true",
        "DND_SHEET_LOG_LEVEL": "DEBUG",
        "DND_SHEET_LOCALE": "es",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def sample_character_stats() -> dict[str, int]:
    """Provide sample character ability scores.

    Returns:
        Dictionary of ability scores.
    """
    return {
        "strength": 16,
        "dexterity": 14,
        "constitution": 16,
        "intelligence": 10,
        "wisdom": 12,
        "charisma": 8,
    }


@pytest.fixture
def sample_character_data(sample_character_stats: dict[str, int]) -> dict[str, Any]:
    """Provide sample character data in on-disk (camelCase) form.

    Args:
        sample_character_stats: Character ability scores.

    Returns:
        Dictionary of character data.
    """
    return {
        "basics": {
            "name": "Thorin",
            "race": "dwarf",
            "class": "Fighter",
            "level": 5,
            "background": "soldier",
            "experiencePoints": 6500,
        },
        "abilities": sample_character_stats,
        "skills": {
            "athletics": {"proficient": True},
            "perception": {"proficient": True},
            "intimidation": {"proficient": True, "expertise": True},
        },
        "savingThrows": ["strength", "constitution"],
    }


@pytest.fixture
def sample_character(sample_character_data: dict[str, Any]) -> Any:
    """Create a sample Character instance for testing.

    Args:
        sample_character_data: Character data dictionary.

    Returns:
        Character instance.
    """
    from dnd_sheet.models.character import Character

    return Character.model_validate(sample_character_data)


@pytest.fixture
def sample_character_file(sample_character: Any) -> Any:
    """Wrap the sample character in a new character file.

    Args:
        sample_character: Sample character instance.

    Returns:
        CharacterFile instance.
    """
    from dnd_sheet.storage.schema import create_character_file

    return create_character_file(sample_character)


# =============================================================================
# Utility Fixtures
# =============================================================================


@pytest.fixture
def temp_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point character storage at a temporary directory.

    Args:
        tmp_path: Pytest temporary path fixture.
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        Path to the temporary characters directory (not yet created).
    """
    characters_dir = tmp_path / "data" / "characters"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DND_SHEET_STORAGE_CHARACTERS_PATH", str(characters_dir))
    return characters_dir
