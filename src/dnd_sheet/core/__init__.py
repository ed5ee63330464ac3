"""Core module providing configuration, logging, constants and exceptions.

Exports:
    Exceptions:
        DndSheetError: Base exception for all application errors.
        OutOfRangeError: Ability score or level outside its bounds.
        UnknownClassError: Class name missing from the SRD tables.
        CharacterFileError: Character file persistence errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
"""

from __future__ import annotations

from dnd_sheet.core.config import (
    Settings,
    StorageSettings,
    clear_settings_cache,
    get_settings,
)
from dnd_sheet.core.exceptions import (
    AbilityScoreError,
    CharacterFileError,
    CharacterFileIOError,
    CharacterLevelError,
    ConfigurationError,
    DndSheetError,
    InvalidCharacterFileError,
    MissingSchemaVersionError,
    OutOfRangeError,
    RulesError,
    UnknownClassError,
    UnsupportedSchemaVersionError,
)
from dnd_sheet.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Base exception
    "DndSheetError",
    # Rules exceptions
    "RulesError",
    "OutOfRangeError",
    "AbilityScoreError",
    "CharacterLevelError",
    "UnknownClassError",
    # Character file exceptions
    "CharacterFileError",
    "InvalidCharacterFileError",
    "MissingSchemaVersionError",
    "UnsupportedSchemaVersionError",
    "CharacterFileIOError",
    # Configuration
    "ConfigurationError",
    "Settings",
    "StorageSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
