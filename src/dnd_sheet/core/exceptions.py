"""Custom exception hierarchy for the D&D 5E character sheet core.

This module defines the exceptions raised by the rules calculators and the
character file schema. All exceptions inherit from DndSheetError, enabling
unified error handling at the application boundary while preserving
domain-specific context.

Lookups that may legitimately find nothing (an unknown class name in a
reference table, a modifier outside the table) return ``None`` instead of
raising. Exceptions are reserved for operations that must succeed.

Example:
    >>> from dnd_sheet.core.exceptions import AbilityScoreError
    >>> raise AbilityScoreError(35)
"""

from __future__ import annotations

from typing import Any


class DndSheetError(Exception):
    """Base exception for all character sheet errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Rules Domain Exceptions
# =============================================================================


class RulesError(DndSheetError):
    """Base exception for all rules calculation errors."""


class OutOfRangeError(RulesError):
    """Raised when a numeric rules input falls outside its defined bounds.

    The calculators never clamp; the offending value is reported back to
    the caller in ``invalid_value``.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        minimum: int | None = None,
        maximum: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize range error with bound context.

        Args:
            message: Human-readable error description.
            field_name: Name of the value that was out of range.
            invalid_value: The rejected value.
            minimum: Inclusive lower bound.
            maximum: Inclusive upper bound.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        combined_details["invalid_value"] = invalid_value
        if minimum is not None:
            combined_details["minimum"] = minimum
        if maximum is not None:
            combined_details["maximum"] = maximum
        self.invalid_value = invalid_value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(message, details=combined_details)


class AbilityScoreError(OutOfRangeError):
    """Raised when an ability score is not an integer in [1, 30]."""

    def __init__(self, score: Any, *, ability: str | None = None) -> None:
        """Initialize ability score error.

        Args:
            score: The rejected score.
            ability: Name of the ability the score belongs to, if known.
        """
        super().__init__(
            f"Invalid ability score: {score}. Must be between 1 and 30.",
            field_name=ability,
            invalid_value=score,
            minimum=1,
            maximum=30,
        )


class CharacterLevelError(OutOfRangeError):
    """Raised when a character level is not an integer in [1, 20]."""

    def __init__(self, level: Any) -> None:
        """Initialize character level error.

        Args:
            level: The rejected level.
        """
        super().__init__(
            f"Invalid character level: {level}. Must be between 1 and 20.",
            field_name="level",
            invalid_value=level,
            minimum=1,
            maximum=20,
        )


class UnknownClassError(RulesError):
    """Raised when a derived value requires a class that is not in the SRD tables."""

    def __init__(self, class_name: str) -> None:
        """Initialize unknown class error.

        Args:
            class_name: The class name that could not be resolved.
        """
        self.class_name = class_name
        super().__init__(f"Unknown class: {class_name}", details={"class_name": class_name})


# =============================================================================
# Character File Exceptions
# =============================================================================


class CharacterFileError(DndSheetError):
    """Base exception for character file persistence errors."""

    def __init__(
        self,
        message: str,
        *,
        source_file: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize character file error with source file context.

        Args:
            message: Human-readable error description.
            source_file: Path to the file that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if source_file:
            combined_details["source_file"] = source_file
        super().__init__(message, details=combined_details)


class InvalidCharacterFileError(CharacterFileError):
    """Raised when a document is not a character file at all.

    Covers malformed JSON, a root that is not an object, absent
    ``metadata``/``character`` sections, and sections of the wrong shape.
    """


class MissingSchemaVersionError(CharacterFileError):
    """Raised when ``metadata.version`` is absent or not a number."""


class UnsupportedSchemaVersionError(CharacterFileError):
    """Raised when a file was written by a newer schema than this build supports."""

    def __init__(
        self,
        version: int | float,
        supported_version: int,
        *,
        source_file: str | None = None,
    ) -> None:
        """Initialize unsupported version error.

        Args:
            version: The version declared by the file.
            supported_version: The newest version this build understands.
            source_file: Path to the file, if it came from disk.
        """
        self.version = version
        self.supported_version = supported_version
        super().__init__(
            f"Character file version {version} is too new; "
            f"newest supported version is {supported_version}",
            source_file=source_file,
            details={"version": version, "supported_version": supported_version},
        )


class CharacterFileIOError(CharacterFileError):
    """Raised when a character file cannot be read from or written to disk."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(DndSheetError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


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
    # Configuration exceptions
    "ConfigurationError",
]
