"""Character file schema: defaults, JSON serialization and validation.

A character file moves between three states only: in memory before its
first save, serialized JSON text, and deserialized back into memory.
There is no partial state: ``serialize_character`` and
``deserialize_character`` either produce a complete result or raise.

Deserialization checks, in order:

1. The text is JSON whose root object has ``metadata`` and ``character``
   objects (``InvalidCharacterFileError``).
2. ``metadata.version`` is a number (``MissingSchemaVersionError``).
3. ``metadata.version`` is not newer than ``SCHEMA_VERSION``
   (``UnsupportedSchemaVersionError``).

Older or equal versions are loaded without migration. Field types are
checked strictly on load: a score written as ``"15"`` or a flag written as
``1`` is rejected rather than converted. Ranges are not checked on load;
``validate_character`` reports those.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import ValidationError

from dnd_sheet.core.config import get_settings
from dnd_sheet.core.constants import (
    DEFAULT_CHARACTER_NAMES,
    SCHEMA_VERSION,
)
from dnd_sheet.core.exceptions import (
    InvalidCharacterFileError,
    MissingSchemaVersionError,
    UnsupportedSchemaVersionError,
)
from dnd_sheet.core.logging import get_logger
from dnd_sheet.engine.abilities import is_valid_score
from dnd_sheet.engine.proficiency import is_valid_level
from dnd_sheet.models.character import Abilities, BasicInfo, Character, Skills
from dnd_sheet.models.character_file import CharacterFile, CharacterFileMetadata
from dnd_sheet.models.enums import Ability


logger = get_logger(__name__)


# =============================================================================
# Timestamps
# =============================================================================


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _format_timestamp(moment: datetime) -> str:
    """Render a UTC datetime as ISO-8601 with millisecond precision and ``Z``."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _parse_timestamp(value: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


# =============================================================================
# Defaults
# =============================================================================


def create_empty_skills() -> Skills:
    """Create skill entries for all 18 skills with no proficiency."""
    return Skills()


def create_default_character(*, locale: str | None = None) -> Character:
    """Create a new level 1 character with every ability at 10.

    Args:
        locale: Language for the placeholder name. Defaults to the
            configured ``Settings.locale``.

    Returns:
        A character named "New Character" (or its translation) with empty
        race, class and background, untrained skills and no saving throw
        proficiencies.
    """
    locale = locale or get_settings().locale
    name = DEFAULT_CHARACTER_NAMES.get(locale, DEFAULT_CHARACTER_NAMES["en"])
    return Character(
        basics=BasicInfo(
            name=name,
            race="",
            class_name="",
            level=1,
            background="",
            experience_points=0,
        ),
        abilities=Abilities(),
        skills=create_empty_skills(),
        saving_throws=[],
    )


def create_file_metadata() -> CharacterFileMetadata:
    """Create metadata for a new file: current version, both timestamps now."""
    now = _format_timestamp(_utcnow())
    return CharacterFileMetadata(
        version=SCHEMA_VERSION,
        created_at=now,
        updated_at=now,
        app_version=get_settings().app_version,
    )


def _field_name_for(key: str) -> str:
    for name, info in Character.model_fields.items():
        if key in (name, info.alias):
            return name
    return key


def create_character_file(
    character: Character | Mapping[str, Any] | None = None,
) -> CharacterFile:
    """Wrap a character in a new file with fresh metadata.

    Args:
        character: A complete character, or a mapping of top-level sections
            (``basics``, ``abilities``, ``skills``, ``saving_throws``) that
            replace the corresponding sections of the default character.
            Sections are replaced whole, not merged field by field.

    Returns:
        A new CharacterFile.
    """
    if isinstance(character, Character):
        merged = character.model_copy(deep=True)
    else:
        default = create_default_character()
        sections: dict[str, Any] = {
            name: getattr(default, name) for name in Character.model_fields
        }
        for key, value in (character or {}).items():
            sections[_field_name_for(key)] = value
        try:
            merged = Character.model_validate(sections)
        except ValidationError as exc:
            raise InvalidCharacterFileError(
                "Invalid character data",
                details={"errors": exc.error_count()},
            ) from exc
    return CharacterFile(metadata=create_file_metadata(), character=merged)


# =============================================================================
# Serialization
# =============================================================================


def serialize_character(character_file: CharacterFile) -> str:
    """Serialize a character file to pretty-printed JSON.

    Keys keep the schema's field order and use 2-space indentation so save
    files diff cleanly. Declared optional fields that are None are omitted;
    unknown extra keys are written back unchanged.
    """
    payload = character_file.model_dump(mode="json", by_alias=True)
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    logger.debug(
        "Serialized character",
        name=character_file.character.basics.name,
        size=len(text),
    )
    return text


def deserialize_character(text: str, *, source_file: str | None = None) -> CharacterFile:
    """Parse a character file.

    Args:
        text: JSON text of the file.
        source_file: Where the text came from, for error context.

    Returns:
        The parsed character file.

    Raises:
        InvalidCharacterFileError: If the text is not JSON, lacks the
            ``metadata``/``character`` objects, or has fields of the wrong
            type.
        MissingSchemaVersionError: If ``metadata.version`` is not a number.
        UnsupportedSchemaVersionError: If the file is newer than
            ``SCHEMA_VERSION``.
    """
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("Rejected character file: not JSON", source_file=source_file)
        raise InvalidCharacterFileError(
            "Invalid character file format: not valid JSON",
            source_file=source_file,
            details={"error": str(exc)},
        ) from exc

    if (
        not isinstance(parsed, dict)
        or not isinstance(parsed.get("metadata"), dict)
        or not isinstance(parsed.get("character"), dict)
    ):
        logger.warning("Rejected character file: missing sections", source_file=source_file)
        raise InvalidCharacterFileError(
            "Invalid character file format: expected 'metadata' and 'character' objects",
            source_file=source_file,
        )

    version = parsed["metadata"].get("version")
    if (
        isinstance(version, bool)
        or not isinstance(version, (int, float))
        or not math.isfinite(version)
    ):
        logger.warning("Rejected character file: no version", source_file=source_file)
        raise MissingSchemaVersionError(
            "Missing or invalid schema version",
            source_file=source_file,
            details={"version": version},
        )

    if version > SCHEMA_VERSION:
        logger.warning(
            "Rejected character file: version too new",
            source_file=source_file,
            version=version,
            supported_version=SCHEMA_VERSION,
        )
        raise UnsupportedSchemaVersionError(version, SCHEMA_VERSION, source_file=source_file)

    try:
        character_file = CharacterFile.model_validate_json(text, strict=True)
    except ValidationError as exc:
        logger.warning(
            "Rejected character file: malformed fields",
            source_file=source_file,
            errors=exc.error_count(),
        )
        raise InvalidCharacterFileError(
            "Invalid character file format: malformed fields",
            source_file=source_file,
            details={"errors": [error["loc"] for error in exc.errors()]},
        ) from exc

    logger.debug(
        "Deserialized character",
        name=character_file.character.basics.name,
        version=version,
    )
    return character_file


# =============================================================================
# Validation
# =============================================================================


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of ``validate_character``.

    Attributes:
        errors: Every problem found, in check order.
    """

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no errors were found."""
        return not self.errors


def validate_character(character: Character) -> ValidationResult:
    """Check a character for completeness and legal values.

    All problems are collected; this never raises. Checks are: a non-blank
    name, a level in [1, 20], and each ability score in [1, 30].

    Example:
        >>> result = validate_character(create_default_character())
        >>> result.is_valid
        True
    """
    errors: list[str] = []

    if not character.basics.name or not character.basics.name.strip():
        errors.append("Character name is required")

    if not is_valid_level(character.basics.level):
        errors.append("Level must be between 1 and 20")

    for ability in Ability:
        if not is_valid_score(character.abilities.get(ability)):
            errors.append(f"{ability.value} must be between 1 and 30")

    return ValidationResult(errors=errors)


def update_metadata(metadata: CharacterFileMetadata) -> CharacterFileMetadata:
    """Refresh ``updated_at`` for a save, keeping every other field.

    The new timestamp is always later than the previous ``updated_at``,
    even when two saves land within the same millisecond.
    """
    now = _utcnow()
    previous = _parse_timestamp(metadata.updated_at)
    if previous is not None and now <= previous:
        now = previous + timedelta(milliseconds=1)
    return metadata.model_copy(update={"updated_at": _format_timestamp(now)})


__all__ = [
    "ValidationResult",
    "create_empty_skills",
    "create_default_character",
    "create_file_metadata",
    "create_character_file",
    "serialize_character",
    "deserialize_character",
    "validate_character",
    "update_metadata",
]
