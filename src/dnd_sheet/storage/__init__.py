"""Storage module for character file persistence.

Provides:
- The versioned character file schema (defaults, JSON, validation)
- Saving and loading character files on disk
"""

from dnd_sheet.storage.files import (
    default_character_path,
    ensure_extension,
    load_character_file,
    save_character_file,
)
from dnd_sheet.storage.schema import (
    ValidationResult,
    create_character_file,
    create_default_character,
    create_empty_skills,
    create_file_metadata,
    deserialize_character,
    serialize_character,
    update_metadata,
    validate_character,
)

__all__ = [
    # Schema
    "ValidationResult",
    "create_empty_skills",
    "create_default_character",
    "create_file_metadata",
    "create_character_file",
    "serialize_character",
    "deserialize_character",
    "validate_character",
    "update_metadata",
    # Files
    "ensure_extension",
    "default_character_path",
    "save_character_file",
    "load_character_file",
]
