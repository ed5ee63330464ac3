"""Pydantic V2 schemas for the character file envelope.

A ``CharacterFile`` wraps a ``Character`` with metadata at the save
boundary. On disk it is a UTF-8 JSON object::

    {
      "metadata": {"version": 1, "createdAt": "...", "updatedAt": "...", "appVersion": "0.1.0"},
      "character": {"basics": {...}, "abilities": {...}, "skills": {...}, "savingThrows": [...]}
    }
"""

from __future__ import annotations

from pydantic import Field

from dnd_sheet.models.character import CamelModel, Character


class CharacterFileMetadata(CamelModel):
    """Metadata written alongside every saved character.

    Attributes:
        version: Schema version the file was written with.
        created_at: ISO-8601 UTC timestamp of first creation. Never changes.
        updated_at: ISO-8601 UTC timestamp of the latest save.
        app_version: Version of the application that wrote the file.
    """

    version: int | float
    created_at: str = ""
    updated_at: str = ""
    app_version: str = ""


class CharacterFile(CamelModel):
    """Metadata plus character: the unit of serialization."""

    metadata: CharacterFileMetadata
    character: Character = Field(default_factory=Character)


__all__ = [
    "CharacterFileMetadata",
    "CharacterFile",
]
