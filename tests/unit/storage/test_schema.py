"""Tests for the character file schema."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from dnd_sheet.core.constants import SCHEMA_VERSION
from dnd_sheet.core.exceptions import (
    InvalidCharacterFileError,
    MissingSchemaVersionError,
    UnsupportedSchemaVersionError,
)
from dnd_sheet.models.character import Character, SkillProficiency
from dnd_sheet.models.character_file import CharacterFile, CharacterFileMetadata
from dnd_sheet.models.enums import Ability, Skill
from dnd_sheet.storage import schema
from dnd_sheet.storage.schema import (
    create_character_file,
    create_default_character,
    create_empty_skills,
    create_file_metadata,
    deserialize_character,
    serialize_character,
    update_metadata,
    validate_character,
)


FIXED_NOW = datetime(2024, 3, 15, 12, 30, 45, 123000, tzinfo=UTC)


@pytest.fixture
def frozen_clock(monkeypatch: pytest.MonkeyPatch) -> datetime:
    """Pin the schema clock to a fixed instant."""
    monkeypatch.setattr(schema, "_utcnow", lambda: FIXED_NOW)
    return FIXED_NOW


def _file_text(metadata: dict[str, Any], character: Any = None) -> str:
    return json.dumps({"metadata": metadata, "character": {} if character is None else character})


class TestDefaults:
    """Tests for default characters and metadata."""

    def test_empty_skills(self) -> None:
        """Test empty skills cover all 18 skills untrained."""
        skills = create_empty_skills()
        assert all(not skills.get(skill).proficient for skill in Skill)

    def test_default_character(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default character's values."""
        monkeypatch.chdir(tmp_path)

        character = create_default_character()

        assert character.basics.name == "New Character"
        assert character.basics.level == 1
        assert character.basics.class_name == ""
        assert character.basics.experience_points == 0
        assert all(character.abilities.get(ability) == 10 for ability in Ability)
        assert character.saving_throws == []
        assert validate_character(character).is_valid

    def test_default_character_spanish(self) -> None:
        """Test the default name follows the locale."""
        assert create_default_character(locale="es").basics.name == "Nuevo Personaje"

    def test_default_character_locale_from_settings(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test the configured locale is used when none is given."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DND_SHEET_LOCALE", "es")

        assert create_default_character().basics.name == "Nuevo Personaje"

    def test_file_metadata(self, frozen_clock: datetime) -> None:
        """Test new metadata has the current version and equal timestamps."""
        metadata = create_file_metadata()

        assert metadata.version == SCHEMA_VERSION
        assert metadata.created_at == "2024-03-15T12:30:45.123Z"
        assert metadata.updated_at == metadata.created_at
        assert metadata.app_version == "0.1.0"


class TestCreateCharacterFile:
    """Tests for create_character_file."""

    def test_no_argument(self, frozen_clock: datetime) -> None:
        """Test a file with a default character."""
        file = create_character_file()

        assert file.character.basics.name == "New Character"
        assert file.metadata.created_at == "2024-03-15T12:30:45.123Z"

    def test_from_character(self, sample_character: Character) -> None:
        """Test a complete character is copied, not shared."""
        file = create_character_file(sample_character)

        assert file.character == sample_character
        assert file.character is not sample_character

    def test_partial_sections(self) -> None:
        """Test given sections replace the default sections whole."""
        file = create_character_file(
            {
                "basics": {"name": "Lia", "class": "Rogue"},
                "savingThrows": ["dexterity", "intelligence"],
            }
        )

        assert file.character.basics.name == "Lia"
        assert file.character.basics.class_name == "Rogue"
        assert file.character.basics.level == 1
        assert file.character.saving_throws == [Ability.DEX, Ability.INT]
        assert file.character.abilities.strength == 10

    def test_invalid_sections(self) -> None:
        """Test malformed sections raise InvalidCharacterFileError."""
        with pytest.raises(InvalidCharacterFileError):
            create_character_file({"abilities": {"strength": "strong"}})


class TestSerialization:
    """Tests for serialize_character and deserialize_character."""

    def test_output_format(self, sample_character_file: CharacterFile) -> None:
        """Test the JSON shape and indentation."""
        text = serialize_character(sample_character_file)
        payload = json.loads(text)

        assert text.startswith('{\n  "metadata": {')
        assert list(payload) == ["metadata", "character"]
        assert list(payload["metadata"]) == ["version", "createdAt", "updatedAt", "appVersion"]
        assert payload["character"]["basics"]["class"] == "Fighter"
        assert payload["character"]["basics"]["experiencePoints"] == 6500
        assert payload["character"]["savingThrows"] == ["strength", "constitution"]
        assert "sleightOfHand" in payload["character"]["skills"]

    def test_unset_optionals_omitted(self, sample_character_file: CharacterFile) -> None:
        """Test unset optional fields are left out."""
        payload = json.loads(serialize_character(sample_character_file))

        assert "subrace" not in payload["character"]["basics"]
        assert "expertise" not in payload["character"]["skills"]["stealth"]
        assert payload["character"]["skills"]["intimidation"]["expertise"] is True

    def test_round_trip(self, sample_character_file: CharacterFile) -> None:
        """Test serialize then deserialize gives an equal file."""
        restored = deserialize_character(serialize_character(sample_character_file))
        assert restored == sample_character_file

    def test_non_ascii_preserved(self) -> None:
        """Test non-ASCII names are written as-is."""
        file = create_character_file({"basics": {"name": "Iñigo"}})
        text = serialize_character(file)

        assert "Iñigo" in text
        assert deserialize_character(text).character.basics.name == "Iñigo"

    def test_older_version_loads(self) -> None:
        """Test files at or below the current version load."""
        file = deserialize_character(_file_text({"version": 0.5}))
        assert file.metadata.version == 0.5
        assert file.character == Character()

    def test_extra_fields_kept(self) -> None:
        """Test unknown fields survive a round trip."""
        text = _file_text({"version": 1}, {"notes": "Owes 5 gp"})
        restored = deserialize_character(serialize_character(deserialize_character(text)))
        assert restored.character.model_dump()["notes"] == "Owes 5 gp"

    def test_null_extra_fields_kept(self) -> None:
        """Test unknown fields holding null are written back."""
        text = _file_text({"version": 1}, {"notes": None, "basics": {"nickname": None}})

        payload = json.loads(serialize_character(deserialize_character(text)))

        assert payload["character"]["notes"] is None
        assert payload["character"]["basics"]["nickname"] is None
        assert "subrace" not in payload["character"]["basics"]

    def test_out_of_range_values_load(self) -> None:
        """Test ranges are not enforced on load."""
        text = _file_text({"version": 1}, {"basics": {"level": 0}})
        assert deserialize_character(text).character.basics.level == 0


class TestDeserializeErrors:
    """Tests for deserialization failures."""

    def test_invalid_json(self) -> None:
        """Test text that is not JSON."""
        with pytest.raises(InvalidCharacterFileError):
            deserialize_character("{invalid json}")

    @pytest.mark.parametrize(
        "text",
        [
            '{"character": {}}',
            '{"metadata": {"version": 1}}',
            "[]",
            "42",
            '{"metadata": [], "character": {}}',
            '{"metadata": {"version": 1}, "character": "Thorin"}',
        ],
    )
    def test_missing_sections(self, text: str) -> None:
        """Test documents without metadata and character objects."""
        with pytest.raises(InvalidCharacterFileError):
            deserialize_character(text)

    @pytest.mark.parametrize(
        "metadata",
        [{}, {"version": "1"}, {"version": None}, {"version": True}],
    )
    def test_missing_version(self, metadata: dict[str, Any]) -> None:
        """Test a missing or non-numeric version."""
        with pytest.raises(MissingSchemaVersionError):
            deserialize_character(_file_text(metadata))

    def test_version_too_new(self) -> None:
        """Test a file from a newer schema."""
        with pytest.raises(UnsupportedSchemaVersionError) as exc_info:
            deserialize_character(_file_text({"version": 999}))

        assert exc_info.value.version == 999
        assert exc_info.value.supported_version == SCHEMA_VERSION

    def test_malformed_fields(self) -> None:
        """Test sections of the wrong type."""
        with pytest.raises(InvalidCharacterFileError):
            deserialize_character(_file_text({"version": 1}, {"abilities": {"strength": "x"}}))

    @pytest.mark.parametrize(
        ("character", "location"),
        [
            ({"abilities": {"strength": "15"}}, ("character", "abilities", "strength")),
            ({"basics": {"level": "3"}}, ("character", "basics", "level")),
            ({"basics": {"level": 2.5}}, ("character", "basics", "level")),
            (
                {"skills": {"stealth": {"proficient": "yes"}}},
                ("character", "skills", "stealth", "proficient"),
            ),
            (
                {"skills": {"stealth": {"proficient": True, "expertise": 1}}},
                ("character", "skills", "stealth", "expertise"),
            ),
        ],
    )
    def test_field_types_not_coerced(
        self,
        character: dict[str, Any],
        location: tuple[str, ...],
    ) -> None:
        """Test values of the wrong JSON type are rejected, not converted."""
        with pytest.raises(InvalidCharacterFileError) as exc_info:
            deserialize_character(_file_text({"version": 1}, character))

        assert location in exc_info.value.details["errors"]

    def test_enum_strings_still_load(self) -> None:
        """Test saving throw names load under strict typing."""
        text = _file_text({"version": 1}, {"savingThrows": ["wisdom", "charisma"]})
        assert deserialize_character(text).character.saving_throws == [Ability.WIS, Ability.CHA]

    def test_source_file_recorded(self) -> None:
        """Test the source file is attached to the error."""
        with pytest.raises(InvalidCharacterFileError) as exc_info:
            deserialize_character("not json", source_file="thorin.dnd5e")

        assert exc_info.value.details["source_file"] == "thorin.dnd5e"


class TestValidateCharacter:
    """Tests for validate_character."""

    def test_valid(self, sample_character: Character) -> None:
        """Test a complete character has no errors."""
        result = validate_character(sample_character)
        assert result.is_valid
        assert result.errors == []

    def test_collects_all_errors(self) -> None:
        """Test every problem is reported at once."""
        character = Character.model_validate(
            {"basics": {"name": "", "level": 0}, "abilities": {"strength": 35}}
        )

        result = validate_character(character)

        assert not result.is_valid
        assert len(result.errors) >= 3
        assert "Character name is required" in result.errors
        assert "Level must be between 1 and 20" in result.errors
        assert "strength must be between 1 and 30" in result.errors

    def test_blank_name(self) -> None:
        """Test a whitespace-only name counts as missing."""
        character = Character.model_validate({"basics": {"name": "   "}})
        assert validate_character(character).errors == ["Character name is required"]

    def test_each_bad_score_reported(self) -> None:
        """Test one error per bad ability score."""
        character = Character.model_validate(
            {"basics": {"name": "Edge"}, "abilities": {"dexterity": 0, "charisma": 31}}
        )
        assert validate_character(character).errors == [
            "dexterity must be between 1 and 30",
            "charisma must be between 1 and 30",
        ]

    def test_boundaries_valid(self) -> None:
        """Test the inclusive bounds pass."""
        character = Character.model_validate(
            {
                "basics": {"name": "Edge", "level": 20},
                "abilities": {"strength": 1, "dexterity": 30},
            }
        )
        assert validate_character(character).is_valid


class TestUpdateMetadata:
    """Tests for update_metadata."""

    def test_refreshes_updated_at(self, frozen_clock: datetime) -> None:
        """Test updated_at moves to now and created_at is kept."""
        metadata = CharacterFileMetadata(
            version=1,
            created_at="2024-01-01T00:00:00.000Z",
            updated_at="2024-01-01T00:00:00.000Z",
            app_version="0.0.9",
        )

        updated = update_metadata(metadata)

        assert updated.created_at == "2024-01-01T00:00:00.000Z"
        assert updated.updated_at == "2024-03-15T12:30:45.123Z"
        assert updated.version == 1
        assert updated.app_version == "0.0.9"
        assert metadata.updated_at == "2024-01-01T00:00:00.000Z"

    def test_strictly_later_within_same_millisecond(self, frozen_clock: datetime) -> None:
        """Test consecutive updates never share a timestamp."""
        metadata = create_file_metadata()

        first = update_metadata(metadata)
        second = update_metadata(first)

        assert metadata.updated_at == "2024-03-15T12:30:45.123Z"
        assert first.updated_at == "2024-03-15T12:30:45.124Z"
        assert second.updated_at == "2024-03-15T12:30:45.125Z"

    def test_unparseable_previous_timestamp(self, frozen_clock: datetime) -> None:
        """Test a garbage updated_at is simply replaced."""
        metadata = CharacterFileMetadata(version=1, updated_at="yesterday")
        assert update_metadata(metadata).updated_at == "2024-03-15T12:30:45.123Z"

    def test_character_untouched(self, sample_character_file: CharacterFile) -> None:
        """Test updating metadata does not alter the character."""
        before = sample_character_file.character.model_copy(deep=True)
        update_metadata(sample_character_file.metadata)
        assert sample_character_file.character == before
        assert sample_character_file.character.skills.get(Skill.INTIMIDATION) == SkillProficiency(
            proficient=True, expertise=True
        )
