"""Tests for SRD reference data."""

from __future__ import annotations

import pytest

from dnd_sheet.data.srd import (
    SRD_BACKGROUNDS,
    SRD_CLASSES,
    SRD_RACES,
    filter_options,
    find_background,
    find_class,
    find_race,
)
from dnd_sheet.models.enums import Ability, Skill


class TestTables:
    """Tests for the shape of the SRD tables."""

    def test_counts(self) -> None:
        """Test the number of records in each table."""
        assert len(SRD_RACES) == 9
        assert len(SRD_CLASSES) == 12
        assert len(SRD_BACKGROUNDS) == 13

    @pytest.mark.parametrize("table", [SRD_RACES, SRD_CLASSES, SRD_BACKGROUNDS])
    def test_unique_ids(self, table: tuple) -> None:
        """Test ids are unique within a table."""
        ids = [item.id for item in table]
        assert len(ids) == len(set(ids))

    def test_class_hit_dice(self) -> None:
        """Test every class uses a standard hit die."""
        assert {srd_class.hit_die for srd_class in SRD_CLASSES} == {6, 8, 10, 12}

    def test_skill_names_resolve(self) -> None:
        """Test background and class skill names are real skills."""
        names = {skill.display_name.lower() for skill in Skill}
        for background in SRD_BACKGROUNDS:
            for skill_name in background.skill_proficiencies:
                assert skill_name.lower() in names
        for srd_class in SRD_CLASSES:
            for skill_name in srd_class.skill_options:
                assert skill_name == "Any" or skill_name.lower() in names

    def test_race_bonuses(self) -> None:
        """Test racial ability bonuses."""
        human = find_race("human")
        assert human is not None
        assert set(human.ability_bonuses) == set(Ability)
        assert all(bonus == 1 for bonus in human.ability_bonuses.values())

        half_orc = find_race("half-orc")
        assert half_orc is not None
        assert dict(half_orc.ability_bonuses) == {Ability.STR: 2, Ability.CON: 1}


class TestLookups:
    """Tests for find_* lookups."""

    def test_find_by_id(self) -> None:
        """Test lookup by id."""
        assert find_class("fighter").name == "Fighter"
        assert find_background("folk-hero").name == "Folk Hero"

    def test_find_by_english_name(self) -> None:
        """Test lookup by English name, case-insensitively."""
        assert find_race("HALF-ELF").id == "half-elf"

    def test_find_by_spanish_name(self) -> None:
        """Test lookup by Spanish name."""
        assert find_class("Guerrero").hit_die == 10
        assert find_race("mediano").id == "halfling"

    def test_not_found(self) -> None:
        """Test unknown names give None."""
        assert find_class("Artificer") is None
        assert find_race("") is None
        assert find_background("Pirate") is None


class TestFilterOptions:
    """Tests for filter_options."""

    def test_empty_query(self) -> None:
        """Test an empty query returns everything in order."""
        assert filter_options(SRD_CLASSES, "") == list(SRD_CLASSES)

    def test_substring_match(self) -> None:
        """Test substring matching on English names."""
        assert [race.id for race in filter_options(SRD_RACES, "elf")] == ["elf", "half-elf"]

    def test_spanish_match(self) -> None:
        """Test substring matching on Spanish names."""
        assert [srd_class.id for srd_class in filter_options(SRD_CLASSES, "mag")] == ["wizard"]

    def test_no_match(self) -> None:
        """Test a query with no match returns an empty list."""
        assert filter_options(SRD_BACKGROUNDS, "zzz") == []
