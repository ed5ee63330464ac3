"""Enumeration types for the D&D 5E character sheet core.

These enums define the closed sets of abilities and skills that every
calculator and the persisted character schema are keyed by.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType


class Ability(StrEnum):
    """D&D 5E ability scores.

    The six core abilities that define a character's physical
    and mental characteristics.
    """

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def full_name(self) -> str:
        """Get the full name of the ability.

        Returns:
            Full ability name (e.g., 'Strength' for STR).
        """
        return self.value.capitalize()

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation.

        Returns:
            Three-letter abbreviation (e.g., 'STR').
        """
        return self.name


class Skill(StrEnum):
    """The 18 D&D 5E skills, in the order they appear on a character sheet.

    Each skill is linked to exactly one ability used for skill checks.
    The values double as attribute names on ``Skills``.
    """

    ACROBATICS = "acrobatics"
    ANIMAL_HANDLING = "animal_handling"
    ARCANA = "arcana"
    ATHLETICS = "athletics"
    DECEPTION = "deception"
    HISTORY = "history"
    INSIGHT = "insight"
    INTIMIDATION = "intimidation"
    INVESTIGATION = "investigation"
    MEDICINE = "medicine"
    NATURE = "nature"
    PERCEPTION = "perception"
    PERFORMANCE = "performance"
    PERSUASION = "persuasion"
    RELIGION = "religion"
    SLEIGHT_OF_HAND = "sleight_of_hand"
    STEALTH = "stealth"
    SURVIVAL = "survival"

    @property
    def ability(self) -> Ability:
        """Get the ability score this skill is checked with.

        Returns:
            The Ability associated with this skill.
        """
        return SKILL_ABILITIES[self]

    @property
    def display_name(self) -> str:
        """Get human-readable skill name.

        Returns:
            Formatted skill name (e.g., 'Sleight Of Hand').
        """
        return self.value.replace("_", " ").title()


SKILL_ABILITIES: MappingProxyType[Skill, Ability] = MappingProxyType(
    {
        Skill.ACROBATICS: Ability.DEX,
        Skill.ANIMAL_HANDLING: Ability.WIS,
        Skill.ARCANA: Ability.INT,
        Skill.ATHLETICS: Ability.STR,
        Skill.DECEPTION: Ability.CHA,
        Skill.HISTORY: Ability.INT,
        Skill.INSIGHT: Ability.WIS,
        Skill.INTIMIDATION: Ability.CHA,
        Skill.INVESTIGATION: Ability.INT,
        Skill.MEDICINE: Ability.WIS,
        Skill.NATURE: Ability.INT,
        Skill.PERCEPTION: Ability.WIS,
        Skill.PERFORMANCE: Ability.CHA,
        Skill.PERSUASION: Ability.CHA,
        Skill.RELIGION: Ability.INT,
        Skill.SLEIGHT_OF_HAND: Ability.DEX,
        Skill.STEALTH: Ability.DEX,
        Skill.SURVIVAL: Ability.WIS,
    }
)
"""SRD skill to ability mapping."""


__all__ = [
    "Ability",
    "Skill",
    "SKILL_ABILITIES",
]
