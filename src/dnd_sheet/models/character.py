"""Pydantic V2 schemas for the persisted character.

A ``Character`` is the only unit of meaning that gets saved. Modifiers,
proficiency bonus and every other derived value are recomputed by the
engine on demand and never stored.

Python attributes are snake_case; the JSON written to character files uses
camelCase keys (``experiencePoints``, ``sleightOfHand``, ``savingThrows``)
and ``class`` for the character class.

Numeric ranges are deliberately not enforced here. A character being edited
may hold an out-of-range level or score; ``validate_character`` reports
those, and the calculators reject them when asked to derive values.
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel

from dnd_sheet.core.constants import DEFAULT_ABILITY_SCORE
from dnd_sheet.models.enums import Ability, Skill


class CamelModel(BaseModel):
    """Base model for everything persisted in a character file."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="allow",
    )

    @model_serializer(mode="wrap")
    def omit_unset_optionals(
        self,
        handler: SerializerFunctionWrapHandler,
        info: SerializationInfo,
    ) -> dict[str, Any]:
        """Drop declared fields that are None. Extra keys pass through untouched."""
        data = handler(self)
        for name, field_info in type(self).model_fields.items():
            if getattr(self, name) is None:
                key = field_info.alias if info.by_alias and field_info.alias else name
                data.pop(key, None)
        return data


# =============================================================================
# Abilities
# =============================================================================


class Abilities(CamelModel):
    """The six ability scores of a character.

    Attributes:
        strength: Physical power and athletic ability.
        dexterity: Agility, reflexes and balance.
        constitution: Health, stamina and vital force.
        intelligence: Mental acuity and reasoning.
        wisdom: Awareness, intuition and insight.
        charisma: Force of personality and leadership.
    """

    strength: int = Field(default=DEFAULT_ABILITY_SCORE, description="Strength score")
    dexterity: int = Field(default=DEFAULT_ABILITY_SCORE, description="Dexterity score")
    constitution: int = Field(default=DEFAULT_ABILITY_SCORE, description="Constitution score")
    intelligence: int = Field(default=DEFAULT_ABILITY_SCORE, description="Intelligence score")
    wisdom: int = Field(default=DEFAULT_ABILITY_SCORE, description="Wisdom score")
    charisma: int = Field(default=DEFAULT_ABILITY_SCORE, description="Charisma score")

    def get(self, ability: Ability) -> int:
        """Get the score for a specific ability.

        Args:
            ability: The ability to look up.

        Returns:
            The ability score.
        """
        return getattr(self, Ability(ability).value)


class AbilityModifiers(BaseModel):
    """Derived modifiers for the six abilities. Never persisted."""

    model_config = ConfigDict(frozen=True)

    strength: int
    dexterity: int
    constitution: int
    intelligence: int
    wisdom: int
    charisma: int

    def get(self, ability: Ability) -> int:
        """Get the modifier for a specific ability."""
        return getattr(self, Ability(ability).value)


# =============================================================================
# Skills
# =============================================================================


class SkillProficiency(CamelModel):
    """Training in a single skill.

    ``expertise`` only matters when ``proficient`` is true. The combination
    expertise-without-proficiency is accepted and simply adds nothing.

    Attributes:
        proficient: Whether the proficiency bonus applies.
        expertise: Whether the proficiency bonus is doubled. Unset by default.
    """

    proficient: bool = False
    expertise: bool | None = None


def _untrained() -> SkillProficiency:
    return SkillProficiency()


class Skills(CamelModel):
    """Proficiency flags for all 18 skills."""

    acrobatics: SkillProficiency = Field(default_factory=_untrained)
    animal_handling: SkillProficiency = Field(default_factory=_untrained)
    arcana: SkillProficiency = Field(default_factory=_untrained)
    athletics: SkillProficiency = Field(default_factory=_untrained)
    deception: SkillProficiency = Field(default_factory=_untrained)
    history: SkillProficiency = Field(default_factory=_untrained)
    insight: SkillProficiency = Field(default_factory=_untrained)
    intimidation: SkillProficiency = Field(default_factory=_untrained)
    investigation: SkillProficiency = Field(default_factory=_untrained)
    medicine: SkillProficiency = Field(default_factory=_untrained)
    nature: SkillProficiency = Field(default_factory=_untrained)
    perception: SkillProficiency = Field(default_factory=_untrained)
    performance: SkillProficiency = Field(default_factory=_untrained)
    persuasion: SkillProficiency = Field(default_factory=_untrained)
    religion: SkillProficiency = Field(default_factory=_untrained)
    sleight_of_hand: SkillProficiency = Field(default_factory=_untrained)
    stealth: SkillProficiency = Field(default_factory=_untrained)
    survival: SkillProficiency = Field(default_factory=_untrained)

    def get(self, skill: Skill) -> SkillProficiency:
        """Get the proficiency entry for a skill."""
        return getattr(self, Skill(skill).value)

    def proficient_skills(self) -> list[Skill]:
        """List the skills the character is proficient in, in sheet order."""
        return [skill for skill in Skill if self.get(skill).proficient]


# =============================================================================
# Character
# =============================================================================


class BasicInfo(CamelModel):
    """Identity and progression of a character.

    Race, class and background are free text. They are usually an SRD id or
    display name (see ``dnd_sheet.data.srd``) but nothing requires it.

    Attributes:
        name: Character name.
        race: Race reference.
        subrace: Optional subrace reference.
        class_name: Class reference, stored as ``class``.
        subclass: Optional subclass reference.
        level: Character level.
        background: Background reference.
        alignment: Optional alignment text.
        experience_points: Accumulated experience.
    """

    name: str = ""
    race: str = ""
    subrace: str | None = None
    class_name: str = Field(default="", alias="class")
    subclass: str | None = None
    level: int = 1
    background: str = ""
    alignment: str | None = None
    experience_points: int = 0


class Character(CamelModel):
    """A complete character as persisted in a character file.

    Attributes:
        basics: Identity and progression.
        abilities: The six ability scores.
        skills: Proficiency flags for the 18 skills.
        saving_throws: Abilities with saving throw proficiency. Kept as a
            list; duplicate entries have no effect on bonuses.
    """

    basics: BasicInfo = Field(default_factory=BasicInfo)
    abilities: Abilities = Field(default_factory=Abilities)
    skills: Skills = Field(default_factory=Skills)
    saving_throws: list[Ability] = Field(default_factory=list)


__all__ = [
    "CamelModel",
    "Abilities",
    "AbilityModifiers",
    "SkillProficiency",
    "Skills",
    "BasicInfo",
    "Character",
]
