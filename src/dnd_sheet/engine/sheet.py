"""Derived statistics for a whole character.

``derive_statistics`` runs every calculator over a ``Character`` and
returns the numbers a character sheet displays. Nothing here is stored;
call it again after every edit.
"""

from __future__ import annotations

from dataclasses import dataclass

from dnd_sheet.core.logging import get_logger
from dnd_sheet.engine.abilities import calculate_all_modifiers
from dnd_sheet.engine.hit_points import HitPointDetails, calculate_max_hp_detailed, class_hit_die
from dnd_sheet.engine.proficiency import calculate_proficiency_bonus
from dnd_sheet.engine.saving_throws import calculate_all_saving_throw_bonuses
from dnd_sheet.engine.skills import calculate_all_skill_bonuses
from dnd_sheet.models.character import AbilityModifiers, Character
from dnd_sheet.models.enums import Ability, Skill


logger = get_logger(__name__)


@dataclass(frozen=True)
class DerivedStatistics:
    """Everything computed from a character's stored values.

    Attributes:
        ability_modifiers: Modifier for each ability.
        proficiency_bonus: Level-derived proficiency bonus.
        skill_bonuses: Bonus for each of the 18 skills.
        saving_throws: Bonus for each of the six saving throws.
        initiative: Initiative bonus (DEX modifier).
        passive_perception: 10 + Perception bonus.
        hit_points: Max HP breakdown, or None if the class is not an SRD class.
    """

    ability_modifiers: AbilityModifiers
    proficiency_bonus: int
    skill_bonuses: dict[Skill, int]
    saving_throws: dict[Ability, int]
    initiative: int
    passive_perception: int
    hit_points: HitPointDetails | None

    @property
    def max_hp(self) -> int | None:
        """Maximum hit points, if known."""
        return self.hit_points.max_hp if self.hit_points else None


def derive_statistics(character: Character) -> DerivedStatistics:
    """Compute the derived statistics of a character.

    Raises:
        AbilityScoreError: If any ability score is out of range.
        CharacterLevelError: If the level is out of range.
    """
    modifiers = calculate_all_modifiers(character.abilities)
    proficiency_bonus = calculate_proficiency_bonus(character.basics.level)
    skill_bonuses = calculate_all_skill_bonuses(modifiers, proficiency_bonus, character.skills)
    saving_throws = calculate_all_saving_throw_bonuses(
        modifiers, proficiency_bonus, character.saving_throws
    )

    hit_points = None
    hit_die = class_hit_die(character.basics.class_name)
    if hit_die is not None:
        hit_points = calculate_max_hp_detailed(
            hit_die, character.basics.level, modifiers.constitution
        )

    logger.debug(
        "Derived statistics",
        name=character.basics.name,
        level=character.basics.level,
        max_hp=hit_points.max_hp if hit_points else None,
    )
    return DerivedStatistics(
        ability_modifiers=modifiers,
        proficiency_bonus=proficiency_bonus,
        skill_bonuses=skill_bonuses,
        saving_throws=saving_throws,
        initiative=modifiers.dexterity,
        passive_perception=10 + skill_bonuses[Skill.PERCEPTION],
        hit_points=hit_points,
    )


__all__ = [
    "DerivedStatistics",
    "derive_statistics",
]
