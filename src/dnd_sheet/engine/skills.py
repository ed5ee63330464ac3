"""Skill bonus calculation for D&D 5E.

A skill bonus is the modifier of the skill's ability plus, when trained,
the proficiency bonus (doubled with expertise)::

    untrained:            ability modifier
    proficient:           ability modifier + PB
    proficient+expertise: ability modifier + 2 * PB

Expertise without proficiency adds nothing; the flag is kept but ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from dnd_sheet.core.logging import get_logger
from dnd_sheet.engine.abilities import format_modifier
from dnd_sheet.models.character import AbilityModifiers, SkillProficiency, Skills
from dnd_sheet.models.enums import SKILL_ABILITIES, Ability, Skill


logger = get_logger(__name__)


@dataclass(frozen=True)
class SkillBonus:
    """A skill bonus with the inputs that produced it.

    Attributes:
        skill: The skill.
        ability: Ability the skill is checked with.
        bonus: Total bonus.
        ability_modifier: Modifier of ``ability``.
        proficiency_bonus: Proficiency bonus in effect.
        is_proficient: Whether the character is proficient.
        has_expertise: Whether the expertise flag is set.
    """

    skill: Skill
    ability: Ability
    bonus: int
    ability_modifier: int
    proficiency_bonus: int
    is_proficient: bool
    has_expertise: bool


def _as_proficiency(proficiency: SkillProficiency | Mapping[str, Any]) -> SkillProficiency:
    if isinstance(proficiency, SkillProficiency):
        return proficiency
    return SkillProficiency.model_validate(proficiency)


def skill_ability(skill: Skill) -> Ability:
    """Get the ability a skill is checked with."""
    return SKILL_ABILITIES[Skill(skill)]


def calculate_skill_bonus(
    skill: Skill,
    ability_modifiers: AbilityModifiers | Mapping[str, int],
    proficiency_bonus: int,
    proficiency: SkillProficiency | Mapping[str, Any],
) -> int:
    """Calculate the total bonus for one skill.

    Args:
        skill: The skill to calculate.
        ability_modifiers: The character's six modifiers.
        proficiency_bonus: The character's proficiency bonus.
        proficiency: The character's training in this skill.

    Returns:
        The skill bonus.

    Example:
        >>> mods = AbilityModifiers(strength=0, dexterity=3, constitution=0,
        ...                         intelligence=0, wisdom=0, charisma=0)
        >>> calculate_skill_bonus(Skill.STEALTH, mods, 2,
        ...                       SkillProficiency(proficient=True, expertise=True))
        7
    """
    proficiency = _as_proficiency(proficiency)
    bonus = ability_modifiers.get(skill_ability(skill))
    if proficiency.proficient:
        if proficiency.expertise:
            bonus += proficiency_bonus * 2
        else:
            bonus += proficiency_bonus
    return bonus


def calculate_skill_bonus_detailed(
    skill: Skill,
    ability_modifiers: AbilityModifiers | Mapping[str, int],
    proficiency_bonus: int,
    proficiency: SkillProficiency | Mapping[str, Any],
) -> SkillBonus:
    """Calculate a skill bonus together with its breakdown."""
    proficiency = _as_proficiency(proficiency)
    ability = skill_ability(skill)
    return SkillBonus(
        skill=Skill(skill),
        ability=ability,
        bonus=calculate_skill_bonus(skill, ability_modifiers, proficiency_bonus, proficiency),
        ability_modifier=ability_modifiers.get(ability),
        proficiency_bonus=proficiency_bonus,
        is_proficient=proficiency.proficient,
        has_expertise=bool(proficiency.expertise),
    )


def calculate_all_skill_bonuses(
    ability_modifiers: AbilityModifiers | Mapping[str, int],
    proficiency_bonus: int,
    skills: Skills,
) -> dict[Skill, int]:
    """Calculate the bonus for every skill.

    Returns:
        A mapping containing all 18 skills, in sheet order.
    """
    bonuses = {
        skill: calculate_skill_bonus(
            skill, ability_modifiers, proficiency_bonus, skills.get(skill)
        )
        for skill in Skill
    }
    logger.debug(
        "Calculated skill bonuses",
        proficiency_bonus=proficiency_bonus,
        proficient=[skill.value for skill in skills.proficient_skills()],
    )
    return bonuses


def format_skill_bonus(bonus: int) -> str:
    """Render a skill bonus with its sign (``+3``, ``0``, ``-1``)."""
    return format_modifier(bonus)


__all__ = [
    "SkillBonus",
    "skill_ability",
    "calculate_skill_bonus",
    "calculate_skill_bonus_detailed",
    "calculate_all_skill_bonuses",
    "format_skill_bonus",
]
