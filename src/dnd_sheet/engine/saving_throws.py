"""Saving throw bonus calculation for D&D 5E.

Saving throws are keyed directly by ability. A save adds the proficiency
bonus when its ability is in the character's saving throw proficiencies;
there is no expertise for saves. Membership is what counts, so order and
duplicates in the proficiency list make no difference.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from dnd_sheet.core.logging import get_logger
from dnd_sheet.engine.abilities import format_modifier
from dnd_sheet.models.character import AbilityModifiers
from dnd_sheet.models.enums import Ability


logger = get_logger(__name__)


CLASS_SAVING_THROWS: MappingProxyType[str, tuple[Ability, Ability]] = MappingProxyType(
    {
        "barbarian": (Ability.STR, Ability.CON),
        "bard": (Ability.DEX, Ability.CHA),
        "cleric": (Ability.WIS, Ability.CHA),
        "druid": (Ability.INT, Ability.WIS),
        "fighter": (Ability.STR, Ability.CON),
        "monk": (Ability.STR, Ability.DEX),
        "paladin": (Ability.WIS, Ability.CHA),
        "ranger": (Ability.STR, Ability.DEX),
        "rogue": (Ability.DEX, Ability.INT),
        "sorcerer": (Ability.CON, Ability.CHA),
        "warlock": (Ability.WIS, Ability.CHA),
        "wizard": (Ability.INT, Ability.WIS),
    }
)
"""Saving throw proficiencies granted by each SRD class at level 1."""


@dataclass(frozen=True)
class SavingThrowBonus:
    """A saving throw bonus and whether proficiency applied.

    Attributes:
        ability: The ability being saved with.
        bonus: Total bonus.
        is_proficient: Whether the proficiency bonus was added.
    """

    ability: Ability
    bonus: int
    is_proficient: bool


def calculate_saving_throw_bonus(
    ability: Ability,
    ability_modifiers: AbilityModifiers | Mapping[str, int],
    proficiency_bonus: int,
    proficiencies: Iterable[Ability | str],
) -> int:
    """Calculate the bonus for one saving throw.

    Args:
        ability: The ability being saved with.
        ability_modifiers: The character's six modifiers.
        proficiency_bonus: The character's proficiency bonus.
        proficiencies: Abilities with saving throw proficiency.

    Returns:
        The modifier, plus the proficiency bonus if proficient.
    """
    ability = Ability(ability)
    modifier = ability_modifiers.get(ability)
    if ability in set(proficiencies):
        return modifier + proficiency_bonus
    return modifier


def calculate_saving_throw_bonus_detailed(
    ability: Ability,
    ability_modifiers: AbilityModifiers | Mapping[str, int],
    proficiency_bonus: int,
    proficiencies: Iterable[Ability | str],
) -> SavingThrowBonus:
    """Calculate a saving throw bonus and report whether proficiency applied."""
    proficient_in = set(proficiencies)
    ability = Ability(ability)
    return SavingThrowBonus(
        ability=ability,
        bonus=calculate_saving_throw_bonus(
            ability, ability_modifiers, proficiency_bonus, proficient_in
        ),
        is_proficient=ability in proficient_in,
    )


def calculate_all_saving_throw_bonuses(
    ability_modifiers: AbilityModifiers | Mapping[str, int],
    proficiency_bonus: int,
    proficiencies: Iterable[Ability | str],
) -> dict[Ability, int]:
    """Calculate the bonus for all six saving throws."""
    proficient_in = set(proficiencies)
    bonuses = {
        ability: calculate_saving_throw_bonus(
            ability, ability_modifiers, proficiency_bonus, proficient_in
        )
        for ability in Ability
    }
    logger.debug(
        "Calculated saving throws",
        proficiency_bonus=proficiency_bonus,
        proficient=sorted(str(ability) for ability in proficient_in),
    )
    return bonuses


def calculate_all_saving_throw_bonuses_detailed(
    ability_modifiers: AbilityModifiers | Mapping[str, int],
    proficiency_bonus: int,
    proficiencies: Iterable[Ability | str],
) -> list[SavingThrowBonus]:
    """Calculate all six saving throws with proficiency flags, in ability order."""
    proficient_in = set(proficiencies)
    return [
        calculate_saving_throw_bonus_detailed(
            ability, ability_modifiers, proficiency_bonus, proficient_in
        )
        for ability in Ability
    ]


def format_saving_throw_bonus(bonus: int) -> str:
    """Render a saving throw bonus with its sign."""
    return format_modifier(bonus)


def class_saving_throw_proficiencies(class_name: str) -> list[Ability] | None:
    """Get the saving throw proficiencies granted by an SRD class.

    Args:
        class_name: Class name, matched case-insensitively (e.g. ``Fighter``).

    Returns:
        The class's two abilities, or None if the class is unknown.
    """
    saves = CLASS_SAVING_THROWS.get(class_name.lower())
    if saves is None:
        return None
    return list(saves)


__all__ = [
    "CLASS_SAVING_THROWS",
    "SavingThrowBonus",
    "calculate_saving_throw_bonus",
    "calculate_saving_throw_bonus_detailed",
    "calculate_all_saving_throw_bonuses",
    "calculate_all_saving_throw_bonuses_detailed",
    "format_saving_throw_bonus",
    "class_saving_throw_proficiencies",
]
