"""Maximum hit point calculation for D&D 5E.

Uses the SRD fixed-average rule: maximum hit die plus CON modifier at
level 1, then ``ceil(die / 2) + 1`` plus CON modifier for every level
after that::

    d6  -> 4 per level
    d8  -> 5 per level
    d10 -> 6 per level
    d12 -> 7 per level

Level 1 never drops below 1 HP; higher levels never drop below one HP per
level.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Literal

from dnd_sheet.core.exceptions import CharacterLevelError, UnknownClassError
from dnd_sheet.core.logging import get_logger
from dnd_sheet.engine.proficiency import is_valid_level


logger = get_logger(__name__)


HitDie = Literal[6, 8, 10, 12]

CLASS_HIT_DICE: MappingProxyType[str, HitDie] = MappingProxyType(
    {
        "barbarian": 12,
        "bard": 8,
        "cleric": 8,
        "druid": 8,
        "fighter": 10,
        "monk": 8,
        "paladin": 10,
        "ranger": 10,
        "rogue": 8,
        "sorcerer": 6,
        "warlock": 8,
        "wizard": 6,
    }
)
"""Hit die size for each SRD class."""


@dataclass(frozen=True)
class HitPointDetails:
    """Maximum hit points with the intermediate values that produced them.

    Attributes:
        max_hp: Final maximum hit points.
        hit_die: Hit die size used.
        level: Character level.
        constitution_modifier: CON modifier applied per level.
        level1_hp: Hit points from level 1 (at least 1).
        average_per_level: Fixed hit die average for levels after the first.
        additional_levels: Number of levels after the first.
        additional_hp: Hit points gained from those levels.
    """

    max_hp: int
    hit_die: int
    level: int
    constitution_modifier: int
    level1_hp: int
    average_per_level: int
    additional_levels: int
    additional_hp: int


def class_hit_die(class_name: str) -> HitDie | None:
    """Get the hit die of an SRD class, matched case-insensitively.

    Returns:
        The die size, or None if the class is unknown.
    """
    return CLASS_HIT_DICE.get(class_name.lower())


def average_hp_per_level(hit_die: int) -> int:
    """Fixed hit points per level after the first (``ceil(die / 2) + 1``)."""
    return math.ceil(hit_die / 2) + 1


def calculate_level1_hp(hit_die: int, constitution_modifier: int) -> int:
    """Hit points at level 1: maximum hit die plus CON modifier, at least 1."""
    return max(1, hit_die + constitution_modifier)


def calculate_max_hp(hit_die: int, level: Any, constitution_modifier: int) -> int:
    """Calculate maximum hit points with the fixed-average rule.

    Args:
        hit_die: Class hit die size.
        level: Character level (1-20).
        constitution_modifier: CON modifier.

    Returns:
        Maximum hit points. At level 1 this is at least 1; above level 1 it
        is at least ``level``.

    Raises:
        CharacterLevelError: If the level is not an integer in [1, 20].

    Example:
        >>> calculate_max_hp(10, 5, 3)
        49
    """
    if not is_valid_level(level):
        raise CharacterLevelError(level)
    level = int(level)

    level1_hp = hit_die + constitution_modifier
    if level == 1:
        return max(1, level1_hp)

    additional_hp = (level - 1) * (average_hp_per_level(hit_die) + constitution_modifier)
    return max(level, level1_hp + additional_hp)


def calculate_class_max_hp(class_name: str, level: Any, constitution_modifier: int) -> int:
    """Calculate maximum hit points for an SRD class.

    Raises:
        UnknownClassError: If the class is not one of the 12 SRD classes.
        CharacterLevelError: If the level is not an integer in [1, 20].
    """
    hit_die = class_hit_die(class_name)
    if hit_die is None:
        raise UnknownClassError(class_name)
    max_hp = calculate_max_hp(hit_die, level, constitution_modifier)
    logger.debug(
        "Calculated max HP",
        class_name=class_name,
        level=level,
        constitution_modifier=constitution_modifier,
        max_hp=max_hp,
    )
    return max_hp


def calculate_max_hp_detailed(
    hit_die: int,
    level: Any,
    constitution_modifier: int,
) -> HitPointDetails:
    """Calculate maximum hit points together with the breakdown.

    The breakdown's ``additional_hp`` is the raw per-level sum; the floor of
    one HP per level only applies to ``max_hp``.

    Raises:
        CharacterLevelError: If the level is not an integer in [1, 20].
    """
    max_hp = calculate_max_hp(hit_die, level, constitution_modifier)
    level = int(level)
    average = average_hp_per_level(hit_die)
    additional_levels = level - 1
    return HitPointDetails(
        max_hp=max_hp,
        hit_die=hit_die,
        level=level,
        constitution_modifier=constitution_modifier,
        level1_hp=calculate_level1_hp(hit_die, constitution_modifier),
        average_per_level=average,
        additional_levels=additional_levels,
        additional_hp=additional_levels * (average + constitution_modifier),
    )


__all__ = [
    "HitDie",
    "CLASS_HIT_DICE",
    "HitPointDetails",
    "class_hit_die",
    "average_hp_per_level",
    "calculate_level1_hp",
    "calculate_max_hp",
    "calculate_class_max_hp",
    "calculate_max_hp_detailed",
]
