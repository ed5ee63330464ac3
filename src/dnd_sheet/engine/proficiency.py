"""Proficiency bonus by character level (D&D 5E).

The table is equivalent to ``(level - 1) // 4 + 2``::

    Level  1-4  -> +2
    Level  5-8  -> +3
    Level  9-12 -> +4
    Level 13-16 -> +5
    Level 17-20 -> +6
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from dnd_sheet.core.constants import MAX_CHARACTER_LEVEL, MIN_CHARACTER_LEVEL
from dnd_sheet.core.exceptions import CharacterLevelError
from dnd_sheet.engine.abilities import as_whole_number


PROFICIENCY_BONUS_BY_LEVEL: MappingProxyType[int, int] = MappingProxyType(
    {
        1: 2, 2: 2, 3: 2, 4: 2,
        5: 3, 6: 3, 7: 3, 8: 3,
        9: 4, 10: 4, 11: 4, 12: 4,
        13: 5, 14: 5, 15: 5, 16: 5,
        17: 6, 18: 6, 19: 6, 20: 6,
    }
)

LEVEL_RANGE_BY_BONUS: MappingProxyType[int, tuple[int, int]] = MappingProxyType(
    {
        2: (1, 4),
        3: (5, 8),
        4: (9, 12),
        5: (13, 16),
        6: (17, 20),
    }
)


def is_valid_level(level: Any) -> bool:
    """Check whether a value is a usable character level (integer in [1, 20])."""
    as_int = as_whole_number(level)
    return as_int is not None and MIN_CHARACTER_LEVEL <= as_int <= MAX_CHARACTER_LEVEL


def calculate_proficiency_bonus(level: Any) -> int:
    """Look up the proficiency bonus for a character level.

    Args:
        level: Character level (1-20).

    Returns:
        The proficiency bonus, from +2 to +6.

    Raises:
        CharacterLevelError: If the level is not an integer in [1, 20].
    """
    if not is_valid_level(level):
        raise CharacterLevelError(level)
    return PROFICIENCY_BONUS_BY_LEVEL[int(level)]


def level_range_for_bonus(bonus: int) -> tuple[int, int] | None:
    """Find the levels that grant a proficiency bonus.

    Returns:
        Inclusive ``(min_level, max_level)``, or None for bonuses outside 2-6.
    """
    return LEVEL_RANGE_BY_BONUS.get(bonus)


__all__ = [
    "PROFICIENCY_BONUS_BY_LEVEL",
    "LEVEL_RANGE_BY_BONUS",
    "is_valid_level",
    "calculate_proficiency_bonus",
    "level_range_for_bonus",
]
