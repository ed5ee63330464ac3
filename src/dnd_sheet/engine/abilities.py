"""Ability score to modifier conversion for D&D 5E.

The modifier for a score is ``floor((score - 10) / 2)``. Python's floor
division already rounds negative halves downward, so a score of 7 gives
-2 rather than -1.

Example:
    >>> calculate_modifier(16)
    3
    >>> format_modifier(calculate_modifier(8))
    '-1'
"""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any

from dnd_sheet.core.constants import (
    MAX_ABILITY_MODIFIER,
    MAX_ABILITY_SCORE,
    MIN_ABILITY_MODIFIER,
    MIN_ABILITY_SCORE,
)
from dnd_sheet.core.exceptions import AbilityScoreError
from dnd_sheet.core.logging import get_logger
from dnd_sheet.models.character import Abilities, AbilityModifiers
from dnd_sheet.models.enums import Ability


logger = get_logger(__name__)


_MODIFIER_REFERENCE_TABLE = """\
Ability Score -> Modifier
-------------------------
 1       ->  -5
 2-3     ->  -4
 4-5     ->  -3
 6-7     ->  -2
 8-9     ->  -1
10-11    ->   0
12-13    ->  +1
14-15    ->  +2
16-17    ->  +3
18-19    ->  +4
20-21    ->  +5
22-23    ->  +6
24-25    ->  +7
26-27    ->  +8
28-29    ->  +9
30       ->  +10
"""

_MODIFIER_LABELS: dict[str, tuple[str, str, str, str, str, str]] = {
    "en": ("Exceptional", "Very good", "Good", "Average", "Low", "Very low"),
    "es": ("Excepcional", "Muy bueno", "Bueno", "Promedio", "Bajo", "Muy bajo"),
}


def as_whole_number(value: Any) -> int | None:
    """Return ``value`` as an int if it is a whole number, else None.

    Booleans are rejected. Finite floats with no fractional part count as
    whole numbers.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real):
        as_float = float(value)
        if math.isfinite(as_float) and as_float.is_integer():
            return int(as_float)
    return None


def is_valid_score(score: Any) -> bool:
    """Check whether a value is a usable ability score.

    Args:
        score: Candidate value.

    Returns:
        True if the value is an integer between 1 and 30 inclusive.
    """
    as_int = as_whole_number(score)
    return as_int is not None and MIN_ABILITY_SCORE <= as_int <= MAX_ABILITY_SCORE


def calculate_modifier(score: Any, *, ability: Ability | None = None) -> int:
    """Calculate the ability modifier for a score.

    Args:
        score: The ability score (1-30).
        ability: Ability the score belongs to, used for error context.

    Returns:
        The modifier, from -5 to +10.

    Raises:
        AbilityScoreError: If the score is not an integer in [1, 30].
    """
    if not is_valid_score(score):
        raise AbilityScoreError(score, ability=ability.value if ability else None)
    return (int(score) - 10) // 2


def calculate_all_modifiers(abilities: Abilities) -> AbilityModifiers:
    """Calculate the modifiers for all six abilities.

    Args:
        abilities: The six ability scores.

    Returns:
        The six modifiers.

    Raises:
        AbilityScoreError: If any score is invalid. No partial result is
            produced.
    """
    modifiers = {
        ability.value: calculate_modifier(abilities.get(ability), ability=ability)
        for ability in Ability
    }
    logger.debug("Calculated ability modifiers", **modifiers)
    return AbilityModifiers(**modifiers)


def format_modifier(modifier: int) -> str:
    """Render a modifier with its sign.

    Positive values get a leading ``+``; zero renders as ``0``.
    """
    if modifier > 0:
        return f"+{modifier}"
    return str(modifier)


def describe_modifier(modifier: int, *, locale: str = "en") -> str:
    """Give a qualitative label for a modifier.

    Args:
        modifier: The ability modifier.
        locale: Label language, ``en`` or ``es``.

    Returns:
        One of Exceptional, Very good, Good, Average, Low, Very low.
    """
    exceptional, very_good, good, average, low, very_low = _MODIFIER_LABELS.get(
        locale, _MODIFIER_LABELS["en"]
    )
    if modifier >= 5:
        return exceptional
    if modifier >= 3:
        return very_good
    if modifier >= 1:
        return good
    if modifier == 0:
        return average
    if modifier >= -2:
        return low
    return very_low


def score_range_for_modifier(modifier: int) -> tuple[int, int] | None:
    """Find the scores that produce a given modifier.

    Args:
        modifier: The ability modifier.

    Returns:
        Inclusive ``(min_score, max_score)``, clamped to [1, 30], or None
        if the modifier is outside [-5, 10].

    Example:
        >>> score_range_for_modifier(3)
        (16, 17)
        >>> score_range_for_modifier(-5)
        (1, 1)
    """
    if modifier < MIN_ABILITY_MODIFIER or modifier > MAX_ABILITY_MODIFIER:
        return None
    min_score = max(MIN_ABILITY_SCORE, modifier * 2 + 10)
    max_score = min(MAX_ABILITY_SCORE, modifier * 2 + 11)
    return (min_score, max_score)


def points_to_next_modifier(score: Any) -> int | None:
    """Count the score points needed to raise the modifier by one.

    Args:
        score: The current ability score.

    Returns:
        Points needed (1 or 2), or None if the score is invalid or already
        at the maximum of 30.
    """
    if not is_valid_score(score):
        return None
    current = int(score)
    if current >= MAX_ABILITY_SCORE:
        return None

    current_modifier = calculate_modifier(current)
    for candidate in range(current + 1, MAX_ABILITY_SCORE + 1):
        if calculate_modifier(candidate) > current_modifier:
            return candidate - current
    return None


def modifier_reference_table() -> str:
    """Return the score to modifier reference table as plain text."""
    return _MODIFIER_REFERENCE_TABLE


__all__ = [
    "as_whole_number",
    "is_valid_score",
    "calculate_modifier",
    "calculate_all_modifiers",
    "format_modifier",
    "describe_modifier",
    "score_range_for_modifier",
    "points_to_next_modifier",
    "modifier_reference_table",
]
