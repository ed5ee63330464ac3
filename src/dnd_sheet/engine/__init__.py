"""Rules engine for D&D 5E derived statistics.

Every function here is pure: it takes plain values or models and returns
plain values, raising only for out-of-range inputs or unknown classes
where a value must be produced.

Submodules:
    abilities: Ability score to modifier conversion
    proficiency: Proficiency bonus by level
    skills: Skill bonuses with proficiency and expertise
    saving_throws: Saving throw bonuses and class proficiencies
    hit_points: Maximum hit points by class hit die
    sheet: All derived statistics for a character at once

Example:
    >>> from dnd_sheet.engine import calculate_max_hp, calculate_modifier
    >>> calculate_modifier(14)
    2
    >>> calculate_max_hp(10, 5, 3)
    49
"""

from __future__ import annotations

from dnd_sheet.engine.abilities import (
    calculate_all_modifiers,
    calculate_modifier,
    describe_modifier,
    format_modifier,
    is_valid_score,
    modifier_reference_table,
    points_to_next_modifier,
    score_range_for_modifier,
)
from dnd_sheet.engine.hit_points import (
    CLASS_HIT_DICE,
    HitPointDetails,
    average_hp_per_level,
    calculate_class_max_hp,
    calculate_level1_hp,
    calculate_max_hp,
    calculate_max_hp_detailed,
    class_hit_die,
)
from dnd_sheet.engine.proficiency import (
    calculate_proficiency_bonus,
    is_valid_level,
    level_range_for_bonus,
)
from dnd_sheet.engine.saving_throws import (
    CLASS_SAVING_THROWS,
    SavingThrowBonus,
    calculate_all_saving_throw_bonuses,
    calculate_all_saving_throw_bonuses_detailed,
    calculate_saving_throw_bonus,
    calculate_saving_throw_bonus_detailed,
    class_saving_throw_proficiencies,
    format_saving_throw_bonus,
)
from dnd_sheet.engine.sheet import DerivedStatistics, derive_statistics
from dnd_sheet.engine.skills import (
    SkillBonus,
    calculate_all_skill_bonuses,
    calculate_skill_bonus,
    calculate_skill_bonus_detailed,
    format_skill_bonus,
    skill_ability,
)


__all__ = [
    # Abilities
    "calculate_modifier",
    "calculate_all_modifiers",
    "is_valid_score",
    "format_modifier",
    "describe_modifier",
    "score_range_for_modifier",
    "points_to_next_modifier",
    "modifier_reference_table",
    # Proficiency
    "calculate_proficiency_bonus",
    "is_valid_level",
    "level_range_for_bonus",
    # Skills
    "SkillBonus",
    "skill_ability",
    "calculate_skill_bonus",
    "calculate_skill_bonus_detailed",
    "calculate_all_skill_bonuses",
    "format_skill_bonus",
    # Saving throws
    "CLASS_SAVING_THROWS",
    "SavingThrowBonus",
    "calculate_saving_throw_bonus",
    "calculate_saving_throw_bonus_detailed",
    "calculate_all_saving_throw_bonuses",
    "calculate_all_saving_throw_bonuses_detailed",
    "format_saving_throw_bonus",
    "class_saving_throw_proficiencies",
    # Hit points
    "CLASS_HIT_DICE",
    "HitPointDetails",
    "class_hit_die",
    "average_hp_per_level",
    "calculate_level1_hp",
    "calculate_max_hp",
    "calculate_class_max_hp",
    "calculate_max_hp_detailed",
    # Sheet
    "DerivedStatistics",
    "derive_statistics",
]
