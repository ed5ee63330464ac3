"""dnd_sheet - D&D 5E Character Sheet Core.

The rules engine and file format behind a 5th Edition character sheet.

RULES-FIRST ARCHITECTURE:
- Models own STORED values (scores, level, class, proficiency flags)
- The engine owns DERIVED values (modifiers, bonuses, max HP)
- Derived values are never persisted; they are recomputed on demand

Example:
    >>> from dnd_sheet import create_character_file, derive_statistics
    >>>
    >>> file = create_character_file()
    >>> file.character.basics.name = "Thorin"
    >>> file.character.basics.class_name = "Fighter"
    >>> file.character.basics.level = 5
    >>> derive_statistics(file.character).proficiency_bonus
    3

Modules:
    core: Configuration, logging, constants, and base exceptions.
    models: Pydantic V2 schemas for characters and character files.
    engine: Ability, proficiency, skill, saving throw and hit point rules.
    data: Static SRD races, classes and backgrounds.
    storage: Versioned JSON persistence and character file I/O.
"""

from __future__ import annotations

# Core
from dnd_sheet.core.config import Settings, get_settings
from dnd_sheet.core.exceptions import DndSheetError
from dnd_sheet.core.logging import configure_logging, get_logger

# Models
from dnd_sheet.models import (
    Abilities,
    Ability,
    BasicInfo,
    Character,
    CharacterFile,
    CharacterFileMetadata,
    Skill,
    SkillProficiency,
    Skills,
)

# Engine
from dnd_sheet.engine import (
    DerivedStatistics,
    calculate_all_modifiers,
    calculate_all_saving_throw_bonuses,
    calculate_all_skill_bonuses,
    calculate_max_hp,
    calculate_modifier,
    calculate_proficiency_bonus,
    calculate_saving_throw_bonus,
    calculate_skill_bonus,
    derive_statistics,
)

# Storage
from dnd_sheet.storage import (
    create_character_file,
    create_default_character,
    deserialize_character,
    load_character_file,
    save_character_file,
    serialize_character,
    update_metadata,
    validate_character,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "DndSheetError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Ability",
    "Skill",
    "Abilities",
    "SkillProficiency",
    "Skills",
    "BasicInfo",
    "Character",
    "CharacterFile",
    "CharacterFileMetadata",
    # Engine
    "calculate_modifier",
    "calculate_all_modifiers",
    "calculate_proficiency_bonus",
    "calculate_skill_bonus",
    "calculate_all_skill_bonuses",
    "calculate_saving_throw_bonus",
    "calculate_all_saving_throw_bonuses",
    "calculate_max_hp",
    "DerivedStatistics",
    "derive_statistics",
    # Storage
    "create_default_character",
    "create_character_file",
    "serialize_character",
    "deserialize_character",
    "validate_character",
    "update_metadata",
    "save_character_file",
    "load_character_file",
]
