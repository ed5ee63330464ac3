"""Pydantic V2 schemas for the D&D 5E character sheet core.

Submodules:
    enums: Ability and Skill enumerations and the skill to ability map
    character: The persisted character (basics, abilities, skills, saves)
    character_file: The versioned file envelope and its metadata

Example:
    >>> from dnd_sheet.models import Abilities, BasicInfo, Character
    >>> hero = Character(
    ...     basics=BasicInfo(name="Thorin", class_name="Fighter", level=5),
    ...     abilities=Abilities(strength=16, constitution=16),
    ... )
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from dnd_sheet.models.enums import SKILL_ABILITIES, Ability, Skill

# =============================================================================
# Character
# =============================================================================
from dnd_sheet.models.character import (
    Abilities,
    AbilityModifiers,
    BasicInfo,
    CamelModel,
    Character,
    SkillProficiency,
    Skills,
)

# =============================================================================
# Character File
# =============================================================================
from dnd_sheet.models.character_file import CharacterFile, CharacterFileMetadata


__all__ = [
    # === Enumerations ===
    "Ability",
    "Skill",
    "SKILL_ABILITIES",
    # === Character ===
    "CamelModel",
    "Abilities",
    "AbilityModifiers",
    "SkillProficiency",
    "Skills",
    "BasicInfo",
    "Character",
    # === Character File ===
    "CharacterFileMetadata",
    "CharacterFile",
]
