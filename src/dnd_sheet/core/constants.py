"""Rules and file format constants for the D&D 5E character sheet core."""

from __future__ import annotations

# =============================================================================
# Ability Scores
# =============================================================================

MIN_ABILITY_SCORE = 1
"""Minimum ability score (1 is barely functioning)."""

MAX_ABILITY_SCORE = 30
"""Maximum ability score (gods and primordial beings)."""

DEFAULT_ABILITY_SCORE = 10
"""Score every ability starts at on a new character."""

MIN_ABILITY_MODIFIER = -5
"""Modifier for a score of 1."""

MAX_ABILITY_MODIFIER = 10
"""Modifier for a score of 30."""

# =============================================================================
# Levels
# =============================================================================

MIN_CHARACTER_LEVEL = 1
"""Minimum character level."""

MAX_CHARACTER_LEVEL = 20
"""Maximum character level in D&D 5E."""

# =============================================================================
# Character Files
# =============================================================================

SCHEMA_VERSION = 1
"""Newest character file schema this build reads and the one it writes."""

CHARACTER_FILE_EXTENSION = ".dnd5e"
"""Conventional extension for character files (plain JSON content)."""

CHARACTER_FILE_EXTENSIONS = (".dnd5e", ".json")
"""Extensions accepted when saving or loading character files."""

CHARACTER_FILE_FILTER = {
    "name": "D&D 5e Character",
    "extensions": ["dnd5e", "json"],
}
"""File dialog filter for hosts that show open/save dialogs."""

DEFAULT_CHARACTER_NAMES = {
    "en": "New Character",
    "es": "Nuevo Personaje",
}
"""Name given to freshly created characters, by locale."""


__all__ = [
    # Ability Scores
    "MIN_ABILITY_SCORE",
    "MAX_ABILITY_SCORE",
    "DEFAULT_ABILITY_SCORE",
    "MIN_ABILITY_MODIFIER",
    "MAX_ABILITY_MODIFIER",
    # Levels
    "MIN_CHARACTER_LEVEL",
    "MAX_CHARACTER_LEVEL",
    # Character Files
    "SCHEMA_VERSION",
    "CHARACTER_FILE_EXTENSION",
    "CHARACTER_FILE_EXTENSIONS",
    "CHARACTER_FILE_FILTER",
    "DEFAULT_CHARACTER_NAMES",
]
