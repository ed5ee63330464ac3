"""SRD reference data: races, classes and backgrounds.

These closed tables back the free-text race/class/background fields of
``BasicInfo``. Lookups match an id or either display name (English or
Spanish), case-insensitively, and return None when nothing matches.

Example:
    >>> find_class("Guerrero").hit_die
    10
    >>> [race.id for race in filter_options(SRD_RACES, "elf")]
    ['elf', 'half-elf']
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol, TypeVar

from dnd_sheet.models.enums import Ability


# =============================================================================
# Record Types
# =============================================================================


@dataclass(frozen=True)
class SRDRace:
    """An SRD race.

    Attributes:
        id: Kebab-case identifier (e.g. 'half-elf').
        name: English display name.
        name_es: Spanish display name.
        speed: Walking speed in feet.
        ability_bonuses: Racial ability score increases.
        traits: Racial trait names.
    """

    id: str
    name: str
    name_es: str
    speed: int
    ability_bonuses: MappingProxyType[Ability, int]
    traits: tuple[str, ...] = ()


@dataclass(frozen=True)
class SRDClass:
    """An SRD class.

    Attributes:
        id: Lowercase identifier (e.g. 'fighter').
        name: English display name.
        name_es: Spanish display name.
        hit_die: Hit die size.
        primary_abilities: Abilities the class relies on.
        saving_throws: The two saving throw proficiencies.
        skill_choices: Number of class skills picked at level 1.
        skill_options: Skills the class may pick from ('Any' for bards).
    """

    id: str
    name: str
    name_es: str
    hit_die: int
    primary_abilities: tuple[Ability, ...]
    saving_throws: tuple[Ability, Ability]
    skill_choices: int
    skill_options: tuple[str, ...]


@dataclass(frozen=True)
class SRDBackground:
    """An SRD background.

    Attributes:
        id: Kebab-case identifier (e.g. 'folk-hero').
        name: English display name.
        name_es: Spanish display name.
        skill_proficiencies: Skills granted by the background.
        languages: Extra languages granted, if any.
        tool_proficiencies: Tools granted, if any.
    """

    id: str
    name: str
    name_es: str
    skill_proficiencies: tuple[str, ...]
    languages: int | None = None
    tool_proficiencies: tuple[str, ...] = field(default_factory=tuple)


def _bonuses(**values: int) -> MappingProxyType[Ability, int]:
    return MappingProxyType({Ability(name): bonus for name, bonus in values.items()})


# =============================================================================
# Races
# =============================================================================

SRD_RACES: tuple[SRDRace, ...] = (
    SRDRace(
        id="dwarf",
        name="Dwarf",
        name_es="Enano",
        speed=25,
        ability_bonuses=_bonuses(constitution=2),
        traits=("Darkvision", "Dwarven Resilience", "Stonecunning"),
    ),
    SRDRace(
        id="elf",
        name="Elf",
        name_es="Elfo",
        speed=30,
        ability_bonuses=_bonuses(dexterity=2),
        traits=("Darkvision", "Keen Senses", "Fey Ancestry", "Trance"),
    ),
    SRDRace(
        id="halfling",
        name="Halfling",
        name_es="Mediano",
        speed=25,
        ability_bonuses=_bonuses(dexterity=2),
        traits=("Lucky", "Brave", "Halfling Nimbleness"),
    ),
    SRDRace(
        id="human",
        name="Human",
        name_es="Humano",
        speed=30,
        ability_bonuses=_bonuses(
            strength=1, dexterity=1, constitution=1,
            intelligence=1, wisdom=1, charisma=1,
        ),
        traits=("Extra Language",),
    ),
    SRDRace(
        id="dragonborn",
        name="Dragonborn",
        name_es="Dracónido",
        speed=30,
        ability_bonuses=_bonuses(strength=2, charisma=1),
        traits=("Draconic Ancestry", "Breath Weapon", "Damage Resistance"),
    ),
    SRDRace(
        id="gnome",
        name="Gnome",
        name_es="Gnomo",
        speed=25,
        ability_bonuses=_bonuses(intelligence=2),
        traits=("Darkvision", "Gnome Cunning"),
    ),
    SRDRace(
        id="half-elf",
        name="Half-Elf",
        name_es="Semielfo",
        speed=30,
        ability_bonuses=_bonuses(charisma=2),
        traits=("Darkvision", "Fey Ancestry", "Skill Versatility"),
    ),
    SRDRace(
        id="half-orc",
        name="Half-Orc",
        name_es="Semiorco",
        speed=30,
        ability_bonuses=_bonuses(strength=2, constitution=1),
        traits=("Darkvision", "Menacing", "Relentless Endurance", "Savage Attacks"),
    ),
    SRDRace(
        id="tiefling",
        name="Tiefling",
        name_es="Tiefling",
        speed=30,
        ability_bonuses=_bonuses(intelligence=1, charisma=2),
        traits=("Darkvision", "Hellish Resistance", "Infernal Legacy"),
    ),
)

# =============================================================================
# Classes
# =============================================================================

SRD_CLASSES: tuple[SRDClass, ...] = (
    SRDClass(
        id="barbarian",
        name="Barbarian",
        name_es="Bárbaro",
        hit_die=12,
        primary_abilities=(Ability.STR,),
        saving_throws=(Ability.STR, Ability.CON),
        skill_choices=2,
        skill_options=(
            "Animal Handling", "Athletics", "Intimidation", "Nature", "Perception", "Survival",
        ),
    ),
    SRDClass(
        id="bard",
        name="Bard",
        name_es="Bardo",
        hit_die=8,
        primary_abilities=(Ability.CHA,),
        saving_throws=(Ability.DEX, Ability.CHA),
        skill_choices=3,
        skill_options=("Any",),
    ),
    SRDClass(
        id="cleric",
        name="Cleric",
        name_es="Clérigo",
        hit_die=8,
        primary_abilities=(Ability.WIS,),
        saving_throws=(Ability.WIS, Ability.CHA),
        skill_choices=2,
        skill_options=("History", "Insight", "Medicine", "Persuasion", "Religion"),
    ),
    SRDClass(
        id="druid",
        name="Druid",
        name_es="Druida",
        hit_die=8,
        primary_abilities=(Ability.WIS,),
        saving_throws=(Ability.INT, Ability.WIS),
        skill_choices=2,
        skill_options=(
            "Arcana", "Animal Handling", "Insight", "Medicine",
            "Nature", "Perception", "Religion", "Survival",
        ),
    ),
    SRDClass(
        id="fighter",
        name="Fighter",
        name_es="Guerrero",
        hit_die=10,
        primary_abilities=(Ability.STR, Ability.DEX),
        saving_throws=(Ability.STR, Ability.CON),
        skill_choices=2,
        skill_options=(
            "Acrobatics", "Animal Handling", "Athletics", "History",
            "Insight", "Intimidation", "Perception", "Survival",
        ),
    ),
    SRDClass(
        id="monk",
        name="Monk",
        name_es="Monje",
        hit_die=8,
        primary_abilities=(Ability.DEX, Ability.WIS),
        saving_throws=(Ability.STR, Ability.DEX),
        skill_choices=2,
        skill_options=("Acrobatics", "Athletics", "History", "Insight", "Religion", "Stealth"),
    ),
    SRDClass(
        id="paladin",
        name="Paladin",
        name_es="Paladín",
        hit_die=10,
        primary_abilities=(Ability.STR, Ability.CHA),
        saving_throws=(Ability.WIS, Ability.CHA),
        skill_choices=2,
        skill_options=(
            "Athletics", "Insight", "Intimidation", "Medicine", "Persuasion", "Religion",
        ),
    ),
    SRDClass(
        id="ranger",
        name="Ranger",
        name_es="Explorador",
        hit_die=10,
        primary_abilities=(Ability.DEX, Ability.WIS),
        saving_throws=(Ability.STR, Ability.DEX),
        skill_choices=3,
        skill_options=(
            "Animal Handling", "Athletics", "Insight", "Investigation",
            "Nature", "Perception", "Stealth", "Survival",
        ),
    ),
    SRDClass(
        id="rogue",
        name="Rogue",
        name_es="Pícaro",
        hit_die=8,
        primary_abilities=(Ability.DEX,),
        saving_throws=(Ability.DEX, Ability.INT),
        skill_choices=4,
        skill_options=(
            "Acrobatics", "Athletics", "Deception", "Insight", "Intimidation",
            "Investigation", "Perception", "Performance", "Persuasion",
            "Sleight of Hand", "Stealth",
        ),
    ),
    SRDClass(
        id="sorcerer",
        name="Sorcerer",
        name_es="Hechicero",
        hit_die=6,
        primary_abilities=(Ability.CHA,),
        saving_throws=(Ability.CON, Ability.CHA),
        skill_choices=2,
        skill_options=(
            "Arcana", "Deception", "Insight", "Intimidation", "Persuasion", "Religion",
        ),
    ),
    SRDClass(
        id="warlock",
        name="Warlock",
        name_es="Brujo",
        hit_die=8,
        primary_abilities=(Ability.CHA,),
        saving_throws=(Ability.WIS, Ability.CHA),
        skill_choices=2,
        skill_options=(
            "Arcana", "Deception", "History", "Intimidation",
            "Investigation", "Nature", "Religion",
        ),
    ),
    SRDClass(
        id="wizard",
        name="Wizard",
        name_es="Mago",
        hit_die=6,
        primary_abilities=(Ability.INT,),
        saving_throws=(Ability.INT, Ability.WIS),
        skill_choices=2,
        skill_options=(
            "Arcana", "History", "Insight", "Investigation", "Medicine", "Religion",
        ),
    ),
)

# =============================================================================
# Backgrounds
# =============================================================================

SRD_BACKGROUNDS: tuple[SRDBackground, ...] = (
    SRDBackground("acolyte", "Acolyte", "Acólito", ("Insight", "Religion"), languages=2),
    SRDBackground("charlatan", "Charlatan", "Charlatán", ("Deception", "Sleight of Hand")),
    SRDBackground("criminal", "Criminal", "Criminal", ("Deception", "Stealth")),
    SRDBackground("entertainer", "Entertainer", "Animador", ("Acrobatics", "Performance")),
    SRDBackground("folk-hero", "Folk Hero", "Héroe del pueblo", ("Animal Handling", "Survival")),
    SRDBackground(
        "guild-artisan", "Guild Artisan", "Artesano gremial", ("Insight", "Persuasion"),
        languages=1,
    ),
    SRDBackground("hermit", "Hermit", "Ermitaño", ("Medicine", "Religion"), languages=1),
    SRDBackground("noble", "Noble", "Noble", ("History", "Persuasion"), languages=1),
    SRDBackground("outlander", "Outlander", "Forastero", ("Athletics", "Survival"), languages=1),
    SRDBackground("sage", "Sage", "Sabio", ("Arcana", "History"), languages=2),
    SRDBackground("sailor", "Sailor", "Marinero", ("Athletics", "Perception")),
    SRDBackground("soldier", "Soldier", "Soldado", ("Athletics", "Intimidation")),
    SRDBackground("urchin", "Urchin", "Pilluelo", ("Sleight of Hand", "Stealth")),
)


# =============================================================================
# Lookups
# =============================================================================


class _Named(Protocol):
    id: str
    name: str
    name_es: str


T = TypeVar("T", bound=_Named)


def _find(items: Sequence[T], query: str) -> T | None:
    q = query.lower()
    for item in items:
        if item.id == q or item.name.lower() == q or item.name_es.lower() == q:
            return item
    return None


def find_race(query: str) -> SRDRace | None:
    """Find a race by id, English name or Spanish name."""
    return _find(SRD_RACES, query)


def find_class(query: str) -> SRDClass | None:
    """Find a class by id, English name or Spanish name."""
    return _find(SRD_CLASSES, query)


def find_background(query: str) -> SRDBackground | None:
    """Find a background by id, English name or Spanish name."""
    return _find(SRD_BACKGROUNDS, query)


def filter_options(items: Sequence[T], query: str) -> list[T]:
    """Filter reference records for autocomplete.

    Args:
        items: Records to filter (races, classes or backgrounds).
        query: Text typed so far. Empty returns everything.

    Returns:
        Records whose English or Spanish name contains the query,
        case-insensitively, in their original order.
    """
    if not query:
        return list(items)
    q = query.lower()
    return [item for item in items if q in item.name.lower() or q in item.name_es.lower()]


__all__ = [
    "SRDRace",
    "SRDClass",
    "SRDBackground",
    "SRD_RACES",
    "SRD_CLASSES",
    "SRD_BACKGROUNDS",
    "find_race",
    "find_class",
    "find_background",
    "filter_options",
]
