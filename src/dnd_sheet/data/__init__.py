"""Static SRD reference tables."""

from dnd_sheet.data.srd import (
    SRD_BACKGROUNDS,
    SRD_CLASSES,
    SRD_RACES,
    SRDBackground,
    SRDClass,
    SRDRace,
    filter_options,
    find_background,
    find_class,
    find_race,
)

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
