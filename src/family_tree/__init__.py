"""
Family Tree Memory Maker

GEDCOM import, generation filtering and place cleanup for family trees.
"""

__version__ = "0.1.0"

from family_tree.core.models import (
    Person,
    Family,
    GedcomData,
    PlaceHierarchy,
    PlaceEvent,
)
from family_tree.core.gedcom import parse_gedcom
from family_tree.places.normalizer import normalize_place

__all__ = [
    "Person",
    "Family",
    "GedcomData",
    "PlaceHierarchy",
    "PlaceEvent",
    "parse_gedcom",
    "normalize_place",
]
