"""Core models, GEDCOM import/export and generation filtering."""

from family_tree.core.models import (
    Family,
    GedcomData,
    Person,
    PlaceEvent,
    PlaceHierarchy,
)
from family_tree.core.dates import calculate_mother_age, extract_year
from family_tree.core.gedcom import GedcomLine, GedcomParser, load_gedcom, parse_gedcom
from family_tree.core.filter import export_gedcom, filter_by_generations, save_gedcom

__all__ = [
    "Family",
    "GedcomData",
    "Person",
    "PlaceEvent",
    "PlaceHierarchy",
    "calculate_mother_age",
    "extract_year",
    "GedcomLine",
    "GedcomParser",
    "load_gedcom",
    "parse_gedcom",
    "export_gedcom",
    "filter_by_generations",
    "save_gedcom",
]
