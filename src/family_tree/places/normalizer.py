"""
Place-name normalization.

Parses free-text place strings such as:
- "Boston, Massachusetts, USA"
- "Chester County, Pennsylvania"
- "Dublin, Ireland"
- "Palatinate, Germany"

into a PlaceHierarchy using static lookup tables. Nothing here
fails: unrecognized tokens are kept as best-guess field values.
"""

from __future__ import annotations

from typing import Literal

from family_tree.core.models import PlaceHierarchy
from family_tree.places.tables import (
    COUNTRY_VARIANTS,
    COUNTY_MARKERS,
    STATE_ABBREVIATIONS,
    STATE_NAMES,
    STATE_TO_REGION,
    UNITED_STATES,
)

FormatLevel = Literal["full", "state", "region"]
CompareLevel = Literal["country", "region", "state", "county", "city"]


def split_place(raw_place: str) -> list[str]:
    """Comma-separated segments, trimmed, empties dropped."""
    return [p.strip() for p in raw_place.split(",") if p.strip()]


def lookup_state(part: str) -> str | None:
    """Return the postal abbreviation if `part` names a US state."""
    part_lower = part.lower()
    abbrev = STATE_ABBREVIATIONS.get(part_lower)
    if abbrev is None and len(part_lower) == 2:
        abbrev = part_lower.upper()
    if abbrev and abbrev in STATE_NAMES:
        return abbrev
    return None


def normalize_place(raw_place: str | None) -> PlaceHierarchy:
    """
    Parse a raw place string into a hierarchical structure.

    Segments are read right to left, most general first. The first
    segment is tried as a country, then as a US state, and otherwise
    kept as an unmapped country name. Later segments are tried as a
    state, then a county ("county", "parish", "borough"), then a city.

    When a second city-like segment turns up, the earlier city moves
    to `site` and the new, further-left segment becomes `city`.
    Stored data depends on this assignment.
    """
    result = PlaceHierarchy()
    if not raw_place or not raw_place.strip():
        return result

    parts = split_place(raw_place)

    for i, part in enumerate(reversed(parts)):
        part_lower = part.lower()

        if i == 0:
            country = COUNTRY_VARIANTS.get(part_lower)
            if country:
                result.country = country
                continue

        abbrev = lookup_state(part)
        if abbrev:
            result.state = STATE_NAMES[abbrev]
            result.country = result.country or UNITED_STATES
            result.region = STATE_TO_REGION.get(abbrev)
            continue

        if i == 0:
            result.country = part
            continue

        if any(marker in part_lower for marker in COUNTY_MARKERS):
            result.county = part
            continue

        if not result.city:
            result.city = part
        elif not result.site:
            result.site = result.city
            result.city = part

    return result


def format_place(place: PlaceHierarchy, level: FormatLevel = "full") -> str:
    """Get a display string from a PlaceHierarchy."""
    if level == "region" and place.region:
        return place.region
    if level == "state" and place.state:
        return place.state

    parts = [p for p in (place.city, place.county, place.state) if p]
    if place.country and place.country != UNITED_STATES:
        parts.append(place.country)
    return ", ".join(parts)


def get_region(place: PlaceHierarchy) -> str | None:
    """Region used for coloring and grouping; non-US places use their country."""
    if place.region:
        return place.region

    if place.state:
        for abbrev, name in STATE_NAMES.items():
            if name == place.state:
                return STATE_TO_REGION.get(abbrev)

    if place.country and place.country != UNITED_STATES:
        return place.country
    return None


def is_same_location(
    place1: PlaceHierarchy,
    place2: PlaceHierarchy,
    level: CompareLevel = "state",
) -> bool:
    """Check whether two places match at the given level."""
    if level == "city":
        return place1.city == place2.city and place1.state == place2.state
    if level == "county":
        return place1.county == place2.county and place1.state == place2.state
    if level == "state":
        return place1.state == place2.state
    if level == "region":
        return get_region(place1) == get_region(place2)
    if level == "country":
        return place1.country == place2.country
    return False
