"""
Core data models for an imported family tree.

These models mirror what a GEDCOM import actually gives us:
- Free-text dates and places (source data is inconsistent by nature)
- Cross-reference links between people and families
- Derived indexes (child -> parents, roots) built once per import
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from family_tree.core.dates import extract_year


class PlaceHierarchy(BaseModel):
    """
    Structured decomposition of a free-text place string.

    `site` holds a sub-city level; see `normalize_place` for how
    city and site are assigned.
    """
    country: str | None = None
    region: str | None = None  # New England, Mid-Atlantic, etc.
    state: str | None = None
    county: str | None = None
    city: str | None = None
    site: str | None = None

    def is_empty(self) -> bool:
        return not any(
            (self.country, self.region, self.state, self.county, self.city, self.site)
        )


PlaceEventType = Literal[
    "birth",
    "marriage",
    "death",
    "residence",
    "census",
    "immigration",
    "military",
    "land",
    "probate",
]


class PlaceEvent(BaseModel):
    """A dated appearance of a person at a place (for migration tracking)."""
    place_raw: str
    event_type: PlaceEventType = "residence"
    date: str | None = None
    year: int | None = None
    place_norm: PlaceHierarchy | None = None
    source: str | None = None

    def best_year(self) -> int | None:
        return self.year or extract_year(self.date)


class Person(BaseModel):
    """
    Individual from an imported tree.

    Every field except `id` is optional: GEDCOM exports are
    rarely complete.
    """
    id: str
    gedcom_id: str | None = None  # @I###@ format

    # Names
    name: str | None = None  # Display name, slashes stripped
    given: str | None = None
    surname: str | None = None
    nickname: str | None = None
    maiden_name: str | None = None

    # Kept verbatim, exports use M/F/U/X and worse
    sex: str | None = None

    # Vital events (raw strings)
    birth: str | None = None
    birth_place: str | None = None
    death: str | None = None
    death_place: str | None = None

    occupation: str | None = None
    notes: list[str] = Field(default_factory=list)

    # Family links
    famc: str | None = None  # Family as child
    fams: list[str] = Field(default_factory=list)  # Families as spouse

    # Place timeline beyond birth/death
    place_events: list[PlaceEvent] = Field(default_factory=list)

    def birth_year(self) -> int | None:
        """Extract birth year if known."""
        return extract_year(self.birth)

    def death_year(self) -> int | None:
        """Extract death year if known."""
        return extract_year(self.death)

    def display_name(self) -> str:
        if self.name:
            return self.name
        if self.given and self.surname:
            return f"{self.given} {self.surname}"
        return self.given or self.surname or "Unknown"

    def lifespan(self) -> str:
        """Format as "1820 - 1890" or "b. 1820"."""
        birth = self.birth_year() or self.birth or "?"
        death = self.death_year() or self.death
        if death:
            return f"{birth} - {death}"
        return f"b. {birth}"

    def is_living(self) -> bool:
        return not self.death


class Family(BaseModel):
    """
    Family unit linking individuals.

    Zero or one husband, zero or one wife. `children` keeps the
    order (and any repeats) found in the source file.
    """
    id: str
    gedcom_id: str | None = None  # @F###@ format

    husb: str | None = None
    wife: str | None = None
    children: list[str] = Field(default_factory=list)

    marriage_date: str | None = None
    marriage_place: str | None = None
    notes: list[str] = Field(default_factory=list)

    def parents(self) -> list[str]:
        """Husband then wife, skipping whichever is absent."""
        return [p for p in (self.husb, self.wife) if p]


class GedcomData(BaseModel):
    """
    Result of parsing one GEDCOM file.

    A snapshot: filtering produces a new instance rather than
    editing this one.
    """
    people: dict[str, Person] = Field(default_factory=dict)
    families: dict[str, Family] = Field(default_factory=dict)

    # Quick lookups, built after the line scan
    child_to_parents: dict[str, list[str]] = Field(default_factory=dict)
    roots: list[str] = Field(default_factory=list)

    def parent_to_children(self) -> dict[str, list[str]]:
        """Invert `child_to_parents`, keeping first-seen child order."""
        result: dict[str, list[str]] = {}
        for child, parents in self.child_to_parents.items():
            for parent in parents:
                children = result.setdefault(parent, [])
                if child not in children:
                    children.append(child)
        return result

    def spouse_links(self) -> dict[str, list[str]]:
        """Map each spouse to the partners recorded in their families."""
        result: dict[str, list[str]] = {}
        for family in self.families.values():
            if family.husb and family.wife:
                result.setdefault(family.husb, [])
                result.setdefault(family.wife, [])
                if family.wife not in result[family.husb]:
                    result[family.husb].append(family.wife)
                if family.husb not in result[family.wife]:
                    result[family.wife].append(family.husb)
        return result

    def stats(self) -> dict:
        """Get tree statistics."""
        return {
            "people": len(self.people),
            "families": len(self.families),
            "roots": len(self.roots),
        }
