"""
Generation-limited views of a parsed tree, and GEDCOM export.

`filter_by_generations` starts from recently born people and walks
up through their ancestors; `export_gedcom` writes any GedcomData
back out as GEDCOM 5.5.1 text.
"""

from __future__ import annotations

import logging
from pathlib import Path

from family_tree.core.dates import extract_year
from family_tree.core.gedcom import GedcomLine
from family_tree.core.models import Family, GedcomData, Person

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_YEAR = 2026
DEFAULT_RECENT_WINDOW = 50


def find_recent_people(
    data: GedcomData,
    from_year: int = DEFAULT_REFERENCE_YEAR,
    recent_window: int = DEFAULT_RECENT_WINDOW,
) -> list[str]:
    """People born within `recent_window` years before `from_year`, or later."""
    seeds = []
    for pid, person in data.people.items():
        year = extract_year(person.birth)
        if year and year >= from_year - recent_window:
            seeds.append(pid)
    return seeds


def filter_by_generations(
    data: GedcomData,
    max_generations: int,
    from_year: int = DEFAULT_REFERENCE_YEAR,
    recent_window: int = DEFAULT_RECENT_WINDOW,
) -> GedcomData:
    """
    Keep recent people plus up to `max_generations` of their ancestors.

    Seeds are generation 0 and are always kept, so a non-positive
    `max_generations` yields just the seeds. The input is not modified.
    """
    included: dict[str, int] = {}  # person id -> shallowest generation seen
    included_families: set[str] = set()

    as_child: dict[str, list[str]] = {}
    as_spouse: dict[str, list[str]] = {}
    for fid, family in data.families.items():
        for child in family.children:
            if fid not in as_child.setdefault(child, []):
                as_child[child].append(fid)
        for spouse in family.parents():
            as_spouse.setdefault(spouse, []).append(fid)

    limit = max(max_generations, 0)

    def add_ancestors(pid: str, generation: int) -> None:
        if generation > limit:
            return
        if pid not in data.people:
            return
        # Revisit only when reached by a shorter path
        if pid in included and included[pid] <= generation:
            return
        included[pid] = generation

        for parent_id in data.child_to_parents.get(pid, []):
            add_ancestors(parent_id, generation + 1)

        # Keep the family record (and the other parent) when parents are in range
        if generation < limit:
            for fid in as_child.get(pid, []):
                included_families.add(fid)
                for parent_id in data.families[fid].parents():
                    add_ancestors(parent_id, generation + 1)

        # Marriage context only, the spouse is not pulled in
        included_families.update(as_spouse.get(pid, []))

    seeds = find_recent_people(data, from_year, recent_window)
    for pid in seeds:
        add_ancestors(pid, 0)

    people: dict[str, Person] = {pid: data.people[pid] for pid in data.people if pid in included}

    families: dict[str, Family] = {}
    for fid in data.families:
        if fid not in included_families:
            continue
        family = data.families[fid]
        families[fid] = family.model_copy(
            update={"children": [c for c in family.children if c in included]}
        )

    child_to_parents: dict[str, list[str]] = {}
    for child, parents in data.child_to_parents.items():
        if child not in included:
            continue
        kept = [p for p in parents if p in included]
        if kept:
            child_to_parents[child] = kept

    roots = [pid for pid in people if not child_to_parents.get(pid)]

    logger.debug(
        "Generation filter (%d gens from %d): %d seeds, %d/%d people, %d/%d families",
        max_generations, from_year, len(seeds),
        len(people), len(data.people), len(families), len(data.families),
    )
    return GedcomData(
        people=people,
        families=families,
        child_to_parents=child_to_parents,
        roots=roots,
    )


def _xref(record_id: str, gedcom_id: str | None, prefix: str) -> str:
    if gedcom_id:
        return gedcom_id
    if record_id.startswith("@") and record_id.endswith("@"):
        return record_id
    return f"@{prefix}{record_id}@"


def _person_xref(data: GedcomData, pid: str) -> str:
    person = data.people.get(pid)
    return _xref(pid, person.gedcom_id if person else None, "I")


def _family_xref(data: GedcomData, fid: str) -> str:
    family = data.families.get(fid)
    return _xref(fid, family.gedcom_id if family else None, "F")


def _event_lines(tag: str, date: str | None, place: str | None) -> list[GedcomLine]:
    if not date and not place:
        return []
    lines = [GedcomLine(1, tag)]
    if date:
        lines.append(GedcomLine(2, "DATE", date))
    if place:
        lines.append(GedcomLine(2, "PLAC", place))
    return lines


def _person_lines(data: GedcomData, pid: str, person: Person) -> list[GedcomLine]:
    lines = [GedcomLine(0, "INDI", xref=_person_xref(data, pid))]

    given = person.given
    if given is None and person.name:
        given = person.name
        if person.surname and given.endswith(person.surname):
            given = given[: -len(person.surname)].strip()
    if given or person.surname:
        if person.surname:
            full_name = f"{given} /{person.surname}/" if given else f"/{person.surname}/"
        else:
            full_name = given
        lines.append(GedcomLine(1, "NAME", full_name))
        if given:
            lines.append(GedcomLine(2, "GIVN", given))
        if person.surname:
            lines.append(GedcomLine(2, "SURN", person.surname))
        if person.nickname:
            lines.append(GedcomLine(2, "NICK", person.nickname))

    if person.sex:
        lines.append(GedcomLine(1, "SEX", person.sex))
    lines.extend(_event_lines("BIRT", person.birth, person.birth_place))
    lines.extend(_event_lines("DEAT", person.death, person.death_place))
    if person.occupation:
        lines.append(GedcomLine(1, "OCCU", person.occupation))
    for note in person.notes:
        lines.append(GedcomLine(1, "NOTE", note))
    if person.famc and person.famc in data.families:
        lines.append(GedcomLine(1, "FAMC", _family_xref(data, person.famc)))
    for fid in person.fams:
        if fid in data.families:
            lines.append(GedcomLine(1, "FAMS", _family_xref(data, fid)))
    return lines


def _family_lines(data: GedcomData, fid: str, family: Family) -> list[GedcomLine]:
    lines = [GedcomLine(0, "FAM", xref=_family_xref(data, fid))]
    # Spouse families can outlive a filtered-out spouse; only point at exported people
    if family.husb and family.husb in data.people:
        lines.append(GedcomLine(1, "HUSB", _person_xref(data, family.husb)))
    if family.wife and family.wife in data.people:
        lines.append(GedcomLine(1, "WIFE", _person_xref(data, family.wife)))
    lines.extend(_event_lines("MARR", family.marriage_date, family.marriage_place))
    for child_id in family.children:
        if child_id in data.people:
            lines.append(GedcomLine(1, "CHIL", _person_xref(data, child_id)))
    for note in family.notes:
        lines.append(GedcomLine(1, "NOTE", note))
    return lines


def export_gedcom(data: GedcomData, tree_name: str = "Filtered Tree") -> str:
    """Serialize a tree as GEDCOM 5.5.1 text (HEAD, INDI, FAM, TRLR)."""
    lines = [
        GedcomLine(0, "HEAD"),
        GedcomLine(1, "SOUR", "Family Tree Memory Maker"),
        GedcomLine(2, "NAME", tree_name),
        GedcomLine(1, "GEDC"),
        GedcomLine(2, "VERS", "5.5.1"),
        GedcomLine(2, "FORM", "LINEAGE-LINKED"),
        GedcomLine(1, "CHAR", "UTF-8"),
    ]
    for pid, person in data.people.items():
        lines.extend(_person_lines(data, pid, person))
    for fid, family in data.families.items():
        lines.extend(_family_lines(data, fid, family))
    lines.append(GedcomLine(0, "TRLR"))

    return "\n".join(line.to_string() for line in lines) + "\n"


def save_gedcom(data: GedcomData, path: str | Path, tree_name: str = "Filtered Tree") -> None:
    """Write a tree to a GEDCOM file."""
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        f.write(export_gedcom(data, tree_name))
    logger.info("Wrote %d people to %s", len(data.people), path)
