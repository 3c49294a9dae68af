"""
GEDCOM import.

Handles:
- Tokenizing `LEVEL [XREF] TAG [VALUE]` lines (malformed lines are skipped)
- Folding INDI/FAM records into Person/Family models
- Building the child -> parents index and root list

Only the tags listed in `GedcomParser` are understood; everything
else is ignored rather than rejected.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from family_tree.core.models import Family, GedcomData, Person

logger = logging.getLogger(__name__)

LINE_PATTERN = re.compile(r"^(\d+)\s+(@[^@]+@)?\s*([A-Z0-9_]+)?\s*(.*)?$", re.IGNORECASE)
SURNAME_PATTERN = re.compile(r"/([^/]*)/")


@dataclass
class GedcomLine:
    """A single parsed GEDCOM line."""
    level: int
    tag: str
    value: str = ""
    xref: str | None = None  # @I123@ style ID

    @classmethod
    def parse(cls, line: str) -> GedcomLine | None:
        """Parse a GEDCOM line, or return None if it doesn't look like one."""
        if not line.strip():
            return None

        # Examples:
        #   0 @I1@ INDI
        #   1 NAME John /Smith/
        #   2 DATE 15 JAN 1862
        match = LINE_PATTERN.match(line)
        if not match:
            return None

        return cls(
            level=int(match.group(1)),
            xref=match.group(2) or None,
            tag=(match.group(3) or "").upper(),
            value=(match.group(4) or "").strip(),
        )

    def to_string(self) -> str:
        """Convert back to GEDCOM format."""
        parts = [str(self.level)]
        if self.xref:
            parts.append(self.xref)
        parts.append(self.tag)
        if self.value:
            parts.append(self.value)
        return " ".join(parts)


RecordKind = Literal["INDI", "FAM"]


@dataclass
class _BuilderState:
    """Record currently being filled while scanning lines."""
    record: Person | Family | None = None
    kind: RecordKind | None = None
    event: str | None = None  # Level-1 tag owning following level-2 lines


class GedcomParser:
    """
    Line-oriented GEDCOM reader.

    All per-parse state lives in local variables of `parse`, so a
    single instance can be shared across threads.
    """

    def parse(self, text: str) -> GedcomData:
        """Parse GEDCOM text into people, families and derived indexes."""
        people: dict[str, Person] = {}
        families: dict[str, Family] = {}
        state = _BuilderState()
        skipped = 0

        for raw in re.split(r"\r?\n", text):
            if not raw.strip():
                continue
            line = GedcomLine.parse(raw)
            if line is None:
                skipped += 1
                continue
            state = self._fold(line, state, people, families)

        child_to_parents = build_child_to_parents(families)
        roots = [pid for pid in people if pid not in child_to_parents]

        logger.debug(
            "Parsed %d people, %d families, %d roots (%d malformed lines skipped)",
            len(people), len(families), len(roots), skipped,
        )
        return GedcomData(
            people=people,
            families=families,
            child_to_parents=child_to_parents,
            roots=roots,
        )

    def _fold(
        self,
        line: GedcomLine,
        state: _BuilderState,
        people: dict[str, Person],
        families: dict[str, Family],
    ) -> _BuilderState:
        """Apply one line to the builder state and return the new state."""
        if line.level == 0:
            if line.xref and line.tag == "INDI":
                person = people.get(line.xref)
                if person is None:
                    person = people[line.xref] = Person(id=line.xref, gedcom_id=line.xref)
                return _BuilderState(record=person, kind="INDI")
            if line.xref and line.tag == "FAM":
                family = families.get(line.xref)
                if family is None:
                    family = families[line.xref] = Family(id=line.xref, gedcom_id=line.xref)
                return _BuilderState(record=family, kind="FAM")
            # HEAD, SOUR, TRLR, ... close the current record
            return _BuilderState()

        if state.record is None:
            return state

        if line.level == 1:
            state.event = line.tag

        if state.kind == "INDI":
            self._apply_person(state.record, line, state.event)
        else:
            self._apply_family(state.record, line, state.event)
        return state

    def _apply_person(self, person: Person, line: GedcomLine, event: str | None) -> None:
        tag, value = line.tag, line.value

        if line.level == 1:
            if tag == "NAME":
                # GEDCOM NAME like: Given /Surname/
                surname = SURNAME_PATTERN.search(value)
                person.name = value.replace("/", "").strip()
                person.surname = surname.group(1).strip() if surname else None
                person.given = value.split("/", 1)[0].strip() or None
            elif tag == "SEX":
                person.sex = value
            elif tag == "FAMC":
                person.famc = value  # last one wins
            elif tag == "FAMS":
                person.fams.append(value)
            elif tag == "OCCU":
                person.occupation = value
            elif tag == "NOTE" and value:
                person.notes.append(value)
            return

        if line.level != 2:
            return
        if event == "NAME" and tag == "NICK":
            person.nickname = value
        elif event == "BIRT":
            if tag == "DATE":
                person.birth = value
            elif tag == "PLAC":
                person.birth_place = value
        elif event == "DEAT":
            if tag == "DATE":
                person.death = value
            elif tag == "PLAC":
                person.death_place = value

    def _apply_family(self, family: Family, line: GedcomLine, event: str | None) -> None:
        tag, value = line.tag, line.value

        if line.level == 1:
            if tag == "HUSB":
                family.husb = value
            elif tag == "WIFE":
                family.wife = value
            elif tag == "CHIL":
                family.children.append(value)  # repeats kept
            elif tag == "NOTE" and value:
                family.notes.append(value)
        elif line.level == 2 and event == "MARR":
            if tag == "DATE":
                family.marriage_date = value
            elif tag == "PLAC":
                family.marriage_place = value


def build_child_to_parents(families: dict[str, Family]) -> dict[str, list[str]]:
    """Map each child to the husband and wife of every family listing them."""
    child_to_parents: dict[str, list[str]] = {}
    for family in families.values():
        for child in family.children:
            child_to_parents.setdefault(child, []).extend(family.parents())
    return child_to_parents


def parse_gedcom(text: str) -> GedcomData:
    """Parse GEDCOM text. Never raises on malformed content."""
    return GedcomParser().parse(text)


def load_gedcom(path: str | Path) -> GedcomData:
    """Load and parse a GEDCOM file."""
    path = Path(path)
    with path.open("r", encoding="utf-8-sig", errors="replace") as f:
        text = f.read()
    logger.info("Loading GEDCOM %s", path)
    return parse_gedcom(text)
