"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from family_tree.core.gedcom import parse_gedcom
from family_tree.core.models import GedcomData, Person, PlaceEvent


# =============================================================================
# Sample Data Fixtures
# =============================================================================

SAMPLE_GEDCOM = """0 HEAD
1 SOUR Test
1 GEDC
2 VERS 5.5.1
2 FORM LINEAGE-LINKED
1 CHAR UTF-8
0 @I1@ INDI
1 NAME George /Miller/
1 SEX M
1 BIRT
2 DATE 3 MAR 1900
2 PLAC Ulster, Ulster, New York
1 FAMS @F1@
0 @I2@ INDI
1 NAME Grace /Miller/
1 SEX F
1 BIRT
2 DATE 1905
2 PLAC Kingston, Ulster County, New York
1 FAMS @F1@
0 @I3@ INDI
1 NAME John /Smith/
2 NICK Jack
1 SEX M
1 BIRT
2 DATE 15 JAN 1950
2 PLAC Boston, Massachusetts, USA
1 DEAT
2 DATE 2010
2 PLAC Chester County, Pennsylvania
1 OCCU Farmer
1 NOTE Served in the merchant marine
1 FAMC @F1@
1 FAMS @F2@
0 @I4@ INDI
1 NAME Mary /Jones/
1 SEX F
1 BIRT
2 DATE ABT 1952
2 PLAC boston, Massachusetts
1 FAMS @F2@
0 @I5@ INDI
1 NAME Alice /Smith/
1 SEX F
1 BIRT
2 DATE 1985
2 PLAC Cambridge, MA
1 FAMC @F2@
0 @I6@ INDI
1 NAME Bob /Smith/
1 SEX M
1 BIRT
2 DATE 12 JUN 1988
2 PLAC Boston, MA
1 FAMC @F2@
0 @F1@ FAM
1 HUSB @I1@
1 WIFE @I2@
1 CHIL @I3@
0 @F2@ FAM
1 HUSB @I3@
1 WIFE @I4@
1 MARR
2 DATE 1980
2 PLAC Boston, Massachusetts, USA
1 CHIL @I5@
1 CHIL @I6@
0 TRLR
"""


@pytest.fixture
def sample_gedcom_text() -> str:
    """Three generations: Millers -> John Smith + Mary Jones -> Alice, Bob."""
    return SAMPLE_GEDCOM


@pytest.fixture
def sample_gedcom_file(tmp_path: Path) -> Path:
    """Write the sample GEDCOM to a temporary file."""
    path = tmp_path / "sample.ged"
    path.write_text(SAMPLE_GEDCOM, encoding="utf-8")
    return path


@pytest.fixture
def sample_data() -> GedcomData:
    """Parsed sample tree."""
    return parse_gedcom(SAMPLE_GEDCOM)


@pytest.fixture
def sample_people() -> list[Person]:
    """People with overlapping and messy place strings."""
    return [
        Person(
            id="P1",
            birth="1850",
            birth_place="Boston, MA",
            death="1910",
            death_place="Boston, MA",
        ),
        Person(id="P2", birth="ABT 1855", birth_place="boston, Massachusetts"),
        Person(id="P3", birth="1860", birth_place="Cambridge, MA"),
        Person(
            id="P4",
            birth="1820",
            birth_place="Texas",
            place_events=[
                PlaceEvent(place_raw="Ulster, Ulster, New York", event_type="census", year=1870),
            ],
        ),
    ]
