"""Helpers for the free-text dates found in GEDCOM files."""

from __future__ import annotations

import re

# "ABT 1820", "BEF 1790", "15 JAN 1862" ... any 4-digit year in 1000-2029
YEAR_PATTERN = re.compile(r"\b(1[0-9]{3}|20[0-2][0-9])\b")

MIN_MOTHER_AGE = 12
MAX_MOTHER_AGE = 60


def extract_year(date_str: str | None) -> int | None:
    """Pull the first plausible 4-digit year out of a date string."""
    if not date_str:
        return None
    match = YEAR_PATTERN.search(date_str)
    if match:
        return int(match.group(1))
    return None


def calculate_mother_age(
    child_birth_year: int | None,
    mother_birth_year: int | None,
) -> int | None:
    """
    Mother's age at the child's birth.

    Returns None when either year is unknown or the difference falls
    outside 12-60, which almost always means a data entry error.
    """
    if not child_birth_year or not mother_birth_year:
        return None
    age = child_birth_year - mother_birth_year
    if MIN_MOTHER_AGE <= age <= MAX_MOTHER_AGE:
        return age
    return None
