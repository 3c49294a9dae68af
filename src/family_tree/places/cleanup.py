"""
Location cleanup for an imported tree.

Builds per-location summaries from every birth, death and place
event, flags data-quality issues, and groups near-duplicate place
strings into merge suggestions. Everything here is advisory: the
similarity rules are heuristics and a person confirms any merge.

Clustering compares every remaining location against every other
(quadratic in distinct locations), which is fine for a few thousand
places.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Literal

from pydantic import BaseModel, Field

from family_tree.core.models import PlaceHierarchy, Person
from family_tree.places.normalizer import get_region, normalize_place

logger = logging.getLogger(__name__)

IssueType = Literal[
    "duplicate_parts",
    "too_generic",
    "possible_duplicate",
    "missing_county",
    "missing_state",
]
Severity = Literal["warning", "error", "info"]
ClusterConfidence = Literal["high", "medium", "low"]
EventKind = Literal["birth", "death", "other"]

DEFAULT_TOP_ISSUES = 20

# Minimum word length that counts toward word overlap
MIN_WORD_LENGTH = 4


class LocationIssue(BaseModel):
    """A data-quality finding for one place string."""
    type: IssueType
    severity: Severity
    message: str
    suggestion: str | None = None
    related_locations: list[str] = Field(default_factory=list)


class LocationSummary(BaseModel):
    """Everything known about one raw place string across the tree."""
    raw: str
    normalized: PlaceHierarchy
    region: str | None = None
    count: int = 0  # Distinct people
    people: list[str] = Field(default_factory=list)
    birth_count: int = 0
    death_count: int = 0
    other_count: int = 0
    year_range: tuple[int, int] | None = None
    issues: list[LocationIssue] = Field(default_factory=list)

    @property
    def min_year(self) -> int | None:
        return self.year_range[0] if self.year_range else None

    @property
    def max_year(self) -> int | None:
        return self.year_range[1] if self.year_range else None

    def add_year(self, year: int) -> None:
        if self.year_range is None:
            self.year_range = (year, year)
        else:
            self.year_range = (min(self.year_range[0], year), max(self.year_range[1], year))


class LocationCluster(BaseModel):
    """A group of place strings that probably mean the same place."""
    canonical: str
    variants: list[str] = Field(default_factory=list)
    total_count: int = 0
    confidence: ClusterConfidence = "medium"
    reason: str = ""


class TopIssue(BaseModel):
    location: str
    issues: list[LocationIssue]
    count: int


class CleanupReport(BaseModel):
    """Aggregate view of location problems in a tree."""
    total_locations: int = 0
    total_issues: int = 0
    issues_by_type: dict[str, int] = Field(default_factory=dict)
    clusters: list[LocationCluster] = Field(default_factory=list)
    top_issues: list[TopIssue] = Field(default_factory=list)


# =============================================================================
# Analysis
# =============================================================================

def analyze_locations(people: Iterable[Person]) -> dict[str, LocationSummary]:
    """
    Summarize every place referenced by `people`.

    Keys are the raw place strings, in first-seen order.
    """
    location_map: dict[str, LocationSummary] = {}

    for person in people:
        if person.birth_place:
            _register(location_map, person.birth_place, person.id, "birth", person.birth_year())
        if person.death_place:
            _register(location_map, person.death_place, person.id, "death", person.death_year())
        for event in person.place_events:
            if event.place_raw:
                _register(location_map, event.place_raw, person.id, "other", event.best_year())

    all_locations = list(location_map)
    hierarchies = {loc: summary.normalized for loc, summary in location_map.items()}
    for location, summary in location_map.items():
        summary.issues = detect_location_issues(
            location, all_locations, summary.normalized, hierarchies
        )

    logger.debug("Analyzed %d distinct locations", len(location_map))
    return location_map


def _register(
    location_map: dict[str, LocationSummary],
    location: str,
    person_id: str,
    kind: EventKind,
    year: int | None,
) -> None:
    summary = location_map.get(location)
    if summary is None:
        normalized = normalize_place(location)
        summary = location_map[location] = LocationSummary(
            raw=location,
            normalized=normalized,
            region=get_region(normalized),
        )

    if person_id not in summary.people:
        summary.people.append(person_id)
        summary.count += 1

    if kind == "birth":
        summary.birth_count += 1
    elif kind == "death":
        summary.death_count += 1
    else:
        summary.other_count += 1

    if year:
        summary.add_year(year)


# =============================================================================
# Issue detection
# =============================================================================

def _parts_lower(location: str) -> list[str]:
    return [p.strip().lower() for p in location.split(",")]


def has_duplicate_parts(location: str) -> bool:
    parts = _parts_lower(location)
    return len(set(parts)) < len(parts)


def detect_location_issues(
    location: str,
    all_locations: Iterable[str] = (),
    normalized: PlaceHierarchy | None = None,
    hierarchies: Mapping[str, PlaceHierarchy] | None = None,
) -> list[LocationIssue]:
    """Flag data-quality problems in one place string."""
    issues: list[LocationIssue] = []
    parts = [p.strip() for p in location.split(",")]
    parts_lower = [p.lower() for p in parts]
    if normalized is None:
        normalized = normalize_place(location)

    # e.g. "Ulster, Ulster, New York"
    if has_duplicate_parts(location):
        duplicates = [p for i, p in enumerate(parts_lower) if parts_lower.index(p) != i]
        issues.append(LocationIssue(
            type="duplicate_parts",
            severity="warning",
            message=f'Duplicate "{duplicates[0]}" - county may be incorrectly used as town',
            suggestion="Remove duplicate or verify correct town name",
        ))

    if len(parts) == 1:
        issues.append(LocationIssue(
            type="too_generic",
            severity="info",
            message="Location is just a state/country - consider adding county and city",
            suggestion="Add more specific location details",
        ))
    elif len(parts) == 2 and parts_lower[1] == "united states":
        issues.append(LocationIssue(
            type="too_generic",
            severity="info",
            message="Location is just state level - consider adding county",
            suggestion="Add county for more precise records",
        ))

    if normalized.state and not normalized.county and len(parts) >= 2:
        issues.append(LocationIssue(
            type="missing_county",
            severity="info",
            message="No county detected in location",
        ))

    similar = find_similar_locations(location, all_locations, hierarchies)
    if similar:
        issues.append(LocationIssue(
            type="possible_duplicate",
            severity="warning",
            message=f"{len(similar)} similar location(s) found",
            suggestion="Consider merging these locations",
            related_locations=similar,
        ))

    return issues


# =============================================================================
# Similarity
# =============================================================================

def _words(location_lower: str) -> set[str]:
    return {w for w in re.split(r"[,\s]+", location_lower) if len(w) >= MIN_WORD_LENGTH}


def _hierarchy(
    location: str,
    hierarchies: Mapping[str, PlaceHierarchy] | None,
) -> PlaceHierarchy:
    if hierarchies is not None and location in hierarchies:
        return hierarchies[location]
    return normalize_place(location)


def is_similar_location(
    location: str,
    other: str,
    normalized: PlaceHierarchy | None = None,
    other_normalized: PlaceHierarchy | None = None,
) -> bool:
    """
    Heuristic match between two distinct place strings.

    Similar when they share a county and state, when one contains
    the other (ignoring case), or when at least two longer words
    overlap and cover half of the shorter word set.
    """
    if location == other:
        return False
    if normalized is None:
        normalized = normalize_place(location)
    if other_normalized is None:
        other_normalized = normalize_place(other)

    if (
        normalized.county
        and normalized.county == other_normalized.county
        and normalized.state == other_normalized.state
    ):
        return True

    location_lower = location.lower()
    other_lower = other.lower()
    if location_lower in other_lower or other_lower in location_lower:
        return True

    words1 = _words(location_lower)
    words2 = _words(other_lower)
    overlap = words1 & words2
    return len(overlap) >= 2 and len(overlap) >= min(len(words1), len(words2)) * 0.5


def find_similar_locations(
    location: str,
    all_locations: Iterable[str],
    hierarchies: Mapping[str, PlaceHierarchy] | None = None,
) -> list[str]:
    """Other locations that look like variants of `location`."""
    normalized = _hierarchy(location, hierarchies)
    return [
        other
        for other in all_locations
        if is_similar_location(location, other, normalized, _hierarchy(other, hierarchies))
    ]


# =============================================================================
# Clustering
# =============================================================================

def canonical_score(location: str, summary: LocationSummary | None) -> int:
    """Higher is a better canonical spelling for a cluster."""
    score = len(location.split(",")) * 10
    normalized = summary.normalized if summary else normalize_place(location)
    if normalized.county:
        score += 20
    if normalized.city:
        score += 15
    score += min(summary.count if summary else 0, 10)
    if not has_duplicate_parts(location):
        score += 25
    return score


def find_best_canonical(
    locations: list[str],
    location_map: Mapping[str, LocationSummary],
) -> str:
    """Highest scoring location; ties go to the first one listed."""
    return max(locations, key=lambda loc: canonical_score(loc, location_map.get(loc)))


def cluster_locations(location_map: Mapping[str, LocationSummary]) -> list[LocationCluster]:
    """Group similar locations for bulk cleanup, largest clusters first."""
    clusters: list[LocationCluster] = []
    processed: set[str] = set()
    locations = list(location_map)
    hierarchies = {loc: summary.normalized for loc, summary in location_map.items()}

    for location in locations:
        if location in processed:
            continue

        remaining = [loc for loc in locations if loc not in processed]
        similar = find_similar_locations(location, remaining, hierarchies)
        if not similar:
            continue

        members = [location, *similar]
        canonical = find_best_canonical(members, location_map)
        total_count = sum(location_map[loc].count for loc in members)

        confidence: ClusterConfidence = "medium"
        reason = "Similar location names"

        counties = [location_map[loc].normalized.county for loc in members]
        if counties[0] and len(set(counties)) == 1:
            confidence = "high"
            reason = f"All in {counties[0]}"

        word_counts = [len(re.split(r"[,\s]+", loc)) for loc in members]
        if max(word_counts) - min(word_counts) > 3:
            confidence = "low"
            reason = "Significant variation in detail level"

        clusters.append(LocationCluster(
            canonical=canonical,
            variants=[loc for loc in members if loc != canonical],
            total_count=total_count,
            confidence=confidence,
            reason=reason,
        ))
        processed.update(members)

    clusters.sort(key=lambda c: c.total_count, reverse=True)
    return clusters


# =============================================================================
# Report
# =============================================================================

def generate_cleanup_report(
    location_map: Mapping[str, LocationSummary],
    top_limit: int = DEFAULT_TOP_ISSUES,
) -> CleanupReport:
    """Aggregate issue counts, clusters and the most-used problem locations."""
    issues_by_type: dict[str, int] = {}
    top_issues: list[TopIssue] = []
    total_issues = 0

    for location, summary in location_map.items():
        if not summary.issues:
            continue
        top_issues.append(TopIssue(location=location, issues=summary.issues, count=summary.count))
        for issue in summary.issues:
            issues_by_type[issue.type] = issues_by_type.get(issue.type, 0) + 1
            total_issues += 1

    # Most people affected first
    top_issues.sort(key=lambda t: t.count, reverse=True)

    return CleanupReport(
        total_locations=len(location_map),
        total_issues=total_issues,
        issues_by_type=issues_by_type,
        clusters=cluster_locations(location_map),
        top_issues=top_issues[:top_limit],
    )
