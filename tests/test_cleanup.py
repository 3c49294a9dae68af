"""Tests for location analysis, issue detection and clustering."""

from __future__ import annotations

from family_tree.core.models import Person, PlaceEvent
from family_tree.places.cleanup import (
    CleanupReport,
    LocationSummary,
    analyze_locations,
    canonical_score,
    cluster_locations,
    detect_location_issues,
    find_best_canonical,
    find_similar_locations,
    generate_cleanup_report,
    is_similar_location,
)
from family_tree.places.normalizer import normalize_place


def _summary_map(counts: dict[str, int]) -> dict[str, LocationSummary]:
    """Location map with the given person counts and no issues."""
    return {
        loc: LocationSummary(raw=loc, normalized=normalize_place(loc), count=count)
        for loc, count in counts.items()
    }


class TestAnalyzeLocations:
    """Tests for building location summaries."""

    def test_keys_in_first_seen_order(self, sample_people):
        """Test that summaries keep first-seen place order."""
        location_map = analyze_locations(sample_people)
        assert list(location_map) == [
            "Boston, MA",
            "boston, Massachusetts",
            "Cambridge, MA",
            "Texas",
            "Ulster, Ulster, New York",
        ]

    def test_person_counted_once_per_location(self, sample_people):
        """Test a person is counted once even with two events at a place."""
        summary = analyze_locations(sample_people)["Boston, MA"]
        assert summary.count == 1
        assert summary.people == ["P1"]
        assert summary.birth_count == 1
        assert summary.death_count == 1
        assert summary.other_count == 0

    def test_year_range(self, sample_people):
        """Test year range spans birth and death years."""
        summary = analyze_locations(sample_people)["Boston, MA"]
        assert summary.year_range == (1850, 1910)
        assert summary.min_year == 1850
        assert summary.max_year == 1910

    def test_other_events(self, sample_people):
        """Test place events are counted as other events."""
        summary = analyze_locations(sample_people)["Ulster, Ulster, New York"]
        assert summary.other_count == 1
        assert summary.year_range == (1870, 1870)

    def test_normalized_and_region(self, sample_people):
        """Test summaries carry the normalized hierarchy and region."""
        summary = analyze_locations(sample_people)["Cambridge, MA"]
        assert summary.normalized.city == "Cambridge"
        assert summary.region == "New England"

    def test_multiple_people(self):
        """Test several people sharing one place."""
        people = [
            Person(id="A", birth_place="Dublin, Ireland"),
            Person(id="B", death_place="Dublin, Ireland", death="1901"),
        ]
        summary = analyze_locations(people)["Dublin, Ireland"]
        assert summary.count == 2
        assert summary.people == ["A", "B"]
        assert summary.birth_count == 1
        assert summary.death_count == 1
        assert summary.year_range == (1901, 1901)
        assert summary.region == "Ireland"

    def test_empty(self):
        """Test analyzing no people."""
        assert analyze_locations([]) == {}
        assert analyze_locations([Person(id="A")]) == {}

    def test_issues_attached(self, sample_people):
        """Test issues are detected during analysis."""
        location_map = analyze_locations(sample_people)
        types = [i.type for i in location_map["Boston, MA"].issues]
        assert types == ["missing_county", "possible_duplicate"]
        related = location_map["Boston, MA"].issues[-1].related_locations
        assert related == ["boston, Massachusetts"]


class TestDetectLocationIssues:
    """Tests for per-location issue detection."""

    def test_single_segment_too_generic(self):
        """Test a bare state is flagged as too generic."""
        issues = detect_location_issues("Texas")
        assert len(issues) == 1
        assert issues[0].type == "too_generic"
        assert issues[0].severity == "info"

    def test_state_and_united_states_too_generic(self):
        """Test state plus United States is flagged as too generic."""
        types = [i.type for i in detect_location_issues("Ohio, United States")]
        assert "too_generic" in types

    def test_duplicate_parts(self):
        """Test repeated segments are flagged."""
        issues = detect_location_issues("Ulster, Ulster, New York")
        duplicate = [i for i in issues if i.type == "duplicate_parts"]
        assert len(duplicate) == 1
        assert duplicate[0].severity == "warning"
        assert '"ulster"' in duplicate[0].message

    def test_duplicate_parts_case_insensitive(self):
        """Test duplicate detection ignores case."""
        types = [i.type for i in detect_location_issues("Ulster, ULSTER, New York")]
        assert "duplicate_parts" in types

    def test_missing_county(self):
        """Test a state without county is flagged."""
        issues = detect_location_issues("Boston, Massachusetts")
        assert [i.type for i in issues] == ["missing_county"]

    def test_complete_location_has_no_issues(self):
        """Test a full city, county and state location."""
        assert detect_location_issues("West Chester, Chester County, Pennsylvania") == []

    def test_possible_duplicate(self):
        """Test similar locations are reported as possible duplicates."""
        issues = detect_location_issues(
            "Boston, MA",
            ["Boston, MA", "boston, Massachusetts", "Cambridge, MA"],
        )
        duplicate = [i for i in issues if i.type == "possible_duplicate"]
        assert len(duplicate) == 1
        assert duplicate[0].severity == "warning"
        assert duplicate[0].related_locations == ["boston, Massachusetts"]
        assert duplicate[0].message == "1 similar location(s) found"


class TestSimilarity:
    """Tests for the location similarity heuristic."""

    def test_same_string_is_not_similar(self):
        """Test identical strings are not reported as similar."""
        assert not is_similar_location("Boston, MA", "Boston, MA")

    def test_shared_county_and_state(self):
        """Test matching on county and state."""
        assert is_similar_location(
            "West Chester, Chester County, Pennsylvania",
            "Chester County, Pennsylvania, USA",
        )

    def test_substring_ignores_case(self):
        """Test matching when one string contains the other."""
        assert is_similar_location("Boston, MA", "boston, Massachusetts")

    def test_word_overlap(self):
        """Test matching on overlapping long words."""
        assert is_similar_location(
            "Ulster, Ulster, New York",
            "Kingston, Ulster County, New York",
        )

    def test_single_shared_word_not_enough(self):
        """Test one shared word does not match."""
        assert not is_similar_location("Springfield, Illinois", "Springfield, Missouri")

    def test_short_words_ignored(self):
        """Test short words do not count toward overlap."""
        assert not is_similar_location("Rye, NY", "Rye, NH")

    def test_different_places(self):
        """Test unrelated places."""
        assert not is_similar_location("Boston, MA", "Cambridge, MA")

    def test_find_similar_locations(self):
        """Test finding similar locations in a list."""
        locations = ["Boston, MA", "boston, Massachusetts", "Cambridge, MA", "Boston, Massachusetts, USA"]
        assert find_similar_locations("Boston, MA", locations) == [
            "boston, Massachusetts",
            "Boston, Massachusetts, USA",
        ]


class TestCanonical:
    """Tests for choosing the canonical spelling."""

    def test_score_components(self):
        """Test each part of the canonical score."""
        location_map = _summary_map({"Kingston, Ulster County, New York": 3})
        summary = location_map["Kingston, Ulster County, New York"]
        # 3 parts + county + city + count + no duplicates
        assert canonical_score("Kingston, Ulster County, New York", summary) == 30 + 20 + 15 + 3 + 25

    def test_count_capped(self):
        """Test usage count contributes at most ten points."""
        location_map = _summary_map({"Dublin, Ireland": 50})
        assert canonical_score("Dublin, Ireland", location_map["Dublin, Ireland"]) == 20 + 15 + 10 + 25

    def test_duplicate_parts_penalized(self):
        """Test duplicate parts lose the clean bonus."""
        location_map = _summary_map({
            "Ulster, Ulster, New York": 5,
            "Kingston, Ulster County, New York": 1,
        })
        best = find_best_canonical(list(location_map), location_map)
        assert best == "Kingston, Ulster County, New York"

    def test_ties_go_to_first(self):
        """Test equal scores keep the first candidate."""
        location_map = _summary_map({"Boston, MA": 1, "boston, Massachusetts": 1})
        assert find_best_canonical(list(location_map), location_map) == "Boston, MA"
        reordered = ["boston, Massachusetts", "Boston, MA"]
        assert find_best_canonical(reordered, location_map) == "boston, Massachusetts"


class TestClusterLocations:
    """Tests for clustering similar locations."""

    def test_boston_variants_cluster_cambridge_alone(self):
        """Test Boston spellings cluster without Cambridge."""
        location_map = _summary_map({
            "Boston, MA": 1,
            "boston, Massachusetts": 1,
            "Cambridge, MA": 1,
        })
        clusters = cluster_locations(location_map)
        assert len(clusters) == 1
        cluster = clusters[0]
        assert cluster.canonical == "Boston, MA"
        assert cluster.variants == ["boston, Massachusetts"]
        assert cluster.total_count == 2
        assert cluster.confidence == "medium"
        assert cluster.reason == "Similar location names"

    def test_high_confidence_same_county(self):
        """Test high confidence when all members share a county."""
        location_map = _summary_map({
            "West Chester, Chester County, Pennsylvania": 2,
            "Downingtown, Chester County, Pennsylvania": 1,
        })
        clusters = cluster_locations(location_map)
        assert len(clusters) == 1
        assert clusters[0].confidence == "high"
        assert clusters[0].reason == "All in Chester County"
        assert clusters[0].canonical == "West Chester, Chester County, Pennsylvania"

    def test_low_confidence_detail_spread(self):
        """Test low confidence when detail levels differ widely."""
        location_map = _summary_map({
            "Boston": 1,
            "North End, Boston, Suffolk County, Massachusetts, USA": 1,
        })
        clusters = cluster_locations(location_map)
        assert len(clusters) == 1
        assert clusters[0].confidence == "low"
        assert clusters[0].reason == "Significant variation in detail level"
        assert clusters[0].canonical == "North End, Boston, Suffolk County, Massachusetts, USA"

    def test_sorted_by_total_count(self):
        """Test clusters are ordered by total people."""
        location_map = _summary_map({
            "Dublin, Ireland": 1,
            "dublin, ireland, europe": 1,
            "Boston, MA": 5,
            "boston, Massachusetts": 4,
        })
        clusters = cluster_locations(location_map)
        assert [c.total_count for c in clusters] == [9, 2]

    def test_members_not_reused(self):
        """Test a location joins at most one cluster."""
        location_map = _summary_map({
            "Boston, MA": 1,
            "boston, Massachusetts": 1,
            "Boston, Massachusetts, USA": 1,
        })
        clusters = cluster_locations(location_map)
        assert len(clusters) == 1
        members = {clusters[0].canonical, *clusters[0].variants}
        assert members == set(location_map)

    def test_no_clusters(self):
        """Test distinct places produce no clusters."""
        assert cluster_locations(_summary_map({"Boston, MA": 1, "Dublin, Ireland": 1})) == []
        assert cluster_locations({}) == []


class TestCleanupReport:
    """Tests for generate_cleanup_report."""

    def test_report_counts(self, sample_people):
        """Test report totals and issue counts."""
        report = generate_cleanup_report(analyze_locations(sample_people))
        assert report.total_locations == 5
        assert report.issues_by_type == {
            "missing_county": 4,
            "possible_duplicate": 2,
            "too_generic": 1,
            "duplicate_parts": 1,
        }
        assert report.total_issues == 8

    def test_report_clusters(self, sample_people):
        """Test report includes clusters."""
        report = generate_cleanup_report(analyze_locations(sample_people))
        assert len(report.clusters) == 1
        assert report.clusters[0].canonical == "Boston, MA"

    def test_top_issues(self, sample_people):
        """Test top issues are ordered by people affected."""
        people = [*sample_people, Person(id="P5", birth_place="Texas"), Person(id="P6", death_place="Texas")]
        report = generate_cleanup_report(analyze_locations(people))
        assert report.top_issues[0].location == "Texas"
        assert report.top_issues[0].count == 3

    def test_top_issues_limited(self):
        """Test top issues honor the limit."""
        people = [Person(id=str(i), birth_place=f"Place{i}") for i in range(30)]
        report = generate_cleanup_report(analyze_locations(people))
        assert report.total_locations == 30
        assert len(report.top_issues) == 20
        assert len(generate_cleanup_report(analyze_locations(people), top_limit=5).top_issues) == 5

    def test_empty(self):
        """Test report for an empty tree."""
        report = generate_cleanup_report({})
        assert report == CleanupReport()
        assert report.total_issues == 0
        assert report.clusters == []

    def test_json_serializable(self, sample_people):
        """Test the report serializes to JSON."""
        report = generate_cleanup_report(analyze_locations(sample_people))
        dumped = report.model_dump(mode="json")
        assert dumped["total_locations"] == 5
        assert dumped["clusters"][0]["variants"] == ["boston, Massachusetts"]


def test_place_event_without_place_ignored():
    """Test place events with no place are skipped."""
    person = Person(id="A", place_events=[PlaceEvent(place_raw="", event_type="census")])
    assert analyze_locations([person]) == {}
