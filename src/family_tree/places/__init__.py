"""Place normalization and location cleanup."""

from family_tree.places.normalizer import (
    format_place,
    get_region,
    is_same_location,
    normalize_place,
)
from family_tree.places.cleanup import (
    CleanupReport,
    LocationCluster,
    LocationIssue,
    LocationSummary,
    analyze_locations,
    cluster_locations,
    detect_location_issues,
    find_similar_locations,
    generate_cleanup_report,
)

__all__ = [
    "format_place",
    "get_region",
    "is_same_location",
    "normalize_place",
    "CleanupReport",
    "LocationCluster",
    "LocationIssue",
    "LocationSummary",
    "analyze_locations",
    "cluster_locations",
    "detect_location_issues",
    "find_similar_locations",
    "generate_cleanup_report",
]
