"""Tunable settings for filtering and location analysis."""

from __future__ import annotations

import os
from dataclasses import dataclass

from family_tree.core.filter import DEFAULT_RECENT_WINDOW, DEFAULT_REFERENCE_YEAR
from family_tree.places.cleanup import DEFAULT_TOP_ISSUES


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class AnalysisConfig:
    """Configuration for generation filtering and cleanup reports."""

    # Generation filter
    reference_year: int = DEFAULT_REFERENCE_YEAR
    recent_window: int = DEFAULT_RECENT_WINDOW  # Years before reference_year counted as "recent"
    max_generations: int = 4

    # Cleanup report
    top_issue_limit: int = DEFAULT_TOP_ISSUES

    # Export
    tree_name: str = "Filtered Tree"

    @classmethod
    def from_env(cls) -> AnalysisConfig:
        """Build a config, letting FAMILY_TREE_* variables override defaults."""
        defaults = cls()
        return cls(
            reference_year=_env_int("FAMILY_TREE_REFERENCE_YEAR", defaults.reference_year),
            recent_window=_env_int("FAMILY_TREE_RECENT_WINDOW", defaults.recent_window),
            max_generations=_env_int("FAMILY_TREE_MAX_GENERATIONS", defaults.max_generations),
            top_issue_limit=_env_int("FAMILY_TREE_TOP_ISSUES", defaults.top_issue_limit),
            tree_name=os.environ.get("FAMILY_TREE_NAME", defaults.tree_name),
        )
