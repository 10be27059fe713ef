"""
pipelines
=========

Does: Forward (description → color) and reverse (color → description) flows.
Returns: Public API for parsing descriptions and matching colors.
Used By: Orchestrator, CLI and gradient helpers.
"""

from __future__ import annotations

# Public API re-exports
from .phrase_pipeline import (
    ParsedDescription,
    analyze_description,
    parse_description,
)
from .match_pipeline import (
    MatchResult,
    best_match,
    find_best_match,
    match_distance,
)

__all__ = [
    # phrase_pipeline
    "ParsedDescription",
    "analyze_description",
    "parse_description",
    # match_pipeline
    "MatchResult",
    "best_match",
    "find_best_match",
    "match_distance",
]

__docformat__ = "google"
