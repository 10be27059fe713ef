"""
logic
=====

Namespace for the phrase table and the parse/match pipelines.

Public API:
- phrase_table: build_phrase_table, phrase_for, intensity_code, split_intensity_code
- pipelines   : parse_description, analyze_description, best_match,
                find_best_match, match_distance
"""

from __future__ import annotations

from .phrase_table import (
    build_phrase_table,
    intensity_code,
    phrase_for,
    split_intensity_code,
)
from .pipelines import (
    MatchResult,
    analyze_description,
    best_match,
    find_best_match,
    match_distance,
    parse_description,
)

__all__ = [
    "build_phrase_table",
    "intensity_code",
    "phrase_for",
    "split_intensity_code",
    "MatchResult",
    "analyze_description",
    "best_match",
    "find_best_match",
    "match_distance",
    "parse_description",
]
