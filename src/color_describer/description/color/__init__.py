"""
color.
=====

Does: Aggregate the color-domain pieces of the description language: tables,
      palette store, adjective lexicon, Oklab math, parse/match pipelines and
      target resolution.
Used By: Orchestrator, CLI and tests.
Returns: Pure data structures and accessor functions; the palette is loaded
         lazily on first use.
"""

# ── Vocabulary ───────────────────────────────────────────────────────────────
from .vocab import (
    Palette,
    build_palette,
    get_aliases,
    get_names_by_hue,
    get_palette,
    lookup,
    reset_palette_cache,
)

# ── Lexicon ──────────────────────────────────────────────────────────────────
from .suffix import AdjectiveEffect, classify_adjective, is_adjective, tier_deltas

# ── Pipelines ────────────────────────────────────────────────────────────────
from .logic import (
    MatchResult,
    best_match,
    build_phrase_table,
    find_best_match,
    match_distance,
    parse_description,
)

# ── Recovery ─────────────────────────────────────────────────────────────────
from .recovery import UnknownColorError, resolve_target_color

__all__ = [
    "Palette",
    "build_palette",
    "get_aliases",
    "get_names_by_hue",
    "get_palette",
    "lookup",
    "reset_palette_cache",
    "AdjectiveEffect",
    "classify_adjective",
    "is_adjective",
    "tier_deltas",
    "MatchResult",
    "best_match",
    "build_phrase_table",
    "find_best_match",
    "match_distance",
    "parse_description",
    "UnknownColorError",
    "resolve_target_color",
]

__docformat__ = "google"
