# constants.py
# ============

"""
constants.
=========

Does: Define the immutable tables of the description language: adjective
      families with their per-tier (lightness, saturation) deltas, the
      character patterns that recognize them, the phrase words used when
      writing descriptions back out, and the matcher's step sizes.
Used By: Adjective lexicon, description parser, phrase table, reverse matcher,
         palette ordering.
Returns: Pure data structures only (no side effects).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# ── 1) Adjective families ────────────────────────────────────────────────────

# Cumulative (Δlightness, Δsaturation) for tiers 1..4 of each family.
ADJECTIVE_TIER_DELTAS: Mapping[str, Tuple[Tuple[float, float], ...]] = MappingProxyType(
    {
        "light": ((0.15, 0.0), (0.30, 0.0), (0.45, 0.0), (0.60, 0.0)),
        "dark": ((-0.15, 0.0), (-0.30, 0.0), (-0.45, 0.0), (-0.60, 0.0)),
        "rich": ((0.0, 0.10), (0.0, 0.25), (0.0, 0.45), (0.0, 0.70)),
        "dull": ((0.0, -0.10), (0.0, -0.25), (0.0, -0.45), (0.0, -0.70)),
        "bright": ((0.15, 0.10), (0.30, 0.20), (0.45, 0.40), (0.60, 0.65)),
        "pale": ((0.15, -0.10), (0.30, -0.25), (0.45, -0.45), (0.60, -0.70)),
        "deep": ((-0.15, 0.10), (-0.30, 0.25), (-0.45, 0.45), (-0.60, 0.70)),
        "weak": ((-0.15, -0.10), (-0.30, -0.25), (-0.45, -0.45), (-0.60, -0.70)),
    }
)

# (first letter, offset, letter at offset, family, token lengths for tiers 1..4).
# Order matters: for a given first letter the first pattern whose offset letter
# matches decides the token, even if its length is not recognized.
ADJECTIVE_PATTERNS: Tuple[Tuple[str, int, str, str, Tuple[int, int, int, int]], ...] = (
    ("l", 2, "g", "light", (5, 7, 8, 9)),     # light lighter lightest lightmost
    ("b", 3, "g", "bright", (6, 8, 9, 10)),   # bright brighter brightest brightmost
    ("p", 2, "l", "pale", (4, 5, 6, 8)),      # pale paler palest palemost
    ("w", 3, "k", "weak", (4, 6, 7, 8)),      # weak weaker weakest weakmost
    ("r", 1, "i", "rich", (4, 6, 7, 8)),      # rich richer richest richmost
    ("d", 1, "a", "dark", (4, 6, 7, 8)),      # dark darker darkest darkmost
    ("d", 1, "u", "dull", (4, 6, 7, 8)),      # dull duller dullest dullmost
    ("d", 3, "p", "deep", (4, 6, 7, 8)),      # deep deeper deepest deepmost
)

# ── 2) Phrase words (index 4 is neutral) ─────────────────────────────────────

LIGHTNESS_PHRASES: Tuple[str, ...] = (
    "darkmost", "darkest", "darker", "dark", "", "light", "lighter", "lightest", "lightmost",
)
SATURATION_PHRASES: Tuple[str, ...] = (
    "dullmost", "dullest", "duller", "dull", "", "rich", "richer", "richest", "richmost",
)

# Single correlated words replacing the two-word phrase on the grid diagonals,
# keyed by (saturation index, lightness index).
CORRELATED_PHRASES: Mapping[Tuple[int, int], str] = MappingProxyType(
    {
        (0, 0): "weakmost", (1, 1): "weakest", (2, 2): "weaker", (3, 3): "weak",
        (0, 8): "palemost", (1, 7): "palest", (2, 6): "paler", (3, 5): "pale",
        (8, 0): "deepmost", (7, 1): "deepest", (6, 2): "deeper", (5, 3): "deep",
        (8, 8): "brightmost", (7, 7): "brightest", (6, 6): "brighter", (5, 5): "bright",
    }
)

# ── 3) Grid geometry & matcher steps ─────────────────────────────────────────

TIER_COUNT = 9
NEUTRAL_TIER = 4
INTENSITY_CODES = TIER_COUNT * TIER_COUNT

# Lightness shift per tier step away from neutral.
LIGHTNESS_STEP = 0.15
# Saturation magnitude for k steps is k * (k + 3) * SATURATION_RAMP: 0.10, 0.25, 0.45, 0.70.
SATURATION_RAMP = 0.025

# ── 4) Palette ordering ──────────────────────────────────────────────────────

PALETTE_FILE = "simple_palette"
TRANSPARENT_NAME = "transparent"
# Colors at or below this saturation sort as grays.
ACHROMATIC_SATURATION = 0.05
# Colors below this alpha sort first (and are skipped by the matcher).
OPAQUE_ALPHA = 0.5
