"""
phrase_table.py
===============

Does: Build the 9×9 grid mapping an intensity code (saturation tier,
      lightness tier) to the adjective phrase that produces it.
Returns: Cached tuple of 81 phrases, each ending in a space unless empty.
Used By: Reverse matcher, CLI.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from color_describer.description.color.constants import (
    CORRELATED_PHRASES,
    INTENSITY_CODES,
    LIGHTNESS_PHRASES,
    SATURATION_PHRASES,
    TIER_COUNT,
)

__all__ = [
    "build_phrase_table",
    "phrase_for",
    "intensity_code",
    "split_intensity_code",
]
__docformat__ = "google"


def intensity_code(sat_idx: int, light_idx: int) -> int:
    """Does: Pack tier indices (0..8 each, 4 = neutral) into a code in [0, 81)."""
    if not (0 <= sat_idx < TIER_COUNT and 0 <= light_idx < TIER_COUNT):
        raise ValueError(f"tier indices must lie in [0, {TIER_COUNT}): {(sat_idx, light_idx)}")
    return sat_idx * TIER_COUNT + light_idx


def split_intensity_code(code: int) -> Tuple[int, int]:
    """Does: Unpack a code into (saturation index, lightness index)."""
    if not 0 <= code < INTENSITY_CODES:
        raise ValueError(f"intensity code must lie in [0, {INTENSITY_CODES}): {code}")
    return divmod(code, TIER_COUNT)


def _plain_phrase(sat_idx: int, light_idx: int) -> str:
    parts = (LIGHTNESS_PHRASES[light_idx], SATURATION_PHRASES[sat_idx])
    return "".join(p + " " for p in parts if p)


@lru_cache(maxsize=1)
def build_phrase_table() -> Tuple[str, ...]:
    """
    Does: Combine the lightness and saturation words for every cell, then put
          the single correlated words (bright, pale, deep, weak tiers) on the
          diagonals where their deltas coincide.
    Returns: Tuple indexed by intensity code; the neutral cell is "".
    """
    table = [
        _plain_phrase(s, l) for s in range(TIER_COUNT) for l in range(TIER_COUNT)
    ]
    for (s, l), word in CORRELATED_PHRASES.items():
        table[intensity_code(s, l)] = word + " "
    return tuple(table)


def phrase_for(code: int) -> str:
    """Does: Phrase (with trailing space, or "") for an intensity code."""
    split_intensity_code(code)
    return build_phrase_table()[code]
