"""
match_pipeline.py
=================

Does: Find the short description that best approximates a color by scoring
      every tuple of palette names against every intensity code (9 saturation
      tiers × 9 lightness tiers), keeping the first combination with the
      lowest squared (L, A, B) distance.
Returns: Description strings (phrase + names) or a MatchResult with the score.
Used By: Orchestrator and CLI.
"""

from __future__ import annotations

# ── Imports ───────────────────────────────────────────────────────────────────
import logging
from itertools import product
from typing import NamedTuple, Optional, Sequence, Tuple

from color_describer.description.color.constants import (
    INTENSITY_CODES,
    LIGHTNESS_STEP,
    NEUTRAL_TIER,
    SATURATION_RAMP,
    TIER_COUNT,
)
from color_describer.description.color.logic.phrase_table import (
    build_phrase_table,
    intensity_code,
)
from color_describer.description.color.logic.pipelines.phrase_pipeline import parse_description
from color_describer.description.color.utils.oklab import (
    OklabColor,
    darken,
    distance_squared,
    dullen,
    enrich,
    lighten,
    limit_to_gamut,
    mix,
)
from color_describer.description.color.vocab import Palette, get_palette

# ── Types & Globals ───────────────────────────────────────────────────────────
logger = logging.getLogger(__name__)

__all__ = [
    "MatchResult",
    "best_match",
    "find_best_match",
    "match_distance",
]

NEUTRAL_CODE = intensity_code(NEUTRAL_TIER, NEUTRAL_TIER)

# Shift magnitudes per tier index; two decimals like the adjective deltas.
_LIGHT_SHIFTS: Tuple[float, ...] = tuple(
    round(LIGHTNESS_STEP * abs(i - NEUTRAL_TIER), 2) for i in range(TIER_COUNT)
)
_SAT_SHIFTS: Tuple[float, ...] = tuple(
    round(abs(i - NEUTRAL_TIER) * (abs(i - NEUTRAL_TIER) + 3) * SATURATION_RAMP, 2)
    for i in range(TIER_COUNT)
)


class MatchResult(NamedTuple):
    """Winning combination of the reverse search."""

    description: str
    distance: float
    code: int
    names: Tuple[str, ...]
    color: OklabColor


# ── Helpers ───────────────────────────────────────────────────────────────────
def _shift_lightness(color: OklabColor, light_idx: int) -> OklabColor:
    if light_idx > NEUTRAL_TIER:
        return lighten(color, _LIGHT_SHIFTS[light_idx])
    if light_idx < NEUTRAL_TIER:
        return darken(color, _LIGHT_SHIFTS[light_idx])
    return color


def _shift_saturation(color: OklabColor, sat_idx: int) -> OklabColor:
    # gamut-limited after enrich, left as is after dullen
    if sat_idx > NEUTRAL_TIER:
        return limit_to_gamut(enrich(color, _SAT_SHIFTS[sat_idx]))
    if sat_idx < NEUTRAL_TIER:
        return dullen(color, _SAT_SHIFTS[sat_idx])
    return limit_to_gamut(color)


def _candidate_mixes(
    names: Sequence[str], palette: Palette, mix_count: int
) -> list[Tuple[Tuple[str, ...], OklabColor]]:
    """
    Does: Mix every ordered tuple of `mix_count` names, the first position
          varying fastest.
    Returns: [(names, mixed color)] in enumeration order.
    """
    out = []
    for picked in product(names, repeat=mix_count):
        combo = picked[::-1]
        out.append((combo, mix(palette.lookup(n) for n in combo)))
    return out


# ── Public API ────────────────────────────────────────────────────────────────
def find_best_match(
    color: OklabColor,
    mix_count: int = 1,
    *,
    palette: Optional[Palette] = None,
    debug: bool = False,
) -> MatchResult:
    """
    Does: Exhaustive search over names^mix_count × 81 intensity codes; ties
          keep the earliest combination. `mix_count` is clamped to at least 1.
    Returns: MatchResult (description is empty only for an empty palette).
    """
    palette = palette or get_palette()
    mix_count = max(1, int(mix_count))
    names = palette.matchable_names()
    phrases = build_phrase_table()

    mixes = _candidate_mixes(names, palette, mix_count)
    if debug:
        logger.debug(
            "[match_pipeline][SEARCH] %d names, mix=%d → %d combinations",
            len(names), mix_count, len(mixes) * INTENSITY_CODES,
        )

    best: Optional[MatchResult] = None
    best_dist = float("inf")
    for sat_idx in range(TIER_COUNT):
        for light_idx in range(TIER_COUNT):
            for combo, mixed in mixes:
                shifted = _shift_saturation(_shift_lightness(mixed, light_idx), sat_idx)
                dist = distance_squared(shifted, color)
                if dist < best_dist:
                    best_dist = dist
                    code = intensity_code(sat_idx, light_idx)
                    best = MatchResult(phrases[code] + " ".join(combo), dist, code, combo, shifted)

    if best is None:
        logger.warning("Reverse match on an empty palette")
        return MatchResult("", best_dist, NEUTRAL_CODE, (), color)
    if debug:
        logger.debug("[match_pipeline][BEST] %r distance=%.6g", best.description, best.distance)
    return best


def best_match(
    color: OklabColor,
    mix_count: int = 1,
    *,
    palette: Optional[Palette] = None,
    debug: bool = False,
) -> str:
    """Does: Description of the best match for `color`. Returns: str."""
    return find_best_match(color, mix_count, palette=palette, debug=debug).description


def match_distance(
    color: OklabColor,
    description: str,
    *,
    palette: Optional[Palette] = None,
) -> float:
    """Does: Squared distance between `color` and the parse of `description`."""
    return distance_squared(color, parse_description(description, palette=palette))
