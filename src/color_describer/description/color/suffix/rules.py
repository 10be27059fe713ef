# src/color_describer/description/color/suffix/rules.py
from __future__ import annotations

"""
suffix.rules
============

Does: Recognize the graded color adjectives (light/lighter/lightest/lightmost,
      dark…, rich…, dull…, bright…, pale…, deep…, weak…) from a fixed-offset
      letter check plus the token length, and report their cumulative
      (lightness, saturation) deltas.
Used By: Description parser; phrase table tests.
Returns: AdjectiveEffect for adjectives, None for everything else (color names).
"""

from functools import lru_cache
from typing import NamedTuple, Optional, Tuple
import logging

# ── Public surface ───────────────────────────────────────────────────────────
__all__ = [
    "AdjectiveEffect",
    "classify_adjective",
    "is_adjective",
    "tier_deltas",
]
__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Domain imports ───────────────────────────────────────────────────────────
from color_describer.description.color.constants import (
    ADJECTIVE_PATTERNS,
    ADJECTIVE_TIER_DELTAS,
)


# =============================================================================
# Types
# =============================================================================

class AdjectiveEffect(NamedTuple):
    """Effect of one adjective token: its family, tier (1..4) and deltas."""

    family: str
    tier: int
    lightness: float
    saturation: float

    @property
    def axes(self) -> Tuple[str, ...]:
        """Axes touched by the family: ('lightness',), ('saturation',) or both."""
        out = []
        if self.lightness:
            out.append("lightness")
        if self.saturation:
            out.append("saturation")
        return tuple(out)


# =============================================================================
# Core rules
# =============================================================================

@lru_cache(maxsize=4096)
def classify_adjective(token: str) -> Optional[AdjectiveEffect]:
    """
    Does: Match `token` against the adjective patterns (case-sensitive). The
          first pattern whose first letter and offset letter match decides:
          a recognized length gives that tier, any other length means the
          token is a color name.
    Returns: AdjectiveEffect or None.
    """
    if not token:
        return None
    for first, offset, letter, family, lengths in ADJECTIVE_PATTERNS:
        if token[0] != first or len(token) <= offset or token[offset] != letter:
            continue
        try:
            tier = lengths.index(len(token)) + 1
        except ValueError:
            log.debug("'%s' looks like %s but has no tier of length %d", token, family, len(token))
            return None
        dl, ds = ADJECTIVE_TIER_DELTAS[family][tier - 1]
        return AdjectiveEffect(family, tier, dl, ds)
    return None


def is_adjective(token: str) -> bool:
    """Does: True if `token` is one of the graded adjectives. Returns: bool."""
    return classify_adjective(token) is not None


def tier_deltas(family: str) -> Tuple[Tuple[float, float], ...]:
    """Does: Cumulative (Δlightness, Δsaturation) for tiers 1..4 of `family`. Raises: KeyError."""
    return ADJECTIVE_TIER_DELTAS[family]
