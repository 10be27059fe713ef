"""
gradient.py
===========

Does: Build lists of colors changing smoothly between two colors (or along a
      chain of colors), with linear interpolation of every channel.
Returns: Lists of OklabColor; intermediate steps are gamut-limited, the final
         element is the end color exactly.
Used By: Orchestrator and CLI (`gradient` command).
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from color_describer.description.color.utils.oklab import OklabColor, limit_to_gamut

__all__ = ["lerp", "make_gradient", "make_gradient_chain"]
__docformat__ = "google"

log = logging.getLogger(__name__)


def lerp(start: OklabColor, end: OklabColor, t: float) -> OklabColor:
    """Does: Linear interpolation of all four channels (t=0 → start, t=1 → end)."""
    return OklabColor(*(s + (e - s) * t for s, e in zip(start, end)))


def make_gradient(start: OklabColor, end: OklabColor, steps: int) -> List[OklabColor]:
    """
    Does: `steps` colors from `start` to `end`.
    Returns: [] for steps <= 0, [start] for 1; otherwise the first steps-1
             colors are gamut-limited interpolations and the last is `end`.
    """
    if steps <= 0:
        return []
    if steps == 1:
        return [start]
    span = steps - 1
    out = [limit_to_gamut(lerp(start, end, i / span)) for i in range(span)]
    out.append(end)
    return out


def make_gradient_chain(chain: Sequence[OklabColor], steps: int) -> List[OklabColor]:
    """
    Does: Spread `steps` colors over consecutive segments of `chain`.
    Returns: [] for no steps or an empty chain, [chain[0]] for one step or a
             one-color chain; the last element is always chain[-1].
    """
    if steps <= 0 or not chain:
        return []
    if steps == 1 or len(chain) == 1:
        return [chain[0]]
    splits = len(chain) - 1
    log.debug("Gradient over %d segments in %d steps", splits, steps)
    out = []
    for i in range(steps - 1):
        pos = min(max(i / steps * splits, 0.0), splits - 0.000001)
        idx = int(pos)
        out.append(limit_to_gamut(lerp(chain[idx], chain[idx + 1], pos - idx)))
    out.append(chain[-1])
    return out

