# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level entry points combining target resolution, the description
      parser, the reverse matcher and gradients into JSON-friendly results.
Returns:
  - describe(text) -> {"description", "hex", "oklab": {...}, "in_gamut"}
  - match(target, mix_count) -> {"target", "target_hex", "description",
        "hex", "distance", "names", "intensity"}
  - gradient(start, end, steps) -> ["#rrggbb", ...]
  - gradient_chain(colors, steps) -> ["#rrggbb", ...]
  - palette_listing(order) -> [{"name", "hex"}, ...]
Used by: CLI demo and integrations.
"""

import logging
import os
from typing import Dict, List, Sequence, Union

from color_describer.description.color.logic.pipelines.match_pipeline import find_best_match
from color_describer.description.color.logic.pipelines.phrase_pipeline import parse_description
from color_describer.description.color.recovery import resolve_target_color
from color_describer.description.color.utils.gradient import make_gradient, make_gradient_chain
from color_describer.description.color.utils.oklab import OklabColor, in_gamut, to_hex
from color_describer.description.color.vocab import get_palette
from color_describer.description.general.utils.log import debug as trace

logger = logging.getLogger(__name__)

MIX_COUNT_ENV_VAR = "COLOR_DESCRIBER_MIX_COUNT"
PALETTE_ORDERS = ("alpha", "hue", "lightness")

ColorLike = Union[str, OklabColor]


# =============================================================================
# Helpers
# =============================================================================


def default_mix_count() -> int:
    """Read COLOR_DESCRIBER_MIX_COUNT (default 1; bad values fall back to 1)."""
    raw = os.getenv(MIX_COUNT_ENV_VAR, "1")
    try:
        return max(1, int(raw))
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer)", MIX_COUNT_ENV_VAR, raw)
        return 1


def _as_color(value: ColorLike, *, debug: bool = False) -> OklabColor:
    if isinstance(value, OklabColor):
        return value
    return resolve_target_color(value, debug=debug)


def _channels(color: OklabColor) -> Dict[str, float]:
    return {k: round(v, 6) for k, v in color._asdict().items()}


# =============================================================================
# Public APIs
# =============================================================================


def describe(text: str, *, debug: bool = False) -> Dict[str, object]:
    """Parse a description and report the resulting color."""
    color = parse_description(text, debug=debug)
    if debug:
        trace(f"describe {text!r} → {to_hex(color)}", topic="orchestrator")
    return {
        "description": text,
        "hex": to_hex(color),
        "oklab": _channels(color),
        "in_gamut": in_gamut(color),
    }


def match(
    target: ColorLike,
    mix_count: int | None = None,
    *,
    debug: bool = False,
) -> Dict[str, object]:
    """Resolve `target` (color, hex, name or description) and find its best description.

    Raises UnknownColorError for targets that cannot be resolved.
    """
    color = _as_color(target, debug=debug)
    if mix_count is None:
        mix_count = default_mix_count()
    result = find_best_match(color, mix_count, debug=debug)
    if debug:
        trace(
            f"match {target!r} (mix={mix_count}) → {result.description!r}",
            topic="orchestrator",
        )
    return {
        "target": target if isinstance(target, str) else to_hex(color),
        "target_hex": to_hex(color),
        "description": result.description,
        "hex": to_hex(result.color),
        "distance": result.distance,
        "names": list(result.names),
        "intensity": result.code,
    }


def gradient(
    start: ColorLike,
    end: ColorLike,
    steps: int = 8,
    *,
    debug: bool = False,
) -> List[str]:
    """Hex codes of a `steps`-long gradient between two resolvable colors."""
    colors = make_gradient(_as_color(start, debug=debug), _as_color(end, debug=debug), steps)
    return [to_hex(c) for c in colors]


def gradient_chain(
    stops: Sequence[ColorLike],
    steps: int = 8,
    *,
    debug: bool = False,
) -> List[str]:
    """Hex codes of a `steps`-long gradient passing through every stop in order."""
    colors = make_gradient_chain([_as_color(s, debug=debug) for s in stops], steps)
    if debug:
        trace(f"chain of {len(stops)} stops → {len(colors)} colors", topic="orchestrator")
    return [to_hex(c) for c in colors]


def palette_listing(order: str = "alpha") -> List[Dict[str, str]]:
    """Palette entries (aliases excluded) in alphabetical, hue or lightness order."""
    palette = get_palette()
    orders = {
        "alpha": palette.names,
        "hue": palette.names_by_hue,
        "lightness": palette.names_by_lightness,
    }
    if order not in orders:
        raise ValueError(f"Unknown order {order!r}; expected one of {', '.join(PALETTE_ORDERS)}")
    return [
        {"name": name, "hex": to_hex(palette.named[name], with_alpha=True)}
        for name in orders[order]
    ]
