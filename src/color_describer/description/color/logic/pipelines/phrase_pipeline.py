"""
phrase_pipeline.py.
==================

Does: Turn a free-text color description ("light rich red", "palest cyan
      blue") into one Oklab color: adjectives accumulate lightness and
      saturation deltas, every other token is a palette name to mix.
Returns: OklabColor; never raises, unknown words count as the neutral color.
Used By: Reverse-matcher checks, gradients, orchestrator and CLI.
"""

from __future__ import annotations

# ── Imports ───────────────────────────────────────────────────────────────────
import logging
import math
from typing import NamedTuple

from color_describer.description.color.suffix import classify_adjective
from color_describer.description.color.utils.oklab import (
    OklabColor,
    darken,
    dullen,
    enrich,
    lighten,
    limit_to_gamut,
    mix,
)
from color_describer.description.color.vocab import Palette, get_palette
from color_describer.description.general.token import split_tokens

# ── Types & Globals ───────────────────────────────────────────────────────────
logger = logging.getLogger(__name__)

__all__ = [
    "ParsedDescription",
    "analyze_description",
    "parse_description",
]


class ParsedDescription(NamedTuple):
    """Intermediate parse: mixed colors and summed adjective deltas."""

    colors: tuple[OklabColor, ...]
    lightness: float
    saturation: float


# ── Public API ────────────────────────────────────────────────────────────────
def analyze_description(
    text: str,
    *,
    palette: Palette | None = None,
    debug: bool = False,
) -> ParsedDescription:
    """
    Does: Tokenize `text`; adjectives add their deltas, other tokens are looked
          up (case as given, unknown → neutral) and collected for mixing.
    Returns: ParsedDescription. Deltas are exact sums, independent of order.
    """
    palette = palette or get_palette()
    colors: list[OklabColor] = []
    dl: list[float] = []
    ds: list[float] = []

    for token in split_tokens(text):
        effect = classify_adjective(token)
        if effect is not None:
            dl.append(effect.lightness)
            ds.append(effect.saturation)
            if debug:
                logger.debug("[phrase_pipeline][ADJ] %r → %s tier %d", token, effect.family, effect.tier)
            continue
        if debug and token not in palette:
            logger.debug("[phrase_pipeline][UNKNOWN] %r → neutral", token)
        colors.append(palette.lookup(token))

    return ParsedDescription(tuple(colors), math.fsum(dl), math.fsum(ds))


def parse_description(
    text: str,
    *,
    palette: Palette | None = None,
    debug: bool = False,
) -> OklabColor:
    """
    Does: Mix the named colors, shift lightness (lighten if positive, darken
          if negative), then saturation: enrich when positive (left as is),
          dullen-then-limit when negative, limit when zero.
    Returns: OklabColor (NEUTRAL for text with no recognizable words).
    """
    parsed = analyze_description(text, palette=palette, debug=debug)
    base = mix(parsed.colors)

    if parsed.lightness > 0:
        base = lighten(base, parsed.lightness)
    elif parsed.lightness < 0:
        base = darken(base, -parsed.lightness)

    if parsed.saturation > 0:
        # not gamut-limited on this path
        result = enrich(base, parsed.saturation)
    elif parsed.saturation < 0:
        result = limit_to_gamut(dullen(base, -parsed.saturation))
    else:
        result = limit_to_gamut(base)

    if debug:
        logger.debug(
            "[phrase_pipeline][RESULT] %r mix=%d ΔL=%.2f ΔS=%.2f → %s",
            text, len(parsed.colors), parsed.lightness, parsed.saturation, result,
        )
    return result
