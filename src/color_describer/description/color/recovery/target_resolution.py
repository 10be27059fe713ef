# color/recovery/target_resolution.py
"""
target_resolution
=================

Does:
    Resolve user input naming a *target* color into an OklabColor: a hex code,
    a palette name or alias, a palette description ("light rich red"), a
    CSS3 name or an XKCD name. Unknown names raise with fuzzy
    suggestions instead of silently degrading to the neutral color.
Returns:
    resolve_target_color(text, ...) -> OklabColor
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Dict, FrozenSet, Optional, Sequence, Tuple

import webcolors
from rapidfuzz import fuzz, process

# ── Imports ──────────────────────────────────────────────────────────────────
from color_describer.description.color.logic.pipelines.phrase_pipeline import parse_description
from color_describer.description.color.suffix import is_adjective
from color_describer.description.color.utils.oklab import OklabColor, from_hex
from color_describer.description.color.vocab import Palette, get_palette
from color_describer.description.general.token import normalize_token, split_tokens

# ── Public API ───────────────────────────────────────────────────────────────
__all__ = ["UnknownColorError", "resolve_target_color", "suggest_color_names"]

# ── Logging ──────────────────────────────────────────────────────────────────
logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_SUGGESTION_LIMIT = 3
_SUGGESTION_CUTOFF = 60.0


class UnknownColorError(ValueError):
    """Raised when a target color cannot be resolved; carries suggestions."""

    def __init__(self, text: str, suggestions: Sequence[str] = ()):
        self.text = text
        self.suggestions = tuple(suggestions)
        msg = f"Unknown color {text!r}"
        if self.suggestions:
            msg += f"; did you mean: {', '.join(self.suggestions)}?"
        super().__init__(msg)


# ── Internal helpers ─────────────────────────────────────────────────────────
@lru_cache(maxsize=1)
def _get_css3_names() -> FrozenSet[str]:
    """Does: CSS3 color names from webcolors (lowercase, no spaces)."""
    return frozenset(webcolors.names("css3"))


@lru_cache(maxsize=1)
def _get_xkcd_colors() -> Dict[str, str]:
    """Does: Load XKCD names → hex once (lazy import of matplotlib)."""
    from matplotlib.colors import XKCD_COLORS  # lazy import

    return {k.replace("xkcd:", ""): v for k, v in XKCD_COLORS.items()}


def _try_css3(name: str) -> Optional[OklabColor]:
    key = name.replace(" ", "")
    if key not in _get_css3_names():
        return None
    return from_hex(webcolors.name_to_hex(key))


def _try_xkcd(name: str) -> Optional[OklabColor]:
    hx = _get_xkcd_colors().get(name)
    return from_hex(hx) if hx else None


def _is_palette_description(text: str, palette: Palette) -> bool:
    tokens = split_tokens(text)
    return bool(tokens) and all(is_adjective(t) or t in palette for t in tokens)


def suggest_color_names(
    text: str,
    *,
    palette: Optional[Palette] = None,
    limit: int = _SUGGESTION_LIMIT,
) -> Tuple[str, ...]:
    """
    Does: Rank palette names, aliases and CSS3 names by fuzzy similarity.
    Returns: Up to `limit` names scoring at least the cutoff, best first.
    """
    palette = palette or get_palette()
    choices = sorted(set(palette.named) | _get_css3_names())
    query = normalize_token(text)
    if not query:
        return ()
    hits = process.extract(
        query, choices, scorer=fuzz.WRatio, limit=limit, score_cutoff=_SUGGESTION_CUTOFF
    )
    return tuple(name for name, _score, _idx in hits)


# ── Core API ─────────────────────────────────────────────────────────────────
def resolve_target_color(
    text: str,
    *,
    palette: Optional[Palette] = None,
    debug: bool = False,
) -> OklabColor:
    """
    Does:
        Try, in order: '#hex' code, exact palette name/alias, a palette
        description whose every token is an adjective or palette name,
        CSS3 name, then XKCD name.
    Returns:
        OklabColor.
    Raises:
        UnknownColorError when nothing matches.
    """
    palette = palette or get_palette()
    raw = text.strip() if isinstance(text, str) else ""
    if not raw:
        raise UnknownColorError(str(text))

    if _HEX_RE.match(raw):
        if debug:
            logger.debug("[target] %r → hex code", raw)
        return from_hex(raw)

    if raw in palette:
        if debug:
            logger.debug("[target] %r → palette entry", raw)
        return palette.lookup(raw)

    if _is_palette_description(raw, palette):
        if debug:
            logger.debug("[target] %r → description", raw)
        return parse_description(raw, palette=palette)

    name = normalize_token(raw)
    for source, attempt in (("css3", _try_css3), ("xkcd", _try_xkcd)):
        color = attempt(name)
        if color is not None:
            if debug:
                logger.debug("[target] %r → %s name", raw, source)
            return color

    raise UnknownColorError(raw, suggest_color_names(raw, palette=palette))
