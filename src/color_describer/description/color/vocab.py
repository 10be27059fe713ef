"""
vocab
=====

Does: Load the named-color palette (name → Oklab color, plus aliases) once from
      the data directory and expose it with its three orderings: alphabetical,
      by hue and by lightness.
Used By: Description parser (name lookup), reverse matcher (hue-ordered
         candidates), target resolution and the CLI.
Returns: An immutable Palette and convenient getters (lazy, cached).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from color_describer.description.color.constants import (
    ACHROMATIC_SATURATION,
    OPAQUE_ALPHA,
    PALETTE_FILE,
    TRANSPARENT_NAME,
)
from color_describer.description.color.utils.oklab import (
    NEUTRAL,
    OklabColor,
    from_hex,
    hue,
    saturation,
)
from color_describer.description.general.utils import load_config

log = logging.getLogger(__name__)

__all__ = [
    "Palette",
    "build_palette",
    "get_palette",
    "lookup",
    "get_names_by_hue",
    "get_aliases",
    "reset_palette_cache",
]


# ── Palette ──────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Palette:
    """Read-only palette; `named` also contains the aliases."""

    named: Mapping[str, OklabColor]
    aliases: Mapping[str, OklabColor]
    names: Tuple[str, ...]
    names_by_hue: Tuple[str, ...]
    names_by_lightness: Tuple[str, ...]

    def lookup(self, name: str) -> OklabColor:
        """Does: Exact (case-sensitive) lookup; unknown names give NEUTRAL."""
        return self.named.get(name, NEUTRAL)

    def __contains__(self, name: object) -> bool:
        return name in self.named

    @property
    def colors_by_hue(self) -> Tuple[OklabColor, ...]:
        return tuple(self.named[n] for n in self.names_by_hue)

    def matchable_names(self) -> Tuple[str, ...]:
        """Does: Hue-ordered names without the fully transparent entry."""
        return tuple(n for n in self.names_by_hue if n != TRANSPARENT_NAME)


def _hue_sort_key(color: OklabColor) -> Tuple[int, float, float]:
    """Transparent first, then grays by lightness, then colors by hue and lightness."""
    if color.alpha < OPAQUE_ALPHA:
        return (0, 0.0, 0.0)
    if saturation(color) <= ACHROMATIC_SATURATION:
        return (1, 0.0, color.L)
    return (2, hue(color), color.L)


def build_palette(
    colors: Mapping[str, OklabColor],
    aliases: Optional[Mapping[str, str]] = None,
) -> Palette:
    """
    Does: Build a Palette from primary colors and alias → primary-name links.
    Returns: Palette whose orderings never include aliases.
    Raises: KeyError if an alias points at an unknown name.
    """
    primary: Dict[str, OklabColor] = dict(colors)
    alias_colors = {alias: primary[target] for alias, target in (aliases or {}).items()}

    names = tuple(sorted(primary))
    # sorted() is stable: equal keys keep alphabetical order
    by_hue = tuple(sorted(names, key=lambda n: _hue_sort_key(primary[n])))
    by_lightness = tuple(sorted(names, key=lambda n: primary[n].L))

    named = dict(primary)
    named.update(alias_colors)
    return Palette(
        named=MappingProxyType(named),
        aliases=MappingProxyType(alias_colors),
        names=names,
        names_by_hue=by_hue,
        names_by_lightness=by_lightness,
    )


# ── Loading ──────────────────────────────────────────────────────────────────
def _validate_palette(data: Dict[str, Any]) -> Dict[str, Any]:
    """Does: Check the palette JSON shape and decode every hex code."""
    colors = data.get("colors")
    aliases = data.get("aliases", {})
    if not isinstance(colors, dict) or not colors:
        raise ValueError("'colors' must be a non-empty object of name → hex code")
    if not isinstance(aliases, dict):
        raise ValueError("'aliases' must be an object of alias → color name")

    decoded = {str(name): from_hex(str(code)) for name, code in colors.items()}
    for alias, target in aliases.items():
        if target not in decoded:
            raise ValueError(f"alias {alias!r} points at unknown color {target!r}")
    return {"colors": decoded, "aliases": {str(k): str(v) for k, v in aliases.items()}}


@lru_cache(maxsize=1)
def get_palette() -> Palette:
    """Does: Load, validate and order the palette on first call; cached afterwards."""
    data = load_config(PALETTE_FILE, validator=_validate_palette, allow_comments=True)
    palette = build_palette(data["colors"], data["aliases"])
    log.debug(
        "Palette loaded: %d colors, %d aliases", len(palette.names), len(palette.aliases)
    )
    return palette


def reset_palette_cache() -> None:
    """Does: Forget the cached palette (tests / data-dir overrides)."""
    get_palette.cache_clear()


# ── Public accessors ─────────────────────────────────────────────────────────
def lookup(name: str) -> OklabColor:
    """Does: Look a name (or alias) up in the default palette; NEUTRAL if absent."""
    return get_palette().lookup(name)


def get_names_by_hue(include_transparent: bool = False) -> Tuple[str, ...]:
    """Does: Hue-ordered names, without 'transparent' unless asked for."""
    palette = get_palette()
    return palette.names_by_hue if include_transparent else palette.matchable_names()


def get_aliases() -> Mapping[str, OklabColor]:
    """Does: Alias name → color for the default palette."""
    return get_palette().aliases
