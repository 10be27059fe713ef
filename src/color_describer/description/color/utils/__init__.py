"""
utils package.
=============

Does: Provide the Oklab color math (conversions, adjustments, gamut, distance)
      and gradient helpers shared across the description modules.
"""

from .oklab import (
    NEUTRAL,
    OklabColor,
    chroma,
    darken,
    distance_squared,
    dullen,
    enrich,
    from_hex,
    from_rgba,
    from_rgba8888,
    hue,
    in_gamut,
    lighten,
    limit_to_gamut,
    max_chroma,
    mix,
    saturation,
    to_hex,
    to_rgba8888,
)
from .gradient import lerp, make_gradient, make_gradient_chain

__all__ = [
    "NEUTRAL",
    "OklabColor",
    "chroma",
    "darken",
    "distance_squared",
    "dullen",
    "enrich",
    "from_hex",
    "from_rgba",
    "from_rgba8888",
    "hue",
    "in_gamut",
    "lighten",
    "limit_to_gamut",
    "max_chroma",
    "mix",
    "saturation",
    "to_hex",
    "to_rgba8888",
    "lerp",
    "make_gradient",
    "make_gradient_chain",
]

__docformat__ = "google"
