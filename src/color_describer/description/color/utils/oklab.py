"""
oklab.py
========

Does: Encode colors as Oklab channels (L, A, B, alpha in [0, 1]), convert from/to
      RGB(A) and hex codes, and provide the adjustments the description language
      is built on: mixing, lightening/darkening, enriching/dulling, gamut limiting,
      hue/saturation for sorting and squared distance for matching.
Used By: Palette store, description parser, reverse matcher, gradients, CLI.
Returns: OklabColor values, floats and hex strings; never mutates its inputs.

Channel layout is the packed-float Oklab encoding used by game-oriented color
tools: A and B are centred on 0.5 (a = 2 * (A - 0.5)), gamma is approximated
as 2.0, and L is stored on a curve that widens the very-dark range.
"""

from __future__ import annotations
import logging
import math
from typing import Iterable, NamedTuple, Tuple

import webcolors

# Public surface
__all__ = [
    "OklabColor",
    "NEUTRAL",
    "GAMUT_EPSILON",
    "forward_light",
    "reverse_light",
    "from_rgba",
    "from_rgba8888",
    "from_hex",
    "to_rgba8888",
    "to_hex",
    "channel_l",
    "channel_a",
    "channel_b",
    "alpha",
    "mix",
    "lighten",
    "darken",
    "enrich",
    "dullen",
    "in_gamut",
    "max_chroma",
    "limit_to_gamut",
    "hue",
    "chroma",
    "saturation",
    "distance_squared",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


# ── Types ─────────────────────────────────────────────────────────────────────
class OklabColor(NamedTuple):
    """An Oklab color; every channel lies in [0, 1], A/B neutral at 0.5."""

    L: float
    A: float
    B: float
    alpha: float = 1.0


# The neutral/zero color: black, achromatic, fully transparent.
NEUTRAL = OklabColor(0.0, 0.5, 0.5, 0.0)

# Slack on linear-RGB bounds when testing gamut membership (float round-off).
GAMUT_EPSILON = 1e-6

_BISECT_STEPS = 32
_TWO_PI = 2.0 * math.pi

LinearRGB = Tuple[float, float, float]


def _clamp01(v: float) -> float:
    return 0.0 if v < 0.0 else 1.0 if v > 1.0 else v


# =============================================================================
# 1) LIGHTNESS CURVE & CONVERSIONS
# =============================================================================

def forward_light(L: float) -> float:
    """Does: Map Oklab lightness onto the stored curve (enlarges the dark range)."""
    return (L - 1.0) / (1.0 - L * 0.4285714) + 1.0


def reverse_light(L: float) -> float:
    """Does: Map stored lightness back to Oklab lightness."""
    return (L - 1.0) / (1.0 + L * 0.75) + 1.0


def _cbrt(x: float) -> float:
    return x ** (1.0 / 3.0) if x >= 0 else -((-x) ** (1.0 / 3.0))


def from_rgba(r: float, g: float, b: float, a: float = 1.0) -> OklabColor:
    """Does: Convert non-linear RGBA components (0..1) to an OklabColor."""
    # gamma 2.0 approximation of the sRGB transfer curve
    r, g, b = r * r, g * g, b * b

    l_ = _cbrt(0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b)
    m_ = _cbrt(0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b)
    s_ = _cbrt(0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b)

    L = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
    A = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
    B = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_
    return OklabColor(
        _clamp01(forward_light(L)),
        _clamp01(A * 0.5 + 0.5),
        _clamp01(B * 0.5 + 0.5),
        _clamp01(a),
    )


def from_rgba8888(rgba: int) -> OklabColor:
    """Does: Convert an RGBA8888 int (red in the most significant byte)."""
    return from_rgba(
        (rgba >> 24 & 0xFF) / 255.0,
        (rgba >> 16 & 0xFF) / 255.0,
        (rgba >> 8 & 0xFF) / 255.0,
        (rgba & 0xFF) / 255.0,
    )


def from_hex(code: str) -> OklabColor:
    """
    Does: Parse '#rgb', '#rrggbb' or '#rrggbbaa' (leading '#' optional).
    Returns: OklabColor. Raises ValueError for malformed codes.
    """
    raw = code.strip()
    if not raw.startswith("#"):
        raw = "#" + raw
    a = 255
    if len(raw) == 9:
        try:
            a = int(raw[7:], 16)
        except ValueError as e:
            raise ValueError(f"{code!r} is not a valid hexadecimal color code") from e
        raw = raw[:7]
    rgb = webcolors.hex_to_rgb(raw)
    return from_rgba(rgb.red / 255.0, rgb.green / 255.0, rgb.blue / 255.0, a / 255.0)


def _to_linear_rgb(L: float, A: float, B: float) -> LinearRGB:
    """Does: Convert stored channels to (unclipped) linear RGB."""
    L = reverse_light(L)
    a = (A - 0.5) * 2.0
    b = (B - 0.5) * 2.0
    l = (L + 0.3963377774 * a + 0.2158037573 * b) ** 3
    m = (L - 0.1055613458 * a - 0.0638541728 * b) ** 3
    s = (L - 0.0894841775 * a - 1.2914855480 * b) ** 3
    return (
        +4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
        -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
        -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s,
    )


def to_rgba8888(color: OklabColor) -> int:
    """Does: Convert to an RGBA8888 int; out-of-gamut channels are clipped."""
    r, g, b = (int(math.sqrt(_clamp01(v)) * 255.999) for v in _to_linear_rgb(color.L, color.A, color.B))
    return r << 24 | g << 16 | b << 8 | int(_clamp01(color.alpha) * 255.999)


def to_hex(color: OklabColor, *, with_alpha: bool = False) -> str:
    """Does: Format as '#rrggbb' (or '#rrggbbaa' when with_alpha=True)."""
    rgba = to_rgba8888(color)
    out = webcolors.rgb_to_hex((rgba >> 24 & 0xFF, rgba >> 16 & 0xFF, rgba >> 8 & 0xFF))
    return f"{out}{rgba & 0xFF:02x}" if with_alpha else out


# =============================================================================
# 2) CHANNEL ACCESSORS
# =============================================================================

def channel_l(color: OklabColor) -> float:
    return color.L


def channel_a(color: OklabColor) -> float:
    return color.A


def channel_b(color: OklabColor) -> float:
    return color.B


def alpha(color: OklabColor) -> float:
    return color.alpha


# =============================================================================
# 3) ADJUSTMENTS
# =============================================================================

def mix(colors: Iterable[OklabColor]) -> OklabColor:
    """
    Does: Unweighted average of every channel; exactly independent of input order.
    Returns: NEUTRAL when no colors are given.
    """
    items = list(colors)
    if not items:
        return NEUTRAL
    n = len(items)
    return OklabColor(
        math.fsum(c.L for c in items) / n,
        math.fsum(c.A for c in items) / n,
        math.fsum(c.B for c in items) / n,
        math.fsum(c.alpha for c in items) / n,
    )


def lighten(color: OklabColor, change: float) -> OklabColor:
    """Does: Move L toward 1 by `change` (a fraction of the remaining headroom)."""
    return color._replace(L=_clamp01(color.L + (1.0 - color.L) * change))


def darken(color: OklabColor, change: float) -> OklabColor:
    """Does: Move L toward 0 by `change` (a fraction of the current lightness)."""
    return color._replace(L=_clamp01(color.L * (1.0 - change)))


def enrich(color: OklabColor, change: float) -> OklabColor:
    """
    Does: Push A/B away from neutral by a factor of (1 + change).
    Returns: Channels clipped to [0, 1]; the result may still be out of gamut.
    """
    k = 1.0 + change
    return color._replace(
        A=_clamp01((color.A - 0.5) * k + 0.5),
        B=_clamp01((color.B - 0.5) * k + 0.5),
    )


def dullen(color: OklabColor, change: float) -> OklabColor:
    """Does: Pull A/B toward neutral by a factor of (1 - change)."""
    k = 1.0 - change
    return color._replace(
        A=_clamp01((color.A - 0.5) * k + 0.5),
        B=_clamp01((color.B - 0.5) * k + 0.5),
    )


# =============================================================================
# 4) GAMUT
# =============================================================================

def _rgb_in_range(rgb: LinearRGB) -> bool:
    lo, hi = -GAMUT_EPSILON, 1.0 + GAMUT_EPSILON
    return all(lo <= v <= hi for v in rgb)


def in_gamut(color: OklabColor) -> bool:
    """Does: True if the color converts to RGB without leaving [0, 1]."""
    return _rgb_in_range(_to_linear_rgb(color.L, color.A, color.B))


def max_chroma(lightness: float, hue_turns: float) -> float:
    """
    Does: Bisect for the largest in-gamut distance from neutral (in A/B channel
          units) at the given stored lightness and hue (in turns).
    Returns: float in [0, 0.5].
    """
    angle = hue_turns * _TWO_PI
    cos_h, sin_h = math.cos(angle), math.sin(angle)
    lo, hi = 0.0, 0.5
    if _rgb_in_range(_to_linear_rgb(lightness, 0.5 + cos_h * hi, 0.5 + sin_h * hi)):
        return hi
    for _ in range(_BISECT_STEPS):
        mid = (lo + hi) * 0.5
        if _rgb_in_range(_to_linear_rgb(lightness, 0.5 + cos_h * mid, 0.5 + sin_h * mid)):
            lo = mid
        else:
            hi = mid
    return lo


def limit_to_gamut(color: OklabColor) -> OklabColor:
    """
    Does: Clip channels to [0, 1]; if the color is still out of gamut, move A/B
          straight toward neutral onto the gamut boundary (L, hue, alpha kept).
    Returns: The input itself when it is already valid.
    """
    L, A, B, a = (_clamp01(v) for v in color)
    if (L, A, B, a) != tuple(color):
        color = OklabColor(L, A, B, a)
    if in_gamut(color):
        return color
    h = hue(color)
    dist = max_chroma(L, h)
    angle = h * _TWO_PI
    return OklabColor(L, 0.5 + math.cos(angle) * dist, 0.5 + math.sin(angle) * dist, a)


# =============================================================================
# 5) HUE / SATURATION / DISTANCE
# =============================================================================

def hue(color: OklabColor) -> float:
    """Does: Oklab hue angle in turns, [0, 1); 0 is reddish-pink."""
    turns = math.atan2(color.B - 0.5, color.A - 0.5) / _TWO_PI
    return turns + 1.0 if turns < 0.0 else turns


def chroma(color: OklabColor) -> float:
    """Does: Distance from neutral in A/B channel units."""
    return math.hypot(color.A - 0.5, color.B - 0.5)


def saturation(color: OklabColor) -> float:
    """
    Does: Chroma relative to the most chroma possible at this lightness and hue.
    Returns: 0.0 for achromatic colors and for black/white, where no chroma fits.
    """
    c = chroma(color)
    if c == 0.0:
        return 0.0
    limit = max_chroma(color.L, hue(color))
    if limit <= GAMUT_EPSILON:
        return 0.0
    return c / limit


def distance_squared(c1: OklabColor, c2: OklabColor) -> float:
    """Does: Squared Euclidean distance over (L, A, B); alpha is ignored."""
    dL = c1.L - c2.L
    dA = c1.A - c2.A
    dB = c1.B - c2.B
    return dL * dL + dA * dA + dB * dB
