# description/general/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Shared utilities for tokenizing descriptions and normalizing names
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Split color descriptions into letter-run tokens and normalize free-form
      color names (lowercasing, spacing, light Unicode hygiene) for lookups
      against external vocabularies.
Returns: split_tokens(), normalize_token().
Used by: Description parser, target-color resolution and the CLI.
"""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "split_tokens",
    "normalize_token",
]

# A token is a maximal run of ASCII Latin letters; everything else separates.
_TOKEN_RE = re.compile(r"[A-Za-z]+")

# Common “fancy” Unicode punctuation we want to normalize early
_FANCY_HYPHENS = {"\u2010", "\u2011", "\u2012", "\u2013", "\u2014", "\u2212"}  # hyphens, dashes, minus sign
_FANCY_QUOTES = {"\u2018", "\u2019", "\u201b", "\u2032", "\u02bc"}  # curly quotes, prime, modifier apostrophe


# ──────────────────────────────────────────────────────────────
# 0) Light Unicode hygiene
# ──────────────────────────────────────────────────────────────


def _unicode_hygiene(s: str) -> str:
    """
    Does: Apply light Unicode normalization:
          - NFKC fold
          - map fancy hyphens to ASCII '-'
          - map curly quotes to ASCII "'"
    Returns: Cleaned string (best-effort).
    """
    if not isinstance(s, str):
        return ""
    s = unicodedata.normalize("NFKC", s)
    for ch in _FANCY_HYPHENS:
        s = s.replace(ch, "-")
    for ch in _FANCY_QUOTES:
        s = s.replace(ch, "'")
    return s


# ──────────────────────────────────────────────────────────────
# 1) DESCRIPTION TOKENS
# ──────────────────────────────────────────────────────────────


def split_tokens(text: str) -> list[str]:
    """
    Does: Split `text` on every non-letter character (spaces, hyphens, digits,
          punctuation), keeping case exactly as given.
    Returns: Non-empty letter runs in order; [] for non-strings.
    """
    if not isinstance(text, str):
        return []
    return _TOKEN_RE.findall(text)


# ──────────────────────────────────────────────────────────────
# 2) NAME NORMALIZATION
# ──────────────────────────────────────────────────────────────


def normalize_token(token: str) -> str:
    """
    Does: Normalize `token`:
          - Unicode hygiene (NFKC; map fancy hyphens/quotes)
          - lowercase + trim
          - '_' → space; collapse internal whitespace
          - hyphens (ASCII or fancy) become spaces
    Returns: Normalized name.
    """
    if not isinstance(token, str):
        return ""
    s = _unicode_hygiene(token).lower().strip().replace("_", " ")
    s = s.replace("-", " ")
    return re.sub(r"\s+", " ", s).strip()
