# description/general/token/__init__.py
"""
token.
=====

Does: Provide base token utilities for description splitting and name normalization.
Exports: split_tokens, normalize_token
Used by: Description parser and target-color resolution.
"""

from __future__ import annotations

from .normalize import (
    normalize_token,
    split_tokens,
)

__all__ = [
    "split_tokens",
    "normalize_token",
]
