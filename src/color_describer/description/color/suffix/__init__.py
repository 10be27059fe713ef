"""
suffix.
======

Does: Graded adjective recognition for color descriptions.
"""

from .rules import AdjectiveEffect, classify_adjective, is_adjective, tier_deltas

__all__ = [
    "AdjectiveEffect",
    "classify_adjective",
    "is_adjective",
    "tier_deltas",
]
