"""
general.
=======

Does: Domain-agnostic helpers shared by the color description stack
      (tokenizing, data-file loading, debug tracing).
"""

from __future__ import annotations

from .token import normalize_token, split_tokens
from .utils import debug, load_config

__all__ = [
    "split_tokens",
    "normalize_token",
    "load_config",
    "debug",
]
