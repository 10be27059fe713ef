"""
recovery
========

Does: Resolve user-supplied target colors (hex, palette, CSS3, XKCD names or
      descriptions) with fuzzy suggestions for unknown names.
"""

from .target_resolution import UnknownColorError, resolve_target_color, suggest_color_names

__all__ = ["UnknownColorError", "resolve_target_color", "suggest_color_names"]
