# color_describer/description/__init__.py
"""
description
===========

Does: Namespace for the color description stack (`color/` domain logic,
      `general/` helpers) and the high-level orchestrator.
"""

__all__: list[str] = []
__docformat__ = "google"
