"""
color_describer
===============

Does: Root package initializer for the color description language.
Returns: Exposes the `description` subpackage through a stable namespace.
Used by: All higher-level imports starting from `color_describer.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
__version__ = "0.1.0"
