# color_describer/description/general/utils/__init__.py
"""

Does: Provide data-file loading and lightweight debug tracing for the description stack.
Returns: Public API via load_config/resolve_data_dir and debug/reload_topics.
Used by: Palette store, orchestrator, CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    load_config,
    resolve_data_dir,
)
from .log import (
    debug,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "reload_topics",
]
