# src/color_describer/description/general/utils/load_config.py

"""Read a JSON object (the palette) from the <data/> directory.

The directory is taken from `base_dir`, then DATA_DIR / COLOR_DESCRIBER_DATA_DIR,
then the first `data/` found walking up from this package. Callers that need
caching do it themselves (the palette store keeps one lru_cache'd Palette).
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import json5

__all__ = [
    "DATA_DIR_ENV_VARS",
    "load_config",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VARS = ("DATA_DIR", "COLOR_DESCRIBER_DATA_DIR")

log = logging.getLogger(__name__)

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No usable data directory (env override or discovered `data/`)."""


class ConfigFileNotFound(FileNotFoundError):
    """The data file is missing, unreadable, or outside the data directory."""


class ConfigParseError(ValueError):
    """The data file is not valid JSON, or its validator rejected it."""


class ConfigTypeError(TypeError):
    """The data file parsed, but its top level is not a JSON object."""


# ── Data directory ───────────────────────────────────────────────────────────
def resolve_data_dir(base_dir: Path | None = None) -> Path:
    """
    Does: Pick the data directory: explicit argument, env override, discovery.
    Raises: DataDirNotFound when an override is not a directory or nothing is found.
    """
    if base_dir is not None:
        return base_dir.resolve()

    for var in DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            path = Path(value).expanduser().resolve()
            if not path.is_dir():
                raise DataDirNotFound(f"{var}={value!r} is not a directory")
            return path

    here = Path(__file__).resolve()
    tried = [(p / "data") for p in here.parents]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("No 'data' directory found. Tried:\n  " + "\n  ".join(map(str, tried)))


# ── Loading ──────────────────────────────────────────────────────────────────
def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    validator: Validator | None = None,
    allow_comments: bool = False,
    encoding: str = "utf-8",
) -> dict[str, Any]:
    """
    Does: Read <data>/<file>.json as an object and pass it through `validator`.
    Returns: The (validated) dict.
    Raises: ConfigFileNotFound, ConfigParseError, ConfigTypeError, DataDirNotFound.
    """
    data_dir = resolve_data_dir(base_dir)
    name = os.fspath(file)
    if not name.endswith(".json"):
        name += ".json"

    path = (data_dir / name).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"Refusing to read outside the data dir: {path} (base={data_dir})")
    if not path.is_file():
        raise ConfigFileNotFound(f"Data file not found: {path}")

    try:
        with path.open("r", encoding=encoding) as f:
            data = json5.load(f) if allow_comments else json.load(f)
    except ValueError as e:
        # json.JSONDecodeError and json5's errors both derive from ValueError
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")

    if validator is not None:
        try:
            data = validator(data)
        except (ValueError, TypeError, KeyError) as e:
            raise ConfigParseError(f"{path.name}: {e}") from e

    log.debug("Loaded %s from %s", path.name, data_dir)
    return data
