"""motorcar: Core Utilities
---------------------------------------------------------
Shared helpers for the configuration layer: YAML loading with error handling
and deep dictionary merging for the config override chain.

Public API
----------
``load_yaml_file`` : Load a YAML mapping with error handling
``deep_merge_dicts`` : Recursive dictionary merge
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .errors import CarConfigError, CarIOError


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file into a dictionary.

    Parameters
    ----------
    path : Path
        Path to the YAML file

    Returns
    -------
    Dict[str, Any]
        Loaded YAML data; an empty file yields an empty dict

    Raises
    ------
    CarIOError
        If the file doesn't exist
    CarConfigError
        If the file can't be parsed or does not hold a mapping

    """
    if not path.exists():
        raise CarIOError(f"File not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CarConfigError(f"Failed to parse YAML file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CarConfigError(
            f"Expected a mapping at the top of {path}, got {type(data).__name__}"
        )
    return data


def deep_merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override values taking precedence.

    Parameters
    ----------
    base : Dict[str, Any]
        Base dictionary
    override : Dict[str, Any]
        Override dictionary

    Returns
    -------
    Dict[str, Any]
        Merged dictionary; neither input is modified

    """
    result = dict(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge_dicts(result[key], value)
        else:
            result[key] = value
    return result
