"""Configuration loading utilities.

Loads the system configuration from YAML files along an override chain and
caches the validated result.
"""

from __future__ import annotations

import importlib.resources as ilr
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import CarConfigError, CarError, get_logger
from .system_config import SystemConfig
from .utils import deep_merge_dicts, load_yaml_file

logger = get_logger()

ENV_VAR = "MOTORCAR_SYSTEM_CONFIG"

_SYSTEM_CONFIG_CACHE: SystemConfig | None = None


def user_config_path() -> Path:
    return Path.home() / ".motorcar" / "config.yaml"


def load_system_config(
    *, force_reload: bool = False, config_path: str | Path | None = None
) -> SystemConfig:
    """Load system configuration with override chain.

    Search order (later overrides earlier):
    1. Package default (motorcar.core/system.yaml)
    2. ~/.motorcar/config.yaml (User-specific)
    3. MOTORCAR_SYSTEM_CONFIG environment variable
    4. Explicitly provided config_path

    Parameters
    ----------
    force_reload : bool
        If True, ignore cache and reload
    config_path : str or Path, optional
        Path to specific config file to override everything else

    Returns
    -------
    SystemConfig
        Loaded system configuration

    Raises
    ------
    CarConfigError
        If the explicit file cannot be loaded or the merged result is invalid

    """
    global _SYSTEM_CONFIG_CACHE

    if _SYSTEM_CONFIG_CACHE is not None and not force_reload and config_path is None:
        return _SYSTEM_CONFIG_CACHE

    # 1. Package default
    default_path = Path(str(ilr.files("motorcar.core").joinpath("system.yaml")))
    config_dict = load_yaml_file(default_path)

    # 2. User config, 3. Environment variable
    optional_paths = [user_config_path()]
    env_path = os.environ.get(ENV_VAR)
    if env_path:
        optional_paths.append(Path(env_path))

    for path in optional_paths:
        if not path.exists():
            continue
        try:
            config_dict = deep_merge_dicts(config_dict, load_yaml_file(path))
        except CarError as e:
            logger.warning(f"Failed to load config {path}: {e}")

    # 4. Explicit path
    if config_path is not None:
        path = Path(config_path)
        try:
            config_dict = deep_merge_dicts(config_dict, load_yaml_file(path))
        except CarError as e:
            raise CarConfigError(
                f"[503] Failed to load explicit config {path}: {e}"
            ) from e

    try:
        config = SystemConfig(**config_dict)
    except ValidationError as e:
        raise CarConfigError(f"[502] Invalid system configuration: {e}") from e

    if config_path is None:
        _SYSTEM_CONFIG_CACHE = config
    return config


def get_system_param(path: str, default: Any = None) -> Any:
    """Get a specific system parameter by dot-separated path.

    Examples
    --------
    >>> get_system_param("car.engine")  # doctest: +SKIP
    'petrol'

    """
    current: Any = load_system_config().model_dump()

    for segment in path.split("."):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        else:
            return default

    return current
