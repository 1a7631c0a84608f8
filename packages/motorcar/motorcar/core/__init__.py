"""motorcar: Core Subpackage
--------------------------
Engine protocol, variant registry, errors, logging and configuration.

Public API
----------
- EngineBase: Protocol every engine variant satisfies
- registry: Singleton engine registry
- load_system_config: Load the merged system configuration
"""

from .config_loader import load_system_config
from .errors import (
    CarConfigError,
    CarError,
    CarInvalidArgumentError,
    CarIOError,
    CarRegistryError,
    configure_logging,
    get_logger,
)
from .protocols import DescribedEngine, Echo, EngineBase
from .registry import discover_plugins, registry
from .system_config import SystemConfig

__all__ = [
    "CarConfigError",
    "CarError",
    "CarInvalidArgumentError",
    "CarIOError",
    "CarRegistryError",
    "DescribedEngine",
    "Echo",
    "EngineBase",
    "SystemConfig",
    "configure_logging",
    "discover_plugins",
    "get_logger",
    "load_system_config",
    "registry",
]
