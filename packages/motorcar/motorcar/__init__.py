"""Car and Engine Composition
==========================

A car that delegates engine-specific behavior to an injected, swappable
engine. Engine variants satisfy a small protocol and are looked up by name
through a registry, so new variants plug in without changes to the car.

Public API
----------
Car
    Holds one engine and forwards start/stop to it.
EngineBase
    Protocol every engine variant satisfies.
PetrolEngine, ElectricEngine, HybridEngine
    Built-in variants.
registry
    Name-to-variant table (``registry.create("hybrid")``).
run_demo
    Build a car, run it, swap the engine, run it again.
"""

# Trigger lazy registration of the built-in variants.
from . import engines as _engines  # noqa: F401
from .car import Car
from .core.errors import CarError, CarInvalidArgumentError
from .core.protocols import EngineBase
from .core.registry import registry
from .demo import run_demo
from .engines.electric import ElectricEngine
from .engines.hybrid import HybridEngine
from .engines.petrol import PetrolEngine

__version__ = "0.1.0"

__all__ = [
    "Car",
    "CarError",
    "CarInvalidArgumentError",
    "ElectricEngine",
    "EngineBase",
    "HybridEngine",
    "PetrolEngine",
    "registry",
    "run_demo",
    "__version__",
]
