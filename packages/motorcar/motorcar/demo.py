"""motorcar: Demo Driver
----------------------
Walks a car through one engine swap: build with the initial engine, start,
stop, replace, start, stop.
"""

from __future__ import annotations

from .car import Car
from .core.errors import get_logger
from .core.protocols import Echo, EngineBase
from .core.registry import registry

__all__ = ["run_demo", "build_engine"]

logger = get_logger()


def build_engine(engine: str | EngineBase, echo: Echo | None = None) -> EngineBase:
    """Return ``engine`` as is, or create it from the registry when given a name."""
    if isinstance(engine, str):
        logger.debug(f"Creating engine '{engine}' from registry")
        return registry.create(engine, echo=echo)
    return engine


def run_demo(
    initial: str | EngineBase,
    replacement: str | EngineBase,
    *,
    echo: Echo | None = None,
) -> Car:
    """Run the engine-swap demonstration and return the car.

    Parameters
    ----------
    initial, replacement : str or EngineBase
        Engines, or registry names of engines, to start with and swap to.
    echo : Callable[[str], Any] or None
        Line sink shared by the car and engines built from names.

    Raises
    ------
    CarConfigError
        If an engine name is not registered.
    CarInvalidArgumentError
        If an engine object is None or not an engine.

    """
    first = build_engine(initial, echo)
    second = build_engine(replacement, echo)

    car = Car(first, echo=echo)
    car.start_car()
    car.stop_car()

    car.set_engine(second)
    car.start_car()
    car.stop_car()
    return car
