"""motorcar: Car
--------------
A car that delegates everything engine-specific to an injected engine. The
engine can be swapped at any time; every later call goes to the new one.

Public API
----------
``Car`` : Holds one engine and forwards start/stop to it
"""

from __future__ import annotations

import typer

from .core.errors import CarInvalidArgumentError, get_logger
from .core.protocols import Echo, EngineBase

__all__ = ["Car"]

logger = get_logger()


def _require_engine(engine: object) -> EngineBase:
    if engine is None:
        raise CarInvalidArgumentError("Engine must not be None")
    if not isinstance(engine, EngineBase):
        raise CarInvalidArgumentError(
            f"{type(engine).__name__} does not implement the engine protocol "
            "(start, stop, type)"
        )
    return engine


class Car:
    """Car with a replaceable engine.

    Parameters
    ----------
    engine : EngineBase
        Initial engine. The car holds a reference only and does not manage
        the engine's lifetime.
    echo : Callable[[str], Any] or None
        Line sink for car-level messages; defaults to ``typer.echo``. Engine
        messages go to the engine's own sink.

    Raises
    ------
    CarInvalidArgumentError
        If ``engine`` is None or does not satisfy ``EngineBase``.

    Examples
    --------
    >>> from motorcar.engines.petrol import PetrolEngine
    >>> car = Car(PetrolEngine())
    >>> car.start_car()
    Car is starting with Petrol Engine
    Petrol engine is starting...

    """

    def __init__(self, engine: EngineBase, *, echo: Echo | None = None) -> None:
        self._echo = echo or typer.echo
        self._engine = _require_engine(engine)
        logger.debug(f"Car built with {self._engine.type()}")

    @property
    def engine(self) -> EngineBase:
        """The engine all calls are currently delegated to."""
        return self._engine

    def start_car(self) -> None:
        """Announce the start, then start the current engine."""
        engine = self._engine
        self._echo(f"Car is starting with {engine.type()}")
        engine.start()

    def stop_car(self) -> None:
        """Announce the stop, then stop the current engine."""
        engine = self._engine
        self._echo(f"Car is stopping with {engine.type()}")
        engine.stop()

    def set_engine(self, engine: EngineBase) -> None:
        """Replace the current engine.

        The previous engine is kept when validation fails.

        Raises
        ------
        CarInvalidArgumentError
            If ``engine`` is None or does not satisfy ``EngineBase``.

        """
        new_engine = _require_engine(engine)
        old_type = self._engine.type()
        self._engine = new_engine
        logger.debug(f"Engine swapped: {old_type} -> {new_engine.type()}")
        self._echo(f"Engine replaced with: {new_engine.type()}")

    def __repr__(self) -> str:
        return f"Car(engine={self._engine.type()!r})"
