"""
motorcar: Petrol Engine
-----------------------
Internal-combustion engine variant.
"""

from typing import ClassVar

import typer

from ..core.protocols import Echo

__all__ = [
    "PetrolEngine",
]


class PetrolEngine:
    """Petrol implementation of the engine protocol.

    Parameters
    ----------
    echo : Callable[[str], Any] or None
        Line sink for start/stop messages; defaults to ``typer.echo``.

    Examples
    --------
    >>> PetrolEngine().type()
    'Petrol Engine'
    """

    name: ClassVar[str] = "petrol"
    description: ClassVar[str] = "Internal-combustion engine running on petrol"

    def __init__(self, echo: Echo | None = None) -> None:
        self._echo = echo or typer.echo

    def start(self) -> None:
        self._echo("Petrol engine is starting...")

    def stop(self) -> None:
        self._echo("Petrol engine is stopping...")

    def type(self) -> str:
        return "Petrol Engine"
