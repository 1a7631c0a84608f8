"""
motorcar: Electric Engine
-------------------------
Battery-electric engine variant.
"""

from typing import ClassVar

import typer

from ..core.protocols import Echo

__all__ = [
    "ElectricEngine",
]


class ElectricEngine:
    """Electric implementation of the engine protocol."""

    name: ClassVar[str] = "electric"
    description: ClassVar[str] = "Battery-electric motor"

    def __init__(self, echo: Echo | None = None) -> None:
        self._echo = echo or typer.echo

    def start(self) -> None:
        self._echo("Electric engine is starting...")

    def stop(self) -> None:
        self._echo("Electric engine is stopping...")

    def type(self) -> str:
        return "Electric Engine"
