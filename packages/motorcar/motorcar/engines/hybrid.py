"""
motorcar: Hybrid Engine
-----------------------
Petrol-electric hybrid variant. Behaves as a single engine towards the car;
the label and messages name the hybrid, not its parts.
"""

from typing import ClassVar

import typer

from ..core.protocols import Echo

__all__ = [
    "HybridEngine",
]


class HybridEngine:
    name: ClassVar[str] = "hybrid"
    description: ClassVar[str] = "Petrol engine paired with an electric motor"

    def __init__(self, echo: Echo | None = None) -> None:
        self._echo = echo or typer.echo

    def start(self) -> None:
        self._echo("Hybrid engine is starting...")

    def stop(self) -> None:
        self._echo("Hybrid engine is stopping...")

    def type(self) -> str:
        return "Hybrid Engine"
