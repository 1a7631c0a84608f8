"""motorcar: Engine Listing Commands
---------------------------------------------------------
Implements ``motorcar list`` and ``motorcar show`` for inspecting the engine
variants known to the registry, including those contributed by plugins.
"""

import typer

from motorcar.core.errors import CarError, get_logger
from motorcar.core.protocols import DescribedEngine
from motorcar.core.registry import discover_plugins, registry


def _silent(_line: str) -> None:
    pass


def list_command():
    """List available engine variants."""
    discover_plugins()
    engines = registry.list()

    if not engines:
        typer.echo("No engines found.")
        return

    typer.echo("Available Engines:")
    for name, meta in engines.items():
        try:
            label = registry.create(name, echo=_silent).type()
        except CarError as e:
            get_logger().warning(f"Cannot load engine '{name}': {e}")
            label = "<unavailable>"
        tags = ", ".join(meta.get("tags", []))
        suffix = f" [{tags}]" if tags else ""
        typer.echo(f"  - {name}: {label}{suffix}")

    typer.echo(f"\nTotal: {len(engines)} engine(s)")


def show_command(
    name: str = typer.Argument(..., help="Engine name, e.g. 'petrol'"),
):
    """Show details of one engine variant."""
    discover_plugins()
    try:
        engine = registry.create(name, echo=_silent)
    except CarError as e:
        get_logger().error(str(e))
        raise typer.Exit(code=1) from e

    # Metadata is optional; plain engines are shown by their registry key
    description = "-"
    if isinstance(engine, DescribedEngine):
        description = engine.description or "-"
    typer.echo(f"Name:        {name.strip().lower()}")
    typer.echo(f"Type:        {engine.type()}")
    typer.echo(f"Description: {description}")
