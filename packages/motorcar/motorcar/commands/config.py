"""motorcar: Configuration Commands
---------------------------------------------------------
Implements ``motorcar config show``, printing the merged system configuration.
"""

from pathlib import Path

import typer
import yaml

from motorcar.core.config_loader import load_system_config
from motorcar.core.errors import CarError, get_logger

app = typer.Typer()


@app.command()
def show(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Extra system config file to merge"
    ),
):
    """Show the effective system configuration as YAML."""
    try:
        cfg = load_system_config(force_reload=True, config_path=config)
    except CarError as e:
        get_logger().error(str(e))
        raise typer.Exit(code=1) from e
    typer.echo(yaml.safe_dump(cfg.model_dump(), sort_keys=False).rstrip())
