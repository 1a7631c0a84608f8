"""motorcar: CLI Entry Point
---------------------------------------------------------
The Typer application behind the ``motorcar`` console script. It aggregates the
demo driver, engine listing and configuration commands.

Public API
----------
``app`` : The main Typer application instance
"""

from __future__ import annotations

import typer

from .commands import config as config_cmd
from .commands.demo import demo_command
from .commands.engines import list_command, show_command

app = typer.Typer(help="Car and swappable engine demo")


@app.callback()
def main():
    """motorcar command line interface."""
    pass


app.command("demo")(demo_command)
app.command("list")(list_command)
app.command("show")(show_command)

app.add_typer(config_cmd.app, name="config", help="Inspect system configuration")
