"""motorcar: Demo Command
---------------------------------------------------------
Implements ``motorcar demo``: build a car with one engine, run it, swap in a
second engine and run it again. Engine names fall back to the system
configuration.
"""

from pathlib import Path

import typer

from motorcar.core.config_loader import load_system_config
from motorcar.core.errors import CarError, configure_logging, get_logger
from motorcar.core.registry import discover_plugins
from motorcar.demo import run_demo


def demo_command(
    engine: str | None = typer.Option(
        None, "--engine", "-e", help="Initial engine (default from config)"
    ),
    replace: str | None = typer.Option(
        None, "--replace", "-r", help="Replacement engine (default from config)"
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Extra system config file to merge"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging"
    ),
    log_file: str | None = typer.Option(None, help="Write logs to file path"),
    log_json: bool = typer.Option(False, help="Log in JSON format"),
    suppress_warnings: bool = typer.Option(False, help="Suppress warnings output"),
):
    """Run a car, swap its engine, and run it again.

    Examples
    --------
        motorcar demo
        motorcar demo --engine hybrid --replace petrol
        motorcar demo -v --config my_car.yaml

    """
    log = get_logger()
    try:
        system_cfg = load_system_config(force_reload=True, config_path=config)
        log_cfg = system_cfg.logging
        configure_logging(
            verbose=verbose or log_cfg.verbose,
            log_file=log_file or log_cfg.log_file,
            as_json=log_json or log_cfg.as_json,
            suppress_warnings=suppress_warnings,
        )
        discover_plugins()

        initial = engine or system_cfg.car.engine
        replacement = replace or system_cfg.car.replacement
        log.debug(f"Demo: {initial} -> {replacement}")
        run_demo(initial, replacement)
    except CarError as e:
        log.error(str(e))
        raise typer.Exit(code=1) from e
