"""motorcar: commands subpackage
---------------------------------------------------------
CLI commands of the ``motorcar`` tool, built with Typer. They translate
command-line arguments into calls on the car, registry and configuration
layers.

Public API
----------
``demo`` : Run the engine-swap demonstration (``motorcar demo``)
``engines`` : Engine listing and details (``motorcar list``, ``motorcar show``)
``config`` : Configuration commands (``motorcar config show``)
"""
