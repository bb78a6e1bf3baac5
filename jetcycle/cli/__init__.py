"""JetCycle command-line interface package.

Supports ``python -m jetcycle.cli`` as an alternative to the ``jetcycle`` entry point.
"""

from jetcycle.cli.main import cli, main

__all__ = ["cli", "main"]
