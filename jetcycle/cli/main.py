"""JetCycle command-line interface.

Entry point for the ``jetcycle`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from jetcycle import __app_name__, __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """JetCycle — single-spool turbojet cycle analysis.

    Evaluates station-by-station pressures, temperatures and entropies
    from inlet to nozzle and derives net thrust and TSFC.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    ctx.ensure_object(dict)
    ctx.obj["console"] = console


# Import and register sub-command groups
from jetcycle.cli.atmosphere_cmd import atmosphere  # noqa: E402
from jetcycle.cli.solve_cmd import solve_cmd  # noqa: E402
from jetcycle.cli.sweep_cmd import sweep  # noqa: E402

cli.add_command(atmosphere)
cli.add_command(solve_cmd)
cli.add_command(sweep)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
