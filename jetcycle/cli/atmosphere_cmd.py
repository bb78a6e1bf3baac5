"""CLI command for ISA ambient conditions."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from jetcycle.core.atmosphere import evaluate
from jetcycle.utils.units import altitude_to_ft


@click.command("atmosphere")
@click.option("--altitude", type=float, default=0.0, show_default=True, help="Geometric altitude.")
@click.option(
    "--unit",
    type=click.Choice(["ft", "m", "km"], case_sensitive=False),
    default="ft",
    show_default=True,
    help="Altitude unit.",
)
@click.pass_context
def atmosphere(ctx: click.Context, altitude: float, unit: str) -> None:
    """Show ISA pressure, temperature and density at an altitude."""
    console: Console = ctx.obj.get("console", Console())

    altitude_ft = altitude_to_ft(altitude, unit.lower())
    atm = evaluate(altitude_ft)

    table = Table(title=f"ISA at {altitude:g} {unit}")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")

    table.add_row("Altitude", f"{altitude_ft:.0f}", "ft")
    table.add_row("Pressure", f"{atm.pressure / 1e3:.3f}", "kPa")
    table.add_row("Temperature", f"{atm.temperature:.2f}", "K")
    table.add_row("Density", f"{atm.density:.4f}", "kg/m³")

    console.print(table)
