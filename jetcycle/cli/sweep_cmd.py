"""CLI commands for Mach and throttle sweeps."""

from __future__ import annotations

import click
import numpy as np
from rich.console import Console
from rich.table import Table

from jetcycle.cli.solve_cmd import report_validation, resolve_schedule
from jetcycle.core.config import RunRecord, save_run_json
from jetcycle.cycle.solver import FlightInputs, solve
from jetcycle.cycle.sweep import (
    T4_MAX,
    T4_MIN,
    SweepResult,
    collect,
    mach_range,
    mach_sweep,
    throttle_range,
    throttle_sweep,
)
from jetcycle.utils.validation import validate_flight_inputs


@click.group("sweep")
@click.pass_context
def sweep(ctx: click.Context) -> None:
    """Parameter sweeps across Mach or throttle."""
    pass


def _print_sweep(console: Console, title: str, label: str, data: SweepResult) -> None:
    table = Table(title=title)
    table.add_column(label, style="cyan", justify="right")
    table.add_column("Thrust [kN]", style="green", justify="right")
    table.add_column("TSFC [g/(kN·s)]", style="green", justify="right")
    table.add_column("Fuel Flow [kg/s]", style="green", justify="right")
    table.add_column("Air Flow [kg/s]", style="green", justify="right")

    for v, f, sfc, mf, ma in zip(data.values, data.thrust_kN, data.tsfc, data.fuel_flow, data.air_flow):
        table.add_row(
            f"{v:g}",
            f"{f:.3f}",
            "—" if np.isnan(sfc) else f"{sfc:.3f}",
            f"{mf:.5f}",
            f"{ma:.2f}",
        )

    console.print(table)


def _save(output: str, altitude_ft: float, mach: float, t4: float, name: str, data: SweepResult) -> None:
    record = RunRecord.from_result(solve(FlightInputs(altitude_ft=altitude_ft, mach=mach, t4=t4)))
    record.sweeps[name] = data.to_dict()
    save_run_json(record, output)


@sweep.command("mach")
@click.option("--altitude", type=float, default=0.0, show_default=True, help="Altitude [ft].")
@click.option("--t4", type=float, default=1300.0, show_default=True, help="Turbine-inlet temperature [K].")
@click.option("--start", type=float, default=0.0, show_default=True, help="First Mach number.")
@click.option("--stop", type=float, default=2.5, show_default=True, help="Last Mach number.")
@click.option("--step", type=float, default=0.05, show_default=True, help="Mach increment.")
@click.option("--output", "-o", type=click.Path(), default=None, help="Output file (JSON).")
@click.pass_context
def mach_cmd(
    ctx: click.Context,
    altitude: float,
    t4: float,
    start: float,
    stop: float,
    step: float,
    output: str | None,
) -> None:
    """Thrust, TSFC and flows across Mach at fixed altitude and T4."""
    console: Console = ctx.obj.get("console", Console())

    if step <= 0 or stop < start:
        raise click.BadParameter("Need step > 0 and stop >= start.", param_hint="--start/--stop/--step")
    report_validation(console, validate_flight_inputs(altitude, start, t4))

    data = collect(mach_sweep(altitude, t4, mach_range(start, stop, step)), parameter="mach")
    _print_sweep(console, f"Mach Sweep (h={altitude:.0f} ft, T4={t4:.0f} K)", "Mach", data)

    if output:
        _save(output, altitude, start, t4, "mach", data)
        console.print(f"\n[dim]Saved to {output}[/dim]")


@sweep.command("throttle")
@click.option("--altitude", type=float, default=0.0, show_default=True, help="Altitude [ft].")
@click.option("--mach", type=float, default=0.5, show_default=True, help="Flight Mach number.")
@click.option("--t4-min", type=float, default=T4_MIN, show_default=True, help="T4 at 0 % throttle [K].")
@click.option("--t4-max", type=float, default=T4_MAX, show_default=True, help="T4 at 100 % throttle [K].")
@click.option("--schedule", type=click.Path(exists=True), default=None, help="Throttle schedule (JSON).")
@click.option("--step", type=float, default=2.0, show_default=True, help="Throttle increment [%].")
@click.option("--output", "-o", type=click.Path(), default=None, help="Output file (JSON).")
@click.pass_context
def throttle_cmd(
    ctx: click.Context,
    altitude: float,
    mach: float,
    t4_min: float,
    t4_max: float,
    schedule: str | None,
    step: float,
    output: str | None,
) -> None:
    """Thrust, TSFC and fuel flow across throttle at a fixed flight condition."""
    console: Console = ctx.obj.get("console", Console())

    if step <= 0:
        raise click.BadParameter("Throttle step must be positive.", param_hint="--step")
    sched = resolve_schedule(schedule, t4_min, t4_max)
    report_validation(console, validate_flight_inputs(altitude, mach, sched.t4_max))

    data = collect(
        throttle_sweep(altitude, mach, sched, throttle_range(step=step)),
        parameter="throttle_pct",
    )
    _print_sweep(
        console,
        f"Throttle Sweep (h={altitude:.0f} ft, M={mach:.2f}, T4 {sched.t4_min:.0f}–{sched.t4_max:.0f} K)",
        "Throttle [%]",
        data,
    )

    if output:
        _save(output, altitude, mach, sched.to_t4(100.0), "throttle", data)
        console.print(f"\n[dim]Saved to {output}[/dim]")
