"""CLI command for a single cycle evaluation."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from jetcycle.core.config import RunRecord, load_throttle_schedule, save_run_json
from jetcycle.cycle.solver import TSFC_SENTINEL, FlightInputs, solve
from jetcycle.cycle.sweep import T4_MAX, T4_MIN, ThrottleSchedule, station_table
from jetcycle.reports.summary import generate_text_report
from jetcycle.utils.units import altitude_to_ft, thrust_from_si, tsfc_from_si
from jetcycle.utils.validation import (
    ValidationResult,
    validate_flight_inputs,
    validate_throttle_schedule,
)


def resolve_schedule(schedule_path: str | None, t4_min: float, t4_max: float) -> ThrottleSchedule:
    """Throttle schedule from a file if given, else from the option bounds."""
    if schedule_path:
        try:
            return load_throttle_schedule(schedule_path)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--schedule")
    check = validate_throttle_schedule(t4_min, t4_max)
    if not check.is_valid:
        raise click.BadParameter("; ".join(m.message for m in check.errors), param_hint="--t4-min/--t4-max")
    return ThrottleSchedule(t4_min=t4_min, t4_max=t4_max)


def report_validation(console: Console, check: ValidationResult) -> None:
    """Abort on errors, print warnings."""
    if not check.is_valid:
        raise click.BadParameter("; ".join(m.message for m in check.errors))
    for msg in check.warnings:
        console.print(f"[yellow]Warning:[/yellow] {msg.message}")


@click.command("solve")
@click.option("--altitude", type=float, default=0.0, show_default=True, help="Altitude.")
@click.option(
    "--unit",
    type=click.Choice(["ft", "m", "km"], case_sensitive=False),
    default="ft",
    show_default=True,
    help="Altitude unit.",
)
@click.option("--mach", type=float, default=0.0, show_default=True, help="Flight Mach number.")
@click.option("--t4", type=float, default=None, help="Turbine-inlet temperature [K].")
@click.option("--throttle", type=float, default=None, help="Throttle setting [%] (alternative to --t4).")
@click.option("--t4-min", type=float, default=T4_MIN, show_default=True, help="T4 at 0 % throttle [K].")
@click.option("--t4-max", type=float, default=T4_MAX, show_default=True, help="T4 at 100 % throttle [K].")
@click.option("--schedule", type=click.Path(exists=True), default=None, help="Throttle schedule (JSON).")
@click.option(
    "--thrust-unit",
    type=click.Choice(["kN", "lbf"]),
    default="kN",
    show_default=True,
    help="Unit for displayed thrust.",
)
@click.option("--output", "-o", type=click.Path(), default=None, help="Output file (JSON).")
@click.option("--report", type=click.Path(), default=None, help="Write a text report to this file.")
@click.pass_context
def solve_cmd(
    ctx: click.Context,
    altitude: float,
    unit: str,
    mach: float,
    t4: float | None,
    throttle: float | None,
    t4_min: float,
    t4_max: float,
    schedule: str | None,
    thrust_unit: str,
    output: str | None,
    report: str | None,
) -> None:
    """Evaluate the turbojet cycle at one operating point."""
    console: Console = ctx.obj.get("console", Console())

    if (t4 is None) == (throttle is None):
        raise click.UsageError("Give exactly one of --t4 or --throttle.")

    if throttle is not None:
        sched = resolve_schedule(schedule, t4_min, t4_max)
        pct = ThrottleSchedule.clamp_pct(throttle)
        t4 = sched.to_t4(pct)
        console.print(f"[dim]Throttle {pct:.0f}% → T4 = {t4:.0f} K[/dim]")

    altitude_ft = altitude_to_ft(altitude, unit.lower())
    report_validation(console, validate_flight_inputs(altitude_ft, mach, t4))

    result = solve(FlightInputs(altitude_ft=altitude_ft, mach=mach, t4=t4))
    perf = result.performance

    console.print(f"\n[bold]JetCycle — Turbojet Cycle (h={altitude_ft:.0f} ft, M={mach:.2f}, T4={t4:.0f} K)[/bold]\n")

    perf_table = Table(title="Performance")
    perf_table.add_column("Parameter", style="cyan")
    perf_table.add_column("Value", style="green", justify="right")
    perf_table.add_column("Unit", style="dim")

    perf_table.add_row("Net Thrust", f"{thrust_from_si(perf.thrust, thrust_unit):.2f}", thrust_unit)
    if perf.tsfc == TSFC_SENTINEL:
        perf_table.add_row("TSFC", "—", "g/(kN·s)")
    else:
        perf_table.add_row("TSFC", f"{perf.tsfc:.2f}", "g/(kN·s)")
        perf_table.add_row("TSFC", f"{tsfc_from_si(perf.tsfc, 'lb / lbf / hour'):.3f}", "lb/(lbf·h)")
    perf_table.add_row("Air Flow", f"{perf.air_flow:.2f}", "kg/s")
    perf_table.add_row("Fuel Flow", f"{perf.fuel_flow:.3e}", "kg/s")
    perf_table.add_row("Fuel-Air Ratio", f"{perf.fuel_air_ratio:.4f}", "—")
    perf_table.add_row("Overall Pressure Ratio", f"{result.design.pi_c:.2f}", "—")
    perf_table.add_row("Compressor Power", f"{perf.compressor_work / 1e3:.1f}", "kW")
    perf_table.add_row("Turbine Power", f"{perf.turbine_work / 1e3:.1f}", "kW")

    console.print(perf_table)

    st_table = Table(title="Stations")
    st_table.add_column("Station", style="cyan")
    st_table.add_column("Pt [kPa]", style="green", justify="right")
    st_table.add_column("Tt [K]", style="green", justify="right")
    st_table.add_column("S [J/(kg·K)]", style="green", justify="right")

    for (label, p_kpa, t), st in zip(station_table(result), result.stations):
        st_table.add_row(label, f"{p_kpa:.2f}", f"{t:.1f}", f"{st.S:.2f}")

    console.print(st_table)

    if not result.is_valid_operating_point:
        console.print("[yellow]Operating point gives no useful thrust or cannot close the combustor balance.[/yellow]")

    if output:
        save_run_json(RunRecord.from_result(result), output)
        console.print(f"\n[dim]Saved to {output}[/dim]")

    if report:
        with open(report, "w") as f:
            f.write(generate_text_report(result))
        console.print(f"[dim]Report written to {report}[/dim]")
