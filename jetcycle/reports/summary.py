"""Cycle summary report generation for JetCycle.

Produces a plain-text report of one evaluated operating point: flight
condition, ambient state, performance, station table and design point.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

from jetcycle import __app_name__, __version__
from jetcycle.cycle.solver import TSFC_SENTINEL, CycleResult
from jetcycle.cycle.sweep import station_table


def generate_text_report(result: CycleResult, title: str = "Turbojet Cycle") -> str:
    """Generate a plain-text cycle report.

    Args:
        result: Solved cycle.
        title: Report heading.

    Returns:
        Multi-line text report string.
    """
    lines: list[str] = []
    _hr = "=" * 60
    perf = asdict(result.performance)
    atm = asdict(result.atmosphere)

    lines.append(_hr)
    lines.append(f"  {__app_name__} — Cycle Report")
    lines.append(f"  {title}")
    lines.append(_hr)
    lines.append("")

    lines.append("OPERATING POINT")
    lines.append("-" * 40)
    lines.append(f"  Altitude:          {result.inputs.altitude_ft:.0f} ft")
    lines.append(f"  Mach:              {result.inputs.mach:.2f}")
    lines.append(f"  T4:                {result.inputs.t4:.0f} K")
    lines.append("")

    lines.append("AMBIENT (ISA)")
    lines.append("-" * 40)
    _add_param(lines, "Pressure", atm, "pressure", "kPa", 1e-3)
    _add_param(lines, "Temperature", atm, "temperature", "K")
    _add_param(lines, "Density", atm, "density", "kg/m³")
    lines.append("")

    lines.append("PERFORMANCE")
    lines.append("-" * 40)
    _add_param(lines, "Net Thrust", perf, "thrust", "kN", 1e-3)
    if result.performance.tsfc == TSFC_SENTINEL:
        _add_param_str(lines, "TSFC", "—")
    else:
        _add_param(lines, "TSFC", perf, "tsfc", "g/(kN·s)")
    _add_param(lines, "Air Flow", perf, "air_flow", "kg/s")
    _add_param(lines, "Fuel Flow", perf, "fuel_flow", "kg/s")
    _add_param(lines, "Fuel-Air Ratio", perf, "fuel_air_ratio")
    _add_param(lines, "Gross Thrust", perf, "gross_thrust", "kN", 1e-3)
    _add_param(lines, "Ram Drag", perf, "ram_drag", "kN", 1e-3)
    _add_param(lines, "Compressor Power", perf, "compressor_work", "kW", 1e-3)
    _add_param(lines, "Turbine Power", perf, "turbine_work", "kW", 1e-3)
    _add_param(lines, "Jet Velocity", perf, "exit_velocity", "m/s")
    lines.append("")

    lines.append("STATIONS")
    lines.append("-" * 40)
    lines.append(f"  {'Station':<16s} {'P [kPa]':>10s} {'T [K]':>10s} {'S [J/kg/K]':>12s}")
    for (label, p_kpa, t), st in zip(station_table(result), result.stations):
        lines.append(f"  {label:<16s} {p_kpa:>10.2f} {t:>10.1f} {st.S:>12.2f}")
    lines.append("")

    if not result.is_valid_operating_point:
        lines.append("  NOTE: operating point produces no useful thrust or cannot")
        lines.append("        close the combustor energy balance.")
        lines.append("")

    lines.append("DESIGN POINT")
    lines.append("-" * 40)
    design = asdict(result.design)
    _add_param(lines, "Pressure Ratio", design, "pi_c")
    _add_param(lines, "η compressor", design, "eta_c")
    _add_param(lines, "η turbine", design, "eta_t")
    _add_param(lines, "cp air", design, "cp_air", "J/(kg·K)")
    _add_param(lines, "cp gas", design, "cp_gas", "J/(kg·K)")
    lines.append("")

    lines.append(_hr)
    lines.append(f"  Generated: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}")
    lines.append(f"  {__app_name__} v{__version__}")
    lines.append(_hr)

    return "\n".join(lines)


def _add_param(
    lines: list[str],
    label: str,
    data: dict[str, Any],
    key: str,
    unit: str = "",
    scale: float = 1.0,
) -> None:
    """Add a parameter line if the key exists in data."""
    val = data.get(key)
    if val is not None:
        scaled = val * scale
        unit_str = f" {unit}" if unit else ""
        if isinstance(scaled, float):
            lines.append(f"  {label:<20s} {scaled:>12.4f}{unit_str}")
        else:
            lines.append(f"  {label:<20s} {scaled!s:>12}{unit_str}")


def _add_param_str(lines: list[str], label: str, value: str) -> None:
    """Add a string parameter line."""
    lines.append(f"  {label:<20s} {value:>12}")
