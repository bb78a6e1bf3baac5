"""Turbojet design-point cycle solver for JetCycle.

Marches a single-spool turbojet station by station:

    0 ambient → 2 inlet exit → 3 compressor exit → 4 combustor exit
      → 5 turbine exit → 8 nozzle exit

closing the shaft power balance between compressor and turbine, then
derives net thrust and TSFC. The solver is a pure function of its inputs
and the engine design point. It never raises for finite inputs: operating
points where the combustor cannot reach T4 or the engine produces no useful
thrust are reported through sentinel values in the result.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any

from jetcycle.core.atmosphere import AtmosphereState, evaluate
from jetcycle.cycle.components.base import GasState
from jetcycle.cycle.components.combustor import Combustor
from jetcycle.cycle.components.compressor import Compressor
from jetcycle.cycle.components.inlet import Inlet
from jetcycle.cycle.components.nozzle import Nozzle
from jetcycle.cycle.components.turbine import Turbine
from jetcycle.utils.constants import KG_TO_G, N_TO_KN
from jetcycle.utils.numerics import ratio

logger = logging.getLogger(__name__)

# TSFC reported when net thrust is (near) zero [g/(kN·s)]
TSFC_SENTINEL = 1.0e6
MIN_THRUST_KN = 1.0e-6
# Floor applied to temperature and pressure ratios inside the entropy logs
LOG_FLOOR = 1.0e-9

STATION_NAMES = ("0", "2", "3", "4", "5")


@dataclass(frozen=True)
class FlightInputs:
    """Flight condition and throttle setting for one cycle evaluation."""

    altitude_ft: float = 0.0  # ft
    mach: float = 0.0
    t4: float = 1200.0  # K — turbine-inlet total temperature


@dataclass(frozen=True)
class EngineDesign:
    """Fixed design-point constants of the engine.

    The gas constant R is the rounded value used throughout the cycle and
    differs from the ISA dry-air constant used by the atmosphere model.
    """

    gamma_air: float = 1.4
    gamma_gas: float = 1.333
    cp_air: float = 1005.0  # J/(kg·K)
    cp_gas: float = 1148.0  # J/(kg·K) — hot gas
    R: float = 287.0  # J/(kg·K)
    fuel_heating_value: float = 43.1e6  # J/kg — kerosene

    inlet_area: float = 1.0  # m²
    eta_inlet: float = 0.98
    pi_c: float = 12.0  # compressor pressure ratio (OPR)
    eta_c: float = 0.90  # compressor isentropic efficiency
    eta_b: float = 0.99  # combustion efficiency
    pi_b: float = 0.96  # combustor total-pressure ratio
    eta_t: float = 0.92  # turbine isentropic efficiency
    eta_n: float = 0.98  # nozzle efficiency


DESIGN_POINT = EngineDesign()


@dataclass(frozen=True)
class CycleStation:
    """Thermodynamic state at one engine station.

    S is relative to station 0 and accumulated along the actual path.
    """

    name: str
    T: float  # K
    P: float  # Pa
    S: float = 0.0  # J/(kg·K)


@dataclass(frozen=True)
class CyclePerformance:
    """Engine-level performance at the evaluated operating point."""

    thrust: float = 0.0  # N — net
    tsfc: float = 0.0  # g/(kN·s)
    air_flow: float = 0.0  # kg/s
    fuel_flow: float = 0.0  # kg/s
    gross_thrust: float = 0.0  # N
    ram_drag: float = 0.0  # N
    fuel_air_ratio: float = 0.0
    compressor_work: float = 0.0  # W
    turbine_work: float = 0.0  # W
    freestream_velocity: float = 0.0  # m/s
    exit_velocity: float = 0.0  # m/s
    nozzle_exit_temperature: float = 0.0  # K


@dataclass(frozen=True)
class CycleResult:
    """Complete result of one cycle evaluation."""

    inputs: FlightInputs
    atmosphere: AtmosphereState
    performance: CyclePerformance
    stations: tuple[CycleStation, ...]
    design: EngineDesign = DESIGN_POINT

    def station(self, name: str) -> CycleStation:
        """Look up a station by name ("0", "2", "3", "4" or "5").

        Raises:
            KeyError: If no station has that name.
        """
        for st in self.stations:
            if st.name == name:
                return st
        raise KeyError(f"No station {name!r}; available: {[s.name for s in self.stations]}")

    @property
    def is_valid_operating_point(self) -> bool:
        """False when the combustor could not close or thrust is not useful."""
        return self.performance.tsfc != TSFC_SENTINEL and self.performance.fuel_air_ratio > 0.0

    def as_dict(self) -> dict[str, Any]:
        """Nested plain-dict view: performance, stations (s0..s5) and design."""
        perf = self.performance
        return {
            "performance": {
                "thrust": perf.thrust,
                "tsfc": perf.tsfc,
                "air_flow": perf.air_flow,
                "fuel_flow": perf.fuel_flow,
            },
            "stations": {f"s{st.name}": {"T": st.T, "P": st.P, "S": st.S} for st in self.stations},
            "design": {
                "pi_c": self.design.pi_c,
                "cp_air": self.design.cp_air,
                "cp_gas": self.design.cp_gas,
            },
        }


def entropy_change(cp: float, R: float, T_in: float, T_out: float, P_in: float, P_out: float) -> float:
    """Specific entropy change of an ideal gas between two states.

    ΔS = cp · ln(T_out/T_in) - R · ln(P_out/P_in), each ratio floored at
    LOG_FLOOR. Between two zero-pressure states the pressure term is zero.
    """
    t_ratio = max(LOG_FLOOR, ratio(T_out, T_in))
    p_ratio = max(LOG_FLOOR, ratio(P_out, P_in))
    return cp * math.log(t_ratio) - R * math.log(p_ratio)


def solve(inputs: FlightInputs, design: EngineDesign = DESIGN_POINT) -> CycleResult:
    """Evaluate the turbojet cycle at one operating point.

    Args:
        inputs: Altitude [ft], Mach number and turbine-inlet temperature [K].
        design: Engine design-point constants.

    Returns:
        CycleResult with performance, stations 0/2/3/4/5 and the design used.
    """
    d = design

    # Station 0 — ambient
    atm = evaluate(inputs.altitude_ft)
    s0 = GasState(temperature=atm.temperature, pressure=atm.pressure)

    # Station 2 — inlet exit
    inlet = Inlet(efficiency=d.eta_inlet, capture_area=d.inlet_area)
    s2 = inlet.compute(s0, mach=inputs.mach, density=atm.density, gamma=d.gamma_air, R=d.R)
    v0 = inlet.result.freestream_velocity

    # Station 3 — compressor exit
    compressor = Compressor(pressure_ratio=d.pi_c, efficiency=d.eta_c)
    s3 = compressor.compute(s2, gamma=d.gamma_air, cp=d.cp_air)
    compressor_work = compressor.result.shaft_power

    # Station 4 — combustor exit
    combustor = Combustor(
        efficiency=d.eta_b,
        pressure_recovery=d.pi_b,
        heating_value=d.fuel_heating_value,
    )
    s4 = combustor.compute(s3, exit_temperature=inputs.t4, cp_in=d.cp_air, cp_out=d.cp_gas)
    mdot_fuel = combustor.result.fuel_flow

    # Station 5 — turbine exit, shaft balance with the compressor
    turbine = Turbine(efficiency=d.eta_t)
    s5 = turbine.compute(s4, required_power=compressor_work, gamma=d.gamma_gas, cp=d.cp_gas)

    # Station 8 — nozzle exit, fully expanded
    nozzle = Nozzle(efficiency=d.eta_n)
    s8 = nozzle.compute(s5, ambient_pressure=atm.pressure, gamma=d.gamma_gas, cp=d.cp_gas)
    v8 = nozzle.result.exit_velocity

    # Performance
    thrust_gross = s4.mass_flow * v8
    thrust_ram = s2.mass_flow * v0
    thrust_net = thrust_gross - thrust_ram

    thrust_kN = thrust_net * N_TO_KN
    if abs(thrust_kN) > MIN_THRUST_KN:
        tsfc = (mdot_fuel / thrust_kN) * KG_TO_G
    else:
        logger.debug("Net thrust %.3g N is not useful; TSFC set to sentinel", thrust_net)
        tsfc = TSFC_SENTINEL

    # Relative entropies, cumulative from station 0
    S2 = entropy_change(d.cp_air, d.R, s0.temperature, s2.temperature, s0.pressure, s2.pressure)
    S3 = S2 + entropy_change(d.cp_air, d.R, s2.temperature, s3.temperature, s2.pressure, s3.pressure)
    S4 = S3 + entropy_change(d.cp_air, d.R, s3.temperature, s4.temperature, s3.pressure, s4.pressure)
    S5 = S4 + entropy_change(d.cp_gas, d.R, s4.temperature, s5.temperature, s4.pressure, s5.pressure)

    stations = tuple(
        CycleStation(name=name, T=state.temperature, P=state.pressure, S=S)
        for name, state, S in zip(STATION_NAMES, (s0, s2, s3, s4, s5), (0.0, S2, S3, S4, S5))
    )

    performance = CyclePerformance(
        thrust=thrust_net,
        tsfc=tsfc,
        air_flow=s2.mass_flow,
        fuel_flow=mdot_fuel,
        gross_thrust=thrust_gross,
        ram_drag=thrust_ram,
        fuel_air_ratio=combustor.result.fuel_air_ratio,
        compressor_work=compressor_work,
        turbine_work=turbine.result.shaft_power,
        freestream_velocity=v0,
        exit_velocity=v8,
        nozzle_exit_temperature=s8.temperature,
    )

    return CycleResult(
        inputs=inputs,
        atmosphere=atm,
        performance=performance,
        stations=stations,
        design=design,
    )


def solve_cycle(altitude_ft: float, mach: float, t4: float) -> CycleResult:
    """Convenience wrapper: solve at the design point from plain numbers."""
    return solve(FlightInputs(altitude_ft=altitude_ft, mach=mach, t4=t4))


def design_to_dict(design: EngineDesign) -> dict[str, float]:
    """Plain-dict view of an EngineDesign (for persistence)."""
    return asdict(design)
