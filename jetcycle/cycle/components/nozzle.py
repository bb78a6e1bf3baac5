"""Exhaust nozzle model for JetCycle.

Expands the turbine exhaust to ambient pressure (fully expanded, station 8)
and returns the jet velocity.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from jetcycle.cycle.components.base import CycleComponent, GasState
from jetcycle.utils.numerics import float_pow


@dataclass(frozen=True)
class NozzleResult:
    """Nozzle analysis result."""

    inlet: GasState
    outlet: GasState
    ideal_exit_temperature: float = 0.0  # K
    exit_velocity: float = 0.0  # m/s
    efficiency: float = 0.0


class Nozzle(CycleComponent):
    """Convergent-divergent nozzle, fully expanded to ambient.

    T_e_ideal = T_in · (p_amb / P_in)^((γ-1)/γ)
    T_e = T_in - η · (T_in - T_e_ideal), never above T_in
    V_e = sqrt(2 · cp · (T_in - T_e))

    With no inlet pressure there is nothing to expand and the jet is at rest.

    Args:
        name: Component name.
        efficiency: Nozzle efficiency (0–1).
    """

    def __init__(self, name: str = "nozzle", efficiency: float = 0.98):
        self.name = name
        self._efficiency = efficiency
        self._result: NozzleResult | None = None

    @property
    def result(self) -> NozzleResult | None:
        return self._result

    def compute(
        self,
        inlet: GasState,
        ambient_pressure: float = 101325.0,
        gamma: float = 1.333,
        cp: float = 1148.0,
        **kwargs: Any,
    ) -> GasState:
        """Compute nozzle exit state.

        Args:
            inlet: Inlet total state (station 5).
            ambient_pressure: Exit static pressure [Pa].
            gamma: Ratio of specific heats of the exhaust gas.
            cp: Specific heat at constant pressure [J/(kg·K)].

        Returns:
            Exit static state (station 8).
        """
        T_in = inlet.temperature
        p_exit = ambient_pressure

        if inlet.pressure > 0:
            T_e_ideal = T_in * float_pow(p_exit / inlet.pressure, (gamma - 1.0) / gamma)
        else:
            T_e_ideal = T_in
        T_e = T_in - self._efficiency * (T_in - T_e_ideal)
        if T_in - T_e < 0:
            T_e = T_in

        V_e = math.sqrt(max(0.0, 2.0 * cp * (T_in - T_e)))

        outlet = GasState(temperature=T_e, pressure=p_exit, mass_flow=inlet.mass_flow)

        self._result = NozzleResult(
            inlet=inlet,
            outlet=outlet,
            ideal_exit_temperature=T_e_ideal,
            exit_velocity=V_e,
            efficiency=self._efficiency,
        )

        return outlet
