"""Turbine component model for JetCycle.

Models the single-spool turbine that drives the compressor: the exit
temperature follows from the shaft power it must deliver, the exit
pressure from the isentropic-equivalent expansion.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jetcycle.cycle.components.base import CycleComponent, GasState
from jetcycle.utils.numerics import float_pow, ratio

# Below this heat-capacity rate [W/K] the turbine extracts no work
MIN_HEAT_CAPACITY_RATE = 1.0e-6

# Floor on T_out_ideal / T_in when the required work exceeds what the gas holds
MIN_EXPANSION_RATIO = 1.0e-9


@dataclass(frozen=True)
class TurbineResult:
    """Turbine analysis result."""

    inlet: GasState
    outlet: GasState
    ideal_outlet_temperature: float = 0.0  # K
    pressure_ratio: float = 0.0  # P_in / P_out
    shaft_power: float = 0.0  # W (positive = produced)
    efficiency: float = 0.0


class Turbine(CycleComponent):
    """Gas turbine delivering a required shaft power.

    Work balance and efficiency inversion:
        T_out = T_in - W / (ṁ · cp)
        T_out_ideal = T_in - (T_in - T_out) / η
        P_out = P_in · (T_out_ideal / T_in)^(γ/(γ-1))

    The shaft power produced is the required power itself; no mechanical
    loss or bleed is taken between turbine and compressor.

    Args:
        name: Component name.
        efficiency: Isentropic efficiency (0–1).
    """

    def __init__(self, name: str = "turbine", efficiency: float = 0.92):
        self.name = name
        self._efficiency = efficiency
        self._result: TurbineResult | None = None

    @property
    def result(self) -> TurbineResult | None:
        return self._result

    def compute(
        self,
        inlet: GasState,
        required_power: float = 0.0,
        gamma: float = 1.333,
        cp: float = 1148.0,
        **kwargs: Any,
    ) -> GasState:
        """Compute turbine outlet state.

        Args:
            inlet: Inlet total state (station 4).
            required_power: Shaft power to deliver [W].
            gamma: Ratio of specific heats of the working gas.
            cp: Specific heat at constant pressure [J/(kg·K)].

        Returns:
            Outlet total state (station 5).
        """
        T_in = inlet.temperature

        T_out = T_in
        if inlet.mass_flow * cp > MIN_HEAT_CAPACITY_RATE:
            T_out = T_in - required_power / (inlet.mass_flow * cp)

        T_out_ideal = T_in - (T_in - T_out) / self._efficiency
        expansion = max(ratio(T_out_ideal, T_in), MIN_EXPANSION_RATIO)
        P_out = inlet.pressure * float_pow(expansion, gamma / (gamma - 1.0))

        PR = inlet.pressure / P_out if P_out > 0 else 1.0

        outlet = GasState(temperature=T_out, pressure=P_out, mass_flow=inlet.mass_flow)

        self._result = TurbineResult(
            inlet=inlet,
            outlet=outlet,
            ideal_outlet_temperature=T_out_ideal,
            pressure_ratio=PR,
            shaft_power=required_power,
            efficiency=self._efficiency,
        )

        return outlet

    def power(self) -> float:
        """Shaft power produced [W] (negative convention: produced)."""
        return -(self._result.shaft_power) if self._result else 0.0
