"""Compressor component model for JetCycle.

Models an axial/centrifugal compressor raising total pressure by a fixed
ratio with isentropic efficiency.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jetcycle.cycle.components.base import CycleComponent, GasState


@dataclass(frozen=True)
class CompressorResult:
    """Compressor analysis result."""

    inlet: GasState
    outlet: GasState
    pressure_ratio: float = 0.0  # P_out / P_in
    ideal_outlet_temperature: float = 0.0  # K
    shaft_power: float = 0.0  # W (positive = consumed)
    efficiency: float = 0.0


class Compressor(CycleComponent):
    """Compressor with a fixed pressure ratio and isentropic efficiency.

    For an ideal gas compressed through a pressure ratio PR:
        T_out_ideal = T_in · PR^((γ-1)/γ)
        T_out = T_in + (T_out_ideal - T_in) / η
        W = ṁ · cp · (T_out - T_in)

    No total-pressure loss is taken inside the compressor.

    Args:
        name: Component name.
        pressure_ratio: Total pressure ratio P_out / P_in.
        efficiency: Isentropic efficiency (0–1).
    """

    def __init__(self, name: str = "compressor", pressure_ratio: float = 12.0, efficiency: float = 0.90):
        self.name = name
        self._pressure_ratio = pressure_ratio
        self._efficiency = efficiency
        self._result: CompressorResult | None = None

    @property
    def result(self) -> CompressorResult | None:
        return self._result

    def compute(
        self,
        inlet: GasState,
        gamma: float = 1.4,
        cp: float = 1005.0,
        **kwargs: Any,
    ) -> GasState:
        """Compute compressor outlet state.

        Args:
            inlet: Inlet total state (station 2).
            gamma: Ratio of specific heats of air.
            cp: Specific heat at constant pressure [J/(kg·K)].

        Returns:
            Outlet total state (station 3).
        """
        PR = self._pressure_ratio

        T_out_ideal = inlet.temperature * PR ** ((gamma - 1.0) / gamma)
        T_out = inlet.temperature + (T_out_ideal - inlet.temperature) / self._efficiency
        P_out = inlet.pressure * PR

        P_shaft = inlet.mass_flow * cp * (T_out - inlet.temperature)

        outlet = GasState(temperature=T_out, pressure=P_out, mass_flow=inlet.mass_flow)

        self._result = CompressorResult(
            inlet=inlet,
            outlet=outlet,
            pressure_ratio=PR,
            ideal_outlet_temperature=T_out_ideal,
            shaft_power=P_shaft,
            efficiency=self._efficiency,
        )

        return outlet

    def power(self) -> float:
        """Shaft power consumed [W]."""
        return self._result.shaft_power if self._result else 0.0
