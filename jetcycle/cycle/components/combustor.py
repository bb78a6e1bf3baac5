"""Combustor component model for JetCycle.

Burns fuel to reach a commanded exit total temperature with a fixed
total-pressure loss, solving the fuel-air ratio from a one-pass energy
balance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from jetcycle.cycle.components.base import CycleComponent, GasState

logger = logging.getLogger(__name__)

# Energy-balance denominators at or below this value are treated as a
# non-combustible operating point [J/kg]
MIN_COMBUSTION_DENOMINATOR = 1.0e3


@dataclass(frozen=True)
class CombustorResult:
    """Combustor analysis result."""

    inlet: GasState
    outlet: GasState
    fuel_air_ratio: float = 0.0
    fuel_flow: float = 0.0  # kg/s
    pressure_recovery: float = 0.0  # P_out / P_in
    combustible: bool = True


class Combustor(CycleComponent):
    """Combustor at a commanded exit temperature.

    Energy balance per unit air mass flow:
        f · (η_b · Q - cp_gas · T4) = cp_gas · T4 - cp_air · T3

    When η_b · Q - cp_gas · T4 is too small, the commanded temperature
    cannot be reached and the fuel-air ratio is reported as zero. The
    exit temperature is still the commanded one.

    Args:
        name: Component name.
        efficiency: Combustion efficiency (0–1).
        pressure_recovery: Total-pressure ratio P_out / P_in.
        heating_value: Fuel lower heating value [J/kg].
    """

    def __init__(
        self,
        name: str = "combustor",
        efficiency: float = 0.99,
        pressure_recovery: float = 0.96,
        heating_value: float = 43.1e6,
    ):
        self.name = name
        self._efficiency = efficiency
        self._pressure_recovery = pressure_recovery
        self._heating_value = heating_value
        self._result: CombustorResult | None = None

    @property
    def result(self) -> CombustorResult | None:
        return self._result

    def compute(
        self,
        inlet: GasState,
        exit_temperature: float = 0.0,
        cp_in: float = 1005.0,
        cp_out: float = 1148.0,
        **kwargs: Any,
    ) -> GasState:
        """Compute combustor outlet state.

        Args:
            inlet: Inlet total state (station 3).
            exit_temperature: Commanded exit total temperature T4 [K].
            cp_in: Specific heat of the incoming air [J/(kg·K)].
            cp_out: Specific heat of the combustion gas [J/(kg·K)].

        Returns:
            Outlet total state (station 4) carrying air + fuel mass flow.
        """
        t04 = exit_temperature
        p04 = inlet.pressure * self._pressure_recovery

        denom = self._efficiency * self._heating_value - cp_out * t04
        combustible = denom > MIN_COMBUSTION_DENOMINATOR
        if combustible:
            far = (cp_out * t04 - cp_in * inlet.temperature) / denom
        else:
            logger.debug("Combustor cannot reach T4=%.1f K (denominator %.3g J/kg)", t04, denom)
            far = 0.0
        far = max(far, 0.0)

        mdot_fuel = far * inlet.mass_flow
        mdot_hot = inlet.mass_flow + mdot_fuel

        outlet = GasState(temperature=t04, pressure=p04, mass_flow=mdot_hot)

        self._result = CombustorResult(
            inlet=inlet,
            outlet=outlet,
            fuel_air_ratio=far,
            fuel_flow=mdot_fuel,
            pressure_recovery=self._pressure_recovery,
            combustible=combustible,
        )

        return outlet
