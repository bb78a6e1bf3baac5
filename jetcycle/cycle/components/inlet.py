"""Inlet (diffuser) model for JetCycle.

Recovers freestream dynamic pressure into total pressure and captures the
engine air mass flow.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from jetcycle.cycle.components.base import CycleComponent, GasState
from jetcycle.utils.numerics import float_pow


@dataclass(frozen=True)
class InletResult:
    """Inlet analysis result."""

    freestream: GasState
    outlet: GasState
    speed_of_sound: float = 0.0  # m/s
    freestream_velocity: float = 0.0  # m/s
    ideal_total_pressure: float = 0.0  # Pa — before recovery losses
    recovery: float = 0.0


class Inlet(CycleComponent):
    """Inlet with a fixed capture area and multiplicative pressure recovery.

    T02 = t0 · (1 + (γ-1)/2 · M²)
    P02 = η · p0 · (T02/t0)^(γ/(γ-1))
    ṁ = A · ρ0 · V0

    The mass flow uses freestream density and the full capture area; no
    spillage or station-density correction is applied.

    Args:
        name: Component name.
        efficiency: Total-pressure recovery factor (0–1).
        capture_area: Inlet capture area [m²].
    """

    def __init__(self, name: str = "inlet", efficiency: float = 0.98, capture_area: float = 1.0):
        self.name = name
        self._efficiency = efficiency
        self._capture_area = capture_area
        self._result: InletResult | None = None

    @property
    def result(self) -> InletResult | None:
        return self._result

    def compute(
        self,
        inlet: GasState,
        mach: float = 0.0,
        density: float = 0.0,
        gamma: float = 1.4,
        R: float = 287.0,
        **kwargs: Any,
    ) -> GasState:
        """Compute inlet exit (station 2) state.

        Args:
            inlet: Freestream static state (station 0).
            mach: Flight Mach number.
            density: Freestream density [kg/m³].
            gamma: Ratio of specific heats of air.
            R: Gas constant of air [J/(kg·K)].

        Returns:
            Total state at the compressor face, carrying the captured mass flow.
        """
        t0 = inlet.temperature
        p0 = inlet.pressure

        a0 = math.sqrt(gamma * R * t0)
        v0 = max(0.0, mach * a0)

        t02 = t0 * (1.0 + (gamma - 1.0) / 2.0 * mach * mach)
        p02 = p0 * float_pow(t02 / t0, gamma / (gamma - 1.0))
        p02_real = p02 * self._efficiency

        mdot = self._capture_area * density * v0

        outlet = GasState(temperature=t02, pressure=p02_real, mass_flow=mdot)

        self._result = InletResult(
            freestream=inlet,
            outlet=outlet,
            speed_of_sound=a0,
            freestream_velocity=v0,
            ideal_total_pressure=p02,
            recovery=self._efficiency,
        )

        return outlet
