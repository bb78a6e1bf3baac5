"""Base classes for cycle components.

Defines the common interface for the gas-path components of the
turbojet (inlet, compressor, combustor, turbine, nozzle).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GasState:
    """Gas state at a station of the engine.

    Temperatures and pressures are totals except at station 0, where the
    freestream static values are carried. All properties in SI units.
    """

    temperature: float = 0.0  # K
    pressure: float = 0.0  # Pa
    mass_flow: float = 0.0  # kg/s


class CycleComponent(ABC):
    """Abstract base class for a cycle component.

    Every component takes an inlet GasState and produces an outlet
    GasState, along with power and performance metrics.
    """

    name: str = ""

    @abstractmethod
    def compute(self, inlet: GasState, **kwargs: Any) -> GasState:
        """Run the component model.

        Args:
            inlet: Inlet gas state.
            **kwargs: Component-specific parameters.

        Returns:
            Outlet gas state.
        """
        ...

    def power(self) -> float:
        """Net shaft power [W] consumed (positive) or produced (negative)."""
        return 0.0
