"""Gas-path component models for the turbojet cycle."""

from jetcycle.cycle.components.base import CycleComponent, GasState
from jetcycle.cycle.components.combustor import Combustor
from jetcycle.cycle.components.compressor import Compressor
from jetcycle.cycle.components.inlet import Inlet
from jetcycle.cycle.components.nozzle import Nozzle
from jetcycle.cycle.components.turbine import Turbine

__all__ = [
    "CycleComponent",
    "GasState",
    "Inlet",
    "Compressor",
    "Combustor",
    "Turbine",
    "Nozzle",
]
