"""Utility modules for JetCycle."""

from jetcycle.utils.constants import FT_TO_M, G_0, P_ATM, R_AIR_ISA
from jetcycle.utils.units import convert, get_unit_registry

__all__ = ["FT_TO_M", "G_0", "P_ATM", "R_AIR_ISA", "convert", "get_unit_registry"]
