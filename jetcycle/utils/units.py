"""Unit conversion utilities for JetCycle.

Provides a lightweight unit conversion system built on top of pint,
with convenience functions for the quantities a cycle study reports.
"""

from __future__ import annotations

from functools import lru_cache

import pint

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()
_ureg.default_format = "~P"  # short pretty format


def get_unit_registry() -> pint.UnitRegistry:
    """Return the shared pint UnitRegistry instance."""
    return _ureg


Q_ = _ureg.Quantity

# TSFC is carried internally in g/(kN·s)
TSFC_SI_UNIT = "g / kN / s"


# --- Convenience conversion functions ---


def altitude_to_ft(value: float, unit: str) -> float:
    """Convert an altitude to feet.

    Args:
        value: Numeric altitude.
        unit: Source unit string (e.g. "m", "km", "ft").

    Returns:
        Altitude in ft.
    """
    if unit == "ft":
        return float(value)
    return Q_(value, unit).to("ft").magnitude


def thrust_from_si(value_n: float, unit: str) -> float:
    """Convert thrust from Newtons to target unit (e.g. "kN", "lbf")."""
    return Q_(value_n, "N").to(unit).magnitude


def tsfc_from_si(value: float, unit: str) -> float:
    """Convert TSFC from g/(kN·s) to target unit.

    Args:
        value: TSFC in g/(kN·s).
        unit: Target unit string (e.g. "lb / lbf / hour", "mg / N / s").

    Returns:
        TSFC in the target unit.
    """
    return Q_(value, TSFC_SI_UNIT).to(unit).magnitude


@lru_cache(maxsize=256)
def convert(value: float, from_unit: str, to_unit: str) -> float:
    """General-purpose unit conversion.

    Args:
        value: Numeric value in *from_unit*.
        from_unit: Source unit string.
        to_unit: Target unit string.

    Returns:
        Converted numeric value.
    """
    return Q_(value, from_unit).to(to_unit).magnitude
