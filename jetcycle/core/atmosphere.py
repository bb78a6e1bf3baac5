"""International Standard Atmosphere model for JetCycle.

Two-layer ISA: a constant-lapse troposphere up to 11 km and an isothermal
layer above it. Only the troposphere and the lower stratosphere are
represented; altitudes above ~20 km still evaluate through the isothermal
branch and give numerically defined but physically wrong values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from jetcycle.utils.constants import (
    FT_TO_M,
    G_0,
    LAPSE_RATE_TROPOSPHERE,
    P_ATM,
    R_AIR_ISA,
    T_ATM,
    TROPOPAUSE_ALTITUDE,
    TROPOPAUSE_PRESSURE,
    TROPOPAUSE_TEMPERATURE,
)
from jetcycle.utils.numerics import float_pow


@dataclass(frozen=True)
class AtmosphereState:
    """Ambient static state at a given altitude."""

    pressure: float  # Pa
    temperature: float  # K
    density: float  # kg/m³


def troposphere(altitude_m: float) -> AtmosphereState:
    """Constant lapse-rate layer.

    T = T0 + L·h
    P = P0 · (T/T0)^(−g0 / (L·R))
    """
    temperature = T_ATM + LAPSE_RATE_TROPOSPHERE * altitude_m
    pressure = P_ATM * float_pow(temperature / T_ATM, -G_0 / (LAPSE_RATE_TROPOSPHERE * R_AIR_ISA))
    return AtmosphereState(
        pressure=pressure,
        temperature=temperature,
        density=pressure / (R_AIR_ISA * temperature),
    )


def lower_stratosphere(altitude_m: float) -> AtmosphereState:
    """Isothermal layer above the tropopause.

    P = P11 · exp(−g0 · (h − 11000) / (R·T))
    """
    temperature = TROPOPAUSE_TEMPERATURE
    pressure = TROPOPAUSE_PRESSURE * math.exp(
        -G_0 * (altitude_m - TROPOPAUSE_ALTITUDE) / (R_AIR_ISA * temperature)
    )
    return AtmosphereState(
        pressure=pressure,
        temperature=temperature,
        density=pressure / (R_AIR_ISA * temperature),
    )


def evaluate(altitude_ft: float) -> AtmosphereState:
    """Evaluate the ambient state at a geometric altitude.

    Args:
        altitude_ft: Altitude [ft]. Negative values (below sea level) go
            through the troposphere branch.

    Returns:
        AtmosphereState with pressure [Pa], temperature [K], density [kg/m³].
    """
    altitude_m = altitude_ft * FT_TO_M
    if altitude_m <= TROPOPAUSE_ALTITUDE:
        return troposphere(altitude_m)
    return lower_stratosphere(altitude_m)
