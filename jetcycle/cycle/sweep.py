"""Throttle mapping and parameter sweeps for JetCycle.

The throttle maps linearly from percent to turbine-inlet temperature
between two configured bounds. Sweeps are generators over a finite grid:
each call to ``mach_sweep`` / ``throttle_sweep`` starts a fresh, independent
sequence of solver evaluations that can be consumed lazily, collected into
arrays, or farmed out point by point.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

import numpy as np

from jetcycle.cycle.solver import (
    DESIGN_POINT,
    TSFC_SENTINEL,
    CycleResult,
    EngineDesign,
    FlightInputs,
    solve,
)
from jetcycle.utils.constants import N_TO_KN, PA_TO_KPA

logger = logging.getLogger(__name__)

# Default throttle bounds [K]
T4_MIN = 800.0
T4_MAX = 1800.0

STATION_LABELS = {
    "0": "Ambient",
    "2": "Inlet S2",
    "3": "Compressor S3",
    "4": "Combustor S4",
    "5": "Turbine S5",
}


@dataclass(frozen=True)
class ThrottleSchedule:
    """Linear throttle map from percent to turbine-inlet temperature."""

    t4_min: float = T4_MIN  # K at 0 %
    t4_max: float = T4_MAX  # K at 100 %

    def to_t4(self, throttle_pct: float) -> float:
        """Turbine-inlet temperature [K] at a throttle setting [%]."""
        return throttle_to_t4(throttle_pct, self.t4_min, self.t4_max)

    @staticmethod
    def clamp_pct(throttle_pct: float) -> float:
        """Clamp a throttle setting to 0–100 %."""
        return max(0.0, min(100.0, throttle_pct))


def throttle_to_t4(throttle_pct: float, t4_min: float = T4_MIN, t4_max: float = T4_MAX) -> float:
    """Map throttle percent to turbine-inlet temperature [K].

    The percent is not clamped; 0 % gives t4_min and 100 % gives t4_max.
    """
    return t4_min + (throttle_pct / 100.0) * (t4_max - t4_min)


# --- Grids ---


def mach_range(start: float = 0.0, stop: float = 2.5, step: float = 0.05) -> np.ndarray:
    """Inclusive Mach grid."""
    n = int(np.floor((stop - start) / step + 1e-9)) + 1
    return start + step * np.arange(n)


def throttle_range(start: float = 0.0, stop: float = 100.0, step: float = 2.0) -> np.ndarray:
    """Inclusive throttle grid [%]."""
    n = int(np.floor((stop - start) / step + 1e-9)) + 1
    return start + step * np.arange(n)


# --- Sweeps ---


@dataclass(frozen=True)
class SweepPoint:
    """One evaluated point of a sweep."""

    value: float  # swept parameter (Mach or throttle %)
    result: CycleResult


@dataclass
class SweepResult:
    """A materialised sweep as arrays."""

    parameter: str = ""
    values: np.ndarray = field(default_factory=lambda: np.array([]))
    thrust_kN: np.ndarray = field(default_factory=lambda: np.array([]))
    tsfc: np.ndarray = field(default_factory=lambda: np.array([]))  # g/(kN·s), NaN at sentinel
    fuel_flow: np.ndarray = field(default_factory=lambda: np.array([]))  # kg/s
    air_flow: np.ndarray = field(default_factory=lambda: np.array([]))  # kg/s

    def __len__(self) -> int:
        return len(self.values)

    def to_dict(self) -> dict[str, list[float | None]]:
        """Column-wise lists; NaN becomes None."""
        return {
            name: [None if np.isnan(v) else float(v) for v in arr]
            for name, arr in (
                (self.parameter, self.values),
                ("thrust_kN", self.thrust_kN),
                ("tsfc", self.tsfc),
                ("fuel_flow", self.fuel_flow),
                ("air_flow", self.air_flow),
            )
        }


def mach_sweep(
    altitude_ft: float,
    t4: float,
    machs: Iterable[float] | None = None,
    design: EngineDesign = DESIGN_POINT,
) -> Iterator[SweepPoint]:
    """Evaluate the cycle across Mach at fixed altitude and T4.

    Args:
        altitude_ft: Altitude [ft].
        t4: Turbine-inlet temperature [K].
        machs: Mach values; defaults to ``mach_range()``.
        design: Engine design point.

    Yields:
        SweepPoint per Mach number, in grid order.
    """
    grid = mach_range() if machs is None else machs
    for m in grid:
        yield SweepPoint(float(m), solve(FlightInputs(altitude_ft=altitude_ft, mach=float(m), t4=t4), design))


def throttle_sweep(
    altitude_ft: float,
    mach: float,
    schedule: ThrottleSchedule | None = None,
    throttles: Iterable[float] | None = None,
    design: EngineDesign = DESIGN_POINT,
) -> Iterator[SweepPoint]:
    """Evaluate the cycle across throttle settings at a fixed flight condition.

    Args:
        altitude_ft: Altitude [ft].
        mach: Flight Mach number.
        schedule: Throttle-to-T4 map; defaults to ``ThrottleSchedule()``.
        throttles: Throttle settings [%]; defaults to ``throttle_range()``.
        design: Engine design point.

    Yields:
        SweepPoint per throttle setting, in grid order.
    """
    schedule = schedule or ThrottleSchedule()
    grid = throttle_range() if throttles is None else throttles
    for pct in grid:
        t4 = schedule.to_t4(float(pct))
        yield SweepPoint(float(pct), solve(FlightInputs(altitude_ft=altitude_ft, mach=mach, t4=t4), design))


def collect(points: Iterable[SweepPoint], parameter: str = "value") -> SweepResult:
    """Materialise a sweep into arrays.

    Sentinel TSFC values are stored as NaN so plots and statistics skip them.
    """
    values: list[float] = []
    thrust: list[float] = []
    tsfc: list[float] = []
    fuel: list[float] = []
    air: list[float] = []

    for p in points:
        perf = p.result.performance
        values.append(p.value)
        thrust.append(perf.thrust * N_TO_KN)
        tsfc.append(np.nan if perf.tsfc == TSFC_SENTINEL else perf.tsfc)
        fuel.append(perf.fuel_flow)
        air.append(perf.air_flow)

    n_invalid = int(np.isnan(tsfc).sum()) if tsfc else 0
    if n_invalid:
        logger.info("%d of %d sweep points have no useful thrust", n_invalid, len(values))

    return SweepResult(
        parameter=parameter,
        values=np.array(values),
        thrust_kN=np.array(thrust),
        tsfc=np.array(tsfc),
        fuel_flow=np.array(fuel),
        air_flow=np.array(air),
    )


# --- Chart data ---


def ts_diagram(result: CycleResult) -> list[tuple[float, float]]:
    """(S, T) pairs for stations 2 → 3 → 4 → 5, closed back to station 2."""
    path = [result.station(name) for name in ("2", "3", "4", "5", "2")]
    return [(st.S, st.T) for st in path]


def station_table(result: CycleResult) -> list[tuple[str, float, float]]:
    """Rows of (label, total pressure [kPa], total temperature [K]) per station."""
    return [(STATION_LABELS[st.name], st.P * PA_TO_KPA, st.T) for st in result.stations]
