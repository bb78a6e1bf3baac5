"""Input checking for JetCycle.

The solver itself accepts any finite input; these checks are for callers
that want to flag points outside the model's intended envelope before
evaluating them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from jetcycle.cycle.components.combustor import MIN_COMBUSTION_DENOMINATOR
from jetcycle.utils.constants import FT_TO_M, ISOTHERMAL_LAYER_TOP

# Turbine-inlet temperatures above this are beyond uncooled-turbine practice [K]
T4_WARNING_LIMIT = 2200.0


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def info(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, parameter, message, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        self.messages.extend(other.messages)


# --- Common validators ---


def validate_finite(name: str, value: float, result: ValidationResult) -> bool:
    """Validate that a value is a finite number. Returns True if it is."""
    if not math.isfinite(value):
        result.error(name, f"{name} must be finite, got {value}", value=value)
        return False
    return True


def validate_positive(name: str, value: float, result: ValidationResult) -> None:
    """Validate that a value is strictly positive."""
    if value <= 0:
        result.error(name, f"{name} must be positive, got {value}", value=value, limit=0.0)


def validate_flight_inputs(
    altitude_ft: float,
    mach: float,
    t4: float,
    eta_b: float = 0.99,
    fuel_heating_value: float = 43.1e6,
    cp_gas: float = 1148.0,
) -> ValidationResult:
    """Check a flight condition and throttle setting.

    Errors: non-finite values, negative Mach, non-positive T4.
    Warnings: altitude outside the two-layer atmosphere, very high T4.
    Info: T4 beyond what the combustor energy balance can reach.
    """
    result = ValidationResult()

    finite = all(
        [
            validate_finite("altitude_ft", altitude_ft, result),
            validate_finite("mach", mach, result),
            validate_finite("t4", t4, result),
        ]
    )
    if not finite:
        return result

    if mach < 0:
        result.error("mach", f"Mach number must be >= 0, got {mach}", value=mach, limit=0.0)

    validate_positive("t4", t4, result)
    if t4 > T4_WARNING_LIMIT:
        result.warning(
            "t4",
            f"Turbine-inlet temperature {t4:.0f} K is above {T4_WARNING_LIMIT:.0f} K",
            value=t4,
            limit=T4_WARNING_LIMIT,
        )

    altitude_m = altitude_ft * FT_TO_M
    if altitude_m < 0 or altitude_m > ISOTHERMAL_LAYER_TOP:
        result.warning(
            "altitude_ft",
            f"Altitude {altitude_m:.0f} m is outside the modelled atmosphere "
            f"[0, {ISOTHERMAL_LAYER_TOP:.0f}] m",
            value=altitude_ft,
        )

    if eta_b * fuel_heating_value - cp_gas * t4 <= MIN_COMBUSTION_DENOMINATOR:
        result.info("t4", f"T4 = {t4:.0f} K cannot be reached by combustion; fuel flow will be zero")

    return result


def validate_throttle_schedule(t4_min: float, t4_max: float) -> ValidationResult:
    """Check throttle-map bounds: 0 < t4_min <= t4_max."""
    result = ValidationResult()
    validate_positive("t4_min", t4_min, result)
    if t4_max < t4_min:
        result.error(
            "t4_max",
            f"t4_max ({t4_max}) must not be below t4_min ({t4_min})",
            value=t4_max,
            limit=t4_min,
        )
    return result
