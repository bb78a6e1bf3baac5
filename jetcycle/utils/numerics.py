"""Float helpers for JetCycle.

Python raises on float overflow and division by zero where IEEE arithmetic
would carry Infinity or NaN. The cycle must evaluate for any finite input,
so the few operations that can leave the float range go through here.
"""

from __future__ import annotations

import math


def float_pow(base: float, exponent: float) -> float:
    """``base ** exponent`` for a non-negative base; +inf on overflow.

    Args:
        base: Non-negative base (a temperature or pressure ratio).
        exponent: Exponent.

    Returns:
        The power, or ``math.inf`` if it exceeds the float range.
    """
    try:
        return base**exponent
    except OverflowError:
        return math.inf


def ratio(numerator: float, denominator: float) -> float:
    """``numerator / denominator`` with a zero denominator allowed.

    0/0 is taken as 1 (no change between two empty states); x/0 is
    +inf for positive x and 0 otherwise.
    """
    if denominator == 0:
        if numerator == 0:
            return 1.0
        return math.inf if numerator > 0 else 0.0
    return numerator / denominator
