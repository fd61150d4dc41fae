"""Decimal rounding shared by mode grouping and data generation."""

from __future__ import annotations

import math


def round_half_away(value: float, decimals: int) -> float:
    """Round ``value`` to ``decimals`` places, ties away from zero.

    Args:
        value (float): Finite number to round.
        decimals (int): Non-negative number of decimal places.

    Returns:
        float: ``round(value * 10**decimals) / 10**decimals`` with halves
        moved away from zero (Python's ``round`` would go to even).

    Note:
        The scaling happens in binary floating point, so a value such as
        ``1.005`` (stored just below the half) rounds down to ``1.0``.
    """
    factor = 10.0**decimals
    magnitude = abs(float(value)) * factor
    if not math.isfinite(magnitude):
        # Too large to carry any digits at this precision.
        return float(value)
    if magnitude >= 2.0**52:
        # Already integral at this precision.
        return float(value)
    base = math.floor(magnitude)
    scaled = base + (magnitude - base >= 0.5)
    return math.copysign(scaled / factor, value) if scaled else 0.0
