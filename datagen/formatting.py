"""Turn computed statistics into fixed-precision display strings."""

from __future__ import annotations

import math
import numbers
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .results import Missing, Mode

DEFAULT_DECIMALS = 4
PLACEHOLDER = "-"


def format_number(value, decimals: int = DEFAULT_DECIMALS) -> str:
    """Format a statistic with exactly ``decimals`` digits after the point.

    Args:
        value: A float, int or :class:`Missing` sentinel.
        decimals (int, optional): Digits after the decimal point. Defaults
            to ``4``.

    Returns:
        str: Fixed-point text (never scientific notation), or ``"-"`` for
        sentinels, ``None``, non-finite and non-numeric values.

    Note:
        Rounding is half away from zero on the exact binary value, so
        ``2.5`` becomes ``"3"`` at zero decimals while ``1.005`` (stored
        slightly below the half) becomes ``"1.00"``.
    """
    if isinstance(value, (Missing, bool)) or not isinstance(value, numbers.Real):
        return PLACEHOLDER
    if not math.isfinite(value):
        return PLACEHOLDER
    if value == 0:
        value = 0.0  # drop the sign of -0.0
    quantum = Decimal(1).scaleb(-int(decimals))
    exact = Decimal(float(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + int(decimals) + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def format_stat(value, decimals: int = DEFAULT_DECIMALS) -> str:
    """Format any field of a statistics result for display.

    Counts (plain ints) are shown without decimals and a :class:`Mode` is
    shown as its own text; everything else goes through
    :func:`format_number`.
    """
    if isinstance(value, Mode):
        return str(value)
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return str(int(value))
    return format_number(value, decimals)
