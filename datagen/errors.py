"""Exception types raised by the data generator."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a distribution request cannot be honoured.

    Statistics never raise; degenerate samples resolve to sentinels instead.
    """
