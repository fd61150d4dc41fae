"""
Statistical routines for the DataGen panels.

This subpackage holds the pure numerical code. Functions take plain
sequences of floats and return the value objects in ``datagen.results``;
none of them read or write tables, files or timers.

Modules:
    descriptive:
        Count, mean, median, mode, sample variance and standard deviation,
        extremes, range and sums for a single sample.

    bivariate:
        Pearson correlation, least-squares regression and independent and
        paired t statistics for two samples paired by leading prefix.

    rounding:
        Half-away-from-zero decimal rounding shared with data generation.

Design Principle:
    Degenerate inputs never raise. Undefined results are reported with the
    ``Missing`` sentinels and only become display text when formatted.
"""

from .bivariate import compare, two_tailed_p
from .descriptive import describe, find_mode
from .rounding import round_half_away

__all__ = [
    "compare",
    "describe",
    "find_mode",
    "round_half_away",
    "two_tailed_p",
]
