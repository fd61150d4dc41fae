"""
A Python package for descriptive statistics and synthetic data generation.

Summarizes numeric worksheet columns, compares pairs of columns and fills
columns with values drawn from Normal, Uniform or Sequence distributions.

Modules:
    - stats: Descriptive and two-variable statistics (pure functions).
    - generation: Distribution specs and seeded value generation.
    - formatting: Fixed-precision display strings for results.
    - reporting: Tables of formatted statistics.
    - worksheet: Spreadsheet-style grid adapter and debounced recompute.
"""

__version__ = "1.0.0"

from .errors import ValidationError
from .formatting import format_number, format_stat
from .generation import (
    Distribution,
    DistributionSpec,
    generate,
    scripted_source,
    uniform_source,
)
from .reporting import bivariate_table, descriptives_table
from .results import BivariateStats, DescriptiveStats, Missing, Mode, ModeKind
from .stats import compare, describe
from .worksheet import RecomputeDebouncer, Worksheet

__all__ = [
    # Statistics
    "describe",
    "compare",
    "DescriptiveStats",
    "BivariateStats",
    "Missing",
    "Mode",
    "ModeKind",
    # Generation
    "Distribution",
    "DistributionSpec",
    "generate",
    "uniform_source",
    "scripted_source",
    "ValidationError",
    # Presentation
    "format_number",
    "format_stat",
    "descriptives_table",
    "bivariate_table",
    # Host boundary
    "Worksheet",
    "RecomputeDebouncer",
]
