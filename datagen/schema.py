"""Define standardized labels for statistics tables."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class DescriptiveLabels:
    """Row labels for the descriptives table, keyed by result field.

    The order of the attributes is the order rows appear in, matching the
    descriptives panel (count first, raw sum of squares last).
    """

    n: str = "N"
    mean: str = "Mean"
    median: str = "Median"
    mode: str = "Mode"
    std_dev: str = "Std Dev"
    variance: str = "Variance"
    minimum: str = "Min"
    maximum: str = "Max"
    range: str = "Range"
    total: str = "Sum"
    sum_of_squares: str = "Sum of Squares"


@dataclass(frozen=True)
class BivariateLabels:
    """Row labels for the two-variable table, keyed by result field.

    Attributes:
        t_paired: Shown only when both selected columns hold the same
            number of values.
        p_independent: Two-tailed p-value for ``t_independent`` with
            ``n - 1`` degrees of freedom.
    """

    n: str = "N (paired)"
    correlation: str = "Correlation (r)"
    r_squared: str = "R Squared"
    slope: str = "Slope"
    intercept: str = "Intercept"
    t_independent: str = "t (independent)"
    p_independent: str = "p (independent)"
    t_paired: str = "t (paired)"
    p_paired: str = "p (paired)"


def label_items(labels) -> list[tuple[str, str]]:
    """Return ``(field_name, label)`` pairs in declaration order."""
    return [(f.name, getattr(labels, f.name)) for f in fields(labels)]
