"""Build display tables of formatted statistics.

This module sits between the calculators and whatever shows results to a
user. Numeric results are kept as value objects until here; every cell of
the returned tables is already display text.
"""

from __future__ import annotations

from typing import Mapping, Sequence

import pandas as pd

from .formatting import DEFAULT_DECIMALS, format_stat
from .results import BivariateStats, DescriptiveStats, Missing
from .schema import BivariateLabels, DescriptiveLabels, label_items
from .stats import compare, describe


def descriptive_column(
    stats: DescriptiveStats, decimals: int = DEFAULT_DECIMALS
) -> pd.Series:
    """Format one variable's descriptive statistics.

    Args:
        stats (DescriptiveStats): Result of :func:`datagen.stats.describe`.
        decimals (int, optional): Digits after the decimal point for
            numeric statistics. Defaults to ``4``.

    Returns:
        pandas.Series: Display strings indexed by row label.
    """
    items = label_items(DescriptiveLabels())
    return pd.Series(
        [format_stat(getattr(stats, name), decimals) for name, _ in items],
        index=[label for _, label in items],
        dtype=object,
    )


def descriptives_table(
    variables: Mapping[str, Sequence[float]], decimals: int = DEFAULT_DECIMALS
) -> pd.DataFrame:
    """Describe several variables side by side.

    Args:
        variables (Mapping[str, Sequence[float]]): Cleaned samples keyed by
            variable name, in display order.
        decimals (int, optional): Digits after the decimal point.

    Returns:
        pandas.DataFrame: One row per statistic, one column per variable.
        Empty variables show ``"0"`` for N and ``"-"`` elsewhere.
    """
    labels = [label for _, label in label_items(DescriptiveLabels())]
    if not variables:
        return pd.DataFrame(index=labels)
    columns = {
        name: descriptive_column(describe(sample), decimals)
        for name, sample in variables.items()
    }
    return pd.DataFrame(columns, index=labels)


def bivariate_rows(
    stats: BivariateStats, decimals: int = DEFAULT_DECIMALS
) -> pd.DataFrame:
    """Format two-variable statistics as a ``Statistic``/``Value`` table.

    Paired rows are left out when the paired test does not apply (samples
    of different original lengths).
    """
    rows = []
    for name, label in label_items(BivariateLabels()):
        value = getattr(stats, name)
        if value is Missing.NOT_APPLICABLE:
            continue
        rows.append({"Statistic": label, "Value": format_stat(value, decimals)})
    return pd.DataFrame.from_records(rows, columns=["Statistic", "Value"])


def bivariate_table(
    x: Sequence[float], y: Sequence[float], decimals: int = DEFAULT_DECIMALS
) -> pd.DataFrame:
    """Compare two cleaned samples and format the result."""
    return bivariate_rows(compare(x, y), decimals)
