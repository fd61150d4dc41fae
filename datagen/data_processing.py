"""
Handles worksheet loading and cleaning of raw cell values into samples.
"""

# Cells arrive exactly as the worksheet holds them: numbers, numeric text,
# blanks (None/NaN/"") and free text. Calculators only ever see the finite
# numeric cells, in their original order.

import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def clean_sample(cells, name=None):
    """Convert raw cell values into a numeric sample.

    Each cell is coerced with :func:`pandas.to_numeric`; blank, non-numeric
    and non-finite cells are dropped. Order is preserved.

    Args:
        cells: Iterable of raw cell values (or a :class:`pandas.Series`).
        name: Optional variable name used in the log message.

    Returns:
        list[float]: The finite numeric values.
    """
    series = pd.Series(list(cells), dtype=object)
    if series.empty:
        return []

    blank = (
        series.isna() | series.map(lambda v: isinstance(v, str) and not v.strip())
    ).astype(bool)
    numeric = pd.to_numeric(series.where(~blank), errors="coerce").astype(float)
    keep = np.isfinite(numeric.to_numpy())

    rejected = int((~keep & ~blank.to_numpy()).sum())
    if rejected:
        logger.warning(
            "Discarded %d non-numeric cell(s) from %s",
            rejected,
            name if name is not None else "sample",
        )
    return [float(v) for v in numeric[keep]]


def load_worksheet(filepath):
    """
    Load a worksheet exported as CSV without a header row.

    Args:
        filepath (str): Path to the CSV file.

    Returns:
        pd.DataFrame: Raw cell values, one DataFrame row per sheet row.
    """
    return pd.read_csv(filepath, header=None, dtype=object, skip_blank_lines=False)
