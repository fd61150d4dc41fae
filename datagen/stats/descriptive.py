"""Descriptive statistics for a single numeric sample."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

import numpy as np

from ..results import DescriptiveStats, Missing, Mode, ModeKind, defined
from .rounding import round_half_away

# Values are compared at this precision when looking for the mode so that
# floating noise (0.1 + 0.2 vs 0.3) does not split a group.
MODE_DECIMALS = 3
MODE_MAX_VALUES = 3


def _empty_stats() -> DescriptiveStats:
    empty = Missing.EMPTY
    return DescriptiveStats(
        n=0,
        mean=empty,
        median=empty,
        mode=Mode(ModeKind.EMPTY),
        std_dev=empty,
        variance=empty,
        minimum=empty,
        maximum=empty,
        range=empty,
        total=empty,
        sum_of_squares=empty,
    )


def find_mode(values: Sequence[float]) -> Mode:
    """Return the mode of ``values`` after rounding to three decimals.

    Args:
        values (Sequence[float]): Sample values in any order.

    Returns:
        Mode: ``NO_REPEATS`` if every rounded value is unique, ``MULTIPLE``
        if more than three values share the top frequency, otherwise the
        tied values in ascending order.
    """
    if len(values) == 0:
        return Mode(ModeKind.EMPTY)

    counts = Counter(round_half_away(v, MODE_DECIMALS) for v in values)
    max_freq = max(counts.values())
    if max_freq == 1:
        return Mode(ModeKind.NO_REPEATS)

    tied = sorted(v for v, c in counts.items() if c == max_freq)
    if len(tied) > MODE_MAX_VALUES:
        return Mode(ModeKind.MULTIPLE)
    return Mode(ModeKind.VALUES, tuple(tied))


def describe(sample: Sequence[float]) -> DescriptiveStats:
    """Summarize one sample.

    Args:
        sample (Sequence[float]): Finite numeric observations, already
            cleaned of blank and non-numeric entries. Not modified.

    Returns:
        DescriptiveStats: Summary values. An empty sample yields
        ``Missing.EMPTY`` in every field; a single observation yields
        ``Missing.EMPTY`` for ``variance`` and ``std_dev``.
    """
    arr = np.array(sample, dtype=float)
    n = int(arr.size)
    if n == 0:
        return _empty_stats()

    total = float(np.sum(arr))
    mean = total / n

    ordered = np.sort(arr)
    mid = n // 2
    if n % 2 == 0:
        median = (float(ordered[mid - 1]) + float(ordered[mid])) / 2
    else:
        median = float(ordered[mid])

    variance = std_dev = Missing.EMPTY
    if n > 1:
        variance = defined(float(np.sum((arr - mean) ** 2)) / (n - 1))
        if variance is not Missing.EMPTY:
            std_dev = defined(np.sqrt(variance))

    minimum = float(ordered[0])
    maximum = float(ordered[-1])

    return DescriptiveStats(
        n=n,
        mean=defined(mean),
        median=defined(median),
        mode=find_mode(arr.tolist()),
        std_dev=std_dev,
        variance=variance,
        minimum=minimum,
        maximum=maximum,
        range=defined(maximum - minimum),
        total=defined(total),
        sum_of_squares=defined(float(np.sum(arr**2))),
    )
