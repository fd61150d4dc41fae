"""Provide two-variable statistics for the paired-sample panel.

This module supports:
- Pearson correlation and its square,
- ordinary least-squares regression of the second sample on the first,
- an independent-samples and a paired-samples t statistic, and
- two-tailed p-values for both t statistics when scipy is installed.

Samples of unequal length are paired by their leading prefix: both are cut
to the shorter length before any arithmetic.
"""

from __future__ import annotations

import importlib.util
import math
from typing import Sequence

import numpy as np

from ..results import BivariateStats, Missing, Stat, defined

HAVE_SCIPY = importlib.util.find_spec("scipy") is not None
if HAVE_SCIPY:
    from scipy.stats import t as student_t


def _ratio(numerator: float, denominator: float) -> Stat:
    if denominator == 0:
        return Missing.EMPTY
    return defined(numerator / denominator)


def two_tailed_p(t_stat: Stat, dof: int) -> Stat:
    """Return the two-tailed Student-t p-value for ``t_stat``.

    Args:
        t_stat (float | Missing): Test statistic. Sentinels pass through.
        dof (int): Degrees of freedom; must be positive.

    Returns:
        float | Missing: ``2 * (1 - cdf(|t|))``, or ``Missing.EMPTY`` when
        scipy is unavailable or ``dof`` is not positive.
    """
    if isinstance(t_stat, Missing):
        return t_stat
    if not HAVE_SCIPY or dof <= 0:
        return Missing.EMPTY
    return defined(2 * (1 - student_t.cdf(abs(t_stat), dof)))


def compare(x: Sequence[float], y: Sequence[float]) -> BivariateStats:
    """Compute correlation, regression and t statistics for two samples.

    Args:
        x (Sequence[float]): First variable; the regression predictor.
        y (Sequence[float]): Second variable; the regression response.

    Returns:
        BivariateStats: Statistics over the first ``min(len(x), len(y))``
        pairs. Any statistic whose denominator is zero is
        ``Missing.EMPTY``. ``t_paired`` is ``Missing.NOT_APPLICABLE`` unless
        ``x`` and ``y`` had the same original length.

    Note:
        ``t_independent`` divides both variances by the paired length ``n``
        rather than by each group's own size. Results therefore match the
        add-in this engine replaces, not a textbook Welch test, whenever the
        inputs were truncated.
    """
    x_arr = np.array(x, dtype=float)
    y_arr = np.array(y, dtype=float)
    same_length = x_arr.size == y_arr.size
    n = int(min(x_arr.size, y_arr.size))
    x_arr = x_arr[:n]
    y_arr = y_arr[:n]

    empty = Missing.EMPTY
    paired_default = empty if same_length else Missing.NOT_APPLICABLE
    if n == 0:
        return BivariateStats(
            n=0,
            correlation=empty,
            r_squared=empty,
            slope=empty,
            intercept=empty,
            t_independent=empty,
            t_paired=paired_default,
            p_independent=empty,
            p_paired=paired_default,
        )

    x_mean = float(np.sum(x_arr)) / n
    y_mean = float(np.sum(y_arr)) / n
    dx = x_arr - x_mean
    dy = y_arr - y_mean
    sum_xy = float(np.sum(dx * dy))
    sum_x2 = float(np.sum(dx * dx))
    sum_y2 = float(np.sum(dy * dy))

    if sum_x2 == 0 or sum_y2 == 0:
        correlation: Stat = empty
    else:
        correlation = _ratio(sum_xy, math.sqrt(sum_x2) * math.sqrt(sum_y2))
    r_squared = empty if correlation is empty else defined(correlation**2)

    slope = _ratio(sum_xy, sum_x2)
    intercept = empty if slope is empty else defined(y_mean - slope * x_mean)

    t_independent: Stat = empty
    t_paired: Stat = paired_default
    if n > 1:
        x_var = sum_x2 / (n - 1)
        y_var = sum_y2 / (n - 1)
        pooled_se = math.sqrt(x_var / n + y_var / n)
        t_independent = _ratio(x_mean - y_mean, pooled_se)

        if same_length:
            diffs = x_arr - y_arr
            diff_mean = float(np.sum(diffs)) / n
            diff_var = float(np.sum((diffs - diff_mean) ** 2)) / (n - 1)
            t_paired = _ratio(diff_mean, math.sqrt(diff_var / n))

    return BivariateStats(
        n=n,
        correlation=correlation,
        r_squared=r_squared,
        slope=slope,
        intercept=intercept,
        t_independent=t_independent,
        t_paired=t_paired,
        p_independent=two_tailed_p(t_independent, n - 1),
        p_paired=two_tailed_p(t_paired, n - 1),
    )
