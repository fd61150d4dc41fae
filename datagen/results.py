"""Value objects returned by the statistics calculators.

Every numeric statistic is either a plain ``float`` or a :class:`Missing`
member. ``Missing.EMPTY`` stands for an undefined result (empty sample,
division by zero, non-finite arithmetic) and ``Missing.NOT_APPLICABLE``
for a statistic the inputs do not support at all, such as a paired t test
on samples of different lengths. The display placeholder is applied only
when a result is formatted.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Tuple, Union


class Missing(enum.Enum):
    """Sentinel for a statistic that has no numeric value."""

    EMPTY = "empty"
    NOT_APPLICABLE = "not applicable"

    def __repr__(self) -> str:
        return f"Missing.{self.name}"


Stat = Union[float, Missing]


def defined(value: float) -> Stat:
    """Return ``value`` as a float, or ``Missing.EMPTY`` if it is not finite."""
    value = float(value)
    return value if math.isfinite(value) else Missing.EMPTY


class ModeKind(enum.Enum):
    VALUES = "values"
    NO_REPEATS = "None"
    MULTIPLE = "Multiple"
    EMPTY = "-"


@dataclass(frozen=True)
class Mode:
    """Most frequent value(s) of a sample.

    Attributes:
        kind: ``VALUES`` when one to three values share the highest
            frequency, ``NO_REPEATS`` when no value occurs twice,
            ``MULTIPLE`` when more than three values tie and ``EMPTY`` for
            an empty sample.
        values: Tied values in ascending order; empty unless ``kind`` is
            ``VALUES``.
    """

    kind: ModeKind
    values: Tuple[float, ...] = ()

    def __str__(self) -> str:
        if self.kind is ModeKind.VALUES:
            return ", ".join(_plain_number(v) for v in self.values)
        return self.kind.value


def _plain_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class DescriptiveStats:
    """Univariate summary of one sample.

    ``variance`` and ``std_dev`` use the sample (``n - 1``) divisor.
    ``sum_of_squares`` is the raw sum of squared values, not of deviations.
    """

    n: int
    mean: Stat
    median: Stat
    mode: Mode
    std_dev: Stat
    variance: Stat
    minimum: Stat
    maximum: Stat
    range: Stat
    total: Stat
    sum_of_squares: Stat


@dataclass(frozen=True)
class BivariateStats:
    """Paired-sample summary of two variables.

    ``n`` is the effective length after leading-prefix pairing. ``slope``
    and ``intercept`` regress the second sample on the first.
    """

    n: int
    correlation: Stat
    r_squared: Stat
    slope: Stat
    intercept: Stat
    t_independent: Stat
    t_paired: Stat
    p_independent: Stat = Missing.EMPTY
    p_paired: Stat = Missing.EMPTY
