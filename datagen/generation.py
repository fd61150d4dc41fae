"""
Synthetic data generation from Normal, Uniform and Sequence distributions.
"""

# Every random draw comes from an injected zero-argument callable returning
# a float in [0, 1). Production code builds one from a numpy Generator;
# tests pass a seeded generator or a scripted list of draws.

from __future__ import annotations

import enum
import logging
import math
import numbers
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Mapping, Optional

import numpy as np

from .errors import ValidationError
from .stats.rounding import round_half_away

logger = logging.getLogger(__name__)

UniformSource = Callable[[], float]

# Redraws of a zero u1 before falling back to the smallest positive float.
_MAX_ZERO_REDRAWS = 64

# A double carries about 15 significant decimal digits.
MAX_DECIMALS = 15


class Distribution(str, enum.Enum):
    NORMAL = "normal"
    UNIFORM = "uniform"
    SEQUENCE = "sequence"


# Parameter names per distribution, in (first, second) order.
PARAMETER_NAMES = {
    Distribution.NORMAL: ("mean", "std_dev"),
    Distribution.UNIFORM: ("minimum", "maximum"),
    Distribution.SEQUENCE: ("start", "increment"),
}

# Generation form field names for each parameter.
_FORM_FIELDS = {
    Distribution.NORMAL: ("mean", "stdDev"),
    Distribution.UNIFORM: ("minVal", "maxVal"),
    Distribution.SEQUENCE: ("startVal", "increment"),
}


@dataclass(frozen=True)
class DistributionSpec:
    """Complete description of one generation request.

    Attributes:
        kind: Which distribution to draw from.
        first: ``mean``, ``minimum`` or ``start`` depending on ``kind``.
        second: ``std_dev``, ``maximum`` or ``increment``.
        count: Number of values to produce (at least 1).
        decimals: Decimal places each value is rounded to.
    """

    kind: Distribution
    first: float
    second: float
    count: int
    decimals: int = 2

    @classmethod
    def normal(cls, mean: float, std_dev: float, count: int, decimals: int = 2):
        return cls(Distribution.NORMAL, mean, std_dev, count, decimals)

    @classmethod
    def uniform(cls, minimum: float, maximum: float, count: int, decimals: int = 2):
        return cls(Distribution.UNIFORM, minimum, maximum, count, decimals)

    @classmethod
    def sequence(cls, start: float, increment: float, count: int, decimals: int = 2):
        return cls(Distribution.SEQUENCE, start, increment, count, decimals)

    @classmethod
    def from_form(cls, fields: Mapping[str, str]) -> "DistributionSpec":
        """Build a spec from the string fields of the generation form.

        Args:
            fields (Mapping[str, str]): Form values keyed by ``distType``,
                ``decimals``, ``rowCount`` and the parameter fields of the
                chosen distribution (``mean``/``stdDev``,
                ``minVal``/``maxVal`` or ``startVal``/``increment``).

        Returns:
            DistributionSpec: Validated spec.

        Raises:
            ValidationError: If a field is missing, unparseable or the
                resulting spec is invalid.
        """
        name = str(fields.get("distType", "")).strip().lower()
        try:
            kind = Distribution(name)
        except ValueError:
            raise ValidationError(f"Unknown distribution type {name!r}.") from None

        first_field, second_field = _FORM_FIELDS[kind]
        spec = cls(
            kind=kind,
            first=_parse_float(fields, first_field),
            second=_parse_float(fields, second_field),
            count=_parse_int(fields, "rowCount"),
            decimals=_parse_int(fields, "decimals"),
        )
        spec.validate()
        return spec

    @property
    def parameters(self) -> dict:
        names = PARAMETER_NAMES.get(self.kind, ("first", "second"))
        return {names[0]: self.first, names[1]: self.second}

    def validate(self) -> None:
        """Raise :class:`ValidationError` if the spec cannot be generated."""
        if not isinstance(self.kind, Distribution):
            raise ValidationError(f"Unknown distribution type {self.kind!r}.")
        for name, value in self.parameters.items():
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValidationError(f"{name} must be a number, got {value!r}.")
            if not math.isfinite(value):
                raise ValidationError(f"{name} must be finite, got {value!r}.")
        if isinstance(self.count, bool) or not isinstance(self.count, (int, np.integer)):
            raise ValidationError(f"count must be an integer, got {self.count!r}.")
        if self.count < 1:
            raise ValidationError(f"count must be at least 1, got {self.count}.")
        if isinstance(self.decimals, bool) or not isinstance(
            self.decimals, (int, np.integer)
        ):
            raise ValidationError(
                f"decimals must be an integer, got {self.decimals!r}."
            )
        if not 0 <= self.decimals <= MAX_DECIMALS:
            raise ValidationError(
                f"decimals must be between 0 and {MAX_DECIMALS}, got {self.decimals}."
            )


def _parse_float(fields: Mapping[str, str], key: str) -> float:
    raw = fields.get(key)
    if raw is None or str(raw).strip() == "":
        raise ValidationError(f"Missing value for {key!r}.")
    try:
        return float(str(raw).strip())
    except ValueError:
        raise ValidationError(f"{key!r} is not a number: {raw!r}.") from None


def _parse_int(fields: Mapping[str, str], key: str) -> int:
    value = _parse_float(fields, key)
    if not value.is_integer():
        raise ValidationError(f"{key!r} must be a whole number, got {value!r}.")
    return int(value)


def uniform_source(seed: Optional[int] = None) -> UniformSource:
    """Return a uniform [0, 1) source backed by ``numpy.random.default_rng``."""
    rng = np.random.default_rng(seed)
    return lambda: float(rng.random())


def scripted_source(draws: Iterable[float]) -> UniformSource:
    """Return a source that replays ``draws`` in order.

    Raises:
        RuntimeError: When called after the draws are exhausted.
    """
    it: Iterator[float] = iter(draws)

    def draw() -> float:
        try:
            return float(next(it))
        except StopIteration:
            raise RuntimeError("Scripted uniform source is exhausted.") from None

    return draw


def _nonzero_draw(source: UniformSource) -> float:
    for _ in range(_MAX_ZERO_REDRAWS):
        u = source()
        if u > 0.0:
            return u
    return np.finfo(float).tiny


def normal_value(mean: float, std_dev: float, source: UniformSource) -> float:
    """Draw one normal deviate with the Box-Muller transform.

    Each call consumes exactly one pair of uniforms (plus any redraws of a
    zero ``u1``); the second deviate of the pair is discarded.
    """
    u1 = _nonzero_draw(source)
    u2 = source()
    z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
    return mean + z * std_dev


def uniform_value(minimum: float, maximum: float, source: UniformSource) -> float:
    return minimum + source() * (maximum - minimum)


def generate(spec: DistributionSpec, source: Optional[UniformSource] = None) -> List[float]:
    """Generate ``spec.count`` values, each rounded to ``spec.decimals``.

    Args:
        spec (DistributionSpec): Distribution, parameters, count and
            precision.
        source (UniformSource, optional): Uniform [0, 1) draws. Required
            for Normal and Uniform; build one with :func:`uniform_source`.
            Sequence never draws and accepts ``None``.

    Returns:
        list[float]: Generated values in output order.

    Raises:
        ValidationError: If ``spec`` is invalid or a random distribution
            has no ``source``. Nothing is drawn in either case.
    """
    spec.validate()
    if source is None and spec.kind is not Distribution.SEQUENCE:
        raise ValidationError(
            f"{spec.kind.value} generation needs a uniform source."
        )

    values: List[float] = []
    for i in range(spec.count):
        if spec.kind is Distribution.NORMAL:
            value = normal_value(spec.first, spec.second, source)
        elif spec.kind is Distribution.UNIFORM:
            value = uniform_value(spec.first, spec.second, source)
        else:
            value = spec.first + i * spec.second
        if not math.isfinite(value):
            raise ValidationError(
                f"{spec.kind.value} parameters overflow: {spec.parameters}"
            )
        values.append(round_half_away(value, spec.decimals))

    logger.debug(
        "Generated %d %s values with %s", len(values), spec.kind.value, spec.parameters
    )
    return values
