import math

import numpy as np
import pytest

from datagen.errors import ValidationError
from datagen.generation import (
    Distribution,
    DistributionSpec,
    generate,
    scripted_source,
    uniform_source,
)
from datagen.stats.rounding import round_half_away


def _counting(source):
    calls = []

    def draw():
        calls.append(1)
        return source()

    return draw, calls


def _forbidden():
    raise AssertionError("source must not be drawn from")


def test_sequence_is_arithmetic_progression():
    spec = DistributionSpec.sequence(start=10, increment=5, count=4, decimals=0)
    assert generate(spec) == [10, 15, 20, 25]


def test_sequence_never_draws():
    spec = DistributionSpec.sequence(1.5, -0.5, count=3, decimals=1)
    assert generate(spec, _forbidden) == [1.5, 1.0, 0.5]


def test_degenerate_uniform_range():
    spec = DistributionSpec.uniform(minimum=0, maximum=0, count=3, decimals=2)
    assert generate(spec, scripted_source([0.3, 0.7, 0.9])) == [0, 0, 0]
    assert generate(spec, uniform_source(1)) == [0, 0, 0]


def test_uniform_scales_each_draw():
    spec = DistributionSpec.uniform(10, 20, count=3, decimals=1)
    assert generate(spec, scripted_source([0.0, 0.5, 0.999])) == [10.0, 15.0, 20.0]


def test_normal_box_muller_from_known_draws():
    # u1 = exp(-0.5) makes sqrt(-2 ln u1) == 1; u2 picks cos(0) or cos(pi).
    u1 = math.exp(-0.5)
    spec = DistributionSpec.normal(mean=50, std_dev=10, count=2, decimals=2)
    assert generate(spec, scripted_source([u1, 0.0, u1, 0.5])) == [60.0, 40.0]


def test_normal_uses_one_pair_of_draws_per_value():
    draw, calls = _counting(uniform_source(3))
    generate(DistributionSpec.normal(0, 1, count=7, decimals=3), draw)
    assert len(calls) == 14


def test_normal_redraws_zero_u1():
    draw, calls = _counting(scripted_source([0.0, math.exp(-0.5), 0.0]))
    values = generate(DistributionSpec.normal(0, 1, count=1, decimals=4), draw)
    assert values == [1.0]
    assert len(calls) == 3


def test_seeded_sources_are_reproducible():
    spec = DistributionSpec.normal(100, 15, count=25, decimals=2)
    assert generate(spec, uniform_source(42)) == generate(spec, uniform_source(42))
    assert generate(spec, uniform_source(42)) != generate(spec, uniform_source(43))


def test_normal_sample_moments():
    values = np.array(generate(DistributionSpec.normal(0, 1, 4000, 6), uniform_source(1)))
    assert abs(values.mean()) < 0.1
    assert 0.9 < values.std(ddof=1) < 1.1


def test_values_are_rounded_to_requested_decimals():
    values = generate(DistributionSpec.uniform(0, 1, count=50, decimals=2), uniform_source(5))
    assert all(round(v, 2) == v for v in values)
    assert all(0.0 <= v <= 1.0 for v in values)


def test_rounding_moves_halves_away_from_zero():
    assert round_half_away(2.5, 0) == 3.0
    assert round_half_away(-2.5, 0) == -3.0
    assert round_half_away(0.125, 2) == 0.13
    assert round_half_away(-0.125, 2) == -0.13
    assert generate(DistributionSpec.sequence(-2.5, 1, count=2, decimals=0)) == [-3.0, -2.0]
    assert round_half_away(0.49999999999999994, 0) == 0.0
    assert round_half_away(-0.49999999999999994, 0) == 0.0
    assert round_half_away(4503599627370497.0, 0) == 4503599627370497.0
    assert generate(DistributionSpec.sequence(4503599627370497, 2, count=2, decimals=0)) == [
        4503599627370497,
        4503599627370499,
    ]


@pytest.mark.parametrize(
    "spec, message",
    [
        (DistributionSpec.normal(0, 1, count=0), "count"),
        (DistributionSpec.normal(0, 1, count=-3), "count"),
        (DistributionSpec.uniform(0, float("inf"), count=3), "maximum"),
        (DistributionSpec.normal(float("nan"), 1, count=3), "mean"),
        (DistributionSpec.sequence(0, 1, count=3, decimals=-1), "decimals"),
        (DistributionSpec.sequence(0, 1, count=2.5), "count"),
        (DistributionSpec("triangular", 0, 1, 3), "Unknown distribution"),
    ],
)
def test_invalid_specs_fail_before_drawing(spec, message):
    with pytest.raises(ValidationError, match=message):
        generate(spec, _forbidden)


def test_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        generate(DistributionSpec.uniform(0, 1, count=0))


def test_from_form_parses_string_fields():
    spec = DistributionSpec.from_form(
        {
            "distType": "Sequence",
            "startVal": "10",
            "increment": "5",
            "rowCount": "4",
            "decimals": "0",
            "mean": "ignored",
        }
    )
    assert spec == DistributionSpec.sequence(10.0, 5.0, 4, 0)
    assert spec.kind is Distribution.SEQUENCE
    assert spec.parameters == {"start": 10.0, "increment": 5.0}


@pytest.mark.parametrize(
    "fields, message",
    [
        ({"distType": "gamma"}, "Unknown distribution"),
        (
            {"distType": "normal", "mean": "abc", "stdDev": "1", "rowCount": "3", "decimals": "2"},
            "not a number",
        ),
        (
            {"distType": "uniform", "minVal": "0", "maxVal": "1", "rowCount": "2.5", "decimals": "2"},
            "whole number",
        ),
        ({"distType": "uniform", "minVal": "0", "rowCount": "3", "decimals": "2"}, "maxVal"),
        (
            {"distType": "normal", "mean": "0", "stdDev": "1", "rowCount": "0", "decimals": "2"},
            "count",
        ),
    ],
)
def test_from_form_rejects_bad_fields(fields, message):
    with pytest.raises(ValidationError, match=message):
        DistributionSpec.from_form(fields)


def test_scripted_source_reports_exhaustion():
    source = scripted_source([0.5])
    assert source() == 0.5
    with pytest.raises(RuntimeError, match="exhausted"):
        source()


def test_excessive_decimals_are_rejected():
    with pytest.raises(ValidationError, match="decimals"):
        generate(DistributionSpec.sequence(0, 1, count=1, decimals=400))


@pytest.mark.parametrize(
    "spec",
    [DistributionSpec.normal(0, 1, count=2), DistributionSpec.uniform(0, 1, count=2)],
)
def test_random_distributions_require_a_source(spec):
    with pytest.raises(ValidationError, match="needs a uniform source"):
        generate(spec)


def test_exhausted_script_is_not_a_validation_error():
    spec = DistributionSpec.uniform(0, 1, count=2)
    with pytest.raises(RuntimeError) as info:
        generate(spec, scripted_source([0.25]))
    assert not isinstance(info.value, ValidationError)
