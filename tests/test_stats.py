import math

import numpy as np

from datagen.results import Missing, Mode, ModeKind
from datagen.stats import describe, find_mode


def test_empty_sample_is_empty_everywhere():
    stats = describe([])
    assert stats.n == 0
    for name in (
        "mean", "median", "std_dev", "variance", "minimum",
        "maximum", "range", "total", "sum_of_squares",
    ):
        assert getattr(stats, name) is Missing.EMPTY, name
    assert stats.mode.kind is ModeKind.EMPTY
    assert str(stats.mode) == "-"


def test_single_value_has_no_variance():
    stats = describe([5])
    assert stats.n == 1
    assert stats.mean == 5.0
    assert stats.median == 5.0
    assert stats.variance is Missing.EMPTY
    assert stats.std_dev is Missing.EMPTY
    assert stats.minimum == stats.maximum == 5.0
    assert stats.range == 0.0
    assert stats.sum_of_squares == 25.0
    assert stats.mode.kind is ModeKind.NO_REPEATS


def test_known_dataset_values():
    stats = describe([2, 4, 4, 4, 5, 5, 7, 9])
    assert stats.n == 8
    assert math.isclose(stats.mean, 5.0)
    assert math.isclose(stats.median, 4.5)
    assert math.isclose(stats.variance, 32.0 / 7.0)
    assert math.isclose(stats.std_dev, math.sqrt(32.0 / 7.0))
    assert stats.minimum == 2.0
    assert stats.maximum == 9.0
    assert stats.range == 7.0
    assert stats.total == 40.0
    # Raw sum of squares, not squared deviations
    assert stats.sum_of_squares == 232.0
    assert stats.mode == Mode(ModeKind.VALUES, (4.0,))


def test_odd_median_uses_central_value():
    assert describe([9, 1, 5]).median == 5.0


def test_sample_is_not_mutated():
    sample = [3.0, 1.0, 2.0]
    describe(sample)
    assert sample == [3.0, 1.0, 2.0]


def test_two_way_mode_tie_is_listed_ascending():
    mode = describe([2, 2, 1, 1, 3]).mode
    assert mode.kind is ModeKind.VALUES
    assert mode.values == (1.0, 2.0)
    assert str(mode) == "1, 2"


def test_no_repeats_reports_none():
    mode = describe([1, 2, 3]).mode
    assert mode.kind is ModeKind.NO_REPEATS
    assert str(mode) == "None"


def test_three_way_tie_is_still_listed():
    assert str(find_mode([3, 3, 1, 1, 2, 2])) == "1, 2, 3"


def test_more_than_three_ties_reports_multiple():
    mode = find_mode([1, 1, 2, 2, 3, 3, 4, 4, 5, 5])
    assert mode.kind is ModeKind.MULTIPLE
    assert str(mode) == "Multiple"


def test_mode_groups_values_equal_to_three_decimals():
    mode = find_mode([0.1 + 0.2, 0.3, 1.0])
    assert mode.values == (0.3,)
    assert str(mode) == "0.3"


def test_negative_mode_values_sort_numerically():
    assert str(find_mode([3, 3, -1, -1, 0])) == "-1, 3"


def test_central_tendency_lies_within_extremes():
    rng = np.random.default_rng(7)
    for size in (1, 2, 3, 10, 57):
        sample = rng.normal(20.0, 5.0, size).tolist()
        stats = describe(sample)
        tol = 1e-9
        assert stats.minimum <= stats.median <= stats.maximum
        assert stats.minimum - tol <= stats.mean <= stats.maximum + tol
        assert math.isclose(stats.total, stats.n * stats.mean, rel_tol=1e-12, abs_tol=1e-9)


def test_repeated_calls_are_identical():
    sample = (1.5, 2.25, 2.25, 9.0, -3.0)
    assert describe(sample) == describe(sample)
