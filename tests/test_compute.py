import math

import numpy as np
import pytest
from hypothesis import given, strategies as st
from pytest import approx

from statlab import Statistics, compute

values_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=50)


def test_compute_empty() -> None:
    stats = compute([])

    assert stats == Statistics.empty()
    assert stats.count == 0
    assert stats.mean is None
    assert stats.median is None
    assert stats.mode == ()
    assert stats.min is None and stats.max is None and stats.range is None
    assert stats.variance is None and stats.standard_deviation is None
    assert stats.q1 is None and stats.q3 is None and stats.iqr is None
    assert stats.outliers == ()


def test_compute_single_value() -> None:
    stats = compute([5])

    assert stats.count == 1
    assert stats.mean == 5
    assert stats.median == 5
    assert stats.variance == 0
    assert stats.standard_deviation == 0
    assert stats.range == 0
    assert stats.mode == ()
    assert stats.q1 is None


def test_compute_basic() -> None:
    data = [4.0, 8.0, 15.0, 16.0, 23.0, 42.0]
    stats = compute(data)

    np.testing.assert_allclose(stats.mean, np.mean(data))
    np.testing.assert_allclose(stats.variance, np.var(data, ddof=0))
    np.testing.assert_allclose(stats.standard_deviation, np.std(data, ddof=0))
    assert stats.sum == 108
    assert stats.min == 4 and stats.max == 42 and stats.range == 38


def test_input_is_not_mutated() -> None:
    data = [3, 1, 2]
    compute(data)
    assert data == [3, 1, 2]


def test_mode_requires_repeats() -> None:
    assert compute([1, 2, 3]).mode == ()
    assert compute([1, 1, 2, 3]).mode == (1,)
    assert compute([3, 3, 1, 1, 2]).mode == (1, 3)


def test_median_parity() -> None:
    assert compute([1, 2, 3, 4]).median == 2.5
    assert compute([1, 2, 3]).median == 2
    assert compute([9, 1, 5]).median == 5


def test_quartiles_need_four_values() -> None:
    stats = compute([1, 2, 3])
    assert stats.q1 is None
    assert stats.q3 is None
    assert stats.iqr is None
    assert stats.outliers == ()


def test_quartiles_use_floor_index() -> None:
    stats = compute([8, 7, 6, 5, 4, 3, 2, 1])

    # sorted[floor(8 * 0.25)] and sorted[floor(8 * 0.75)]
    assert stats.q1 == 3
    assert stats.q3 == 7
    assert stats.iqr == 4


def test_outlier_fences_are_exclusive() -> None:
    stats = compute([2, 12, 2, 6, -4, 6])
    assert (stats.q1, stats.q3, stats.iqr) == (2, 6, 4)
    assert (stats.lower_fence, stats.upper_fence) == (-4, 12)
    assert stats.outliers == ()

    stats = compute([2, 13, 2, 6, -5, 6])
    assert (stats.q1, stats.q3) == (2, 6)
    assert stats.outliers == (13, -5)


def test_fences_undefined_without_quartiles() -> None:
    stats = compute([1, 2])
    assert stats.lower_fence is None
    assert stats.upper_fence is None


def test_negative_values() -> None:
    stats = compute([-10, -20, -30, -40])
    assert stats.mean == -25
    assert stats.median == -25
    assert stats.range == 30
    assert stats.q1 == -30


def test_as_dict_lists_every_field() -> None:
    d = compute([1, 2, 3, 4]).as_dict()
    assert d["count"] == 4
    assert d["standard_deviation"] == approx(math.sqrt(1.25))
    assert set(d) >= {"mean", "median", "mode", "iqr", "outliers"}


@given(values_lists)
def test_count_and_mean(data) -> None:
    stats = compute(data)
    assert stats.count == len(data)
    if data:
        assert stats.mean == approx(sum(data) / len(data))
        assert stats.standard_deviation == approx(math.sqrt(stats.variance))
    else:
        assert stats.mean is None


@given(values_lists)
def test_compute_is_idempotent(data) -> None:
    assert compute(data) == compute(data)


@given(values_lists, st.randoms(use_true_random=False))
def test_permutation_invariance(data, random) -> None:
    shuffled = list(data)
    random.shuffle(shuffled)

    a = compute(data).as_dict()
    b = compute(shuffled).as_dict()
    assert sorted(a.pop("outliers")) == sorted(b.pop("outliers"))
    assert a == b


@pytest.mark.parametrize("data", [[0, 0, 0, 0], [7] * 9])
def test_constant_data(data) -> None:
    stats = compute(data)
    assert stats.variance == 0
    assert stats.iqr == 0
    assert stats.outliers == ()
    assert stats.mode == (data[0],)


def test_integers_beyond_float_range() -> None:
    assert compute([10**400]).max == math.inf
    assert compute([-(10**400)]).min == -math.inf
