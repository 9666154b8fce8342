import numpy as np
import pytest

from tailbounds import sample, empirical_tail, tail_count, binomial_tail, histogram, TRIALS


def test_sample_size_and_order():
    sums = sample(100, seed=0)
    assert sums.shape == (TRIALS,)
    assert np.all(np.diff(sums) >= 0)
    assert sums.min() >= 0 and sums.max() <= 100


def test_sample_is_read_only():
    sums = sample(20, 50, seed=1)
    with pytest.raises(ValueError):
        sums[0] = 3


def test_sample_statistics():
    sums = sample(100, seed=3)
    assert abs(sums.mean() - 50) < 0.3
    assert abs(sums.var() - 25) < 1.5


def test_degenerate_sizes():
    assert np.all(sample(0, 10, seed=0) == 0)
    assert sample(10, 0, seed=0).shape == (0,)
    assert empirical_tail(sample(10, 0, seed=0), 5) == 0.0
    assert empirical_tail(sample(0, 10, seed=0), 0) == 1.0


def test_negative_arguments_raise():
    with pytest.raises(ValueError):
        sample(-1, 10)
    with pytest.raises(ValueError):
        sample(10, -1)


def test_reroll_changes_values_not_shape():
    a = sample(100, seed=1)
    b = sample(100, seed=2)
    assert a.shape == b.shape
    assert not np.array_equal(a, b)
    assert abs(a.mean() - b.mean()) < 0.5


def test_tail_is_inclusive():
    sums = np.array([1, 2, 2, 3, 5])
    assert tail_count(sums, 2) == 4
    assert tail_count(sums, 2.5) == 2
    assert tail_count(sums, 6) == 0
    assert empirical_tail(sums, 2) == pytest.approx(0.8)
    assert empirical_tail(sums, 0) == 1.0


def test_binomial_tail_exact():
    assert binomial_tail(3, 2) == pytest.approx(0.5)
    assert binomial_tail(10, 0) == 1.0
    assert binomial_tail(10, -3) == 1.0
    assert binomial_tail(10, 11) == 0.0
    assert binomial_tail(10, 10) == pytest.approx(1 / 1024)
    assert binomial_tail(100, 60) == pytest.approx(0.028444, abs=1e-5)


def test_empirical_tail_converges_to_binomial():
    n, t = 100, 60
    sums = sample(n, 50000, seed=7)
    assert abs(empirical_tail(sums, t) - binomial_tail(n, t)) < 0.006


def test_histogram_window():
    sums = sample(100, seed=0)
    hist = histogram(sums, 100)
    assert (hist.bin_min, hist.bin_max) == (27, 73)
    assert hist.counts.shape == (47,)
    assert hist.counts.sum() <= TRIALS
    assert hist.max_count == hist.counts.max()
    assert hist.values[0] == 27 and hist.values[-1] == 73
    assert hist.in_tail(60).sum() == 14


def test_histogram_clipped_to_range():
    hist = histogram(sample(10, 500, seed=0), 10)
    assert (hist.bin_min, hist.bin_max) == (0, 10)
    assert hist.counts.sum() == 500


def test_tail_of_unsorted_sample():
    sums = np.array([70, 10, 65])
    assert tail_count(sums, 60) == 2
    assert empirical_tail(sums, 60) == pytest.approx(2 / 3)
    assert empirical_tail([5, 1, 3, 1], 3) == pytest.approx(0.5)
