import math

import numpy as np
import pytest

from tailbounds import BOUNDS, Knowledge, binomial_tail, get_bound, active_bounds
from tailbounds.bounds import (
    markov_bound,
    chebyshev_bound,
    chernoff_bound,
    talagrand_bound,
)


def test_closed_forms_at_n100_t60():
    assert markov_bound(100, 60) == pytest.approx(50 / 60)
    assert chebyshev_bound(100, 60) == pytest.approx(0.25)
    assert chernoff_bound(100, 60) == pytest.approx(math.exp(-2))
    # 4 * exp(-1) ~ 1.47, clamped
    assert talagrand_bound(100, 60) == 1.0


def test_bounds_lie_in_unit_interval():
    for n in (1, 2, 10, 55, 100, 200):
        for t in np.linspace(-5, n + 5, 97):
            for b in BOUNDS:
                v = b(n, t)
                assert 0.0 <= v <= 1.0, (b.id, n, t, v)


def test_threshold_at_or_below_mean_is_vacuous():
    for n in (0, 1, 10, 100, 200):
        for t in (n / 2, n / 2 - 0.5, 0.0, -3.0):
            for b in BOUNDS:
                assert b(n, t) == 1.0, (b.id, n, t)


def test_bounds_nonincreasing_in_threshold():
    for n in (1, 10, 100, 200):
        ts = np.linspace(0, n, 201)
        for b in BOUNDS:
            values = [b(n, t) for t in ts]
            for prev, cur in zip(values, values[1:]):
                assert cur <= prev + 1e-15, (b.id, n)


def test_bounds_dominate_exact_binomial_tail():
    for n in range(1, 201, 13):
        sigma = math.sqrt(n) / 2
        for k in np.arange(0.5, 4.75, 0.25):
            t = n / 2 + k * sigma
            exact = binomial_tail(n, t)
            for b in BOUNDS:
                assert b(n, t) >= exact, (b.id, n, k)


def test_talagrand_looser_than_chernoff_for_sums():
    for t in (55, 60, 70, 80):
        assert talagrand_bound(100, t) >= chernoff_bound(100, t)


def test_requirements_and_activation():
    assert get_bound("markov").requires == {"mean"}
    assert get_bound("chebyshev").requires == {"mean", "variance"}
    assert get_bound("chernoff").requires == {"mean", "independence"}
    assert get_bound("talagrand").requires == {"mean", "independence", "lipschitz"}

    everything = Knowledge()
    assert [b.id for b in active_bounds(everything)] == [
        "markov",
        "chebyshev",
        "chernoff",
        "talagrand",
    ]
    no_indep = Knowledge(independence=False)
    assert [b.id for b in active_bounds(no_indep)] == ["markov", "chebyshev"]
    assert active_bounds(Knowledge(mean=False)) == ()


def test_unknown_bound_raises():
    with pytest.raises(ValueError):
        get_bound("bernstein")


def test_formula_text_and_insight():
    markov = get_bound("markov")
    assert markov.formula(100, 60) == "E[S]/t = 50/60"
    assert get_bound("chebyshev").formula(100, 60) == "σ²/δ² = 25/100"
    assert get_bound("chernoff").formula(100, 60) == "exp(−2·100/100)"
    assert get_bound("talagrand").formula(100, 60) == "4·exp(−100/100)"
    assert markov.insight(math.inf).startswith("Essentially useless")
    assert markov.insight(10).startswith("Very loose")
    assert markov.insight(1.5).startswith("Surprisingly decent")
