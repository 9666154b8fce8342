"""
Tail bounds for S = sum of N fair coins.

Each bound turns a set of known facts about S into an upper limit on
P(S >= t). With mu = N/2, sigma^2 = N/4 and delta = t - mu:

    Markov       {mean}                           mu / t
    Chebyshev    {mean, variance}                 sigma^2 / delta^2
    Chernoff     {mean, independence}             exp(-2 delta^2 / N)
    Talagrand    {mean, independence, lipschitz}  4 exp(-delta^2 / N)

All values are clamped to 1, and every bound is vacuous (exactly 1) when
the threshold is at or below the mean.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Callable, FrozenSet, Tuple

from .config import Knowledge


def markov_bound(n: int, t: float) -> float:
    mu = n / 2
    if t <= mu or t <= 0:
        return 1.0
    return min(1.0, mu / t)


def chebyshev_bound(n: int, t: float) -> float:
    delta = t - n / 2
    if delta <= 0:
        return 1.0
    return min(1.0, (n / 4) / (delta * delta))


def chernoff_bound(n: int, t: float) -> float:
    """Hoeffding's form for independent summands bounded in [0, 1]."""
    delta = t - n / 2
    if delta <= 0:
        return 1.0
    if n == 0:
        return 0.0
    return min(1.0, math.exp(-2 * delta * delta / n))


def talagrand_bound(n: int, t: float) -> float:
    """
    Convex-distance inequality for a 1-Lipschitz function on a product
    space: 4 exp(-delta^2 / (4 Var)) = 4 exp(-delta^2 / N). Looser than
    Chernoff for plain sums.
    """
    delta = t - n / 2
    if delta <= 0:
        return 1.0
    if n == 0:
        return 0.0
    return min(1.0, 4 * math.exp(-delta * delta / n))


@dataclass(frozen=True)
class Insight:
    """Three-way commentary keyed on the looseness ratio."""

    very_loose_above: float
    loose_above: float
    very_loose: str
    loose: str
    tight: str

    def __call__(self, ratio: float) -> str:
        if ratio > self.very_loose_above:
            return self.very_loose
        if ratio > self.loose_above:
            return self.loose
        return self.tight


@dataclass(frozen=True)
class BoundDef:
    id: str
    name: str
    year: int
    requires: FrozenSet[str]
    evaluate: Callable[[int, float], float]
    formula: Callable[[int, float], str]
    formula_short: str
    assumptions: str
    explanation: str
    insight: Insight

    def is_active(self, knowledge: Knowledge) -> bool:
        return all(knowledge.has(fact) for fact in self.requires)

    def __call__(self, n: int, t: float) -> float:
        return self.evaluate(n, t)


def _markov_formula(n, t):
    return f"E[S]/t = {n / 2:.0f}/{t:.0f}"


def _chebyshev_formula(n, t):
    delta = t - n / 2
    return f"σ²/δ² = {n / 4:.0f}/{delta * delta:.0f}"


def _chernoff_formula(n, t):
    delta = t - n / 2
    return f"exp(−2·{delta * delta:.0f}/{n})"


def _talagrand_formula(n, t):
    delta = t - n / 2
    return f"4·exp(−{delta * delta:.0f}/{n})"


MARKOV = BoundDef(
    id="markov",
    name="Markov",
    year=1889,
    requires=frozenset({"mean"}),
    evaluate=markov_bound,
    formula=_markov_formula,
    formula_short="P(S ≥ t) ≤ E[S] / t",
    assumptions="Non-negative random variable, known mean",
    explanation=(
        "Knows only the expected value. Cannot distinguish a concentrated "
        "distribution from a spread-out one. Gives polynomial 1/t decay."
    ),
    insight=Insight(
        50,
        5,
        "Essentially useless: might as well say 'it could happen.'",
        "Very loose. It's a valid guarantee, but not a useful one.",
        "Surprisingly decent here, but only because the threshold is close to the mean.",
    ),
)

CHEBYSHEV = BoundDef(
    id="chebyshev",
    name="Chebyshev",
    year=1867,
    requires=frozenset({"mean", "variance"}),
    evaluate=chebyshev_bound,
    formula=_chebyshev_formula,
    formula_short="P(|S−μ| ≥ δ) ≤ σ² / δ²",
    assumptions="Known mean and variance",
    explanation=(
        "Adding variance knowledge gives quadratic decay. Still works for ANY "
        "distribution with finite variance, even heavy-tailed ones where "
        "Chernoff fails."
    ),
    insight=Insight(
        20,
        3,
        "Still quite loose: variance alone doesn't capture the full shape.",
        "Respectable. This is often 'good enough' for a quick argument.",
        "Surprisingly tight! The distribution isn't far from Chebyshev's worst case.",
    ),
)

CHERNOFF = BoundDef(
    id="chernoff",
    name="Chernoff–Hoeffding",
    year=1952,
    requires=frozenset({"mean", "independence"}),
    evaluate=chernoff_bound,
    formula=_chernoff_formula,
    formula_short="P(S−μ ≥ δ) ≤ exp(−2δ²/N)",
    assumptions="Independent summands, each bounded in [0,1]",
    explanation=(
        "The qualitative leap: exponential decay. By knowing the random "
        "choices are independent and bounded, the tail probability drops "
        "exponentially in δ². This is the workhorse of algorithm analysis."
    ),
    insight=Insight(
        10,
        2,
        "Loose here, likely because the deviation is small relative to N.",
        "Within an order of magnitude. This is a genuinely useful guarantee.",
        "Very tight! For sums of independent bounded RVs, Chernoff is hard to beat.",
    ),
)

TALAGRAND = BoundDef(
    id="talagrand",
    name="Talagrand",
    year=1995,
    requires=frozenset({"mean", "independence", "lipschitz"}),
    evaluate=talagrand_bound,
    formula=_talagrand_formula,
    formula_short="P(f−E[f] ≥ δ) ≤ 4·exp(−δ²/N)",
    assumptions="Product space, 1-Lipschitz function (not just sums)",
    explanation=(
        "For simple sums, Talagrand is looser than Chernoff and that's "
        "expected. Its power is that it works for ANY well-behaved function "
        "of many variables, not just sums. When you can't decompose your "
        "quantity as a sum, Talagrand is your tool."
    ),
    insight=Insight(
        20,
        3,
        "Loose for sums, but Talagrand isn't designed for sums. It handles far more complex quantities.",
        "Decent, considering this bound works for any Lipschitz function, not just sums.",
        "Tight! This is a case where the sum structure doesn't help much beyond Lipschitz.",
    ),
)

BOUNDS: Tuple[BoundDef, ...] = (MARKOV, CHEBYSHEV, CHERNOFF, TALAGRAND)


def get_bound(bound_id: str) -> BoundDef:
    for b in BOUNDS:
        if b.id == bound_id:
            return b
    raise ValueError(f"unknown bound {bound_id!r}")


def active_bounds(knowledge: Knowledge) -> Tuple[BoundDef, ...]:
    return tuple(b for b in BOUNDS if b.is_active(knowledge))
