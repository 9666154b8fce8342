from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .bounds import BOUNDS, BoundDef
from .config import Knowledge, Params
from .simulation import sample, tail_count


def looseness(bound_value: float, tail: float) -> float:
    """
    bound_value / tail. A positive bound over an empty tail is infinitely
    loose; 0 over 0 counts as exact (1.0).
    """
    if tail > 0:
        return bound_value / tail
    if bound_value > 0:
        return math.inf
    return 1.0


@dataclass(frozen=True)
class BoundResult:
    bound: BoundDef
    value: float
    active: bool
    ratio: Optional[float]  # None when the bound is unavailable

    @property
    def id(self) -> str:
        return self.bound.id

    def formula(self, n: int, t: float) -> str:
        return self.bound.formula(n, t)

    def insight(self) -> str:
        if self.ratio is None:
            return ""
        return self.bound.insight(self.ratio)


def evaluate_bounds(
    n: int, t: float, knowledge: Knowledge, tail: float
) -> Tuple[BoundResult, ...]:
    results = []
    for b in BOUNDS:
        value = b(n, t)
        active = b.is_active(knowledge)
        ratio = looseness(value, tail) if active else None
        results.append(BoundResult(bound=b, value=value, active=active, ratio=ratio))
    return tuple(results)


@dataclass(frozen=True)
class Comparison:
    params: Params
    sums: np.ndarray
    tail_count: int
    results: Tuple[BoundResult, ...]

    @property
    def threshold(self) -> float:
        return self.params.threshold

    @property
    def trials(self) -> int:
        return int(self.sums.shape[0])

    @property
    def empirical_tail(self) -> float:
        return self.tail_count / self.trials if self.trials else 0.0

    def result(self, bound_id: str) -> BoundResult:
        for r in self.results:
            if r.id == bound_id:
                return r
        raise ValueError(f"unknown bound {bound_id!r}")

    def active(self) -> Tuple[BoundResult, ...]:
        return tuple(r for r in self.results if r.active)


def compare(params: Params, sums: Optional[np.ndarray] = None) -> Comparison:
    """
    Evaluate every bound at params.threshold against the simulated tail.
    A fresh sample is drawn from params when `sums` is not given.
    """
    if sums is None:
        sums = sample(params.n, params.trials, seed=params.seed)
    sums = np.asarray(sums)
    count = tail_count(sums, params.threshold)
    tail = count / len(sums) if len(sums) else 0.0
    results = evaluate_bounds(params.n, params.threshold, params.knowledge, tail)
    return Comparison(params=params, sums=sums, tail_count=count, results=results)
