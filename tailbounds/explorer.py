from __future__ import annotations
import logging
import math
from dataclasses import replace
from typing import Optional, Tuple

import numpy as np

from .comparison import Comparison, compare
from .config import (
    Knowledge,
    Params,
    N_MIN,
    N_MAX,
    N_STEP,
    SIGMAS_MIN,
    SIGMAS_MAX,
    SIGMAS_STEP,
)
from .simulation import Histogram, histogram, sample

_logger = logging.getLogger(__name__)


def _snap(value: float, lo: float, hi: float, step: float) -> float:
    value = min(max(value, lo), hi)
    return lo + math.floor((value - lo) / step + 0.5) * step


class TailExplorer:
    """
    Mutable front for the pure core. Holds the slider/toggle state and only
    re-simulates when the coin count or the re-roll counter changes.

    Passing `seed` makes the run reproducible: roll r uses seed + r.
    """

    def __init__(self, params: Optional[Params] = None, seed: Optional[int] = None):
        self.params = params if params is not None else Params()
        self.seed = seed
        self.rolls = 0
        self._cache_key: Optional[Tuple[int, int, int]] = None
        self._sums: Optional[np.ndarray] = None

    def set_n(self, n: int) -> int:
        n = int(_snap(n, N_MIN, N_MAX, N_STEP))
        self.params = replace(self.params, n=n)
        return n

    def set_sigmas(self, sigmas: float) -> float:
        sigmas = float(_snap(sigmas, SIGMAS_MIN, SIGMAS_MAX, SIGMAS_STEP))
        self.params = replace(self.params, sigmas=sigmas)
        return sigmas

    def toggle(self, fact: str) -> Knowledge:
        self.params = replace(self.params, knowledge=self.params.knowledge.toggled(fact))
        return self.params.knowledge

    def reroll(self) -> int:
        self.rolls += 1
        return self.rolls

    @property
    def sums(self) -> np.ndarray:
        key = (self.params.n, self.rolls, self.params.trials)
        if key != self._cache_key:
            seed = None if self.seed is None else self.seed + self.rolls
            _logger.debug("resampling n=%d roll=%d", self.params.n, self.rolls)
            self._sums = sample(self.params.n, self.params.trials, seed=seed)
            self._cache_key = key
        return self._sums

    def histogram(self) -> Histogram:
        return histogram(self.sums, self.params.n)

    def result(self) -> Comparison:
        return compare(self.params, self.sums)
