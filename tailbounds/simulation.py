"""
Empirical side of the comparison: simulate sums of fair coin flips and read
tail probabilities off the sorted sample.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .config import TRIALS, HIST_HALF_WIDTH
from .utils.validation import check_nonnegative_int, assert_1d, is_sorted

_logger = logging.getLogger(__name__)


def sample(n: int, trials: int = TRIALS, seed: Optional[int] = None) -> np.ndarray:
    """
    Draw `trials` independent sums of `n` Bernoulli(1/2) coins.

    Returns a read-only int array sorted ascending. Re-sampling means calling
    again; the returned array is never modified in place.
    """
    n = check_nonnegative_int(n, "n")
    trials = check_nonnegative_int(trials, "trials")
    rng = np.random.RandomState(seed)
    flips = rng.randint(0, 2, size=(trials, n), dtype=np.uint8)
    sums = np.sort(flips.sum(axis=1).astype(np.int64))
    sums.setflags(write=False)
    _logger.debug("sampled %d trials of %d coins (seed=%s)", trials, n, seed)
    return sums


def tail_count(sums: np.ndarray, threshold: float) -> int:
    """Number of sums >= threshold. Binary search when `sums` is sorted."""
    sums = np.asarray(sums)
    assert_1d(sums, "sums")
    if not is_sorted(sums):
        return int(np.count_nonzero(sums >= threshold))
    first = np.searchsorted(sums, threshold, side="left")
    return int(sums.shape[0] - first)


def empirical_tail(sums: np.ndarray, threshold: float) -> float:
    """Fraction of sums >= threshold (inclusive); 0.0 for an empty sample."""
    sums = np.asarray(sums)
    if sums.shape[0] == 0:
        return 0.0
    return tail_count(sums, threshold) / sums.shape[0]


def binomial_tail(n: int, threshold: float) -> float:
    """Exact P(S >= threshold) for S ~ Binomial(n, 1/2)."""
    n = check_nonnegative_int(n, "n")
    k_min = max(0, math.ceil(threshold))
    if k_min > n:
        return 0.0
    hits = sum(math.comb(n, k) for k in range(k_min, n + 1))
    return hits / 2**n


@dataclass(frozen=True)
class Histogram:
    """One bin per integer sum in [bin_min, bin_max]."""

    bin_min: int
    bin_max: int
    counts: np.ndarray

    @property
    def values(self) -> np.ndarray:
        return np.arange(self.bin_min, self.bin_max + 1)

    @property
    def max_count(self) -> int:
        return int(self.counts.max()) if self.counts.size else 0

    def in_tail(self, threshold: float) -> np.ndarray:
        return self.values >= threshold


def histogram(sums: np.ndarray, n: int, half_width: float = HIST_HALF_WIDTH) -> Histogram:
    """
    Bin the sample over mu +/- half_width * sigma, clipped to [0, n].
    Sums outside the window are dropped.
    """
    n = check_nonnegative_int(n, "n")
    mu = n / 2
    sigma = math.sqrt(n) / 2
    bin_min = max(0, math.floor(mu - half_width * sigma))
    bin_max = min(n, math.ceil(mu + half_width * sigma))
    sums = np.asarray(sums)
    inside = sums[(sums >= bin_min) & (sums <= bin_max)] - bin_min
    counts = np.bincount(inside.astype(np.int64), minlength=bin_max - bin_min + 1)
    return Histogram(bin_min=bin_min, bin_max=bin_max, counts=counts)
