from __future__ import annotations
import math
from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

# Simulation size, fixed across re-rolls.
TRIALS = 12000

# Coin-count range exposed to the explorer.
N_MIN, N_MAX, N_STEP = 10, 200, 10
N_DEFAULT = 100

# Deviation multiplier k in t = mu + k * sigma.
SIGMAS_MIN, SIGMAS_MAX, SIGMAS_STEP = 0.5, 4.5, 0.25
SIGMAS_DEFAULT = 2.0

# Histogram window half-width, in standard deviations.
HIST_HALF_WIDTH = 4.5

FACTS: Tuple[str, ...] = ("mean", "variance", "independence", "lipschitz")


@dataclass(frozen=True)
class Knowledge:
    """Which facts about S the user is allowed to use in a proof."""

    mean: bool = True
    variance: bool = True
    independence: bool = True
    lipschitz: bool = True

    def has(self, fact: str) -> bool:
        if fact not in FACTS:
            raise ValueError(f"unknown fact {fact!r}; expected one of {FACTS}")
        return getattr(self, fact)

    def toggled(self, fact: str) -> "Knowledge":
        return replace(self, **{fact: not self.has(fact)})

    def as_dict(self) -> Dict[str, bool]:
        return {f: getattr(self, f) for f in FACTS}

    @classmethod
    def from_dict(cls, flags: Dict[str, bool]) -> "Knowledge":
        unknown = set(flags) - set(FACTS)
        if unknown:
            raise ValueError(f"unknown facts: {sorted(unknown)}")
        return cls(**{k: bool(v) for k, v in flags.items()})


@dataclass(frozen=True)
class Params:
    """
    Everything one evaluation needs.

    n      : number of fair coins summed per trial.
    sigmas : deviation multiplier k, threshold t = n/2 + k * sqrt(n)/2.
    """

    n: int = N_DEFAULT
    sigmas: float = SIGMAS_DEFAULT
    knowledge: Knowledge = field(default_factory=Knowledge)
    trials: int = TRIALS
    seed: Optional[int] = None

    def __post_init__(self):
        if self.n < 0:
            raise ValueError("n must be >= 0")
        if self.trials < 0:
            raise ValueError("trials must be >= 0")
        if self.sigmas < 0:
            raise ValueError("sigmas must be >= 0")

    @property
    def mean(self) -> float:
        return self.n / 2

    @property
    def variance(self) -> float:
        return self.n / 4

    @property
    def sigma(self) -> float:
        return math.sqrt(self.n) / 2

    @property
    def delta(self) -> float:
        return self.sigmas * self.sigma

    @property
    def threshold(self) -> float:
        return self.mean + self.delta
