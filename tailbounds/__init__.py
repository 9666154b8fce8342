from .config import Knowledge, Params, TRIALS, FACTS
from .simulation import sample, empirical_tail, tail_count, binomial_tail, histogram, Histogram
from .bounds import (
    BOUNDS,
    BoundDef,
    markov_bound,
    chebyshev_bound,
    chernoff_bound,
    talagrand_bound,
    get_bound,
    active_bounds,
)
from .comparison import looseness, compare, evaluate_bounds, Comparison, BoundResult
from .explorer import TailExplorer
from .report import summarize, format_probability, format_ratio, format_tail

__all__ = [
    "Knowledge",
    "Params",
    "TRIALS",
    "FACTS",
    "sample",
    "empirical_tail",
    "tail_count",
    "binomial_tail",
    "histogram",
    "Histogram",
    "BOUNDS",
    "BoundDef",
    "markov_bound",
    "chebyshev_bound",
    "chernoff_bound",
    "talagrand_bound",
    "get_bound",
    "active_bounds",
    "looseness",
    "compare",
    "evaluate_bounds",
    "Comparison",
    "BoundResult",
    "TailExplorer",
    "summarize",
    "format_probability",
    "format_ratio",
    "format_tail",
]
