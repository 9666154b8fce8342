from __future__ import annotations
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgba

from ..bounds import BOUNDS
from ..comparison import Comparison
from ..report import format_probability, format_ratio, format_tail
from ..simulation import binomial_tail, histogram

BOUND_COLORS = {
    "markov": "#e8865a",
    "chebyshev": "#3a6bc0",
    "chernoff": "#7ab830",
    "talagrand": "#8a6aaa",
}
TAIL_COLOR = "#e8865a"
BODY_COLOR = "#b0a898"


def plot_histogram(comparison: Comparison, ax=None):
    """Distribution of simulated sums; bins in the tail are highlighted."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 2.6))
    p = comparison.params
    t = comparison.threshold
    hist = histogram(comparison.sums, p.n)
    tail = hist.in_tail(t)
    tail_rgba = to_rgba(TAIL_COLOR, alpha=0.8)
    body_rgba = to_rgba(BODY_COLOR, alpha=0.35)
    colors = [tail_rgba if in_tail else body_rgba for in_tail in tail]
    ax.bar(hist.values, hist.counts, width=0.9, color=colors)
    ax.axvline(t, color=TAIL_COLOR, linestyle="--", linewidth=2)
    ax.axvline(p.mean, color="#7a6e60", linewidth=1)
    ax.set_xlabel("sum of heads")
    ax.set_ylabel("trials")
    ax.set_title(
        f"{comparison.trials:,} trials, t = {t:.0f}, "
        f"tail: {format_tail(comparison.empirical_tail, comparison.trials)}"
    )
    return ax


def plot_bounds(comparison: Comparison, ax=None):
    """Horizontal bars for each active bound, with the simulated tail marked."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 2.6))
    results = comparison.results
    ys = np.arange(len(results))[::-1]
    for y, r in zip(ys, results):
        if not r.active:
            ax.text(0.01, y, "not enough knowledge", va="center", color=BODY_COLOR)
            continue
        ax.barh(y, r.value, color=BOUND_COLORS.get(r.id, BODY_COLOR), alpha=0.8)
        label = f"≤ {format_probability(r.value)}"
        if comparison.empirical_tail > 0:
            label += f" ({format_ratio(r.ratio)} loose)"
        ax.text(min(r.value, 0.7) + 0.01, y, label, va="center", fontsize=9)
    ax.axvline(comparison.empirical_tail, color="black", linewidth=1.5, label="actual")
    ax.set_yticks(ys)
    ax.set_yticklabels([r.bound.name for r in results])
    ax.set_xlim(0, 1)
    ax.set_xlabel("P(S ≥ t)")
    ax.legend(loc="lower right")
    return ax


def plot_comparison(comparison: Comparison, out_png: Optional[str] = None):
    fig, (ax_hist, ax_bounds) = plt.subplots(2, 1, figsize=(8, 6))
    plot_histogram(comparison, ax=ax_hist)
    plot_bounds(comparison, ax=ax_bounds)
    fig.tight_layout()
    if out_png is not None:
        fig.savefig(out_png, dpi=180)
        plt.close(fig)
    return fig


def plot_bound_curves(n: int, max_sigmas: float = 4.5, out_png: Optional[str] = None):
    """Every bound and the exact binomial tail as functions of k (log scale)."""
    sigma = np.sqrt(n) / 2
    ks = np.linspace(0, max_sigmas, 181)
    ts = n / 2 + ks * sigma
    fig, ax = plt.subplots(figsize=(8, 5))
    for b in BOUNDS:
        ax.semilogy(ks, [b(n, t) for t in ts], color=BOUND_COLORS[b.id], label=b.name)
    exact = [binomial_tail(n, t) for t in ts]
    ax.semilogy(ks, exact, color="black", linestyle="--", label="exact P(S ≥ t)")
    ax.set_xlabel("deviation k (t = μ + kσ)")
    ax.set_ylabel("upper bound on P(S ≥ t)")
    ax.set_title(f"Tail bounds for the sum of N = {n} fair coins")
    ax.legend()
    ax.grid(True)
    fig.tight_layout()
    if out_png is not None:
        fig.savefig(out_png, dpi=180)
        plt.close(fig)
    return fig


if __name__ == "__main__":
    plot_bound_curves(100)
    plt.show()
