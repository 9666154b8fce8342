from __future__ import annotations
import math
from typing import List

from .comparison import Comparison


def format_probability(p: float) -> str:
    if p >= 0.01:
        return f"{p * 100:.1f}%"
    return f"{p * 100:.1e}%"


def format_tail(p: float, trials: int) -> str:
    if p > 0.0001:
        return f"{p * 100:.2f}%"
    if p == 0:
        return f"0% (none in {trials:,} trials)"
    return f"{p * 100:.1e}%"


def format_ratio(ratio: float) -> str:
    if math.isinf(ratio):
        return "∞×"
    if ratio >= 1000:
        return f"{ratio / 1000:.1f}k×"
    return f"{ratio:.1f}×"


def summarize(comparison: Comparison, details: bool = False) -> str:
    """Plain-text version of the guarantees-vs-reality panel."""
    p = comparison.params
    t = comparison.threshold
    lines: List[str] = [
        f"N = {p.n} coins, μ = {p.mean:.0f}, σ = {p.sigma:.2f}",
        f"P(S ≥ {t:.0f})?  (t = μ + {p.sigmas:.1f}σ)",
        f"Simulation: {format_tail(comparison.empirical_tail, comparison.trials)}"
        f"  [{comparison.tail_count} / {comparison.trials:,} trials]",
    ]
    width = max(len(r.bound.name) for r in comparison.results)
    for r in comparison.results:
        label = f"{r.bound.name:<{width}} ({r.bound.year})"
        if not r.active:
            lines.append(f"{label}  not enough knowledge")
            continue
        line = f"{label}  ≤ {format_probability(r.value)}"
        if comparison.empirical_tail > 0:
            line += f"  {format_ratio(r.ratio)} loose"
        lines.append(line)
        if details:
            lines.append(f"    {r.bound.formula_short}")
            lines.append(f"    = {r.formula(p.n, t)} = {r.value * 100:.4f}%")
            lines.append(f"    Assumes: {r.bound.assumptions}")
            lines.append(f"    {r.bound.explanation}")
            lines.append(f"    {r.insight()}")
    return "\n".join(lines)
