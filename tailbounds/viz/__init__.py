from .plots import plot_comparison, plot_histogram, plot_bounds, plot_bound_curves

__all__ = ["plot_comparison", "plot_histogram", "plot_bounds", "plot_bound_curves"]
