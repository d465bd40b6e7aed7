import warnings

import numpy as np
from scipy import stats

from mc_sim.grid import PriceGrid

Z_95 = 1.96


def confidence_interval(mean, std, z: float = Z_95):
    """
    Normal-approximation interval mean +/- z * std. Works on scalars and arrays.
    """
    return mean - z * std, mean + z * std


def summarize_final_prices(grid: PriceGrid) -> dict:
    """
    Descriptive statistics of the final time slice.

    std is the unbiased (ddof=1) sample standard deviation.
    """
    final_prices = grid.final_prices
    n = final_prices.size

    if n < 2:
        warnings.warn(
            "Standard deviation is undefined for a single path; reporting nan.",
            RuntimeWarning,
            stacklevel=2,
        )
        mean = float(final_prices[0])
        std = float("nan")
        lo = hi = mean
    else:
        desc = stats.describe(final_prices, ddof=1)
        mean = float(desc.mean)
        std = float(np.sqrt(desc.variance))
        lo, hi = (float(v) for v in desc.minmax)

    ci_lower, ci_upper = confidence_interval(mean, std)

    return {
        "n_paths": int(n),
        "mean": mean,
        "std": std,
        "min": lo,
        "max": hi,
        "ci_lower": ci_lower,
        "ci_upper": ci_upper,
    }


def format_report(initial_price: float, summary: dict) -> str:
    """Render a summarize_final_prices result as the FINAL STATISTICS text block."""
    lines = [
        "",
        "========FINAL STATISTICS==========",
        "",
        f"Initial price: {initial_price:.2f}",
        f"Paths: {summary['n_paths']}",
        f"Minimum final price: {summary['min']:.2f}",
        f"Maximum final price: {summary['max']:.2f}",
        f"Mean final price: {summary['mean']:.2f}",
        f"Final standard deviation: {summary['std']:.2f}",
        f"Confidence 95%: [{summary['ci_lower']:.2f}, {summary['ci_upper']:.2f}]",
    ]
    return "\n".join(lines)
