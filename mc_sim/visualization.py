"""
Charts for a simulated PriceGrid:

- plot_mc_paths: a subset of trajectories with the mean path
- plot_final_distribution: histogram of the final prices
- plot_statistics: per-step mean with the 95% band

The *_view functions return the plotted data so it can be checked or reused
without drawing anything.
"""

import os
import warnings

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from mc_sim.engine import confidence_interval
from mc_sim.grid import PriceGrid

HISTOGRAM_BINS = 50


def trajectory_view(grid: PriceGrid, n_paths_to_show: int):
    """
    (time, first n paths as columns, mean over all paths)
    """
    if n_paths_to_show < 0:
        raise ValueError(f"n_paths_to_show must be >= 0, got {n_paths_to_show}")
    if n_paths_to_show > grid.path_count:
        warnings.warn(
            f"Requested {n_paths_to_show} paths but only {grid.path_count} simulated; showing all.",
            stacklevel=2,
        )
    n = min(n_paths_to_show, grid.path_count)
    return grid.time_axis(), grid.values[:, :n], grid.row_means()


def distribution_view(grid: PriceGrid, bins: int = HISTOGRAM_BINS):
    """
    (counts, bin_edges) of the final prices.
    """
    return np.histogram(grid.final_prices, bins=bins)


def confidence_band(grid: PriceGrid):
    """
    (time, mean, lower, upper) with mean +/- 1.96 std at every step.
    """
    means = grid.row_means()
    lower, upper = confidence_interval(means, grid.row_stds(ddof=1))
    return grid.time_axis(), means, lower, upper


def plot_mc_paths(grid: PriceGrid, n_paths_to_show: int = 100) -> Figure:
    time, shown, mean_path = trajectory_view(grid, n_paths_to_show)

    fig, ax = plt.subplots(figsize=(10, 6))
    for i in range(shown.shape[1]):
        ax.plot(time, shown[:, i], alpha=0.7, linewidth=0.8, label=f"Path {i + 1}")
    ax.plot(time, mean_path, color="red", linewidth=3.0, label="Mean")

    ax.set_title("Monte Carlo Simulation - Black-Scholes-Merton model")
    ax.set_xlabel("Time (Years)")
    ax.set_ylabel("Stock price")
    # a legend entry per path is unreadable past a handful
    if shown.shape[1] <= 10:
        ax.legend()
    return fig


def plot_final_distribution(grid: PriceGrid, bins: int = HISTOGRAM_BINS) -> Figure:
    counts, edges = distribution_view(grid, bins=bins)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.stairs(counts, edges, fill=True, label="Distribution of the final prices")
    ax.set_title("Final distribution of prices")
    ax.set_xlabel("Final price")
    ax.set_ylabel("Frequency")
    ax.legend()
    return fig


def plot_statistics(grid: PriceGrid) -> Figure:
    time, means, lower, upper = confidence_band(grid)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(time, upper, color="lightgray", linewidth=1.0, label="IC 95% sup")
    ax.plot(time, lower, color="lightgray", linewidth=1.0, label="IC 95% inf")
    ax.plot(time, means, color="blue", linewidth=3.0, label="mean")

    ax.set_title("Statistics of simulation")
    ax.set_xlabel("Time (Years)")
    ax.set_ylabel("Prices")
    ax.legend()
    return fig


def save_figure(fig: Figure, path: str, dpi: int = 200) -> str:
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
    return path
