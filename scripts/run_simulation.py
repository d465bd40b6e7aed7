#!/usr/bin/env python3
"""
Black-Scholes-Merton Monte Carlo run.

Simulates the price grid, saves the three charts (paths, final distribution,
95% band) and prints the final statistics. Defaults reproduce the reference
scenario: S0=125, 100 steps over 1 year, 1,000,000 paths, sigma=0.17, r=0.23.
"""
from __future__ import annotations

import argparse
import os

from mc_sim.engine import format_report, summarize_final_prices
from mc_sim.errors import InvalidParameter, NumericOverflow
from mc_sim.models import GeometricBrownianMotion
from mc_sim.visualization import (
    plot_final_distribution,
    plot_mc_paths,
    plot_statistics,
    save_figure,
)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    p.add_argument("--s0", type=float, default=125.0, help="Initial price")
    p.add_argument("--steps", type=int, default=100, help="Number of time steps")
    p.add_argument("--horizon", type=float, default=1.0, help="Horizon in years")
    p.add_argument("--paths", type=int, default=1_000_000, help="Number of simulated paths")
    p.add_argument("--sigma", type=float, default=0.17, help="Annualized volatility")
    p.add_argument("--r", type=float, default=0.23, help="Annualized risk-free rate")
    p.add_argument("--seed", type=int, default=None, help="Random seed (fresh entropy if omitted)")
    p.add_argument("--paths-to-show", type=int, default=100, help="Paths drawn on the trajectory chart")
    p.add_argument("--out-dir", type=str, default="artifacts", help="Where to save charts")
    p.add_argument("--no-plots", action="store_true", help="Skip chart generation")
    p.add_argument(
        "--summary-out",
        type=str,
        default=None,
        help="Optional parquet path for the per-step mean/std/95%% band",
    )
    return p, p.parse_args(argv)


def main(argv=None) -> dict:
    parser, args = parse_args(argv)

    model = GeometricBrownianMotion(s0=args.s0, r=args.r, sigma=args.sigma)

    print("Monte Carlo Simulation: Start")
    try:
        grid = model.simulate_paths(T=args.horizon, n_steps=args.steps, n_paths=args.paths, seed=args.seed)
    except InvalidParameter as e:
        parser.error(str(e))
    except NumericOverflow as e:
        parser.exit(1, f"{parser.prog}: error: {e}\n")
    print("Monte Carlo Simulation: End")

    if not args.no_plots:
        print("Paths graphic generation")
        path = save_figure(plot_mc_paths(grid, args.paths_to_show), os.path.join(args.out_dir, "mc_paths.png"))
        print(f"Saved plot: {path}")

        print("Histogram of the final prices")
        path = save_figure(plot_final_distribution(grid), os.path.join(args.out_dir, "final_distribution.png"))
        print(f"Saved plot: {path}")

        print("Statistics plot")
        path = save_figure(plot_statistics(grid), os.path.join(args.out_dir, "statistics.png"))
        print(f"Saved plot: {path}")

    if args.summary_out:
        out_dir = os.path.dirname(args.summary_out)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        grid.step_summary().to_parquet(args.summary_out, index=False)
        print(f"Saved step summary to: {args.summary_out}")

    summary = summarize_final_prices(grid)
    print(format_report(model.s0, summary))
    return summary


if __name__ == "__main__":
    main()
