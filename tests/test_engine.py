import math

import numpy as np
import pytest

from mc_sim.engine import confidence_interval, format_report, summarize_final_prices
from mc_sim.grid import PriceGrid
from mc_sim.models import simulate


def test_summary_of_known_grid(small_grid):
    s = summarize_final_prices(small_grid)

    assert s["n_paths"] == 3
    assert s["mean"] == pytest.approx(100.0)
    assert s["std"] == pytest.approx(10.0)
    assert s["min"] == 90.0
    assert s["max"] == 110.0
    assert s["ci_lower"] == pytest.approx(80.4)
    assert s["ci_upper"] == pytest.approx(119.6)


def test_summary_matches_numpy(params):
    grid = simulate(params, rng=123)
    s = summarize_final_prices(grid)
    final = grid.final_prices

    assert s["mean"] == pytest.approx(final.mean())
    assert s["std"] == pytest.approx(final.std(ddof=1))
    assert s["min"] == final.min()
    assert s["max"] == final.max()


def test_single_path_std_is_nan_with_warning():
    grid = PriceGrid(np.array([[100.0], [104.0]]), horizon=1.0)

    with pytest.warns(RuntimeWarning, match="single path"):
        s = summarize_final_prices(grid)

    assert s["mean"] == 104.0
    assert s["min"] == s["max"] == 104.0
    assert math.isnan(s["std"])


def test_confidence_interval_scalar_and_array():
    assert confidence_interval(10.0, 1.0) == pytest.approx((8.04, 11.96))

    lo, hi = confidence_interval(np.array([0.0, 1.0]), np.array([1.0, 2.0]), z=2.0)
    np.testing.assert_allclose(lo, [-2.0, -3.0])
    np.testing.assert_allclose(hi, [2.0, 5.0])


def test_format_report(small_grid):
    text = format_report(125.0, summarize_final_prices(small_grid))
    assert format_report.__doc__

    assert "FINAL STATISTICS" in text
    assert "Initial price: 125.00" in text
    assert "Minimum final price: 90.00" in text
    assert "Maximum final price: 110.00" in text
    assert "Final standard deviation: 10.00" in text
    assert "Confidence 95%: [80.40, 119.60]" in text
