import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from mc_sim.grid import PriceGrid
from mc_sim.models import SimulationParameters


@pytest.fixture
def params():
    return SimulationParameters(
        initial_price=100.0,
        steps=20,
        horizon=1.0,
        path_count=500,
        volatility=0.2,
        risk_free_rate=0.05,
    )


@pytest.fixture
def small_grid():
    # two steps, three paths
    values = np.array(
        [
            [100.0, 100.0, 100.0],
            [95.0, 100.0, 105.0],
            [90.0, 100.0, 110.0],
        ]
    )
    return PriceGrid(values, horizon=2.0)
