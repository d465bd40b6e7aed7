import numpy as np
import pandas as pd
from typing import Sequence


class PriceGrid:
    """
    Simulated prices, one row per time step and one column per path.

        values[t, i] = price of path i at time t * dt

    The underlying array is read-only once the grid is built. ``values`` is
    copied unless ``copy=False``, in which case the grid takes the array over
    and marks it read-only in place.
    """

    def __init__(self, values: np.ndarray, horizon: float, copy: bool = True):
        if copy:
            values = np.array(values, dtype=float)
        else:
            values = np.asarray(values, dtype=float)
        if values.ndim != 2 or values.shape[0] < 2 or values.shape[1] < 1:
            raise ValueError(
                f"PriceGrid needs shape (steps + 1, path_count) with steps, path_count >= 1, got {values.shape}"
            )
        values.setflags(write=False)
        self._values = values
        self.horizon = float(horizon)

    def __repr__(self) -> str:
        return f"PriceGrid(steps={self.steps}, path_count={self.path_count}, horizon={self.horizon})"

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def shape(self) -> tuple[int, int]:
        return self._values.shape

    @property
    def steps(self) -> int:
        return self._values.shape[0] - 1

    @property
    def path_count(self) -> int:
        return self._values.shape[1]

    @property
    def dt(self) -> float:
        return self.horizon / self.steps

    def row(self, t: int) -> np.ndarray:
        """Prices of every path at step t."""
        return self._values[t]

    def column(self, i: int) -> np.ndarray:
        """Full trajectory of path i."""
        return self._values[:, i]

    @property
    def initial_prices(self) -> np.ndarray:
        return self._values[0]

    @property
    def final_prices(self) -> np.ndarray:
        return self._values[-1]

    def time_axis(self) -> np.ndarray:
        return np.linspace(0.0, self.horizon, self.steps + 1)

    def row_means(self) -> np.ndarray:
        return self._values.mean(axis=1)

    def row_stds(self, ddof: int = 1) -> np.ndarray:
        if self.path_count <= ddof:
            return np.full(self.steps + 1, np.nan)
        return self._values.std(axis=1, ddof=ddof)

    def to_frame(self, columns: Sequence[int] | None = None) -> pd.DataFrame:
        """
        Selected paths as a DataFrame indexed by time; all paths by default.
        """
        if columns is None:
            columns = range(self.path_count)
        columns = list(columns)
        df = pd.DataFrame(
            self._values[:, columns],
            index=pd.Index(self.time_axis(), name="time"),
            columns=[f"path_{i}" for i in columns],
        )
        return df

    def step_summary(self, z: float = 1.96) -> pd.DataFrame:
        """
        Per-step mean, std (ddof=1) and the mean +/- z * std band.
        """
        means = self.row_means()
        stds = self.row_stds(ddof=1)
        return pd.DataFrame(
            {
                "time": self.time_axis(),
                "mean": means,
                "std": stds,
                "ci_lower": means - z * stds,
                "ci_upper": means + z * stds,
            }
        )
