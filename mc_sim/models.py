import math
from dataclasses import dataclass, replace

import numpy as np

from mc_sim.errors import InvalidParameter, NumericOverflow
from mc_sim.grid import PriceGrid


@dataclass(frozen=True)
class SimulationParameters:
    """
    Inputs of a Black-Scholes-Merton path simulation.

    initial_price  : S0, price at time 0
    steps          : M, number of time increments (grid has M + 1 rows)
    horizon        : T, simulated time in years
    path_count     : I, number of independent trajectories
    volatility     : sigma, annualized
    risk_free_rate : r, annualized drift
    """

    initial_price: float
    steps: int
    horizon: float
    path_count: int
    volatility: float
    risk_free_rate: float

    @property
    def dt(self) -> float:
        return self.horizon / self.steps

    @property
    def expected_final_mean(self) -> float:
        """E[S_T] = S0 * exp(r * T) under the simulated dynamics."""
        return self.initial_price * math.exp(self.risk_free_rate * self.horizon)

    def validate(self) -> "SimulationParameters":
        """
        Check every field and return a copy with integer sizes.

        Fractional steps / path_count are truncated toward zero before the
        lower bound is checked.
        """
        for name in ("initial_price", "steps", "horizon", "path_count", "volatility", "risk_free_rate"):
            value = getattr(self, name)
            try:
                finite = math.isfinite(value)
            except TypeError:
                raise InvalidParameter(name, value, "must be a real number") from None
            if not finite:
                raise InvalidParameter(name, value, "must be finite")

        steps = int(self.steps)
        path_count = int(self.path_count)

        if self.initial_price <= 0:
            raise InvalidParameter("initial_price", self.initial_price, "must be > 0")
        if steps < 1:
            raise InvalidParameter("steps", self.steps, "must be >= 1 after truncation")
        if path_count < 1:
            raise InvalidParameter("path_count", self.path_count, "must be >= 1 after truncation")
        if self.horizon <= 0:
            raise InvalidParameter("horizon", self.horizon, "must be > 0")
        if self.volatility < 0:
            raise InvalidParameter("volatility", self.volatility, "must be >= 0")

        dt = self.horizon / steps
        if not (math.isfinite(dt) and dt > 0):
            raise InvalidParameter("horizon", self.horizon, f"gives non-positive time step dt={dt!r}")

        return replace(self, steps=steps, path_count=path_count)


def _standard_normal(rng: np.random.Generator, size: int) -> np.ndarray:
    """
    Fresh N(0, 1) draws for one time step, one per path.
    """
    return rng.standard_normal(size)


def simulate(
    params: SimulationParameters,
    rng: np.random.Generator | int | None = None,
) -> PriceGrid:
    """
    Simulate Black-Scholes-Merton paths:

        S[t] = S[t-1] * exp((r - 0.5 sigma^2) dt + sigma sqrt(dt) z),  z ~ N(0, 1)

    ``rng`` is a numpy Generator, a seed, or None for fresh OS entropy.

    Returns
    -------
    PriceGrid of shape (steps + 1, path_count)
    """
    params = params.validate()
    rng = np.random.default_rng(rng)

    dt = params.dt
    n_paths = params.path_count

    paths = np.empty((params.steps + 1, n_paths))
    paths[0] = params.initial_price

    with np.errstate(over="ignore", invalid="ignore"):
        sigma = np.float64(params.volatility)
        drift = (np.float64(params.risk_free_rate) - 0.5 * sigma**2) * dt
        diffusion = sigma * np.sqrt(dt)
        for term, value in (("drift", drift), ("diffusion", diffusion)):
            if not np.isfinite(value):
                raise NumericOverflow(step=1, path=None, value=float(value), term=term)

        for t in range(1, params.steps + 1):
            z = _standard_normal(rng, n_paths)
            np.multiply(paths[t - 1], np.exp(drift + diffusion * z), out=paths[t])

            bad = ~np.isfinite(paths[t])
            if bad.any():
                i = int(np.flatnonzero(bad)[0])
                raise NumericOverflow(step=t, path=i, value=float(paths[t, i]))

    return PriceGrid(paths, horizon=params.horizon, copy=False)


class GeometricBrownianMotion:
    """
    One asset under dS = r S dt + sigma S dW.

    Holds what belongs to the asset (spot, rate, volatility); the horizon and
    grid sizes are chosen per run in simulate_paths.
    """

    def __init__(self, s0: float, r: float, sigma: float):
        self.s0 = s0
        self.r = r
        self.sigma = sigma

    def __repr__(self) -> str:
        return f"GeometricBrownianMotion(s0={self.s0}, r={self.r}, sigma={self.sigma})"

    def parameters(self, T: float, n_steps: int, n_paths: int) -> SimulationParameters:
        """SimulationParameters for this asset over horizon T."""
        return SimulationParameters(
            initial_price=self.s0,
            steps=n_steps,
            horizon=T,
            path_count=n_paths,
            volatility=self.sigma,
            risk_free_rate=self.r,
        )

    def simulate_paths(
        self,
        T: float,
        n_steps: int,
        n_paths: int,
        seed: np.random.Generator | int | None = None,
    ) -> PriceGrid:
        """
        Simulate GBM paths.

        Returns
        -------
        grid : PriceGrid of shape (n_steps + 1, n_paths)
        """
        return simulate(self.parameters(T, n_steps, n_paths), rng=seed)
