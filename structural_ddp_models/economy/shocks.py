"""
structural_ddp_models/economy/shocks.py

The exogenous productivity process and its innovation distribution.

The solver receives a StandardNormalShock for eps in a' = rho * a + sigma * eps.
It integrates over eps with the quadrature rule or draws from it directly.
"""

from typing import Optional, Tuple

import numpy as np
import quantecon as qe
from scipy import stats

from structural_ddp_models._defaults import DEFAULT_N_STD, DEFAULT_QUADRATURE_NODES
from structural_ddp_models.economy.parameters import ShockParams
from structural_ddp_models.exceptions import InvalidParameterError


class StandardNormalShock:
    """
    N(0, 1) innovation distribution handed to the DDP solver.

    Wraps a frozen ``scipy.stats.norm`` and adds Gauss-Hermite quadrature
    from quantecon.
    """

    mean = 0.0
    std = 1.0

    def __init__(self):
        self.dist = stats.norm(loc=self.mean, scale=self.std)

    def __repr__(self) -> str:
        return "StandardNormalShock()"

    def __eq__(self, other) -> bool:
        return isinstance(other, StandardNormalShock)

    def __hash__(self) -> int:
        return hash(StandardNormalShock)

    def pdf(self, x):
        return self.dist.pdf(x)

    def cdf(self, x):
        return self.dist.cdf(x)

    def sample(self, n: int, seed: Optional[int] = None) -> np.ndarray:
        """Draw n shocks from a fresh numpy Generator seeded with `seed`."""
        rng = np.random.default_rng(seed)
        return rng.standard_normal(n)

    def quadrature(self, n_nodes: int = DEFAULT_QUADRATURE_NODES) -> Tuple[np.ndarray, np.ndarray]:
        """
        Gauss-Hermite nodes and weights for E[f(eps)], eps ~ N(0, 1).

        Returns:
            (nodes, weights), both of shape (n_nodes,); weights sum to one.
        """
        if n_nodes < 1:
            raise InvalidParameterError(f"n_nodes must be >= 1. Got {n_nodes}")
        nodes, weights = qe.quad.qnwnorm(n_nodes, self.mean, self.std ** 2)
        return np.ravel(nodes), np.ravel(weights)


def stationary_std(rho: float, sigma: float) -> float:
    """
    Stationary standard deviation of a' = rho * a + sigma * eps.

    Raises:
        InvalidParameterError: If |rho| >= 1 (no stationary distribution).
    """
    if abs(rho) >= 1.0:
        raise InvalidParameterError(
            f"AR(1) rho={rho} has |rho| >= 1. No stationary distribution exists."
        )
    return float(sigma / np.sqrt(1 - rho ** 2))


def compute_ergodic_a_bounds(
    shock_params: ShockParams,
    std_dev_multiplier: float = DEFAULT_N_STD
) -> Tuple[float, float]:
    """
    Bounds for log productivity: +/- m * sigma / sqrt(1 - rho^2).

    Args:
        shock_params: AR(1) parameters.
        std_dev_multiplier: Number of stationary std devs on each side.

    Returns:
        (a_min, a_max)
    """
    stda = stationary_std(shock_params.rho, shock_params.sigma)
    return -std_dev_multiplier * stda, std_dev_multiplier * stda


def next_productivity(a, eps, shock_params: ShockParams):
    """Law of motion for log productivity: a' = rho * a + sigma * eps."""
    return shock_params.rho * a + shock_params.sigma * eps


def tauchen_chain(
    shock_params: ShockParams,
    a_size: int,
    n_std: float = DEFAULT_N_STD
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Discretizes the AR(1) process on log productivity using Tauchen's method.

    The state values coincide with the model's productivity grid, so a solver
    that prefers a Markov matrix can use it in place of quadrature.

    Returns:
        Tuple[np.ndarray, np.ndarray]:
            - a_grid: 1D array of log productivity states.
            - prob_matrix: 2D transition matrix of shape (a_size, a_size).
    """
    mc = qe.tauchen(
        n=a_size,
        rho=shock_params.rho,
        sigma=shock_params.sigma,
        mu=0.0,
        n_std=n_std
    )

    a_grid = np.asarray(mc.state_values, dtype=float)
    prob_matrix = mc.P

    # Ensure strict row normalization (handling potential float precision issues)
    prob_matrix = prob_matrix / prob_matrix.sum(axis=1, keepdims=True)

    return a_grid, prob_matrix
