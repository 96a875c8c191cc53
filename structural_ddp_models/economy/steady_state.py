"""
structural_ddp_models/economy/steady_state.py

Deterministic steady state of the capital accumulation problem.

At a steady state with productivity fixed at e^z the firm invests just enough
to offset depreciation. Two conditions pin down (V_K, log K):

    1. marginal adjustment cost:   V_K = 1 + gamma
    2. capital Euler equation:     V_K = beta * (e^z * theta * K^(theta-1) + (1-delta) * V_K)

The system is solved numerically with a Newton-type root finder seeded at a
fixed guess, so repeated calls are bit-for-bit reproducible.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

import numpy as np
from scipy import optimize

from structural_ddp_models._defaults import (
    DEFAULT_RESIDUAL_TOL,
    DEFAULT_ROOT_METHOD,
    DEFAULT_ROOT_TOL,
    DEFAULT_STEADY_STATE_GUESS,
    DEFAULT_Z_HIGH_MULT,
    DEFAULT_Z_LOW_MULT,
)
from structural_ddp_models.economy.parameters import EconomicParams
from structural_ddp_models.exceptions import SteadyStateConvergenceFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SteadyState:
    """
    Solution of the steady-state system at one productivity level.

    Attributes:
        z: Log productivity the system was solved at
        marginal_value: Marginal value of capital V_K
        log_capital: Steady-state log capital
    """
    z: float
    marginal_value: float
    log_capital: float

    @property
    def capital(self) -> float:
        return float(np.exp(self.log_capital))


@dataclass(frozen=True)
class CapitalBounds:
    """
    Log-capital bounds for the capital grid.

    Attributes:
        log_k_min: Steady-state log capital at low productivity
        log_k_max: Steady-state log capital at high productivity
        k_ss: Steady-state capital at the variance-adjusted mean productivity.
              Diagnostic only; it does not enter the grid.
    """
    log_k_min: float
    log_k_max: float
    k_ss: float


def steady_state_residuals(
    z: float,
    params: EconomicParams
) -> Callable[[np.ndarray], np.ndarray]:
    """
    Build the residual function F(V_K, log K) of the steady-state system at z.

    Args:
        z: Log productivity.
        params: Economic parameters.

    Returns:
        Callable mapping a length-2 vector to a length-2 residual vector.
    """
    beta, theta, delta, gamma = params.beta, params.theta, params.delta, params.gamma

    def residuals(x: np.ndarray) -> np.ndarray:
        v_k, log_k = x
        mpk = np.exp(z) * theta * np.exp(log_k) ** (theta - 1)
        return np.array([
            -1.0 - gamma + v_k,
            v_k - beta * (mpk + (1 - delta) * v_k),
        ])

    return residuals


def solve_steady_state(
    z: float,
    params: EconomicParams,
    guess: Sequence[float] = DEFAULT_STEADY_STATE_GUESS,
    method: str = DEFAULT_ROOT_METHOD,
    tol: float = DEFAULT_ROOT_TOL,
) -> SteadyState:
    """
    Solve the steady-state system at log productivity z.

    Args:
        z: Log productivity.
        params: Economic parameters.
        guess: Initial guess for (V_K, log K).
        method: scipy.optimize.root method.
        tol: Root-finder tolerance.

    Returns:
        SteadyState

    Raises:
        SteadyStateConvergenceFailure: If the root finder fails, returns a
            non-finite point, or leaves residuals above DEFAULT_RESIDUAL_TOL.
    """
    residuals = steady_state_residuals(z, params)
    with np.errstate(over="ignore", invalid="ignore"):
        sol = optimize.root(residuals, np.asarray(guess, dtype=float), method=method, tol=tol)

    if not sol.success:
        raise SteadyStateConvergenceFailure(z, sol.message)

    if not np.all(np.isfinite(sol.x)):
        raise SteadyStateConvergenceFailure(z, f"non-finite solution {sol.x}")

    max_resid = float(np.max(np.abs(residuals(sol.x))))
    if not max_resid <= DEFAULT_RESIDUAL_TOL:
        raise SteadyStateConvergenceFailure(z, f"residual {max_resid:.2e} above tolerance")

    v_k, log_k = sol.x
    logger.debug(f"Steady state at z={z:.4f}: V_K={v_k:.6f}, log K={log_k:.6f}")
    return SteadyState(z=float(z), marginal_value=float(v_k), log_capital=float(log_k))


def analytic_steady_state(z: float, params: EconomicParams) -> SteadyState:
    """
    Closed-form solution of the steady-state system.

        V_K   = 1 + gamma
        log K = log(beta * theta * e^z / ((1 - beta * (1 - delta)) * V_K)) / (1 - theta)

    Used to cross-check the numerical solve.
    """
    v_k = params.marginal_adjustment_value
    user_cost = (1 - params.beta * (1 - params.delta)) * v_k
    log_k = (np.log(params.beta * params.theta / user_cost) + z) / (1 - params.theta)
    return SteadyState(z=float(z), marginal_value=float(v_k), log_capital=float(log_k))


def compute_capital_bounds(
    params: EconomicParams,
    stationary_std: float
) -> CapitalBounds:
    """
    Solve the steady state at three reference productivity levels.

    - low:  z = -2 * stda  -> lower log-capital bound
    - high: z = +3 * stda  -> upper log-capital bound
    - mid:  z = stda^2 / 2 (mean of e^a under the stationary law) -> k_ss

    Args:
        params: Economic parameters.
        stationary_std: Stationary std dev of log productivity (stda).

    Returns:
        CapitalBounds
    """
    mid = solve_steady_state(stationary_std ** 2 / 2, params)
    low = solve_steady_state(DEFAULT_Z_LOW_MULT * stationary_std, params)
    high = solve_steady_state(DEFAULT_Z_HIGH_MULT * stationary_std, params)

    logger.debug(
        f"Capital bounds in levels: ({np.exp(low.log_capital):.4f}, "
        f"{np.exp(high.log_capital):.4f}), k_ss={mid.capital:.4f}"
    )

    return CapitalBounds(
        log_k_min=low.log_capital,
        log_k_max=high.log_capital,
        k_ss=mid.capital,
    )
