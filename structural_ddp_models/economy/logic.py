"""
structural_ddp_models/economy/logic.py

Core economic equations of the Cooper-Haltiwanger (2006) investment model.

Design:
- Pure functions of (state, choice, params); no hidden state.
- NumPy broadcasting: scalars, or arrays shaped to broadcast against each other.
- The investment choice i is a RATE: investment outlays are i * K.
"""

from typing import Any, Tuple, Union

import numpy as np

from structural_ddp_models.economy.parameters import EconomicParams, ShockParams
from structural_ddp_models.economy.shocks import next_productivity

# Type alias: Accepts NumPy arrays or floats
Numeric = Union[np.ndarray, float, Any]


# --- 1. Primitives ---

def revenue(k: Numeric, a: Numeric, params: EconomicParams) -> Numeric:
    """ Profit function: K^theta * e^a """
    return k ** params.theta * np.exp(a)


def adjustment_indicator(i: Numeric) -> Numeric:
    """ 1 if the firm adjusts capital (i != 0), else 0. """
    return np.not_equal(i, 0.0).astype(float)


def capital_price(i: Numeric, params: EconomicParams) -> Numeric:
    """ p_b for purchases (i >= 0), p_s for sales (i < 0). """
    return np.where(np.greater_equal(i, 0.0), params.price_buy, params.price_sell)


def convex_adjustment_cost(k: Numeric, i: Numeric, params: EconomicParams) -> Numeric:
    """ (gamma / 2) * i^2 * K """
    return params.gamma / 2 * i ** 2 * k


# --- 2. Reward ---

def reward_flow(k: Numeric, a: Numeric, i: Numeric, params: EconomicParams) -> Numeric:
    """
    Single-period payoff for state (K, a) and investment rate i:

        K^theta e^a (1 - lambda * 1[i != 0]) - i K p(i) - F K 1[i != 0] - gamma/2 i^2 K

    Revenue net of the sales-scaled disruption, investment expenditure at the
    regime-dependent price, the capital-scaled fixed cost, and the convex cost.
    """
    action = adjustment_indicator(i)
    price = capital_price(i, params)
    return (
        revenue(k, a, params) * (1 - params.cost_sales * action)
        - i * k * price
        - params.cost_fixed * k * action
        - convex_adjustment_cost(k, i, params)
    )


# --- 3. Law of motion ---

def next_capital(k: Numeric, i: Numeric, params: EconomicParams) -> Numeric:
    """ K' = (1 - delta + i) * K """
    return (1 - params.delta + i) * k


def transition_state(
    k: Numeric,
    a: Numeric,
    i: Numeric,
    eps: Numeric,
    params: EconomicParams,
    shock_params: ShockParams
) -> Tuple[Numeric, Numeric]:
    """ (K, a), i, eps -> (K', a') with a' = rho * a + sigma * eps """
    return next_capital(k, i, params), next_productivity(a, eps, shock_params)
