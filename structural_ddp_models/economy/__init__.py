"""
structural_ddp_models/economy/__init__.py

Public API for economic model primitives.
"""

from structural_ddp_models.economy.parameters import (
    EconomicParams,
    ShockParams,
)

from structural_ddp_models.economy.shocks import (
    StandardNormalShock,
    stationary_std,
    compute_ergodic_a_bounds,
    next_productivity,
    tauchen_chain,
)

from structural_ddp_models.economy.steady_state import (
    SteadyState,
    CapitalBounds,
    steady_state_residuals,
    solve_steady_state,
    analytic_steady_state,
    compute_capital_bounds,
)

from structural_ddp_models.economy.grids import (
    capital_grid,
    productivity_grid,
    ensure_zero_choice,
    investment_rate_grid,
)

from structural_ddp_models.economy.logic import (
    # Primitives
    revenue,
    adjustment_indicator,
    capital_price,
    convex_adjustment_cost,
    # Reward & motion
    reward_flow,
    next_capital,
    transition_state,
)

__all__ = [
    # Parameters
    "EconomicParams",
    "ShockParams",
    # Shocks
    "StandardNormalShock",
    "stationary_std",
    "compute_ergodic_a_bounds",
    "next_productivity",
    "tauchen_chain",
    # Steady state
    "SteadyState",
    "CapitalBounds",
    "steady_state_residuals",
    "solve_steady_state",
    "analytic_steady_state",
    "compute_capital_bounds",
    # Grids
    "capital_grid",
    "productivity_grid",
    "ensure_zero_choice",
    "investment_rate_grid",
    # Primitives
    "revenue",
    "adjustment_indicator",
    "capital_price",
    "convex_adjustment_cost",
    # Reward & motion
    "reward_flow",
    "next_capital",
    "transition_state",
]
