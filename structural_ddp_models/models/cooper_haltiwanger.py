"""
structural_ddp_models/models/cooper_haltiwanger.py

Model of Cooper and Haltiwanger (2006, RES), "On the Nature of Capital
Adjustment Costs". The recursive formulation is:

    V(K, a) = max_i  K^theta e^a (1 - lambda 1[i != 0]) - p(i) i K - F K 1[i != 0]
                     - gamma/2 i^2 K + beta E V(K', a')

    p(i) = p_b if i >= 0, p_s if i < 0
    K'   = (1 - delta + i) K
    a'   = rho a + sigma eps,   eps ~ N(0, 1)

where i is the investment RATE. The builder only describes the problem; an
external DDP solver takes it from there.

Example:
    prob = cooper_haltiwanger_2006(k_size=150, a_size=8, i_size=100, rho=0.5, sigma=0.3, gamma=2.0)
"""

import dataclasses
import logging
from typing import Any, Dict, Optional, Tuple

from structural_ddp_models.ddp.ddp_config import DDPGridConfig
from structural_ddp_models.ddp.problem import DiscreteDynamicProblem, IntegrationMode
from structural_ddp_models.economy import logic
from structural_ddp_models.economy.parameters import EconomicParams, ShockParams
from structural_ddp_models.economy.shocks import StandardNormalShock, stationary_std
from structural_ddp_models.economy.steady_state import compute_capital_bounds
from structural_ddp_models.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)


def _split_overrides(
    overrides: Dict[str, Any]
) -> Tuple[Dict[str, Any], Dict[str, Any], Dict[str, Any]]:
    """Route flat keyword overrides to EconomicParams, ShockParams and DDPGridConfig."""
    routed = []
    remaining = dict(overrides)
    for cls in (EconomicParams, ShockParams, DDPGridConfig):
        names = {f.name for f in dataclasses.fields(cls)}
        routed.append({k: remaining.pop(k) for k in list(remaining) if k in names})

    if remaining:
        raise InvalidParameterError(f"Unknown model parameters: {sorted(remaining)}")
    return routed[0], routed[1], routed[2]


def make_reward(params: EconomicParams):
    """Bind the period reward to a parameter record: reward((K, a), i)."""
    def reward(state, i):
        k, a = state
        return logic.reward_flow(k, a, i, params)
    return reward


def make_transition(params: EconomicParams, shock_params: ShockParams):
    """Bind the law of motion to parameter records: transition((K, a), i, eps) -> (K', a')."""
    def transition(state, i, eps):
        k, a = state
        return logic.transition_state(k, a, i, eps, params, shock_params)
    return transition


def cooper_haltiwanger_2006(
    params: Optional[EconomicParams] = None,
    shock_params: Optional[ShockParams] = None,
    grid_config: Optional[DDPGridConfig] = None,
    **overrides
) -> DiscreteDynamicProblem:
    """
    Build the Cooper-Haltiwanger (2006) investment problem.

    Any field of EconomicParams, ShockParams or DDPGridConfig may be passed
    as a keyword and is applied on top of the corresponding record (or its
    defaults).

    Args:
        params: Economic parameters (defaults if None).
        shock_params: Productivity process (defaults if None).
        grid_config: Grid sizes and investment-rate range (defaults if None).
        **overrides: Flat field overrides, e.g. rho=0.5, k_size=150.

    Returns:
        DiscreteDynamicProblem with state grids (k_grid, a_grid), choice grid
        (i_grid,), the reward and transition closures, a standard normal
        shock, beta, and IntegrationMode.ALL.

    Raises:
        InvalidParameterError: Out-of-domain parameters, including |rho| >= 1.
        SteadyStateConvergenceFailure: A bounding steady-state solve failed.
        ChoiceGridConstructionError: The choice grid cannot hold zero exactly once.
    """
    econ_over, shock_over, grid_over = _split_overrides(overrides)
    params = EconomicParams.with_overrides(params, **econ_over)
    shock_params = ShockParams.with_overrides(shock_params, **shock_over)
    grid_config = DDPGridConfig.with_overrides(grid_config, **grid_over)

    # 1. Productivity grid on +/- n_std stationary std devs
    stda = stationary_std(shock_params.rho, shock_params.sigma)
    a_grid = grid_config.generate_productivity_grid(shock_params)

    # 2. Capital grid between the low- and high-productivity steady states
    bounds = compute_capital_bounds(params, stda)
    k_grid = grid_config.generate_capital_grid(bounds)

    # 3. Investment-rate choices, zero included
    i_grid = grid_config.generate_choice_grid()

    logger.info(
        f"Cooper-Haltiwanger grids: K in [{k_grid[0]:.4f}, {k_grid[-1]:.4f}] ({len(k_grid)}), "
        f"a in [{a_grid[0]:.4f}, {a_grid[-1]:.4f}] ({len(a_grid)}), "
        f"i in [{i_grid[0]:.2f}, {i_grid[-1]:.2f}] ({len(i_grid)}); k_ss={bounds.k_ss:.4f}"
    )

    # Fixed adjustment costs and the discrete choice rule out separable integration
    return DiscreteDynamicProblem(
        (k_grid, a_grid),
        (i_grid,),
        make_reward(params),
        make_transition(params, shock_params),
        StandardNormalShock(),
        params.beta,
        intdim=IntegrationMode.ALL,
    )
