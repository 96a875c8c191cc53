# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#   kernelspec:
#     display_name: Python 3
#     language: python
#     name: python3
# ---

# %% [markdown]
# # Cooper-Haltiwanger (2006): building the DDP problem
#
# Builds the baseline problem, reports its grids and the diagnostic
# steady state, and tabulates the reward for an array-based solver.

# %%
import numpy as np
import matplotlib.pyplot as plt

from structural_ddp_models import cooper_haltiwanger_2006, EconomicParams, ShockParams
from structural_ddp_models.economy import compute_capital_bounds
from structural_ddp_models.ddp.tabulation import compute_reward_matrix, compute_next_states
from structural_ddp_models.ddp.visuals import set_plot_style, plot_state_grids, plot_reward_profile
from structural_ddp_models.utils.logging_config import setup_logging

setup_logging('DEBUG', use_colors=False)

# %%
prob = cooper_haltiwanger_2006(theta=0.67, gamma=2.0, delta=0.15, beta=0.9,
                               sigma=0.3, rho=0.6, k_size=100, a_size=5, i_size=50)
k_grid, a_grid = prob.state_grids
(i_grid,) = prob.choice_grids

params, shock_params = EconomicParams(), ShockParams()
bounds = compute_capital_bounds(params, shock_params.stationary_std)
print(f"K grid: [{k_grid[0]:.4f}, {k_grid[-1]:.4f}], geometric mean {np.exp(np.log(k_grid).mean()):.4f}")
print(f"k_ss at mean productivity: {bounds.k_ss:.4f}")
print(f"a grid: {np.round(a_grid, 4)}")
print(f"Zero choice at index {int(np.flatnonzero(i_grid == 0.0)[0])} of {len(i_grid)}")

# %%
reward_matrix = compute_reward_matrix(prob)
transitions = compute_next_states(prob, n_nodes=7)
print(f"Reward matrix shape: {reward_matrix.shape}")
print(f"Next-capital table shape: {transitions['next_states'][0].shape}")

# %%
set_plot_style()
plot_state_grids(prob)
plot_reward_profile(prob)
plt.show()
