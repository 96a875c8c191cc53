"""
visuals.py

Visual diagnostics for a discretized investment problem.
This module is a PURE CONSUMER of DiscreteDynamicProblem; the builder never imports it.
"""

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from structural_ddp_models.ddp.problem import DiscreteDynamicProblem
from structural_ddp_models.ddp.tabulation import compute_reward_matrix


def set_plot_style():
    """Sets publication-quality plot defaults."""
    sns.set_theme(style="whitegrid", context="talk", palette="deep")
    plt.rcParams['figure.dpi'] = 100
    plt.rcParams['lines.linewidth'] = 2.5
    plt.rcParams['axes.titlesize'] = 16
    plt.rcParams['axes.labelsize'] = 14


def plot_state_grids(problem: DiscreteDynamicProblem):
    """
    Plots the node placement of the capital, productivity and choice grids.

    Returns:
        The matplotlib Figure.
    """
    k_grid, a_grid = problem.state_grids
    (i_grid,) = problem.choice_grids

    fig, axes = plt.subplots(3, 1, figsize=(12, 8))
    panels = [
        (k_grid, "Capital $K$ (log scale)", True),
        (a_grid, "Log productivity $a$", False),
        (i_grid, "Investment rate $i$", False),
    ]
    for ax, (grid, label, log_scale) in zip(axes, panels):
        ax.plot(grid, np.zeros_like(grid), "|", markersize=20)
        if log_scale:
            ax.set_xscale("log")
        ax.set_yticks([])
        ax.set_xlabel(label)

    # Mark the inaction choice
    axes[2].axvline(0.0, color="gray", linestyle="--", alpha=0.6)

    fig.tight_layout()
    return fig


def plot_reward_profile(
    problem: DiscreteDynamicProblem,
    k_idx: Optional[int] = None,
    a_idx: Optional[int] = None
):
    """
    Plots the period reward against the investment rate at one state.

    The jump at i = 0 shows the fixed adjustment costs.

    Args:
        problem: The discretized problem.
        k_idx: Capital index (defaults to the middle node).
        a_idx: Productivity index (defaults to the middle node).

    Returns:
        The matplotlib Figure.
    """
    k_grid, a_grid = problem.state_grids
    (i_grid,) = problem.choice_grids
    k_idx = len(k_grid) // 2 if k_idx is None else k_idx
    a_idx = len(a_grid) // 2 if a_idx is None else a_idx

    reward = compute_reward_matrix(problem)[k_idx, a_idx, :]

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(i_grid, reward, marker="o", markersize=4)
    ax.axvline(0.0, color="gray", linestyle="--", alpha=0.6)
    ax.set_title(f"Reward at $K$={k_grid[k_idx]:.3f}, $a$={a_grid[a_idx]:.3f}",
                 fontweight='bold', pad=12)
    ax.set_xlabel("Investment rate $i$")
    ax.set_ylabel("Period reward")
    fig.tight_layout()
    return fig
