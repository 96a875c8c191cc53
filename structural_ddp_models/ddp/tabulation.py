"""
structural_ddp_models/ddp/tabulation.py

Tabulates a DiscreteDynamicProblem on its grids for array-based solvers.

A GPU value-iteration solver wants the reward on the full (state, choice)
product and the next-period states at the shock quadrature nodes, not the
callables. The reward and transition functions built by this package broadcast
over NumPy arrays, so each table is a single call on an open mesh.
"""

from typing import Dict, List, Tuple

import numpy as np
import tensorflow as tf

from structural_ddp_models._defaults import DEFAULT_QUADRATURE_NODES
from structural_ddp_models.ddp.problem import DiscreteDynamicProblem


def convert_to_tf(*args: np.ndarray) -> List[tf.Tensor]:
    """Converts NumPy arrays into TensorFlow constants."""
    return [tf.constant(arg, dtype=tf.float32) for arg in args]


def _open_mesh(problem: DiscreteDynamicProblem, extra: Tuple[np.ndarray, ...] = ()):
    """
    Open mesh over states, choices and any extra axes.

    Returns:
        (states, choice, extra) where each piece is broadcast-ready.
        A single choice grid is passed as a bare array, several as a tuple.
    """
    mesh = np.meshgrid(*problem.state_grids, *problem.choice_grids, *extra,
                       indexing="ij", sparse=True)
    n_s, n_c = len(problem.state_grids), len(problem.choice_grids)
    states = tuple(mesh[:n_s])
    choices = tuple(mesh[n_s:n_s + n_c])
    choice = choices[0] if n_c == 1 else choices
    return states, choice, tuple(mesh[n_s + n_c:])


def compute_reward_matrix(problem: DiscreteDynamicProblem) -> np.ndarray:
    """
    Computes the reward on every (state, choice) combination.

    Returns:
        np.ndarray of shape state_shape + choice_shape.
        For the investment model: (k_size, a_size, i_size).
    """
    states, choice, _ = _open_mesh(problem)
    reward = problem.reward(states, choice)
    return np.broadcast_to(reward, problem.state_shape + problem.choice_shape).copy()


def compute_next_states(
    problem: DiscreteDynamicProblem,
    n_nodes: int = DEFAULT_QUADRATURE_NODES
) -> Dict[str, np.ndarray]:
    """
    Evaluates the transition at every (state, choice, quadrature node).

    Args:
        problem: The discretized problem.
        n_nodes: Number of quadrature nodes for the shock.

    Returns:
        Dict containing:
            - "next_states": tuple of arrays, one per state variable, each of
              shape state_shape + choice_shape + (n_nodes,)
            - "nodes": (n_nodes,) shock nodes
            - "weights": (n_nodes,) quadrature weights summing to one
    """
    nodes, weights = problem.shock_distribution.quadrature(n_nodes)
    states, choice, (eps,) = _open_mesh(problem, extra=(nodes,))
    full_shape = problem.state_shape + problem.choice_shape + (len(nodes),)

    next_states = tuple(
        np.broadcast_to(x, full_shape).copy()
        for x in problem.transition(states, choice, eps)
    )
    return {"next_states": next_states, "nodes": nodes, "weights": weights}


def tabulate_problem(
    problem: DiscreteDynamicProblem,
    n_nodes: int = DEFAULT_QUADRATURE_NODES
) -> Dict[str, tf.Tensor]:
    """
    Reward and transition tables as float32 TensorFlow constants.

    Returns:
        Dict with "reward_matrix", "weights" and one "next_state_{j}" entry per
        state variable.
    """
    reward_matrix = compute_reward_matrix(problem)
    transitions = compute_next_states(problem, n_nodes)

    reward_tf, weights_tf = convert_to_tf(reward_matrix, transitions["weights"])
    tables = {"reward_matrix": reward_tf, "weights": weights_tf}
    for j, tf_state in enumerate(convert_to_tf(*transitions["next_states"])):
        tables[f"next_state_{j}"] = tf_state
    return tables
