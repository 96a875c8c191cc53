"""
structural_ddp_models/ddp/problem.py

Problem description consumed by a discrete dynamic-programming solver.

The solver itself is an external collaborator. This module fixes the shape of
what it receives:

    DiscreteDynamicProblem(state_grids, choice_grids, reward, transition,
                           shock_distribution, beta, intdim)

with reward(state, choice) -> float and
transition(state, choice, shock) -> state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Tuple

import numpy as np

from structural_ddp_models.exceptions import InvalidParameterError

RewardFn = Callable[[Tuple[float, ...], float], float]
TransitionFn = Callable[[Tuple[float, ...], float, float], Tuple[float, ...]]


class IntegrationMode(str, Enum):
    """
    How the solver searches over choices when integrating the continuation value.

    ALL jointly searches every choice dimension. The separable modes let the
    solver split the problem; models with fixed adjustment costs cannot use them.
    """
    ALL = "All"
    SEPARABLE = "Separable"
    SEPARABLE_STATES = "Separable_States"
    SEPARABLE_EXOG_STATES = "Separable_ExogStates"


def _freeze_grid(name: str, grid: Any) -> np.ndarray:
    """Copy a grid into a read-only float array and check it is strictly increasing."""
    arr = np.array(grid, dtype=float)
    if arr.ndim != 1 or arr.size < 1:
        raise InvalidParameterError(f"{name} must be a non-empty 1D grid. Got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidParameterError(f"{name} contains non-finite values")
    if np.any(np.diff(arr) <= 0):
        raise InvalidParameterError(f"{name} must be strictly increasing")
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class DiscreteDynamicProblem:
    """
    Immutable bundle describing one discretized dynamic problem.

    Attributes:
        state_grids: Ordered tuple of 1D state grids, e.g. (k_grid, a_grid)
        choice_grids: Ordered tuple of 1D choice grids, e.g. (i_grid,)
        reward: (state_tuple, choice) -> period payoff
        transition: (state_tuple, choice, shock) -> next state tuple
        shock_distribution: Distribution of the exogenous shock
        beta: Discount factor in (0, 1)
        intdim: Integration mode selector
    """
    state_grids: Tuple[np.ndarray, ...]
    choice_grids: Tuple[np.ndarray, ...]
    reward: RewardFn
    transition: TransitionFn
    shock_distribution: Any
    beta: float
    intdim: IntegrationMode = IntegrationMode.ALL

    def __post_init__(self):
        if not self.state_grids or not self.choice_grids:
            raise InvalidParameterError("At least one state grid and one choice grid are required")

        # frozen=True: assign the normalized grids through object.__setattr__
        object.__setattr__(self, "state_grids", tuple(
            _freeze_grid(f"state_grids[{j}]", g) for j, g in enumerate(self.state_grids)
        ))
        object.__setattr__(self, "choice_grids", tuple(
            _freeze_grid(f"choice_grids[{j}]", g) for j, g in enumerate(self.choice_grids)
        ))

        if not callable(self.reward) or not callable(self.transition):
            raise InvalidParameterError("reward and transition must be callable")

        if not (0.0 < self.beta < 1.0):
            raise InvalidParameterError(f"beta must be in (0, 1). Got {self.beta}")

        object.__setattr__(self, "intdim", IntegrationMode(self.intdim))

    @property
    def state_shape(self) -> Tuple[int, ...]:
        return tuple(len(g) for g in self.state_grids)

    @property
    def choice_shape(self) -> Tuple[int, ...]:
        return tuple(len(g) for g in self.choice_grids)
