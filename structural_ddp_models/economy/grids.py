"""
structural_ddp_models/economy/grids.py

Discretized state and choice grids for the investment model.

- Capital: geometric grid between two steady-state bounds (capital evolves
  multiplicatively, K' = (1 - delta + i) * K).
- Productivity: evenly spaced in logs, symmetric about zero.
- Investment rate: evenly spaced, always containing i = 0 exactly once,
  since the fixed adjustment costs jump at zero.
"""

import logging

import numpy as np

from structural_ddp_models.exceptions import ChoiceGridConstructionError, InvalidParameterError

logger = logging.getLogger(__name__)

# Nodes this many ulps (relative to the widest bound) from zero are zero
_ZERO_TOL_ULPS = 8


def _check_size(name: str, n: int) -> None:
    if n < 2:
        raise InvalidParameterError(f"{name} must be >= 2. Got {n}")


def capital_grid(log_k_min: float, log_k_max: float, k_size: int) -> np.ndarray:
    """
    Exponentially spaced capital grid.

    Args:
        log_k_min: Lower bound of log capital.
        log_k_max: Upper bound of log capital.
        k_size: Number of nodes.

    Returns:
        (k_size,) array in levels, strictly increasing and positive.
    """
    _check_size("k_size", k_size)
    if not log_k_min < log_k_max:
        raise InvalidParameterError(
            f"Capital bounds must satisfy log_k_min < log_k_max. Got ({log_k_min}, {log_k_max})"
        )
    return np.exp(np.linspace(log_k_min, log_k_max, k_size))


def productivity_grid(a_min: float, a_max: float, a_size: int) -> np.ndarray:
    """Evenly spaced log-productivity grid on [a_min, a_max]."""
    _check_size("a_size", a_size)
    return np.linspace(a_min, a_max, a_size)


def _snap_to_zero(grid: np.ndarray, tol: float) -> np.ndarray:
    """Copy of grid with nodes inside [-tol, tol] set to exactly 0.0."""
    grid = np.array(grid, dtype=float)
    grid[np.abs(grid) <= tol] = 0.0
    return grid


def ensure_zero_choice(
    grid: np.ndarray,
    i_min: float,
    i_max: float
) -> np.ndarray:
    """
    Make sure an evenly spaced investment-rate grid contains zero.

    Nodes within a few ulps of zero (linspace rounding) count as zero and are
    set to 0.0 first. If zero is then a node the grid is returned. Otherwise
    the grid is rebuilt with one node fewer on [i_min, i_max], zero is
    prepended and the result sorted, so the size is preserved.

    When the shorter grid itself hits zero (e.g. 7 nodes on [-0.5, 2.0]),
    prepending would duplicate it; the node of the original grid closest to
    zero is set to zero instead. That grid is no longer evenly spaced around
    the snapped node: 4 nodes on [-1, 1] give [-1, -1/3, 0, 1].

    Args:
        grid: Evenly spaced grid on [i_min, i_max].
        i_min: Lower bound of the investment rate.
        i_max: Upper bound of the investment rate.

    Returns:
        Sorted array of len(grid) nodes.

    Raises:
        ChoiceGridConstructionError: If the result does not hold zero exactly once.
    """
    tol = _ZERO_TOL_ULPS * np.finfo(float).eps * max(abs(i_min), abs(i_max))
    grid = _snap_to_zero(grid, tol)
    if not np.any(grid == 0.0):
        shorter = _snap_to_zero(np.linspace(i_min, i_max, len(grid) - 1), tol)
        if np.any(shorter == 0.0):
            logger.debug(
                f"{len(grid) - 1}-node grid on [{i_min}, {i_max}] already holds zero; "
                f"snapping the nearest node to zero"
            )
            grid[np.argmin(np.abs(grid))] = 0.0
        else:
            grid = np.sort(np.concatenate(([0.0], shorter)))

    n_zero = int(np.count_nonzero(grid == 0.0))
    if n_zero != 1:
        raise ChoiceGridConstructionError(
            f"Investment grid on [{i_min}, {i_max}] with {len(grid)} nodes "
            f"contains zero {n_zero} times, expected exactly once"
        )
    return grid


def investment_rate_grid(i_min: float, i_max: float, i_size: int) -> np.ndarray:
    """
    Investment-rate choice grid of i_size nodes including zero.

    Returns:
        (i_size,) array, sorted ascending.
    """
    _check_size("i_size", i_size)
    if not i_min < i_max:
        raise InvalidParameterError(f"i_min must be < i_max. Got ({i_min}, {i_max})")
    return ensure_zero_choice(np.linspace(i_min, i_max, i_size), i_min, i_max)
