"""
DDP-specific grid configuration.

This module provides DDPGridConfig for discretization settings.
Keeps grid discretization separate from economic primitives.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

import numpy as np

from structural_ddp_models._defaults import (
    DEFAULT_A_SIZE,
    DEFAULT_I_MAX,
    DEFAULT_I_MIN,
    DEFAULT_I_SIZE,
    DEFAULT_K_SIZE,
    DEFAULT_N_STD,
)
from structural_ddp_models.economy import grids
from structural_ddp_models.economy.parameters import ShockParams, apply_overrides
from structural_ddp_models.economy.shocks import compute_ergodic_a_bounds
from structural_ddp_models.economy.steady_state import CapitalBounds
from structural_ddp_models.exceptions import InvalidParameterError


@dataclass(frozen=True)
class DDPGridConfig:
    """
    DDP-specific grid configuration settings.

    These are NOT economic primitives; they are numerical settings for the
    discretized problem handed to the solver.

    Attributes:
        k_size: Number of capital grid points (nK)
        a_size: Number of log-productivity grid points (na)
        i_size: Number of investment-rate choices (ni), zero included
        i_min: Lowest investment rate
        i_max: Highest investment rate
        n_std: Half-width of the productivity grid in stationary std devs

    Example:
        config = DDPGridConfig(k_size=150, a_size=8, i_size=100)
        i_grid = config.generate_choice_grid()
    """
    k_size: int = DEFAULT_K_SIZE
    a_size: int = DEFAULT_A_SIZE
    i_size: int = DEFAULT_I_SIZE
    i_min: float = DEFAULT_I_MIN
    i_max: float = DEFAULT_I_MAX
    n_std: float = DEFAULT_N_STD

    def __post_init__(self):
        """Validate grid settings."""
        for name in ("k_size", "a_size", "i_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidParameterError(f"{name} must be an integer. Got {value!r}")
            if value < 2:
                raise InvalidParameterError(f"{name} must be >= 2. Got {value}")

        if not self.i_min < self.i_max:
            raise InvalidParameterError(
                f"i_min must be < i_max. Got ({self.i_min}, {self.i_max})"
            )

        if self.n_std <= 0:
            raise InvalidParameterError(f"n_std must be > 0. Got {self.n_std}")

    @classmethod
    def with_overrides(
        cls,
        base: Optional[DDPGridConfig] = None,
        log_changes: bool = True,
        **overrides
    ) -> DDPGridConfig:
        """Update DDPGridConfig with strict validation and logging."""
        return apply_overrides(cls, base, log_changes, overrides)

    def generate_productivity_grid(self, shock_params: ShockParams) -> np.ndarray:
        """
        Log-productivity grid on +/- n_std stationary std devs.

        Args:
            shock_params: AR(1) parameters

        Returns:
            1D array of a_size log-productivity points
        """
        a_min, a_max = compute_ergodic_a_bounds(shock_params, self.n_std)
        return grids.productivity_grid(a_min, a_max, self.a_size)

    def generate_capital_grid(self, bounds: CapitalBounds) -> np.ndarray:
        """
        Exponentially spaced capital grid between the steady-state bounds.

        Args:
            bounds: Log-capital bounds from the steady-state solves

        Returns:
            1D array of k_size capital levels
        """
        return grids.capital_grid(bounds.log_k_min, bounds.log_k_max, self.k_size)

    def generate_choice_grid(self) -> np.ndarray:
        """Investment-rate grid of i_size points including zero."""
        return grids.investment_rate_grid(self.i_min, self.i_max, self.i_size)
