"""
Economic parameters for the Cooper-Haltiwanger investment model.

This module provides:
- EconomicParams: technology, discounting and adjustment-cost primitives
- ShockParams: the AR(1) process for log productivity

It works in tandem with structural_ddp_models.ddp.DDPGridConfig (for numerical
grid settings), keeping economic fundamentals separate from discretization.
"""

from __future__ import annotations
import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type, TypeVar

import numpy as np

from structural_ddp_models.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _check_finite(record) -> None:
    """Reject NaN or infinite values in any field of a parameter record."""
    for f in dataclasses.fields(record):
        value = getattr(record, f.name)
        if not np.isfinite(value):
            raise InvalidParameterError(f"{f.name} must be finite. Got {value}")


def apply_overrides(
    cls: Type[T],
    base: Optional[T],
    log_changes: bool,
    overrides: Dict[str, Any],
) -> T:
    """
    Shared implementation of ``with_overrides`` for frozen parameter records.

    Unknown keys are rejected, changed fields are logged, and the new record
    is built through ``dataclasses.replace`` so ``__post_init__`` validation runs.
    """
    base = base or cls()

    # 1. Validate keys to prevent typos
    valid_keys = {f.name for f in dataclasses.fields(cls)}
    if unknown := set(overrides) - valid_keys:
        raise InvalidParameterError(
            f"Invalid override keys for {cls.__name__}: {sorted(unknown)}. "
            f"Valid: {sorted(valid_keys)}"
        )

    # 2. Log significant changes
    if log_changes:
        changes = [
            f"{k}: {getattr(base, k)} -> {v}"
            for k, v in overrides.items()
            if getattr(base, k) != v
        ]
        if changes:
            logger.info(f"{cls.__name__} overrides: {', '.join(changes)}")

    return dataclasses.replace(base, **overrides)


# =============================================================================
# SHOCK PARAMS
# =============================================================================

@dataclass(frozen=True)
class ShockParams:
    """
    Immutable container for the productivity process
    a' = rho * a + sigma * eps, eps ~ N(0, 1).

    Attributes:
        rho: Autocorrelation of log productivity, |rho| < 1
        sigma: Volatility of the innovation, sigma > 0
    """
    rho: float = 0.6
    sigma: float = 0.3

    def __post_init__(self):
        _check_finite(self)

        if not (-1.0 < self.rho < 1.0):
            raise InvalidParameterError(
                f"rho must be in (-1, 1) for a stationary process. Got {self.rho}"
            )

        if self.sigma <= 0:
            raise InvalidParameterError(f"sigma must be > 0. Got {self.sigma}")

    @classmethod
    def with_overrides(
        cls,
        base: Optional[ShockParams] = None,
        log_changes: bool = True,
        **overrides
    ) -> ShockParams:
        """Update ShockParams with strict validation and logging."""
        return apply_overrides(cls, base, log_changes, overrides)

    @property
    def stationary_std(self) -> float:
        """Standard deviation of the stationary distribution: sigma / sqrt(1 - rho^2)."""
        return float(self.sigma / np.sqrt(1.0 - self.rho ** 2))


# =============================================================================
# ECONOMIC PARAMS
# =============================================================================

@dataclass(frozen=True)
class EconomicParams:
    """
    Immutable container for the economic primitives of the
    Cooper and Haltiwanger (2006) investment problem.

    Attributes:
        beta: Discount factor
        theta: Returns to scale of the profit function K^theta * e^a
        delta: Depreciation rate
        gamma: Convex adjustment cost coefficient
        cost_fixed: Fixed adjustment cost proportional to capital (F)
        cost_sales: Fraction of revenue lost when adjusting (lambda)
        price_buy: Unit price of capital purchases (p_b)
        price_sell: Unit price of capital sales (p_s)

    Example:
        params = EconomicParams()  # Use defaults
        params = EconomicParams(gamma=1.0)  # Override one field
        params = EconomicParams.with_overrides(gamma=1.0)  # Same, with logging
    """
    beta: float = 0.9
    theta: float = 0.67
    delta: float = 0.15

    # Adjustment costs
    gamma: float = 2.0
    cost_fixed: float = 0.01
    cost_sales: float = 0.95

    # Capital prices
    price_buy: float = 1.0
    price_sell: float = 1.0

    def __post_init__(self):
        """Validate parameters immediately after initialization."""
        _check_finite(self)

        if not (0.0 < self.beta < 1.0):
            raise InvalidParameterError(f"beta must be in (0, 1). Got {self.beta}")

        # The Euler equation has an interior steady state only under decreasing returns
        if not (0.0 < self.theta < 1.0):
            raise InvalidParameterError(f"theta must be in (0, 1). Got {self.theta}")

        if not (0.0 <= self.delta <= 1.0):
            raise InvalidParameterError(f"delta must be in [0, 1]. Got {self.delta}")

        if self.gamma < 0:
            raise InvalidParameterError(f"gamma must be >= 0. Got {self.gamma}")

        if self.cost_fixed < 0:
            raise InvalidParameterError(f"cost_fixed must be >= 0. Got {self.cost_fixed}")

        if not (0.0 <= self.cost_sales <= 1.0):
            raise InvalidParameterError(f"cost_sales must be in [0, 1]. Got {self.cost_sales}")

        if self.price_buy <= 0 or self.price_sell <= 0:
            raise InvalidParameterError(
                f"Capital prices must be > 0. Got price_buy={self.price_buy}, "
                f"price_sell={self.price_sell}"
            )

    @classmethod
    def with_overrides(
        cls,
        base: Optional[EconomicParams] = None,
        log_changes: bool = True,
        **overrides
    ) -> EconomicParams:
        """
        Create (or update) EconomicParams with strict validation and logging.

        Args:
            base: Existing parameters to update. If None, uses defaults.
            log_changes: Whether to log the differences.
            **overrides: Key-value pairs of parameters to update.

        Returns:
            New EconomicParams instance.
        """
        return apply_overrides(cls, base, log_changes, overrides)

    @property
    def marginal_adjustment_value(self) -> float:
        """Marginal value of capital at the steady state, V_K = 1 + gamma."""
        return 1.0 + self.gamma
