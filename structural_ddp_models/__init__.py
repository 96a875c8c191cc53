"""
structural_ddp_models

Structural economic models expressed as inputs to a discrete dynamic-programming solver.
"""

from structural_ddp_models.ddp import DDPGridConfig, DiscreteDynamicProblem, IntegrationMode
from structural_ddp_models.economy import EconomicParams, ShockParams, StandardNormalShock
from structural_ddp_models.exceptions import (
    ChoiceGridConstructionError,
    InvalidParameterError,
    SteadyStateConvergenceFailure,
    StructuralModelError,
)
from structural_ddp_models.models import cooper_haltiwanger_2006

__version__ = "0.1.0"

__all__ = [
    "cooper_haltiwanger_2006",
    "DiscreteDynamicProblem",
    "IntegrationMode",
    "DDPGridConfig",
    "EconomicParams",
    "ShockParams",
    "StandardNormalShock",
    "StructuralModelError",
    "InvalidParameterError",
    "SteadyStateConvergenceFailure",
    "ChoiceGridConstructionError",
]
