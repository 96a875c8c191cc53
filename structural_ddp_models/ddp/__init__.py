"""
structural_ddp_models/ddp/__init__.py

Public API for the DDP problem description.

Tabulation (TensorFlow) and visuals (matplotlib) are imported from their own
modules so building a model never pulls them in.
"""

from structural_ddp_models.ddp.ddp_config import DDPGridConfig
from structural_ddp_models.ddp.problem import DiscreteDynamicProblem, IntegrationMode

__all__ = [
    "DDPGridConfig",
    "DiscreteDynamicProblem",
    "IntegrationMode",
]
