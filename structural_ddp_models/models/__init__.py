"""
structural_ddp_models/models/__init__.py

Model builders. Each returns a DiscreteDynamicProblem.
"""

from structural_ddp_models.models.cooper_haltiwanger import cooper_haltiwanger_2006

__all__ = [
    "cooper_haltiwanger_2006",
]
