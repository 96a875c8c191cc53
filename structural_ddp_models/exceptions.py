"""
structural_ddp_models/exceptions.py

Exceptions raised while building a model.

Every error surfaces to the caller of the builder; nothing is recovered
locally and no partially built problem is ever returned.
"""

from typing import Optional


class StructuralModelError(Exception):
    """Base class for all model-construction errors."""


class InvalidParameterError(StructuralModelError, ValueError):
    """A parameter lies outside the domain the model equations assume."""


class SteadyStateConvergenceFailure(StructuralModelError, RuntimeError):
    """
    The deterministic steady-state system did not converge.

    Attributes:
        z: Log productivity at which the solve was attempted.
        reason: Message reported by the root finder.
    """

    def __init__(self, z: float, reason: Optional[str] = None):
        self.z = z
        self.reason = reason
        msg = f"Steady-state solve did not converge at z={z:.6f}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class ChoiceGridConstructionError(StructuralModelError, ValueError):
    """The investment-rate grid does not contain zero exactly once."""
