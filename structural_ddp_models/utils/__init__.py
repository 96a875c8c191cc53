"""
structural_ddp_models/utils/__init__.py

Logging helpers.
"""

from structural_ddp_models.utils.logging_config import (
    ColorFormatter,
    setup_logging,
    disable_logging,
)

__all__ = [
    "ColorFormatter",
    "setup_logging",
    "disable_logging",
]
