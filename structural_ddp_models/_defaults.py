"""
structural_ddp_models/_defaults.py

Centralized default constants for model construction.

This module contains ONLY constants with NO imports to avoid circular dependencies.
Both the parameter records and the steady-state solver read from here.
"""

# =============================================================================
# STEADY-STATE ROOT FINDER
# =============================================================================

DEFAULT_STEADY_STATE_GUESS = (1.1, 1.0)  # Seed for (V_K, log K)
DEFAULT_ROOT_METHOD = "hybr"             # MINPACK hybrid Powell (Newton-type)
DEFAULT_ROOT_TOL = 1e-10
DEFAULT_RESIDUAL_TOL = 1e-8              # Max |F| accepted as converged


# =============================================================================
# REFERENCE PRODUCTIVITY LEVELS (in stationary std devs of log productivity)
# =============================================================================

DEFAULT_Z_LOW_MULT = -2.0   # Lower capital bound solved at -2 * stda
DEFAULT_Z_HIGH_MULT = 3.0   # Upper capital bound solved at +3 * stda


# =============================================================================
# GRID DEFAULTS
# =============================================================================

DEFAULT_K_SIZE = 100
DEFAULT_A_SIZE = 5
DEFAULT_I_SIZE = 50
DEFAULT_I_MIN = -0.5
DEFAULT_I_MAX = 2.0
DEFAULT_N_STD = 3.0         # Productivity grid half-width in stationary std devs
DEFAULT_QUADRATURE_NODES = 7
