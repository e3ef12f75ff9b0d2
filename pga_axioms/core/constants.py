"""
Centralized constants for pga-axioms.

This module defines the numeric constants and default values used throughout
the library. Every comparison against zero (degenerate joins, parallel
meets, vanishing discriminants, clipping signs) goes through DEFAULT_EPS so
that no two parts of the engine disagree on what "zero" means.

Usage:
    from pga_axioms.core.constants import DEFAULT_EPS

    def my_function(eps: float = DEFAULT_EPS):
        ...
"""

import torch

# =============================================================================
# Numeric Constants
# =============================================================================

# Single tolerance for every comparison against zero
DEFAULT_EPS: float = 1e-6

# Coefficient dtype for multivectors built from Python floats
DEFAULT_DTYPE: torch.dtype = torch.float64


# =============================================================================
# Algebra Layout
# =============================================================================

# Number of basis blades in R(2,0,1)
BASIS_COUNT: int = 8

# Blade names in storage order
BASIS_ELEMENTS = ("1", "e0", "e1", "e2", "e01", "e20", "e12", "e012")

# Highest grade in the algebra (the pseudoscalar e012)
MAX_GRADE: int = 3


# =============================================================================
# Paper Defaults
# =============================================================================

# Fraction of the smaller canvas side covered by a centered sheet
DEFAULT_PAPER_FRACTION: float = 0.75

# Number of corners of a sheet
PAPER_CORNER_COUNT: int = 4


# =============================================================================
# Root Selection
# =============================================================================

AXIOM5_ROOT_FORWARD: str = "forward"
AXIOM5_ROOT_BACKWARD: str = "backward"
AXIOM5_ROOTS = (AXIOM5_ROOT_FORWARD, AXIOM5_ROOT_BACKWARD)


# =============================================================================
# Serialized Result Keys
# =============================================================================

KEY_LINE: str = "line"
KEY_POSITIVE: str = "positive"
KEY_NEGATIVE: str = "negative"
