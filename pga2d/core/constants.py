"""
Centralized constants for PGA2D.

This module defines the fixed layout of a multivector in R(2,0,1) and the
default numeric tolerances used throughout the library.

Usage:
    from pga2d.core.constants import DEFAULT_ATOL, NUM_COMPONENTS

    def my_check(a, b, atol: float = DEFAULT_ATOL):
        ...
"""

from typing import Tuple

# =============================================================================
# Algebra Layout
# =============================================================================

# Number of basis blades in R(2,0,1)
NUM_COMPONENTS: int = 8

# Blade names in storage order
BLADE_NAMES: Tuple[str, ...] = ("s", "e0", "e1", "e2", "e01", "e20", "e12", "e012")

# Grade of each blade in storage order
BLADE_GRADES: Tuple[int, ...] = (0, 1, 1, 1, 2, 2, 2, 3)

# Highest grade (pseudoscalar)
MAX_GRADE: int = 3


# =============================================================================
# Numeric Constants
# =============================================================================

# Absolute tolerance for approximate comparison of coefficients
DEFAULT_ATOL: float = 1e-4

# Dimension of plain Cartesian coordinates
COORDINATE_DIM: int = 2

# Number of line coefficients (a, b, c) in ax + by + c = 0
LINE_COEFFICIENTS: int = 3
