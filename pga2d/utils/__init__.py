"""
Utility functions for PGA2D.

Includes approximate comparison of multivectors and plain Cartesian
helpers that work without the graded representation.
"""

from .comparison import approx_equal, assert_multivector_close
from .euclid import (
    distance,
    rotate,
    scale,
    translate,
    bounding_box,
    point_in_polygon,
    line_through,
    distance_point_line,
)

__all__ = [
    # Comparison
    "approx_equal",
    "assert_multivector_close",
    # Cartesian helpers
    "distance",
    "rotate",
    "scale",
    "translate",
    "bounding_box",
    "point_in_polygon",
    "line_through",
    "distance_point_line",
]
