"""
Core module for PGA2D.

Contains:
- Constants: Algebra layout and default tolerances
- Types: Type aliases for coefficient and coordinate tensors
"""

from .constants import (
    NUM_COMPONENTS,
    BLADE_NAMES,
    BLADE_GRADES,
    MAX_GRADE,
    DEFAULT_ATOL,
    COORDINATE_DIM,
    LINE_COEFFICIENTS,
)

from .types import (
    Coefficient,
    CoordinateTensor,
    LineTensor,
    PolygonTensor,
    BoundingBox,
    MULTIVECTOR_SHAPE_CONVENTION,
)

__all__ = [
    # Constants
    "NUM_COMPONENTS",
    "BLADE_NAMES",
    "BLADE_GRADES",
    "MAX_GRADE",
    "DEFAULT_ATOL",
    "COORDINATE_DIM",
    "LINE_COEFFICIENTS",
    # Types
    "Coefficient",
    "CoordinateTensor",
    "LineTensor",
    "PolygonTensor",
    "BoundingBox",
    "MULTIVECTOR_SHAPE_CONVENTION",
]
