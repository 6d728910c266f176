"""
Type aliases and shape conventions for PGA2D.

Shape Conventions:
==================

Multivectors are stored as tensors of shape (..., 8). Any leading
dimensions form a batch shape that broadcasts through every operation,
exactly as ordinary elementwise torch arithmetic does.

Plain Cartesian data used by the non-graded helpers follows:
    - Coordinates: (..., 2) as [x, y]
    - Line coefficients: (..., 3) as [a, b, c] for ax + by + c = 0
    - Polygons: (V, 2) vertices in order, implicitly closed
"""

from typing import Tuple, Union
import torch


# =============================================================================
# Basic Type Aliases
# =============================================================================

# A coefficient handed to a constructor: a Python number or a tensor that
# supplies the batch shape
Coefficient = Union[float, torch.Tensor]

# Cartesian coordinates (..., 2)
CoordinateTensor = torch.Tensor

# Line coefficients (..., 3)
LineTensor = torch.Tensor

# Polygon vertices (V, 2)
PolygonTensor = torch.Tensor

# Axis-aligned bounding box as (min_xy, max_xy)
BoundingBox = Tuple[torch.Tensor, torch.Tensor]


MULTIVECTOR_SHAPE_CONVENTION: str = """
Multivector Shape Convention: (..., 8)
======================================

The last axis holds the coefficients in this order:
    [s, e0, e1, e2, e01, e20, e12, e012]

Semantic overlays:
    - Scalar:       s
    - Line:         e1*a + e2*b + e0*c        (ax + by + c = 0)
    - Point:        e20*x + e01*y + e12       (weight 1)
    - Ideal point:  e20*x + e01*y             (weight 0, a direction)
"""
