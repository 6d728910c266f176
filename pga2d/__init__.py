"""
PGA2D: 2D Euclidean Projective Geometric Algebra

A PyTorch library for arithmetic in R(2,0,1), where scalars, lines, points
and pseudoscalars are all 8-component multivectors and geometric
constructions are algebraic products.

Key Features:
- 8-component multivectors with optional batch dimensions
- Geometric, outer (meet), inner (dot) and regressive (join) products
- Reverse, dual, conjugate and involute
- Line, point, ideal point, rotor and translator constructors
- Plain Cartesian helpers for (x, y) data

API Design:
- Every operation is a pure function returning a new Multivector
- Multivector tensors follow the (..., 8) shape convention
- Coordinate tensors follow the (..., 2) shape convention

Example:
    >>> import pga2d
    >>> from pga2d.pga import line, meet, point_to_cartesian
    >>> p = meet(line(4.0, 5.0, 6.0), line(1.0, 2.0, 3.0))
    >>> point_to_cartesian(p)  # tensor([ 1., -2.])
"""

__version__ = "0.1.0"
__author__ = "PGA2D Contributors"

from . import core
from . import pga
from . import utils

__all__ = [
    "core",
    "pga",
    "utils",
]
