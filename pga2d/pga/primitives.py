"""
Geometric primitives in 2D Projective Geometric Algebra (PGA).

PGA2D represents geometric objects as follows:
- Lines: Grade-1 vectors (a*e1 + b*e2 + c*e0 for ax + by + c = 0)
- Points: Grade-2 bivectors (normalized: e12 + x*e20 + y*e01)
- Ideal points: Grade-2 bivectors with zero weight (x*e20 + y*e01)

Motion generators:
- Rotor: cos(θ/2) + sin(θ/2) * P for rotation by θ around point P
- Translator: 1 + ½ * ideal point

Key operations (see ``algebra``):
- Meet (∧): line ∧ line → point (argument order sets the sign)
- Join (∨): point ∨ point → line (argument order sets the orientation)
"""

from __future__ import annotations
from typing import Union
import torch

from .algebra import (
    Multivector,
    IDX_E0, IDX_E1, IDX_E2,
    IDX_E01, IDX_E20, IDX_E12,
    add,
    muls,
    scalar,
    _as_coefficient,
)
from ..core.constants import NUM_COMPONENTS, COORDINATE_DIM


def _coefficients(*values: Union[float, torch.Tensor]):
    """Convert to tensors and broadcast to a common batch shape."""
    tensors = [_as_coefficient(v) for v in values]
    dtype = tensors[0].dtype
    for t in tensors[1:]:
        dtype = torch.promote_types(dtype, t.dtype)
    return torch.broadcast_tensors(*[t.to(dtype) for t in tensors])


def line(
    a: Union[float, torch.Tensor],
    b: Union[float, torch.Tensor],
    c: Union[float, torch.Tensor]
) -> Multivector:
    """
    Create a line from the coefficients of ax + by + c = 0.

    In PGA2D, a line is represented as:
        l = a*e1 + b*e2 + c*e0

    Args:
        a, b: Normal direction components
        c: Offset

    Returns:
        Line multivector (grade-1 vector)
    """
    a, b, c = _coefficients(a, b, c)

    mv = torch.zeros(*a.shape, NUM_COMPONENTS, device=a.device, dtype=a.dtype)
    mv[..., IDX_E1] = a
    mv[..., IDX_E2] = b
    mv[..., IDX_E0] = c

    return Multivector(mv)


def point(
    x: Union[float, torch.Tensor],
    y: Union[float, torch.Tensor]
) -> Multivector:
    """
    Create a normalized PGA2D point from Cartesian coordinates.

    In PGA2D, a point is represented as:
        P = e12 + x*e20 + y*e01

    Args:
        x, y: Cartesian coordinates (scalars or tensors)

    Returns:
        Point multivector (grade-2 bivector)
    """
    x, y = _coefficients(x, y)

    mv = torch.zeros(*x.shape, NUM_COMPONENTS, device=x.device, dtype=x.dtype)

    # Homogeneous weight (normalized point has weight 1)
    mv[..., IDX_E12] = 1.0
    mv[..., IDX_E20] = x
    mv[..., IDX_E01] = y

    return Multivector(mv)


def ideal_point(
    x: Union[float, torch.Tensor],
    y: Union[float, torch.Tensor]
) -> Multivector:
    """
    Create an ideal point (point at infinity) from a direction.

    Ideal points have e12 component = 0 and represent directions.

    Args:
        x, y: Direction components

    Returns:
        Ideal point multivector
    """
    x, y = _coefficients(x, y)

    mv = torch.zeros(*x.shape, NUM_COMPONENTS, device=x.device, dtype=x.dtype)
    mv[..., IDX_E20] = x
    mv[..., IDX_E01] = y

    return Multivector(mv)


def point_from_tensor(coords: torch.Tensor) -> Multivector:
    """
    Create points from a tensor of coordinates.

    Args:
        coords: Tensor of shape (..., 2) containing [x, y]

    Returns:
        Point multivector
    """
    if coords.shape[-1] != COORDINATE_DIM:
        raise ValueError(f"Expected coordinates of size {COORDINATE_DIM}, got {coords.shape[-1]}")
    x, y = coords.unbind(dim=-1)
    return point(x, y)


def point_to_cartesian(p: Multivector) -> torch.Tensor:
    """
    Extract Cartesian coordinates from a PGA2D point.

    The coordinates are divided by the weight e12, so unnormalized points
    (e.g. the result of a meet) are handled. Ideal points have zero weight
    and give inf/NaN.

    Args:
        p: Point multivector

    Returns:
        Tensor of shape (..., 2) containing [x, y]
    """
    w = p.e12
    return torch.stack([p.e20 / w, p.e01 / w], dim=-1)


def line_to_coefficients(l: Multivector) -> torch.Tensor:
    """
    Extract the coefficients of ax + by + c = 0 from a line.

    Args:
        l: Line multivector

    Returns:
        Tensor of shape (..., 3) containing [a, b, c]
    """
    return torch.stack([l.e1, l.e2, l.e0], dim=-1)


def rotor(
    angle: Union[float, torch.Tensor],
    cx: Union[float, torch.Tensor] = 0.0,
    cy: Union[float, torch.Tensor] = 0.0
) -> Multivector:
    """
    Create a rotor for a rotation by `angle` around the point (cx, cy).

        R = cos(θ/2) + sin(θ/2) * P(cx, cy)

    The result is already normalized. Any real angle is accepted.

    Args:
        angle: Rotation angle in radians
        cx, cy: Center of rotation (defaults to origin)

    Returns:
        Rotor multivector (scalar + bivector)
    """
    angle, cx, cy = _coefficients(angle, cx, cy)
    half = angle / 2
    return add(scalar(torch.cos(half)), muls(point(cx, cy), torch.sin(half)))


def translator(
    dx: Union[float, torch.Tensor],
    dy: Union[float, torch.Tensor]
) -> Multivector:
    """
    Create a translator from a displacement.

        T = 1 + ½ * I(dx, -dy)

    where I is the ideal point. The generator is exact; nothing is
    approximated.

    Args:
        dx, dy: Displacement components

    Returns:
        Translator multivector (scalar + ideal bivector)
    """
    dx, dy = _coefficients(dx, dy)
    return add(scalar(torch.ones_like(dx)), muls(ideal_point(dx, -dy), 0.5))
