"""
Plain Cartesian helpers for 2D points and lines.

These functions work on coordinate tensors of shape (..., 2) and line
coefficient tensors of shape (..., 3) ([a, b, c] for ax + by + c = 0).
They do not use the graded multivector representation; use
``pga2d.pga`` for that.

All functions support batched inputs.
"""

from typing import Optional, Union
import torch

from ..core.constants import COORDINATE_DIM, LINE_COEFFICIENTS
from ..core.types import BoundingBox, CoordinateTensor, LineTensor, PolygonTensor


def _check_coordinates(p: torch.Tensor, name: str = "points") -> None:
    if p.dim() == 0 or p.shape[-1] != COORDINATE_DIM:
        raise ValueError(f"Expected {name} of shape (..., {COORDINATE_DIM}), got {tuple(p.shape)}")


def distance(p: CoordinateTensor, q: CoordinateTensor) -> torch.Tensor:
    """
    Euclidean distance between points.

    Args:
        p, q: Points of shape (..., 2)

    Returns:
        Distances of shape (...)
    """
    _check_coordinates(p)
    _check_coordinates(q)
    return torch.norm(p - q, dim=-1)


def rotate(
    p: CoordinateTensor,
    angle: Union[float, torch.Tensor],
    center: Optional[CoordinateTensor] = None
) -> torch.Tensor:
    """
    Rotate points counter-clockwise by angle around center.

    Args:
        p: Points of shape (..., 2)
        angle: Rotation angle in radians (scalar or broadcastable to (...))
        center: Center of rotation (defaults to origin)

    Returns:
        Rotated points of shape (..., 2)
    """
    _check_coordinates(p)
    angle = torch.as_tensor(angle, dtype=p.dtype, device=p.device)
    if center is not None:
        p = p - center

    cos_a, sin_a = torch.cos(angle), torch.sin(angle)
    x, y = p.unbind(dim=-1)
    rotated = torch.stack([cos_a * x - sin_a * y, sin_a * x + cos_a * y], dim=-1)

    if center is not None:
        rotated = rotated + center
    return rotated


def scale(
    p: CoordinateTensor,
    factor: Union[float, torch.Tensor],
    center: Optional[CoordinateTensor] = None
) -> torch.Tensor:
    """
    Scale points uniformly about center.

    Args:
        p: Points of shape (..., 2)
        factor: Scale factor (scalar or broadcastable to (...))
        center: Fixed point of the scaling (defaults to origin)

    Returns:
        Scaled points of shape (..., 2)
    """
    _check_coordinates(p)
    factor = torch.as_tensor(factor, dtype=p.dtype, device=p.device)
    if factor.dim() > 0:
        factor = factor.unsqueeze(-1)
    if center is None:
        return p * factor
    return (p - center) * factor + center


def translate(p: CoordinateTensor, offset: CoordinateTensor) -> torch.Tensor:
    """
    Translate points by offset.

    Args:
        p: Points of shape (..., 2)
        offset: Displacement of shape (..., 2)

    Returns:
        Translated points of shape (..., 2)
    """
    _check_coordinates(p)
    _check_coordinates(offset, "offset")
    return p + offset


def bounding_box(points: CoordinateTensor) -> BoundingBox:
    """
    Axis-aligned bounding box of a point set.

    Args:
        points: Points of shape (..., N, 2)

    Returns:
        (min_xy, max_xy), each of shape (..., 2)
    """
    _check_coordinates(points)
    if points.dim() < 2 or points.shape[-2] == 0:
        raise ValueError("Cannot compute the bounding box of an empty point set")
    return points.min(dim=-2).values, points.max(dim=-2).values


def point_in_polygon(points: CoordinateTensor, polygon: PolygonTensor) -> torch.Tensor:
    """
    Test whether points lie inside a polygon (even-odd rule).

    Casts a ray towards +x from every point and counts edge crossings.
    Points exactly on an edge may be classified either way.

    Args:
        points: Query points of shape (..., 2)
        polygon: Vertices of shape (V, 2), implicitly closed

    Returns:
        Boolean tensor of shape (...)
    """
    _check_coordinates(points)
    _check_coordinates(polygon, "polygon")
    if polygon.dim() != 2 or polygon.shape[0] < 3:
        raise ValueError(f"Polygon needs at least 3 vertices, got shape {tuple(polygon.shape)}")

    polygon = polygon.to(points.dtype)
    start = polygon                                  # (V, 2)
    end = torch.roll(polygon, shifts=-1, dims=0)     # (V, 2)

    px = points[..., 0].unsqueeze(-1)                # (..., 1)
    py = points[..., 1].unsqueeze(-1)
    x1, y1 = start[:, 0], start[:, 1]                # (V,)
    x2, y2 = end[:, 0], end[:, 1]

    # Edge straddles the horizontal line through the point
    straddles = (y1 > py) != (y2 > py)

    # x coordinate where the edge crosses that line; dy is never zero
    # where straddles holds
    dy = torch.where(straddles, y2 - y1, torch.ones_like(y2 - y1))
    x_cross = x1 + (py - y1) * (x2 - x1) / dy

    crossings = (straddles & (px < x_cross)).sum(dim=-1)
    return crossings % 2 == 1


def line_through(p: CoordinateTensor, q: CoordinateTensor) -> torch.Tensor:
    """
    Coefficients of the line through two points.

    The line (a, b, c) satisfies ax + by + c = 0 for both points, with
    normal (a, b) = (q_y - p_y, p_x - q_x).

    Args:
        p, q: Points of shape (..., 2)

    Returns:
        Line coefficients of shape (..., 3)
    """
    _check_coordinates(p)
    _check_coordinates(q)
    px, py = p.unbind(dim=-1)
    qx, qy = q.unbind(dim=-1)
    a = qy - py
    b = px - qx
    c = qx * py - px * qy
    return torch.stack([a, b, c], dim=-1)


def distance_point_line(p: CoordinateTensor, line: LineTensor) -> torch.Tensor:
    """
    Unsigned distance from points to lines.

    Args:
        p: Points of shape (..., 2)
        line: Line coefficients of shape (..., 3)

    Returns:
        Distances of shape (...)
    """
    _check_coordinates(p)
    if line.dim() == 0 or line.shape[-1] != LINE_COEFFICIENTS:
        raise ValueError(f"Expected line of shape (..., {LINE_COEFFICIENTS}), got {tuple(line.shape)}")
    a, b, c = line.unbind(dim=-1)
    x, y = p.unbind(dim=-1)
    return torch.abs(a * x + b * y + c) / torch.sqrt(a * a + b * b)
