"""
Tests for plain Cartesian helpers.

Where a helper has a counterpart in the graded representation, the tests
also check that the two agree.
"""

import pytest
import torch
import math

from pga2d.pga.algebra import meet, join, norm
from pga2d.pga.primitives import (
    line,
    point_from_tensor,
    line_to_coefficients,
)
from pga2d.utils.euclid import (
    distance,
    rotate,
    scale,
    translate,
    bounding_box,
    point_in_polygon,
    line_through,
    distance_point_line,
)


@pytest.fixture
def unit_square():
    return torch.tensor([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])


# =============================================================================
# Distances
# =============================================================================

class TestDistance:
    """Tests for point-point and point-line distances."""

    def test_distance_345(self):
        d = distance(torch.tensor([0.0, 0.0]), torch.tensor([3.0, 4.0]))
        assert torch.isclose(d, torch.tensor(5.0))

    def test_batched_distance(self):
        p = torch.zeros(3, 2)
        q = torch.tensor([[1.0, 0.0], [0.0, 2.0], [3.0, 4.0]])
        assert torch.allclose(distance(p, q), torch.tensor([1.0, 2.0, 5.0]))

    def test_rejects_wrong_coordinate_size(self):
        with pytest.raises(ValueError, match="Expected points of shape"):
            distance(torch.zeros(3), torch.zeros(3))

    def test_distance_to_line(self):
        """(0, 2) is sqrt(2) away from x - y = 0."""
        d = distance_point_line(torch.tensor([0.0, 2.0]), torch.tensor([1.0, -1.0, 0.0]))
        assert torch.isclose(d, torch.tensor(math.sqrt(2.0)))

    def test_point_on_line_has_zero_distance(self):
        d = distance_point_line(torch.tensor([1.0, 1.0]), torch.tensor([1.0, -1.0, 0.0]))
        assert d == 0.0

    def test_distance_to_line_ignores_scale(self):
        p = torch.tensor([2.0, 5.0])
        l = torch.tensor([3.0, 4.0, -1.0])
        assert torch.isclose(distance_point_line(p, l), distance_point_line(p, 7.0 * l))

    def test_distance_to_line_matches_incidence(self):
        """For a unit line the meet with a point carries the signed distance."""
        coords = torch.tensor([2.0, 5.0])
        l = line(0.6, 0.8, -1.0)
        incidence = meet(l, point_from_tensor(coords)).e012
        d = distance_point_line(coords, line_to_coefficients(l))
        assert torch.isclose(norm(l), torch.tensor(1.0))
        assert torch.isclose(incidence.abs(), d)

    def test_rejects_wrong_line_size(self):
        with pytest.raises(ValueError, match="Expected line of shape"):
            distance_point_line(torch.zeros(2), torch.zeros(2))


# =============================================================================
# Transformations
# =============================================================================

class TestTransformations:
    """Tests for rotate, scale and translate."""

    def test_rotate_quarter_turn(self):
        result = rotate(torch.tensor([1.0, 0.0]), math.pi / 2)
        assert torch.allclose(result, torch.tensor([0.0, 1.0]), atol=1e-6)

    def test_rotate_about_center(self):
        result = rotate(torch.tensor([2.0, 1.0]), math.pi, center=torch.tensor([1.0, 1.0]))
        assert torch.allclose(result, torch.tensor([0.0, 1.0]), atol=1e-6)

    def test_rotate_preserves_distance_to_center(self):
        p = torch.tensor([[3.0, -1.0], [0.5, 2.0]])
        center = torch.tensor([1.0, 1.0])
        result = rotate(p, 0.9, center=center)
        assert torch.allclose(distance(result, center), distance(p, center))

    def test_rotate_batched_angles(self):
        p = torch.tensor([[1.0, 0.0], [1.0, 0.0]])
        result = rotate(p, torch.tensor([0.0, math.pi]))
        assert torch.allclose(result, torch.tensor([[1.0, 0.0], [-1.0, 0.0]]), atol=1e-6)

    def test_scale_about_origin(self):
        result = scale(torch.tensor([1.0, -2.0]), 3.0)
        assert torch.equal(result, torch.tensor([3.0, -6.0]))

    def test_scale_about_center(self):
        result = scale(torch.tensor([3.0, 3.0]), 0.5, center=torch.tensor([1.0, 1.0]))
        assert torch.equal(result, torch.tensor([2.0, 2.0]))

    def test_scale_batched_factors(self):
        p = torch.ones(2, 2)
        result = scale(p, torch.tensor([2.0, -1.0]))
        assert torch.equal(result, torch.tensor([[2.0, 2.0], [-1.0, -1.0]]))

    def test_translate(self):
        result = translate(torch.tensor([1.0, 2.0]), torch.tensor([-1.0, 0.5]))
        assert torch.equal(result, torch.tensor([0.0, 2.5]))

    def test_translate_rejects_bad_offset(self):
        with pytest.raises(ValueError, match="Expected offset of shape"):
            translate(torch.zeros(2), torch.zeros(3))


# =============================================================================
# Point Sets
# =============================================================================

class TestBoundingBox:
    """Tests for axis-aligned bounding boxes."""

    def test_bounding_box(self):
        pts = torch.tensor([[1.0, 5.0], [-2.0, 3.0], [4.0, -1.0]])
        lo, hi = bounding_box(pts)
        assert torch.equal(lo, torch.tensor([-2.0, -1.0]))
        assert torch.equal(hi, torch.tensor([4.0, 5.0]))

    def test_batched_point_sets(self):
        pts = torch.tensor([
            [[0.0, 0.0], [1.0, 1.0]],
            [[2.0, -3.0], [-4.0, 5.0]],
        ])
        lo, hi = bounding_box(pts)
        assert torch.equal(lo, torch.tensor([[0.0, 0.0], [-4.0, -3.0]]))
        assert torch.equal(hi, torch.tensor([[1.0, 1.0], [2.0, 5.0]]))

    def test_empty_point_set_raises(self):
        with pytest.raises(ValueError, match="empty point set"):
            bounding_box(torch.zeros(0, 2))

    def test_single_point_raises(self):
        with pytest.raises(ValueError, match="empty point set"):
            bounding_box(torch.zeros(2))


class TestPointInPolygon:
    """Tests for the even-odd inside test."""

    def test_inside_square(self, unit_square):
        assert point_in_polygon(torch.tensor([0.5, 0.5]), unit_square)

    def test_outside_square(self, unit_square):
        assert not point_in_polygon(torch.tensor([1.5, 0.5]), unit_square)
        assert not point_in_polygon(torch.tensor([-0.1, 0.5]), unit_square)
        assert not point_in_polygon(torch.tensor([0.5, 2.0]), unit_square)

    def test_batched_queries(self, unit_square):
        pts = torch.tensor([[0.5, 0.5], [1.5, 0.5], [0.25, 0.75]])
        result = point_in_polygon(pts, unit_square)
        assert result.tolist() == [True, False, True]

    def test_concave_polygon(self):
        """An L shape: the notch at the top right is outside."""
        polygon = torch.tensor([
            [0.0, 0.0], [2.0, 0.0], [2.0, 1.0],
            [1.0, 1.0], [1.0, 2.0], [0.0, 2.0],
        ])
        pts = torch.tensor([[0.5, 1.5], [1.5, 0.5], [1.5, 1.5]])
        assert point_in_polygon(pts, polygon).tolist() == [True, True, False]

    def test_vertex_order_does_not_matter(self, unit_square):
        p = torch.tensor([0.3, 0.6])
        assert point_in_polygon(p, unit_square.flip(0)) == point_in_polygon(p, unit_square)

    def test_degenerate_polygon_raises(self):
        with pytest.raises(ValueError, match="at least 3 vertices"):
            point_in_polygon(torch.zeros(2), torch.tensor([[0.0, 0.0], [1.0, 1.0]]))


# =============================================================================
# Lines
# =============================================================================

class TestLineThrough:
    """Tests for the Cartesian line through two points."""

    def test_line_through_diagonal(self):
        l = line_through(torch.tensor([0.0, 0.0]), torch.tensor([1.0, 1.0]))
        assert torch.equal(l, torch.tensor([1.0, -1.0, 0.0]))

    def test_both_points_lie_on_line(self):
        p, q = torch.tensor([2.0, 3.0]), torch.tensor([-1.0, 5.0])
        a, b, c = line_through(p, q).tolist()
        assert abs(a * 2.0 + b * 3.0 + c) < 1e-6
        assert abs(a * -1.0 + b * 5.0 + c) < 1e-6

    def test_matches_join_of_the_same_points(self):
        p = torch.tensor([[0.0, 1.0], [3.0, -2.0]])
        q = torch.tensor([[4.0, 4.0], [-1.0, 0.5]])
        joined = join(point_from_tensor(p), point_from_tensor(q))
        assert torch.allclose(line_through(p, q), line_to_coefficients(joined))
