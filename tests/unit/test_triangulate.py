"""Tests for ear-clipping triangulation."""

import math

import pytest

from rendezvous.core.geometry import cross, signed_area
from rendezvous.core.triangulate import triangulate

L_SHAPE = [(0.0, 0.0), (10.0, 0.0), (10.0, 5.0), (5.0, 5.0), (5.0, 10.0), (0.0, 10.0)]


def triangle_area(t) -> float:
    return signed_area(list(t))


def star(n: int, r_out: float, r_in: float) -> list[tuple[float, float]]:
    """Open CCW star with n points."""
    ring = []
    for i in range(2 * n):
        r = r_out if i % 2 == 0 else r_in
        angle = math.pi * i / n
        ring.append((r * math.cos(angle), r * math.sin(angle)))
    return ring


class TestTriangulate:
    """Tests for triangulate()."""

    def test_too_few_vertices(self) -> None:
        assert triangulate([]) == []
        assert triangulate([(0, 0), (1, 0)]) == []

    def test_single_triangle(self) -> None:
        """A triangle is returned as-is, wound CCW."""
        result = triangulate([(0, 0), (0, 1), (1, 0)])
        assert len(result) == 1
        assert cross(*result[0]) > 0

    def test_square(self) -> None:
        result = triangulate([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert len(result) == 2
        assert sum(triangle_area(t) for t in result) == pytest.approx(1.0)

    def test_concave_l_shape(self) -> None:
        """An L-shape splits into N - 2 triangles covering its area."""
        result = triangulate(L_SHAPE)
        assert len(result) == 4
        assert sum(triangle_area(t) for t in result) == pytest.approx(75.0)

    def test_triangles_are_ccw(self) -> None:
        for t in triangulate(L_SHAPE):
            assert cross(*t) > 0

    def test_clockwise_input(self) -> None:
        """Clockwise rings triangulate to the same area with CCW triangles."""
        result = triangulate(list(reversed(L_SHAPE)))
        assert len(result) == 4
        assert all(cross(*t) > 0 for t in result)
        assert sum(triangle_area(t) for t in result) == pytest.approx(75.0)

    def test_star(self) -> None:
        """A star with many reflex vertices is fully covered."""
        ring = star(7, 10.0, 4.0)
        result = triangulate(ring)
        assert len(result) == len(ring) - 2
        assert sum(triangle_area(t) for t in result) == pytest.approx(signed_area(ring))

    def test_degenerate_input_terminates(self) -> None:
        """Collinear input exhausts the iteration cap instead of looping."""
        result = triangulate([(0, 0), (1, 0), (2, 0), (3, 0)])
        assert len(result) == 1
