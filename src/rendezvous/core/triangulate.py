"""Ear-clipping triangulation of simple polygons.

Vertices are tracked through a doubly linked list of indices so that removing
an ear is O(1) instead of shifting an array.
"""

import logging

from rendezvous.core.geometry import cross, point_in_triangle, points_equal, signed_area
from rendezvous.domain import Point, Ring, Triangle

logger = logging.getLogger(__name__)


def _ccw_triangle(a: Point, b: Point, c: Point) -> Triangle:
    """Order a triangle's corners counter-clockwise."""
    if cross(a, b, c) < 0:
        return (a, c, b)
    return (a, b, c)


def _is_ear(
    ring: Ring,
    next_index: list[int],
    prev_idx: int,
    ear_idx: int,
    next_idx: int,
    orientation: float,
) -> bool:
    """Check whether the triangle at ear_idx can be clipped off.

    The corner must turn the same way as the ring (strictly) and no other
    remaining vertex may lie inside or on the candidate triangle.
    """
    a = ring[prev_idx]
    b = ring[ear_idx]
    c = ring[next_idx]

    if cross(a, b, c) * orientation <= 0:
        return False

    k = next_index[next_idx]
    while k != prev_idx:
        p = ring[k]
        if not (points_equal(p, a) or points_equal(p, b) or points_equal(p, c)):
            if point_in_triangle(p, a, b, c):
                return False
        k = next_index[k]

    return True


def triangulate(ring: Ring) -> list[Triangle]:
    """Decompose a simple open ring into triangles by ear clipping.

    A ring of N vertices yields N - 2 counter-clockwise triangles. The scan
    is capped at N * N steps; when numerically degenerate input exhausts the
    cap, the triangles found so far are returned together with the residual
    triangle at the current position.

    Args:
        ring: Open simple ring, either winding, convex or concave

    Returns:
        List of (a, b, c) triangles wound counter-clockwise. Empty for fewer
        than 3 vertices.

    Examples:
        >>> square = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
        >>> len(triangulate(square))
        2
    """
    n = len(ring)
    if n < 3:
        return []
    if n == 3:
        return [_ccw_triangle(ring[0], ring[1], ring[2])]

    orientation = 1.0 if signed_area(ring) >= 0 else -1.0

    prev_index = [(i - 1) % n for i in range(n)]
    next_index = [(i + 1) % n for i in range(n)]

    triangles: list[Triangle] = []
    remaining = n
    current = 0
    max_iterations = n * n
    iterations = 0

    while remaining > 3:
        if iterations >= max_iterations:
            logger.debug(
                "Ear clipping stopped at iteration cap (vertices=%d, remaining=%d)",
                n,
                remaining,
            )
            break
        iterations += 1

        p = prev_index[current]
        q = next_index[current]

        if _is_ear(ring, next_index, p, current, q, orientation):
            triangles.append(_ccw_triangle(ring[p], ring[current], ring[q]))
            next_index[p] = q
            prev_index[q] = p
            remaining -= 1
            current = p
        else:
            current = q

    p = prev_index[current]
    q = next_index[current]
    triangles.append(_ccw_triangle(ring[p], ring[current], ring[q]))

    return triangles
