"""Planar ring primitives for the intersection engine.

This module provides the low-level utilities every clipping stage builds on:
- Orientation tests (2D cross product, left-of test)
- Infinite line intersection via a 2x2 linear solve
- Signed area (shoelace formula) and winding canonicalization
- Open/closed ring conversion and duplicate-vertex removal
- Convexity classification and point-in-triangle testing

Coordinates are (longitude, latitude) degrees treated as flat Cartesian
values. All functions are pure and stateless.
"""

import math

from rendezvous.domain import BBox, Point, Polygon, Ring

CLOSURE_TOLERANCE = 1e-8
DUPLICATE_TOLERANCE = 1e-10
PARALLEL_EPSILON = 1e-12


def cross(o: Point, a: Point, b: Point) -> float:
    """Calculate the 2D cross product of (a - o) and (b - o).

    Positive for a counter-clockwise (left) turn o -> a -> b, negative for a
    clockwise turn, zero when the three points are collinear.
    """
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def is_left(edge_start: Point, edge_end: Point, point: Point) -> bool:
    """Check whether point lies left of, or on, the directed line start -> end."""
    return cross(edge_start, edge_end, point) >= 0


def points_equal(a: Point, b: Point, tolerance: float = DUPLICATE_TOLERANCE) -> bool:
    """Check whether two points coincide within tolerance on both axes."""
    return abs(a[0] - b[0]) <= tolerance and abs(a[1] - b[1]) <= tolerance


def line_intersection(
    a1: Point,
    a2: Point,
    b1: Point,
    b2: Point,
    epsilon: float = PARALLEL_EPSILON,
) -> Point | None:
    """Find where the infinite line a1-a2 crosses the infinite line b1-b2.

    Solves the 2x2 system for the parameter along a1-a2. Near-parallel lines
    are reported as non-intersecting instead of dividing by a tiny value.

    Args:
        a1: First point on line A
        a2: Second point on line A
        b1: First point on line B
        b2: Second point on line B
        epsilon: Denominator magnitude below which lines count as parallel

    Returns:
        Intersection point, or None for parallel or coincident lines

    Examples:
        >>> line_intersection((0.0, 0.0), (2.0, 2.0), (0.0, 2.0), (2.0, 0.0))
        (1.0, 1.0)
    """
    dx1 = a2[0] - a1[0]
    dy1 = a2[1] - a1[1]
    dx2 = b2[0] - b1[0]
    dy2 = b2[1] - b1[1]
    denom = dx1 * dy2 - dy1 * dx2

    if abs(denom) < epsilon:
        return None

    t = ((b1[0] - a1[0]) * dy2 - (b1[1] - a1[1]) * dx2) / denom
    return (a1[0] + t * dx1, a1[1] + t * dy1)


def signed_area(ring: Ring) -> float:
    """Calculate the signed planar area of an open ring (shoelace formula).

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        ring: Open ring (closing vertex not repeated)

    Returns:
        Signed area in square degrees. Returns 0.0 for fewer than 3 points.

    Examples:
        >>> signed_area([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])
        1.0
        >>> signed_area([(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)])
        -1.0
    """
    n = len(ring)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += ring[i][0] * ring[j][1]
        area -= ring[j][0] * ring[i][1]

    return area / 2.0


def dedupe_ring(ring: Ring, tolerance: float = DUPLICATE_TOLERANCE) -> Ring:
    """Remove consecutive duplicate vertices, including a repeated closing vertex.

    Args:
        ring: Open or closed ring
        tolerance: Distance (per axis) under which vertices are duplicates

    Returns:
        Open ring with no duplicate consecutive vertices
    """
    result: Ring = []
    for point in ring:
        if result and points_equal(result[-1], point, tolerance):
            continue
        result.append(point)

    while len(result) > 1 and points_equal(result[0], result[-1], tolerance):
        result.pop()

    return result


def to_open_ring(polygon: Polygon, tolerance: float = CLOSURE_TOLERANCE) -> Ring:
    """Flatten a polygon's closed outer ring into an open vertex sequence.

    Args:
        polygon: Polygon in its external, closed form
        tolerance: Maximum first/last distance treated as a closing vertex

    Returns:
        Open ring, or an empty list when fewer than 3 distinct vertices remain
    """
    ring = list(polygon.ring)
    if len(ring) > 1 and points_equal(ring[0], ring[-1], tolerance):
        ring.pop()

    ring = dedupe_ring(ring)
    if len(ring) < 3:
        return []
    return ring


def close_ring(ring: Ring) -> Ring:
    """Return the closed form of an open ring (first vertex repeated at the end)."""
    if not ring:
        return []
    return [*ring, ring[0]]


def ring_to_polygon(ring: Ring) -> Polygon:
    """Wrap an open ring as a closed single-ring polygon."""
    return Polygon(coordinates=[close_ring(ring)])


def ensure_ccw(ring: Ring) -> Ring:
    """Return the ring wound counter-clockwise, reversing it if necessary."""
    if signed_area(ring) < 0:
        return ring[::-1]
    return list(ring)


def ring_bbox(ring: Ring) -> BBox:
    """Calculate the axis-aligned bounding box of a ring.

    Returns:
        BBox of the ring, or an all-zero box for an empty ring
    """
    if not ring:
        return BBox(0.0, 0.0, 0.0, 0.0)

    lons = [p[0] for p in ring]
    lats = [p[1] for p in ring]
    return BBox(min(lons), min(lats), max(lons), max(lats))


def is_convex(ring: Ring) -> bool:
    """Decide whether an open ring is convex.

    Walks every consecutive vertex triple (cyclically) and checks the sign of
    the turn at the middle vertex. Collinear triples are compatible with
    either orientation.

    Args:
        ring: Open ring

    Returns:
        True if all turns are non-negative or all are non-positive
    """
    n = len(ring)
    has_left = False
    has_right = False

    for i in range(n):
        turn = cross(ring[i - 1], ring[i], ring[(i + 1) % n])
        if turn > 0:
            has_left = True
        elif turn < 0:
            has_right = True

        if has_left and has_right:
            return False

    return True


def point_in_triangle(point: Point, a: Point, b: Point, c: Point) -> bool:
    """Check whether point lies inside or on the boundary of triangle abc.

    Works for either triangle orientation: the point is inside when the three
    edge cross products never take opposite signs.
    """
    d1 = cross(a, b, point)
    d2 = cross(b, c, point)
    d3 = cross(c, a, point)

    has_negative = d1 < 0 or d2 < 0 or d3 < 0
    has_positive = d1 > 0 or d2 > 0 or d3 > 0

    return not (has_negative and has_positive)


def point_on_segment(
    point: Point,
    seg_start: Point,
    seg_end: Point,
    tolerance: float = DUPLICATE_TOLERANCE,
) -> bool:
    """Check whether point lies strictly inside segment start-end.

    Endpoints themselves are excluded. The perpendicular distance from the
    segment must not exceed tolerance.
    """
    dx = seg_end[0] - seg_start[0]
    dy = seg_end[1] - seg_start[1]
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return False

    if points_equal(point, seg_start, tolerance) or points_equal(point, seg_end, tolerance):
        return False

    t = ((point[0] - seg_start[0]) * dx + (point[1] - seg_start[1]) * dy) / length_sq
    if t <= 0.0 or t >= 1.0:
        return False

    distance = abs(cross(seg_start, seg_end, point)) / math.sqrt(length_sq)
    return distance <= tolerance
