"""Geodesic helpers and planar measurements for polygons.

Two kinds of functions live here:
- Spherical forward projection (destination_point, circle_to_polygon) using
  the great-circle destination formula on a sphere of mean Earth radius
- Planar approximations (bounding_box, centroid, area) that project degrees
  to local metres around the centroid latitude

The planar measurements are not geodesically exact. They are accurate for
regional extents (tens of kilometres) and degrade near the poles or over very
large areas.
"""

import math

from rendezvous.core.geometry import ring_bbox
from rendezvous.domain import BBox, Coordinate, Point, Polygon
from rendezvous.exceptions import InvalidGeometryInputError

EARTH_RADIUS_M = 6_371_008.8
METRES_PER_DEGREE = 111_320.0
DEFAULT_CIRCLE_SEGMENTS = 64


def _require_finite(name: str, value: float) -> None:
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvalidGeometryInputError(name, value, "must be a finite number")


def _require_point(name: str, point: Point) -> None:
    if len(point) < 2:
        raise InvalidGeometryInputError(name, point, "must be a (lon, lat) pair")
    _require_finite(f"{name} longitude", point[0])
    _require_finite(f"{name} latitude", point[1])


def destination_point(start: Point, distance_m: float, bearing_deg: float) -> Point:
    """Project a point along a great circle.

    Args:
        start: (lon, lat) origin in degrees
        distance_m: Distance to travel in metres (>= 0)
        bearing_deg: Initial bearing in degrees clockwise from north

    Returns:
        (lon, lat) destination, longitude normalised to [-180, 180)

    Raises:
        InvalidGeometryInputError: If any input is non-finite or the
            distance is negative

    Examples:
        >>> lon, lat = destination_point((0.0, 0.0), 1000.0, 0.0)
        >>> round(lat, 6)
        0.008993
    """
    _require_point("start", start)
    _require_finite("distance", distance_m)
    _require_finite("bearing", bearing_deg)
    if distance_m < 0:
        raise InvalidGeometryInputError("distance", distance_m, "must not be negative")

    lon1 = math.radians(start[0])
    lat1 = math.radians(start[1])
    theta = math.radians(bearing_deg)
    delta = distance_m / EARTH_RADIUS_M

    sin_lat2 = math.sin(lat1) * math.cos(delta) + math.cos(lat1) * math.sin(delta) * math.cos(theta)
    lat2 = math.asin(max(-1.0, min(1.0, sin_lat2)))
    lon2 = lon1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(lat1),
        math.cos(delta) - math.sin(lat1) * math.sin(lat2),
    )

    lon_deg = (math.degrees(lon2) + 540.0) % 360.0 - 180.0
    return (lon_deg, math.degrees(lat2))


def circle_to_polygon(
    centre: Point,
    radius_m: float,
    segments: int = DEFAULT_CIRCLE_SEGMENTS,
) -> Polygon:
    """Approximate a circle on the sphere with a closed polygon.

    Args:
        centre: (lon, lat) centre in degrees
        radius_m: Radius in metres (> 0)
        segments: Number of evenly spaced bearings to sample (>= 3)

    Returns:
        Polygon whose ring holds segments + 1 coordinates, first == last

    Raises:
        InvalidGeometryInputError: If the centre or radius is not finite,
            the radius is not positive, or there are fewer than 3 segments
    """
    _require_point("centre", centre)
    _require_finite("radius", radius_m)
    if radius_m <= 0:
        raise InvalidGeometryInputError("radius", radius_m, "must be positive")
    if isinstance(segments, bool) or not isinstance(segments, int) or segments < 3:
        raise InvalidGeometryInputError("segments", segments, "must be an integer >= 3")

    ring = [
        destination_point(centre, radius_m, 360.0 * i / segments)
        for i in range(segments)
    ]
    ring.append(ring[0])
    return Polygon(coordinates=[ring])


def bounding_box(polygon: Polygon) -> BBox:
    """Calculate the bounding box of a polygon's outer ring."""
    return ring_bbox(polygon.ring)


def centroid(polygon: Polygon) -> Coordinate:
    """Calculate the vertex-mean centroid of a closed ring.

    The closing vertex is excluded so it is not counted twice.

    Returns:
        Mean position, or (0, 0) for rings with fewer than 2 coordinates
    """
    ring = polygon.ring
    if len(ring) < 2:
        return Coordinate(lat=0.0, lon=0.0)

    n = len(ring) - 1
    sum_lon = sum(p[0] for p in ring[:n])
    sum_lat = sum(p[1] for p in ring[:n])
    return Coordinate(lat=sum_lat / n, lon=sum_lon / n)


def area(polygon: Polygon) -> float:
    """Approximate the area of a polygon in square metres.

    Degrees are scaled to metres with 111,320 m per degree of latitude and
    111,320 * cos(centroid latitude) m per degree of longitude, then the
    shoelace formula is applied.

    Returns:
        Unsigned area in square metres, 0.0 for rings with fewer than 4
        closed coordinates
    """
    ring = polygon.ring
    if len(ring) < 4:
        return 0.0

    c = centroid(polygon)
    m_per_deg_lat = METRES_PER_DEGREE
    m_per_deg_lon = METRES_PER_DEGREE * math.cos(math.radians(c.lat))

    total = 0.0
    n = len(ring) - 1
    for i in range(n):
        j = (i + 1) % n
        xi, yi = ring[i][0] * m_per_deg_lon, ring[i][1] * m_per_deg_lat
        xj, yj = ring[j][0] * m_per_deg_lon, ring[j][1] * m_per_deg_lat
        total += xi * yj - xj * yi

    return abs(total) / 2.0


def envelope(polygons: list[Polygon]) -> Polygon | None:
    """Build the rectangle covering the bounding boxes of several polygons.

    Used to scope a single venue search across disjoint regions.

    Returns:
        Closed CCW rectangle, or None when no polygon has coordinates
    """
    boxes = [bounding_box(p) for p in polygons if p.ring]
    if not boxes:
        return None

    combined = BBox(
        min_lon=min(b.min_lon for b in boxes),
        min_lat=min(b.min_lat for b in boxes),
        max_lon=max(b.max_lon for b in boxes),
        max_lat=max(b.max_lat for b in boxes),
    )
    return combined.to_polygon()


def weighted_centroid(polygons: list[Polygon]) -> Coordinate:
    """Average region centroids weighted by their area.

    Falls back to an unweighted mean when every region has zero area.

    Returns:
        Combined centroid, or (0, 0) for an empty list
    """
    if not polygons:
        return Coordinate(lat=0.0, lon=0.0)

    centroids = [centroid(p) for p in polygons]
    weights = [area(p) for p in polygons]
    total = sum(weights)
    if total <= 0:
        weights = [1.0] * len(polygons)
        total = float(len(polygons))

    lat = sum(c.lat * w for c, w in zip(centroids, weights)) / total
    lon = sum(c.lon * w for c, w in zip(centroids, weights)) / total
    return Coordinate(lat=lat, lon=lon)
