"""Core geometric types for polygon representation.

This module defines the planar types shared by the intersection engine:
- Point: a (longitude, latitude) pair in decimal degrees
- Ring: an ordered list of points forming a polygon boundary
- BBox: an axis-aligned bounding box used for fast rejection
- Coordinate: a (lat, lon) result of centroid calculations
- Polygon: a GeoJSON-shaped polygon with exactly one outer ring

Degrees are treated as flat Cartesian coordinates. This is an approximation
valid for regional, non-polar extents and not a projection.
"""

import math
from dataclasses import dataclass
from typing import Any, ClassVar

from rendezvous.exceptions import GeoJSONError

Point = tuple[float, float]
Ring = list[Point]
Triangle = tuple[Point, Point, Point]


@dataclass(frozen=True, slots=True)
class BBox:
    """Axis-aligned bounding box in degrees.

    Attributes:
        min_lon: Western edge
        min_lat: Southern edge
        max_lon: Eastern edge
        max_lat: Northern edge
    """

    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float

    def overlaps(self, other: "BBox") -> bool:
        """Check whether two boxes share any point (touching edges count).

        Args:
            other: Box to test against

        Returns:
            True unless the boxes are separated on either axis
        """
        return (
            self.min_lon <= other.max_lon
            and self.max_lon >= other.min_lon
            and self.min_lat <= other.max_lat
            and self.max_lat >= other.min_lat
        )

    def to_polygon(self) -> "Polygon":
        """Build the closed counter-clockwise rectangle covering this box."""
        return Polygon(
            coordinates=[
                [
                    (self.min_lon, self.min_lat),
                    (self.max_lon, self.min_lat),
                    (self.max_lon, self.max_lat),
                    (self.min_lon, self.max_lat),
                    (self.min_lon, self.min_lat),
                ]
            ]
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "minLon": self.min_lon,
            "minLat": self.min_lat,
            "maxLon": self.max_lon,
            "maxLat": self.max_lat,
        }


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A single geographic position.

    Attributes:
        lat: Latitude in degrees
        lon: Longitude in degrees
    """

    lat: float
    lon: float


@dataclass(frozen=True, slots=True)
class Polygon:
    """A polygon with exactly one outer ring and no holes.

    The ring is stored in its external, closed form: the first coordinate
    is repeated at the end.

    Attributes:
        coordinates: A single-element list holding the closed outer ring
    """

    type: ClassVar[str] = "Polygon"

    coordinates: list[Ring]

    @property
    def ring(self) -> Ring:
        """Return the closed outer ring (empty if the polygon has none)."""
        if not self.coordinates:
            return []
        return self.coordinates[0]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a GeoJSON Polygon geometry.

        Returns:
            Dictionary with "type" and "coordinates" fields
        """
        return {
            "type": self.type,
            "coordinates": [[[lon, lat] for lon, lat in ring] for ring in self.coordinates],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from a GeoJSON Polygon geometry.

        Args:
            data: Dictionary with "type": "Polygon" and one coordinate ring

        Returns:
            Polygon instance

        Raises:
            GeoJSONError: If the geometry is not a single-ring Polygon with
                finite numeric coordinates
        """
        if not isinstance(data, dict) or data.get("type") != "Polygon":
            raise GeoJSONError("geometry type must be 'Polygon'")

        rings = data.get("coordinates")
        if not isinstance(rings, list) or len(rings) != 1:
            raise GeoJSONError("polygon must have exactly one ring (holes are unsupported)")

        ring: Ring = []
        for position in rings[0]:
            if not isinstance(position, (list, tuple)) or len(position) < 2:
                raise GeoJSONError(f"position {position!r} is not a [lon, lat] pair")
            try:
                lon, lat = float(position[0]), float(position[1])
            except (TypeError, ValueError) as e:
                raise GeoJSONError(f"position {position!r} is not numeric") from e
            if not (math.isfinite(lon) and math.isfinite(lat)):
                raise GeoJSONError(f"position {position!r} is not finite")
            ring.append((lon, lat))

        return cls(coordinates=[ring])
