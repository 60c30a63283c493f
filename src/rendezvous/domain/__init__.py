"""Domain models for rendezvous.

This module contains the value types representing polygons, bounding boxes,
travelers, isochrones and venues. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Plain values with no identity or cached state
- Independent of any routing or venue backend

Key classes:
- Polygon: A single-ring GeoJSON polygon
- BBox: An axis-aligned bounding box
- Coordinate: A (lat, lon) position
- Isochrone: A reachability polygon for one traveler
- RouteMatrix: Travel times between travelers and venues
- Venue: A candidate meeting place
"""

from rendezvous.domain.geometry import BBox, Coordinate, Point, Polygon, Ring, Triangle
from rendezvous.domain.travel import (
    Isochrone,
    LatLon,
    MatrixEntry,
    RendezvousOptions,
    RendezvousSuggestion,
    RouteMatrix,
    TransportMode,
    Venue,
)

__all__: list[str] = [
    # Enums
    "TransportMode",
    # Geometry aliases
    "Point",
    "Ring",
    "Triangle",
    # Geometry types
    "BBox",
    "Coordinate",
    "Polygon",
    # Travel types
    "LatLon",
    "Isochrone",
    "MatrixEntry",
    "RouteMatrix",
    "Venue",
    "RendezvousOptions",
    "RendezvousSuggestion",
]
